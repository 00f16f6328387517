"""Link graph construction: one node per note, one edge per resolved link."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from notegraph.diagnostics import DiagnosticKind, Diagnostics
from notegraph.errors import FileReadError
from notegraph.note import NoteRecord
from notegraph.parser import parse_wikilinks
from notegraph.resolver import resolve

if TYPE_CHECKING:
    import networkx as nx

    from notegraph.index import SlugIndex

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Data model
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class GraphNode:
    id: str
    label: str

    def to_dict(self) -> dict[str, str]:
        return {"id": self.id, "label": self.label}


@dataclass(frozen=True)
class GraphEdge:
    source: str
    target: str

    @property
    def id(self) -> str:
        return f"{self.source}->{self.target}"

    def to_dict(self) -> dict[str, str]:
        return {"id": self.id, "source": self.source, "target": self.target}


@dataclass
class GraphData:
    """Nodes and directed edges handed to the graph view."""

    nodes: list[GraphNode] = field(default_factory=list)
    #: One entry per link occurrence; repeated links give repeated edges
    edges: list[GraphEdge] = field(default_factory=list)

    def backlinks(self, slug: str) -> list[str]:
        """Distinct sources linking to *slug*, in edge order."""
        return list(dict.fromkeys(e.source for e in self.edges if e.target == slug))

    def outlinks(self, slug: str) -> list[str]:
        return list(dict.fromkeys(e.target for e in self.edges if e.source == slug))

    def neighbours(self, slug: str) -> list[str]:
        """Notes linked to or from *slug*."""
        return list(dict.fromkeys(self.outlinks(slug) + self.backlinks(slug)))

    def to_dict(self) -> dict[str, list[dict[str, str]]]:
        return {
            "nodes": [n.to_dict() for n in self.nodes],
            "edges": [e.to_dict() for e in self.edges],
        }


# ---------------------------------------------------------------------------
# File readers
# ---------------------------------------------------------------------------


@runtime_checkable
class FileReader(Protocol):
    """Returns a note's text.

    Readers should raise :class:`FileReadError` on failure.  ``OSError``,
    ``KeyError`` and ``UnicodeDecodeError`` are also treated as an
    unreadable file by :func:`build_graph`.
    """

    def __call__(self, note: NoteRecord) -> str: ...


class VaultFileReader:
    """Reads note content as UTF-8 from a vault directory."""

    def __init__(self, vault_dir: Path | str) -> None:
        self.vault_dir = Path(vault_dir)

    def __call__(self, note: NoteRecord) -> str:
        path = self.vault_dir / note.relative_file_path
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise FileReadError(note.relative_file_path, str(exc)) from exc


# ---------------------------------------------------------------------------
# Builder
# ---------------------------------------------------------------------------


def _extract(note: NoteRecord, reader: FileReader) -> list[str] | FileReadError:
    try:
        return parse_wikilinks(reader(note))
    except FileReadError as exc:
        return exc
    except (OSError, KeyError, UnicodeDecodeError) as exc:
        return FileReadError(note.relative_file_path, f"{type(exc).__name__}: {exc}")


def build_graph(
    index: "SlugIndex",
    reader: FileReader,
    diagnostics: Diagnostics | None = None,
    *,
    max_workers: int | None = None,
) -> GraphData:
    """Build the note graph for *index*.

    Every note becomes a :class:`GraphNode`.  Each ``[[link]]`` occurrence
    that resolves to another note becomes a :class:`GraphEdge`; self-links
    are dropped and unresolved links are reported as ``dangling-link``.  A
    note whose content cannot be read contributes no edges and is reported
    as ``unreadable-file``.

    With *max_workers* > 1 file contents are read in a thread pool.  Link
    resolution and diagnostics always happen on the calling thread, in index
    order, so the result does not depend on read timing.
    """
    diagnostics = diagnostics if diagnostics is not None else Diagnostics()
    notes = list(index.notes)

    if max_workers and max_workers > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            extracted = list(executor.map(lambda n: _extract(n, reader), notes))
    else:
        extracted = [_extract(n, reader) for n in notes]

    graph = GraphData(nodes=[GraphNode(id=n.full_path_slug, label=n.title) for n in notes])
    for note, targets in zip(notes, extracted):
        if isinstance(targets, FileReadError):
            diagnostics.report(
                DiagnosticKind.UNREADABLE_FILE,
                f"Skipping links of {note.relative_file_path!r}: {targets.reason}",
                path=note.relative_file_path,
                slug=note.full_path_slug,
            )
            continue
        for target in targets:
            resolved = resolve(target, index, diagnostics, source=note.relative_file_path)
            if resolved is None:
                diagnostics.report(
                    DiagnosticKind.DANGLING_LINK,
                    f"[[{target}]] in {note.relative_file_path!r} does not match any note",
                    path=note.relative_file_path,
                    slug=note.full_path_slug,
                    target=target,
                )
            elif resolved != note.full_path_slug:
                logger.debug("Edge %s -> %s", note.full_path_slug, resolved)
                graph.edges.append(GraphEdge(source=note.full_path_slug, target=resolved))

    logger.info("Graph built: %d nodes, %d edges", len(graph.nodes), len(graph.edges))
    return graph


def to_networkx(graph: GraphData) -> "nx.MultiDiGraph":
    """Convert *graph* to a :class:`networkx.MultiDiGraph`.

    Node attribute ``label`` carries the title; parallel edges are kept.
    """
    import networkx as nx

    G: nx.MultiDiGraph = nx.MultiDiGraph()
    for node in graph.nodes:
        G.add_node(node.id, label=node.label)
    for edge in graph.edges:
        G.add_edge(edge.source, edge.target, id=edge.id)
    return G


def edge_weights(graph: GraphData) -> dict[tuple[str, str], int]:
    """Count link occurrences per ``(source, target)`` pair."""
    weights: dict[tuple[str, str], int] = {}
    for edge in graph.edges:
        pair = (edge.source, edge.target)
        weights[pair] = weights.get(pair, 0) + 1
    return weights
