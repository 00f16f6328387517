"""Vault: scan, index, link graph and tree for one folder of notes.

Usage::

    vault = Vault(load_config("notegraph.toml"))
    snap = vault.snapshot()          # VaultSnapshot(index, graph, tree, diagnostics)
    note = vault.note("My Note")     # NoteContent, or None when not found

Every snapshot is a complete, read-only value.  Nothing is shared between
snapshots; in production mode the first one is cached until
:meth:`Vault.invalidate` is called.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from notegraph.config import VaultConfig
from notegraph.diagnostics import Diagnostics
from notegraph.errors import FileReadError
from notegraph.graph import FileReader, GraphData, VaultFileReader, build_graph
from notegraph.index import SlugIndex, build_index
from notegraph.note import NoteRecord
from notegraph.parser import parse_frontmatter
from notegraph.scanner import scan
from notegraph.tree import TreeNode, build_tree

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NoteContent:
    """A note ready for the content renderer."""

    slug: str
    title: str
    path: str
    #: Raw file text, frontmatter included
    markdown: str
    body: str
    frontmatter: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "slug": self.slug,
            "title": self.title,
            "path": self.path,
            "markdown": self.markdown,
            "body": self.body,
            "frontmatter": self.frontmatter,
        }


@dataclass(frozen=True)
class VaultSnapshot:
    index: SlugIndex
    graph: GraphData
    tree: list[TreeNode]
    diagnostics: Diagnostics

    def find(self, requested: str | None) -> NoteRecord | None:
        return self.index.find(requested)

    def to_dict(self) -> dict[str, Any]:
        return {
            **self.graph.to_dict(),
            "tree": [n.to_dict() for n in self.tree],
            "diagnostics": self.diagnostics.to_list(),
        }


class Vault:
    """Builds :class:`VaultSnapshot` values for a vault directory."""

    def __init__(
        self,
        config: VaultConfig | None = None,
        *,
        reader: FileReader | None = None,
    ) -> None:
        self.config = config or VaultConfig()
        self.reader: FileReader = reader or VaultFileReader(self.config.vault_dir)
        self._snapshot: VaultSnapshot | None = None
        self._lock = threading.Lock()

    @classmethod
    def open(cls, vault_dir: Path | str, **options: Any) -> "Vault":
        """Shortcut for ``Vault(VaultConfig(vault_dir=..., **options))``."""
        return cls(VaultConfig(vault_dir=Path(vault_dir), **options))

    @property
    def vault_dir(self) -> Path:
        return self.config.vault_dir

    # ------------------------------------------------------------------
    # Build / cache
    # ------------------------------------------------------------------

    def build(self) -> VaultSnapshot:
        """Scan the vault and build a fresh snapshot, bypassing the cache.

        Raises :class:`~notegraph.errors.FilesystemError` when the vault
        directory cannot be scanned; every other problem ends up in
        ``snapshot.diagnostics``.
        """
        logger.info("Building vault snapshot from %s", self.vault_dir)
        diagnostics = Diagnostics()
        paths = scan(self.vault_dir, ignore=self.config.ignore, extension=self.config.extension)
        index = build_index(paths, diagnostics, extension=self.config.extension)
        graph = build_graph(index, self.reader, diagnostics, max_workers=self.config.max_workers)
        tree = build_tree(index.notes)
        return VaultSnapshot(index=index, graph=graph, tree=tree, diagnostics=diagnostics)

    def snapshot(self) -> VaultSnapshot:
        """Return the current snapshot.

        Development mode builds a new one on every call.  Production mode
        builds once and then returns the cached value.
        """
        if not self.config.cache_snapshots:
            return self.build()
        with self._lock:
            if self._snapshot is None:
                # Published only once fully built.
                self._snapshot = self.build()
            return self._snapshot

    def invalidate(self) -> None:
        """Drop the cached snapshot; the next :meth:`snapshot` rebuilds."""
        with self._lock:
            self._snapshot = None

    # ------------------------------------------------------------------
    # Notes
    # ------------------------------------------------------------------

    def note(self, requested: str | None = None, snapshot: VaultSnapshot | None = None) -> NoteContent | None:
        """Return the note for a caller-supplied identifier, or ``None``.

        *requested* may be a title, a full path or an already normalized
        slug; it falls back to ``config.default_note`` when empty.
        """
        requested = requested or self.config.default_note
        if not requested:
            return None
        snapshot = snapshot or self.snapshot()
        record = snapshot.find(requested)
        if record is None:
            logger.info("No note found for %r", requested)
            return None
        try:
            markdown = self.reader(record)
        except FileReadError as exc:
            logger.error("Could not read note %r: %s", record.full_path_slug, exc.reason)
            return None
        except (OSError, KeyError, UnicodeDecodeError) as exc:
            logger.error("Could not read note %r: %s", record.full_path_slug, exc)
            return None
        frontmatter, body = parse_frontmatter(markdown)
        return NoteContent(
            slug=record.full_path_slug,
            title=record.title,
            path=record.relative_file_path,
            markdown=markdown,
            body=body,
            frontmatter=frontmatter,
        )
