"""SlugIndex: in-memory two-level lookup over every note in the vault."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

from notegraph.diagnostics import DiagnosticKind, Diagnostics
from notegraph.note import NoteRecord
from notegraph.resolver import resolve

logger = logging.getLogger(__name__)


class SlugIndex:
    """Immutable snapshot mapping slugs to notes.

    ``by_full_path`` holds exactly one record per note.  ``by_simple_name``
    fans a basename slug out to every full-path slug sharing it.  Build one
    with :func:`build_index`; a changed vault means a new index, never an
    in-place update.
    """

    def __init__(self, notes: Iterable[NoteRecord]) -> None:
        by_full_path: dict[str, NoteRecord] = {}
        by_simple_name: dict[str, set[str]] = {}
        for note in notes:
            if note.full_path_slug in by_full_path:
                raise ValueError(f"Duplicate full-path slug: {note.full_path_slug!r}")
            by_full_path[note.full_path_slug] = note
            by_simple_name.setdefault(note.simple_slug, set()).add(note.full_path_slug)

        self.notes: tuple[NoteRecord, ...] = tuple(by_full_path.values())
        self.by_full_path: Mapping[str, NoteRecord] = MappingProxyType(by_full_path)
        self.by_simple_name: Mapping[str, frozenset[str]] = MappingProxyType(
            {name: frozenset(slugs) for name, slugs in by_simple_name.items()}
        )

    # ------------------------------------------------------------------
    # Query helpers
    # ------------------------------------------------------------------

    def get(self, full_path_slug: str) -> NoteRecord | None:
        return self.by_full_path.get(full_path_slug)

    def candidates(self, simple_slug: str) -> frozenset[str]:
        """Full-path slugs of every note whose basename slug is *simple_slug*."""
        return self.by_simple_name.get(simple_slug, frozenset())

    def find(self, requested: str | None, diagnostics: Diagnostics | None = None) -> NoteRecord | None:
        """Look up a note by arbitrary caller text (URL parameter, link target).

        The text is normalized first, then resolved like a wiki-link.
        Returns ``None`` when nothing matches.
        """
        slug = resolve(requested or "", self, diagnostics)
        return self.by_full_path[slug] if slug is not None else None

    def __len__(self) -> int:
        return len(self.by_full_path)

    def __contains__(self, full_path_slug: object) -> bool:
        return full_path_slug in self.by_full_path

    def __iter__(self) -> Iterator[NoteRecord]:
        return iter(self.notes)


def build_index(
    paths: Iterable[str],
    diagnostics: Diagnostics | None = None,
    *,
    extension: str = ".md",
) -> SlugIndex:
    """Build a :class:`SlugIndex` from vault-relative note paths.

    Paths are processed in the order given.  When two paths normalize to
    the same full-path slug the first one is kept and the later one is
    reported as a ``slug-collision``; a path whose slug or basename slug
    is empty is reported as ``empty-slug`` and left out.
    """
    diagnostics = diagnostics if diagnostics is not None else Diagnostics()
    accepted: dict[str, NoteRecord] = {}
    for path in paths:
        note = NoteRecord.from_path(path, extension)
        if not note.full_path_slug or not note.simple_slug:
            # A blank basename would otherwise take over its folder's slug.
            diagnostics.report(
                DiagnosticKind.EMPTY_SLUG,
                f"{path!r} has no usable characters for a slug; skipped",
                path=path,
            )
            continue
        kept = accepted.get(note.full_path_slug)
        if kept is not None:
            diagnostics.report(
                DiagnosticKind.SLUG_COLLISION,
                f"{path!r} and {kept.relative_file_path!r} both map to slug "
                f"{note.full_path_slug!r}; keeping {kept.relative_file_path!r}",
                path=path,
                slug=note.full_path_slug,
                kept=kept.relative_file_path,
                dropped=path,
            )
            continue
        accepted[note.full_path_slug] = note

    index = SlugIndex(accepted.values())
    logger.info("Indexed %d notes (%d simple names)", len(index), len(index.by_simple_name))
    return index
