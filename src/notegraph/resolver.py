"""Wiki-link target resolution against a SlugIndex."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from notegraph.diagnostics import DiagnosticKind, Diagnostics
from notegraph.slug import normalize

if TYPE_CHECKING:
    from notegraph.index import SlugIndex

logger = logging.getLogger(__name__)


def _tie_break_key(full_path_slug: str) -> tuple[int, str]:
    # Shallowest path first, then smallest slug.
    return (full_path_slug.count("/"), full_path_slug)


def _report_ambiguity(
    raw_target: str,
    candidate: str,
    ordered: list[str],
    diagnostics: Diagnostics | None,
    source: str | None,
) -> None:
    choice = ordered[0]
    where = f" in {source!r}" if source else ""
    message = f"[[{raw_target}]]{where} matches {', '.join(ordered)}; using {choice!r}"
    if diagnostics is None:
        logger.warning("[%s] %s", DiagnosticKind.AMBIGUOUS_LINK.value, message)
        return
    diagnostics.report(
        DiagnosticKind.AMBIGUOUS_LINK,
        message,
        path=source,
        slug=candidate,
        candidates=ordered,
        chosen=choice,
    )


def resolve(
    raw_target: str,
    index: "SlugIndex",
    diagnostics: Diagnostics | None = None,
    *,
    source: str | None = None,
) -> str | None:
    """Return the full-path slug *raw_target* refers to, or ``None``.

    1. An exact full-path match wins (``[[Folder/Note]]``, or ``[[Note]]``
       for a note at the vault root).
    2. Otherwise the basename index is consulted; a single candidate is
       returned as is.  Several candidates are ordered by path depth then
       slug and the first is returned.

    A folderless target shared by several notes is reported as an
    ``ambiguous-link`` in both cases; the root note an exact match picks is
    always the one the depth ordering would pick too.  There is no fuzzy
    matching.  *source* only labels the diagnostic.
    """
    candidate = normalize(raw_target)
    if not candidate:
        return None

    matches = index.candidates(candidate)
    if candidate in index.by_full_path:
        if len(matches) > 1:
            _report_ambiguity(raw_target, candidate, sorted(matches, key=_tie_break_key), diagnostics, source)
        return candidate

    if not matches:
        logger.debug("No note for %r (slug %r)", raw_target, candidate)
        return None
    if len(matches) == 1:
        return next(iter(matches))

    ordered = sorted(matches, key=_tie_break_key)
    _report_ambiguity(raw_target, candidate, ordered, diagnostics, source)
    return ordered[0]
