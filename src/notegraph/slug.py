"""Filename and path to slug normalization."""

from __future__ import annotations

import re

_EXTENSION_RE = re.compile(r"\.md$")
_WHITESPACE_RE = re.compile(r"\s+")
# Lowercase ASCII letters, digits, Hangul syllables and hyphen survive.
_DISALLOWED_RE = re.compile(r"[^a-z0-9\uac00-\ud7a3-]+")
_HYPHENS_RE = re.compile(r"-+")


def normalize_segment(segment: str) -> str:
    """Normalize a single path segment (no ``/`` handling)."""
    segment = segment.strip().lower()
    segment = _WHITESPACE_RE.sub("-", segment)
    segment = segment.replace("_", "-")
    segment = _DISALLOWED_RE.sub("", segment)
    segment = _HYPHENS_RE.sub("-", segment)
    return segment.strip("-")


def normalize(value: str | None) -> str:
    """Return the canonical slug for a filename, title or vault-relative path.

    ``"Folder Name/Sub Note.md"`` becomes ``"folder-name/sub-note"``.  Empty
    segments are dropped, so ``"a//b"`` becomes ``"a/b"``.  The function is
    idempotent: ``normalize(normalize(x)) == normalize(x)``.
    """
    if not value:
        return ""
    value = _EXTENSION_RE.sub("", value).replace("\\", "/")
    segments = (normalize_segment(part) for part in value.split("/"))
    return "/".join(s for s in segments if s)


def segments(slug: str) -> list[str]:
    """Split an already-normalized slug into its path segments."""
    return [part for part in slug.split("/") if part]
