"""Exceptions raised by notegraph.

Only :class:`FilesystemError` is meant to reach callers of a full build;
everything else recoverable is reported as a
:class:`~notegraph.diagnostics.Diagnostic` instead.
"""

from __future__ import annotations

from pathlib import Path


class NoteGraphError(Exception):
    """Base class for every notegraph error."""


class FilesystemError(NoteGraphError):
    """The vault root is missing, not a directory, or cannot be listed."""

    def __init__(self, root: Path | str, reason: str) -> None:
        self.root = Path(root)
        self.reason = reason
        super().__init__(f"Cannot scan vault at {self.root}: {reason}")


class FileReadError(NoteGraphError):
    """A single note's content could not be read."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read {path}: {reason}")
