"""Core NoteRecord dataclass."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import Any

from notegraph.slug import normalize


@dataclass(frozen=True)
class NoteRecord:
    """One markdown file in the vault."""

    #: Normalized vault-relative path without extension, unique per vault
    full_path_slug: str
    #: Original file basename without extension
    title: str
    #: Path on disk relative to the vault root, extension included
    relative_file_path: str
    #: Normalized basename, shared by same-named notes in different folders
    simple_slug: str

    @classmethod
    def from_path(cls, relative_file_path: str, extension: str = ".md") -> "NoteRecord":
        """Derive every identifier of a note from its vault-relative path."""
        stem_path = relative_file_path
        if extension and stem_path.endswith(extension):
            stem_path = stem_path[: -len(extension)]
        title = PurePosixPath(stem_path.replace("\\", "/")).name
        return cls(
            full_path_slug=normalize(stem_path),
            title=title,
            relative_file_path=relative_file_path,
            simple_slug=normalize(title),
        )

    @property
    def slug(self) -> str:
        return self.full_path_slug

    def to_dict(self) -> dict[str, Any]:
        return {
            "slug": self.full_path_slug,
            "title": self.title,
            "path": self.relative_file_path,
            "simple_slug": self.simple_slug,
        }
