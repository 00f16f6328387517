"""Non-fatal build diagnostics.

Slug collisions, ambiguous or dangling links and unreadable files never
abort a build.  Each one is recorded as a :class:`Diagnostic` and logged at
WARNING level so the UI can show them next to an otherwise complete vault.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator

logger = logging.getLogger(__name__)


class DiagnosticKind(str, Enum):
    SLUG_COLLISION = "slug-collision"
    EMPTY_SLUG = "empty-slug"
    AMBIGUOUS_LINK = "ambiguous-link"
    DANGLING_LINK = "dangling-link"
    UNREADABLE_FILE = "unreadable-file"


@dataclass(frozen=True)
class Diagnostic:
    kind: DiagnosticKind
    message: str
    #: Vault-relative file the problem was found in, when there is one
    path: str | None = None
    slug: str | None = None
    detail: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "message": self.message,
            "path": self.path,
            "slug": self.slug,
            "detail": self.detail,
        }


class Diagnostics:
    """Ordered collector of :class:`Diagnostic` records."""

    def __init__(self) -> None:
        self._items: list[Diagnostic] = []

    def report(
        self,
        kind: DiagnosticKind,
        message: str,
        *,
        path: str | None = None,
        slug: str | None = None,
        **detail: Any,
    ) -> Diagnostic:
        diagnostic = Diagnostic(kind=kind, message=message, path=path, slug=slug, detail=detail)
        self._items.append(diagnostic)
        logger.warning("[%s] %s", kind.value, message)
        return diagnostic

    def of_kind(self, kind: DiagnosticKind) -> list[Diagnostic]:
        return [d for d in self._items if d.kind is kind]

    def extend(self, other: "Diagnostics") -> None:
        self._items.extend(other)

    def to_list(self) -> list[dict[str, Any]]:
        return [d.to_dict() for d in self._items]

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)
