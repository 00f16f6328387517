"""Vault scanner: find every markdown note under a root directory."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from notegraph.errors import FilesystemError

logger = logging.getLogger(__name__)

DEFAULT_EXTENSION = ".md"
DEFAULT_IGNORE = ("node_modules",)


def _is_ignored(parts: tuple[str, ...], ignore: frozenset[str]) -> bool:
    # Dotfiles and dot-directories anywhere in the relative path are skipped.
    return any(part.startswith(".") or part in ignore for part in parts)


def scan(
    root: Path | str,
    *,
    ignore: Iterable[str] = DEFAULT_IGNORE,
    extension: str = DEFAULT_EXTENSION,
) -> list[str]:
    """Return vault-relative POSIX paths of every note under *root*.

    Paths keep their extension (``"Folder/My Note.md"``).  The result is
    sorted for readability only; callers must not rely on the order.

    Raises
    ------
    FilesystemError
        When *root* does not exist, is not a directory or cannot be listed.
    """
    root = Path(root)
    if not root.exists():
        raise FilesystemError(root, "directory does not exist")
    if not root.is_dir():
        raise FilesystemError(root, "not a directory")
    try:
        next(root.iterdir(), None)
    except OSError as exc:
        raise FilesystemError(root, str(exc)) from exc

    skip = frozenset(ignore)
    paths: list[str] = []
    for path in root.glob(f"**/*{extension}"):
        rel = path.relative_to(root)
        if _is_ignored(rel.parts, skip) or not path.is_file():
            continue
        paths.append(rel.as_posix())
    paths.sort()
    logger.debug("Scanned %s: %d notes", root, len(paths))
    return paths
