"""Shared fixtures for notegraph tests."""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Callable

import pytest

WriteNote = Callable[[str, str], Path]


@pytest.fixture()
def write_note(tmp_path: Path) -> WriteNote:
    """Return a helper writing ``relative_path`` (created with parents) under ``tmp_path``."""

    def _write(relative_path: str, content: str = "") -> Path:
        path = tmp_path / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(content), encoding="utf-8")
        return path

    return _write
