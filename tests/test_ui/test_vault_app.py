"""Headless run of the marimo vault app against the sample vault.

No server or browser is involved: ``app.run()`` executes every cell and
returns the defined names.
"""

from __future__ import annotations

import importlib.util
from pathlib import Path

import pytest

pytest.importorskip("marimo")

_ROOT = Path(__file__).parent.parent.parent
_APP = _ROOT / "notebooks" / "vault_app.py"


@pytest.fixture(scope="module")
def defs() -> dict:
    spec = importlib.util.spec_from_file_location("vault_app", _APP)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    _outputs, result = module.app.run()
    return result


class TestVaultApp:
    def test_snapshot_loaded(self, defs):
        assert defs["load_error"] is None
        assert "home" in defs["snap"].index

    def test_default_note_selected(self, defs):
        assert defs["current"] == "home"

    def test_panels_built(self, defs):
        for name in ("sidebar_panel", "note_panel", "graph_panel", "diagnostics_panel"):
            assert defs[name] is not None
