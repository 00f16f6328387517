"""Unit tests for notegraph.resolver."""

import pytest

from notegraph.diagnostics import DiagnosticKind, Diagnostics
from notegraph.index import SlugIndex, build_index
from notegraph.resolver import resolve

PATHS = ["A.md", "Folder/A.md", "Other/Deep/A.md", "Solo/Unique Note.md"]


@pytest.fixture()
def index() -> SlugIndex:
    return build_index(PATHS)


class TestResolve:
    def test_full_path_match(self, index: SlugIndex):
        assert resolve("Folder/A", index) == "folder/a"

    def test_full_path_match_with_extension(self, index: SlugIndex):
        assert resolve("Folder/A.md", index) == "folder/a"

    def test_unique_simple_name(self, index: SlugIndex):
        assert resolve("unique note", index) == "solo/unique-note"

    def test_not_found(self, index: SlugIndex):
        assert resolve("NoExist", index) is None

    def test_empty_target(self, index: SlugIndex):
        assert resolve("", index) is None
        assert resolve("???", index) is None

    def test_no_partial_matching(self, index: SlugIndex):
        assert resolve("Unique", index) is None
        assert resolve("Deep/A", index) is None


class TestAmbiguity:
    def test_shallowest_candidate_wins(self):
        index = build_index(["Zeta/Note.md", "Note.md", "Alpha/Note.md"])
        assert resolve("Note", index) == "note"

    def test_same_depth_smallest_slug_wins(self):
        index = build_index(["Zeta/Note.md", "Alpha/Note.md"])
        assert resolve("Note", index) == "alpha/note"

    def test_independent_of_scan_order(self):
        forward = build_index(PATHS[:3])
        backward = build_index(list(reversed(PATHS[:3])))
        assert resolve("A", forward) == resolve("A", backward)

    def test_diagnostic_reported(self):
        diagnostics = Diagnostics()
        two = build_index(["X/Dup.md", "Y/Dup.md"])
        assert resolve("Dup", two, diagnostics, source="Home.md") == "x/dup"

        (diag,) = diagnostics.of_kind(DiagnosticKind.AMBIGUOUS_LINK)
        assert diag.path == "Home.md"
        assert diag.detail == {"candidates": ["x/dup", "y/dup"], "chosen": "x/dup"}

    def test_root_note_sharing_basename_is_reported(self, index: SlugIndex):
        diagnostics = Diagnostics()
        assert resolve("A", index, diagnostics) == "a"
        (diag,) = diagnostics
        assert diag.detail == {"candidates": ["a", "folder/a", "other/deep/a"], "chosen": "a"}

    def test_folder_qualified_link_is_not_ambiguous(self, index: SlugIndex):
        diagnostics = Diagnostics()
        assert resolve("Folder/A", index, diagnostics) == "folder/a"
        assert not diagnostics

    def test_without_collector_still_logs(self, caplog):
        index = build_index(["X/Dup.md", "Y/Dup.md"])
        resolve("Dup", index)
        assert "ambiguous-link" in caplog.text
