"""Unit tests for notegraph.slug."""

import pytest

from notegraph.slug import normalize, normalize_segment, segments

# ---------------------------------------------------------------------------
# normalize()
# ---------------------------------------------------------------------------


class TestNormalize:
    def test_extension_case_and_spaces_collapse(self):
        assert normalize("My Note.md") == normalize("my-note") == "my-note"

    def test_folder_path(self):
        assert normalize("Folder Name/Sub Note") == "folder-name/sub-note"

    def test_backslash_separator(self):
        assert normalize("Folder Name\\Sub Note.md") == "folder-name/sub-note"

    def test_empty_segments_dropped(self):
        assert normalize("a//b") == "a/b"
        assert normalize("/a/b/") == "a/b"

    def test_underscores_become_hyphens(self):
        assert normalize("snake_case_note") == "snake-case-note"

    def test_punctuation_removed(self):
        assert normalize("What's new? (2024)") == "whats-new-2024"

    def test_repeated_hyphens_collapsed_and_trimmed(self):
        assert normalize("--a -- b--") == "a-b"

    def test_hangul_preserved(self):
        assert normalize("컴퓨터과학/CS 노트.md") == "컴퓨터과학/cs-노트"

    def test_other_scripts_removed(self):
        assert normalize("café") == "caf"
        assert normalize("日本語") == ""

    def test_only_trailing_extension_stripped(self):
        assert normalize("notes.md.backup") == "notesmdbackup"
        assert normalize("a.md/b.md") == "amd/b"

    @pytest.mark.parametrize("value", [None, "", "   ", "///", "!!!"])
    def test_empty_results(self, value):
        assert normalize(value) == ""

    @pytest.mark.parametrize(
        "value",
        [
            "My Note.md",
            "Folder Name\\Sub_Note.md",
            "  --Weird__ Name--  ",
            "a//b///c",
            "x.md.md",
            "컴퓨터 과학/CS",
            "ÀÉÎ õ ü",
            "İstanbul",
            "tab\tand\nnewline",
            "..md",
        ],
    )
    def test_idempotent(self, value):
        once = normalize(value)
        assert normalize(once) == once


# ---------------------------------------------------------------------------
# helpers
# ---------------------------------------------------------------------------


class TestHelpers:
    def test_normalize_segment(self):
        assert normalize_segment(" Sub Note ") == "sub-note"

    def test_segments(self):
        assert segments("arts/literature") == ["arts", "literature"]
        assert segments("") == []
