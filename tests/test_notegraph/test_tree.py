"""Unit tests for notegraph.tree."""

from notegraph.graph import build_graph
from notegraph.index import build_index
from notegraph.note import NoteRecord
from notegraph.tree import TreeNode, build_tree, walk


def _notes(*paths: str) -> list[NoteRecord]:
    return [NoteRecord.from_path(p) for p in paths]


def _shape(forest: list[TreeNode]) -> list:
    return [(n.id, n.type, _shape(n.children) if n.children is not None else None) for n in forest]


class TestBuildTree:
    def test_nested_folders(self):
        forest = build_tree(_notes("Folder Name/Sub/Deep Note.md"))
        (root,) = forest
        assert root.to_dict() == {
            "id": "folder-name",
            "name": "folder name",
            "type": "folder",
            "depth": 0,
            "children": [
                {
                    "id": "folder-name/sub",
                    "name": "sub",
                    "type": "folder",
                    "depth": 1,
                    "children": [
                        {"id": "folder-name/sub/deep-note", "name": "Deep Note", "type": "file", "depth": 2},
                    ],
                },
            ],
        }

    def test_children_unique(self):
        forest = build_tree(_notes("F/a.md", "F/b.md", "F/c.md"))
        (folder,) = forest
        assert [c.id for c in folder.children] == ["f/a", "f/b", "f/c"]

    def test_folders_before_files_then_name(self):
        forest = build_tree(_notes("zeta.md", "Beta/x.md", "alpha.md", "Gamma.md", "Alpha Folder/y.md"))
        assert [n.id for n in forest] == ["alpha-folder", "beta", "alpha", "gamma", "zeta"]

    def test_children_sorted_recursively(self):
        forest = build_tree(_notes("F/b.md", "F/Sub/z.md", "F/A.md"))
        assert _shape(forest) == [
            ("f", "folder", [("f/sub", "folder", [("f/sub/z", "file", None)]), ("f/a", "file", None), ("f/b", "file", None)]),
        ]

    def test_empty(self):
        assert build_tree([]) == []


class TestPromotion:
    def test_note_before_deeper_note(self):
        forest = build_tree(_notes("Arts.md", "Arts/Literature.md"))
        assert _shape(forest) == [("arts", "folder", [("arts/literature", "file", None)])]
        assert forest[0].name == "Arts"

    def test_deeper_note_first(self):
        forest = build_tree(_notes("Arts/Literature.md", "Arts.md"))
        assert _shape(forest) == [("arts", "folder", [("arts/literature", "file", None)])]
        assert forest[0].name == "Arts"


class TestTreeMatchesGraph:
    def test_round_trip(self):
        files = {
            "Arts.md": "",
            "Arts/Literature.md": "[[Arts]]",
            "Arts/Music.md": "",
            "Projects/Notegraph/Notegraph.md": "",
            "Home.md": "",
        }
        index = build_index(list(files))
        graph = build_graph(index, lambda n: files[n.relative_file_path])
        forest = build_tree(index.notes)

        tree_ids = [n.id for n in walk(forest)]
        node_ids = {n.id for n in graph.nodes}
        for slug in node_ids:
            assert tree_ids.count(slug) == 1
        for node in walk(forest):
            if node.type == "file":
                assert node.id in node_ids

    def test_depth_matches_id(self):
        forest = build_tree(_notes("a/b/c/d.md", "a/e.md"))
        for node in walk(forest):
            assert node.depth == node.id.count("/")
