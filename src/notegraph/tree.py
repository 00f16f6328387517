"""Folder/file tree for the sidebar, derived from note slugs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Literal, Protocol

from notegraph.slug import segments

NodeType = Literal["folder", "file"]


class TreeEntry(Protocol):
    full_path_slug: str
    title: str


@dataclass
class TreeNode:
    #: Cumulative slug of this path segment (``"arts/literature"``)
    id: str
    name: str
    type: NodeType
    depth: int
    children: list["TreeNode"] | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"id": self.id, "name": self.name, "type": self.type, "depth": self.depth}
        if self.children is not None:
            data["children"] = [c.to_dict() for c in self.children]
        return data


def _sort_key(node: TreeNode) -> tuple[int, str, str]:
    return (0 if node.type == "folder" else 1, node.name.casefold(), node.id)


def _sort(nodes: list[TreeNode]) -> None:
    nodes.sort(key=_sort_key)
    for node in nodes:
        if node.children:
            _sort(node.children)


def build_tree(notes: Iterable[TreeEntry]) -> list[TreeNode]:
    """Turn flat note slugs into a sorted forest of :class:`TreeNode`.

    The work is done in two passes.  The first collects every note slug and
    every proper prefix of one; a prefix some note passes through is a
    folder, even when a note of the same slug exists (``Arts.md`` next to
    ``Arts/Literature.md``).  The second pass materializes one node per
    prefix, so node types never depend on note order.

    Names come from the title of the note whose slug equals the prefix,
    falling back to the segment with hyphens turned into spaces.  Siblings
    are ordered folders first, then by case-folded name.
    """
    titles: dict[str, str] = {}
    folders: set[str] = set()
    for note in notes:
        parts = segments(note.full_path_slug)
        if not parts:
            continue
        titles.setdefault("/".join(parts), note.title)
        for i in range(1, len(parts)):
            folders.add("/".join(parts[:i]))

    roots: list[TreeNode] = []
    nodes: dict[str, TreeNode] = {}
    for slug in titles:
        parts = segments(slug)
        for depth, part in enumerate(parts):
            prefix = "/".join(parts[: depth + 1])
            if prefix in nodes:
                continue
            is_folder = prefix in folders
            node = TreeNode(
                id=prefix,
                name=titles.get(prefix, part.replace("-", " ")),
                type="folder" if is_folder else "file",
                depth=depth,
                children=[] if is_folder else None,
            )
            nodes[prefix] = node
            if depth == 0:
                roots.append(node)
            else:
                parent = nodes["/".join(parts[:depth])]
                parent.children.append(node)  # type: ignore[union-attr]

    _sort(roots)
    return roots


def walk(forest: Iterable[TreeNode]) -> Iterator[TreeNode]:
    """Yield every node of *forest*, depth first, parents before children."""
    for node in forest:
        yield node
        if node.children:
            yield from walk(node.children)
