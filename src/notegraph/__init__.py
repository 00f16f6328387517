"""notegraph: slug index, link graph and folder tree for a markdown vault."""

from notegraph.config import VaultConfig, load_config
from notegraph.diagnostics import Diagnostic, DiagnosticKind, Diagnostics
from notegraph.errors import FileReadError, FilesystemError, NoteGraphError
from notegraph.graph import GraphData, GraphEdge, GraphNode, VaultFileReader, build_graph
from notegraph.index import SlugIndex, build_index
from notegraph.note import NoteRecord
from notegraph.parser import parse_frontmatter, parse_wikilinks
from notegraph.resolver import resolve
from notegraph.scanner import scan
from notegraph.slug import normalize
from notegraph.tree import TreeNode, build_tree
from notegraph.vault import NoteContent, Vault, VaultSnapshot

__all__ = [
    "normalize",
    "scan",
    "NoteRecord",
    "SlugIndex",
    "build_index",
    "resolve",
    "parse_wikilinks",
    "parse_frontmatter",
    "GraphNode",
    "GraphEdge",
    "GraphData",
    "VaultFileReader",
    "build_graph",
    "TreeNode",
    "build_tree",
    "Diagnostic",
    "DiagnosticKind",
    "Diagnostics",
    "NoteGraphError",
    "FilesystemError",
    "FileReadError",
    "VaultConfig",
    "load_config",
    "Vault",
    "VaultSnapshot",
    "NoteContent",
]
