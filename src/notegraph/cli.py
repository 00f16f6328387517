"""Command line: dump the graph, tree, a note or the diagnostics as JSON."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any, Sequence

from notegraph.config import load_config
from notegraph.errors import FilesystemError
from notegraph.vault import Vault


def _dump(data: Any) -> None:
    json.dump(data, sys.stdout, ensure_ascii=False, indent=2)
    sys.stdout.write("\n")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="notegraph",
        description="Build the link graph and folder tree of a markdown vault",
    )
    parser.add_argument("-c", "--config", type=Path, default=None, help="TOML config file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log per-link resolution")
    sub = parser.add_subparsers(dest="cmd")

    for name, help_text in (
        ("graph", "Print nodes and edges"),
        ("tree", "Print the folder/file tree"),
        ("check", "Print diagnostics; exit 1 when there are any"),
    ):
        p = sub.add_parser(name, help=help_text)
        p.add_argument("vault", type=Path, nargs="?", default=None, help="Vault root (overrides config)")

    p_show = sub.add_parser("show", help="Print the note an identifier resolves to")
    p_show.add_argument("vault", type=Path, nargs="?", default=None, help="Vault root (overrides config)")
    p_show.add_argument("id", help="Title, path or slug of the note")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.cmd is None:
        parser.print_help()
        return 0

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    config = load_config(args.config)
    if args.vault is not None:
        config = replace(config, vault_dir=args.vault)
    vault = Vault(config)

    try:
        snap = vault.build()
    except FilesystemError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if args.cmd == "graph":
        _dump(snap.graph.to_dict())
    elif args.cmd == "tree":
        _dump([n.to_dict() for n in snap.tree])
    elif args.cmd == "check":
        _dump(snap.diagnostics.to_list())
        return 1 if snap.diagnostics else 0
    elif args.cmd == "show":
        note = vault.note(args.id, snapshot=snap)
        if note is None:
            print(f"error: no note matches {args.id!r}", file=sys.stderr)
            return 1
        _dump(note.to_dict())
    return 0
