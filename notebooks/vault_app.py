import marimo

__generated_with = "0.13.10"
app = marimo.App(width="full", app_title="notegraph")


# ---------------------------------------------------------------------------
# Bootstrap: config, vault snapshot
# ---------------------------------------------------------------------------


@app.cell
def _():
    import marimo as mo

    return (mo,)


@app.cell
def setup():
    import sys
    from pathlib import Path

    ROOT = Path(__file__).parent.parent
    SRC = ROOT / "src"
    if str(SRC) not in sys.path:
        sys.path.insert(0, str(SRC))

    from dataclasses import replace

    from notegraph.config import load_config
    from notegraph.errors import FilesystemError
    from notegraph.vault import Vault

    config_path = ROOT / "notegraph.toml"
    config = load_config(config_path if config_path.exists() else None)
    if not config.vault_dir.is_absolute():
        config = replace(config, vault_dir=ROOT / config.vault_dir)

    vault = Vault(config)
    try:
        snap = vault.snapshot()
        load_error = None
    except FilesystemError as exc:
        snap = None
        load_error = str(exc)
    return load_error, snap, vault


# ---------------------------------------------------------------------------
# Reactive state
# ---------------------------------------------------------------------------


@app.cell
def state(mo, vault):
    selected = mo.state(vault.config.default_note or "")
    return (selected,)


# ---------------------------------------------------------------------------
# Sidebar tree
# ---------------------------------------------------------------------------


@app.cell
def sidebar(mo, snap, selected):
    set_selected = selected[1]

    def _item(node):
        indent = " " * (node.depth * 4)
        icon = "📁" if node.type == "folder" else "📄"
        button = mo.ui.button(
            label=f"{indent}{icon} {node.name}",
            on_click=lambda _, s=node.id: set_selected(s),
            kind="ghost",
            full_width=True,
            # Folders that are also notes stay clickable.
            disabled=node.id not in snap.index,
        )
        rows = [button]
        for child in node.children or []:
            rows.extend(_item(child))
        return rows

    items = [row for node in (snap.tree if snap else []) for row in _item(node)]
    sidebar_panel = mo.vstack([mo.md("## Notes"), mo.md("---"), *items], gap="2px")
    return (sidebar_panel,)


# ---------------------------------------------------------------------------
# Note view
# ---------------------------------------------------------------------------


@app.cell
def note_view(mo, snap, vault, selected, load_error):
    from notegraph.parser import replace_wikilinks

    if snap is None:
        note_panel = mo.callout(mo.md(f"Vault could not be loaded: `{load_error}`"), kind="danger")
        current = None
    else:
        note = vault.note(selected[0](), snapshot=snap)
        current = note.slug if note else None
        if note is None:
            note_panel = mo.md("_Select a note from the sidebar._")
        else:
            body = replace_wikilinks(note.body, lambda link: f"**{link.alias or link.target}**")
            backlinks = snap.graph.backlinks(note.slug)
            bl_md = "\n".join(f"- {snap.index.get(s).title} (`{s}`)" for s in backlinks)
            note_panel = mo.vstack(
                [
                    mo.md(f"# {note.title}"),
                    mo.md("---"),
                    mo.md(body),
                    mo.md("---\n### Backlinks\n" + bl_md) if backlinks else mo.md("_No backlinks._"),
                ]
            )
    return current, note_panel


# ---------------------------------------------------------------------------
# Graph and diagnostics
# ---------------------------------------------------------------------------


@app.cell
def graph_view(mo, snap, current):
    from notegraph.chart import build_graph_chart

    if snap is None:
        graph_panel = mo.md("")
        diagnostics_panel = mo.md("")
    else:
        graph_panel = mo.ui.altair_chart(build_graph_chart(snap.graph, current=current, width=900, height=560))
        diagnostics_panel = (
            mo.ui.table([d.to_dict() for d in snap.diagnostics], selection=None)
            if snap.diagnostics
            else mo.callout(mo.md("No diagnostics."), kind="success")
        )
    return diagnostics_panel, graph_panel


# ---------------------------------------------------------------------------
# Main layout
# ---------------------------------------------------------------------------


@app.cell
def main_layout(mo, sidebar_panel, note_panel, graph_panel, diagnostics_panel):
    tabs = mo.ui.tabs({"Note": note_panel, "Graph": graph_panel, "Diagnostics": diagnostics_panel})
    layout = mo.hstack(
        [
            mo.vstack([sidebar_panel], style={"width": "260px", "min-width": "200px", "padding": "8px"}),
            mo.vstack([tabs], style={"flex": "1", "padding": "8px"}),
        ],
        align="start",
        gap="0",
    )
    layout  # noqa: B018
    return


if __name__ == "__main__":
    app.run()
