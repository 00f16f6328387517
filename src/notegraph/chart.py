"""Altair force-directed view of a :class:`~notegraph.graph.GraphData`.

Uses :mod:`networkx` for the spring layout and :mod:`polars` frames as chart
data.  The chart can be shown directly in a marimo cell.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from notegraph.graph import GraphData, edge_weights, to_networkx

if TYPE_CHECKING:
    import altair as alt

# current note, its neighbours, everything else
_ROLE_COLOURS = {"current": "#7C3AED", "near": "#F59E0B", "other": "#4B90D9"}


def layout(graph: GraphData, *, seed: int = 42) -> dict[str, tuple[float, float]]:
    """Spring-layout positions keyed by node id, reproducible for *seed*."""
    import networkx as nx

    G = to_networkx(graph)
    if not G:
        return {}
    pos = nx.spring_layout(nx.Graph(G), seed=seed, k=2.0)
    return {slug: (float(x), float(y)) for slug, (x, y) in pos.items()}


def build_graph_chart(
    graph: GraphData,
    *,
    current: str | None = None,
    width: int = 640,
    height: int = 480,
    seed: int = 42,
) -> "alt.LayerChart":
    """Return an Altair chart of the note graph.

    Parameters
    ----------
    graph:
        Output of :func:`notegraph.graph.build_graph`.
    current:
        Id of the note being viewed; it and its neighbours are emphasised.
    width / height:
        Canvas dimensions in pixels.
    seed:
        Random seed for ``networkx.spring_layout``.
    """
    import altair as alt
    import polars as pl

    pos = layout(graph, seed=seed)
    weights = edge_weights(graph)
    near = set(graph.neighbours(current)) if current else set()

    degree: dict[str, int] = {}
    for (src, tgt), count in weights.items():
        degree[src] = degree.get(src, 0) + count
        degree[tgt] = degree.get(tgt, 0) + count

    nodes_df = pl.DataFrame(
        [
            {
                "id": node.id,
                "label": node.label,
                "x": pos[node.id][0],
                "y": pos[node.id][1],
                "degree": degree.get(node.id, 0),
                "current": node.id == current,
                "role": "current" if node.id == current else ("near" if node.id in near else "other"),
            }
            for node in graph.nodes
        ]
        or [{"id": "", "label": "", "x": 0.0, "y": 0.0, "degree": 0, "current": False, "role": "other"}]
    )

    edge_rows: list[dict[str, Any]] = [
        {
            "x": pos[src][0],
            "y": pos[src][1],
            "x2": pos[tgt][0],
            "y2": pos[tgt][1],
            "source": src,
            "target": tgt,
            "weight": count,
        }
        for (src, tgt), count in weights.items()
        if src in pos and tgt in pos
    ]

    if edge_rows:
        edge_layer = (
            alt.Chart(pl.DataFrame(edge_rows))
            .mark_rule(color="#888", opacity=0.55)
            .encode(
                x=alt.X("x:Q", axis=None),
                y=alt.Y("y:Q", axis=None),
                x2="x2:Q",
                y2="y2:Q",
                strokeWidth=alt.StrokeWidth("weight:Q", scale=alt.Scale(range=[1, 4]), legend=None),
                tooltip=[
                    alt.Tooltip("source:N", title="from"),
                    alt.Tooltip("target:N", title="to"),
                    alt.Tooltip("weight:Q", title="links"),
                ],
            )
        )
    else:
        edge_layer = alt.Chart(
            pl.DataFrame({"x": [0.0], "y": [0.0], "x2": [0.0], "y2": [0.0]})
        ).mark_rule(opacity=0)

    node_layer = (
        alt.Chart(nodes_df)
        .mark_circle(opacity=0.9)
        .encode(
            x=alt.X("x:Q", axis=None),
            y=alt.Y("y:Q", axis=None),
            size=alt.Size("degree:Q", scale=alt.Scale(range=[80, 400]), legend=None),
            color=alt.Color(
                "role:N",
                scale=alt.Scale(domain=list(_ROLE_COLOURS), range=list(_ROLE_COLOURS.values())),
                legend=None,
            ),
            tooltip=[alt.Tooltip("label:N", title="note"), alt.Tooltip("id:N", title="slug")],
        )
    )

    label_layer = (
        alt.Chart(nodes_df)
        .mark_text(dy=-12, fontSize=11)
        .encode(
            x=alt.X("x:Q", axis=None),
            y=alt.Y("y:Q", axis=None),
            text="label:N",
            opacity=alt.condition(alt.datum["current"], alt.value(1.0), alt.value(0.65)),
        )
    )

    return (
        (edge_layer + node_layer + label_layer)
        .properties(width=width, height=height)
        .configure_view(strokeWidth=0)
    )
