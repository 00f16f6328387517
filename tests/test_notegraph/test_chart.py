"""Unit-level tests for the graph chart (no browser required).

These tests verify that :func:`notegraph.chart.build_graph_chart` produces a
structurally valid Altair chart.
"""

from __future__ import annotations

import json

import pytest

from notegraph.graph import GraphData, GraphEdge, GraphNode


@pytest.fixture()
def small_graph() -> GraphData:
    return GraphData(
        nodes=[GraphNode("a", "Note A"), GraphNode("b", "Note B"), GraphNode("c", "Note C")],
        edges=[GraphEdge("a", "b"), GraphEdge("a", "b"), GraphEdge("b", "a")],
    )


class TestBuildGraphChart:
    def test_returns_altair_chart(self, small_graph):
        import altair as alt

        from notegraph.chart import build_graph_chart

        assert isinstance(build_graph_chart(small_graph), alt.LayerChart)

    def test_chart_json_contains_labels(self, small_graph):
        from notegraph.chart import build_graph_chart

        spec_str = json.dumps(json.loads(build_graph_chart(small_graph).to_json()))
        assert "Note A" in spec_str
        assert "Note C" in spec_str

    def test_current_note_reflected_in_data(self, small_graph):
        from notegraph.chart import build_graph_chart

        spec_str = build_graph_chart(small_graph, current="a").to_json()
        assert '"role": "current"' in spec_str
        assert '"role": "near"' in spec_str

    def test_empty_graph_does_not_raise(self):
        from notegraph.chart import build_graph_chart

        build_graph_chart(GraphData())

    def test_custom_dimensions(self, small_graph):
        from notegraph.chart import build_graph_chart

        spec = json.loads(build_graph_chart(small_graph, width=800, height=400).to_json())
        assert spec["width"] == 800
        assert spec["height"] == 400


class TestLayout:
    def test_reproducible(self, small_graph):
        from notegraph.chart import layout

        assert layout(small_graph, seed=1) == layout(small_graph, seed=1)
        assert set(layout(small_graph)) == {"a", "b", "c"}

    def test_empty(self):
        from notegraph.chart import layout

        assert layout(GraphData()) == {}
