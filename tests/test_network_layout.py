"""Tests for the radial gene network layout."""

import math

import plotly.graph_objects as go
import pytest

from genome_assistant.models.analysis_models import TargetGene
from genome_assistant.tools.viz.network_layout import (
    build_network_figure,
    compute_network_layout,
    edge_width,
    relationship_color,
)


def _genes(count):
    return [
        TargetGene(id=f"gene-{i}", name=f"G{i}", relationship="activation", strength=0.5, description="")
        for i in range(count)
    ]


class TestComputeNetworkLayout:
    """Test cases for node placement."""

    def test_first_gene_is_above_center(self):
        layout = compute_network_layout(_genes(4))

        first = layout.genes[0]
        assert first.x == pytest.approx(200.0)
        assert first.y == pytest.approx(50.0)

    def test_four_genes_form_a_cross(self):
        layout = compute_network_layout(_genes(4))

        positions = [(round(n.x, 6), round(n.y, 6)) for n in layout.genes]
        assert positions == [(200.0, 50.0), (300.0, 150.0), (200.0, 250.0), (100.0, 150.0)]

    def test_nodes_lie_on_circle(self):
        layout = compute_network_layout(_genes(7), center=(10.0, 20.0), radius=42.0)

        for node in layout.genes:
            assert math.hypot(node.x - 10.0, node.y - 20.0) == pytest.approx(42.0)

    def test_center_node(self):
        layout = compute_network_layout(_genes(2))

        assert layout.center.id == "DNA_SEQUENCE"
        assert (layout.center.x, layout.center.y) == (200.0, 150.0)

    def test_no_genes(self):
        assert compute_network_layout([]).genes == []

    def test_gene_attributes_are_carried(self):
        gene = TargetGene(id="gene-0", name="MYC", relationship="repression", strength=0.2, description="d")
        node = compute_network_layout([gene]).genes[0]

        assert (node.id, node.label, node.relationship, node.strength) == ("gene-0", "MYC", "repression", 0.2)


class TestStyling:
    """Test cases for edge styling helpers."""

    def test_relationship_color(self):
        assert relationship_color("repression") == "#ef4444"
        assert relationship_color("activation") == "#22c55e"

    def test_edge_width(self):
        assert edge_width(0.0) == 1
        assert edge_width(1.0) == 4


class TestNetworkFigure:
    """Test cases for the plotly figure."""

    def test_trace_count(self):
        figure = build_network_figure(compute_network_layout(_genes(5)))

        assert isinstance(figure, go.Figure)
        assert len(figure.data) == 5 + 2

    def test_y_axis_is_flipped(self):
        figure = build_network_figure(compute_network_layout(_genes(3)))

        assert tuple(figure.layout.yaxis.range) == (300, 0)
