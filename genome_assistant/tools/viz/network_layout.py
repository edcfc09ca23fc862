import logging
import math

import plotly.graph_objects as go

from ...constants.constants import *
from ...models.analysis_models import TargetGene
from ...models.network_models import NetworkLayout, NetworkNode

logger = logging.getLogger(__name__)


def compute_network_layout(
    genes: list[TargetGene],
    center: tuple[float, float] = (NETWORK_CENTER_X, NETWORK_CENTER_Y),
    radius: float = NETWORK_RADIUS,
) -> NetworkLayout:
    """Place the sequence at ``center`` and the genes evenly on a circle.

    Gene ``i`` of ``n`` sits at angle ``2*pi*i/n - pi/2``, so the first gene
    is directly above the centre (screen coordinates, y grows downward).
    """
    center_x, center_y = center
    center_node = NetworkNode(
        id=SEQUENCE_NODE_ID, label=SEQUENCE_NODE_LABEL, x=center_x, y=center_y
    )

    count = len(genes)
    nodes = []
    for index, gene in enumerate(genes):
        angle = (index * 2 * math.pi) / count - math.pi / 2
        nodes.append(
            NetworkNode(
                id=gene.id,
                label=gene.name,
                x=center_x + radius * math.cos(angle),
                y=center_y + radius * math.sin(angle),
                relationship=gene.relationship,
                strength=gene.strength,
                description=gene.description,
            )
        )

    return NetworkLayout(center=center_node, genes=nodes, radius=radius)


def relationship_color(relationship: str) -> str:
    return REPRESSION_COLOR if relationship == REPRESSION_RELATIONSHIP else ACTIVATION_COLOR


def edge_width(strength: float) -> float:
    return strength * 3 + 1


def build_network_figure(layout: NetworkLayout, title: str = "Gene Regulatory Network") -> go.Figure:
    fig = go.Figure()
    center = layout.center

    for node in layout.genes:
        fig.add_trace(
            go.Scatter(
                x=[center.x, node.x],
                y=[center.y, node.y],
                mode="lines",
                line=dict(color=relationship_color(node.relationship), width=edge_width(node.strength)),
                opacity=0.6,
                hoverinfo="skip",
                showlegend=False,
            )
        )

    fig.add_trace(
        go.Scatter(
            x=[node.x for node in layout.genes],
            y=[node.y for node in layout.genes],
            mode="markers+text",
            marker=dict(
                size=NETWORK_GENE_NODE_RADIUS * 2,
                color=[relationship_color(node.relationship) for node in layout.genes],
            ),
            text=[node.label for node in layout.genes],
            textposition="bottom center",
            hovertext=[
                f"{node.label}: {node.relationship} ({round(node.strength * 100)}%)<br>{node.description}"
                for node in layout.genes
            ],
            hoverinfo="text",
            showlegend=False,
        )
    )

    fig.add_trace(
        go.Scatter(
            x=[center.x],
            y=[center.y],
            mode="markers+text",
            marker=dict(size=NETWORK_CENTER_NODE_RADIUS * 2, color=SEQUENCE_NODE_COLOR),
            text=[center.label],
            textposition="middle center",
            textfont=dict(color="white", size=9),
            hoverinfo="text",
            hovertext=["Central regulatory element"],
            showlegend=False,
        )
    )

    fig.update_layout(
        title=title,
        xaxis=dict(visible=False, range=[0, NETWORK_CANVAS_WIDTH]),
        # Screen coordinates: flip y so the first gene renders at the top.
        yaxis=dict(visible=False, range=[NETWORK_CANVAS_HEIGHT, 0], scaleanchor="x"),
        height=400,
        margin=dict(l=10, r=10, t=40, b=10),
        plot_bgcolor="rgba(0,0,0,0)",
    )
    return fig
