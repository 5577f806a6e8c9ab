"""
Plotly charts describing the actor network.
"""

from collections import Counter

import plotly.graph_objects as go

from bacon_game.game.session import UniverseSession
from bacon_game.graph import Graph, separations

INFINITE_BUCKET = "∞"


def separation_counts(session: UniverseSession) -> dict[str, int]:
    """Number of actors at each separation from the center, ∞ bucket last."""
    depths = Counter(separations(session.tree, session.center).values())
    counts = {str(depth): depths[depth] for depth in sorted(depths)}
    missing = session.graph.num_vertices() - session.tree.num_vertices()
    if missing:
        counts[INFINITE_BUCKET] = missing
    return counts


def create_separation_histogram(session: UniverseSession) -> go.Figure:
    """Bar chart of actor counts by separation from the current center."""
    counts = separation_counts(session)
    colors = ["#95a5a6" if label == INFINITE_BUCKET else "#3498db" for label in counts]

    fig = go.Figure(data=[
        go.Bar(x=list(counts), y=list(counts.values()), marker_color=colors)
    ])

    fig.update_layout(
        title=f"Separation from {session.center}",
        xaxis_title="Separation",
        yaxis_title="Actors",
        showlegend=False,
        height=320,
        margin=dict(t=35, b=45, l=45, r=15),
    )
    fig.update_xaxes(type="category")
    return fig


def create_degree_histogram(graph: Graph) -> go.Figure:
    """Bar chart of actor counts by number of co-stars."""
    degrees = Counter(graph.out_degree(actor) for actor in graph.vertices())
    xs = sorted(degrees)

    fig = go.Figure(data=[
        go.Bar(x=xs, y=[degrees[d] for d in xs], marker_color="#2ecc71")
    ])

    fig.update_layout(
        title="Co-star Degree Distribution",
        xaxis_title="Co-stars",
        yaxis_title="Actors",
        showlegend=False,
        height=320,
        margin=dict(t=35, b=45, l=45, r=15),
    )
    return fig
