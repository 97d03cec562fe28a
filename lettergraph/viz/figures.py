"""
lettergraph/viz/figures.py — Static PNG rendering of a LetterGraph.

Usage:
    from lettergraph.viz.figures import draw_graph
    path = draw_graph(graph, "graph.png")

Nodes sit on a circle in letter order so that two drawings of the same
letters line up. One-way edges are drawn with a single arrowhead, bidirectional
pairs with one double-headed arrow (mirroring the '<>' line in render()).
"""

from __future__ import annotations

import logging
import os

import matplotlib

matplotlib.use("Agg")

import matplotlib.patches as mpatches
import matplotlib.pyplot as plt
import networkx as nx

from lettergraph.config import DEFAULT_CONFIG, LetterGraphConfig
from lettergraph.graph.store import LetterGraph

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Palette
# ---------------------------------------------------------------------------
C_NODE = "#2196A6"      # teal — surviving node
C_REMOVED = "#E05E3A"   # orange-red — pruned node
C_EDGE = "#1A2B3C"      # near-black
C_LIGHT = "#E8EFF5"     # background tint

STYLE = {
    "figure.facecolor": "white",
    "axes.facecolor": C_LIGHT,
    "text.color": C_EDGE,
    "font.family": "DejaVu Sans",
}


def _circular_positions(letters: list[str]) -> dict[str, tuple[float, float]]:
    """Circle layout keyed by letter, stable for a given letter set."""
    G = nx.Graph()
    G.add_nodes_from(sorted(letters))
    return nx.circular_layout(G)


def _draw_on_axis(
    ax,
    graph: LetterGraph,
    title: str,
    removed: list[str] | None = None,
    layout_letters: list[str] | None = None,
) -> None:
    removed = removed or []
    G = graph.to_networkx()
    letters = sorted(set(G.nodes) | set(removed) | set(layout_letters or []))

    ax.set_title(title, fontsize=13, fontweight="bold", pad=12)
    ax.set_axis_off()

    if not letters:
        ax.text(0.5, 0.5, "empty graph", ha="center", va="center",
                fontsize=12, transform=ax.transAxes)
        return

    pos = _circular_positions(letters)
    G.add_nodes_from(letters)

    one_way = [(u, v) for u, v in G.edges if not G.has_edge(v, u)]
    two_way = [(u, v) for u, v in G.edges if G.has_edge(v, u) and u < v]

    for edgelist, style in ((one_way, "-|>"), (two_way, "<|-|>")):
        if edgelist:
            nx.draw_networkx_edges(G, pos, edgelist=edgelist, ax=ax, edge_color=C_EDGE,
                                   arrows=True, arrowstyle=style, arrowsize=16,
                                   width=1.4, node_size=700)

    colors = [C_REMOVED if n in removed else C_NODE for n in G.nodes]
    nx.draw_networkx_nodes(G, pos, ax=ax, node_color=colors, node_size=700,
                           edgecolors="white", linewidths=1.5)
    nx.draw_networkx_labels(G, pos, ax=ax, font_color="white", font_weight="bold")


def draw_graph(
    graph: LetterGraph,
    output_path: str,
    title: str | None = None,
    config: LetterGraphConfig = DEFAULT_CONFIG,
) -> str:
    """
    Save graph as a PNG.

    Args:
        graph:       Graph to draw. Only edge-touched letters appear.
        output_path: Target file; parent directories are created.
        title:       Figure title. Defaults to a node/edge count summary.
        config:      Uses config.figure_dpi.

    Returns:
        Absolute path of the written PNG.
    """
    plt.rcParams.update(STYLE)
    title = title or f"LetterGraph — {len(graph.nodes())} nodes, {graph.edge_count} edges"

    fig, ax = plt.subplots(figsize=(7, 7))
    _draw_on_axis(ax, graph, title)
    fig.tight_layout()

    path = _prepare_path(output_path)
    fig.savefig(path, dpi=config.figure_dpi, bbox_inches="tight")
    plt.close(fig)
    logger.info("Graph figure saved to %s", path)
    return path


def draw_prune_comparison(
    before: LetterGraph,
    after: LetterGraph,
    removed: list[str],
    threshold: int,
    output_path: str,
    config: LetterGraphConfig = DEFAULT_CONFIG,
) -> str:
    """
    Save a side-by-side PNG of a graph before and after prune(threshold).

    Removed letters are highlighted in both panels; in the right panel they are
    shown as isolated nodes. Both panels share one layout so letters do not
    move between them.
    """
    plt.rcParams.update(STYLE)
    before_letters = before.nodes()
    shown = [r for r in removed if r in before_letters]

    fig, (ax_before, ax_after) = plt.subplots(1, 2, figsize=(13, 6.5))
    _draw_on_axis(ax_before, before, f"Before — {before.edge_count} edges", shown)
    _draw_on_axis(ax_after, after, f"After — {after.edge_count} edges", shown,
                  layout_letters=before_letters)

    legend = [
        mpatches.Patch(color=C_NODE, label="kept"),
        mpatches.Patch(color=C_REMOVED, label=f"removed (in-degree = {threshold})"),
    ]
    fig.legend(handles=legend, loc="lower center", ncol=2, fontsize=10)
    fig.tight_layout(rect=(0, 0.06, 1, 1))

    path = _prepare_path(output_path)
    fig.savefig(path, dpi=config.figure_dpi, bbox_inches="tight")
    plt.close(fig)
    logger.info("Prune comparison figure saved to %s", path)
    return path


def _prepare_path(output_path: str) -> str:
    path = os.path.abspath(output_path)
    os.makedirs(os.path.dirname(path), exist_ok=True)
    return path
