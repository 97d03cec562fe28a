"""
lettergraph/config.py — All tunable parameters for LetterGraph.

No limit or default should ever be hardcoded in a graph or CLI module. Node
capacity, prompt defaults, random generation knobs and output settings live
here so that a change of behaviour is a single-file diff.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class LetterGraphConfig:
    """
    Immutable configuration for a LetterGraph session.

    Override by constructing a new LetterGraphConfig with the desired values.
    """

    # ── Graph capacity ────────────────────────────────────────────────────────
    max_nodes: int = 26
    # One slot per letter A–Z. The adjacency matrix is max_nodes × max_nodes.
    # Values above 26 have no letter to render and are rejected by LetterGraph.

    # ── Random generation ─────────────────────────────────────────────────────
    min_random_nodes: int = 2
    # Smallest node count accepted by generate_random(). With a single node
    # there is no legal (non-self) edge to draw.

    random_seed: Optional[int] = None
    # Seed for numpy.random.default_rng() when no generator is passed in.
    # None draws fresh OS entropy on every call.

    random_draw_limit: Optional[int] = None
    # Upper bound on pair draws inside generate_random(). None keeps the
    # rejection loop unbounded; for n <= 26 (at most 650 edges) it finishes
    # after a few thousand draws in practice.

    # ── Cleaning ──────────────────────────────────────────────────────────────
    default_prune_threshold: int = 3
    # In-degree used by the interactive clean menu when the user just
    # presses enter.

    # ── Files ─────────────────────────────────────────────────────────────────
    default_graph_file: str = "Graph.txt"
    # Relative to the working directory. Used when the file prompt is blank.

    # ── Output ────────────────────────────────────────────────────────────────
    use_color: bool = True
    # ANSI colour codes in console output. Only applied when stdout is a TTY.

    figure_dpi: int = 150
    # Resolution of PNGs written by lettergraph.viz.figures.draw_graph().


# Singleton default — import this everywhere instead of constructing anew.
DEFAULT_CONFIG = LetterGraphConfig()
