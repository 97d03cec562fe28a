"""
lettergraph.viz — Static figures.

Modules:
    figures — Circular-layout PNG of a graph, and a before/after prune view.
"""

from lettergraph.viz.figures import draw_graph, draw_prune_comparison
