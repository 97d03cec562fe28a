"""
lettergraph — A directed graph over the letters A–Z, built from edge lines
('A->B', 'A<-B', 'A<>B') or at random, and cleaned by removing every node
with a chosen number of incoming connections.

Subpackages:
- lettergraph.graph   — adjacency-matrix store, line parser, file loader
- lettergraph.metrics — degree table and prune preview (pandas)
- lettergraph.viz     — PNG figures (matplotlib + networkx)

Entry points: lettergraph.cli (argparse) and lettergraph.session (menus).
"""

__version__ = "0.1.0"

from lettergraph.config import DEFAULT_CONFIG, LetterGraphConfig
from lettergraph.graph.store import LetterGraph
