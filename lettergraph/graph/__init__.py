"""
lettergraph.graph — Adjacency-matrix graph store and its input formats.

Modules:
    nodes   — Letter ↔ matrix index mapping.
    parser  — '<letter><op><letter>' line grammar.
    store   — LetterGraph: edges, parsing, random fill, prune, render.
    loader  — Feed a text file through LetterGraph.load_lines().
"""

from lettergraph.graph.parser import EdgeSpec, parse_edge_spec
from lettergraph.graph.store import LetterGraph, LineError, LoadReport
