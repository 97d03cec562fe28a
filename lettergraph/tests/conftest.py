"""
lettergraph/tests/conftest.py — Shared pytest fixtures for the LetterGraph suite.

Fixtures:
    graph           — Empty LetterGraph with the default config.
    scenario_graph  — Graph loaded from SCENARIO_LINES (A->B, C->B, D<>E).
    prune_graph     — C has exactly two incoming edges (from A and B).
    rng             — numpy Generator seeded with SEED.
    graph_file      — Factory writing edge lines to a file under tmp_path.
"""

import numpy as np
import pytest

from lettergraph.graph.store import LetterGraph

SEED = 41

SCENARIO_LINES = ["A->B", "B<-C", "D<>E"]

# A->C, B->C: C has in-degree 2.
# C->D:       D has in-degree 1, drops to 0 once C is removed.
# E<>F:       untouched by a threshold-2 prune.
PRUNE_LINES = ["A->C", "B->C", "C->D", "E<>F"]


@pytest.fixture
def graph() -> LetterGraph:
    return LetterGraph()


@pytest.fixture
def scenario_graph() -> LetterGraph:
    G = LetterGraph()
    G.load_lines(SCENARIO_LINES)
    return G


@pytest.fixture
def prune_graph() -> LetterGraph:
    G = LetterGraph()
    G.load_lines(PRUNE_LINES)
    return G


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(SEED)


@pytest.fixture
def graph_file(tmp_path):
    """Write lines to tmp_path/<name> joined by newline and return the path."""
    def _write(lines, name="Graph.txt", newline="\n", trailing=True):
        path = tmp_path / name
        text = newline.join(lines) + (newline if trailing and lines else "")
        path.write_bytes(text.encode("utf-8"))
        return str(path)
    return _write
