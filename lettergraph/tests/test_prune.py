"""
lettergraph/tests/test_prune.py — Tests for LetterGraph.prune().

Tests verify:
- Nodes whose in-degree equals the threshold lose every edge.
- The comparison is exact (not >=).
- The sweep runs A→Z against the progressively mutated matrix.
- Threshold 0 reports every letter without incoming edges.
"""

import pytest

from lettergraph.graph.nodes import letter_to_index as li
from lettergraph.graph.store import LetterGraph


def touches(G: LetterGraph, letter: str) -> bool:
    i = li(letter)
    return any(i in edge for edge in G.edges())


def test_removes_node_with_matching_in_degree(prune_graph):
    removed = prune_graph.prune(2)
    assert removed == ["C"]
    assert not touches(prune_graph, "C")
    assert prune_graph.render() == ["E<>F"]


def test_exact_match_only():
    G = LetterGraph()
    G.load_lines(["A->D", "B->D", "C->D", "A->E", "B->E"])
    assert G.prune(2) == ["E"]
    assert G.in_degree(li("D")) == 3


def test_no_match_leaves_graph_alone(scenario_graph):
    before = scenario_graph.render()
    assert scenario_graph.prune(5) == []
    assert scenario_graph.render() == before


def test_removal_clears_outgoing_edges_too():
    G = LetterGraph()
    G.load_lines(["A->B", "C->B", "B->D", "B<>E"])
    # B has incoming from A, C, E.
    assert G.prune(3) == ["B"]
    assert not touches(G, "B")
    assert G.render() == []


def test_sweep_sees_earlier_removals():
    """
    A->B, B->C, X->C: C starts with in-degree 2.
    threshold 1: B (index 1) is removed first, which drops C to in-degree 1,
    so C is removed later in the same sweep.
    """
    G = LetterGraph()
    G.load_lines(["A->B", "B->C", "X->C"])
    assert G.prune(1) == ["B", "C"]
    assert G.render() == []


def test_sweep_does_not_revisit_earlier_nodes():
    """
    D->B, E->B, C->D: B (in-degree 2) is visited before D (in-degree 1).
    threshold 1 removes D, which leaves B at in-degree 1, but B was already
    visited and stays.
    """
    G = LetterGraph()
    G.load_lines(["D->B", "E->B", "C->D"])
    assert G.prune(1) == ["D"]
    assert G.render() == ["E->B"]
    assert G.in_degree(li("B")) == 1
    # A second pass catches it.
    assert G.prune(1) == ["B"]


def test_threshold_zero_reports_untouched_letters(scenario_graph):
    removed = scenario_graph.prune(0)
    # A, C have no incoming edges; letters F..Z have no edges at all.
    assert removed[:2] == ["A", "C"]
    assert "B" not in removed
    assert len(removed) == 26 - 3
    assert scenario_graph.render() == ["D<>E"]


def test_negative_threshold_rejected(scenario_graph):
    with pytest.raises(ValueError):
        scenario_graph.prune(-1)


def test_prune_logs_each_removal(prune_graph, caplog):
    with caplog.at_level("INFO", logger="lettergraph.graph.store"):
        prune_graph.prune(2)
    assert any("Removing 'C'" in r.getMessage() for r in caplog.records)
