"""
lettergraph/metrics/degree.py — Degree table and prune preview.

Read-only views over a LetterGraph. Neither function mutates the graph, so
they can be shown to the user before committing to a prune threshold.
"""

import logging

import pandas as pd

from lettergraph.graph.nodes import index_to_letter, letter_to_index
from lettergraph.graph.store import LetterGraph

logger = logging.getLogger(__name__)

DEGREE_COLUMNS = ["in_degree", "out_degree", "incoming"]


def degree_table(graph: LetterGraph) -> pd.DataFrame:
    """
    Build a per-node degree table for the letters present in graph.

    Returns:
        DataFrame indexed by letter (index name 'node'), ascending, with:
            in_degree  — number of edges ending at the node.
            out_degree — number of edges leaving the node.
            incoming   — source letters joined with ',' (ascending), '' if none.
        Empty graphs give an empty frame with the same columns.
    """
    rows = []
    for letter in graph.nodes():
        i = letter_to_index(letter)
        sources = graph.incoming(i)
        rows.append(
            {
                "node": letter,
                "in_degree": len(sources),
                "out_degree": len(graph.outgoing(i)),
                "incoming": ",".join(index_to_letter(s) for s in sources),
            }
        )

    if not rows:
        return pd.DataFrame(columns=DEGREE_COLUMNS, index=pd.Index([], name="node"))

    df = pd.DataFrame(rows).set_index("node")
    df["in_degree"] = df["in_degree"].astype(int)
    df["out_degree"] = df["out_degree"].astype(int)
    logger.debug("Degree table built for %d node(s).", len(df))
    return df[DEGREE_COLUMNS]


def prune_preview(graph: LetterGraph, threshold: int) -> list[str]:
    """
    Letters whose in-degree equals threshold right now.

    This is a snapshot of the current degrees. LetterGraph.prune() sweeps and
    mutates as it goes, so it can remove a node whose in-degree only drops
    to threshold during the sweep; the preview does not model that.

    Like prune(), every slot is considered, so threshold 0 also lists letters
    that no edge touches.
    """
    return [
        index_to_letter(i) for i in range(graph.max_nodes)
        if graph.in_degree(i) == threshold
    ]
