"""
lettergraph/graph/loader.py — Load edge lines from a text file.

The store itself does no I/O. This module opens the file, splits it into
lines and hands them to LetterGraph.load_lines(), so a file behaves exactly
like the same lines typed at the console.
"""

import logging
import os

from lettergraph.errors import GraphFileError
from lettergraph.graph.store import LetterGraph, LoadReport

logger = logging.getLogger(__name__)


def read_edge_lines(path: str) -> list[str]:
    """
    Read path as UTF-8 text and return its lines without line terminators.

    Only the terminator ("\\n" or "\\r\\n") is removed; any other whitespace
    stays and will fail the 4-character length check, matching the console
    grammar. A final terminator does not produce an extra empty line.
    Undecodable bytes become U+FFFD, so only the lines holding them fail to
    parse.

    Raises:
        GraphFileError: the file is missing, is a directory, or cannot be opened.
    """
    try:
        with open(path, encoding="utf-8", errors="replace", newline="") as fh:
            text = fh.read()
    except OSError as exc:
        logger.info("Could not read graph file %s: %s", path, exc)
        raise GraphFileError(path, str(exc)) from exc

    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def load_graph_file(graph: LetterGraph, path: str) -> LoadReport:
    """
    Parse every line of path into graph.

    Args:
        graph: LetterGraph to add edges to (mutated in place).
        path:  Text file with one '<letter><op><letter>' entry per line.

    Returns:
        LoadReport from graph.load_lines(); skipped lines are in report.errors.

    Raises:
        GraphFileError: the file could not be read. graph is left untouched.
    """
    logger.info("Loading graph from: %s", os.path.abspath(path))
    lines = read_edge_lines(path)
    report = graph.load_lines(lines)
    logger.info(
        "File load complete: %d edge(s) in graph after %d line(s).",
        graph.edge_count,
        report.lines_read,
    )
    return report
