"""
lettergraph/graph/store.py — The graph store.

LetterGraph owns a fixed max_nodes × max_nodes boolean adjacency matrix,
stored [from][to]. Node identity is the matrix slot (see graph.nodes); there is
no separate node table, so a letter is "in the graph" only while some edge
touches it.

Invariant: the diagonal is always False. add_edge() is the only way an edge is
set and it rejects from == to.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

import networkx as nx
import numpy as np

from lettergraph.config import DEFAULT_CONFIG, LetterGraphConfig
from lettergraph.errors import (
    EdgeSpecError,
    GenerationError,
    GraphError,
    InvalidNodeCount,
    InvalidNodeIndex,
    SelfConnectionError,
)
from lettergraph.graph.nodes import LETTERS, check_index, index_to_letter
from lettergraph.graph.parser import OP_BOTH, OP_FORWARD, EdgeSpec, parse_edge_spec

logger = logging.getLogger(__name__)


@dataclass
class LineError:
    """A line that load_lines() skipped, with its 1-based position."""

    line_number: int
    line: str
    error: GraphError


@dataclass
class LoadReport:
    """
    Outcome of LetterGraph.load_lines().

    parsed holds the specs that were applied, in input order; errors holds the
    skipped lines. A report with errors is still a successful load.
    """

    parsed: list[EdgeSpec] = field(default_factory=list)
    errors: list[LineError] = field(default_factory=list)

    @property
    def lines_read(self) -> int:
        return len(self.parsed) + len(self.errors)

    @property
    def ok(self) -> bool:
        return not self.errors


class LetterGraph:
    """Directed graph over the letters A–Z backed by a boolean matrix."""

    def __init__(self, config: LetterGraphConfig = DEFAULT_CONFIG) -> None:
        if not 0 < config.max_nodes <= len(LETTERS):
            raise ValueError(
                f"max_nodes must be in 1..{len(LETTERS)}, got {config.max_nodes}"
            )
        self.config = config
        self.max_nodes = config.max_nodes
        self._adjacency = np.zeros((self.max_nodes, self.max_nodes), dtype=bool)

    # ── Edge insertion ────────────────────────────────────────────────────────

    def add_edge(self, from_index: int, to_index: int) -> None:
        """
        Set the directed edge from_index → to_index. Idempotent.

        Raises:
            InvalidNodeIndex: either index is outside [0, max_nodes).
            SelfConnectionError: from_index == to_index.
        """
        src = check_index(from_index, self.max_nodes)
        dst = check_index(to_index, self.max_nodes)
        if src == dst:
            raise SelfConnectionError(f"{index_to_letter(src)}->{index_to_letter(dst)}")
        self._adjacency[src, dst] = True
        logger.debug("Edge %s->%s set.", index_to_letter(src), index_to_letter(dst))

    def has_edge(self, from_index: int, to_index: int) -> bool:
        src = check_index(from_index, self.max_nodes)
        dst = check_index(to_index, self.max_nodes)
        return bool(self._adjacency[src, dst])

    def parse_line(self, line: str) -> EdgeSpec:
        """
        Parse one '<letter><op><letter>' line and insert its edge(s).

        Nothing is inserted when parsing fails; the EdgeSpecError subclass
        describing the first failed check propagates to the caller.
        """
        spec = parse_edge_spec(line)
        # A letter beyond max_nodes must not leave half of a '<>' pair behind.
        for src, dst in spec.edges():
            check_index(src, self.max_nodes)
            check_index(dst, self.max_nodes)
        for src, dst in spec.edges():
            self.add_edge(src, dst)
        return spec

    def load_lines(self, lines: Iterable[str]) -> LoadReport:
        """
        Apply parse_line() to every line independently.

        A failing line is logged and recorded in the report; it never stops
        the lines after it. The source of the lines (file, console, list) does
        not matter.
        """
        report = LoadReport()
        for line_number, line in enumerate(lines, start=1):
            try:
                report.parsed.append(self.parse_line(line))
            except (EdgeSpecError, InvalidNodeIndex) as exc:
                logger.info("Line %d skipped: %s", line_number, exc)
                report.errors.append(LineError(line_number, line, exc))

        logger.info(
            "Loaded %d line(s): %d applied, %d skipped.",
            report.lines_read,
            len(report.parsed),
            len(report.errors),
        )
        return report

    # ── Random generation ─────────────────────────────────────────────────────

    def generate_random(
        self,
        num_nodes: int,
        rng: Optional[np.random.Generator] = None,
    ) -> int:
        """
        Fill the graph with random edges among the first num_nodes letters.

        Algorithm (rejection sampling):
            1. max_edges = n * (n - 1)   — every ordered pair without self-loops.
            2. target ~ U[max_edges // 3, max_edges], clamped to >= 1.
            3. Draw (from, to) uniformly from [0, n) × [0, n). Redraw when
               from == to or the edge already exists; otherwise insert it.
            4. Stop once target edges have been inserted.

        Args:
            num_nodes: Node count in [config.min_random_nodes, max_nodes].
            rng:       numpy Generator. Defaults to
                       np.random.default_rng(config.random_seed).

        Returns:
            The number of edges inserted (always the drawn target).

        Raises:
            InvalidNodeCount: num_nodes outside the accepted range.
            GenerationError:  the free slots among the first n nodes cannot hold
                              the target, or config.random_draw_limit was hit.

        Notes:
            - Nodes are drawn independently of the target, so fewer than
              num_nodes letters may end up touched by an edge.
            - The loop has no retry cap unless config.random_draw_limit is
              set. Each draw succeeds with probability >= 1/n² while a free
              slot remains, so for n <= 26 it terminates quickly, but the bound
              is probabilistic.
        """
        low = self.config.min_random_nodes
        if (
            isinstance(num_nodes, bool)
            or not isinstance(num_nodes, (int, np.integer))
            or not low <= num_nodes <= self.max_nodes
        ):
            raise InvalidNodeCount(num_nodes, low, self.max_nodes)
        n = int(num_nodes)

        if rng is None:
            rng = np.random.default_rng(self.config.random_seed)

        max_edges = n * (n - 1)
        target = max(1, int(rng.integers(max_edges // 3, max_edges, endpoint=True)))

        block = self._adjacency[:n, :n]
        free_slots = max_edges - int(block.sum())
        if target > free_slots:
            raise GenerationError(
                f"Cannot add {target} random edges among {n} nodes: "
                f"only {free_slots} free slot(s) left."
            )

        logger.info("For %d nodes, generating %d connections.", n, target)

        remaining = target
        draws = 0
        limit = self.config.random_draw_limit
        while remaining > 0:
            if limit is not None and draws >= limit:
                raise GenerationError(
                    f"Gave up after {draws} draws with {remaining} of {target} "
                    "edges still to place."
                )
            draws += 1
            src = int(rng.integers(0, n))
            dst = int(rng.integers(0, n))
            if src == dst or self._adjacency[src, dst]:
                continue
            self.add_edge(src, dst)
            remaining -= 1

        logger.debug("Random generation finished: %d edges in %d draws.", target, draws)
        return target

    # ── Queries ───────────────────────────────────────────────────────────────

    def incoming(self, to_index: int) -> list[int]:
        """Indices with an edge into to_index, ascending."""
        dst = check_index(to_index, self.max_nodes)
        return [int(i) for i in np.flatnonzero(self._adjacency[:, dst])]

    def outgoing(self, from_index: int) -> list[int]:
        """Indices that from_index has an edge to, ascending."""
        src = check_index(from_index, self.max_nodes)
        return [int(i) for i in np.flatnonzero(self._adjacency[src, :])]

    def in_degree(self, to_index: int) -> int:
        return len(self.incoming(to_index))

    def edges(self) -> list[tuple[int, int]]:
        """All directed edges as (from, to), ordered by from then to."""
        return [(int(src), int(dst)) for src, dst in np.argwhere(self._adjacency)]

    @property
    def edge_count(self) -> int:
        return int(self._adjacency.sum())

    def nodes(self) -> list[str]:
        """Letters touched by at least one edge, ascending."""
        touched = self._adjacency.any(axis=0) | self._adjacency.any(axis=1)
        return [index_to_letter(i) for i in np.flatnonzero(touched)]

    @property
    def adjacency(self) -> np.ndarray:
        """Read-only view of the [from][to] matrix."""
        view = self._adjacency.view()
        view.flags.writeable = False
        return view

    def __len__(self) -> int:
        return self.edge_count

    def __contains__(self, edge: object) -> bool:
        if not isinstance(edge, tuple) or len(edge) != 2:
            return False
        return self.has_edge(*edge)

    # ── Mutation ──────────────────────────────────────────────────────────────

    def prune(self, threshold: int) -> list[str]:
        """
        Remove every node whose in-degree equals threshold exactly.

        Single ascending sweep, not a fixed point: node i is tested against
        the matrix as already modified by removals of nodes < i. A node that
        was visited before the removal that would bring it to threshold stays
        until the next prune() call.

        Removing a node clears its whole row and column.

        Returns:
            Letters of the removed nodes, in removal order.
        """
        if threshold < 0:
            raise ValueError(f"threshold must be >= 0, got {threshold}")

        removed: list[str] = []
        for i in range(self.max_nodes):
            if self.in_degree(i) != threshold:
                continue
            self._adjacency[:, i] = False
            self._adjacency[i, :] = False
            removed.append(index_to_letter(i))
            logger.info("Removing '%s' (in-degree %d).", index_to_letter(i), threshold)

        logger.info(
            "Prune with threshold %d removed %d node(s); %d edge(s) left.",
            threshold,
            len(removed),
            self.edge_count,
        )
        return removed

    def clear(self) -> None:
        self._adjacency[:, :] = False

    def copy(self) -> "LetterGraph":
        clone = LetterGraph(self.config)
        clone._adjacency = self._adjacency.copy()
        return clone

    # ── Output ────────────────────────────────────────────────────────────────

    def render(self) -> list[str]:
        """
        Textual form of the graph, one entry per edge or bidirectional pair.

        Order: from ascending, then to ascending. A bidirectional pair is
        written once as '<>' at its lower-index position; the mirrored entry
        (from > to) is skipped.
        """
        lines: list[str] = []
        for src, dst in self.edges():
            bidirectional = bool(self._adjacency[dst, src])
            if bidirectional and src > dst:
                continue
            op = OP_BOTH if bidirectional else OP_FORWARD
            lines.append(f"{index_to_letter(src)}{op}{index_to_letter(dst)}")
        return lines

    def to_networkx(self) -> nx.DiGraph:
        """
        Export to a NetworkX DiGraph keyed by letter.

        Only edge-touched letters become nodes. Each node carries its
        matrix 'index'.
        """
        G = nx.DiGraph()
        for letter in self.nodes():
            G.add_node(letter, index=LETTERS.index(letter))
        G.add_edges_from((index_to_letter(src), index_to_letter(dst)) for src, dst in self.edges())
        return G

    def __repr__(self) -> str:
        return f"LetterGraph(nodes={len(self.nodes())}, edges={self.edge_count})"
