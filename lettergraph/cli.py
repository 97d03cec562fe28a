"""
lettergraph/cli.py — Command-line interface for LetterGraph.

Provides a single entry point that either starts the interactive menu session
or runs one load/generate/clean pass non-interactively.

Usage:
    python -m lettergraph                         # interactive menus
    python -m lettergraph load Graph.txt --prune 3
    python -m lettergraph random 6 --seed 41 --figure out/graph.png
    python -m lettergraph degrees Graph.txt --threshold 2
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace

import numpy as np

from lettergraph.config import DEFAULT_CONFIG, LetterGraphConfig
from lettergraph.errors import GenerationError, GraphFileError, InvalidNodeCount
from lettergraph.graph.loader import load_graph_file
from lettergraph.graph.store import LetterGraph
from lettergraph.session import (
    GREEN,
    RULE,
    Console,
    InteractiveSession,
    parse_non_negative_int,
)


# ── Logging setup ─────────────────────────────────────────────────────────────

def _setup_logging(level: str = "WARNING") -> None:
    """Configure root logger with timestamps on stderr."""
    numeric = getattr(logging, level.upper(), logging.WARNING)
    fmt = "%(asctime)s  %(levelname)-8s  %(name)s — %(message)s"
    datefmt = "%H:%M:%S"
    logging.basicConfig(level=numeric, format=fmt, datefmt=datefmt, stream=sys.stderr)
    # matplotlib logs font discovery at DEBUG
    logging.getLogger("matplotlib").setLevel(logging.WARNING)


logger = logging.getLogger("lettergraph.cli")


def _config_from_args(args: argparse.Namespace) -> LetterGraphConfig:
    overrides = {}
    if args.no_color or not sys.stdout.isatty():
        overrides["use_color"] = False
    if getattr(args, "seed", None) is not None:
        overrides["random_seed"] = args.seed
    return replace(DEFAULT_CONFIG, **overrides) if overrides else DEFAULT_CONFIG


def _print_section(console: Console, title: str, graph: LetterGraph) -> None:
    console.say(RULE)
    console.say(title)
    console.say(RULE)
    console.print_graph(graph)


def _finish_graph(
    args: argparse.Namespace,
    graph: LetterGraph,
    console: Console,
    config: LetterGraphConfig,
) -> int:
    """Shared tail of load/random: optional prune, then optional figure."""
    before = graph.copy()
    removed: list[str] = []

    if args.prune is not None:
        removed = graph.prune(args.prune)
        console.say(RULE)
        console.say(f"Cleaning graph from nodes which have {args.prune} incoming connection(s).")
        for letter in removed:
            console.say(console.color(f"Removing '{letter}'.", GREEN))
        _print_section(console, "Result:", graph)

    if args.figure:
        from lettergraph.viz.figures import draw_graph, draw_prune_comparison

        if args.prune is not None:
            path = draw_prune_comparison(before, graph, removed, args.prune, args.figure, config)
        else:
            path = draw_graph(graph, args.figure, config=config)
        console.say(f"Figure saved to: {path}")

    return 0


# ── Subcommand: interactive ───────────────────────────────────────────────────

def cmd_interactive(args: argparse.Namespace) -> int:
    """Menu-driven session (the default when no command is given)."""
    _setup_logging(args.log_level)
    config = _config_from_args(args)
    InteractiveSession(Console(use_color=config.use_color), config).run()
    return 0


# ── Subcommand: load ──────────────────────────────────────────────────────────

def cmd_load(args: argparse.Namespace) -> int:
    """Parse a graph file, print it, optionally clean it."""
    _setup_logging(args.log_level)
    config = _config_from_args(args)
    console = Console(use_color=config.use_color)

    graph = LetterGraph(config)
    try:
        report = load_graph_file(graph, args.file)
    except GraphFileError as exc:
        console.error(str(exc))
        return 1

    console.print_load_errors(report)
    _print_section(console, f"Graph from '{args.file}':", graph)
    return _finish_graph(args, graph, console, config)


# ── Subcommand: random ────────────────────────────────────────────────────────

def cmd_random(args: argparse.Namespace) -> int:
    """Generate a random graph, print it, optionally clean it."""
    _setup_logging(args.log_level)
    config = _config_from_args(args)
    console = Console(use_color=config.use_color)

    graph = LetterGraph(config)
    logger.info("Generating %d-node graph (seed=%s).", args.nodes, config.random_seed)
    rng = np.random.default_rng(config.random_seed)
    try:
        count = graph.generate_random(args.nodes, rng)
    except (InvalidNodeCount, GenerationError) as exc:
        console.error(str(exc))
        return 1

    _print_section(console, f"For {args.nodes} nodes, generated {count} connections:", graph)
    return _finish_graph(args, graph, console, config)


# ── Subcommand: degrees ───────────────────────────────────────────────────────

def cmd_degrees(args: argparse.Namespace) -> int:
    """Print the in/out degree table of a graph file."""
    _setup_logging(args.log_level)
    config = _config_from_args(args)
    console = Console(use_color=config.use_color)

    from lettergraph.metrics.degree import degree_table, prune_preview

    graph = LetterGraph(config)
    try:
        report = load_graph_file(graph, args.file)
    except GraphFileError as exc:
        console.error(str(exc))
        return 1

    console.print_load_errors(report)
    df = degree_table(graph)
    console.say(df.to_string() if not df.empty else "(empty graph)")

    if args.threshold is not None:
        candidates = prune_preview(graph, args.threshold)
        console.say()
        console.say(
            f"In-degree {args.threshold} right now: "
            f"{', '.join(candidates) if candidates else '(none)'}"
        )
    return 0


# ── Argument parser ───────────────────────────────────────────────────────────

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lettergraph",
        description=(
            "LetterGraph — build a directed graph over the letters A-Z and clean it\n"
            "by removing nodes with a given number of incoming connections."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Interactive menus
  python -m lettergraph

  # Load a file and remove every node with exactly 3 incoming connections
  python -m lettergraph load Graph.txt --prune 3

  # Reproducible random graph with a before/after figure
  python -m lettergraph random 8 --seed 41 --prune 2 --figure out/prune.png
        """,
    )

    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (default: WARNING)",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable ANSI colours in console output",
    )
    parser.set_defaults(func=cmd_interactive)

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    def add_output_flags(p: argparse.ArgumentParser) -> None:
        p.add_argument(
            "--prune",
            type=_non_negative_int,
            default=None,
            metavar="N",
            help="Remove nodes with exactly N incoming connections",
        )
        p.add_argument(
            "--figure",
            default=None,
            metavar="PATH",
            help="Save a PNG of the graph (before/after when --prune is given)",
        )

    # interactive
    p_interactive = subparsers.add_parser("interactive", help="Menu-driven session (default)")
    p_interactive.set_defaults(func=cmd_interactive)

    # load
    p_load = subparsers.add_parser("load", help="Parse a graph file")
    p_load.add_argument("file", metavar="FILE", help="Text file with one edge per line")
    add_output_flags(p_load)
    p_load.set_defaults(func=cmd_load)

    # random
    p_random = subparsers.add_parser("random", help="Generate a random graph")
    p_random.add_argument("nodes", type=int, metavar="N", help="Number of nodes (2-26)")
    p_random.add_argument(
        "--seed", type=int, default=None, metavar="S",
        help="Seed for the random generator (default: fresh entropy)",
    )
    add_output_flags(p_random)
    p_random.set_defaults(func=cmd_random)

    # degrees
    p_degrees = subparsers.add_parser("degrees", help="Show the degree table of a graph file")
    p_degrees.add_argument("file", metavar="FILE")
    p_degrees.add_argument(
        "--threshold", type=_non_negative_int, default=None, metavar="N",
        help="Also list nodes whose in-degree is currently N",
    )
    p_degrees.set_defaults(func=cmd_degrees)

    return parser


def _non_negative_int(text: str) -> int:
    value, problem = parse_non_negative_int(text)
    if problem:
        raise argparse.ArgumentTypeError(f"{problem} (got '{text}')")
    return value


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
