"""
lettergraph/tests/test_cli.py — Tests for the argparse entry point.

Tests verify:
- Default command is the interactive session.
- load / random / degrees print the expected sections and exit codes.
- --prune and --figure are wired through.
- Invalid arguments are rejected by the parser.
"""

import io
import os

import pytest

from lettergraph.cli import build_parser, cmd_interactive, main


def test_no_command_defaults_to_interactive():
    args = build_parser().parse_args([])
    assert args.func is cmd_interactive


def test_interactive_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n"))
    assert main(["--no-color"]) == 0
    assert "Welcome to LetterGraph." in capsys.readouterr().out


def test_load_prints_graph(graph_file, capsys):
    path = graph_file(["A->B", "B<-C", "D<>E"])
    assert main(["--no-color", "load", path]) == 0
    out = capsys.readouterr().out
    assert "A->B\nC->B\nD<>E\n" in out


def test_load_with_prune(graph_file, capsys):
    path = graph_file(["A->C", "B->C", "C->D", "E<>F"])
    assert main(["--no-color", "load", path, "--prune", "2"]) == 0
    out = capsys.readouterr().out
    assert "Removing 'C'." in out
    assert out.rstrip().endswith("E<>F")


def test_load_reports_bad_lines(graph_file, capsys):
    path = graph_file(["A->B", "A-->B"])
    assert main(["--no-color", "load", path]) == 0
    assert "Encountered an issue parsing 'A-->B'" in capsys.readouterr().out


def test_load_missing_file(tmp_path, capsys):
    assert main(["--no-color", "load", str(tmp_path / "nope.txt")]) == 1
    assert "could not be read" in capsys.readouterr().out


def test_load_with_figure(graph_file, tmp_path):
    path = graph_file(["A->B"])
    fig = tmp_path / "out" / "graph.png"
    assert main(["--no-color", "load", path, "--figure", str(fig)]) == 0
    assert fig.exists()


def test_load_with_prune_figure(graph_file, tmp_path):
    path = graph_file(["A->C", "B->C"])
    fig = tmp_path / "prune.png"
    assert main(["--no-color", "load", path, "--prune", "2", "--figure", str(fig)]) == 0
    assert os.path.getsize(fig) > 0


def test_random_is_reproducible(capsys):
    assert main(["--no-color", "random", "6", "--seed", "41"]) == 0
    first = capsys.readouterr().out
    assert main(["--no-color", "random", "6", "--seed", "41"]) == 0
    second = capsys.readouterr().out
    assert "For 6 nodes, generated" in first
    assert first == second


@pytest.mark.parametrize("n", ["1", "27"])
def test_random_rejects_node_count(n, capsys):
    assert main(["--no-color", "random", n]) == 1
    assert "Invalid node count" in capsys.readouterr().out


def test_degrees_table(graph_file, capsys):
    path = graph_file(["A->B", "B<-C", "D<>E"])
    assert main(["--no-color", "degrees", path, "--threshold", "2"]) == 0
    out = capsys.readouterr().out
    assert "in_degree" in out
    assert "In-degree 2 right now: B" in out


def test_degrees_empty_file(graph_file, capsys):
    path = graph_file([])
    assert main(["--no-color", "degrees", path]) == 0
    assert "(empty graph)" in capsys.readouterr().out


def test_negative_prune_rejected():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["load", "Graph.txt", "--prune", "-1"])


@pytest.mark.parametrize("value", ["+3", "1_0", "three"])
def test_prune_accepts_plain_digits_only(value):
    with pytest.raises(SystemExit):
        build_parser().parse_args(["load", "Graph.txt", "--prune", value])


def test_prune_value_parsed():
    args = build_parser().parse_args(["load", "Graph.txt", "--prune", "10"])
    assert args.prune == 10
