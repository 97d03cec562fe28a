"""
lettergraph/session.py — Interactive menu session.

The session walks the user through:

    main ──1──▶ file ─────┐
      │                   ├──▶ post-data ──1──▶ add ──(blank)──▶ clean ──▶ post-clean
      └──2──▶ random ─────┘        └──────2─────────────────────▶ clean
                                              post-clean: 1 add, 2 clean, 3 restart, 4 quit

Each screen is a method that returns the name of the next screen, and run()
loops until a screen returns QUIT. Restarting goes back to the main menu with
a fresh LetterGraph. End of input on any prompt ends the session.

All console I/O goes through Console so tests can script the input and
capture the output.
"""

from __future__ import annotations

import logging
import re
import sys
from typing import Callable, TextIO

from lettergraph.config import DEFAULT_CONFIG, LetterGraphConfig
from lettergraph.errors import (
    EdgeSpecError,
    GenerationError,
    GraphFileError,
    InvalidNodeIndex,
)
from lettergraph.graph.loader import load_graph_file
from lettergraph.graph.store import LetterGraph, LoadReport

logger = logging.getLogger(__name__)

# ANSI colour codes
RED = 31
GREEN = 32
YELLOW = 33
BLUE = 34
MAGENTA = 35
CYAN = 36

RULE = "=" * 82

_NUMBER = re.compile(r"-?[0-9]+")

MAIN = "main"
FILE = "file"
RANDOM = "random"
POST_DATA = "post_data"
ADD = "add"
CLEAN = "clean"
POST_CLEAN = "post_clean"
QUIT = "quit"


class Console:
    """Line-based console with optional ANSI colouring."""

    def __init__(
        self,
        input_fn: Callable[[], str] | None = None,
        out: TextIO | None = None,
        use_color: bool = True,
    ) -> None:
        self.input_fn = input_fn if input_fn is not None else sys.stdin.readline
        self.out = out if out is not None else sys.stdout
        # escapes only reach a terminal
        isatty = getattr(self.out, "isatty", None)
        self.use_color = use_color and isatty is not None and isatty()

    def color(self, text: str, code: int) -> str:
        if not self.use_color:
            return text
        return f"\033[{code}m{text}\033[0m"

    def say(self, text: str = "") -> None:
        print(text, file=self.out)

    def error(self, text: str) -> None:
        self.say(self.color(text, RED))

    def ask(self, prompt_lines: tuple[str, ...] = ()) -> str:
        """
        Print prompt_lines and '>> ', then read one line.

        Raises:
            EOFError: input is exhausted.
        """
        for line in prompt_lines:
            self.say(line)
        print(">> ", end="", file=self.out)
        self.out.flush()
        raw = self.input_fn()
        if raw == "":
            raise EOFError
        return raw.rstrip("\r\n")

    def print_graph(self, graph: LetterGraph) -> None:
        for line in graph.render():
            self.say(self.color(line, RED))

    def print_load_errors(self, report: LoadReport) -> None:
        for line_error in report.errors:
            self.error(f"{line_error.error} Ignoring.")


def parse_non_negative_int(text: str) -> tuple[int | None, str | None]:
    """
    Convert console input to an int >= 0.

    Only plain decimal digits are accepted, optionally with a leading '-' so
    negative numbers get their own message. '+5', '1_0' and '0x1' are invalid.

    Returns:
        (value, None) on success, (None, message) otherwise.
    """
    text = text.strip()
    if not _NUMBER.fullmatch(text):
        return None, "Invalid input, please use a number."
    value = int(text)
    if value < 0:
        return None, "Please use a number >= 0"
    return value, None


class InteractiveSession:
    """Menu-driven LetterGraph session."""

    def __init__(
        self,
        console: Console | None = None,
        config: LetterGraphConfig = DEFAULT_CONFIG,
    ) -> None:
        self.console = console or Console(use_color=config.use_color)
        self.config = config
        self.graph = LetterGraph(config)
        self._screens: dict[str, Callable[[], str]] = {
            MAIN: self.main_menu,
            FILE: self.file_menu,
            RANDOM: self.random_menu,
            POST_DATA: self.post_data_menu,
            ADD: self.add_connections_menu,
            CLEAN: self.clean_menu,
            POST_CLEAN: self.post_clean_menu,
        }

    def run(self) -> None:
        screen = MAIN
        try:
            while screen != QUIT:
                logger.debug("Entering screen '%s'.", screen)
                screen = self._screens[screen]()
        except EOFError:
            logger.debug("Input exhausted, ending session.")
        self._goodbye()

    # ── Screens ───────────────────────────────────────────────────────────────

    def main_menu(self) -> str:
        c = self.console
        self.graph = LetterGraph(self.config)

        c.say(c.color("Hi! ", YELLOW) + "Welcome to LetterGraph.")
        c.say()
        while True:
            choice = c.ask((
                "Please select one of the following options:",
                " 1. Parse graph from file",
                " 2. Randomly generate graph",
                " 3. Quit",
            ))
            if choice == "1":
                return FILE
            if choice == "2":
                return RANDOM
            if choice == "3":
                return QUIT
            self._invalid_option()

    def file_menu(self) -> str:
        c = self.console
        default = self.config.default_graph_file
        while True:
            filename = c.ask((f"Please enter the filename/path (default: ./{default}): ",))
            if not filename:
                filename = default

            c.say(RULE)
            c.say(f"Start reading from file: '{filename}'")
            c.say(RULE)
            try:
                report = load_graph_file(self.graph, filename)
            except GraphFileError as exc:
                c.error(str(exc))
                continue
            break

        c.print_load_errors(report)
        c.say("Result:")
        c.say(RULE)
        c.print_graph(self.graph)
        c.say(RULE)
        return POST_DATA

    def random_menu(self) -> str:
        c = self.console
        low = self.config.min_random_nodes
        high = self.config.max_nodes
        while True:
            num_nodes, problem = parse_non_negative_int(
                c.ask((f"How many random nodes would you like to see? (min {low}, max {high})",))
            )
            if problem:
                c.error(problem)
                continue
            if num_nodes < low:
                c.error(f"We need at least {low} nodes, please retry.")
                continue
            if num_nodes > high:
                c.error(f"There is a max of {high} nodes, please retry.")
                continue

            try:
                count = self.graph.generate_random(num_nodes)
            except GenerationError as exc:
                self.graph.clear()
                c.error(str(exc))
                continue

            c.say(f"For {num_nodes} nodes, we'll generate {count} connections:")
            c.print_graph(self.graph)
            return POST_DATA

    def post_data_menu(self) -> str:
        c = self.console
        while True:
            choice = c.ask((
                "Please select one of the following options:",
                " 1. Add connections",
                " 2. Clean graph",
            ))
            if choice == "1":
                return ADD
            if choice == "2":
                return CLEAN
            self._invalid_option()

    def add_connections_menu(self) -> str:
        c = self.console
        c.say("Do you want to manually add any connections?")
        c.say(
            "These need to be a single alphabetical character, followed by a "
            "connection, followed by another alphabetical character."
        )
        c.say("Connections can be either <- or -> (unidirectional) or <> (bidirectional).")
        c.say("For example: A<-B, C->F, G<>A")
        c.say()
        c.say("If you're done, press enter.")
        c.say("p to print graph.")

        while True:
            line = c.ask()
            if not line:
                return CLEAN
            if line == "p":
                c.print_graph(self.graph)
                continue
            try:
                self.graph.parse_line(line)
            except (EdgeSpecError, InvalidNodeIndex) as exc:
                c.error(f"{exc} Ignoring.")

    def clean_menu(self) -> str:
        c = self.console
        default = self.config.default_prune_threshold
        c.say(
            "Next we will clean the graph from all nodes which have an N amount "
            "of connections coming in."
        )

        while True:
            answer = c.ask((
                "Which amount of incoming connections should be considered fatal? "
                f"(default is {default})",
                "p to print graph.",
            ))
            if answer == "p":
                c.print_graph(self.graph)
                continue
            if not answer:
                threshold = default
            else:
                threshold, problem = parse_non_negative_int(answer)
                if problem:
                    c.error(problem)
                    continue
            break

        c.say(RULE)
        c.say(f"Cleaning graph from nodes which have {threshold} incoming connection(s).")
        c.say(RULE)
        for letter in self.graph.prune(threshold):
            c.say(c.color(f"Removing '{letter}'.", GREEN))

        c.say(RULE)
        c.say("Result:")
        c.say(RULE)
        c.print_graph(self.graph)
        c.say(RULE)
        return POST_CLEAN

    def post_clean_menu(self) -> str:
        c = self.console
        while True:
            choice = c.ask((
                "Please select one of the following options:",
                " 1. Add connections",
                " 2. Clean again",
                " 3. Restart",
                " 4. Quit",
            ))
            if choice == "1":
                return ADD
            if choice == "2":
                return CLEAN
            if choice == "3":
                return MAIN
            if choice == "4":
                return QUIT
            self._invalid_option()

    # ── Helpers ───────────────────────────────────────────────────────────────

    def _invalid_option(self) -> None:
        self.console.say()
        self.console.error("Invalid option.")
        self.console.say()

    def _goodbye(self) -> None:
        c = self.console
        colors = (RED, YELLOW, GREEN, CYAN, BLUE, MAGENTA, RED)
        c.say()
        c.say(" ".join(c.color(ch, code) for ch, code in zip("goodbye", colors)))
