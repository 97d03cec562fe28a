"""
lettergraph/graph/parser.py — Edge line grammar.

Grammar (exactly 4 characters, no whitespace tolerance):

    <LETTER><OP><LETTER>
    OP     ::= "->" | "<-" | "<>"
    LETTER ::= [A-Za-z]     (folded to uppercase)

parse_edge_spec() is pure: it never touches a graph. LetterGraph.parse_line()
combines it with edge insertion.
"""

import logging
import string
from dataclasses import dataclass

from lettergraph.errors import (
    LengthError,
    NotAlphabeticError,
    SelfConnectionError,
    UnknownOperatorError,
)
from lettergraph.graph.nodes import letter_to_index

logger = logging.getLogger(__name__)

OP_FORWARD = "->"
OP_BACKWARD = "<-"
OP_BOTH = "<>"
OPERATORS = (OP_FORWARD, OP_BACKWARD, OP_BOTH)

SPEC_LENGTH = 4


@dataclass(frozen=True)
class EdgeSpec:
    """
    One successfully parsed line.

    left and right are node indices as written (left is character 0, right is
    character 3); operator decides which directed edges they stand for.
    """

    left: int
    right: int
    operator: str

    def edges(self) -> list[tuple[int, int]]:
        """Directed (from, to) pairs this spec inserts, in insertion order."""
        if self.operator == OP_FORWARD:
            return [(self.left, self.right)]
        if self.operator == OP_BACKWARD:
            return [(self.right, self.left)]
        return [(self.left, self.right), (self.right, self.left)]

    @property
    def is_bidirectional(self) -> bool:
        return self.operator == OP_BOTH


def parse_edge_spec(line: str) -> EdgeSpec:
    """
    Parse a single '<letter><op><letter>' line.

    Checks run in a fixed order and the first failure is raised:
        1. length is exactly 4                  → LengthError
        2. left, then right, is a letter        → NotAlphabeticError
        3. (letters are folded to uppercase)
        4. the two letters differ               → SelfConnectionError
        5. characters 1..2 are a known operator → UnknownOperatorError

    Returns:
        EdgeSpec with both node indices and the operator.
    """
    if len(line) != SPEC_LENGTH:
        raise LengthError(line)

    left_char, right_char = line[0], line[3]
    if left_char not in string.ascii_letters:
        raise NotAlphabeticError(line, "left", left_char)
    if right_char not in string.ascii_letters:
        raise NotAlphabeticError(line, "right", right_char)

    left = letter_to_index(left_char)
    right = letter_to_index(right_char)
    if left == right:
        raise SelfConnectionError(line)

    operator = line[1:3]
    if operator not in OPERATORS:
        raise UnknownOperatorError(line, operator)

    logger.debug("Parsed %r as %s%s%s.", line, left_char.upper(), operator, right_char.upper())
    return EdgeSpec(left=left, right=right, operator=operator)
