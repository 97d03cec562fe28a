"""
lettergraph/graph/nodes.py — Letter ↔ index mapping.

A node is identified by its slot in the adjacency matrix. Slot 0 is 'A',
slot 25 is 'Z'; there is no other way to name a node.
"""

import operator
import string

from lettergraph.errors import InvalidNodeIndex

LETTERS = string.ascii_uppercase
_ORD_A = ord("A")


def letter_to_index(letter: str) -> int:
    """Map 'A'..'Z' (either case) to 0..25.

    Raises:
        InvalidNodeIndex: letter is not a single ASCII letter.
    """
    if not isinstance(letter, str) or len(letter) != 1 or letter not in string.ascii_letters:
        raise InvalidNodeIndex(letter, len(LETTERS))
    return ord(letter.upper()) - _ORD_A


def index_to_letter(index: int) -> str:
    """Map 0..25 back to 'A'..'Z'."""
    return LETTERS[check_index(index)]


def check_index(index: int, max_nodes: int = len(LETTERS)) -> int:
    """Return index as a plain int if it names a slot, else raise InvalidNodeIndex.

    Accepts numpy integers (rng.integers() returns them). bool is rejected even
    though it subclasses int.
    """
    if isinstance(index, bool):
        raise InvalidNodeIndex(index, max_nodes)
    try:
        value = operator.index(index)
    except TypeError:
        raise InvalidNodeIndex(index, max_nodes) from None
    if not 0 <= value < max_nodes:
        raise InvalidNodeIndex(index, max_nodes)
    return value
