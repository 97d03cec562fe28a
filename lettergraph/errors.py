"""
lettergraph/errors.py — Exception hierarchy for graph operations.

Parse errors (EdgeSpecError and subclasses) are per-line and recoverable:
callers skip the line or re-prompt. Contract violations (InvalidNodeIndex,
InvalidNodeCount) fail fast. Nothing in lettergraph prints or exits on error;
the CLI decides how to present them.
"""

from typing import Optional


class GraphError(Exception):
    """Base exception for LetterGraph operations."""
    pass


# ── Parse-time errors ─────────────────────────────────────────────────────────

class EdgeSpecError(GraphError):
    """Raised when a line does not follow the <letter><op><letter> grammar."""
    def __init__(self, line: str, message: str):
        self.line = line
        super().__init__(message)


class LengthError(EdgeSpecError):
    """Raised when a line is not exactly 4 characters long."""
    def __init__(self, line: str):
        super().__init__(
            line,
            f"Encountered an issue parsing '{line}'. A line should consist of 4 "
            "characters, format should be as follows: <letter><connection><letter>, "
            "ie: A->B or C<>D.",
        )


class NotAlphabeticError(EdgeSpecError):
    """Raised when an end character is not a letter A–Z (either case)."""
    def __init__(self, line: str, side: str, char: str):
        self.side = side
        self.char = char
        super().__init__(
            line,
            f"{side.capitalize()} hand node '{char}' is not an alphabetical "
            f"character. Please use [A-Z] (in '{line}').",
        )


class SelfConnectionError(EdgeSpecError):
    """Raised when both ends of an edge name the same node."""
    def __init__(self, line: str):
        super().__init__(line, f"Cannot connect to self (in '{line}').")


class UnknownOperatorError(EdgeSpecError):
    """Raised when the middle two characters are not ->, <- or <>."""
    def __init__(self, line: str, operator: str):
        self.operator = operator
        super().__init__(
            line,
            f"Encountered issue parsing '{operator}'. Unknown connection type "
            f"(in '{line}').",
        )


# ── Contract violations ───────────────────────────────────────────────────────

class InvalidNodeIndex(GraphError, IndexError):
    """Raised when a node index is not an integer in [0, max_nodes)."""
    def __init__(self, index: object, max_nodes: int):
        self.index = index
        self.max_nodes = max_nodes
        super().__init__(f"Invalid node index {index!r}: expected 0..{max_nodes - 1}")


class InvalidNodeCount(GraphError, ValueError):
    """Raised when generate_random() is asked for an unsupported node count."""
    def __init__(self, count: object, minimum: int, maximum: int):
        self.count = count
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            f"Invalid node count {count!r}: expected {minimum}..{maximum}"
        )


class GenerationError(GraphError):
    """Raised when random generation cannot reach its target edge count."""
    pass


class GraphFileError(GraphError):
    """Raised when a graph file cannot be opened or read."""
    def __init__(self, path: str, reason: Optional[str] = None):
        self.path = path
        message = f"File '{path}' could not be read"
        if reason:
            message += f": {reason}"
        super().__init__(message)
