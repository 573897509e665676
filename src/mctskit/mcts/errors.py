"""Exceptions raised by the search engine."""


class MCTSError(Exception):
    """Base exception for search errors."""

    pass


class TerminalStateError(MCTSError, ValueError):
    """Raised when a search is requested on a state with no legal actions."""

    pass


class InvariantViolationError(MCTSError, RuntimeError):
    """Raised when the search tree or the game contract breaks an internal invariant.

    This always indicates a bug, either in the engine or in the game
    implementation (for example a game rejecting an action it listed as legal).
    """

    pass


class UnknownNodeError(InvariantViolationError):
    """Raised when a node id is not present in the node store."""

    pass
