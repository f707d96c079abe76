"""Exceptions raised by the puzzle model and solver."""

from __future__ import annotations


class PuzzleError(Exception):
    """Base class for every puzzle-related failure."""


class InvalidConfiguration(PuzzleError, ValueError):
    """The cells are not a permutation of 0..8."""


class NoSolutionPossible(PuzzleError):
    """The start board has the wrong inversion parity to reach the goal."""


class NoPathFound(PuzzleError, RuntimeError):
    """The frontier ran dry before the goal was popped.

    For a solvable start this is an internal fault, not a user error.
    """


class SearchLimitExceeded(NoPathFound):
    """The search was stopped after the caller's expansion budget."""

    def __init__(self, limit: int) -> None:
        super().__init__(f"Search stopped after {limit} expansions.")
        self.limit = limit
