"""Tracks the state of a puzzle session in progress."""

from __future__ import annotations

from backend.models.board import Board


class GameState:
    """Holds the current board, move counter, and the solution being replayed."""

    def __init__(self, board: Board) -> None:
        self.board = board
        self.moves: int = 0
        self.solution: list[Board] = []
        self.step: int = 0

    # -- moves ----------------------------------------------------------------

    def increment_moves(self) -> None:
        self.moves += 1

    # -- solution playback ----------------------------------------------------

    def set_solution(self, solution: list[Board]) -> None:
        self.solution = list(solution)
        self.step = 0

    def clear_solution(self) -> None:
        self.solution = []
        self.step = 0

    @property
    def has_solution(self) -> bool:
        return bool(self.solution)

    @property
    def is_solved(self) -> bool:
        return self.board.is_solved()
