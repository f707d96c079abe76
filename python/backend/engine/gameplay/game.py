"""Session logic: manual moves, solving, and stepping through a solution."""

from __future__ import annotations

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gamesolver import Solver
from backend.engine.gamestate import GameState
from backend.models.board import Board, Direction


class GamePlay:
    """Orchestrates a single puzzle session."""

    def __init__(self) -> None:
        self.state = GameState(GameGenerator.generate())

    @classmethod
    def from_board(cls, board: Board) -> "GamePlay":
        """Create a session from an existing board (e.g. parsed from the CLI)."""
        obj = object.__new__(cls)
        obj.state = GameState(board)
        return obj

    @property
    def board(self) -> Board:
        return self.state.board

    # -- movement (direction = where the *tile* moves) ------------------------

    def move(self, direction: Direction) -> bool:
        """Slide a tile in *direction* into the adjacent blank.

        E.g. ``Direction.UP`` moves the tile **below** the blank upward.
        Returns True if the move was valid.
        """
        board = self.state.board.move(direction)
        if board is None:
            return False
        self._apply_manual(board)
        return True

    def move_tile(self, index: int) -> bool:
        """Move the tile at flat *index* into the adjacent blank.

        Returns True if the tile was adjacent to the blank and the move
        was applied.
        """
        board = self.state.board
        if not 0 <= index < len(board.cells):
            return False
        if not Board.are_adjacent(index, board.blank_index):
            return False
        self._apply_manual(board.slide(index))
        return True

    def reset(self) -> None:
        """Put the goal board back and forget any solution."""
        self.state.board = GameGenerator.solved()
        self.state.clear_solution()
        self.state.moves = 0

    # -- solution playback ----------------------------------------------------

    def solve(self, max_expansions: int | None = None) -> list[Board]:
        """Solve from the current board and rewind playback to its first step."""
        solution = Solver.solve(self.state.board, max_expansions=max_expansions)
        self.state.set_solution(solution)
        return solution

    @property
    def optimal_moves(self) -> int | None:
        if not self.state.has_solution:
            return None
        return len(self.state.solution) - 1

    @property
    def can_step_forward(self) -> bool:
        return self.state.step < max(0, len(self.state.solution) - 1)

    @property
    def can_step_back(self) -> bool:
        return self.state.step > 0

    def step_forward(self) -> bool:
        if not self.can_step_forward:
            return False
        self._show_step(self.state.step + 1)
        return True

    def step_back(self) -> bool:
        if not self.can_step_back:
            return False
        self._show_step(self.state.step - 1)
        return True

    def rewind(self) -> bool:
        if not self.state.has_solution:
            return False
        self._show_step(0)
        return True

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.state.is_solved

    # -- helpers --------------------------------------------------------------

    def _apply_manual(self, board: Board) -> None:
        # A manual move invalidates whatever solution was being shown.
        self.state.board = board
        self.state.clear_solution()
        self.state.increment_moves()

    def _show_step(self, step: int) -> None:
        self.state.step = step
        self.state.board = self.state.solution[step]
