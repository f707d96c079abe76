"""Generates solvable 8-puzzle boards."""

from __future__ import annotations

import random

from backend.engine.gamesolver import Solver
from backend.models.board import GOAL, Board


class GameGenerator:
    """Creates solvable puzzles, either uniformly or by walking from a board."""

    @staticmethod
    def solved() -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        return GOAL

    @staticmethod
    def generate(rng: random.Random | None = None) -> Board:
        """Return a uniformly random *solvable* board that is not the goal.

        Shuffles the goal cells until the permutation lands in the goal's
        parity class; half of all permutations do.
        """
        rng = rng or random.Random()
        cells = list(GOAL.cells)
        while True:
            rng.shuffle(cells)
            board = Board(tuple(cells))
            if Solver.is_solvable(board) and not board.is_solved():
                return board

    @staticmethod
    def scramble(board: Board, steps: int, rng: random.Random | None = None) -> Board:
        """Return *board* after *steps* random slides, never undoing the last one."""
        rng = rng or random.Random()
        prev: Board | None = None

        for _ in range(steps):
            neighbors = Solver.neighbors(board)
            if prev in neighbors and len(neighbors) > 1:
                neighbors.remove(prev)
            prev, board = board, rng.choice(neighbors)

        return board
