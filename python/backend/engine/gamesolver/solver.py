"""Optimal 8-puzzle solver: A* with the Manhattan-distance heuristic."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from time import perf_counter

from backend.engine.gamesolver.frontier import Frontier
from backend.engine.gamesolver.path import reconstruct_path
from backend.models.board import GOAL, SIZE, Board, Direction
from backend.models.errors import NoPathFound, NoSolutionPossible, SearchLimitExceeded

logger = logging.getLogger(__name__)

# Blank displacements: up, down, left, right.
_BLANK_STEPS = ((-1, 0), (1, 0), (0, -1), (0, 1))


@dataclass(frozen=True)
class SearchResult:
    """Optimal path plus counters from one A* run."""

    path: list[Board]
    expanded: int
    generated: int
    elapsed: float

    @property
    def cost(self) -> int:
        return len(self.path) - 1


def _inversions(board: Board) -> int:
    flat = [v for v in board.cells if v != 0]
    inv = 0
    for i in range(len(flat)):
        for j in range(i + 1, len(flat)):
            if flat[i] > flat[j]:
                inv += 1
    return inv


@lru_cache(maxsize=16)
def _goal_coords(goal: Board) -> dict[int, tuple[int, int]]:
    return {v: Board.coords(i) for i, v in enumerate(goal.cells)}


class Solver:
    """Stateless solver; all methods are static."""

    @staticmethod
    def is_solvable(board: Board, goal: Board = GOAL) -> bool:
        """Return True if *board* can reach *goal*.

        On a grid of odd width a slide never changes the parity of the
        inversion count, so both boards must share it.
        """
        return _inversions(board) % 2 == _inversions(goal) % 2

    @staticmethod
    def heuristic(board: Board, goal: Board = GOAL) -> int:
        """Sum of Manhattan distances of every tile from its goal cell."""
        target = _goal_coords(goal)
        total = 0
        for i, v in enumerate(board.cells):
            if v == 0:
                continue
            x1, y1 = Board.coords(i)
            x2, y2 = target[v]
            total += abs(x1 - x2) + abs(y1 - y2)
        return total

    @staticmethod
    def neighbors(board: Board) -> list[Board]:
        """Every board one slide away (blank up, down, left, right)."""
        row, col = board.blank_pos
        out: list[Board] = []
        for dr, dc in _BLANK_STEPS:
            r, c = row + dr, col + dc
            if 0 <= r < SIZE and 0 <= c < SIZE:
                out.append(board.slide(r * SIZE + c))
        return out

    @staticmethod
    def solve(
        start: Board, goal: Board = GOAL, max_expansions: int | None = None
    ) -> list[Board]:
        """Return the boards of an optimal solution, *start* and *goal* included.

        Raises ``NoSolutionPossible`` for the wrong parity class.
        """
        return Solver.search(start, goal, max_expansions).path

    @staticmethod
    def search(
        start: Board, goal: Board = GOAL, max_expansions: int | None = None
    ) -> SearchResult:
        """Run A* from *start* to *goal* and report the path with counters.

        Stale frontier entries are skipped on pop instead of being
        re-prioritised in place.
        """
        if not Solver.is_solvable(start, goal):
            raise NoSolutionPossible(
                f"Board {start} cannot reach {goal}: inversion parity differs."
            )

        t0 = perf_counter()
        start_key = start.key
        goal_key = goal.key
        h0 = Solver.heuristic(start, goal)
        logger.debug("A* start=%s goal=%s h=%d", start, goal, h0)

        boards: dict[int, Board] = {start_key: start}
        came_from: dict[int, int | None] = {start_key: None}
        g_score: dict[int, int] = {start_key: 0}
        f_score: dict[int, int] = {start_key: h0}
        closed: set[int] = set()

        frontier = Frontier()
        frontier.push(start_key, h0)
        expanded = 0
        generated = 0

        while (entry := frontier.pop()) is not None:
            key, _ = entry

            if key == goal_key:
                path = reconstruct_path(came_from, boards, key)
                result = SearchResult(
                    path=path,
                    expanded=expanded,
                    generated=generated,
                    elapsed=perf_counter() - t0,
                )
                logger.debug(
                    "A* solved in %d moves (expanded=%d generated=%d %.3fs)",
                    result.cost, expanded, generated, result.elapsed,
                )
                return result

            if key in closed:
                continue

            if max_expansions is not None and expanded >= max_expansions:
                logger.warning(
                    "A* stopped after %d expansions (frontier=%d)",
                    expanded, len(frontier),
                )
                raise SearchLimitExceeded(max_expansions)

            closed.add(key)
            expanded += 1

            tentative_g = g_score[key] + 1
            for nxt in Solver.neighbors(boards[key]):
                generated += 1
                nk = nxt.key
                if nk in g_score and tentative_g >= g_score[nk]:
                    continue
                boards.setdefault(nk, nxt)
                came_from[nk] = key
                g_score[nk] = tentative_g
                f_score[nk] = tentative_g + Solver.heuristic(nxt, goal)
                frontier.push(nk, f_score[nk])

        logger.error(
            "A* exhausted the frontier from solvable board %s (expanded=%d); "
            "move generator or heuristic is broken",
            start, expanded,
        )
        raise NoPathFound(f"No path from {start} to {goal}.")

    @staticmethod
    def moves(path: list[Board]) -> list[Direction]:
        """Translate a board sequence into the tile moves between them."""
        return [a.direction_to(b) for a, b in zip(path, path[1:])]

    @staticmethod
    def hint(board: Board) -> Direction | None:
        """Return the first move of an optimal solution, or ``None`` if solved / unsolvable."""
        if board.is_solved():
            return None

        try:
            path = Solver.solve(board)
        except NoSolutionPossible:
            return None

        return path[0].direction_to(path[1])
