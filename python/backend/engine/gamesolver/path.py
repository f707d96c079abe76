"""Turns the search's predecessor map into a forward path."""

from __future__ import annotations

from backend.models.board import Board


def reconstruct_path(
    came_from: dict[int, int | None],
    boards: dict[int, Board],
    goal_key: int,
) -> list[Board]:
    """Walk predecessors back from *goal_key* and return start → goal.

    The start is the one key whose predecessor is ``None``.
    """
    path: list[Board] = []
    key: int | None = goal_key
    while key is not None:
        path.append(boards[key])
        key = came_from[key]
    path.reverse()
    return path
