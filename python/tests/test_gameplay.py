"""Game session tests: manual moves and solution playback."""

from __future__ import annotations

import pytest

from backend.engine.gameplay import GamePlay
from backend.models.board import GOAL, Board, Direction
from backend.models.errors import NoSolutionPossible


def _two_move_game() -> GamePlay:
    return GamePlay.from_board(Board.from_flat([1, 2, 3, 4, 5, 6, 0, 7, 8]))


def test_new_game_is_scrambled() -> None:
    game = GamePlay()
    assert not game.is_won
    assert game.state.moves == 0


def test_manual_moves() -> None:
    game = _two_move_game()

    assert not game.move(Direction.RIGHT)  # nothing left of the blank
    assert game.move(Direction.LEFT)
    assert game.move_tile(8)
    assert game.is_won
    assert game.state.moves == 2


def test_move_tile_rejects_far_cells() -> None:
    game = _two_move_game()

    assert not game.move_tile(0)
    assert not game.move_tile(42)
    assert game.state.moves == 0


def test_playback() -> None:
    game = _two_move_game()
    start = game.board

    solution = game.solve()
    assert game.optimal_moves == 2
    assert solution[0] == start
    assert not game.can_step_back

    assert game.step_forward()
    assert game.step_forward()
    assert not game.step_forward()
    assert game.board == GOAL
    assert game.is_won

    assert game.step_back()
    assert game.board == solution[1]

    assert game.rewind()
    assert game.board == start
    assert game.state.step == 0


def test_manual_move_discards_solution() -> None:
    game = _two_move_game()
    game.solve()

    assert game.move(Direction.LEFT)
    assert game.optimal_moves is None
    assert not game.can_step_forward
    assert not game.rewind()


def test_reset() -> None:
    game = _two_move_game()
    assert game.move(Direction.LEFT)
    game.solve()
    game.reset()

    assert game.board == GOAL
    assert game.optimal_moves is None
    assert game.state.moves == 0


def test_solve_unsolvable() -> None:
    game = GamePlay.from_board(Board.from_flat([2, 1, 3, 4, 5, 6, 7, 8, 0]))
    with pytest.raises(NoSolutionPossible):
        game.solve()
    assert game.optimal_moves is None
