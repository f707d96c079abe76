#!/usr/bin/env python3
"""Eight Puzzle Solver.

Usage::

    python main.py check 1,2,3,4,5,6,7,0,8      # solvability + estimates
    python main.py shuffle --seed 7              # random solvable board
    python main.py solve 867254301               # optimal solution
    python main.py solve 123456078 --autoplay    # animate the solution
"""

import logging
import random
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.gamegenerator import GameGenerator  # noqa: E402
from backend.engine.gameplay import GamePlay  # noqa: E402
from backend.engine.gamesolver import Solver  # noqa: E402
from backend.models.board import Board  # noqa: E402
from backend.models.errors import (  # noqa: E402
    InvalidConfiguration,
    NoPathFound,
    NoSolutionPossible,
    SearchLimitExceeded,
)
from frontend.cli.rich import app as rich_app  # noqa: E402

logger = logging.getLogger("eight_puzzle")

DEFAULT_DELAY_MS = 500


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )


def _parse_board(text: str) -> Board:
    try:
        return Board.parse(text)
    except InvalidConfiguration as exc:
        raise typer.BadParameter(str(exc), param_hint="BOARD") from exc


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False, no_args_is_help=True)


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search progress at debug level.",
    ),
) -> None:
    """Eight Puzzle Solver."""
    _configure_logging(verbose)


@app.command()
def check(
    board: str = typer.Argument(..., help="Nine cells, e.g. 1,2,3,4,5,6,7,8,0."),
) -> None:
    """Show whether BOARD can be solved and how far it is from the goal."""
    rich_app.show_check(_parse_board(board))


@app.command()
def shuffle(
    seed: Optional[int] = typer.Option(
        None, "--seed",
        envvar="EIGHT_PUZZLE_SEED",
        help="Seed for a reproducible board.",
    ),
    walk: Optional[int] = typer.Option(
        None, "--walk",
        min=1,
        help="Scramble by this many random slides instead of a uniform shuffle.",
    ),
) -> None:
    """Print a random solvable board that is not already solved."""
    rng = random.Random(seed)
    if walk is None:
        board = GameGenerator.generate(rng)
    else:
        board = GameGenerator.scramble(GameGenerator.solved(), walk, rng)
        while board.is_solved():
            board = GameGenerator.scramble(board, walk, rng)
    typer.echo(str(board))


@app.command()
def solve(
    board: str = typer.Argument(..., help="Nine cells, e.g. 1,2,3,4,5,6,7,8,0."),
    autoplay: bool = typer.Option(
        False, "--autoplay",
        help="Animate the solution instead of listing every step.",
    ),
    delay: int = typer.Option(
        DEFAULT_DELAY_MS, "--delay",
        min=0, max=1500,
        envvar="EIGHT_PUZZLE_DELAY_MS",
        help="Milliseconds between autoplay steps.",
    ),
    max_expansions: Optional[int] = typer.Option(
        None, "--max-expansions",
        min=1,
        envvar="EIGHT_PUZZLE_MAX_EXPANSIONS",
        help="Give up after closing this many nodes.",
    ),
) -> None:
    """Find an optimal solution for BOARD with A*."""
    start = _parse_board(board)

    try:
        result = Solver.search(start, max_expansions=max_expansions)
    except NoSolutionPossible as exc:
        rich_app.console.print(f"[red]{exc} Reshuffle and try again.[/red]")
        raise typer.Exit(code=1)
    except SearchLimitExceeded as exc:
        rich_app.console.print(f"[yellow]{exc}[/yellow]")
        raise typer.Exit(code=1)
    except NoPathFound:
        logger.exception("Internal error while solving %s", start)
        rich_app.console.print(
            "[bold red]No solution found (shouldn't happen for solvable 8-puzzles).[/bold red]"
        )
        raise typer.Exit(code=3)

    if not autoplay:
        rich_app.show_solution(result)
        return

    game = GamePlay.from_board(start)
    game.state.set_solution(result.path)
    rich_app.console.print(rich_app.autoplay(game, delay / 1000))


if __name__ == "__main__":
    app()
