"""Rich terminal frontend: tables, colours, and panels.

Renders boards and solutions for the CLI commands in ``main.py``. All
puzzle logic lives in the backend; this module only draws.
"""

from __future__ import annotations

import sys
import time

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gameplay import GamePlay
from backend.engine.gamesolver import SearchResult, Solver
from backend.models.board import SIZE, Board

console = Console()


# -- board rendering ----------------------------------------------------------


def render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(SIZE):
        table.add_column(width=2, justify="center")

    for r, row in enumerate(board.tiles):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r * SIZE + c):
                cells.append(f"[bold green]{val}[/bold green]")
            else:
                cells.append(f"[bold white]{val}[/bold white]")
        table.add_row(*cells)

    return table


# -- screens ------------------------------------------------------------------


def show_check(board: Board) -> None:
    """Print a board with its solvability and distance estimates."""
    solvable = Solver.is_solvable(board)

    status = Text()
    status.append("  Configuration is ", style="dim")
    if solvable:
        status.append("Solvable", style="bold green")
    else:
        status.append("Unsolvable", style="bold red")

    stats = Text()
    if board.is_solved():
        stats.append("  ★ Solved!", style="bold green")
    else:
        stats.append("  Manhattan: ", style="dim")
        stats.append(str(Solver.heuristic(board)), style="bold yellow")
        stats.append("    Out of place: ", style="dim")
        stats.append(str(board.tiles_out_of_place()), style="bold yellow")

    panel = Panel(
        Group(Align.center(render_board(board)), Align.center(status), Align.center(stats)),
        title=f"[bold cyan]{board}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )
    console.print(Align.center(panel))


def show_solution(result: SearchResult) -> None:
    """Print every step of a solution side by side with its move."""
    moves = Solver.moves(result.path)

    summary = Text()
    summary.append("  Optimal steps: ", style="dim")
    summary.append(str(result.cost), style="bold yellow")
    summary.append(
        f"    expanded {result.expanded}, generated {result.generated}"
        f" in {result.elapsed:.3f}s",
        style="dim",
    )
    console.print(summary)

    if moves:
        console.print(
            Text("  " + " ".join(m.value for m in moves), style="cyan")
        )

    table = Table(box=rich.box.ROUNDED, border_style="dim", show_lines=True)
    table.add_column("#", justify="right", style="dim", width=3)
    table.add_column("Move", style="cyan")
    table.add_column("Board")
    for i, board in enumerate(result.path):
        move = moves[i - 1].value if i else "start"
        table.add_row(str(i), move, render_board(board))
    console.print(table)


def autoplay(game: GamePlay, delay: float) -> str:
    """Animate the stored solution of *game*, one step every *delay* seconds."""
    total = game.optimal_moves or 0
    _draw_step(game, total)
    while game.can_step_forward:
        time.sleep(delay)
        game.step_forward()
        _draw_step(game, total)

    return f"[bold green]Solved in {total} moves![/bold green]"


def _draw_step(game: GamePlay, total: int) -> None:
    console.clear()

    progress = Text()
    progress.append(
        f"  Viewing step {game.state.step + 1}/{total + 1} ", style="bold cyan"
    )
    if game.state.step:
        prev = game.state.solution[game.state.step - 1]
        progress.append(f"({prev.direction_to(game.board).value})", style="dim")

    panel = Panel(
        Align.center(render_board(game.board)),
        title=f"[bold cyan]Auto-Solve  {SIZE}×{SIZE}[/bold cyan]",
        border_style="cyan",
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(progress))
    sys.stdout.flush()
