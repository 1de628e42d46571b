"""Rich terminal output — board grid, solver results and analysis panels.

Only reads backend values; every board shown here came from the rules
engine or the layout parser.
"""

from __future__ import annotations

from typing import Iterable

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gamesolver import BoardAnalysis, SearchResult
from backend.models.board import Board, Position, SquareKind

console = Console()


# -- helpers ------------------------------------------------------------------


def _format_time(seconds: float) -> str:
    if seconds < 1:
        return f"{seconds * 1000:.0f} ms"
    m, s = divmod(seconds, 60)
    return f"{int(m):02d}:{s:05.2f}" if m else f"{s:.2f} s"


def _format_distance(value: float) -> str:
    return "∞" if value == float("inf") else str(int(value))


# -- board rendering ----------------------------------------------------------


def render_board(board: Board, highlight: Iterable[Position] = ()) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    marked = set(highlight)
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.cols):
        table.add_column(width=2, justify="center")

    for r in range(board.rows):
        cells: list[str] = []
        for c in range(board.cols):
            pos = Position(r, c)
            piece = board.piece_at(pos)
            square = board.square_at(pos)
            if piece is not None:
                style = "bold green" if piece.is_mover else "bold white"
                cells.append(f"[{style}]{piece.kind.symbol}[/{style}]")
            elif pos in marked:
                cells.append("[bold cyan]•[/bold cyan]")
            elif square is SquareKind.GOAL:
                cells.append("[bold yellow]G[/bold yellow]")
            elif square is SquareKind.MISSING:
                cells.append("[dim]╳[/dim]")
            else:
                cells.append("[dim]·[/dim]")
        table.add_row(*cells)

    return table


def print_board(board: Board, title: str = "Board", highlight: Iterable[Position] = ()) -> None:
    panel = Panel(
        Align.center(render_board(board, highlight)),
        title=f"[bold cyan]{title}  {board.rows}×{board.cols}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )
    console.print(Align.center(panel))


# -- solver output ------------------------------------------------------------


def render_result(result: SearchResult) -> Panel:
    stats = Text()
    stats.append("  States: ", style="dim")
    stats.append(f"{result.states_explored:,}", style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(_format_time(result.elapsed), style="bold yellow")

    if result.solution is None:
        body = Group(stats, Text("  No solution within the state budget.", style="red"))
        border = "red"
    else:
        moves = Table(box=rich.box.ROUNDED, border_style="dim", show_lines=False)
        moves.add_column("#", justify="right", style="dim", width=3)
        moves.add_column("Piece", style="cyan")
        moves.add_column("From", justify="center")
        moves.add_column("To", justify="center")
        moves.add_column("", style="bold green")
        for i, move in enumerate(result.solution, 1):
            moves.add_row(
                str(i),
                f"{move.piece.kind.value} ({move.piece.identity})",
                str(move.from_pos),
                str(move.to_pos),
                "promotes" if move.promotes else "",
            )
        stats.append("    Moves: ", style="dim")
        stats.append(str(result.solution_length), style="bold green")
        body = Group(stats, Text(""), moves)
        border = "bold green"

    return Panel(
        body,
        title=f"[bold]{result.strategy.value.upper()} SEARCH[/bold]",
        border_style=border,
        padding=(1, 2),
    )


def print_result(result: SearchResult) -> None:
    console.print(render_result(result))


def print_comparison(results: list[SearchResult]) -> None:
    """Side-by-side summary when several strategies ran on one board."""
    table = Table(title="Strategies", title_style="bold cyan", box=rich.box.ROUNDED)
    table.add_column("Strategy")
    table.add_column("Moves", justify="right", style="yellow")
    table.add_column("States", justify="right", style="yellow")
    table.add_column("Time", justify="right", style="yellow")
    for result in results:
        table.add_row(
            result.strategy.value,
            str(result.solution_length) if result.solved else "-",
            f"{result.states_explored:,}",
            _format_time(result.elapsed),
        )
    console.print(Align.center(table))


# -- analysis -----------------------------------------------------------------


def print_analysis(analysis: BoardAnalysis) -> None:
    table = Table(show_header=False, box=rich.box.SIMPLE)
    table.add_column(style="dim")
    table.add_column(style="bold yellow")
    position = analysis.mover_position
    table.add_row("Mover", "not found" if position is None else str(position))
    table.add_row("Promoted", "yes" if analysis.promoted else "no")
    table.add_row("Moves to promotion", _format_distance(analysis.moves_to_promotion))
    table.add_row("Moves to goal", _format_distance(analysis.moves_to_goal))
    table.add_row("Pieces above mover", str(analysis.pieces_above))
    table.add_row("Blocking pieces", str(analysis.blocking_count))
    console.print(Panel(table, title="[bold]ANALYSIS[/bold]", border_style="bright_blue"))
