"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables, grids and formatted messages.
"""

import math
from collections.abc import Sequence

from rich.console import Console
from rich.table import Table

from inkshape.domain import (
    ArcShape,
    LineShape,
    RecognizedShape,
    StrokePoint,
    TriangleShape,
)
from inkshape.utils import RecognitionStats

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info

CELL_ON = "█"
CELL_OFF = "·"


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Inkshape[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def _fmt(value: float) -> str:
    return f"{value:.1f}"


def describe_shape(shape: RecognizedShape) -> str:
    """One-line human description of a recognized shape's geometry."""
    rect = shape.bounding_rect
    if isinstance(shape, LineShape):
        return (
            f"({_fmt(shape.start.x)}, {_fmt(shape.start.y)}) → "
            f"({_fmt(shape.end.x)}, {_fmt(shape.end.y)}) len={_fmt(shape.length)}"
        )
    if isinstance(shape, ArcShape):
        direction = "cw" if shape.clockwise else "ccw"
        return (
            f"centre ({_fmt(shape.center.x)}, {_fmt(shape.center.y)}) r={_fmt(shape.radius)} "
            f"{math.degrees(shape.sweep):.0f}° {direction}"
        )
    if isinstance(shape, TriangleShape):
        return "  ".join(f"({_fmt(v.x)}, {_fmt(v.y)})" for v in shape.vertices)
    return f"{_fmt(rect.width)} × {_fmt(rect.height)} at ({_fmt(rect.x)}, {_fmt(rect.y)})"


def print_results(results: Sequence[RecognizedShape | None]) -> None:
    """Print a table with one row per stroke."""
    table = Table(show_edge=False, header_style="bold")
    table.add_column("#", justify="right")
    table.add_column("Shape")
    table.add_column("Geometry")

    for index, shape in enumerate(results):
        if shape is None:
            table.add_row(str(index), "[dim]freehand[/dim]", "")
        else:
            table.add_row(str(index), f"[green]{shape.kind.value}[/green]", describe_shape(shape))
    console.print(table)


def print_summary(stats: RecognitionStats) -> None:
    """Print recognition summary."""
    console.print(
        f"\n[bold green]{SYM_OK} Complete[/bold green] "
        f"{stats.stroke_count} strokes {SYM_DOT} {stats.matched_count} recognized "
        f"{SYM_DOT} {stats.no_match_count + stats.too_short_count} freehand"
    )
    if stats.matched:
        breakdown = f" {SYM_DOT} ".join(
            f"{count} {kind}" for kind, count in sorted(stats.matched.items())
        )
        console.print(f"  {breakdown}")
    if stats.avg_stroke_time_ms is not None:
        console.print(f"  {stats.avg_stroke_time_ms:.2f}ms avg per stroke")


def render_cells(cells: Sequence[tuple[int, int]]) -> str:
    """Draw cells as a character grid covering their bounding box."""
    if not cells:
        return ""
    occupied = set(cells)
    rows = [r for r, _ in occupied]
    cols = [c for _, c in occupied]
    lines = []
    for r in range(min(rows), max(rows) + 1):
        lines.append(
            "".join(
                CELL_ON if (r, c) in occupied else CELL_OFF
                for c in range(min(cols), max(cols) + 1)
            )
        )
    return "\n".join(lines)


def print_cells(cells: Sequence[tuple[int, int]]) -> None:
    """Print a rasterized shape as a grid followed by its cell count."""
    console.print(render_cells(cells), highlight=False)
    console.print(f"\n  {len(set(cells))} cells")


def print_outline(samples: Sequence[StrokePoint]) -> None:
    """Print outline samples as a table."""
    table = Table(show_edge=False, header_style="bold")
    table.add_column("t", justify="right")
    table.add_column("x", justify="right")
    table.add_column("y", justify="right")
    for s in samples:
        table.add_row(f"{s.time_offset:.3f}", f"{s.x:.2f}", f"{s.y:.2f}")
    console.print(table)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
