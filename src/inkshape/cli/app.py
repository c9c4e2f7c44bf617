"""CLI application entry point for inkshape.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from inkshape import __version__
from inkshape.cli.output import (
    console,
    print_cells,
    print_error,
    print_header,
    print_outline,
    print_results,
    print_step,
    print_summary,
)
from inkshape.config import InkshapeSettings, LoggingConfig
from inkshape.core import ShapeRecognizer, rasterize, recognize_strokes, shape_outline
from inkshape.domain import Point, ShapeKind
from inkshape.exceptions import InkshapeError, StrokeFormatError, StrokeLoadError
from inkshape.io import cells_to_json, outline_to_json, read_strokes, results_to_json
from inkshape.utils import RecognitionLogger, configure_logging

# Create the Typer app
app = typer.Typer(
    name="inkshape",
    help="Recognize freehand strokes as shapes and rasterize idealized shapes.",
    add_completion=False,
    no_args_is_help=True,
)

KIND_HELP = "Shape kind (" + "|".join(k.value for k in ShapeKind) + ")"


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Inkshape[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Recognize freehand strokes as shapes and rasterize idealized shapes."""


@app.command("recognize")
def recognize_command(
    input_file: Annotated[
        Path,
        typer.Argument(
            help="JSON file with one or more strokes ('-' for stdin)",
            show_default=False,
        ),
    ],
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print results as JSON"),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option("--log-file", help="Write detailed logs to file"),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option("--log-level", help="Logging level (DEBUG|INFO|WARNING|ERROR)"),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Verbose console output"),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Minimal console output"),
    ] = False,
) -> None:
    """Recognize every stroke in a JSON file.

    Example:
        inkshape recognize strokes.json
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    settings = InkshapeSettings(
        logging=LoggingConfig(
            log_file=log_file,
            log_level="DEBUG" if verbose else log_level,
        ),
    )
    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet or as_json,
    )

    try:
        strokes = read_strokes(input_file)
    except StrokeLoadError as e:
        print_error(f"Could not read strokes: {e.reason}", details=e.path)
        raise typer.Exit(code=1)
    except StrokeFormatError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    show_progress = not (quiet or as_json)
    if show_progress:
        print_header(__version__)
        print_step(f"Recognizing {len(strokes)} strokes")

    results, stats = recognize_strokes(
        strokes,
        recognizer=ShapeRecognizer(settings.recognizer),
        recognition_logger=RecognitionLogger(logger),
    )

    if as_json:
        typer.echo(results_to_json(results))
        return

    print_results(results)
    if not quiet:
        print_summary(stats)


@app.command("rasterize")
def rasterize_command(
    kind: Annotated[str, typer.Argument(help=KIND_HELP, show_default=False)],
    r0: Annotated[int, typer.Argument(help="Anchor row", show_default=False)],
    c0: Annotated[int, typer.Argument(help="Anchor column", show_default=False)],
    r1: Annotated[int, typer.Argument(help="Opposite row", show_default=False)],
    c1: Annotated[int, typer.Argument(help="Opposite column", show_default=False)],
    filled: Annotated[
        bool,
        typer.Option("--filled", "-f", help="Fill the shape (ignored for lines)"),
    ] = False,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print cells as JSON"),
    ] = False,
) -> None:
    """Rasterize a shape between two grid corners.

    Example:
        inkshape rasterize star 0 0 12 12 --filled
    """
    settings = InkshapeSettings()
    try:
        cells = rasterize(kind, r0, c0, r1, c1, filled=filled, config=settings.raster)
    except InkshapeError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(cells_to_json(cells))
        return
    print_cells(cells)


@app.command("outline")
def outline_command(
    kind: Annotated[str, typer.Argument(help=KIND_HELP, show_default=False)],
    x0: Annotated[float, typer.Argument(help="Drag start x", show_default=False)],
    y0: Annotated[float, typer.Argument(help="Drag start y", show_default=False)],
    x1: Annotated[float, typer.Argument(help="Drag end x", show_default=False)],
    y1: Annotated[float, typer.Argument(help="Drag end y", show_default=False)],
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print samples as JSON"),
    ] = False,
) -> None:
    """Print the vector outline of a shape dragged between two points.

    Example:
        inkshape outline circle 0 0 100 80
    """
    settings = InkshapeSettings()
    try:
        samples = shape_outline(kind, Point(x0, y0), Point(x1, y1), config=settings.outline)
    except InkshapeError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(outline_to_json(samples))
        return
    print_outline(samples)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
