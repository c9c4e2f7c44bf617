"""Command-line interface for inkshape.

This module provides the CLI using Typer with rich output for
inspecting recognition and rasterization results.

Key features:
- Recognize strokes from JSON files or stdin
- Preview rasterized shapes as character grids
- Dump vector outlines
- JSON output for scripting
"""

from inkshape.cli.app import cli, main

__all__ = ["cli", "main"]
