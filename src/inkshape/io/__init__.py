"""Stroke input and result output for the command line.

Key functions:
- read_strokes: Load strokes from a JSON file or stdin
- parse_strokes: Parse strokes from JSON text
- results_to_json: Serialize recognition results
"""

from inkshape.io.reader import parse_strokes, read_strokes
from inkshape.io.writer import cells_to_json, outline_to_json, results_to_json

__all__ = [
    "cells_to_json",
    "outline_to_json",
    "parse_strokes",
    "read_strokes",
    "results_to_json",
]
