"""Pixel-grid rasterization of idealized shapes.

Every function takes two integer grid corners ``(r0, c0)`` and ``(r1, c1)``
given as row/column and returns a fresh list of ``(row, col)`` cells.
Duplicate cells may appear; callers paint cells, which is idempotent.

Degenerate boxes never fail: an oval or star with no width or no height
falls back to the straight line between the two corners.
"""

import math
from collections.abc import Callable, Sequence

from inkshape.config import RasterConfig
from inkshape.domain import ShapeKind
from inkshape.exceptions import DegenerateStrokeError

Cell = tuple[int, int]

_DEFAULT_CONFIG = RasterConfig()


def _round(value: float) -> int:
    """Round half away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def rasterize_line(r0: int, c0: int, r1: int, c1: int) -> list[Cell]:
    """Bresenham line from (r0, c0) to (r1, c1), both endpoints included.

    Consecutive cells are 8-connected. Identical endpoints give one cell.
    """
    cells: list[Cell] = []
    x, y = c0, r0
    dx = abs(c1 - c0)
    dy = -abs(r1 - r0)
    sx = 1 if c0 < c1 else -1
    sy = 1 if r0 < r1 else -1
    err = dx + dy

    while True:
        cells.append((y, x))
        if x == c1 and y == r1:
            break
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x += sx
        if e2 <= dx:
            err += dx
            y += sy

    return cells


def rasterize_polyline(vertices: Sequence[Cell], closed: bool = False) -> list[Cell]:
    """Bresenham segments joining consecutive vertices.

    Args:
        vertices: (row, col) vertices, at least two
        closed: Also join the last vertex back to the first

    Raises:
        DegenerateStrokeError: If fewer than two vertices are given
    """
    if len(vertices) < 2:
        raise DegenerateStrokeError(len(vertices))

    pairs = list(zip(vertices, vertices[1:]))
    if closed:
        pairs.append((vertices[-1], vertices[0]))

    cells: list[Cell] = []
    for (ra, ca), (rb, cb) in pairs:
        cells.extend(rasterize_line(ra, ca, rb, cb))
    return cells


def rasterize_rectangle(r0: int, c0: int, r1: int, c1: int, filled: bool = False) -> list[Cell]:
    """Rectangle between two corners, outlined or filled.

    The outline is the full top and bottom rows plus the left and right
    columns of the rows in between.
    """
    min_r, max_r = min(r0, r1), max(r0, r1)
    min_c, max_c = min(c0, c1), max(c0, c1)

    if filled:
        return [(r, c) for r in range(min_r, max_r + 1) for c in range(min_c, max_c + 1)]

    cells: list[Cell] = []
    for c in range(min_c, max_c + 1):
        cells.append((min_r, c))
        cells.append((max_r, c))
    for r in range(min_r + 1, max_r):
        cells.append((r, min_c))
        cells.append((r, max_c))
    return cells


def _equal_sided_corner(r0: int, c0: int, r1: int, c1: int) -> Cell:
    """Far corner of the largest equal-sided box anchored at (r0, c0).

    The side is the smaller of the two drag extents; each axis keeps the
    direction it was dragged in.
    """
    dr = r1 - r0
    dc = c1 - c0
    side = min(abs(dr), abs(dc))
    return (r0 + (side if dr >= 0 else -side), c0 + (side if dc >= 0 else -side))


def rasterize_square(r0: int, c0: int, r1: int, c1: int, filled: bool = False) -> list[Cell]:
    """Square anchored at (r0, c0), sized by the smaller drag extent."""
    r_end, c_end = _equal_sided_corner(r0, c0, r1, c1)
    return rasterize_rectangle(r0, c0, r_end, c_end, filled)


def rasterize_oval(
    r0: int,
    c0: int,
    r1: int,
    c1: int,
    filled: bool = False,
    config: RasterConfig | None = None,
) -> list[Cell]:
    """Ellipse inscribed in the box between two corners.

    Filled ovals are scanned row by row: each row covers the integer
    columns inside the ellipse's horizontal half-span at that row.
    Outlines sample the parametric ellipse densely and round each sample
    to the nearest cell.
    """
    config = config or _DEFAULT_CONFIG
    min_r, max_r = min(r0, r1), max(r0, r1)
    min_c, max_c = min(c0, c1), max(c0, c1)
    cx = (min_c + max_c) / 2.0
    cy = (min_r + max_r) / 2.0
    a = (max_c - min_c) / 2.0
    b = (max_r - min_r) / 2.0

    if a <= 0 or b <= 0:
        return rasterize_line(r0, c0, r1, c1)

    cells: list[Cell] = []

    if filled:
        for r in range(min_r, max_r + 1):
            dy = r - cy
            term = 1.0 - (dy * dy) / (b * b)
            if term < 0:
                continue
            span = a * math.sqrt(term)
            left = math.ceil(cx - span)
            right = math.floor(cx + span)
            cells.extend((r, c) for c in range(left, right + 1))
        return cells

    steps = max(config.oval_min_steps, int((a + b) * config.oval_steps_per_unit))
    for i in range(steps):
        t = i / steps * 2.0 * math.pi
        cells.append((_round(cy + b * math.sin(t)), _round(cx + a * math.cos(t))))
    return cells


def rasterize_circle(
    r0: int,
    c0: int,
    r1: int,
    c1: int,
    filled: bool = False,
    config: RasterConfig | None = None,
) -> list[Cell]:
    """Circle anchored at (r0, c0), sized by the smaller drag extent."""
    r_end, c_end = _equal_sided_corner(r0, c0, r1, c1)
    return rasterize_oval(r0, c0, r_end, c_end, filled, config)


def star_vertices(
    r0: int,
    c0: int,
    r1: int,
    c1: int,
    inner_ratio: float = 0.4,
) -> list[Cell]:
    """The 10 alternating outer/inner vertices of a 5-pointed star.

    The first vertex is the top point. Horizontal and vertical radii follow
    the box's width and height independently, so the star stretches with
    the box.
    """
    min_r, max_r = float(min(r0, r1)), float(max(r0, r1))
    min_c, max_c = float(min(c0, c1)), float(max(c0, c1))
    cx = (min_c + max_c) / 2.0
    cy = (min_r + max_r) / 2.0
    rx = (max_c - min_c) / 2.0
    ry = (max_r - min_r) / 2.0

    vertices: list[Cell] = []
    for i in range(10):
        angle = -math.pi / 2.0 + i * math.pi / 5.0
        scale = 1.0 if i % 2 == 0 else inner_ratio
        px = cx + rx * scale * math.cos(angle)
        py = cy + ry * scale * math.sin(angle)
        vertices.append((_round(py), _round(px)))
    return vertices


def fill_polygon(vertices: Sequence[Cell]) -> list[Cell]:
    """Even-odd scanline fill of a closed polygon given as (row, col) vertices.

    Each row collects the columns where it crosses polygon edges (an edge
    counts when the row lies in ``[low, high)`` of its row range), sorts
    them, and fills the integer columns between successive pairs.
    """
    if not vertices:
        return []

    rows = [r for r, _ in vertices]
    cells: list[Cell] = []
    n = len(vertices)

    for row in range(min(rows), max(rows) + 1):
        y = float(row)
        crossings: list[float] = []
        for i in range(n):
            r_i, c_i = vertices[i]
            r_j, c_j = vertices[(i + 1) % n]
            if (r_i <= y < r_j) or (r_j <= y < r_i):
                t = (y - r_i) / (r_j - r_i)
                crossings.append(c_i + t * (c_j - c_i))
        crossings.sort()

        for left, right in zip(crossings[::2], crossings[1::2]):
            cells.extend((row, c) for c in range(math.ceil(left), math.floor(right) + 1))

    return cells


def rasterize_star(
    r0: int,
    c0: int,
    r1: int,
    c1: int,
    filled: bool = False,
    config: RasterConfig | None = None,
) -> list[Cell]:
    """5-pointed star inscribed in the box between two corners."""
    config = config or _DEFAULT_CONFIG
    if min(r0, r1) == max(r0, r1) or min(c0, c1) == max(c0, c1):
        return rasterize_line(r0, c0, r1, c1)

    vertices = star_vertices(r0, c0, r1, c1, config.star_inner_ratio)
    if filled:
        return fill_polygon(vertices)
    return rasterize_polyline(vertices, closed=True)


def _line(r0: int, c0: int, r1: int, c1: int, filled: bool, config: RasterConfig) -> list[Cell]:
    return rasterize_line(r0, c0, r1, c1)


def _rectangle(r0: int, c0: int, r1: int, c1: int, filled: bool, config: RasterConfig) -> list[Cell]:
    return rasterize_rectangle(r0, c0, r1, c1, filled)


def _square(r0: int, c0: int, r1: int, c1: int, filled: bool, config: RasterConfig) -> list[Cell]:
    return rasterize_square(r0, c0, r1, c1, filled)


_RASTERIZERS: dict[ShapeKind, Callable[[int, int, int, int, bool, RasterConfig], list[Cell]]] = {
    ShapeKind.LINE: _line,
    ShapeKind.RECTANGLE: _rectangle,
    ShapeKind.SQUARE: _square,
    ShapeKind.CIRCLE: rasterize_circle,
    ShapeKind.OVAL: rasterize_oval,
    ShapeKind.STAR: rasterize_star,
}


def rasterize(
    kind: ShapeKind | str,
    r0: int,
    c0: int,
    r1: int,
    c1: int,
    filled: bool = False,
    config: RasterConfig | None = None,
) -> list[Cell]:
    """Rasterize an idealized shape between two grid corners.

    Args:
        kind: Shape to draw (a ShapeKind or its string value)
        r0: Anchor row
        c0: Anchor column
        r1: Opposite row
        c1: Opposite column
        filled: Fill the interior (ignored for lines)
        config: Rasterization settings (defaults if None)

    Returns:
        List of (row, col) cells

    Raises:
        UnknownShapeKindError: If ``kind`` names no shape
    """
    shape = ShapeKind.parse(kind)
    filled = filled and shape.fillable
    return _RASTERIZERS[shape](r0, c0, r1, c1, filled, config or _DEFAULT_CONFIG)
