"""Exception hierarchy for Inkshape."""


class InkshapeError(Exception):
    """Base exception for all Inkshape errors."""

    pass


class GeometryError(InkshapeError):
    """Errors in geometric inputs or calculations."""

    pass


class DegenerateStrokeError(GeometryError):
    """A stroke or polyline has too few points for the requested operation."""

    def __init__(self, point_count: int, required: int = 2) -> None:
        self.point_count = point_count
        self.required = required
        super().__init__(
            f"Expected at least {required} points, got {point_count}"
        )


class UnknownShapeKindError(InkshapeError):
    """A shape kind outside the supported vocabulary was requested."""

    def __init__(self, kind: object) -> None:
        self.kind = kind
        super().__init__(f"Unknown shape kind: {kind!r}")


class StrokeInputError(InkshapeError):
    """Errors related to reading stroke input."""

    pass


class StrokeLoadError(StrokeInputError):
    """Error loading a stroke file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load strokes from '{path}': {reason}")


class StrokeFormatError(StrokeInputError):
    """Stroke input is not in a recognized layout."""

    def __init__(self, details: str) -> None:
        self.details = details
        super().__init__(f"Invalid stroke data: {details}")
