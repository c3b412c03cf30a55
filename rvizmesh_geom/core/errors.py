from __future__ import annotations


class GeometryError(ValueError):
    """
    Base class for refused geometry requests.

    Raised before any vertex is computed, so no partial mesh ever escapes.
    """


class NotClockwiseError(GeometryError):
    """Footprint winding failed the clockwise test."""


class TooFewVerticesError(GeometryError):
    """Footprint has fewer than 3 points."""

    def __init__(self, n_points: int):
        super().__init__(f"Polygon needs at least 3 points, got {n_points}")
        self.n_points = n_points
