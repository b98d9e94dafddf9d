"""Point-in-triangle test on fixed-point coordinates."""

from __future__ import annotations

from fixed8.fixed import Fixed
from fixed8.point import Point


def _edge_side(point: Point, start: Point, end: Point) -> Fixed:
    """Signed area telling which side of the edge ``end -> start`` ``point`` lies on."""
    return (point.x - end.x) * (start.y - end.y) - (start.x - end.x) * (point.y - end.y)


def bsp(a: Point, b: Point, c: Point, point: Point) -> bool:
    """Return True if ``point`` lies strictly inside triangle ``abc``.

    Points on an edge or a vertex count as outside.
    """
    d1 = _edge_side(point, a, b)
    d2 = _edge_side(point, b, c)
    d3 = _edge_side(point, c, a)

    all_negative = d1 < 0 and d2 < 0 and d3 < 0
    all_positive = d1 > 0 and d2 > 0 and d3 > 0
    return all_negative or all_positive