"""Immutable two-dimensional points with fixed-point coordinates."""

from __future__ import annotations

from typing import Union

from fixed8.fixed import Fixed

Coordinate = Union[int, float, Fixed]


class Point:
    """A point whose coordinates are :class:`Fixed` values fixed at creation.

    The coordinates are read through the ``x`` and ``y`` properties, which
    hand out copies so the point itself can never change.
    """

    __slots__ = ("_x", "_y")

    def __init__(self, x: Coordinate = 0, y: Coordinate = 0) -> None:
        object.__setattr__(self, "_x", Fixed(x))
        object.__setattr__(self, "_y", Fixed(y))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def x(self) -> Fixed:
        """A copy of the x coordinate."""
        return Fixed(self._x)

    @property
    def y(self) -> Fixed:
        """A copy of the y coordinate."""
        return Fixed(self._y)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self._x.raw == other._x.raw and self._y.raw == other._y.raw

    def __hash__(self) -> int:
        return hash((self._x.raw, self._y.raw))

    def __repr__(self) -> str:
        return f"Point({self._x}, {self._y})"

    def __str__(self) -> str:
        return f"({self._x}, {self._y})"