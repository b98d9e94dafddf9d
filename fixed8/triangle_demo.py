"""Console demo of the point-in-triangle test with a small text plot."""

from __future__ import annotations

import argparse
import sys
from typing import Optional

from fixed8.ansi import Style, paint
from fixed8.bsp import bsp
from fixed8.point import Point

GRID_WIDTH = 10
GRID_HEIGHT = 10


def describe_point(a: Point, b: Point, c: Point, point: Point) -> str:
    """Return the point's coordinates and whether it lies inside ``abc``."""
    coordinates = f"({paint(f'{point.x},{point.y}', Style.BGRN)})"
    if bsp(a, b, c, point):
        verdict = paint("Point INSIDE Triangle ABC", Style.BGRN)
    else:
        verdict = paint("Point OUTSIDE Triangle ABC", Style.BRED)
    return f"{coordinates}\n{verdict}"


def render_grid(a: Point, b: Point, c: Point, point: Point) -> str:
    """Plot the vertices and the point on a 10x10 character grid.

    Positions use the integer parts of the coordinates, with y growing
    upwards. The point is drawn last, over any vertex it shares a cell
    with; anything falling outside the grid is not drawn.
    """
    grid = [[" "] * GRID_WIDTH for _ in range(GRID_HEIGHT)]
    for label, where in (("A", a), ("B", b), ("C", c), ("P", point)):
        column = where.x.to_int()
        row = GRID_HEIGHT - 1 - where.y.to_int()
        if 0 <= row < GRID_HEIGHT and 0 <= column < GRID_WIDTH:
            grid[row][column] = label
    return "\n".join("".join(row) for row in grid)


def _test_point(name: str, a: Point, b: Point, c: Point, point: Point) -> None:
    print(f"\nTesting Point {name}: ", end="")
    print(describe_point(a, b, c, point))
    print()
    print(paint("Triangle and Point Visualization:", Style.BBLU))
    print(render_grid(a, b, c, point))


def _section(title: str) -> None:
    print()
    print(paint(f"=== {title} ===", Style.BRED))


def main(argv: Optional[list[str]] = None) -> int:
    """Classify a fixed set of points against a right triangle."""
    parser = argparse.ArgumentParser(
        prog="fixed8-triangle",
        description="Test points against a triangle using fixed-point maths.",
    )
    parser.parse_args(argv)

    print(paint("\n========== BSP TESTING PROGRAM ==========", Style.RED))
    print()

    a = Point(0.0, 0.0)
    b = Point(0.0, 8.0)
    c = Point(8.0, 0.0)

    print(
        paint(
            f"Triangle A({a.x}, {a.y}), B({b.x}, {b.y}), C({c.x}, {c.y})",
            Style.WHTB,
        )
    )

    sections = (
        ("Testing Inside Points", (("Pd", Point(4.0, 3.0)),)),
        (
            "Testing Points on the Edges",
            (
                ("Pe", Point(4.0, 4.0)),
                ("Pf", Point(4.0183, 3.9)),
                ("Pg", Point(4.00389, 4.4035)),
            ),
        ),
        ("Testing Outside Points", (("Ph", Point(-4.00389, -4.4035)),)),
        (
            "Testing Points on Vertices",
            (
                ("Pi", Point(0.0, 0.0)),
                ("Pj", Point(0.0, 8.0)),
                ("Pk", Point(8.0, 0.0)),
            ),
        ),
    )
    for title, points in sections:
        _section(title)
        for name, point in points:
            _test_point(name, a, b, c, point)

    print("\n🎉 All BSP tests completed! 🎉")
    return 0


if __name__ == "__main__":
    sys.exit(main())