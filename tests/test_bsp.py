from itertools import permutations

import pytest

from fixed8.bsp import bsp
from fixed8.point import Point

A = Point(0.0, 0.0)
B = Point(0.0, 8.0)
C = Point(8.0, 0.0)


@pytest.mark.parametrize(
    "point, inside",
    [
        (Point(4.0, 3.0), True),
        (Point(4.0, 4.0), False),
        (Point(4.0183, 3.9), True),
        (Point(4.00389, 4.4035), False),
        (Point(-4.00389, -4.4035), False),
        (Point(0.0, 0.0), False),
        (Point(0.0, 8.0), False),
        (Point(8.0, 0.0), False),
    ],
)
def test_source_cases(point, inside):
    assert bsp(A, B, C, point) is inside


@pytest.mark.parametrize("order", list(permutations([A, B, C])))
def test_vertex_order_does_not_matter(order):
    a, b, c = order
    assert bsp(a, b, c, Point(4.0, 3.0)) is True
    assert bsp(a, b, c, Point(4.0, 4.0)) is False
    assert bsp(a, b, c, Point(9.0, 9.0)) is False


@pytest.mark.parametrize("vertex", [A, B, C])
def test_vertices_are_outside(vertex):
    assert bsp(A, B, C, vertex) is False


@pytest.mark.parametrize(
    "point",
    [Point(0.0, 4.0), Point(4.0, 0.0), Point(2.0, 6.0)],
)
def test_edge_points_are_outside(point):
    assert bsp(A, B, C, point) is False


def test_degenerate_triangle_contains_nothing():
    p1 = Point(0.0, 0.0)
    p2 = Point(2.0, 2.0)
    p3 = Point(4.0, 4.0)
    assert bsp(p1, p2, p3, Point(1.0, 1.0)) is False
    assert bsp(p1, p2, p3, Point(1.0, 2.0)) is False


def test_centroid_is_inside_arbitrary_triangle():
    a = Point(-3.0, 1.0)
    b = Point(5.0, -2.0)
    c = Point(1.0, 6.0)
    centroid = Point(1.0, 5.0 / 3.0)
    assert bsp(a, b, c, centroid) is True


def test_does_not_modify_inputs():
    point = Point(4.0, 3.0)
    bsp(A, B, C, point)
    assert point == Point(4.0, 3.0)
    assert A == Point(0.0, 0.0)