# fixed8

`fixed8` is a small fixed-point number type. Values are stored as a signed
32-bit whole number of 1/256ths (8 fractional bits), so they are exact for
many decimal-looking values and predictable for all of them.

On top of the number type the package provides an immutable 2D `Point`
and `bsp`, which tells whether a point lies strictly inside a triangle.
Three console commands show the pieces at work.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## The `Fixed` type

```python
from fixed8.fixed import Fixed

a = Fixed(10)            # from an int, shifted into place
b = Fixed(1.5)           # from a float, rounded to the nearest 1/256
c = Fixed.from_raw(384)  # from the raw stored value: 384 / 256 == 1.5
d = Fixed(b)             # a copy of another Fixed

assert a.to_int() == 10
assert b.to_float() == 1.5
assert b == c
assert c.raw == 384
```

- `raw` is the stored integer; setting it wraps the value into the signed
  32-bit range.
- `to_int()` gives the integer part, rounded towards negative infinity;
  `to_float()` gives the value as a single-precision float. `int()` and
  `float()` do the same.
- `str()` prints the value with up to six significant digits.

Comparisons (`<`, `<=`, `>`, `>=`, `==`, `!=`) use the raw bits. The
arithmetic operators `+`, `-`, `*` and `/` are carried out in single
precision and the result is rounded back onto the 1/256 grid. Plain ints
and floats are accepted on either side and converted to `Fixed` first.
Dividing by zero raises `ZeroDivisionError`.

```python
assert (Fixed(2) * Fixed(3)).to_int() == 6
assert Fixed(100) > Fixed(-42)
```

Stepping moves a value by the smallest representable amount, 1/256:

- `increment()` and `decrement()` change the value and return it;
- `post_increment()` and `post_decrement()` change the value and return a
  copy of what it was before.

Because stepping changes a value in place, `Fixed` values are not hashable.

`Fixed.min(a, b)` and `Fixed.max(a, b)` return one of their two
arguments; on a tie the second one is returned.

`format_float(value)` renders a number the way the demos print it: up to
six significant digits with trailing zeros removed.

## Points and the triangle test

```python
from fixed8.point import Point
from fixed8.bsp import bsp

a, b, c = Point(0, 0), Point(0, 8), Point(8, 0)

assert bsp(a, b, c, Point(4, 3))        # inside
assert not bsp(a, b, c, Point(4, 4))    # on an edge counts as outside
assert not bsp(a, b, c, Point(0, 0))    # so does a vertex
```

A `Point` takes ints, floats or `Fixed` values and cannot be changed after
creation; its `x` and `y` properties hand out copies of the coordinates.
Points compare equal when their raw coordinates do and can be hashed.
Since coordinates are held as `Fixed`, points that differ by less than
1/256 may compare alike.

## Terminal colours

`fixed8.ansi.Style` is an enum of ANSI escape sequences (regular, bold,
underlined, background and high-intensity colours, and `RESET`).
`paint(text, style)` wraps text in a style and a reset; `style` may be a
`Style` member or its name, and an unknown name raises `ValueError`.

## Demo commands

Three commands walk through the package and print coloured output:

```
fixed8-demo [raw|conversion|all]   # construction, copying, raw bits and conversions
fixed8-operators                   # comparisons, arithmetic, min/max and stepping
fixed8-triangle                    # the triangle test on a set of points, with a 10x10 grid drawing
```

`fixed8-demo` runs both of its demos unless one is named. It uses
`fixed8.demo.TracedFixed`, a `Fixed` that prints a message on every
construction, copy, assignment (`assign()`) and read or write of `raw`,
and a destruction message when used as a context manager and its `with`
block ends. The demos can also be run on any text stream through
`run_raw_bits_demo(out)`, `run_conversion_demo(out)`,
`fixed8.operators_demo.run_subject_tests(out)` and
`fixed8.operators_demo.run_additional_tests(out)`.
`fixed8.triangle_demo` offers `describe_point(a, b, c, point)` and
`render_grid(a, b, c, point)`, which return the text they would print.