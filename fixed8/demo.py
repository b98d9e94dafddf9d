"""Traced fixed-point values and the console demos built on them."""

from __future__ import annotations

import argparse
import sys
from contextlib import ExitStack
from typing import Optional, TextIO, Union

from fixed8.ansi import Style, paint
from fixed8.fixed import Fixed

_RULE = "====================================="
_LINE = "-------------------------------------"


class TracedFixed(Fixed):
    """A :class:`Fixed` that reports its life cycle and raw-bit access.

    Construction, copying, assignment and every read or write of ``raw``
    print a message to ``out``. Used as a context manager, leaving the
    ``with`` block reports the value's destruction.
    """

    __slots__ = ("_out",)

    def __init__(
        self,
        value: Optional[Union[int, float, Fixed]] = None,
        out: Optional[TextIO] = None,
    ) -> None:
        object.__setattr__(self, "_out", out)
        if isinstance(value, Fixed):
            self._say(Style.YEL, "📋 Copy constructor called")
            super().__init__(0)
            self.assign(value)
            return
        if value is None:
            super().__init__(0)
            self._say(Style.GRN, "✅ Default constructor called")
        elif isinstance(value, int):
            super().__init__(value)
            self._say(Style.GRN, "✅ Int constructor called")
        else:
            super().__init__(value)
            self._say(Style.GRN, "✅ Float constructor called")

    def _say(self, style: Style, message: str) -> None:
        print(paint(message, style), file=self._out or sys.stdout)

    @property
    def raw(self) -> int:
        """The underlying fixed-point integer, read with a trace message."""
        self._say(Style.CYN, "🔍 getRawBits member function called")
        return self._raw

    @raw.setter
    def raw(self, value: int) -> None:
        self._say(Style.MAG, "🛠️ setRawBits member function called")
        Fixed.raw.fset(self, value)

    def assign(self, other: Fixed) -> TracedFixed:
        """Copy the value of ``other`` into this one and return self."""
        self._say(Style.BLU, "📝 Copy assignment operator called")
        if other is not self:
            self._raw = other.raw
        return self

    def __enter__(self) -> TracedFixed:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self._say(Style.RED, "❌ Default destructor called")


def _out(out: Optional[TextIO]) -> TextIO:
    return out if out is not None else sys.stdout


def _print_header(out: TextIO) -> None:
    print(paint(_RULE, Style.BGRN), file=out)
    print(paint("    Fixed Point Number Class         ", Style.BLUHB), file=out)
    print(paint(_RULE, Style.BGRN), file=out)
    print(file=out)


def _print_separator(out: TextIO) -> None:
    print(file=out)
    print(paint(_LINE, Style.WHT), file=out)
    print(file=out)


def _banner(out: TextIO, title: str, style: Style = Style.YELHB) -> None:
    print(paint(title, style), file=out)
    _print_separator(out)


def _raw_subject_tests(out: TextIO) -> None:
    _banner(out, "            Subject Tests            ")
    with ExitStack() as scope:
        a = scope.enter_context(TracedFixed(out=out))
        b = scope.enter_context(TracedFixed(a, out=out))
        c = scope.enter_context(TracedFixed(out=out))
        c.assign(b)
        for value in (a, b, c):
            bits = value.raw
            print(bits, file=out)


def _copy_constructor_test(out: TextIO) -> None:
    _banner(out, " 🧪 Test 1: Copy Constructor", Style.CYNHB)
    with ExitStack() as scope:
        original = scope.enter_context(TracedFixed(out=out))
        original.raw = 42
        copy = scope.enter_context(TracedFixed(original, out=out))
        bits = original.raw
        print(f"Original raw bits: {bits}", file=out)
        bits = copy.raw
        print(f"Copy     raw bits: {bits}", file=out)


def _copy_assignment_test(out: TextIO) -> None:
    _banner(out, " 🧪 Test 2: Copy Assignment", Style.CYNHB)
    with ExitStack() as scope:
        a = scope.enter_context(TracedFixed(out=out))
        a.raw = 123
        b = scope.enter_context(TracedFixed(out=out))
        b.assign(a)
        bits = a.raw
        print(f"a raw bits: {bits}", file=out)
        bits = b.raw
        print(f"b raw bits: {bits}", file=out)


def _independence_test(out: TextIO) -> None:
    _banner(out, " 🧪 Test 3: Independence After Copy", Style.CYNHB)
    with ExitStack() as scope:
        x = scope.enter_context(TracedFixed(out=out))
        x.raw = 1000
        y = scope.enter_context(TracedFixed(x, out=out))
        z = scope.enter_context(TracedFixed(out=out))
        z.assign(x)

        x.raw = 1
        y.raw = 2
        z.raw = 3

        for name, value, expected in (("x", x, 1), ("y", y, 2), ("z", z, 3)):
            bits = value.raw
            print(f"{name} raw bits (should be {expected}): {bits}", file=out)


def run_raw_bits_demo(out: Optional[TextIO] = None) -> None:
    """Exercise construction, copying and raw-bit access of traced values."""
    out = _out(out)
    _print_separator(out)
    _raw_subject_tests(out)
    _print_separator(out)

    _banner(out, "          Additional Tests           ")

    _copy_constructor_test(out)
    _print_separator(out)
    _copy_assignment_test(out)
    _print_separator(out)
    _independence_test(out)
    _print_separator(out)


def _conversion_subject_tests(out: TextIO) -> None:
    _banner(out, "            Subject Tests            ")
    with ExitStack() as scope:
        a = scope.enter_context(TracedFixed(out=out))
        b = scope.enter_context(TracedFixed(10, out=out))
        c = scope.enter_context(TracedFixed(42.42, out=out))
        d = scope.enter_context(TracedFixed(b, out=out))

        with TracedFixed(1234.4321, out=out) as temporary:
            a.assign(temporary)

        named = (("a", a), ("b", b), ("c", c), ("d", d))
        for name, value in named:
            print(f"{name} is {value}", file=out)
        for name, value in named:
            print(f"{name} is {value.to_int()} as integer", file=out)


def _conversion_additional_tests(out: TextIO) -> None:
    _banner(out, "          Additional Tests           ")
    with ExitStack() as scope:
        a = scope.enter_context(TracedFixed(out=out))
        b = scope.enter_context(TracedFixed(0, out=out))
        c = scope.enter_context(TracedFixed(100, out=out))
        d = scope.enter_context(TracedFixed(-42, out=out))
        e = scope.enter_context(TracedFixed(3.14159, out=out))
        f = scope.enter_context(TracedFixed(-123.456, out=out))
        g = scope.enter_context(TracedFixed(b, out=out))
        h = scope.enter_context(TracedFixed(out=out))
        h.assign(c)

        with TracedFixed(1.5, out=out) as temporary:
            a.assign(temporary)

        labelled = (
            ("a", a),
            ("b", b),
            ("c", c),
            ("d", d),
            ("e", e),
            ("f", f),
            ("g (copy of b)", g),
            ("h (assigned from c)", h),
        )
        for label, value in labelled:
            print(
                f"{label} is {value} | as int: {value.to_int()}"
                f" | as float: {value}",
                file=out,
            )


def run_conversion_demo(out: Optional[TextIO] = None) -> None:
    """Exercise int and float construction and conversion of traced values."""
    out = _out(out)
    _print_separator(out)
    _conversion_subject_tests(out)
    _print_separator(out)
    _conversion_additional_tests(out)
    _print_separator(out)


def main(argv: Optional[list[str]] = None) -> int:
    """Run the selected demo (both by default) and report success."""
    parser = argparse.ArgumentParser(
        prog="fixed8-demo",
        description="Show the life cycle and conversions of fixed-point values.",
    )
    parser.add_argument(
        "demo",
        nargs="?",
        choices=("raw", "conversion", "all"),
        default="all",
        help="which demo to run",
    )
    args = parser.parse_args(argv)

    out = sys.stdout
    _print_header(out)
    if args.demo in ("raw", "all"):
        run_raw_bits_demo(out)
    if args.demo in ("conversion", "all"):
        run_conversion_demo(out)
    print(paint(" 🎉 Success! All tests completed! 🎉", Style.GRNHB), file=out)
    _print_separator(out)
    return 0


if __name__ == "__main__":
    sys.exit(main())