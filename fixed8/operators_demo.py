"""Console demo of fixed-point arithmetic, comparison and stepping."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, TextIO

from fixed8.ansi import Style, paint
from fixed8.fixed import Fixed

_RULE = "====================================="
_LINE = "-------------------------------------"


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


def _flag(value: bool) -> int:
    """Booleans are shown as 1 and 0."""
    return int(value)


def run_subject_tests(out: Optional[TextIO] = None) -> None:
    """Print the reference sequence of increments, a product and a maximum."""
    out = _out(out)
    print(paint("            Subject Tests            ", Style.YELHB), file=out)
    _print_separator(out)

    a = Fixed()
    b = Fixed(5.05) * Fixed(2)

    print(a, file=out)
    print(a.increment(), file=out)
    print(a, file=out)
    print(a.post_increment(), file=out)
    print(a, file=out)

    print(b, file=out)

    print(Fixed.max(a, b), file=out)


def run_additional_tests(out: Optional[TextIO] = None) -> None:
    """Print conversions, arithmetic, comparisons, min/max and stepping."""
    out = _out(out)
    print(paint("          Additional Tests           ", Style.YELHB), file=out)
    _print_separator(out)

    a = Fixed(1.5)
    b = Fixed(0)
    c = Fixed(100)
    d = Fixed(-42)
    e = Fixed(3.14159)
    f = Fixed(-123.456)
    g = Fixed(b)
    h = Fixed(c)

    print("\n❓ Object States:", file=out)
    for name, value in (("a", a), ("b", b), ("c", c), ("d", d), ("e", e), ("f", f)):
        print(
            f"{name}: {value} (as int: {value.to_int()}, as float: {value})",
            file=out,
        )
    print(f"g (copy of b): {g}", file=out)
    print(f"h (assigned from c): {h}", file=out)

    _print_separator(out)

    print("\n❓ Arithmetic Operations:", file=out)
    print(f"a + e = {a + e}", file=out)
    print(f"c - d = {c - d}", file=out)
    print(f"e * a = {e * a}", file=out)
    print(f"c / a = {c / a}", file=out)

    _print_separator(out)

    print("\n❓ Comparison Operations:", file=out)
    print(f"a > b: {_flag(a > b)}", file=out)
    print(f"a < b: {_flag(a < b)}", file=out)
    print(f"a == g: {_flag(a == g)}", file=out)
    print(f"h >= c: {_flag(h >= c)}", file=out)
    print(f"f != d: {_flag(f != d)}", file=out)

    _print_separator(out)

    print("\n❓ Min/Max Functions:", file=out)
    print(f"min(a, e): {Fixed.min(a, e)}", file=out)
    print(f"max(c, d): {Fixed.max(c, d)}", file=out)

    _print_separator(out)

    print("\n❓ Increment/Decrement:", file=out)
    print(f"a: {a}", file=out)
    print(f"++a: {a.increment()}", file=out)
    print(f"a++: {a.post_increment()}", file=out)
    print(f"a after a++: {a}", file=out)
    print(f"--a: {a.decrement()}", file=out)
    print(f"a--: {a.post_decrement()}", file=out)
    print(f"a after a--: {a}", file=out)


def main(argv: Optional[list[str]] = None) -> int:
    """Run both operator demos and report success."""
    parser = argparse.ArgumentParser(
        prog="fixed8-operators",
        description="Show arithmetic and comparison of fixed-point values.",
    )
    parser.parse_args(argv)

    out = sys.stdout
    _print_header(out)

    _print_separator(out)
    run_subject_tests(out)
    _print_separator(out)

    run_additional_tests(out)
    _print_separator(out)

    print(paint(" 🎉 Success! All tests completed! 🎉", Style.GRNHB), file=out)
    _print_separator(out)
    return 0


if __name__ == "__main__":
    sys.exit(main())