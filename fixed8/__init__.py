"""Fixed-point numbers with 8 fractional bits, immutable points, a point-in-triangle test and console demos."""

__version__ = "1.0.0"