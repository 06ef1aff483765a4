"""GoldenSpiral: Fibonacci golden-spiral geometry and animation engine."""

__version__ = "0.1.0"
