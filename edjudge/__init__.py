"""Classic data structures and judge-style exercise solvers."""

__version__ = "0.1.0"