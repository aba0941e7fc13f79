"""Numeric toolkit: a 24 game solver, fractions, big integers, byte arithmetic and expression graphs."""

__version__ = "0.1.0"

__all__ = ["bytenum", "calculate24", "fraction", "integer", "mathfunc"]