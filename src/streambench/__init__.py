"""Microbenchmarks comparing pipeline-style and loop-style queries over transaction records."""

__version__ = "0.1.0"
