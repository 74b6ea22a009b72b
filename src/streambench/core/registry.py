"""
Registry of benchmarked operations.

Pairs each operation's pipeline and loop implementation and names the
resulting benchmarks ``"{style}_{operation}"``.
"""

import re
from collections.abc import Iterator
from typing import NamedTuple

from . import iterative, pipeline
from .protocol import QueryOperation

PIPELINE = "pipeline"
ITERATIVE = "iterative"
STYLES = (PIPELINE, ITERATIVE)


class OperationPair(NamedTuple):
    """Two equivalent implementations of one operation."""

    pipeline: QueryOperation
    iterative: QueryOperation


OPERATIONS: dict[str, OperationPair] = {
    name: OperationPair(getattr(pipeline, name), getattr(iterative, name))
    for name in (
        "for_each",
        "find_min_by_amount",
        "average_amount",
        "from_account_names",
        "filter_even_amount",
        "sort_by_from_name",
        "group_by_group",
        "aggregate_top_amounts",
    )
}


def benchmark_name(style: str, operation: str) -> str:
    return f"{style}_{operation}"


def iter_benchmarks(include: str | None = None) -> Iterator[tuple[str, str, str, QueryOperation]]:
    """
    Yield the registered benchmarks, optionally filtered by name.

    Parameters
    ----------
    include : str | None, optional
        Regular expression searched in each benchmark name; every
        benchmark is yielded when None, by default None.

    Yields
    ------
    tuple[str, str, str, QueryOperation]
        ``(name, style, operation, function)`` in registration order,
        pipeline style before loop style for each operation.

    Raises
    ------
    re.error
        If ``include`` is not a valid regular expression.
    """
    pattern = re.compile(include) if include else None
    for operation, pair in OPERATIONS.items():
        for style in STYLES:
            name = benchmark_name(style, operation)
            if pattern is None or pattern.search(name):
                yield name, style, operation, getattr(pair, style)
