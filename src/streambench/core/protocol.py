"""
Query operation protocol definition.

This module defines the QueryOperation interface that every benchmarked
operation satisfies, in both the pipeline and the loop style.
"""

from collections.abc import Sequence
from typing import Any, Protocol

from .model import Transaction


class QueryOperation(Protocol):
    """
    Protocol for a benchmarked query operation.

    Any callable taking the dataset as its first positional argument and
    returning a derived value satisfies this protocol. Operations with
    extra parameters (the composite aggregate) must give them defaults.

    Notes
    -----
    This is a Protocol class (PEP 544) for structural subtyping.
    Implementations must be pure: no side effects and no mutation of
    ``transactions``.
    """

    def __call__(self, transactions: Sequence[Transaction], /) -> Any:
        """
        Evaluate the operation over a dataset.

        Parameters
        ----------
        transactions : Sequence[Transaction]
            Read-only dataset.

        Returns
        -------
        Any
            A scalar, a list, a mapping, or None for the no-op visit.
        """
        ...
