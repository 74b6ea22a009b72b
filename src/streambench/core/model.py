"""
Pydantic data model for benchmark transactions.

This module defines the immutable Transaction record shared by every
query operation, along with the two ordering relations used for sorting
and minimum search.
"""

import math
from datetime import datetime

from pydantic import BaseModel, ConfigDict


class Transaction(BaseModel):
    """
    Immutable financial transfer record.

    Attributes
    ----------
    from_account : str
        Source account identifier.
    to_account : str
        Destination account identifier.
    amount : float
        Transfer amount. Any float is accepted, including negative,
        zero and non-finite values.
    timestamp : datetime
        Point in time of the transfer.
    group : str
        Small-cardinality label used for grouping.

    Notes
    -----
    The model is frozen: assigning to a field raises ``ValidationError``.
    Frozen models are hashable, so records can be counted or used as keys.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    from_account: str
    to_account: str
    amount: float
    timestamp: datetime
    group: str


def from_name_key(transaction: Transaction) -> str:
    """Sort key for the case-insensitive by-from-account-name ordering."""
    return transaction.from_account.upper()


def amount_key(transaction: Transaction) -> tuple[bool, float]:
    """
    Sort key for the by-amount ordering.

    Parameters
    ----------
    transaction : Transaction
        Record to build the key for.

    Returns
    -------
    tuple[bool, float]
        ``(is_nan, amount)``. NaN amounts sort after every number and
        compare equal to each other, which keeps the ordering total.
    """
    return math.isnan(transaction.amount), transaction.amount


def _compare(left, right) -> int:
    if left < right:
        return -1
    if right < left:
        return 1
    return 0


def compare_by_from_name(first: Transaction, second: Transaction) -> int:
    """Three-way comparator matching ``from_name_key``."""
    return _compare(from_name_key(first), from_name_key(second))


def compare_by_amount(first: Transaction, second: Transaction) -> int:
    """Three-way comparator matching ``amount_key``."""
    return _compare(amount_key(first), amount_key(second))


def is_even_amount(transaction: Transaction) -> bool:
    """
    Check whether a transaction amount is an even number.

    Uses the floored float remainder of ``%``. For the zero test this gives
    the same answer as the truncating remainder of ``math.fmod``: both are
    exactly zero for the same inputs. Fractional, NaN and infinite amounts
    are never even.
    """
    return transaction.amount % 2 == 0
