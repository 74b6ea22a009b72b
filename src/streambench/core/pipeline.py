"""
Pipeline-style query operations.

Each operation is a chain of transformation stages (map, filter, sorted,
islice, reduce) with no explicit loop control. The functions mirror
``core.iterative`` one to one and must return equal results for any input.
"""

import operator
from collections import deque
from collections.abc import Sequence
from functools import reduce
from itertools import groupby, islice

from .errors import EmptyDatasetError
from .model import Transaction, amount_key, from_name_key, is_even_amount

_get_amount = operator.attrgetter("amount")
_get_from_account = operator.attrgetter("from_account")
_get_group = operator.attrgetter("group")


def _ignore(_: Transaction) -> None:
    return None


def for_each(transactions: Sequence[Transaction]) -> None:
    """Visit every record once, doing nothing with it."""
    deque(map(_ignore, transactions), maxlen=0)


def find_min_by_amount(transactions: Sequence[Transaction]) -> Transaction:
    """
    Return the record with the smallest amount.

    Raises
    ------
    EmptyDatasetError
        If ``transactions`` is empty.
    """
    if not transactions:
        raise EmptyDatasetError("find_min_by_amount")
    return min(transactions, key=amount_key)


def average_amount(transactions: Sequence[Transaction]) -> float:
    """
    Return the arithmetic mean of all amounts.

    Raises
    ------
    EmptyDatasetError
        If ``transactions`` is empty.
    """
    if not transactions:
        raise EmptyDatasetError("average_amount")
    return reduce(operator.add, map(_get_amount, transactions), 0.0) / len(transactions)


def from_account_names(transactions: Sequence[Transaction]) -> list[str]:
    return list(map(_get_from_account, transactions))


def filter_even_amount(transactions: Sequence[Transaction]) -> list[Transaction]:
    return list(filter(is_even_amount, transactions))


def sort_by_from_name(transactions: Sequence[Transaction]) -> list[Transaction]:
    return sorted(transactions, key=from_name_key)


def group_by_group(transactions: Sequence[Transaction]) -> dict[str, list[Transaction]]:
    """
    Bucket records by group label.

    The stable sort keeps input order within each bucket.
    """
    return {label: list(bucket) for label, bucket in groupby(sorted(transactions, key=_get_group), key=_get_group)}


def aggregate_top_amounts(transactions: Sequence[Transaction], group: str = "Group2", limit: int = 3) -> float:
    """
    Sum the amounts of the first ``limit`` even-amount records of a group.

    Parameters
    ----------
    transactions : Sequence[Transaction]
        Dataset to aggregate.
    group : str, optional
        Group label to keep, by default "Group2".
    limit : int, optional
        Maximum number of records to sum after sorting by from-account
        name, by default 3.

    Returns
    -------
    float
        Sum of at most ``limit`` amounts, 0.0 when nothing qualifies.

    Raises
    ------
    ValueError
        If ``limit`` is negative.
    """
    if limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")
    selected = sorted(
        filter(lambda t: t.group == group, filter(is_even_amount, transactions)),
        key=from_name_key,
    )
    return reduce(operator.add, map(_get_amount, islice(selected, limit)), 0.0)
