"""
Loop-style query operations.

Explicit iteration with manual accumulation. Every function here has a
pipeline-style twin in ``core.pipeline`` with the same name, signature and
result.
"""

import functools
from collections.abc import Sequence

from .errors import EmptyDatasetError
from .model import Transaction, amount_key, compare_by_from_name, is_even_amount

_by_from_name = functools.cmp_to_key(compare_by_from_name)


def for_each(transactions: Sequence[Transaction]) -> None:
    for _ in transactions:
        pass


def find_min_by_amount(transactions: Sequence[Transaction]) -> Transaction:
    """
    Return the record with the smallest amount.

    Only a strictly smaller key replaces the current candidate, so the first
    of several tied records wins.

    Raises
    ------
    EmptyDatasetError
        If ``transactions`` is empty.
    """
    minimum = None
    minimum_key = None
    for transaction in transactions:
        key = amount_key(transaction)
        if minimum is None or key < minimum_key:
            minimum = transaction
            minimum_key = key
    if minimum is None:
        raise EmptyDatasetError("find_min_by_amount")
    return minimum


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
    total = 0.0
    for transaction in transactions:
        total += transaction.amount
    return total / len(transactions)


def from_account_names(transactions: Sequence[Transaction]) -> list[str]:
    names = []
    for transaction in transactions:
        names.append(transaction.from_account)
    return names


def filter_even_amount(transactions: Sequence[Transaction]) -> list[Transaction]:
    evens = []
    for transaction in transactions:
        if is_even_amount(transaction):
            evens.append(transaction)
    return evens


def sort_by_from_name(transactions: Sequence[Transaction]) -> list[Transaction]:
    """Return a sorted copy; the input sequence is left untouched."""
    replica = list(transactions)
    replica.sort(key=_by_from_name)
    return replica


def group_by_group(transactions: Sequence[Transaction]) -> dict[str, list[Transaction]]:
    groups = {}
    for transaction in transactions:
        if transaction.group in groups:
            groups[transaction.group].append(transaction)
        else:
            groups[transaction.group] = [transaction]
    return groups


def aggregate_top_amounts(transactions: Sequence[Transaction], group: str = "Group2", limit: int = 3) -> float:
    """
    Sum the amounts of the first ``limit`` even-amount records of a group.

    Fewer than ``limit`` qualifying records are summed as they are; an
    empty selection gives 0.0.

    Raises
    ------
    ValueError
        If ``limit`` is negative.
    """
    if limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")
    selected = []
    for transaction in transactions:
        if transaction.group == group and is_even_amount(transaction):
            selected.append(transaction)
    selected.sort(key=_by_from_name)

    total = 0.0
    for transaction in selected[: min(limit, len(selected))]:
        total += transaction.amount
    return total
