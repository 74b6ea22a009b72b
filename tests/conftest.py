"""Pytest configuration and shared fixtures for streambench tests."""

import sys
from datetime import datetime
from pathlib import Path

import pytest

# Add src directory to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from streambench.core.model import Transaction  # noqa: E402

FIXED_TIME = datetime(2026, 1, 11, 10, 0, 0)


def make_transaction(from_account: str, amount: float, group: str, to_account: str = "To") -> Transaction:
    """Build a transaction with a fixed timestamp."""
    return Transaction(
        from_account=from_account, to_account=to_account, amount=amount, timestamp=FIXED_TIME, group=group
    )


@pytest.fixture
def transaction_factory():
    """Fixture providing a builder for transactions with a fixed timestamp."""
    return make_transaction


@pytest.fixture
def five_transactions():
    """Fixture providing records A..E with amounts 0..4 in groups Group0..Group4."""
    return [make_transaction(name, float(i), f"Group{i}") for i, name in enumerate("ABCDE")]


@pytest.fixture
def mixed_transactions():
    """Fixture providing unsorted, mixed-case records with ties, negatives and fractions."""
    return [
        make_transaction("delta", 4.0, "Group2"),
        make_transaction("Alpha", -2.0, "Group1"),
        make_transaction("charlie", 2.5, "Group2"),
        make_transaction("ALPHA", -2.0, "Group2", to_account="Other"),
        make_transaction("bravo", 0.0, "Group2"),
        make_transaction("Echo", 7.0, "Group3"),
        make_transaction("bravo", -3.0, "Group1"),
        make_transaction("foxtrot", 12.0, "Group2"),
    ]


@pytest.fixture
def sample_record():
    """Fixture providing a raw record dict as read from CSV."""
    return {
        "from_account": "FromAccount1",
        "to_account": "ToAccount1",
        "amount": "1.0",
        "timestamp": "2026-01-11T10:00:00",
        "group": "Group1",
    }
