"""Dataset generation and CSV persistence module.

This module builds the deterministic synthetic dataset measured by the
benchmarks, and reads or writes datasets as CSV with Polars so a run can
be pointed at arbitrary transaction data.
"""

import logging
from datetime import datetime
from pathlib import Path

import polars as pl

from streambench.core.data_validation import validate_transaction_records
from streambench.core.model import Transaction

logger = logging.getLogger(__name__)

DEFAULT_DATASET_SIZE = 10_000
GROUP_COUNT = 5
COLUMNS = ["from_account", "to_account", "amount", "timestamp", "group"]


def generate_transactions(size: int = DEFAULT_DATASET_SIZE) -> list[Transaction]:
    """
    Generate the synthetic benchmark dataset.

    Parameters
    ----------
    size : int, optional
        Number of records, by default 10,000.

    Returns
    -------
    list[Transaction]
        Record ``i`` has accounts ``FromAccount{i}`` / ``ToAccount{i}``,
        amount ``float(i)``, the current time, and group ``Group{i % 5}``.

    Raises
    ------
    ValueError
        If ``size`` is negative.
    """
    if size < 0:
        raise ValueError(f"Dataset size must be non-negative, got {size}")

    transactions = [
        Transaction(
            from_account=f"FromAccount{i}",
            to_account=f"ToAccount{i}",
            amount=float(i),
            timestamp=datetime.now(),
            group=f"Group{i % GROUP_COUNT}",
        )
        for i in range(size)
    ]
    logger.info(f"Generated {len(transactions)} synthetic transactions")
    return transactions


def write_transactions(transactions: list[Transaction], path: str | Path) -> None:
    """Write a dataset to CSV, one row per record with ISO timestamps."""
    df = pl.DataFrame([transaction.model_dump() for transaction in transactions], schema=_schema())
    df.write_csv(path)
    logger.info(f"Wrote {len(df)} transactions to {path}")


def load_transactions(path: str | Path) -> list[Transaction]:
    """
    Load and validate a dataset from CSV.

    Parameters
    ----------
    path : str | Path
        CSV file with columns ``from_account``, ``to_account``,
        ``amount``, ``timestamp`` and ``group``.

    Returns
    -------
    list[Transaction]
        Valid records in file order.

    Raises
    ------
    ValueError
        If required columns are missing from the CSV.

    Notes
    -----
    Rows with null values are dropped and rows failing validation are
    skipped; both are logged.
    """
    logger.info(f"Reading data from {path}")

    df = pl.read_csv(path, infer_schema=False)

    missing = set(COLUMNS) - set(df.columns)
    if missing:
        raise ValueError(f"Missing required columns: {sorted(missing)}")

    logger.info(f"Loaded {len(df)} raw transactions from CSV")

    total_nulls = sum(df.select(COLUMNS).null_count().row(0))
    if total_nulls > 0:
        logger.warning(f"Found {total_nulls} null values in data - these rows will be filtered")
        df = df.drop_nulls(subset=COLUMNS)
        logger.info(f"After filtering nulls: {len(df)} transactions remain")

    transactions, invalid = validate_transaction_records(df.select(COLUMNS).to_dicts())
    if invalid:
        logger.warning(f"Skipped {len(invalid)} invalid rows from {path}")
    return transactions


def _schema() -> dict:
    return {
        "from_account": pl.String,
        "to_account": pl.String,
        "amount": pl.Float64,
        "timestamp": pl.Datetime("us"),
        "group": pl.String,
    }
