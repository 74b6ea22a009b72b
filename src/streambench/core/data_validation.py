"""
Transaction record validation module.

This module turns raw rows, such as those read from a dataset CSV, into
Transaction instances, setting aside the rows pydantic rejects and
reporting which fields made each of them invalid.
"""

import logging

from pydantic import ValidationError as PydanticValidationError

from .model import Transaction

logger = logging.getLogger(__name__)


def _failed_fields(error: PydanticValidationError) -> list[str]:
    return [".".join(str(part) for part in detail["loc"]) for detail in error.errors()]


def validate_transaction_records(records: list[dict]) -> tuple[list[Transaction], list[dict]]:
    """
    Validate raw transaction rows using Pydantic.

    Parameters
    ----------
    records : list[dict]
        Rows keyed by Transaction field name. Unknown keys are ignored.

    Returns
    -------
    tuple[list[Transaction], list[dict]]
        Tuple containing:
        - Transactions built from the valid rows, in input order.
        - The raw rows that failed validation, in input order.

    Notes
    -----
    Each rejected row is logged with its position and the fields that
    failed, so a bad CSV column is easy to spot. Failures are collected
    rather than raised.
    """
    transactions = []
    rejected = []

    for row_number, record in enumerate(records):
        try:
            transactions.append(Transaction(**record))
        except PydanticValidationError as e:
            rejected.append(record)
            logger.error(f"Row {row_number}: invalid fields {', '.join(_failed_fields(e))}")

    if rejected:
        logger.warning(f"Rejected {len(rejected)} of {len(records)} transaction rows")
    else:
        logger.info(f"Validated {len(transactions)} transaction rows")

    return transactions, rejected
