"""
Core layer for the transaction query benchmarks.

This package provides the side-effect free domain logic:
- Pydantic Transaction model and its ordering relations
- Record validation for externally loaded datasets
- Pipeline-style and loop-style query operations
- Registry pairing the two implementations of each operation
"""

from .data_validation import validate_transaction_records
from .errors import EmptyDatasetError
from .model import Transaction
from .registry import OPERATIONS, iter_benchmarks

__all__ = ["Transaction", "EmptyDatasetError", "validate_transaction_records", "OPERATIONS", "iter_benchmarks"]
