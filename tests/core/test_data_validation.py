"""
Tests for data validation module.

Covers validation of raw transaction records with all valid, all invalid,
and mixed batches.
"""

import logging

import pytest

from streambench.core.data_validation import validate_transaction_records
from streambench.core.model import Transaction


class TestValidateTransactionRecords:
    """Test suite for transaction validation function."""

    @pytest.mark.parametrize("count", [0, 1, 25])
    def test_all_valid(self, count):
        """Test batches where every record is valid."""
        records = [
            {
                "from_account": f"FromAccount{i}",
                "to_account": f"ToAccount{i}",
                "amount": float(i),
                "timestamp": "2026-01-11T10:00:00",
                "group": f"Group{i % 5}",
            }
            for i in range(count)
        ]

        valid, invalid = validate_transaction_records(records)

        assert len(valid) == count
        assert invalid == []
        assert all(isinstance(transaction, Transaction) for transaction in valid)
        assert [transaction.from_account for transaction in valid] == [r["from_account"] for r in records]

    @pytest.mark.parametrize(
        "field,value",
        [
            ("amount", "not-a-number"),
            ("timestamp", "yesterday"),
            ("group", None),
        ],
    )
    def test_invalid_field(self, sample_record, field, value):
        """Test that a record with a bad field is collected, not raised."""
        record = {**sample_record, field: value}

        valid, invalid = validate_transaction_records([record])

        assert valid == []
        assert invalid == [record]

    def test_logs_row_and_failed_fields(self, sample_record, caplog):
        """Test that each rejected row is logged with the fields that failed."""
        records = [sample_record, {**sample_record, "amount": "bad", "group": None}]

        with caplog.at_level(logging.ERROR):
            validate_transaction_records(records)

        assert "Row 1: invalid fields amount, group" in caplog.text
        assert "Row 0" not in caplog.text

    def test_missing_field(self, sample_record):
        """Test that a record missing a required field is invalid."""
        record = {key: value for key, value in sample_record.items() if key != "to_account"}

        valid, invalid = validate_transaction_records([record])

        assert valid == []
        assert invalid == [record]

    def test_mixed_batch_keeps_order(self, sample_record):
        """Test that valid records keep input order around invalid ones."""
        records = [
            {**sample_record, "from_account": "first"},
            {**sample_record, "amount": "bad"},
            {**sample_record, "from_account": "second"},
        ]

        valid, invalid = validate_transaction_records(records)

        assert [transaction.from_account for transaction in valid] == ["first", "second"]
        assert invalid == [records[1]]

    def test_extra_fields_are_ignored(self, sample_record):
        """Test that unknown columns do not fail validation."""
        valid, invalid = validate_transaction_records([{**sample_record, "note": "ignored"}])

        assert len(valid) == 1
        assert invalid == []
