"""
Benchmark configuration and run context.

This module loads run settings from environment variables and builds the
BenchmarkContext that carries the dataset into every benchmark
invocation, in place of process-wide benchmark state.
"""

import functools
import logging
import os
from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from streambench.core.model import Transaction
from streambench.core.protocol import QueryOperation

from .generator import DEFAULT_DATASET_SIZE, generate_transactions, load_transactions

logger = logging.getLogger(__name__)

AGGREGATE_OPERATION = "aggregate_top_amounts"


class BenchmarkConfig(BaseModel):
    """
    Settings for one benchmark run.

    Attributes
    ----------
    dataset_size : int
        Number of synthetic records to generate.
    dataset_path : str | None
        CSV dataset to load instead of generating one.
    warmup_iterations : int
        Untimed iterations run before measuring.
    measurement_iterations : int
        Timed iterations per benchmark.
    invocations : int
        Back-to-back calls timed within one iteration.
    include : str | None
        Regular expression selecting benchmarks by name.
    aggregate_group : str
        Group label kept by the composite aggregate.
    aggregate_limit : int
        Number of sorted records summed by the composite aggregate.
    report_path : str | None
        CSV file receiving the per-benchmark results.
    log_level : str
        Logging level name for the entry point.
    """

    model_config = ConfigDict(frozen=True)

    dataset_size: int = Field(default=DEFAULT_DATASET_SIZE, ge=0)
    dataset_path: str | None = None
    warmup_iterations: int = Field(default=10, ge=0)
    measurement_iterations: int = Field(default=10, ge=1)
    invocations: int = Field(default=10, ge=1)
    include: str | None = None
    aggregate_group: str = "Group2"
    aggregate_limit: int = Field(default=3, ge=0)
    report_path: str | None = None
    log_level: str = "INFO"


def load_config() -> BenchmarkConfig:
    """
    Build a BenchmarkConfig from ``STREAMBENCH_*`` environment variables.

    Returns
    -------
    BenchmarkConfig
        Validated configuration; unset variables keep their defaults.

    Raises
    ------
    ValueError
        If an integer setting is not a valid integer.
    pydantic.ValidationError
        If a setting is out of range.
    """
    return BenchmarkConfig(
        dataset_size=int(os.getenv("STREAMBENCH_DATASET_SIZE", str(DEFAULT_DATASET_SIZE))),
        dataset_path=os.getenv("STREAMBENCH_DATASET_PATH") or None,
        warmup_iterations=int(os.getenv("STREAMBENCH_WARMUP_ITERATIONS", "10")),
        measurement_iterations=int(os.getenv("STREAMBENCH_MEASUREMENT_ITERATIONS", "10")),
        invocations=int(os.getenv("STREAMBENCH_INVOCATIONS", "10")),
        include=os.getenv("STREAMBENCH_INCLUDE") or None,
        aggregate_group=os.getenv("STREAMBENCH_AGGREGATE_GROUP", "Group2"),
        aggregate_limit=int(os.getenv("STREAMBENCH_AGGREGATE_LIMIT", "3")),
        report_path=os.getenv("STREAMBENCH_REPORT_PATH") or None,
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )


class BenchmarkContext:
    """
    Read-only state shared by every benchmark of a run.

    Attributes
    ----------
    config : BenchmarkConfig
        Settings of the run.
    transactions : tuple[Transaction, ...]
        The dataset, frozen so no operation can mutate it.
    """

    def __init__(self, config: BenchmarkConfig, transactions: list[Transaction] | tuple[Transaction, ...]) -> None:
        self.config = config
        self.transactions = tuple(transactions)

    def bind(self, fn: QueryOperation, operation: str) -> Callable[[], Any]:
        """
        Return a zero-argument callable evaluating ``fn`` over the dataset.

        The composite aggregate also receives the configured group and limit.
        """
        if operation == AGGREGATE_OPERATION:
            return functools.partial(
                fn, self.transactions, group=self.config.aggregate_group, limit=self.config.aggregate_limit
            )
        return functools.partial(fn, self.transactions)


def build_context(config: BenchmarkConfig) -> BenchmarkContext:
    """Load or generate the dataset once and wrap it in a BenchmarkContext."""
    if config.dataset_path:
        transactions = load_transactions(config.dataset_path)
    else:
        transactions = generate_transactions(config.dataset_size)
    logger.info(f"Benchmark context ready with {len(transactions)} transactions")
    return BenchmarkContext(config, transactions)
