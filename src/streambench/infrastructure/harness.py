"""
Benchmark timing harness.

This module runs each registered benchmark against a BenchmarkContext:
an untimed warmup phase, then a number of timed iterations, each made of
several back-to-back invocations. Elapsed time is recorded per
invocation, in microseconds.
"""

import logging
import math
import time
from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, Field, computed_field

from streambench.core.registry import ITERATIVE, OPERATIONS, PIPELINE, iter_benchmarks

from .config import BenchmarkContext

logger = logging.getLogger(__name__)

MICROSECONDS = 1_000_000


class BenchmarkResult(BaseModel):
    """
    Timing of one benchmark.

    Attributes
    ----------
    name : str
        Benchmark name, ``"{style}_{operation}"``.
    style : str
        ``"pipeline"`` or ``"iterative"``.
    operation : str
        Operation name shared by both styles.
    warmup_iterations : int
        Untimed iterations run before measuring.
    measurement_iterations : int
        Timed iterations.
    invocations : int
        Calls per iteration.
    iteration_us : list[float]
        Mean time per invocation for each timed iteration, in microseconds.
    """

    name: str
    style: str
    operation: str
    warmup_iterations: int
    measurement_iterations: int
    invocations: int
    iteration_us: list[float] = Field(min_length=1)

    @computed_field
    @property
    def mean_us(self) -> float:
        """Mean time per invocation over all timed iterations, in microseconds."""
        return sum(self.iteration_us) / len(self.iteration_us)


def time_callable(
    fn: Callable[[], Any],
    warmup_iterations: int,
    measurement_iterations: int,
    invocations: int,
    timer: Callable[[], float] = time.perf_counter,
) -> list[float]:
    """
    Time a zero-argument callable.

    Parameters
    ----------
    fn : Callable[[], Any]
        Callable to measure; its return value is discarded.
    warmup_iterations : int
        Iterations run before measuring, not timed.
    measurement_iterations : int
        Timed iterations.
    invocations : int
        Calls of ``fn`` per iteration.
    timer : Callable[[], float], optional
        Clock returning seconds, by default ``time.perf_counter``.

    Returns
    -------
    list[float]
        One entry per timed iteration: elapsed time divided by
        ``invocations``, in microseconds.
    """
    for _ in range(warmup_iterations * invocations):
        fn()

    samples = []
    for _ in range(measurement_iterations):
        start = timer()
        for _ in range(invocations):
            fn()
        elapsed = timer() - start
        samples.append(elapsed * MICROSECONDS / invocations)
    return samples


def run_benchmarks(context: BenchmarkContext) -> list[BenchmarkResult]:
    """
    Run every benchmark selected by the context configuration.

    Parameters
    ----------
    context : BenchmarkContext
        Dataset and settings of the run.

    Returns
    -------
    list[BenchmarkResult]
        Results in registration order. Benchmarks that raise are logged
        and left out.
    """
    config = context.config
    selected = list(iter_benchmarks(config.include))
    if not selected:
        logger.warning(f"No benchmark matches include pattern {config.include!r}")
        return []

    logger.info(
        f"Running {len(selected)} benchmarks over {len(context.transactions)} transactions: "
        f"{config.warmup_iterations} warmup, {config.measurement_iterations} measurement iterations "
        f"of {config.invocations} invocations"
    )

    results = []
    for name, style, operation, fn in selected:
        bound = context.bind(fn, operation)
        try:
            bound()
            samples = time_callable(
                bound, config.warmup_iterations, config.measurement_iterations, config.invocations
            )
        except Exception:
            logger.exception(f"Benchmark {name} failed, skipping")
            continue

        result = BenchmarkResult(
            name=name,
            style=style,
            operation=operation,
            warmup_iterations=config.warmup_iterations,
            measurement_iterations=config.measurement_iterations,
            invocations=config.invocations,
            iteration_us=samples,
        )
        logger.info(f"{name}: {result.mean_us:.3f} us/op")
        results.append(result)

    logger.info(f"Completed {len(results)}/{len(selected)} benchmarks")
    return results


def check_equivalence(context: BenchmarkContext) -> list[str]:
    """
    Compare the pipeline and loop results of every operation.

    Parameters
    ----------
    context : BenchmarkContext
        Dataset and settings of the run.

    Returns
    -------
    list[str]
        Names of the operations whose two implementations disagree, or
        raise in only one style. Empty when all agree.
    """
    mismatches = []
    for operation, pair in OPERATIONS.items():
        outcomes = {}
        for style in (PIPELINE, ITERATIVE):
            try:
                outcomes[style] = ("ok", context.bind(getattr(pair, style), operation)())
            except Exception as e:
                outcomes[style] = ("error", type(e))
        if not _same_outcome(outcomes[PIPELINE], outcomes[ITERATIVE]):
            logger.error(f"Operation {operation}: pipeline and iterative results differ")
            mismatches.append(operation)
    return mismatches


def _same_outcome(first: tuple, second: tuple) -> bool:
    """Equality of two outcomes, with NaN results matching each other."""
    if first == second:
        return True
    (first_status, first_value), (second_status, second_value) = first, second
    return (
        first_status == second_status == "ok"
        and isinstance(first_value, float)
        and isinstance(second_value, float)
        and math.isnan(first_value)
        and math.isnan(second_value)
    )
