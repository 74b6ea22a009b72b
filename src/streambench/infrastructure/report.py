"""
Benchmark result reporting with Polars.

Turns harness results into DataFrames: one row per benchmark, and one
row per operation comparing the two implementation styles.
"""

import logging
from pathlib import Path

import polars as pl

from streambench.core.registry import ITERATIVE, PIPELINE

from .harness import BenchmarkResult

logger = logging.getLogger(__name__)

RESULT_SCHEMA = {
    "benchmark": pl.String,
    "style": pl.String,
    "operation": pl.String,
    "iterations": pl.Int64,
    "invocations": pl.Int64,
    "mean_us": pl.Float64,
}


def results_frame(results: list[BenchmarkResult]) -> pl.DataFrame:
    """One row per benchmark, in run order."""
    return pl.DataFrame(
        [
            {
                "benchmark": result.name,
                "style": result.style,
                "operation": result.operation,
                "iterations": result.measurement_iterations,
                "invocations": result.invocations,
                "mean_us": result.mean_us,
            }
            for result in results
        ],
        schema=RESULT_SCHEMA,
    )


def comparison_frame(results: list[BenchmarkResult]) -> pl.DataFrame:
    """
    Compare both styles of each operation side by side.

    Parameters
    ----------
    results : list[BenchmarkResult]
        Harness output.

    Returns
    -------
    pl.DataFrame
        Columns ``operation``, ``pipeline_us``, ``iterative_us`` and
        ``ratio`` (pipeline over iterative time), one row per operation in
        first-seen order. Missing sides are null, and so is their ratio.
    """
    df = results_frame(results)
    return (
        df.group_by("operation", maintain_order=True)
        .agg(
            pl.col("mean_us").filter(pl.col("style") == PIPELINE).first().alias("pipeline_us"),
            pl.col("mean_us").filter(pl.col("style") == ITERATIVE).first().alias("iterative_us"),
        )
        .with_columns((pl.col("pipeline_us") / pl.col("iterative_us")).alias("ratio"))
    )


def write_report(results: list[BenchmarkResult], path: str | Path) -> None:
    df = results_frame(results)
    df.write_csv(path)
    logger.info(f"Wrote {len(df)} benchmark results to {path}")
