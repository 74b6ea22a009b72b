"""
Benchmark runner entry point.

This module runs the transaction query benchmarks: it builds the dataset
once, checks that both implementation styles agree, times every selected
benchmark, and logs a side-by-side comparison.
"""

import logging
import sys
from datetime import datetime

import polars as pl

from streambench.core.registry import iter_benchmarks
from streambench.infrastructure import (
    build_context,
    check_equivalence,
    comparison_frame,
    load_config,
    run_benchmarks,
    write_report,
)

logger = logging.getLogger(__name__)


def main() -> int:
    """
    Execute the benchmark suite.

    Environment Variables
    ---------------------
    STREAMBENCH_DATASET_SIZE : int
        Synthetic records to generate (default: 10000).
    STREAMBENCH_DATASET_PATH : str
        CSV dataset to load instead of generating one (optional).
    STREAMBENCH_WARMUP_ITERATIONS : int
        Untimed iterations per benchmark (default: 10).
    STREAMBENCH_MEASUREMENT_ITERATIONS : int
        Timed iterations per benchmark (default: 10).
    STREAMBENCH_INVOCATIONS : int
        Calls per iteration (default: 10).
    STREAMBENCH_INCLUDE : str
        Regular expression selecting benchmarks by name (optional).
    STREAMBENCH_AGGREGATE_GROUP : str
        Group kept by the composite aggregate (default: 'Group2').
    STREAMBENCH_AGGREGATE_LIMIT : int
        Records summed by the composite aggregate (default: 3).
    STREAMBENCH_REPORT_PATH : str
        CSV file for per-benchmark results (optional).
    LOG_LEVEL : str
        Logging level (default: 'INFO').

    Returns
    -------
    int
        0 on success, 1 if the two styles disagree on any operation or a
        benchmark failed.
    """
    config = load_config()
    logging.basicConfig(level=config.log_level, format="%(asctime)s - %(levelname)s - %(message)s")

    run_id = f"bench_{datetime.now().strftime('%Y%m%d_%H%M%S')}"
    logger.info(f"Starting benchmark run {run_id}")

    context = build_context(config)

    mismatches = check_equivalence(context)
    if mismatches:
        logger.error(f"MISMATCH: {len(mismatches)} operations differ between styles: {', '.join(mismatches)}")

    results = run_benchmarks(context)
    expected = len(list(iter_benchmarks(config.include)))

    with pl.Config(tbl_rows=-1, float_precision=3):
        logger.info(f"Results (microseconds per invocation):\n{comparison_frame(results)}")

    if config.report_path:
        write_report(results, config.report_path)

    if mismatches or len(results) < expected:
        logger.error("FAILED: benchmark run completed with errors")
        return 1

    logger.info("SUCCESS: All benchmarks completed")
    return 0


if __name__ == "__main__":
    sys.exit(main())
