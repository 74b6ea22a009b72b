"""Infrastructure layer for running the benchmarks.

This package provides the components around the core operations:
- Synthetic dataset generation and CSV load/save with Polars
- Environment-driven configuration and the per-run BenchmarkContext
- Timing harness with warmup and measurement iterations
- Result reporting as Polars DataFrames
"""

from .config import BenchmarkConfig, BenchmarkContext, build_context, load_config
from .generator import generate_transactions, load_transactions, write_transactions
from .harness import BenchmarkResult, check_equivalence, run_benchmarks, time_callable
from .report import comparison_frame, results_frame, write_report

__all__ = [
    "BenchmarkConfig",
    "BenchmarkContext",
    "build_context",
    "load_config",
    "generate_transactions",
    "load_transactions",
    "write_transactions",
    "BenchmarkResult",
    "check_equivalence",
    "run_benchmarks",
    "time_callable",
    "comparison_frame",
    "results_frame",
    "write_report",
]
