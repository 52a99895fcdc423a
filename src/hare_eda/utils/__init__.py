"""Utility helpers"""

from .io import ensure_dir, load_dataframe, resolve_output, save_json
from .stats import (
    RegressionResult,
    StatSummary,
    TTestResult,
    cohens_d,
    correlation,
    describe_series,
    linear_regression,
    welch_t_test,
)
from . import plotting

__all__ = [
    "ensure_dir",
    "load_dataframe",
    "resolve_output",
    "save_json",
    "RegressionResult",
    "StatSummary",
    "TTestResult",
    "cohens_d",
    "correlation",
    "describe_series",
    "linear_regression",
    "welch_t_test",
    "plotting",
]
