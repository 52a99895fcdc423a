from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Any, Dict, Tuple

import numpy as np
import pandas as pd
import statsmodels.api as sm
from scipy import stats

from ..errors import InsufficientDataError


@dataclass
class StatSummary:
    count: int
    mean: float | None
    median: float | None
    std: float | None
    min: float | None
    max: float | None

    def to_dict(self) -> Dict[str, float | int | None]:
        return {
            "count": self.count,
            "mean": self.mean,
            "median": self.median,
            "std": self.std,
            "min": self.min,
            "max": self.max,
        }


@dataclass
class TTestResult:
    """Welch two-sample comparison of ``a`` against ``b``."""

    t_stat: float
    df: float
    p_value: float
    n_a: int
    n_b: int
    mean_a: float
    mean_b: float
    mean_difference: float
    percent_difference: float
    cohens_d: float

    def to_dict(self) -> Dict[str, float | int | None]:
        return _finite_or_none(asdict(self))


@dataclass
class RegressionResult:
    """Single-predictor OLS fit with the Pearson correlation of the same pairs."""

    slope: float
    intercept: float
    r_squared: float
    p_value: float
    n: int
    pearson_r: float
    pearson_p_value: float

    def to_dict(self) -> Dict[str, float | int | None]:
        return _finite_or_none(asdict(self))


def _finite_or_none(values: Dict[str, Any]) -> Dict[str, Any]:
    # undefined statistics (zero variance, two-point fits) serialise as null
    return {key: None if isinstance(value, float) and not math.isfinite(value) else value for key, value in values.items()}


def _clean(series: pd.Series) -> pd.Series:
    return pd.to_numeric(series, errors="coerce").dropna()


def describe_series(series: pd.Series) -> StatSummary:
    clean = _clean(series)
    if clean.empty:
        return StatSummary(0, None, None, None, None, None)
    std = clean.std()
    return StatSummary(
        count=int(clean.count()),
        mean=float(clean.mean()),
        median=float(clean.median()),
        std=None if pd.isna(std) else float(std),
        min=float(clean.min()),
        max=float(clean.max()),
    )


def _require(n: int, minimum: int, label: str) -> None:
    if n < minimum:
        raise InsufficientDataError(f"{label}: need at least {minimum} non-missing values, got {n}")


def cohens_d(a: pd.Series, b: pd.Series) -> float:
    a_clean = _clean(a)
    b_clean = _clean(b)
    _require(len(a_clean), 2, "first group")
    _require(len(b_clean), 2, "second group")
    n_a, n_b = len(a_clean), len(b_clean)
    pooled_var = ((n_a - 1) * a_clean.var(ddof=1) + (n_b - 1) * b_clean.var(ddof=1)) / (n_a + n_b - 2)
    pooled_std = np.sqrt(pooled_var)
    if pooled_std == 0:
        return float("nan")
    return float((a_clean.mean() - b_clean.mean()) / pooled_std)


def welch_df(a: pd.Series, b: pd.Series) -> float:
    """Welch-Satterthwaite degrees of freedom."""
    se_a = a.var(ddof=1) / len(a)
    se_b = b.var(ddof=1) / len(b)
    denom = se_a**2 / (len(a) - 1) + se_b**2 / (len(b) - 1)
    if denom == 0:
        return float("nan")
    return float((se_a + se_b) ** 2 / denom)


def welch_t_test(a: pd.Series, b: pd.Series, labels: Tuple[str, str] = ("a", "b")) -> TTestResult:
    a_clean = _clean(a)
    b_clean = _clean(b)
    _require(len(a_clean), 2, labels[0])
    _require(len(b_clean), 2, labels[1])
    t_stat, p_value = stats.ttest_ind(a_clean, b_clean, equal_var=False)
    mean_a = float(a_clean.mean())
    mean_b = float(b_clean.mean())
    difference = mean_a - mean_b
    return TTestResult(
        t_stat=float(t_stat),
        df=welch_df(a_clean, b_clean),
        p_value=float(p_value),
        n_a=len(a_clean),
        n_b=len(b_clean),
        mean_a=mean_a,
        mean_b=mean_b,
        mean_difference=difference,
        percent_difference=difference / mean_b * 100 if mean_b else float("nan"),
        cohens_d=cohens_d(a_clean, b_clean),
    )


def _paired(x: pd.Series, y: pd.Series) -> Tuple[pd.Series, pd.Series]:
    x_clean = pd.to_numeric(x, errors="coerce")
    y_clean = pd.to_numeric(y, errors="coerce")
    mask = x_clean.notna() & y_clean.notna()
    return x_clean[mask].astype(float), y_clean[mask].astype(float)


def correlation(a: pd.Series, b: pd.Series) -> Dict[str, float]:
    """Pearson r and its two-sided p-value over complete pairs."""
    a_clean, b_clean = _paired(a, b)
    # pearsonr itself refuses fewer than two pairs
    _require(len(a_clean), 2, "paired values")
    corr, p_value = stats.pearsonr(a_clean, b_clean)
    return {"corr": float(corr), "p_value": float(p_value)}


def linear_regression(x: pd.Series, y: pd.Series) -> RegressionResult:
    """Fit ``y = intercept + slope * x`` by OLS on rows where both are present."""
    x_clean, y_clean = _paired(x, y)
    _require(len(x_clean), 2, "regression pairs")
    if x_clean.nunique() < 2:
        raise InsufficientDataError("regression predictor is constant")

    model = sm.OLS(y_clean.to_numpy(), sm.add_constant(x_clean.to_numpy())).fit()
    intercept, slope = model.params
    corr = correlation(x_clean, y_clean)
    return RegressionResult(
        slope=float(slope),
        intercept=float(intercept),
        r_squared=float(model.rsquared),
        p_value=float(model.pvalues[1]),
        n=int(model.nobs),
        pearson_r=corr["corr"],
        pearson_p_value=corr["p_value"],
    )
