from __future__ import annotations

import math
from pathlib import Path
from typing import Any, Dict, List, Mapping

import numpy as np
from jinja2 import Template

TEMPLATE_PATH = Path(__file__).parent / "templates" / "narrative.txt.j2"

TTEST_DIGITS = {
    "t_stat": "t_stat",
    "df": "df",
    "p_value": "p_value",
    "mean_a": "mean",
    "mean_b": "mean",
    "mean_difference": "difference",
    "percent_difference": "percent",
    "cohens_d": "effect_size",
}

REGRESSION_DIGITS = {
    "slope": "slope",
    "intercept": "intercept",
    "r_squared": "r_squared",
    "p_value": "p_value",
    "pearson_r": "r",
    "pearson_p_value": "p_value",
}

COUNT_DIGITS = {"mean": "mean", "median": "mean"}


def signif(value: Any, digits: int) -> str:
    """Format ``value`` rounded to ``digits`` significant digits."""
    if value is None:
        return "NA"
    if isinstance(value, (int, np.integer)) and not isinstance(value, bool):
        return str(int(value))
    number = float(value)
    if math.isnan(number):
        return "NA"
    if number != 0 and abs(number) < 1e-3:
        return f"{number:.{max(digits - 1, 0)}e}"
    rounded = float(f"{number:.{digits}g}")
    return np.format_float_positional(rounded, trim="-")


def _format_block(values: Mapping[str, Any], digit_keys: Mapping[str, str], digits: Mapping[str, int]) -> Dict[str, str]:
    formatted: Dict[str, str] = {}
    for key, value in values.items():
        if key in digit_keys:
            formatted[key] = signif(value, digits[digit_keys[key]])
        else:
            formatted[key] = signif(value, 3)
    return formatted


def _format_years(years: List[int]) -> str:
    names = [str(year) for year in years]
    if len(names) <= 1:
        return "".join(names)
    return ", ".join(names[:-1]) + " and " + names[-1]


def build_narrative(stats_bundle: Dict[str, Any], digits: Mapping[str, int]) -> Dict[str, Any]:
    """Round each scalar in ``stats_bundle`` and drop it into the fixed report prose."""
    values = {
        "counts": _format_block(stats_bundle["annual_counts"], COUNT_DIGITS, digits),
        "missing_years": _format_years(stats_bundle.get("missing_years", [])),
        "ttest": _format_block(stats_bundle["weight_ttest"], TTEST_DIGITS, digits),
        "regression": _format_block(stats_bundle["hindfoot_regression"], REGRESSION_DIGITS, digits),
    }
    template = Template(TEMPLATE_PATH.read_text(encoding="utf-8"))
    text = template.render(**values)
    paragraphs = [block.strip() for block in text.split("\n\n") if block.strip()]
    return {"values": values, "paragraphs": paragraphs}


def format_summary_table(summary: Mapping[str, Mapping[str, Any]], digits: Mapping[str, int]) -> List[Dict[str, str]]:
    rows = []
    for group, row in summary.items():
        rows.append({
            "group": group,
            "mean": signif(row.get("mean"), digits["mean"]),
            "std": signif(row.get("std"), digits["sd"]),
            "count": signif(row.get("count"), 0),
        })
    return rows
