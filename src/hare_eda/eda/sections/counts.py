from __future__ import annotations

from pathlib import Path
from typing import Dict, List

import pandas as pd

from ...utils import plotting, stats


def counts_by_year(df: pd.DataFrame) -> Dict[int, int]:
    """Records per year. Years without records are absent, not zero."""
    counts = df.groupby("year").size()
    return {int(year): int(n) for year, n in counts.sort_index().items()}


def missing_years(counts: Dict[int, int]) -> List[int]:
    if not counts:
        return []
    return [year for year in range(min(counts), max(counts) + 1) if year not in counts]


def annual_count_summary(counts: Dict[int, int]) -> Dict[str, float | int | None]:
    summary = stats.describe_series(pd.Series(list(counts.values()), dtype=float)).to_dict()
    summary["total"] = int(sum(counts.values()))
    summary["years"] = len(counts)
    summary["first_year"] = min(counts) if counts else None
    summary["last_year"] = max(counts) if counts else None
    summary["max_year"] = max(counts, key=lambda year: (counts[year], -year)) if counts else None
    summary["min_year"] = min(counts, key=lambda year: (counts[year], year)) if counts else None
    return summary


def plot_counts_by_year(counts: Dict[int, int], figures_dir: Path) -> str:
    plotting.setup_style()
    out = figures_dir / "juvenile_counts_by_year.png"
    plotting.plot_bar_counts(counts, "Year", "Juvenile hare trappings", "Annual juvenile hare trap counts", out)
    return str(out)
