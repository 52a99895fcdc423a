from __future__ import annotations

from pathlib import Path
from typing import Dict

import pandas as pd

from ...utils import plotting, stats


def hindfoot_regression(df: pd.DataFrame) -> Dict[str, float | int]:
    """OLS of weight (g) on hind foot length (mm) for juveniles with both measured."""
    return stats.linear_regression(df["hindft"], df["weight"]).to_dict()


def plot_weight_vs_hindfoot(df: pd.DataFrame, figures_dir: Path) -> str:
    plotting.setup_style()
    out = figures_dir / "juvenile_weight_vs_hindfoot.png"
    pairs = df.dropna(subset=["hindft", "weight"])
    plotting.plot_scatter_fit(pairs, "hindft", "weight", "Hind foot length (mm)", "Weight (g)",
                              "Juvenile hare weight vs. hind foot length", out)
    return str(out)
