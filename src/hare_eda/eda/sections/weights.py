from __future__ import annotations

from pathlib import Path
from typing import Dict

import pandas as pd

from ...utils import plotting, stats

SEX_ORDER = ["Female", "Male", "Unknown"]


def weight_by_sex(df: pd.DataFrame) -> Dict[str, Dict]:
    """Mean, SD and n of non-missing weights per sex label."""
    summary: Dict[str, Dict] = {}
    for sex in SEX_ORDER:
        subset = df.loc[df["sex_label"] == sex, "weight"]
        if subset.empty:
            continue
        summary[sex] = stats.describe_series(subset).to_dict()
    return summary


def weight_by_sex_and_site(df: pd.DataFrame) -> Dict[str, Dict[str, Dict]]:
    table: Dict[str, Dict[str, Dict]] = {}
    for site, site_df in df.dropna(subset=["site"]).groupby("site", sort=True):
        table[str(site)] = weight_by_sex(site_df)
    return table


def compare_weights_by_sex(df: pd.DataFrame) -> Dict[str, float | int]:
    """Welch t-test and Cohen's d of male against female juvenile weights."""
    male = df.loc[df["sex_label"] == "Male", "weight"]
    female = df.loc[df["sex_label"] == "Female", "weight"]
    return stats.welch_t_test(male, female, labels=("Male", "Female")).to_dict()


def plot_weight_by_sex_site(df: pd.DataFrame, figures_dir: Path) -> str:
    plotting.setup_style()
    out = figures_dir / "juvenile_weight_by_sex_site.png"
    frame = df.dropna(subset=["site"]).rename(columns={"sex_label": "Sex", "weight": "Weight (g)"})
    plotting.plot_faceted_box(frame, "site", "Sex", "Weight (g)", SEX_ORDER,
                              "Juvenile hare weight by sex and site", out)
    return str(out)
