from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Sequence

import matplotlib.pyplot as plt
import pandas as pd
import seaborn as sns

from .io import ensure_dir

LOGGER = logging.getLogger(__name__)

BAR_COLOR = "#4C78A8"
SEX_PALETTE = {"Female": "#E45756", "Male": "#4C78A8", "Unknown": "#9D9D9D"}


def setup_style(dpi: int = 120) -> None:
    sns.set_style("whitegrid")
    plt.rcParams["figure.dpi"] = dpi


def save_current_fig(path: str | Path) -> None:
    file_path = Path(path)
    ensure_dir(file_path.parent)
    plt.tight_layout()
    plt.savefig(file_path)
    plt.close()
    LOGGER.debug("Saved figure %s", file_path)


def plot_bar_counts(counts: Dict[int, int], xlabel: str, ylabel: str, title: str, out_path: Path) -> None:
    """Bars only at the keys present; absent keys leave a gap, never a zero bar."""
    keys = sorted(counts)
    fig, ax = plt.subplots(figsize=(8, 4))
    ax.bar(keys, [counts[k] for k in keys], color=BAR_COLOR, width=0.8)
    if keys:
        ax.set_xticks(keys)
        ax.set_xticklabels([str(k) for k in keys], rotation=45)
    ax.set_xlabel(xlabel)
    ax.set_ylabel(ylabel)
    ax.set_title(title)
    save_current_fig(out_path)


def plot_faceted_box(
    df: pd.DataFrame,
    facet: str,
    x: str,
    y: str,
    order: Sequence[str],
    title: str,
    out_path: Path,
) -> None:
    """One panel per ``facet`` value: points, quartile boxes and a mean marker per group."""
    facets: List[str] = [f for f in df[facet].dropna().unique()]
    facets.sort()
    n = max(len(facets), 1)
    fig, axes = plt.subplots(1, n, figsize=(4 * n, 4), sharey=True)
    if n == 1:
        axes = [axes]
    for ax, value in zip(axes, facets):
        subset = df.loc[df[facet] == value].dropna(subset=[y])
        present = [o for o in order if o in set(subset[x])]
        if subset.empty or not present:
            ax.set_title(str(value))
            continue
        sns.swarmplot(data=subset, x=x, y=y, order=present, hue=x, palette=SEX_PALETTE,
                      size=3, alpha=0.6, legend=False, ax=ax, warn_thresh=1.0)
        sns.boxplot(data=subset, x=x, y=y, order=present, width=0.4, fill=False,
                    color="black", showfliers=False, ax=ax)
        means = subset.groupby(x)[y].mean()
        ax.scatter(range(len(present)), [means[o] for o in present],
                   marker="D", color="black", s=20, zorder=5)
        ax.set_title(str(value))
        ax.set_xlabel("")
    axes[0].set_ylabel(y)
    fig.suptitle(title)
    save_current_fig(out_path)


def plot_scatter_fit(df: pd.DataFrame, x: str, y: str, xlabel: str, ylabel: str, title: str, out_path: Path) -> None:
    plt.figure(figsize=(6, 4))
    sns.regplot(data=df, x=x, y=y, ci=None, color=BAR_COLOR,
                scatter_kws={"s": 12, "alpha": 0.6}, line_kws={"color": "black"})
    plt.xlabel(xlabel)
    plt.ylabel(ylabel)
    plt.title(title)
    save_current_fig(out_path)
