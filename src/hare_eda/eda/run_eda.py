from __future__ import annotations

import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List

import pandas as pd
from jinja2 import Template

from ..data.hares import juvenile_records, load_hares
from ..errors import LoadError
from ..utils.config import infer_base_dir, load_config, resolve_path
from ..utils.io import resolve_output, save_json
from .narrative import build_narrative, format_summary_table
from .sections import (
    annual_count_summary,
    compare_weights_by_sex,
    counts_by_year,
    hindfoot_regression,
    missing_years,
    plot_counts_by_year,
    plot_weight_by_sex_site,
    plot_weight_vs_hindfoot,
    weight_by_sex,
    weight_by_sex_and_site,
)

LOGGER = logging.getLogger(__name__)

TEMPLATE_PATH = Path(__file__).parent / "templates" / "report_template.html"


def render_report(context: Dict[str, Any], report_path: Path) -> None:
    template_text = TEMPLATE_PATH.read_text(encoding="utf-8")
    template = Template(template_text)
    html = template.render(**context)
    report_path.parent.mkdir(parents=True, exist_ok=True)
    report_path.write_text(html, encoding="utf-8")


def compute_statistics(juveniles: pd.DataFrame) -> Dict[str, Any]:
    """Every summary and test the report narrates, as plain JSON-ready values."""
    counts = counts_by_year(juveniles)
    stats_bundle: Dict[str, Any] = {
        "juvenile_records": len(juveniles),
        "counts_by_year": counts,
        "missing_years": missing_years(counts),
        "annual_counts": annual_count_summary(counts),
        "weight_by_sex": weight_by_sex(juveniles),
        "weight_by_sex_and_site": weight_by_sex_and_site(juveniles),
    }
    stats_bundle["weight_ttest"] = compare_weights_by_sex(juveniles)
    stats_bundle["hindfoot_regression"] = hindfoot_regression(juveniles)
    return stats_bundle


def _relative(path: str, start: Path) -> str:
    return Path(os.path.relpath(path, start)).as_posix()


def run_eda(config_path: str | Path, input_path: str | Path | None = None) -> Dict[str, Any]:
    config_path = Path(config_path).resolve()
    base_dir = infer_base_dir(config_path)
    config = load_config(config_path)
    if input_path is None:
        if not config.get("input_path"):
            raise LoadError(f"No input_path in {config_path} and none given")
        input_path = config["input_path"]
    data_path = resolve_path(input_path, base_dir)

    raw = load_hares(data_path)
    juveniles = juvenile_records(raw, config)

    stats_bundle = compute_statistics(juveniles)
    LOGGER.info("Computed statistics for %d juvenile records", stats_bundle["juvenile_records"])

    outputs = config.get("outputs", {})
    report_path = resolve_output(resolve_path(outputs["report"], base_dir))
    stats_json_path = resolve_output(resolve_path(outputs["stats_json"], base_dir))
    figures_dir = resolve_path(outputs["figures_dir"], base_dir)
    figures_dir.mkdir(parents=True, exist_ok=True)

    figures: List[str] = [
        plot_counts_by_year(stats_bundle["counts_by_year"], figures_dir),
        plot_weight_by_sex_site(juveniles, figures_dir),
        plot_weight_vs_hindfoot(juveniles, figures_dir),
    ]

    digits = config["significant_digits"]
    narrative = build_narrative(stats_bundle, digits)
    save_json(stats_bundle, stats_json_path)

    context = {
        "generated_at": datetime.now().isoformat(timespec="seconds"),
        "source": data_path.name,
        "paragraphs": narrative["paragraphs"],
        "sex_table": format_summary_table(stats_bundle["weight_by_sex"], digits),
        "site_tables": {
            site: format_summary_table(summary, digits)
            for site, summary in stats_bundle["weight_by_sex_and_site"].items()
        },
        "figures": [_relative(fig, report_path.parent) for fig in figures],
    }
    render_report(context, report_path)
    LOGGER.info("Report written to %s", report_path)

    return {
        "report": str(report_path),
        "stats_json": str(stats_json_path),
        "figures": figures,
        "statistics": stats_bundle,
    }
