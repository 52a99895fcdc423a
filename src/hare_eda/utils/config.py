from __future__ import annotations

import copy
from pathlib import Path
from typing import Any, Dict

import yaml

DEFAULTS: Dict[str, Any] = {
    "date_format": None,
    "juvenile_code": "j",
    "site_labels": {
        "bonbs": "Bonanza Black Spruce",
        "bonmat": "Bonanza Mature",
        "bonrip": "Bonanza Riparian",
    },
    "sex_labels": {"f": "Female", "m": "Male"},
    "significant_digits": {
        "mean": 3,
        "sd": 3,
        "difference": 3,
        "percent": 2,
        "t_stat": 3,
        "df": 3,
        "p_value": 2,
        "effect_size": 2,
        "slope": 3,
        "intercept": 3,
        "r_squared": 2,
        "r": 2,
    },
    "outputs": {
        "report": "reports/juvenile_hares_report.html",
        "stats_json": "results/juvenile_hares_stats.json",
        "figures_dir": "figures",
    },
}


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(path: str | Path) -> Dict[str, Any]:
    config_file = Path(path)
    if not config_file.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_file}")
    with open(config_file, "r", encoding="utf-8") as fh:
        raw = yaml.safe_load(fh) or {}
    return _merge(DEFAULTS, raw)


def resolve_path(path_like: str | Path, base_dir: Path) -> Path:
    candidate = Path(path_like)
    if candidate.is_absolute():
        return candidate
    return (base_dir / candidate).resolve()


def infer_base_dir(config_path: Path) -> Path:
    parent = config_path.parent
    if (parent / "data").exists():
        return parent
    if parent.name == "config" and parent.parent.exists():
        return parent.parent
    return parent
