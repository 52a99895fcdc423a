"""Shared fixtures: a small hare trapping table with juveniles in 1999 and 2000."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import matplotlib

matplotlib.use("Agg")

import numpy as np  # noqa: E402
import pandas as pd  # noqa: E402
import pytest  # noqa: E402
import yaml  # noqa: E402

from hare_eda.data.hares import juvenile_records  # noqa: E402
from hare_eda.utils.config import DEFAULTS  # noqa: E402

NA = np.nan

RAW_ROWS = [
    # date, grid, sex, age, weight, hindft
    ("09/05/1999", "bonrip", "m", "j", 900, 120),
    ("09/05/1999", "bonrip", "f", "j", 800, 115),
    ("09/06/1999", "bonmat", "m", "j", 1000, 125),
    ("09/06/1999", "bonbs", "f", "j", 700, 110),
    ("09/07/1999", "bonrip", NA, "j", NA, 105),
    ("08/20/2000", "bonrip", "m", "j", 950, 122),
    ("08/20/2000", "bonmat", "f", "j", 750, 112),
    ("08/21/2000", "bonmat", "f", "j", NA, NA),
    ("08/21/2000", "bonbs", "m", "j", 1100, 130),
    ("08/22/2000", "bonbs", "f", "j", 650, 108),
    ("08/22/2000", "bonrip", "m", "j", 880, 118),
    ("08/23/2000", "xyz", "f", "J ", 820, 116),
    ("09/05/1999", "bonrip", "m", "a", 1500, 135),
    ("07/01/2001", "bonmat", "f", "a", 1600, 138),
    ("07/01/2003", "bonbs", "f", NA, 1400, NA),
]

def make_frame(rows) -> pd.DataFrame:
    return pd.DataFrame(rows, columns=["date", "grid", "sex", "age", "weight", "hindft"])


@pytest.fixture(name="make_frame")
def make_frame_fixture():
    """Build a raw trapping frame from (date, grid, sex, age, weight, hindft) tuples."""
    return make_frame


@pytest.fixture
def raw_hares() -> pd.DataFrame:
    return make_frame(RAW_ROWS)


@pytest.fixture
def config() -> Dict[str, Any]:
    cfg = dict(DEFAULTS)
    cfg["date_format"] = "%m/%d/%Y"
    return cfg


@pytest.fixture
def juveniles(raw_hares: pd.DataFrame, config: Dict[str, Any]) -> pd.DataFrame:
    return juvenile_records(raw_hares, config)


@pytest.fixture
def project_dir(tmp_path: Path, raw_hares: pd.DataFrame) -> Path:
    """A project layout with config/eda.yml and data/hares.csv."""
    (tmp_path / "data").mkdir()
    (tmp_path / "config").mkdir()
    raw_hares.to_csv(tmp_path / "data" / "hares.csv", index=False)
    cfg = {
        "input_path": "data/hares.csv",
        "date_format": "%m/%d/%Y",
        "outputs": {
            "report": "reports/report.html",
            "stats_json": "results/stats.json",
            "figures_dir": "figures",
        },
    }
    (tmp_path / "config" / "eda.yml").write_text(yaml.safe_dump(cfg), encoding="utf-8")
    return tmp_path
