from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Mapping

import pandas as pd

from ..errors import DataParseError
from ..utils.io import load_dataframe

LOGGER = logging.getLogger(__name__)

REQUIRED_COLUMNS = ["date", "grid", "sex", "age", "weight", "hindft"]
NUMERIC_COLUMNS = ["weight", "hindft"]

JUVENILE = "juvenile"
UNKNOWN_SEX = "Unknown"


def load_hares(path: str | Path) -> pd.DataFrame:
    return load_dataframe(path, required_columns=REQUIRED_COLUMNS)


def _normalize_code(series: pd.Series) -> pd.Series:
    return series.astype("string").str.strip().str.lower()


def parse_dates(series: pd.Series, date_format: str | None = None) -> pd.Series:
    try:
        parsed = pd.to_datetime(series.astype("string").str.strip(), format=date_format, errors="raise")
    except (ValueError, TypeError) as exc:
        raise DataParseError(f"Unparseable date in column '{series.name}': {exc}") from exc
    if parsed.isna().any():
        raise DataParseError(f"{int(parsed.isna().sum())} missing dates in column '{series.name}'")
    return parsed


def parse_numeric(series: pd.Series) -> pd.Series:
    try:
        return pd.to_numeric(series, errors="raise").astype(float)
    except (ValueError, TypeError) as exc:
        raise DataParseError(f"Non-numeric value in column '{series.name}': {exc}") from exc


def label_sites(series: pd.Series, labels: Mapping[str, str]) -> pd.Series:
    """Map site codes to display names; unmapped codes become missing."""
    lookup = {str(code).lower(): name for code, name in labels.items()}
    return _normalize_code(series).map(lookup).astype("object")


def label_sex(series: pd.Series, labels: Mapping[str, str]) -> pd.Series:
    lookup = {str(code).lower(): name for code, name in labels.items()}
    return _normalize_code(series).map(lookup).astype("object").fillna(UNKNOWN_SEX)


def juvenile_records(df: pd.DataFrame, config: Dict[str, Any]) -> pd.DataFrame:
    """Juvenile-only copy of ``df`` with parsed dates, a ``year`` column and display labels."""

    juvenile_code = str(config.get("juvenile_code", "j")).lower()
    is_juvenile = _normalize_code(df["age"]) == juvenile_code
    juveniles = df.loc[is_juvenile.fillna(False).astype(bool)].copy()
    LOGGER.info("Kept %d juvenile records out of %d", len(juveniles), len(df))

    juveniles["age"] = JUVENILE
    juveniles["date"] = parse_dates(juveniles["date"], config.get("date_format"))
    juveniles["year"] = juveniles["date"].dt.year.astype(int)
    juveniles["site"] = label_sites(juveniles["grid"], config.get("site_labels", {}))
    juveniles["sex_label"] = label_sex(juveniles["sex"], config.get("sex_labels", {}))
    for col in NUMERIC_COLUMNS:
        juveniles[col] = parse_numeric(juveniles[col])

    unmapped = juveniles["site"].isna().sum()
    if unmapped:
        LOGGER.warning("%d juvenile records have an unrecognised site code", unmapped)
    juveniles.reset_index(drop=True, inplace=True)
    return juveniles
