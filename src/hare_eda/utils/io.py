from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable

import pandas as pd

from ..errors import LoadError, SchemaError

LOGGER = logging.getLogger(__name__)

DELIMITERS = {".csv": ",", ".tsv": "\t", ".txt": "\t"}


def load_dataframe(path: str | Path, required_columns: Iterable[str] = ()) -> pd.DataFrame:
    """Load a delimited table. Raises FileNotFoundError if missing, SchemaError on bad columns."""

    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"Input file not found: {file_path}")

    suffix = file_path.suffix.lower()
    if suffix not in DELIMITERS:
        raise LoadError(f"Unsupported file format: {suffix}")
    df = pd.read_csv(file_path, sep=DELIMITERS[suffix])
    df.columns = [str(col).strip() for col in df.columns]

    missing = [col for col in required_columns if col not in df.columns]
    if missing:
        raise SchemaError(f"{file_path.name} is missing required columns: {missing}")
    LOGGER.info("Loaded %d rows from %s", len(df), file_path)
    return df


def ensure_dir(path: str | Path) -> Path:
    target = Path(path)
    target.mkdir(parents=True, exist_ok=True)
    return target


def save_json(data: Dict[str, Any], path: str | Path) -> None:
    file_path = Path(path)
    ensure_dir(file_path.parent)
    file_path.write_text(json.dumps(data, ensure_ascii=False, indent=2, default=str, allow_nan=False), encoding="utf-8")


def resolve_output(path: str | Path) -> Path:
    file_path = Path(path)
    ensure_dir(file_path.parent)
    return file_path
