"""CSV input and output for batch mode."""

import logging
import re
from pathlib import Path

import chardet
import pandas as pd

from marketing_finder.models import RESULT_COLUMNS, ResultRecord

logger = logging.getLogger(__name__)

COMPANY_COLUMN = "company"

# Bytes sampled for encoding detection
ENCODING_SAMPLE_SIZE = 100_000


def _normalize_colname(s: str) -> str:
    return re.sub(r"\s+", "", str(s).lower())


def _find_column(df: pd.DataFrame, target: str) -> str | None:
    """Find a column in df that matches target ignoring case and spacing."""
    tnorm = _normalize_colname(target)
    for c in df.columns:
        if _normalize_colname(c) == tnorm:
            return c
    return None


def detect_encoding(path: str | Path) -> str:
    with open(path, "rb") as f:
        raw_data = f.read(ENCODING_SAMPLE_SIZE)
    detected = chardet.detect(raw_data)
    return detected.get("encoding") or "utf-8"


def read_companies(path: str | Path) -> list[str]:
    """Read company names from the ``company`` column of a CSV file.

    Blank values are skipped and order is preserved. An empty file yields no
    companies.

    Raises:
        FileNotFoundError: The input file does not exist.
        ValueError: The file has no ``company`` column.
    """
    encoding = detect_encoding(path)
    logger.debug(f"Detected encoding for {path}: {encoding}")

    try:
        df = pd.read_csv(path, encoding=encoding, dtype=str, keep_default_na=False)
    except pd.errors.EmptyDataError:
        logger.warning(f"{path} is empty, no companies to process")
        return []

    company_col = _find_column(df, COMPANY_COLUMN)
    if company_col is None:
        raise ValueError(
            f"Could not find a '{COMPANY_COLUMN}' column in {path}. "
            f"Columns found: {list(df.columns)}"
        )

    companies = []
    for value in df[company_col]:
        value = value.strip()
        if value:
            companies.append(value)
    return companies


def write_results(path: str | Path, records: list[ResultRecord]) -> None:
    """Write result records to CSV with the fixed output columns."""
    df = pd.DataFrame([record.to_row() for record in records], columns=RESULT_COLUMNS)
    df.to_csv(path, index=False, encoding="utf-8")
