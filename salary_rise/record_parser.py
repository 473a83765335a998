# salary_rise/record_parser.py
"""
Reads the raw CPI table (``DD/MM/YYYY`` date + index value) into ``RawRow``s.

Rows with a missing or unreadable date or index are dropped without error;
only a document that is not a table at all raises ``ParseError``.
"""

import io
from typing import List, Optional, Tuple

import numpy as np
import pandas as pd

from .config import settings
from .errors import ParseError
from .logging_config import log
from .models import RawRow


def _find_column(columns, name: str) -> Optional[str]:
    wanted = name.strip().lower()
    for col in columns:
        if str(col).strip().lstrip("\ufeff").lower() == wanted:
            return col
    return None


def split_date(text: str) -> Optional[Tuple[int, int]]:
    """``"15/03/2024"`` -> ``(2024, 3)``; None when the text is not a valid date."""
    parts = [p.strip() for p in str(text).split("/")]
    if len(parts) != 3:
        return None
    try:
        _day, month, year = (int(p) for p in parts)
    except ValueError:
        return None
    if not 1 <= month <= 12:
        return None
    return year, month


DELIMITERS = (",", ";", "\t", "|")


def detect_delimiter(raw_text: str) -> str:
    """Most frequent candidate delimiter in the header line; comma when none appears."""
    header = raw_text.lstrip("\ufeff").split("\n", 1)[0]
    best = max(DELIMITERS, key=header.count)
    return best if header.count(best) else ","


def parse_records(
    raw_text: str,
    date_column: Optional[str] = None,
    index_column: Optional[str] = None,
) -> List[RawRow]:
    date_column = date_column or settings.DATE_COLUMN
    index_column = index_column or settings.INDEX_COLUMN
    delimiter = settings.CSV_DELIMITER or detect_delimiter(raw_text)

    log.info("Parsing raw CPI table...")
    try:
        df = pd.read_csv(
            io.StringIO(raw_text),
            sep=delimiter,
            # rows ending in a delimiter must not turn the date into the row index
            index_col=False,
            dtype=str,
            keep_default_na=False,
            skipinitialspace=True,
        )
    except pd.errors.EmptyDataError as e:
        raise ParseError(f"CPI document is empty: {e}") from e
    except pd.errors.ParserError as e:
        raise ParseError(f"CPI document is not a valid table: {e}") from e

    date_col = _find_column(df.columns, date_column)
    index_col = _find_column(df.columns, index_column)
    if date_col is None or index_col is None:
        raise ParseError(
            f"Header must contain '{date_column}' and '{index_column}' columns "
            f"(found: {', '.join(map(str, df.columns))})"
        )

    indices = pd.to_numeric(df[index_col].str.strip(), errors="coerce")

    rows: List[RawRow] = []
    for raw_date, index_value in zip(df[date_col], indices):
        # to_numeric accepts "inf", so NaN is not the only value to reject
        if pd.isna(index_value) or not np.isfinite(float(index_value)) or float(index_value) <= 0:
            continue
        if pd.isna(raw_date) or not str(raw_date).strip():
            continue
        period = split_date(raw_date)
        if period is None:
            continue
        year, month = period
        rows.append(RawRow(year=year, month=month, index=float(index_value)))

    dropped = len(df) - len(rows)
    if dropped:
        log.warning(f"{dropped} row(s) dropped for missing or invalid date/index.")
    log.success(f"Parsed {len(rows)} CPI observation(s).")
    return rows
