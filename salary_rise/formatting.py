# salary_rise/formatting.py
"""
Display helpers for the Turkish-language screens (tr-TR number format).
The core works with floats; nothing here feeds back into the calculation.
"""

import math
from typing import Any, Dict, Optional, Sequence

import pandas as pd

from .models import Observation

TURKISH_MONTHS = [
    "Ocak", "Şubat", "Mart", "Nisan", "Mayıs", "Haziran",
    "Temmuz", "Ağustos", "Eylül", "Ekim", "Kasım", "Aralık",
]

NOT_AVAILABLE = "N/A"
COL_PERIOD = "Tarih"
COL_CHANGE = "Aylık % Değişim"


def format_number(value: float) -> str:
    """1234.5 -> '1.234,50'"""
    return f"{value:,.2f}".replace(",", "X").replace(".", ",").replace("X", ".")


def format_percent(value: Optional[float]) -> str:
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return NOT_AVAILABLE
    return f"{format_number(value)}%"


def period_label(year: int, month: int) -> str:
    return f"{TURKISH_MONTHS[month - 1]} {year}"


def parse_amount(text: Any) -> Optional[float]:
    """User input to float. Accepts '2500', '2500.75' or '2500,75'."""
    if text is None:
        return None
    if isinstance(text, (int, float)) and not isinstance(text, bool):
        return float(text)
    cleaned = str(text).strip().replace(" ", "")
    if not cleaned:
        return None
    if "," in cleaned:
        # Turkish style: dots group thousands, comma is the decimal mark
        cleaned = cleaned.replace(".", "").replace(",", ".")
    try:
        return float(cleaned)
    except ValueError:
        return None


def monthly_table(series: Sequence[Observation]) -> pd.DataFrame:
    """Monthly changes, newest first, ready to be shown as a table."""
    rows = [
        {
            COL_PERIOD: period_label(obs.year, obs.month),
            COL_CHANGE: format_percent(obs.percent_change),
        }
        for obs in reversed(series)
    ]
    return pd.DataFrame(rows, columns=[COL_PERIOD, COL_CHANGE])


def summary(result) -> Dict[str, str]:
    """Display strings for a ``PipelineResult``; empty values when it failed."""
    indexation = result.indexation
    projection = result.projection
    return {
        "latest_period": period_label(indexation.year, indexation.month) if indexation else "",
        "guaranteed_rise": format_percent(indexation.guaranteed_rise_percent) if indexation else "",
        "total_change": format_percent(indexation.total_change_percent) if indexation else "",
        "salary_change": format_number(projection.delta),
        "new_salary": format_number(projection.projected_salary),
    }
