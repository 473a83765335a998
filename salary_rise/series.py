# salary_rise/series.py

import math
from typing import Iterable, Optional, Tuple

from .models import Observation, RawRow


def percent_change(previous: float, current: float) -> Optional[float]:
    if not math.isfinite(previous) or previous == 0 or not math.isfinite(current):
        return None
    return (current - previous) / previous * 100


def normalize_series(rows: Iterable[RawRow]) -> Tuple[Observation, ...]:
    """
    Orders rows by (year, month) and adds the month-over-month change.

    The sort is stable, so rows sharing a period keep their input order.
    The first observation never has a change.
    """
    ordered = sorted(rows, key=lambda r: (r.year, r.month))

    series = []
    previous = None
    for row in ordered:
        change = None
        if previous is not None:
            change = percent_change(previous.index, row.index)
        series.append(
            Observation(year=row.year, month=row.month, index=row.index, percent_change=change)
        )
        previous = row
    return tuple(series)
