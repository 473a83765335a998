# salary_rise/indexation.py
"""
Guaranteed minimum salary rise from the CPI series.

The rise follows the half-year indexation rule: in January-June it is the
CPI change since January; from July on, the change already compensated in
June is subtracted so only inflation accumulated since June is paid.

    first half:   rise = (latest / jan - 1) * 100
    second half:  rise = ((latest / jan - 1) - (jun / jan - 1)) * 100
    always:       total = (latest / jan - 1) * 100
"""

import math
from collections import Counter
from typing import Optional, Sequence

from .config import settings
from .errors import (
    DuplicateObservationError,
    EmptySeriesError,
    InvalidReferenceError,
    MissingJanuaryError,
    MissingJuneError,
)
from .logging_config import log
from .models import IndexationResult, Observation

JANUARY = 1
JUNE = 6


def find_observation(series: Sequence[Observation], year: int, month: int) -> Optional[Observation]:
    """First observation of the given period, in series order."""
    return next((obs for obs in series if obs.year == year and obs.month == month), None)


def _check_duplicates(series: Sequence[Observation]) -> None:
    counts = Counter(obs.period for obs in series)
    duplicated = [period for period, count in counts.items() if count > 1]
    if duplicated:
        year, month = min(duplicated)
        raise DuplicateObservationError(
            f"CPI series has {counts[(year, month)]} entries for {month:02d}/{year}"
        )


def _check_january(obs: Observation) -> None:
    # January is the divisor of every ratio
    if not math.isfinite(obs.index) or obs.index == 0:
        raise InvalidReferenceError(
            f"January {obs.year} index is {obs.index}; cannot be used as a reference"
        )


def compute_indexation(
    series: Sequence[Observation], reject_duplicates: Optional[bool] = None
) -> IndexationResult:
    if reject_duplicates is None:
        reject_duplicates = settings.REJECT_DUPLICATE_OBSERVATIONS

    if not series:
        raise EmptySeriesError("CPI series is empty")
    if reject_duplicates:
        _check_duplicates(series)

    latest = series[-1]
    log.info(f"Computing indexation for {latest.month:02d}/{latest.year}...")

    january = find_observation(series, latest.year, JANUARY)
    if january is None:
        raise MissingJanuaryError(f"No January data for {latest.year}")
    _check_january(january)

    jan_to_latest = latest.index / january.index - 1
    june = None
    if latest.month <= JUNE:
        guaranteed_rise = jan_to_latest * 100
    else:
        june = find_observation(series, latest.year, JUNE)
        if june is None:
            raise MissingJuneError(f"No June data for {latest.year}")
        jan_to_jun = june.index / january.index - 1
        guaranteed_rise = (jan_to_latest - jan_to_jun) * 100

    total_change = jan_to_latest * 100

    log.success(
        f"Guaranteed rise {guaranteed_rise:.2f}%, total change since January {total_change:.2f}%."
    )
    return IndexationResult(
        latest=latest,
        january=january,
        guaranteed_rise_percent=guaranteed_rise,
        total_change_percent=total_change,
        june=june,
    )
