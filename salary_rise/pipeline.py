# salary_rise/pipeline.py
"""
Runs the whole chain: raw text -> rows -> series -> indexation -> salary.

Every failure is captured here and reported in ``PipelineResult.errors``;
callers never see an exception from ``run``.
"""

from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Any, Optional, Tuple

from .config import settings
from .data_extraction import fetch_cpi_text
from .errors import ErrorKind, IndexationError, ParseError, SalaryRiseError
from .indexation import compute_indexation
from .logging_config import log
from .models import IndexationResult, Observation, SalaryProjection
from .record_parser import parse_records
from .salary import project_salary
from .series import normalize_series


class PipelineStatus(Enum):
    OK = "ok"
    TRANSPORT_FAILED = "transport_failed"
    PARSE_FAILED = "parse_failed"
    INDEXATION_FAILED = "indexation_failed"


@dataclass(frozen=True)
class Analysis:
    series: Tuple[Observation, ...] = ()
    indexation: Optional[IndexationResult] = None
    status: PipelineStatus = PipelineStatus.OK
    errors: Tuple[ErrorKind, ...] = ()
    messages: Tuple[str, ...] = ()


@dataclass(frozen=True)
class PipelineResult:
    series: Tuple[Observation, ...]
    indexation: Optional[IndexationResult]
    projection: SalaryProjection
    status: PipelineStatus = PipelineStatus.OK
    errors: Tuple[ErrorKind, ...] = ()
    messages: Tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.errors


def _status_for(error: SalaryRiseError) -> PipelineStatus:
    if isinstance(error, ParseError):
        return PipelineStatus.PARSE_FAILED
    if isinstance(error, IndexationError):
        return PipelineStatus.INDEXATION_FAILED
    return PipelineStatus.TRANSPORT_FAILED


def _failed(error: SalaryRiseError, series: Tuple[Observation, ...] = ()) -> Analysis:
    log.error(f"{error.kind.value}: {error.message}")
    return Analysis(
        series=series,
        status=_status_for(error),
        errors=(error.kind,),
        messages=(error.message,),
    )


@lru_cache(maxsize=settings.CACHE_SIZE)
def analyse(raw_text: str) -> Analysis:
    """Parse, normalise and compute; memoised on the raw document content."""
    try:
        rows = parse_records(raw_text)
    except ParseError as e:
        return _failed(e)

    series = normalize_series(rows)
    try:
        indexation = compute_indexation(series)
    except IndexationError as e:
        return _failed(e, series)

    return Analysis(series=series, indexation=indexation)


def run(
    raw_text: Optional[str] = None,
    gross_salary: Any = None,
    source: Optional[str] = None,
) -> PipelineResult:
    log.info("--- STARTING SALARY RISE CALCULATION ---")

    if raw_text is None:
        try:
            raw_text = fetch_cpi_text(source)
        except SalaryRiseError as e:
            analysis = _failed(e)
        else:
            analysis = analyse(raw_text)
    else:
        analysis = analyse(raw_text)

    if analysis.indexation is not None:
        projection = project_salary(gross_salary, analysis.indexation.guaranteed_rise_percent)
    else:
        # Without a guaranteed rise there is nothing to project
        projection = SalaryProjection(gross_salary_input=None)

    log.info("--- SALARY RISE CALCULATION FINISHED ---")
    return PipelineResult(
        series=analysis.series,
        indexation=analysis.indexation,
        projection=projection,
        status=analysis.status,
        errors=analysis.errors,
        messages=analysis.messages,
    )
