"""Guaranteed salary rise from a CPI series (half-year indexation rule)."""

__version__ = "1.0.0"

from .errors import (
    DuplicateObservationError,
    EmptySeriesError,
    ErrorKind,
    IndexationError,
    InvalidReferenceError,
    MissingJanuaryError,
    MissingJuneError,
    ParseError,
    SalaryRiseError,
    TransportError,
)
from .indexation import compute_indexation
from .models import IndexationResult, Observation, RawRow, SalaryProjection
from .pipeline import PipelineResult, PipelineStatus, run
from .record_parser import parse_records
from .salary import project_salary
from .series import normalize_series

__all__ = [
    "parse_records",
    "normalize_series",
    "compute_indexation",
    "project_salary",
    "run",
    "RawRow",
    "Observation",
    "IndexationResult",
    "SalaryProjection",
    "PipelineResult",
    "PipelineStatus",
    "ErrorKind",
    "SalaryRiseError",
    "TransportError",
    "ParseError",
    "IndexationError",
    "EmptySeriesError",
    "MissingJanuaryError",
    "MissingJuneError",
    "InvalidReferenceError",
    "DuplicateObservationError",
]
