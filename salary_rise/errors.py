# salary_rise/errors.py
"""
Error taxonomy of the indexation pipeline.

Core functions raise these exceptions; ``pipeline.run`` turns them into
``ErrorKind`` values so nothing escapes to the presentation layer.
"""

from enum import Enum


class ErrorKind(Enum):
    UNKNOWN = "unknown"
    TRANSPORT = "transport"
    MALFORMED = "malformed"
    EMPTY_SERIES = "empty_series"
    MISSING_JANUARY = "missing_january"
    MISSING_JUNE = "missing_june"
    INVALID_REFERENCE = "invalid_reference"
    DUPLICATE_OBSERVATION = "duplicate_observation"


class SalaryRiseError(Exception):
    kind: ErrorKind = ErrorKind.UNKNOWN

    def __init__(self, message: str = ""):
        super().__init__(message or self.kind.value)
        self.message = message or self.kind.value


class TransportError(SalaryRiseError):
    """The raw CPI document could not be obtained."""

    kind = ErrorKind.TRANSPORT


class ParseError(SalaryRiseError):
    """The raw CPI document is not a readable table."""

    kind = ErrorKind.MALFORMED


class IndexationError(SalaryRiseError):
    pass


class EmptySeriesError(IndexationError):
    kind = ErrorKind.EMPTY_SERIES


class MissingJanuaryError(IndexationError):
    kind = ErrorKind.MISSING_JANUARY


class MissingJuneError(IndexationError):
    kind = ErrorKind.MISSING_JUNE


class InvalidReferenceError(IndexationError):
    kind = ErrorKind.INVALID_REFERENCE


class DuplicateObservationError(IndexationError):
    kind = ErrorKind.DUPLICATE_OBSERVATION
