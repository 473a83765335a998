# salary_rise/models.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class RawRow:
    year: int
    month: int
    index: float


@dataclass(frozen=True)
class Observation:
    year: int
    month: int
    index: float
    percent_change: Optional[float] = None  # None for the first row of a series

    @property
    def period(self) -> tuple:
        return (self.year, self.month)


@dataclass(frozen=True)
class IndexationResult:
    latest: Observation
    january: Observation
    guaranteed_rise_percent: float
    total_change_percent: float
    june: Optional[Observation] = None  # only set in the second half of the year

    @property
    def year(self) -> int:
        return self.latest.year

    @property
    def month(self) -> int:
        return self.latest.month

    @property
    def is_second_half(self) -> bool:
        return self.latest.month > 6


@dataclass(frozen=True)
class SalaryProjection:
    gross_salary_input: Optional[float]
    delta: float = 0.0
    projected_salary: float = 0.0
