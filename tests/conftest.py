# tests/conftest.py
import os

# Keep test runs from writing log files; must run before salary_rise is imported.
os.environ.setdefault("LOG_FILE", "")

import pytest

from salary_rise.models import RawRow
from salary_rise.series import normalize_series


@pytest.fixture
def make_series():
    """Builds a normalised series from (year, month, index) tuples."""

    def _make(*points):
        return normalize_series([RawRow(year=y, month=m, index=i) for y, m, i in points])

    return _make


@pytest.fixture
def first_half_csv():
    return "Date,CPI\n01/01/2024,100\n01/02/2024,104\n01/03/2024,110\n"


@pytest.fixture
def second_half_csv():
    return (
        "Date,CPI\n"
        "01/01/2024,100\n"
        "01/06/2024,105\n"
        "01/09/2024,115\n"
        "01/07/2024,108\n"
        "01/08/2024,112\n"
    )
