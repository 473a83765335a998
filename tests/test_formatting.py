# tests/test_formatting.py

import pytest

from salary_rise import formatting
from salary_rise.pipeline import run


def test_format_number_uses_turkish_separators():
    assert formatting.format_number(1234.5) == "1.234,50"
    assert formatting.format_number(1234567.891) == "1.234.567,89"
    assert formatting.format_number(0) == "0,00"
    assert formatting.format_number(-12.3) == "-12,30"


def test_format_percent():
    assert formatting.format_percent(4.256) == "4,26%"
    assert formatting.format_percent(None) == "N/A"
    assert formatting.format_percent(float("nan")) == "N/A"


def test_period_label():
    assert formatting.period_label(2024, 1) == "Ocak 2024"
    assert formatting.period_label(2024, 9) == "Eylül 2024"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("2500", 2500.0),
        ("2500.75", 2500.75),
        ("2500,75", 2500.75),
        ("2.500,75", 2500.75),
        (" 1 000 ", 1000.0),
        (3000, 3000.0),
        ("", None),
        (None, None),
        ("abc", None),
    ],
)
def test_parse_amount(text, expected):
    assert formatting.parse_amount(text) == expected


def test_monthly_table_is_newest_first(make_series):
    series = make_series((2024, 1, 100.0), (2024, 2, 102.0))
    table = formatting.monthly_table(series)
    assert list(table.columns) == [formatting.COL_PERIOD, formatting.COL_CHANGE]
    assert table.iloc[0].tolist() == ["Şubat 2024", "2,00%"]
    assert table.iloc[1].tolist() == ["Ocak 2024", "N/A"]


def test_summary(second_half_csv):
    texts = formatting.summary(run(raw_text=second_half_csv, gross_salary=2000))
    assert texts == {
        "latest_period": "Eylül 2024",
        "guaranteed_rise": "10,00%",
        "total_change": "15,00%",
        "salary_change": "200,00",
        "new_salary": "2.200,00",
    }
