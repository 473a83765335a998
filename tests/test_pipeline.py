# tests/test_pipeline.py

from pathlib import Path

import pytest

from salary_rise.errors import ErrorKind
from salary_rise.pipeline import PipelineStatus, analyse, run

SAMPLE_CSV = Path(__file__).resolve().parent.parent / "data" / "cpi_data.csv"


def test_full_run_second_half(second_half_csv):
    # Act
    result = run(raw_text=second_half_csv, gross_salary=2000)
    # Assert
    assert result.ok
    assert result.status == PipelineStatus.OK
    assert [obs.month for obs in result.series] == [1, 6, 7, 8, 9]
    assert result.series[0].percent_change is None
    assert result.indexation.guaranteed_rise_percent == pytest.approx(10.0)
    assert result.indexation.total_change_percent == pytest.approx(15.0)
    assert result.projection.delta == pytest.approx(200.0)
    assert result.projection.projected_salary == pytest.approx(2200.0)


def test_run_without_salary_gives_zero_projection(first_half_csv):
    result = run(raw_text=first_half_csv)
    assert result.ok
    assert result.projection.delta == 0
    assert result.projection.projected_salary == 0


def test_missing_january_is_reported_as_value():
    result = run(raw_text="Date,CPI\n01/02/2024,100\n01/03/2024,101\n", gross_salary=1000)
    assert not result.ok
    assert result.errors == (ErrorKind.MISSING_JANUARY,)
    assert result.status == PipelineStatus.INDEXATION_FAILED
    assert result.indexation is None
    assert len(result.series) == 2
    assert result.projection.projected_salary == 0


def test_malformed_document_is_reported_as_value():
    result = run(raw_text="Date,CPI\n01/01/2024,100\n01/02/2024,1,2,3,4\n")
    assert result.errors == (ErrorKind.MALFORMED,)
    assert result.status == PipelineStatus.PARSE_FAILED
    assert result.series == ()
    assert result.messages


def test_transport_failure_is_reported_as_value(tmp_path):
    result = run(source=str(tmp_path / "nope.csv"), gross_salary=1000)
    assert result.errors == (ErrorKind.TRANSPORT,)
    assert result.status == PipelineStatus.TRANSPORT_FAILED
    assert result.projection.projected_salary == 0


def test_reads_configured_source_file():
    result = run(source=str(SAMPLE_CSV), gross_salary=30000)
    assert result.ok
    assert (result.indexation.year, result.indexation.month) == (2025, 8)
    expected = (1695.75 - 1630.79) / 1497.83 * 100
    assert result.indexation.guaranteed_rise_percent == pytest.approx(expected)
    assert result.projection.delta == pytest.approx(30000 * expected / 100)


def test_analysis_is_memoised(first_half_csv):
    assert analyse(first_half_csv) is analyse(first_half_csv)


def test_salary_changes_reuse_analysis(first_half_csv):
    a = run(raw_text=first_half_csv, gross_salary=1000)
    b = run(raw_text=first_half_csv, gross_salary=2000)
    assert a.indexation is b.indexation
    assert b.projection.delta == pytest.approx(200.0)


def test_semicolon_document_runs():
    result = run(raw_text="Date;CPI\n01/01/2024;100\n01/03/2024;110\n", gross_salary=1000)
    assert result.ok
    assert result.indexation.guaranteed_rise_percent == pytest.approx(10.0)


def test_trailing_delimiter_document_runs():
    result = run(raw_text="Date,CPI\n01/01/2024,100,\n01/03/2024,110,\n")
    assert result.ok
    assert [obs.month for obs in result.series] == [1, 3]
