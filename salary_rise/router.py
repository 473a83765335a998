# salary_rise/router.py

from typing import Optional, Union

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from . import formatting, pipeline
from .data_extraction import fetch_cpi_text
from .errors import TransportError
from .salary import project_salary

router = APIRouter(prefix="/api/v1", tags=["Indexation"])


# --- PYDANTIC MODELS ---
class ProjectionRequest(BaseModel):
    gross_salary: Optional[Union[float, str]] = None


# --- DEPENDENCIES ---
def get_raw_text() -> str:
    """Raw CPI document from the configured source."""
    try:
        return fetch_cpi_text()
    except TransportError as e:
        raise HTTPException(status_code=502, detail=e.message)


def _analysed(raw_text: str) -> pipeline.PipelineResult:
    result = pipeline.run(raw_text=raw_text)
    if not result.ok:
        raise HTTPException(
            status_code=422,
            detail={
                "errors": [kind.value for kind in result.errors],
                "messages": list(result.messages),
            },
        )
    return result


# --- ENDPOINTS ---


@router.get("/indexation")
def get_indexation(raw_text: str = Depends(get_raw_text)):
    """
    Latest period, guaranteed rise and total change, plus the monthly table.
    """
    result = _analysed(raw_text)
    indexation = result.indexation
    table = formatting.monthly_table(result.series)

    return {
        "year": indexation.year,
        "month": indexation.month,
        "latestPeriod": formatting.period_label(indexation.year, indexation.month),
        "guaranteedRise": indexation.guaranteed_rise_percent,
        "totalChange": indexation.total_change_percent,
        "guaranteedRiseText": formatting.format_percent(indexation.guaranteed_rise_percent),
        "totalChangeText": formatting.format_percent(indexation.total_change_percent),
        "monthly": table.to_dict(orient="records"),
    }


@router.post("/salary/projection")
def post_salary_projection(request: ProjectionRequest, raw_text: str = Depends(get_raw_text)):
    result = _analysed(raw_text)
    rise = result.indexation.guaranteed_rise_percent
    projection = project_salary(formatting.parse_amount(request.gross_salary), rise)

    return {
        "grossSalary": projection.gross_salary_input,
        "guaranteedRise": rise,
        "salaryChange": projection.delta,
        "newSalary": projection.projected_salary,
        "salaryChangeText": formatting.format_number(projection.delta),
        "newSalaryText": formatting.format_number(projection.projected_salary),
    }
