# salary_rise/salary.py

import math
from typing import Any

from .models import SalaryProjection


def _as_amount(value: Any):
    if value is None or isinstance(value, bool):
        return None
    try:
        amount = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(amount):
        return None
    return amount


def project_salary(gross_salary: Any, rise_percent: float) -> SalaryProjection:
    """
    Salary delta and new salary for a gross salary and a rise percentage.

    Missing, non-numeric or negative input gives a zero projection instead of
    an error, as does a rise that is not a finite number.
    """
    amount = _as_amount(gross_salary)
    rise = _as_amount(rise_percent)
    if amount is None or amount < 0 or rise is None:
        return SalaryProjection(gross_salary_input=None)

    delta = amount * rise / 100
    return SalaryProjection(
        gross_salary_input=amount,
        delta=delta,
        projected_salary=amount + delta,
    )
