# payrollhub/modules/payroll/routes/tax_calculation_routes.py

"""
Tax calculation endpoints.

Exposes the monthly tax on a gross figure and the bracket schedule it is
computed from.
"""

from decimal import Decimal
from typing import List

from fastapi import APIRouter, Query

from payrollhub.core.money import to_money

from ..schemas.payroll_schemas import TaxBracketOut, TaxCalculationResponse
from ..services.tax_calculator import MONTHS_PER_YEAR, TaxCalculator

router = APIRouter()


@router.get("/calculate", response_model=TaxCalculationResponse)
async def calculate_monthly_tax(
    monthly_gross: Decimal = Query(..., ge=0, description="Monthly gross salary"),
):
    """
    Calculate the monthly tax on a monthly gross salary.

    ## Response
    Returns the annualized income, the annual tax from the bracket schedule
    and the monthly share of it rounded to 2 decimal places.
    """
    calculator = TaxCalculator()
    annual_income = monthly_gross * MONTHS_PER_YEAR
    return TaxCalculationResponse(
        monthly_gross=monthly_gross,
        annual_income=annual_income,
        annual_tax=to_money(calculator.annual_tax(annual_income)),
        monthly_tax=calculator.calculate_tax(monthly_gross),
    )


@router.get("/brackets", response_model=List[TaxBracketOut])
async def list_tax_brackets():
    """Annual tax brackets, lowest first."""
    return [TaxBracketOut.model_validate(b) for b in TaxCalculator().brackets]
