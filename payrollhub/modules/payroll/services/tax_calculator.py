# payrollhub/modules/payroll/services/tax_calculator.py

"""
Progressive income tax on annualized monthly gross salary.

The schedule is illustrative, not statutory. Brackets are applied to
gross * 12 rather than to a true annual figure, and the annual tax is
spread evenly back over twelve months.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional, Sequence

from payrollhub.core.money import Number, to_decimal, to_money

MONTHS_PER_YEAR = Decimal("12")


@dataclass(frozen=True)
class TaxBracket:
    """
    One tier of the schedule.

    Annual income above ``lower_limit`` and up to ``upper_limit`` (None for
    the top tier) is taxed at ``rate`` on top of ``base_tax``.
    """

    lower_limit: Decimal
    upper_limit: Optional[Decimal]
    base_tax: Decimal
    rate: Decimal

    def contains(self, annual_income: Decimal) -> bool:
        return self.upper_limit is None or annual_income <= self.upper_limit

    def tax_for(self, annual_income: Decimal) -> Decimal:
        return self.base_tax + (annual_income - self.lower_limit) * self.rate


DEFAULT_TAX_BRACKETS: List[TaxBracket] = [
    TaxBracket(Decimal("0"), Decimal("250000"), Decimal("0"), Decimal("0")),
    TaxBracket(Decimal("250000"), Decimal("500000"), Decimal("0"), Decimal("0.05")),
    TaxBracket(Decimal("500000"), Decimal("1000000"), Decimal("12500"), Decimal("0.20")),
    TaxBracket(Decimal("1000000"), None, Decimal("112500"), Decimal("0.30")),
]


class TaxCalculator:
    """Monthly tax from monthly gross via an annual bracket lookup."""

    def __init__(self, brackets: Optional[Sequence[TaxBracket]] = None):
        self.brackets = list(brackets or DEFAULT_TAX_BRACKETS)

    def annual_tax(self, annual_income: Number) -> Decimal:
        annual_income = to_decimal(annual_income)
        for bracket in self.brackets:
            if bracket.contains(annual_income):
                return bracket.tax_for(annual_income)
        # Only reachable with a custom schedule lacking an open top tier
        return self.brackets[-1].tax_for(annual_income)

    def calculate_tax(self, monthly_gross: Number) -> Decimal:
        """
        Args:
            monthly_gross: Non-negative monthly gross salary

        Returns:
            Monthly tax rounded half-up to 2 decimal places
        """
        annual_income = to_decimal(monthly_gross) * MONTHS_PER_YEAR
        return to_money(self.annual_tax(annual_income) / MONTHS_PER_YEAR)


_default_calculator = TaxCalculator()


def calculate_tax(monthly_gross: Number) -> Decimal:
    """Monthly tax on ``monthly_gross`` under the default schedule."""
    return _default_calculator.calculate_tax(monthly_gross)
