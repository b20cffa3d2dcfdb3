from decimal import Decimal
from typing import Optional

from payrollhub.core.config import settings
from payrollhub.core.money import Number, to_decimal, to_money
from ..schemas.payroll_schemas import SalaryComponents
from .tax_calculator import TaxCalculator


class SalaryComputer:
    """
    Derives HRA, bonus, gross, tax and net from a basic salary.

    HRA and bonus are fixed fractions of basic; gross is their sum with
    basic, and net is gross less the monthly tax on gross.
    """

    def __init__(
        self,
        hra_ratio: Optional[Decimal] = None,
        bonus_ratio: Optional[Decimal] = None,
        tax_calculator: Optional[TaxCalculator] = None,
    ):
        self.hra_ratio = to_decimal(
            settings.payroll_hra_ratio if hra_ratio is None else hra_ratio
        )
        self.bonus_ratio = to_decimal(
            settings.payroll_bonus_ratio if bonus_ratio is None else bonus_ratio
        )
        self.tax_calculator = tax_calculator or TaxCalculator()

    def compute(self, basic_salary: Number) -> SalaryComponents:
        basic = to_money(basic_salary)
        hra = to_money(basic * self.hra_ratio)
        bonus = to_money(basic * self.bonus_ratio)
        gross = basic + hra + bonus
        tax = self.tax_calculator.calculate_tax(gross)
        net = gross - tax

        return SalaryComponents(
            basic=basic,
            hra=hra,
            bonus=bonus,
            gross=gross,
            tax=tax,
            net=net,
        )
