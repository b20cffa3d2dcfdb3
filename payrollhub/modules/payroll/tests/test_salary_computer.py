# payrollhub/modules/payroll/tests/test_salary_computer.py

from decimal import Decimal

import pytest

from payrollhub.modules.payroll.services.salary_computer import SalaryComputer
from payrollhub.modules.payroll.services.tax_calculator import calculate_tax


class TestSalaryComputer:
    def test_components_for_30000(self):
        components = SalaryComputer().compute(Decimal("30000"))

        assert components.basic == Decimal("30000.00")
        assert components.hra == Decimal("12000.00")
        assert components.bonus == Decimal("3000.00")
        assert components.gross == Decimal("45000.00")
        # Tax is levied on gross: 45,000 * 12 = 540,000 falls in the 20% bracket
        assert components.tax == Decimal("1708.33")
        assert components.net == Decimal("43291.67")

    def test_components_for_100000(self):
        components = SalaryComputer().compute(Decimal("100000"))

        assert components.gross == Decimal("150000.00")
        assert components.tax == Decimal("29375.00")
        assert components.net == Decimal("120625.00")

    @pytest.mark.parametrize(
        "basic", ["1", "999.99", "12345.67", "30000", "41666.67", "250000"]
    )
    def test_derived_amounts_are_consistent(self, basic):
        c = SalaryComputer().compute(Decimal(basic))

        assert c.gross == c.basic + c.hra + c.bonus
        assert c.net == c.gross - c.tax
        assert c.tax == calculate_tax(c.gross)
        assert abs(c.gross - c.basic * Decimal("1.5")) <= Decimal("0.01")

    def test_rounds_half_up(self):
        # 0.05 * 10% = 0.005 rounds up to 0.01
        components = SalaryComputer().compute(Decimal("0.05"))
        assert components.bonus == Decimal("0.01")
        assert components.hra == Decimal("0.02")

    def test_custom_ratios(self):
        computer = SalaryComputer(hra_ratio=Decimal("0.50"), bonus_ratio=Decimal("0"))
        components = computer.compute(Decimal("10000"))

        assert components.hra == Decimal("5000.00")
        assert components.bonus == Decimal("0.00")
        assert components.gross == Decimal("15000.00")

    def test_components_are_immutable(self):
        components = SalaryComputer().compute(Decimal("30000"))
        with pytest.raises(Exception):
            components.net = Decimal("0")
