# payrollhub/modules/payroll/tests/test_payroll_ledger.py

"""
Tests for payroll runs.

Tests cover:
- Creating and re-running period records
- Recompute after a basic-salary change
- Validation and not-found paths that must not write
- Batch runs and the read APIs
"""

from decimal import Decimal
from unittest.mock import patch

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from payrollhub.core.error_schemas import PayrollErrorCodes
from payrollhub.core.exceptions import (
    ConstraintViolation,
    NotFoundError,
    UnexpectedStoreError,
    ValidationFailure,
)
from payrollhub.modules.payroll.models import SalaryPeriodRecord
from payrollhub.modules.payroll.schemas import SalaryPeriodRecordOut
from payrollhub.modules.payroll.services.payroll_ledger import PayrollLedger
from payrollhub.modules.staff.models import SalaryAuditEntry
from payrollhub.modules.staff.schemas import EmployeeUpdate
from payrollhub.modules.staff.services import EmployeeService
from payrollhub.tests.factories import EmployeeFactory


class TestRunPayroll:
    def test_creates_record(self, db_session, create_employee):
        employee = create_employee(basic_salary="30000")

        record = PayrollLedger(db_session).run_payroll(employee.id, 3, 2024)

        assert record.id is not None
        assert record.employee_id == employee.id
        assert (record.salary_month, record.salary_year) == (3, 2024)
        assert record.basic_salary == Decimal("30000.00")
        assert record.hra == Decimal("12000.00")
        assert record.bonus == Decimal("3000.00")
        assert record.gross_salary == Decimal("45000.00")
        assert record.tax == Decimal("1708.33")
        assert record.net_salary == Decimal("43291.67")
        assert record.pay_date is not None

    def test_rerun_is_idempotent(self, db_session, create_employee):
        employee = create_employee(basic_salary="50000")
        ledger = PayrollLedger(db_session)

        first = SalaryPeriodRecordOut.model_validate(
            ledger.run_payroll(employee.id, 1, 2024)
        ).model_dump(exclude={"pay_date"})
        second = SalaryPeriodRecordOut.model_validate(
            ledger.run_payroll(employee.id, 1, 2024)
        ).model_dump(exclude={"pay_date"})

        assert second == first
        assert db_session.query(SalaryPeriodRecord).count() == 1

    def test_rerun_after_salary_change_updates_in_place(self, db_session, create_employee):
        employee = create_employee(basic_salary="30000")
        ledger = PayrollLedger(db_session)
        original_id = ledger.run_payroll(employee.id, 6, 2024).id

        EmployeeService(db_session).update(
            employee.id, EmployeeUpdate(basic_salary=Decimal("100000")), "hr-admin"
        )
        record = ledger.run_payroll(employee.id, 6, 2024)

        assert record.id == original_id
        assert record.basic_salary == Decimal("100000.00")
        assert record.gross_salary == Decimal("150000.00")
        assert record.net_salary == Decimal("120625.00")
        assert db_session.query(SalaryPeriodRecord).count() == 1

    def test_separate_periods_get_separate_records(self, db_session, create_employee):
        employee = create_employee()
        ledger = PayrollLedger(db_session)

        january = ledger.run_payroll(employee.id, 1, 2024)
        february = ledger.run_payroll(employee.id, 2, 2024)

        assert january.id != february.id
        assert db_session.query(SalaryPeriodRecord).count() == 2

    def test_missing_employee_writes_nothing(self, db_session):
        with pytest.raises(NotFoundError) as exc_info:
            PayrollLedger(db_session).run_payroll(9999, 1, 2024)

        assert exc_info.value.code == PayrollErrorCodes.EMPLOYEE_NOT_FOUND
        assert exc_info.value.status_code == 404
        assert db_session.query(SalaryPeriodRecord).count() == 0

    @pytest.mark.parametrize("month", [0, 13, -1])
    def test_invalid_month_writes_nothing(self, db_session, create_employee, month):
        employee = create_employee()

        with pytest.raises(ValidationFailure) as exc_info:
            PayrollLedger(db_session).run_payroll(employee.id, month, 2024)

        assert exc_info.value.code == PayrollErrorCodes.INVALID_PERIOD
        assert db_session.query(SalaryPeriodRecord).count() == 0

    def test_invalid_year_writes_nothing(self, db_session, create_employee):
        employee = create_employee()

        with pytest.raises(ValidationFailure):
            PayrollLedger(db_session).run_payroll(employee.id, 1, 0)

        assert db_session.query(SalaryPeriodRecord).count() == 0

    def test_does_not_write_audit_entries(self, db_session, create_employee):
        employee = create_employee()
        before = db_session.query(SalaryAuditEntry).count()

        PayrollLedger(db_session).run_payroll(employee.id, 1, 2024, actor="payroll-bot")

        assert db_session.query(SalaryAuditEntry).count() == before

    def test_store_failure_rolls_back(self, db_session, create_employee):
        employee = create_employee()
        ledger = PayrollLedger(db_session)

        with patch.object(
            PayrollLedger,
            "_upsert",
            side_effect=OperationalError("INSERT", {}, Exception("disk I/O error")),
        ):
            with pytest.raises(UnexpectedStoreError):
                ledger.run_payroll(employee.id, 1, 2024)

        assert db_session.query(SalaryPeriodRecord).count() == 0

    def test_uniqueness_conflict_is_retried_once(self, db_session, create_employee):
        employee = create_employee(basic_salary="30000")
        original_upsert = PayrollLedger._upsert
        calls = []

        def conflict_then_upsert(self, *args):
            calls.append(args)
            if len(calls) == 1:
                raise IntegrityError("INSERT", {}, Exception("UNIQUE constraint failed"))
            return original_upsert(self, *args)

        with patch.object(
            PayrollLedger, "_upsert", autospec=True, side_effect=conflict_then_upsert
        ) as upsert:
            record = PayrollLedger(db_session).run_payroll(employee.id, 2, 2024)

        assert upsert.call_count == 2
        assert record.net_salary == Decimal("43291.67")
        assert db_session.query(SalaryPeriodRecord).count() == 1

    def test_persistent_conflict_raises_constraint_violation(
        self, db_session, create_employee
    ):
        employee = create_employee()

        with patch.object(
            PayrollLedger,
            "_upsert",
            side_effect=IntegrityError("INSERT", {}, Exception("UNIQUE constraint failed")),
        ) as upsert:
            with pytest.raises(ConstraintViolation) as exc_info:
                PayrollLedger(db_session).run_payroll(employee.id, 2, 2024)

        assert upsert.call_count == 2
        assert exc_info.value.status_code == 409
        assert exc_info.value.code == PayrollErrorCodes.DUPLICATE_RECORD
        assert db_session.query(SalaryPeriodRecord).count() == 0

    def test_locked_upsert_path(self, db_session, create_employee):
        employee = create_employee(basic_salary="30000")
        ledger = PayrollLedger(db_session)

        with patch.dict(
            "payrollhub.modules.payroll.services.payroll_ledger._NATIVE_UPSERT_INSERTS",
            clear=True,
        ):
            first = ledger.run_payroll(employee.id, 5, 2024)
            first_id = first.id
            second = ledger.run_payroll(employee.id, 5, 2024)

        assert second.id == first_id
        assert second.net_salary == Decimal("43291.67")
        assert db_session.query(SalaryPeriodRecord).count() == 1


class TestRunPayrollForPeriod:
    def test_runs_every_employee(self, db_session, create_employee):
        employees = [create_employee(basic_salary=s) for s in ("30000", "50000", "100000")]

        result = PayrollLedger(db_session).run_payroll_for_period(4, 2024)

        assert result.success_count == 3
        assert result.failed == []
        assert sorted(r.employee_id for r in result.processed) == sorted(
            e.id for e in employees
        )

    def test_empty_company(self, db_session):
        result = PayrollLedger(db_session).run_payroll_for_period(4, 2024)
        assert result.processed == []
        assert result.failed == []

    def test_failure_does_not_abort_batch(self, db_session, create_employee):
        create_employee(basic_salary="30000")
        create_employee(basic_salary="40000")

        original = PayrollLedger._run_once
        calls = {"n": 0}

        def flaky(self, employee_id, month, year, actor):
            calls["n"] += 1
            if calls["n"] == 1:
                raise UnexpectedStoreError("connection lost", operation="payroll run")
            return original(self, employee_id, month, year, actor)

        with patch.object(PayrollLedger, "_run_once", flaky):
            result = PayrollLedger(db_session).run_payroll_for_period(4, 2024)

        assert result.success_count == 1
        assert len(result.failed) == 1
        assert result.failed[0].code == PayrollErrorCodes.DATABASE_ERROR

    def test_invalid_period_rejected(self, db_session):
        with pytest.raises(ValidationFailure):
            PayrollLedger(db_session).run_payroll_for_period(13, 2024)


class TestLedgerQueries:
    def test_find(self, db_session, create_employee):
        employee = create_employee()
        ledger = PayrollLedger(db_session)
        record = ledger.run_payroll(employee.id, 7, 2024)

        assert ledger.find(employee.id, 7, 2024).id == record.id
        assert ledger.find(employee.id, 8, 2024) is None

    def test_list_by_period(self, db_session, create_employee):
        a = create_employee()
        b = create_employee()
        ledger = PayrollLedger(db_session)
        ledger.run_payroll(a.id, 1, 2024)
        ledger.run_payroll(b.id, 1, 2024)
        ledger.run_payroll(a.id, 2, 2024)

        records = ledger.list_by_period(1, 2024)

        assert [r.employee_id for r in records] == [a.id, b.id]

    def test_list_by_employee_newest_first(self, db_session):
        employee = EmployeeFactory()
        ledger = PayrollLedger(db_session)
        for month, year in [(11, 2023), (2, 2024), (12, 2023)]:
            ledger.run_payroll(employee.id, month, year)

        periods = [(r.salary_year, r.salary_month) for r in ledger.list_by_employee(employee.id)]

        assert periods == [(2024, 2), (2023, 12), (2023, 11)]
