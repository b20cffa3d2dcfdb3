# payrollhub/modules/staff/tests/test_staff_routes.py

from decimal import Decimal

from payrollhub.core.error_schemas import PayrollErrorCodes


def employee_payload(department_id, **overrides):
    payload = {
        "name": "Neha Verma",
        "email": "neha.verma@company.com",
        "phone": "9876543217",
        "hire_date": "2023-05-10",
        "department_id": department_id,
        "designation": "Marketing Executive",
        "basic_salary": "38000",
    }
    payload.update(overrides)
    return payload


class TestDepartmentRoutes:
    def test_create_and_list(self, client):
        response = client.post(
            "/api/staff/departments", json={"name": "Marketing", "location": "Pune"}
        )

        assert response.status_code == 201
        department_id = response.json()["id"]

        listed = client.get("/api/staff/departments").json()
        assert [d["id"] for d in listed] == [department_id]
        assert client.get(f"/api/staff/departments/{department_id}").status_code == 200

    def test_missing_department(self, client):
        response = client.get("/api/staff/departments/77")

        assert response.status_code == 404
        assert response.json()["code"] == PayrollErrorCodes.DEPARTMENT_NOT_FOUND


class TestEmployeeRoutes:
    def test_create_records_actor(self, client, department):
        response = client.post(
            "/api/staff/employees",
            json=employee_payload(department.id),
            headers={"X-Actor": "hr-admin"},
        )

        assert response.status_code == 201
        employee_id = response.json()["id"]

        audit = client.get("/api/staff/salary-audit", params={"employee_id": employee_id})
        entries = audit.json()["entries"]
        assert len(entries) == 1
        assert entries[0]["change_type"] == "CREATE"
        assert entries[0]["changed_by"] == "hr-admin"

    def test_default_actor(self, client, department):
        employee_id = client.post(
            "/api/staff/employees", json=employee_payload(department.id)
        ).json()["id"]

        entries = client.get(
            "/api/staff/salary-audit", params={"employee_id": employee_id}
        ).json()["entries"]
        assert entries[0]["changed_by"] == "system"

    def test_non_positive_salary(self, client, department):
        response = client.post(
            "/api/staff/employees", json=employee_payload(department.id, basic_salary="0")
        )

        assert response.status_code == 422
        assert response.json()["code"] == PayrollErrorCodes.INVALID_AMOUNT

    def test_unknown_department(self, client):
        response = client.post("/api/staff/employees", json=employee_payload(999))

        assert response.status_code == 422
        assert response.json()["code"] == PayrollErrorCodes.MISSING_DEPARTMENT

    def test_patch_salary_audits_update(self, client, department):
        employee_id = client.post(
            "/api/staff/employees", json=employee_payload(department.id)
        ).json()["id"]

        response = client.patch(
            f"/api/staff/employees/{employee_id}",
            json={"basic_salary": "42000"},
            headers={"X-Actor": "hr-manager"},
        )

        assert response.status_code == 200
        assert Decimal(response.json()["basic_salary"]) == Decimal("42000.00")

        entries = client.get(
            "/api/staff/salary-audit", params={"employee_id": employee_id}
        ).json()["entries"]
        assert [e["change_type"] for e in entries] == ["UPDATE", "CREATE"]
        assert Decimal(entries[0]["old_salary"]) == Decimal("38000.00")

    def test_patch_missing_employee(self, client):
        response = client.patch("/api/staff/employees/55", json={"designation": "x"})

        assert response.status_code == 404

    def test_list_employees(self, client, department):
        client.post("/api/staff/employees", json=employee_payload(department.id))

        response = client.get("/api/staff/employees", params={"department_id": department.id})

        assert response.status_code == 200
        assert len(response.json()) == 1

    def test_audit_limit_bounds(self, client):
        assert client.get("/api/staff/salary-audit", params={"limit": 0}).status_code == 422
