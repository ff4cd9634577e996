import datetime as dt

import pytest
from django.db import DatabaseError
from django.urls import reverse
from rest_framework.test import APIClient

from hr_portal.audit.models import AuditLog
from hr_portal.employees.api import views as employee_views
from hr_portal.employees.models import Employee
from hr_portal.org.models import Department
from tests.factories import employee_payload
from tests.factories import jpeg_upload
from tests.factories import pdf_upload
from tests.factories import png_upload

pytestmark = pytest.mark.django_db

LIST_URL = "/api/v1/employees/"
NEXT_CODE_URL = "/api/v1/employees/next-code/"


def _post(client, **overrides):
    return client.post(LIST_URL, employee_payload(**overrides), format="multipart")


class TestNextCode:
    def test_first_code(self, api_client):
        res = api_client.get(NEXT_CODE_URL)

        assert res.status_code == 200
        assert res.json() == {"code": "NV0001"}
        assert "no-store" in res["Cache-Control"]

    def test_reflects_created_employees(self, api_client):
        _post(api_client)
        _post(api_client, identityCard="123456789")

        assert api_client.get(NEXT_CODE_URL).json() == {"code": "NV0003"}

    def test_route_names(self):
        assert reverse("api_v1:employees-next-code") == NEXT_CODE_URL
        assert reverse("api:employees-next-code") == "/api/employees/next-code/"

    def test_failure_returns_message(self, api_client, monkeypatch):
        def broken():
            raise DatabaseError("connection lost")

        monkeypatch.setattr(employee_views, "next_employee_code", broken)

        res = api_client.get(NEXT_CODE_URL)

        assert res.status_code == 500
        assert res.json() == {"message": "Could not generate the next employee code"}

    def test_requires_authentication(self):
        res = APIClient().get(NEXT_CODE_URL)

        assert res.status_code in (401, 403)
        assert "message" in res.json()


class TestCreateEmployee:
    def test_minimal_payload(self, api_client, hr_user):
        res = _post(api_client)

        assert res.status_code == 201, res.content
        body = res.json()
        assert body["code"] == "NV0001"
        assert body["name"] == "Nguyen Van An"
        assert body["identityCard"] == "012345678901"
        assert body["status"] == "active"
        assert body["profileImage"] is None
        assert body["contractFile"] is None

        employee = Employee.objects.get(code="NV0001")
        assert employee.created_by == hr_user

    def test_full_payload_with_documents(self, api_client, department):
        res = _post(
            api_client,
            dateOfBirth="1992-04-18",
            email="an.nguyen@example.com",
            phone="0912345678",
            address="12 Le Loi, District 1",
            departmentId=department.pk,
            position="manager",
            contractStartDate="2025-01-01",
            contractEndDate="2026-01-01",
            basicSalary="12000000.00",
            performanceSalary="2000000",
            productSalary="0",
            bankAccount="0071000123456",
            bankName="Vietcombank",
            taxCode="8301234567",
            insuranceNumber="7912345678",
            notes="Transferred from branch office",
            profileImage=jpeg_upload("portrait.jpg"),
            identityCardFront=jpeg_upload("front.jpeg"),
            identityCardBack=jpeg_upload("back.JPG"),
            contractFile=pdf_upload("contract.pdf"),
        )

        assert res.status_code == 201, res.content
        body = res.json()
        assert body["departmentId"] == department.pk
        assert body["departmentName"] == "Engineering"
        assert body["position"] == "manager"
        assert body["basicSalary"] == "12000000.00"
        assert body["profileImage"].endswith("employees/NV0001/photos/portrait.jpg")
        assert body["identityCardFront"].endswith("employees/NV0001/identity/front.jpeg")
        assert body["contractFile"].endswith("employees/NV0001/contracts/contract.pdf")

        employee = Employee.objects.get(code="NV0001")
        assert employee.date_of_birth == dt.date(1992, 4, 18)
        assert employee.contract_end_date == dt.date(2026, 1, 1)
        with employee.contract_file.open("rb") as fh:
            assert fh.read(5) == b"%PDF-"

    def test_large_uploads_spooled_to_disk(self, api_client, settings):
        settings.FILE_UPLOAD_MAX_MEMORY_SIZE = 1  # force temp-file uploads

        res = _post(
            api_client,
            profileImage=jpeg_upload(size=(64, 64)),
            contractFile=pdf_upload(),
        )

        assert res.status_code == 201, res.content
        assert Employee.objects.get().contract_file.name.endswith("contract.pdf")

    def test_accepts_browser_date_strings(self, api_client, settings):
        settings.TIME_ZONE = "Asia/Ho_Chi_Minh"

        res = _post(
            api_client,
            dateOfBirth="Sat Apr 18 1992 00:00:00 GMT+0700 (Indochina Time)",
            contractStartDate="",
        )

        assert res.status_code == 201, res.content
        employee = Employee.objects.get()
        assert employee.date_of_birth == dt.date(1992, 4, 18)
        assert employee.contract_start_date is None

    def test_json_blank_optionals_mean_absent(self, api_client):
        res = api_client.post(
            LIST_URL,
            employee_payload(
                dateOfBirth="",
                contractStartDate="",
                contractEndDate="",
                basicSalary="",
                performanceSalary="",
                productSalary="",
                departmentId="",
                position="",
            ),
            format="json",
        )

        assert res.status_code == 201, res.content
        employee = Employee.objects.get()
        assert employee.date_of_birth is None
        assert employee.contract_start_date is None
        assert employee.basic_salary is None
        assert employee.department is None
        assert employee.position == ""

    @pytest.mark.parametrize(
        ("field", "attr"),
        [
            ("dateOfBirth", "date_of_birth"),
            ("contractEndDate", "contract_end_date"),
            ("basicSalary", "basic_salary"),
            ("productSalary", "product_salary"),
            ("departmentId", "department"),
        ],
    )
    def test_json_blank_field_is_stored_as_null(self, api_client, field, attr):
        res = api_client.post(
            LIST_URL, employee_payload(**{field: ""}), format="json"
        )

        assert res.status_code == 201, res.content
        assert getattr(Employee.objects.get(), attr) is None

    def test_json_payload(self, api_client):
        res = api_client.post(LIST_URL, employee_payload(), format="json")

        assert res.status_code == 201
        assert res.json()["code"] == "NV0001"

    def test_writes_audit_entry_with_client_ip(self, api_client, hr_user):
        res = api_client.post(
            LIST_URL,
            employee_payload(),
            format="multipart",
            HTTP_X_FORWARDED_FOR="203.0.113.9, 10.0.0.1",
        )

        assert res.status_code == 201
        entry = AuditLog.objects.get(action="employee_created")
        assert entry.actor == hr_user
        assert entry.ip_address == "203.0.113.9"
        assert entry.after["code"] == "NV0001"

    def test_missing_required_fields(self, api_client):
        res = api_client.post(LIST_URL, {}, format="multipart")

        assert res.status_code == 400
        body = res.json()
        assert body["message"]
        assert {"name", "identityCard", "gender"} <= set(body["errors"])
        assert not Employee.objects.exists()

    @pytest.mark.parametrize(
        ("field", "value"),
        [
            ("identityCard", "12345"),
            ("phone", "12345"),
            ("email", "not-an-email"),
            ("gender", "unknown"),
            ("position", "director"),
            ("basicSalary", "-1"),
            ("dateOfBirth", "2999-01-01"),
        ],
    )
    def test_invalid_field_values(self, api_client, field, value):
        res = _post(api_client, **{field: value})

        assert res.status_code == 400
        assert field in res.json()["errors"]

    def test_client_cannot_choose_code(self, api_client):
        res = _post(api_client, code="NV0500")

        assert res.status_code == 201
        assert res.json()["code"] == "NV0001"

    def test_contract_end_before_start(self, api_client):
        res = _post(
            api_client,
            contractStartDate="2025-06-01",
            contractEndDate="2025-05-31",
        )

        assert res.status_code == 400
        assert "contractEndDate" in res.json()["errors"]

    def test_duplicate_identity_card(self, api_client):
        assert _post(api_client).status_code == 201

        res = _post(api_client, name="Someone Else")

        assert res.status_code == 400
        body = res.json()
        assert body["errors"]["identityCard"] == [
            "An employee with this identity card number already exists."
        ]
        assert body["message"] == (
            "An employee with this identity card number already exists."
        )
        assert Employee.objects.count() == 1

    def test_inactive_department_rejected(self, api_client):
        closed = Department.objects.create(name="Closed", is_active=False)

        res = _post(api_client, departmentId=closed.pk)

        assert res.status_code == 400
        assert "departmentId" in res.json()["errors"]

    def test_png_photo_rejected(self, api_client):
        res = _post(api_client, profileImage=png_upload())

        assert res.status_code == 400
        assert "profileImage" in res.json()["errors"]
        assert not Employee.objects.exists()

    def test_non_pdf_contract_rejected(self, api_client):
        res = _post(api_client, contractFile=pdf_upload("contract.txt", b"hello"))

        assert res.status_code == 400
        assert "contractFile" in res.json()["errors"]

    def test_code_conflict_returns_409(self, api_client, monkeypatch):
        def exhausted(*args, **kwargs):
            raise employee_views.EmployeeCodeConflict("taken")

        monkeypatch.setattr(
            "hr_portal.employees.api.serializers.register_employee", exhausted
        )

        res = _post(api_client)

        assert res.status_code == 409
        assert res.json() == {
            "message": "Could not allocate an employee code, please retry."
        }

    def test_plain_user_cannot_create(self, plain_user):
        client = APIClient()
        client.force_authenticate(user=plain_user)

        res = _post(client)

        assert res.status_code == 403
        assert "message" in res.json()
        assert not Employee.objects.exists()


class TestListEmployees:
    @pytest.fixture
    def employees(self, department):
        Employee.objects.create(
            code="NV0001",
            name="Nguyen Van An",
            identity_card="111111111",
            gender="male",
            department=department,
            phone="0911111111",
        )
        Employee.objects.create(
            code="NV0002",
            name="Tran Thi Binh",
            identity_card="222222222",
            gender="female",
            status=Employee.Status.INACTIVE,
        )

    def test_list_is_ordered_by_code(self, api_client, employees):
        res = api_client.get(LIST_URL)

        assert res.status_code == 200
        assert [row["code"] for row in res.json()] == ["NV0001", "NV0002"]

    def test_plain_user_can_read(self, plain_user, employees):
        client = APIClient()
        client.force_authenticate(user=plain_user)

        assert client.get(LIST_URL).status_code == 200

    def test_filters(self, api_client, employees, department):
        by_status = api_client.get(LIST_URL, {"status": "inactive"}).json()
        by_gender = api_client.get(LIST_URL, {"gender": "male"}).json()
        by_dept = api_client.get(LIST_URL, {"department": department.pk}).json()

        assert [row["code"] for row in by_status] == ["NV0002"]
        assert [row["code"] for row in by_gender] == ["NV0001"]
        assert [row["code"] for row in by_dept] == ["NV0001"]

    def test_search(self, api_client, employees):
        res = api_client.get(LIST_URL, {"search": "binh"})

        assert [row["code"] for row in res.json()] == ["NV0002"]

    def test_retrieve(self, api_client, employees):
        employee = Employee.objects.get(code="NV0001")

        res = api_client.get(f"{LIST_URL}{employee.pk}/")

        assert res.status_code == 200
        assert res.json()["departmentName"] == "Engineering"
        assert res.json()["phone"] == "0911111111"
