"""Employee creation shared by the HTML form and the REST API."""

from __future__ import annotations

import logging

from django.db import IntegrityError
from django.db import transaction

from hr_portal.audit.models import AuditLog
from hr_portal.audit.utils import log_action
from hr_portal.employees.codes import next_employee_code
from hr_portal.employees.models import Employee

logger = logging.getLogger(__name__)

MAX_CODE_ATTEMPTS = 3

DOCUMENT_FIELDS = (
    "profile_image",
    "identity_card_front",
    "identity_card_back",
    "contract_file",
)


class EmployeeCodeConflict(Exception):
    """Every generated code collided with a concurrently created employee."""


def _detach_documents(employee: Employee) -> dict:
    # Upload paths embed the code, so files are stored only once it is final
    documents = {}
    for name in DOCUMENT_FIELDS:
        value = getattr(employee, name)
        if value:
            documents[name] = value
            setattr(employee, name, "")
    return documents


def _insert_with_fresh_code(employee: Employee) -> None:
    for attempt in range(1, MAX_CODE_ATTEMPTS + 1):
        employee.code = next_employee_code()
        try:
            with transaction.atomic():
                employee.save()
        except IntegrityError:
            if not Employee.objects.filter(code=employee.code).exists():
                raise
            logger.warning(
                "Employee code %s already taken (attempt %s/%s)",
                employee.code,
                attempt,
                MAX_CODE_ATTEMPTS,
            )
            employee.pk = None
            continue
        return
    msg = f"Could not allocate an employee code after {MAX_CODE_ATTEMPTS} attempts"
    raise EmployeeCodeConflict(msg)


def register_employee(
    employee: Employee,
    *,
    actor=None,
    ip_address: str = "",
) -> Employee:
    """Assign a fresh code to an unsaved, validated employee and persist it.

    The code shown to the user beforehand is only a preview; the stored one is
    generated here so that two submissions never share a code. The record, its
    documents and the audit entry are committed together.
    """
    if employee.pk is not None:
        msg = "register_employee expects an unsaved employee"
        raise ValueError(msg)
    if actor is not None and getattr(actor, "is_authenticated", False):
        employee.created_by = actor

    with transaction.atomic():
        documents = _detach_documents(employee)
        _insert_with_fresh_code(employee)
        if documents:
            for name, value in documents.items():
                setattr(employee, name, value)
            employee.save(update_fields=[*documents, "updated_at"])

        logger.info(
            "Employee %s created (id=%s, documents=%s)",
            employee.code,
            employee.pk,
            list(documents) or "none",
        )
        log_action(
            AuditLog.Action.EMPLOYEE_CREATED,
            actor=actor,
            message=f"Employee created: {employee.code} {employee.name}".strip(),
            model_name="Employee",
            record_id=employee.pk,
            after={
                "code": employee.code,
                "name": employee.name,
                "department_id": employee.department_id,
                "documents": list(documents),
            },
            ip_address=ip_address,
        )
    return employee
