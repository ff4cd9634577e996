import pytest

from hr_portal.audit.models import AuditLog
from tests.factories import create_user_with_role


@pytest.mark.django_db
def test_name_filled_from_first_and_last_name():
    user = create_user_with_role("hoa")
    user.first_name = "Pham"
    user.last_name = "Thi Hoa"
    user.save()

    user.refresh_from_db()
    assert user.name == "Pham Thi Hoa"


@pytest.mark.django_db
def test_audit_log_create_with_actor():
    user = create_user_with_role("auditor")
    log = AuditLog.objects.create(action="test", actor=user, message="hello")
    assert log.id is not None
    assert log.actor == user
    assert str(log).startswith("[")
