import pytest
from rest_framework.test import APIClient

from hr_portal.org.models import Department
from tests.factories import create_user_with_role


@pytest.fixture(autouse=True)
def _media_storage(settings, tmp_path) -> None:
    settings.MEDIA_ROOT = str(tmp_path / "media")


@pytest.fixture
def hr_user(db):
    return create_user_with_role("hr_officer", groups=["HR"])


@pytest.fixture
def plain_user(db):
    return create_user_with_role("plain_user")


@pytest.fixture
def api_client(hr_user) -> APIClient:
    client = APIClient()
    client.force_authenticate(user=hr_user)
    return client


@pytest.fixture
def department(db) -> Department:
    return Department.objects.create(name="Engineering")
