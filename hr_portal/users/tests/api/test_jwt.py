import pytest
from rest_framework import status
from rest_framework.test import APIClient

from tests.factories import create_user_with_role

pytestmark = pytest.mark.django_db


def obtain_tokens(client, username: str, password: str) -> tuple[str, str]:
    r = client.post(
        "/api/v1/auth/jwt/create/",
        {"username": username, "password": password},
        format="json",
    )
    assert r.status_code == status.HTTP_200_OK, r.content
    return r.data["access"], r.data["refresh"]


def test_jwt_access_token_reaches_employee_api():
    create_user_with_role("jwtuser", groups=["HR"])
    client = APIClient()
    access, _ = obtain_tokens(client, "jwtuser", "TestPass123!")

    client.credentials(HTTP_AUTHORIZATION=f"Bearer {access}")
    r = client.get("/api/v1/employees/next-code/")

    assert r.status_code == status.HTTP_200_OK
    assert r.data == {"code": "NV0001"}


def test_jwt_refresh_returns_new_access():
    create_user_with_role("refresher")
    client = APIClient()
    _, refresh = obtain_tokens(client, "refresher", "TestPass123!")

    r = client.post("/api/v1/auth/jwt/refresh/", {"refresh": refresh}, format="json")

    assert r.status_code == status.HTTP_200_OK
    assert "access" in r.data


def test_jwt_wrong_password_rejected():
    create_user_with_role("wrongpass")

    r = APIClient().post(
        "/api/v1/auth/jwt/create/",
        {"username": "wrongpass", "password": "nope"},
        format="json",
    )

    assert r.status_code == status.HTTP_401_UNAUTHORIZED
    assert "message" in r.data
