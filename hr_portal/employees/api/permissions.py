"""Permission classes for Employees API."""

from collections.abc import Iterable

from rest_framework.permissions import SAFE_METHODS
from rest_framework.permissions import BasePermission

ROLE_ADMIN = "Admin"
ROLE_MANAGER = "Manager"
ROLE_HR = "HR"

# Roles allowed to register new employees
EMPLOYEE_WRITER_ROLES = (ROLE_ADMIN, ROLE_MANAGER, ROLE_HR)


def _user_in_groups(user, names: Iterable[str]) -> bool:
    groups = getattr(user, "groups", None)
    names_list = list(names)
    if not groups or not names_list:
        return False
    return groups.filter(name__in=names_list).exists()


def _is_staff_or_role(user, roles: Iterable[str]) -> bool:
    return bool(getattr(user, "is_staff", False)) or _user_in_groups(user, roles)


def can_register_employees(user) -> bool:
    if not (user and getattr(user, "is_authenticated", False)):
        return False
    return _is_staff_or_role(user, EMPLOYEE_WRITER_ROLES)


class IsEmployeeWriterOrReadOnly(BasePermission):
    """Reads for any authenticated user; writes for staff, Admin, Manager, HR."""

    def has_permission(self, request, view):
        u = request.user
        if not (u and getattr(u, "is_authenticated", False)):
            return False
        if request.method in SAFE_METHODS:
            return True
        return can_register_employees(u)


class IsAdminOrHRCanWrite(BasePermission):
    def has_permission(self, request, view):
        u = request.user
        if not (u and getattr(u, "is_authenticated", False)):
            return False
        if request.method in SAFE_METHODS:
            return True
        return _is_staff_or_role(u, [ROLE_ADMIN, ROLE_HR])
