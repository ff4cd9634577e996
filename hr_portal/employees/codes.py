"""Sequential employee codes such as ``NV0001``."""

from __future__ import annotations

import re

from django.conf import settings

from hr_portal.employees.models import Employee


def code_prefix() -> str:
    return getattr(settings, "EMPLOYEE_CODE_PREFIX", "NV")


def code_digits() -> int:
    return int(getattr(settings, "EMPLOYEE_CODE_DIGITS", 4))


def format_code(number: int) -> str:
    # Wider numbers are kept whole rather than truncated: NV10000
    return f"{code_prefix()}{number:0{code_digits()}d}"


def next_employee_code() -> str:
    """Return the code the next created employee would receive.

    Only codes shaped like ``<prefix><digits>`` count towards the sequence;
    anything else (imported legacy codes, other prefixes) is ignored.
    """
    prefix = code_prefix()
    pattern = re.compile(rf"^{re.escape(prefix)}(\d+)$")
    highest = 0
    codes = Employee.objects.filter(code__startswith=prefix).values_list(
        "code", flat=True
    )
    for code in codes.iterator():
        match = pattern.match(code)
        if match:
            highest = max(highest, int(match.group(1)))
    return format_code(highest + 1)
