from __future__ import annotations

import datetime as dt

from django.utils import timezone
from rest_framework import serializers

# Date.toString(): "Tue Jan 02 2024 00:00:00 GMT+0700 (Indochina Time)"
BROWSER_DATETIME_FORMAT = "%a %b %d %Y %H:%M:%S GMT%z"
BROWSER_DATETIME_LENGTH = 33
BROWSER_DATE_FORMAT = "%a %b %d %Y"


def _to_local_date(value: dt.datetime) -> dt.date:
    if timezone.is_aware(value):
        value = timezone.localtime(value)
    return value.date()


def parse_loose_date(value: str) -> dt.date | None:
    """Parse the date shapes browsers send for ``<input type=date>`` values.

    Handles ``2024-01-02``, ISO datetimes such as ``2024-01-01T17:00:00.000Z``
    and ``Date.toString()`` output. Datetimes carrying an offset are converted
    to the local date, so one instant gives one day whichever shape it came in.
    """
    value = value.strip()
    if not value:
        return None
    try:
        return dt.date.fromisoformat(value)
    except ValueError:
        pass
    try:
        return _to_local_date(dt.datetime.fromisoformat(value.replace("Z", "+00:00")))
    except ValueError:
        pass
    try:
        return _to_local_date(
            dt.datetime.strptime(
                value[:BROWSER_DATETIME_LENGTH], BROWSER_DATETIME_FORMAT
            )
        )
    except ValueError:
        pass
    try:
        return dt.datetime.strptime(value[:15], BROWSER_DATE_FORMAT).date()  # noqa: DTZ007
    except ValueError:
        return None


class BlankAsNullMixin:
    """Treat ``""`` as an absent value on nullable fields, for JSON bodies too.

    DRF only does this for form data (``QueryDict``) input.
    """

    def validate_empty_values(self, data):
        if self.allow_null and isinstance(data, str) and not data.strip():
            data = None
        return super().validate_empty_values(data)


class LooseDateField(BlankAsNullMixin, serializers.DateField):
    def to_internal_value(self, value):
        if isinstance(value, str):
            parsed = parse_loose_date(value)
            if parsed is not None:
                return parsed
        return super().to_internal_value(value)


class BlankAsNullDecimalField(BlankAsNullMixin, serializers.DecimalField):
    pass


class BlankAsNullPrimaryKeyRelatedField(
    BlankAsNullMixin, serializers.PrimaryKeyRelatedField
):
    pass
