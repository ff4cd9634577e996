import datetime as dt

import pytest

from hr_portal.employees.api.fields import parse_loose_date


@pytest.fixture(autouse=True)
def _local_time_zone(settings):
    settings.TIME_ZONE = "Asia/Ho_Chi_Minh"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("2024-01-02", dt.date(2024, 1, 2)),
        ("  2024-01-02 ", dt.date(2024, 1, 2)),
        ("2024-01-02T09:30:00", dt.date(2024, 1, 2)),
        ("Tue Jan 02 2024 00:00:00 GMT+0700 (Indochina Time)", dt.date(2024, 1, 2)),
        ("Tue Jan 02 2024", dt.date(2024, 1, 2)),
    ],
)
def test_parse_loose_date_accepts_browser_shapes(value, expected):
    assert parse_loose_date(value) == expected


def test_parse_loose_date_converts_utc_to_local_day():
    # 17:00 UTC is midnight of the next day in UTC+7
    assert parse_loose_date("2024-01-01T17:00:00.000Z") == dt.date(2024, 1, 2)


def test_browser_date_string_honours_negative_offset():
    # 19:00 at UTC-5 is 07:00 the next day in UTC+7
    value = "Mon Jan 01 2024 19:00:00 GMT-0500 (Eastern Standard Time)"

    assert parse_loose_date(value) == dt.date(2024, 1, 2)


def test_same_instant_gives_same_day_in_both_shapes():
    iso = "2024-01-02T00:00:00.000Z"
    browser = "Mon Jan 01 2024 19:00:00 GMT-0500 (Eastern Standard Time)"

    assert parse_loose_date(iso) == parse_loose_date(browser)


@pytest.mark.parametrize("value", ["", "   ", "not a date", "2024-13-40"])
def test_parse_loose_date_returns_none_for_unparseable(value):
    assert parse_loose_date(value) is None
