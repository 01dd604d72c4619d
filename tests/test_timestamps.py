from datetime import datetime

import pytest

from login_sentry import MalformedTimestamp, to_seconds


def test_matches_direct_local_time():
    expected = int(datetime(2021, 6, 10, 3, 32, 36).timestamp())
    assert to_seconds("Jun 10 03:32:36", 2021) == expected


def test_default_year_is_2021():
    assert to_seconds("Jun 10 03:32:36") == to_seconds("Jun 10 03:32:36", 2021)


def test_is_pure():
    assert to_seconds("Aug 29 11:01:01") == to_seconds("Aug 29 11:01:01")


def test_year_changes_result():
    assert to_seconds("Jun 10 03:32:36", 2022) > to_seconds("Jun 10 03:32:36", 2021)


def test_full_month_name_and_single_digit_day():
    assert to_seconds("June 1 00:00:05") == to_seconds("Jun 01 00:00:05")


def test_syslog_padding():
    assert to_seconds("Jun  1 00:00:05") == to_seconds("Jun 1 00:00:05")


def test_seconds_apart():
    assert to_seconds("Aug 29 11:01:21") - to_seconds("Aug 29 11:01:01") == 20


def test_leap_day_needs_leap_year():
    assert to_seconds("Feb 29 12:00:00", 2020)
    with pytest.raises(MalformedTimestamp):
        to_seconds("Feb 29 12:00:00", 2021)


@pytest.mark.parametrize("text", [
    "",
    "Foo 10 03:32:36",
    "Jun 32 03:32:36",
    "Jun 10 25:00:00",
    "Jun 10",
])
def test_malformed(text):
    with pytest.raises(MalformedTimestamp) as exc:
        to_seconds(text)
    assert exc.value.text == text
