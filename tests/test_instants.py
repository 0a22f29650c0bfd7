import datetime
import math

import pytest

from patterndate import exceptions
from patterndate import instants

from conftest import set_host_timezone

UTC = datetime.timezone.utc

def test_normalize_datetime_fields():
    instant = instants.normalize(datetime.datetime(2024, 9, 11, 15, 2, 3, 23000, tzinfo=UTC))
    assert instant == instants.Instant(
        year=2024,
        month=8,
        day=11,
        weekday=3,
        hour=15,
        minute=2,
        second=3,
        millisecond=23,
        offset=0,
    )

def test_normalize_sunday_is_zero():
    instant = instants.normalize(datetime.datetime(2024, 9, 15, tzinfo=UTC))
    assert instant.weekday == 0

def test_normalize_timestamp_milliseconds():
    instant = instants.normalize(1726066923123)
    assert (instant.year, instant.month, instant.day) == (2024, 8, 11)
    assert (instant.hour, instant.minute, instant.second, instant.millisecond) == (15, 2, 3, 123)

def test_normalize_float_timestamp():
    assert instants.normalize(0.0).year == 1970

def test_normalize_iso_string():
    instant = instants.normalize('2024-08-11T15:20:03.123Z')
    assert (instant.year, instant.month, instant.day, instant.hour) == (2024, 7, 11, 15)
    assert instant.millisecond == 123

def test_normalize_iso_string_with_offset():
    instant = instants.normalize('2024-08-11T15:20:03+02:00')
    assert instant.hour == 13

def test_normalize_iso_date_only_is_utc_midnight(monkeypatch):
    set_host_timezone(monkeypatch, 'XYZ+05:00')
    instant = instants.normalize('2024-08-11')
    assert (instant.day, instant.hour, instant.offset) == (10, 19, 300)

def test_normalize_iso_basic_date_only_is_utc_midnight(monkeypatch):
    set_host_timezone(monkeypatch, 'XYZ+05:00')
    basic = instants.normalize('20240811')
    assert (basic.day, basic.hour, basic.offset) == (10, 19, 300)
    assert basic == instants.normalize('2024-08-11')

@pytest.mark.parametrize('text', ['20241345', '2024-02-30'])
def test_normalize_rejects_bad_date_only(text):
    with pytest.raises(exceptions.InvalidDate):
        instants.normalize(text)

def test_normalize_date():
    instant = instants.normalize(datetime.date(2024, 8, 11))
    assert (instant.year, instant.month, instant.day, instant.hour) == (2024, 7, 11, 0)

def test_normalize_none_is_now():
    before = datetime.datetime.now()
    instant = instants.normalize()
    assert instant.year in {before.year, before.year + 1}

def test_normalize_passes_instants_through():
    instant = instants.Instant(2024, 0, 1, 1)
    assert instants.normalize(instant) is instant

def test_normalize_reads_host_offset(monkeypatch):
    # POSIX TZ strings count the other way from ISO-8601, the same as the
    # host offset does.
    set_host_timezone(monkeypatch, 'XYZ+05:30')
    instant = instants.normalize(datetime.datetime(2024, 9, 11, 12, 0))
    assert instant.offset == 330
    assert instant.hour == 12

    set_host_timezone(monkeypatch, 'XYZ-02:00')
    instant = instants.normalize(datetime.datetime(2024, 9, 11, 12, 0, tzinfo=UTC))
    assert instant.offset == -120
    assert instant.hour == 14

@pytest.mark.parametrize('date', [
    True,
    False,
    {},
    [],
    object(),
    math.nan,
    math.inf,
    -math.inf,
    1e300,
    'not a date',
    '',
])
def test_normalize_rejects(date):
    with pytest.raises(exceptions.InvalidDate) as exc_info:
        instants.normalize(date)
    assert str(exc_info.value) == 'Argument `date` must be instance of Date or Unix Timestamp or ISODate String'

def test_bad_iso_string_keeps_cause():
    with pytest.raises(exceptions.InvalidDate) as exc_info:
        instants.normalize('2024-13-45T00:00:00Z')
    assert isinstance(exc_info.value.__cause__, ValueError)

def test_instant_is_immutable():
    instant = instants.Instant(2024, 0, 1, 1)
    with pytest.raises(AttributeError):
        instant.year = 2025
    with pytest.raises(AttributeError):
        del instant.hour
    assert instant.year == 2024
