import time

import pytest

from patterndate import dateformat
from patterndate import languages

class RecordingPack(languages.LanguagePack):
    weekdays = 'Sunday_Monday_Tuesday_Wednesday_Thursday_Friday_Saturday'.split('_')
    weekdays_short = 'Sun_Mon_Tue_Wed_Thu_Fri_Sat'.split('_')
    weekdays_min = 'Su_Mo_Tu_We_Th_Fr_Sa'.split('_')

    def __init__(self):
        self.meridiem_calls = []

    def months(self, instant):
        return 'MockedMonth'

    def months_short(self, instant):
        return 'MockedShortMonth'

    def meridiem(self, hour, lowercase):
        self.meridiem_calls.append((hour, lowercase))
        meridiem = 'PM' if hour > 11 else 'AM'
        return meridiem.lower() if lowercase else meridiem

def set_host_timezone(monkeypatch, tz):
    monkeypatch.setenv('TZ', tz)
    time.tzset()

@pytest.fixture(autouse=True)
def utc_host(monkeypatch):
    set_host_timezone(monkeypatch, 'UTC')
    yield
    monkeypatch.undo()
    time.tzset()

@pytest.fixture(autouse=True)
def fresh_default(monkeypatch):
    formatter = dateformat.DateFormatter()
    monkeypatch.setattr(dateformat, 'DEFAULT', formatter)
    return formatter

@pytest.fixture
def pack():
    return RecordingPack()

@pytest.fixture
def formatter(pack):
    formatter = dateformat.DateFormatter()
    formatter.set_language('en', pack)
    return formatter
