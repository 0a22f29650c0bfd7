'''
instants
========

This module turns the many things a user might call a "date" into an Instant,
which is the frozen set of numbers that the tokens are rendered from.

Accepted inputs:
- None, meaning right now.
- datetime.datetime. Naive values are local wall clock, aware values are
  converted into local time.
- datetime.date, meaning local midnight of that day.
- int or float, a Unix timestamp in milliseconds.
- str in ISO-8601. A trailing Z means UTC. A date without a time means UTC
  midnight, the same as a browser would read it.
- Instant, which is passed through.
'''
import datetime
import math
import re

from voussoirkit import vlogging

from patterndate import exceptions

log = vlogging.get_logger(__name__)

# Extended 2024-08-11 or basic 20240811.
DATE_ONLY = re.compile(r'^(?P<year>\d{4})(?P<sep>-?)(?P<month>\d{2})(?P=sep)(?P<day>\d{2})$')
EPOCH = datetime.datetime(1970, 1, 1, tzinfo=datetime.timezone.utc)

class Instant:
    '''
    The offset is in the host's convention: the number of minutes you must
    add to local time to reach UTC. So UTC+05:30 is -330 and UTC-04:00 is 240.
    '''
    __slots__ = (
        'year',
        'month',
        'day',
        'weekday',
        'hour',
        'minute',
        'second',
        'millisecond',
        'offset',
    )

    def __init__(
            self,
            year,
            month,
            day,
            weekday,
            hour=0,
            minute=0,
            second=0,
            millisecond=0,
            offset=0,
        ):
        values = dict(
            year=year,
            month=month,
            day=day,
            weekday=weekday,
            hour=hour,
            minute=minute,
            second=second,
            millisecond=millisecond,
            offset=offset,
        )
        for (key, value) in values.items():
            object.__setattr__(self, key, value)

    def __setattr__(self, key, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable.')

    def __delattr__(self, key):
        raise AttributeError(f'{self.__class__.__name__} is immutable.')

    def _fields(self):
        return tuple(getattr(self, key) for key in self.__slots__)

    def __eq__(self, other):
        if not isinstance(other, Instant):
            return NotImplemented
        return self._fields() == other._fields()

    def __hash__(self):
        return hash(self._fields())

    def __repr__(self):
        fields = ', '.join(f'{key}={getattr(self, key)!r}' for key in self.__slots__)
        return f'Instant({fields})'

    @classmethod
    def from_datetime(cls, dt):
        # astimezone on a naive datetime assumes it is local time, and on an
        # aware one it converts. Either way we end up with the local clock and
        # the host's offset for that particular moment.
        local = dt.astimezone()
        utcoffset = local.utcoffset()
        offset = -round(utcoffset.total_seconds() / 60)
        return cls(
            year=local.year,
            # Months are 0-based and weeks start on Sunday.
            month=local.month - 1,
            day=local.day,
            weekday=local.isoweekday() % 7,
            hour=local.hour,
            minute=local.minute,
            second=local.second,
            millisecond=local.microsecond // 1000,
            offset=offset,
        )

def from_timestamp(milliseconds):
    try:
        if not math.isfinite(milliseconds):
            raise exceptions.InvalidDate(milliseconds)
        dt = EPOCH + datetime.timedelta(milliseconds=milliseconds)
        return Instant.from_datetime(dt)
    except (OverflowError, OSError, ValueError) as exc:
        raise exceptions.InvalidDate(milliseconds) from exc

def from_isoformat(text):
    text = text.strip()
    date_only = DATE_ONLY.match(text)
    if date_only:
        try:
            (year, month, day) = (int(date_only.group(part)) for part in ('year', 'month', 'day'))
            dt = datetime.datetime(year, month, day, tzinfo=datetime.timezone.utc)
            return Instant.from_datetime(dt)
        except (OverflowError, OSError, ValueError) as exc:
            raise exceptions.InvalidDate(text) from exc

    if text.endswith(('Z', 'z')):
        text = text[:-1] + '+00:00'

    try:
        dt = datetime.datetime.fromisoformat(text)
        return Instant.from_datetime(dt)
    except (OverflowError, OSError, ValueError) as exc:
        raise exceptions.InvalidDate(text) from exc

def normalize(date=None) -> Instant:
    '''
    Return an Instant for the given date, or raise exceptions.InvalidDate.
    '''
    if date is None:
        instant = Instant.from_datetime(datetime.datetime.now())

    elif isinstance(date, Instant):
        instant = date

    elif isinstance(date, datetime.datetime):
        instant = Instant.from_datetime(date)

    elif isinstance(date, datetime.date):
        instant = Instant.from_datetime(datetime.datetime(date.year, date.month, date.day))

    # bool is a subclass of int but True is not a timestamp.
    elif isinstance(date, (int, float)) and not isinstance(date, bool):
        instant = from_timestamp(date)

    elif isinstance(date, str):
        instant = from_isoformat(date)

    else:
        raise exceptions.InvalidDate(date)

    log.loud('Normalized %r to %r.', date, instant)
    return instant
