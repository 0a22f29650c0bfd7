'''
tokens
======

The format tokens, and the tokenizer that finds them in a pattern.

YYYY  4-digit year                  2024
YY    2-digit year                  24
MMMM  month name                    September
MMM   short month name              Sep
MM    month number, padded          09
M     month number                  9
DDD   weekday name                  Wednesday
DD    short weekday name            Wed
D     min weekday name              We
dd    day of month, padded          01
d     day of month                  1
HH    24-hour, padded               03
H     24-hour                       3
hh    12-hour, padded               03
h     12-hour                       3
mm    minute, padded                02
m     minute                        2
ss    second, padded                03
s     second                        3
ff    millisecond, padded           023
f     millisecond                   23
A     meridiem                      PM
a     lowercase meridiem            pm
ZZ    offset, basic ISO-8601        +0530
Z     offset, extended ISO-8601     +05:30

Anything else in the pattern is copied through as it is.
'''
import re

def leading_zeroes(value, target_length=2) -> str:
    '''
    Left-pad the string form of value with zeroes up to target_length.
    Strings that are already long enough are returned unchanged, never cut.

    >>> leading_zeroes(5)
    '05'
    >>> leading_zeroes('test', 3)
    'test'
    '''
    return str(value).rjust(target_length, '0')

def twelve_hour(hour):
    return (hour % 12) or 12

def format_offset(offset, separator='') -> str:
    '''
    The offset counts minutes from local time to UTC, so a zone ahead of UTC
    has a negative offset and gets a + sign, and the other way around.

    >>> format_offset(330)
    '-0530'
    >>> format_offset(-60, ':')
    '+01:00'
    '''
    sign = '-' if offset > 0 else '+'
    (hours, minutes) = divmod(abs(offset), 60)
    return f'{sign}{leading_zeroes(hours)}{separator}{leading_zeroes(minutes)}'

class Token:
    __slots__ = ('spelling', 'resolver')

    def __init__(self, spelling, resolver):
        object.__setattr__(self, 'spelling', spelling)
        object.__setattr__(self, 'resolver', resolver)

    def __setattr__(self, key, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable.')

    def __repr__(self):
        return f'Token({self.spelling!r})'

    def resolve(self, instant, pack) -> str:
        return str(self.resolver(instant, pack))

TOKENS = {
    token.spelling: token for token in [
        Token('YYYY', lambda i, p: leading_zeroes(i.year, 4)),
        Token('YY', lambda i, p: leading_zeroes(i.year % 100)),
        Token('MMMM', lambda i, p: p.months(i)),
        Token('MMM', lambda i, p: p.months_short(i)),
        Token('MM', lambda i, p: leading_zeroes(i.month + 1)),
        Token('M', lambda i, p: i.month + 1),
        Token('DDD', lambda i, p: p.weekdays[i.weekday]),
        Token('DD', lambda i, p: p.weekdays_short[i.weekday]),
        Token('D', lambda i, p: p.weekdays_min[i.weekday]),
        Token('dd', lambda i, p: leading_zeroes(i.day)),
        Token('d', lambda i, p: i.day),
        Token('HH', lambda i, p: leading_zeroes(i.hour)),
        Token('H', lambda i, p: i.hour),
        Token('hh', lambda i, p: leading_zeroes(twelve_hour(i.hour))),
        Token('h', lambda i, p: twelve_hour(i.hour)),
        Token('mm', lambda i, p: leading_zeroes(i.minute)),
        Token('m', lambda i, p: i.minute),
        Token('ss', lambda i, p: leading_zeroes(i.second)),
        Token('s', lambda i, p: i.second),
        Token('ff', lambda i, p: leading_zeroes(i.millisecond, 3)),
        Token('f', lambda i, p: i.millisecond),
        Token('A', lambda i, p: p.meridiem(i.hour, False)),
        Token('a', lambda i, p: p.meridiem(i.hour, True)),
        Token('ZZ', lambda i, p: format_offset(i.offset)),
        Token('Z', lambda i, p: format_offset(i.offset, ':')),
    ]
}

# Longer spellings go first in the alternation so that MMMM is never read as
# MMM followed by M.
TOKEN_PATTERN = re.compile(
    '|'.join(re.escape(spelling) for spelling in sorted(TOKENS, key=len, reverse=True))
)

def tokenize(pattern):
    '''
    Yield the pieces of the pattern in order. Recognized tokens come out as
    Token objects and the text between them comes out as plain strings.

    >>> list(tokenize('dd/MM/YYYY'))
    [Token('dd'), '/', Token('MM'), '/', Token('YYYY')]
    '''
    position = 0
    for match in TOKEN_PATTERN.finditer(pattern):
        if match.start() > position:
            yield pattern[position:match.start()]
        yield TOKENS[match.group()]
        position = match.end()

    if position < len(pattern):
        yield pattern[position:]

def render(pattern, instant, pack) -> str:
    pieces = []
    for piece in tokenize(pattern):
        if isinstance(piece, Token):
            piece = piece.resolve(instant, pack)
        pieces.append(piece)
    return ''.join(pieces)
