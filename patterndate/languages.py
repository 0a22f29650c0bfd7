'''
languages
=========

A LanguagePack supplies the words that go into a formatted date: month names,
weekday names, and the meridiem. The formatter only ever talks to packs through
the members of LanguagePack, so a new language is a subclass that fills
them in.

The LanguageRegistry holds the packs by name and remembers which one is
current. Asking for a language that was never registered is not an error, you
just keep the language you had.
'''
from voussoirkit import vlogging

log = vlogging.get_logger(__name__)

DAYS_IN_WEEK = 7
MONTHS_IN_YEAR = 12

class LanguagePack:
    weekdays = ()
    weekdays_short = ()
    weekdays_min = ()

    def months(self, instant) -> str:
        raise NotImplementedError

    def months_short(self, instant) -> str:
        raise NotImplementedError

    def meridiem(self, hour, lowercase) -> str:
        raise NotImplementedError

    def validate(self):
        '''
        Raise ValueError if any of the weekday sequences is not exactly seven
        strings long.
        '''
        for attribute in ('weekdays', 'weekdays_short', 'weekdays_min'):
            names = getattr(self, attribute)
            if len(names) != DAYS_IN_WEEK:
                raise ValueError(f'{attribute} should have {DAYS_IN_WEEK} entries, not {len(names)}.')
            if not all(isinstance(name, str) for name in names):
                raise ValueError(f'{attribute} should only contain strings.')

def am_pm(hour, lowercase):
    if hour < 12:
        meridiem = 'AM'
    else:
        meridiem = 'PM'

    if lowercase:
        return meridiem.lower()
    return meridiem

class SimpleLanguagePack(LanguagePack):
    '''
    A pack whose month names come straight out of two lists indexed by the
    instant's month, which is enough for most languages.
    '''
    def __init__(
            self,
            *,
            months,
            months_short,
            weekdays,
            weekdays_short,
            weekdays_min,
            meridiem=None,
        ):
        if len(months) != MONTHS_IN_YEAR or len(months_short) != MONTHS_IN_YEAR:
            raise ValueError(f'months and months_short should have {MONTHS_IN_YEAR} entries.')

        self._months = tuple(months)
        self._months_short = tuple(months_short)
        self.weekdays = tuple(weekdays)
        self.weekdays_short = tuple(weekdays_short)
        self.weekdays_min = tuple(weekdays_min)
        self._meridiem = meridiem or am_pm
        self.validate()

    def months(self, instant):
        return self._months[instant.month]

    def months_short(self, instant):
        return self._months_short[instant.month]

    def meridiem(self, hour, lowercase):
        return self._meridiem(hour, lowercase)

ENGLISH = SimpleLanguagePack(
    months='January_February_March_April_May_June_July_August_September_October_November_December'.split('_'),
    months_short='Jan_Feb_Mar_Apr_May_Jun_Jul_Aug_Sep_Oct_Nov_Dec'.split('_'),
    weekdays='Sunday_Monday_Tuesday_Wednesday_Thursday_Friday_Saturday'.split('_'),
    weekdays_short='Sun_Mon_Tue_Wed_Thu_Fri_Sat'.split('_'),
    weekdays_min='Su_Mo_Tu_We_Th_Fr_Sa'.split('_'),
)

class LanguageRegistry:
    def __init__(self, default_name='en', default_pack=ENGLISH):
        self.default_name = default_name
        self._packs = {}
        self._register(default_name, default_pack)
        self.current_name = default_name

    def __contains__(self, name):
        return name in self._packs

    def __repr__(self):
        return f'LanguageRegistry(current={self.current_name!r}, names={self.names()!r})'

    def _register(self, name, pack):
        if not isinstance(name, str):
            raise TypeError(f'name should be {str}, not {type(name)}.')
        if not isinstance(pack, LanguagePack):
            raise TypeError(f'pack should be {LanguagePack}, not {type(pack)}.')
        pack.validate()
        self._packs[name] = pack
        log.debug('Registered language %s.', name)

    @property
    def current(self):
        return self._packs[self.current_name]

    def get(self, name):
        '''
        Return the pack by this name, or the current pack if there is no
        such language.
        '''
        return self._packs.get(name, self.current)

    def names(self):
        return sorted(self._packs)

    def set_language(self, name=None, pack=None) -> str:
        '''
        With a name and a pack, register the pack under that name, overwriting
        any previous one, and make it current.
        With only a name, switch to that language if it is registered.
        With nothing, change nothing.

        Returns the name of the language that is current afterwards, so an
        unknown name gives back the language you already had.
        '''
        if pack is not None:
            if name is None:
                raise TypeError('A language pack needs a name.')
            self._register(name, pack)
            self.current_name = name
            return name

        if name is None:
            return self.current_name

        if name in self._packs:
            if name != self.current_name:
                log.debug('Switching language from %s to %s.', self.current_name, name)
            self.current_name = name
        else:
            log.debug('Language %s is not registered, staying on %s.', name, self.current_name)

        return self.current_name
