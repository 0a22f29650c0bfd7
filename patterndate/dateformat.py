'''
dateformat
==========

Format dates with patterns like "DDD, d MMMM YYYY HH:mm".

>>> dateformat.format('dd/MM/YYYY', '2024-08-11T15:20:03.123Z')
'11/08/2024'
>>> dateformat.register('customDate', 'dd/MM/YYYY')
>>> dateformat.format('customDate', '2024-08-11T15:20:03.123Z')
'11/08/2024'

Registered aliases and literal patterns share one namespace. If the format you
pass is the name of an alias, the alias wins, so don't name an alias after a
pattern you intend to use literally.

The module-level functions use a shared DateFormatter. If you want your own
set of languages and aliases, make your own DateFormatter.

Command line
------------
> dateformat.py pattern [date ...] <flags>

pattern:
    The format pattern or the name of an alias from the config file.

date:
    Dates to format, as ISO-8601 strings or Unix timestamps in milliseconds.
    Uses !i for stdin or !c for clipboard. If omitted, formats the current time.

--lang name:
    Use this language. Unknown languages leave the configured language in place.

--config path:
    Load the language and aliases from this JSON file instead of
    ~/.patterndate.json.

--clipboard:
    Also copy the output to the clipboard.
'''
import argparse
import importlib
import os
import sys
import threading

from voussoirkit import betterhelp
from voussoirkit import configlayers
from voussoirkit import pipeable
from voussoirkit import vlogging

from patterndate import exceptions
from patterndate import instants
from patterndate import languages
from patterndate import tokens

log = vlogging.get_logger(__name__, 'patterndate')

leading_zeroes = tokens.leading_zeroes

# Language packs that ship with patterndate, by the module that holds them.
# They are only imported when asked for, and importing them registers nothing.
BUNDLED_LANGUAGES = {
    'be': 'patterndate.belarusian_pack',
}

DEFAULT_CONFIG_FILE = os.path.join('~', '.patterndate.json')
DEFAULT_CONFIG = {
    'language': 'en',
    'aliases': {},
}

class DateFormatter:
    '''
    Holds a LanguageRegistry and a table of pattern aliases. All three of
    set_language, register, and format take the same lock, so one formatter
    can be shared between threads.
    '''
    def __init__(self, registry=None):
        if registry is None:
            registry = languages.LanguageRegistry()
        self.languages = registry
        self._aliases = {}
        self._lock = threading.Lock()

    def __repr__(self):
        return f'DateFormatter(languages={self.languages!r}, aliases={len(self._aliases)})'

    def aliases(self):
        with self._lock:
            return self._aliases.copy()

    def format(self, format, date=None) -> str:
        '''
        Render the date with the pattern, or with the pattern registered under
        that alias name.

        Raises exceptions.InvalidFormat if format is not a string, and
        exceptions.InvalidDate if the date cannot be understood.
        '''
        if not isinstance(format, str):
            raise exceptions.InvalidFormat(format)

        instant = instants.normalize(date)

        with self._lock:
            pattern = self._resolve_pattern(format)
            pack = self.languages.current

        return tokens.render(pattern, instant, pack)

    def get_current_language_name(self) -> str:
        with self._lock:
            return self.languages.current_name

    def register(self, name, pattern) -> None:
        '''
        Save the pattern under this name. The pattern is not checked, unknown
        tokens will simply come out as literal text.
        '''
        if not isinstance(name, str):
            raise TypeError(f'name should be {str}, not {type(name)}.')
        if not isinstance(pattern, str):
            raise TypeError(f'pattern should be {str}, not {type(pattern)}.')

        with self._lock:
            if name in self._aliases:
                log.debug('Replacing alias %s: %s -> %s.', name, self._aliases[name], pattern)
            self._aliases[name] = pattern

    def _resolve_pattern(self, format):
        return self._aliases.get(format, format)

    def resolve_pattern(self, format) -> str:
        with self._lock:
            return self._resolve_pattern(format)

    def set_language(self, name=None, pack=None) -> str:
        '''
        See languages.LanguageRegistry.set_language.
        '''
        with self._lock:
            return self.languages.set_language(name, pack)

    lang = set_language

DEFAULT = DateFormatter()

def format(format, date=None):
    return DEFAULT.format(format, date)

def get_current_language_name():
    return DEFAULT.get_current_language_name()

def register(name, pattern):
    return DEFAULT.register(name, pattern)

def set_language(name=None, pack=None):
    return DEFAULT.set_language(name, pack)

lang = set_language

def use_language(name, formatter=None):
    '''
    Switch the formatter to this language, first loading it from
    BUNDLED_LANGUAGES if the formatter does not know it yet.
    '''
    if formatter is None:
        formatter = DEFAULT

    if name not in formatter.languages and name in BUNDLED_LANGUAGES:
        module = importlib.import_module(BUNDLED_LANGUAGES[name])
        return formatter.set_language(name, module.PACK)

    return formatter.set_language(name)

def load_config(filepath=None, formatter=None):
    '''
    Layer the JSON config at filepath over DEFAULT_CONFIG, then apply its
    aliases and language to the formatter. Return the final config.

    Raises exceptions.InvalidConfig if the aliases are not an object of
    strings or the language is not a string.
    '''
    if formatter is None:
        formatter = DEFAULT

    if filepath is None:
        filepath = os.path.expanduser(DEFAULT_CONFIG_FILE)

    try:
        (config, needs_rewrite) = configlayers.load_file(filepath, DEFAULT_CONFIG)
    except ValueError as exc:
        raise exceptions.InvalidConfig(f'{filepath} is not valid JSON.') from exc
    except AttributeError as exc:
        # layer_json walks the file as a dict.
        raise exceptions.InvalidConfig(f'{filepath} should hold a JSON object.') from exc
    if needs_rewrite:
        log.debug('Config %s is missing or incomplete, using defaults for the rest.', filepath)

    aliases = config['aliases']
    if not isinstance(aliases, dict):
        raise exceptions.InvalidConfig(f'aliases in {filepath} should be an object, not {type(aliases).__name__}.')
    for (name, pattern) in aliases.items():
        if not isinstance(pattern, str):
            raise exceptions.InvalidConfig(f'Alias {name} in {filepath} should be a string, not {type(pattern).__name__}.')

    language = config['language']
    if not isinstance(language, str):
        raise exceptions.InvalidConfig(f'language in {filepath} should be a string, not {type(language).__name__}.')

    for (name, pattern) in aliases.items():
        formatter.register(name, pattern)

    use_language(language, formatter)
    return config

def parse_date_argument(arg):
    '''
    Numbers on the command line are timestamps, everything else is left for
    the ISO parser.
    '''
    for cast in (int, float):
        try:
            return cast(arg)
        except ValueError:
            pass
    return arg

def dateformat_argparse(args):
    try:
        load_config(args.config)
    except exceptions.InvalidConfig as exc:
        pipeable.stderr(str(exc))
        return 1

    if args.lang is not None:
        use_language(args.lang)

    if args.dates:
        dates = pipeable.input_many(args.dates, strip=True, skip_blank=True)
        dates = [parse_date_argument(date) for date in dates]
    else:
        dates = [None]

    try:
        lines = [format(args.pattern, date) for date in dates]
    except exceptions.PatternDateException as exc:
        pipeable.stderr(str(exc))
        return 1

    for line in lines:
        pipeable.stdout(line)

    if args.clipboard:
        import pyperclip
        pyperclip.copy('\n'.join(lines))

    return 0

@pipeable.ctrlc_return1
@vlogging.main_decorator
def main(argv):
    parser = argparse.ArgumentParser(description=__doc__)

    parser.add_argument('pattern')
    parser.add_argument('dates', nargs='*')
    parser.add_argument('--lang', dest='lang', default=None)
    parser.add_argument('--config', dest='config', default=None)
    parser.add_argument('--clipboard', dest='clipboard', action='store_true')
    parser.set_defaults(func=dateformat_argparse)

    return betterhelp.go(parser, argv)

def main_cli():
    return main(sys.argv[1:])

if __name__ == '__main__':
    raise SystemExit(main(sys.argv[1:]))
