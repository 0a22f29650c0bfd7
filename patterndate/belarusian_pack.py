'''
Belarusian language tables. This module only builds the pack, see belarusian
for the import that registers it.
'''
from patterndate import languages

LANGUAGE_NAME = 'be'

def meridiem(hour, lowercase):
    # Belarusian uses parts of the day rather than AM/PM, and they are
    # lowercase either way.
    if hour < 4:
        return 'ночы'
    if hour < 12:
        return 'раніцы'
    if hour < 17:
        return 'дня'
    return 'вечара'

PACK = languages.SimpleLanguagePack(
    months='студзень_люты_сакавік_красавік_травень_чэрвень_ліпень_жнівень_верасень_кастрычнік_лістапад_снежань'.split('_'),
    months_short='студ_лют_сак_крас_трав_чэрв_ліп_жнів_вер_каст_ліст_снеж'.split('_'),
    weekdays='нядзеля_панядзелак_аўторак_серада_чацвер_пятніца_субота'.split('_'),
    weekdays_short='нд_пн_ат_ср_чц_пт_сб'.split('_'),
    weekdays_min='нд_пн_ат_ср_чц_пт_сб'.split('_'),
    meridiem=meridiem,
)
