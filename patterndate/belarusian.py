'''
Importing this module registers the Belarusian pack as "be" on the shared
formatter and makes it the current language. To add Belarusian to your own
DateFormatter without touching the shared one, use belarusian_pack.PACK.
'''
from patterndate import belarusian_pack
from patterndate import dateformat

LANGUAGE_NAME = belarusian_pack.LANGUAGE_NAME
PACK = belarusian_pack.PACK
BELARUSIAN = PACK

dateformat.set_language(LANGUAGE_NAME, PACK)
