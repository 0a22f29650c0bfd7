class PatternDateException(Exception):
    pass

class InvalidFormat(PatternDateException, TypeError):
    def __init__(self, format=None):
        super().__init__('Argument `format` must be a string')
        self.format = format

class InvalidDate(PatternDateException, TypeError):
    def __init__(self, date=None):
        super().__init__('Argument `date` must be instance of Date or Unix Timestamp or ISODate String')
        self.date = date

class InvalidConfig(PatternDateException, ValueError):
    pass
