#
# Name: errors.py
# Purpose: Exceptions raised while decoding METAR/TAF reports.
#


class Error(Exception):
    pass


class DecodeError(Error):
    """A required capture was present but could not be decoded"""

    def __init__(self, decoder, field, value):
        self.decoder = decoder
        self.field = field
        self.value = value
        super(DecodeError, self).__init__('%s: cannot decode %s from %r' % (decoder, field, value))


class DateError(Error):
    pass


class GrammarExhausted(Error):
    """No rule in the table matched the remaining text"""

    def __init__(self, table, remaining):
        self.table = table
        self.remaining = remaining
        super(GrammarExhausted, self).__init__('No rule in %s table matches: %r' % (table, remaining))


class UnsupportedRemark(Error):
    pass


class FetchError(Error):
    pass
