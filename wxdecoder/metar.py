#
# Name: metar.py
# Purpose: Decodes METAR/SPECI surface observations.
#
from . import grammar
from .engine import normalize
from .report import Report, split_remarks, strip_eot


class Metar(Report):
    """METAR decoder class"""

    report_type = 'METAR'

    def parse(self, text):

        self.raw = text
        text = normalize(strip_eot(text))
        if not text:
            return self

        body, remarks = split_remarks(text)
        self.decode(body, grammar.MAIN, 'main')
        if remarks:
            self.remarks.decode(remarks, self)
        return self


def decode_metar(text, reftime=None):
    """Returns the decoded Metar for text; reftime resolves the day of month"""
    return Metar(reftime).parse(text)
