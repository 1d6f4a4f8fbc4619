#
# Name: groups.py
# Purpose: TAF forecast-change groups (FM, BECMG, TEMPO, PROB). All four
#          kinds share one structure; the kind only changes the header and
#          which captures set the validity window.
#
from . import grammar
from .dates import format_time
from .observation import Observation

FROM = 'FM'
BECOMING = 'BECMG'
TEMPORARY = 'TEMPO'
PROBABILITY = 'PROB'

KINDS = (FROM, BECOMING, TEMPORARY, PROBABILITY)

_Labels = {FROM: 'From', BECOMING: 'Becoming', TEMPORARY: 'Temporary'}


class ForecastChangeGroup(Observation):
    """One FM, BECMG, TEMPO or PROB period of a TAF.

reftime is the parent report's issue time, so the month and year of the
parent (including an explicit date header) carry over to the group's times.
"""

    def __init__(self, kind, reftime=None, probability=None, temporary=False):
        if kind not in KINDS:
            raise ValueError('Unknown forecast change group: %s' % kind)
        super(ForecastChangeGroup, self).__init__(reftime)
        self.kind = kind
        self.probability = probability
        self.temporary = temporary
        self.valid_from = None
        self.valid_to = None

    @property
    def label(self):
        if self.kind == PROBABILITY:
            label = '%d percent probability' % self.probability
            if self.temporary:
                label += ' of temporary'
            return label
        return _Labels[self.kind]

    def handlers(self):
        d = super(ForecastChangeGroup, self).handlers()
        d['valtmper'] = self.on_valid_period
        return d

    def decode_body(self, text):
        return self.decode(text, grammar.GROUP, 'group')

    def set_from(self, daytime):
        """FMddhhmm start time"""
        self.valid_from = self.resolve_time(daytime[0:2], daytime[2:4], daytime[4:6], self.reftime)

    def on_valid_period(self, m):
        begin, end = m.group('bvaltime'), m.group('evaltime')
        self.valid_from = self.resolve_time(begin[:2], begin[2:], '00', self.reftime)
        self.valid_to = self.resolve_time(end[:2], end[2:], '00', self.reftime)

    def header(self):
        if self.kind == FROM:
            return 'From %s' % format_time(self.valid_from)
        return '%s from %s to %s' % (self.label, format_time(self.valid_from),
                                     format_time(self.valid_to))

    def render(self):

        lines = [self.header()]
        lines += ['  %s' % line for line in self.render_fields()]
        if self.pressure.altimeter is not None:
            lines += ['  %s' % line for line in self.pressure.render()]
        if self.nosig:
            lines.append('  No significant change')
        lines += ['  %s' % line for line in self.render_unparsed()]
        return lines

    def as_dict(self):
        d = {'kind': self.kind, 'valid_from': self.valid_from, 'valid_to': self.valid_to}
        if self.kind == PROBABILITY:
            d.update({'probability': self.probability, 'temporary': self.temporary})
        d.update(self.fields_dict())
        return d
