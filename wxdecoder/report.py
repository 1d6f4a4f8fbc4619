#
# Name: report.py
# Purpose: Fields and handlers common to METAR and TAF reports.
#
import re

from .dates import format_time, set_date
from .errors import DateError
from .observation import Observation
from .remarks import Remarks

_re_remarks = re.compile(r'(^|\s)RMK(\s|$)')

_Modifiers = {
    'AMD': 'amended',
    'AUTO': 'fully automated',
    'FINO': 'observation not available',
    'NIL': 'missing report',
    'TEST': 'test report',
    'COR': 'corrected',
    'CORR': 'corrected',
    'RTD': 'delayed',
}


def strip_eot(text):
    """Removes the '=' end-of-report marker and what follows it"""
    if text is None:
        return ''
    eot = text.find('=')
    if eot >= 0:
        text = text[:eot]
    return text


def split_remarks(text):
    """Returns (body, remarks); remarks is None without an RMK token"""
    m = _re_remarks.search(text)
    if m is None:
        return text, None
    return text[:m.start()] + ' ', text[m.end():]


def modifier_text(mod):
    if mod in _Modifiers:
        return _Modifiers[mod]
    if mod and mod.startswith('CC'):
        return 'corrected (%s)' % mod
    return mod


class Report(Observation):
    """Decoded report. Populated by parse(), read-only afterwards."""

    report_type = None

    def __init__(self, reftime=None):
        super(Report, self).__init__(reftime)
        self.raw = None
        self.station = None
        self.timestamp = None
        self.year = None
        self.month = None
        self.modifier = None
        self.valid_from = None
        self.valid_to = None
        self.next_forecast = None
        self.remarks = Remarks()

    def handlers(self):
        d = super(Report, self).handlers()
        d.update({
            'mnthdayyr': self.on_date_header,
            'reporttype': self.on_report_type,
            'station': self.on_station,
            'reportmodifier': self.on_modifier,
        })
        return d

    def parse(self, text):
        raise NotImplementedError

    #######################################################################
    # Methods called by the engine
    def on_date_header(self, m):
        self.year = m.group('year')
        self.month = m.group('month')

    def on_report_type(self, m):
        self.report_type = m.group('type')

    def on_station(self, m):

        self.station = m.group('station')
        try:
            self.timestamp = set_date(m.group('zday'), m.group('zhour'), m.group('zmin'),
                                      self.month, self.year, reftime=self.reftime)
        except DateError as e:
            self.missing_context(e)

        begin, end = m.group('bvaltime'), m.group('evaltime')
        if begin and end:
            reference = self.timestamp or self.reftime
            self.valid_from = self.resolve_time(begin[:2], begin[2:], '00', reference)
            self.valid_to = self.resolve_time(end[:2], end[2:], '00', reference)

    def on_modifier(self, m):
        self.modifier = m.group('mod')

    #######################################################################
    # rendering
    def render_header(self):

        lines = ['%s report for %s' % (self.report_type or 'Weather',
                                       self.station or 'unknown station'),
                 'Time: %s' % format_time(self.timestamp)]
        if self.modifier:
            lines.append('Report modifier: %s' % modifier_text(self.modifier))
        if self.valid_from is not None or self.valid_to is not None:
            lines.append('Valid from %s to %s' % (format_time(self.valid_from),
                                                  format_time(self.valid_to)))
        return lines

    def render_remarks(self):
        if not self.remarks.lines and not self.remarks.unparsed:
            return []
        return ['Remarks:'] + self.remarks.render()

    def render_diagnostics(self):
        return ['Could not decode: %s' % text for text in self.diagnostics]

    def render(self):

        lines = self.render_header()
        lines += self.render_fields()
        lines += self.temperature.render()
        lines += self.pressure.render()
        if self.nosig:
            lines.append('No significant change expected')
        lines += self.render_remarks()
        lines += self.render_unparsed()
        lines += self.render_diagnostics()
        return '\n'.join(lines)

    def as_dict(self):
        d = {'type': self.report_type, 'station': self.station, 'time': self.timestamp,
             'modifier': self.modifier, 'raw': self.raw}
        if self.valid_from is not None or self.valid_to is not None:
            d.update({'valid_from': self.valid_from, 'valid_to': self.valid_to})
        d.update(self.fields_dict())
        d['remarks'] = self.remarks.as_dict()
        return d
