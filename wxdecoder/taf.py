#
# Name: taf.py
# Purpose: Decodes TAF forecasts. The body is cut into segments at the
#          forecast-change keywords before the engine runs, so each FM, BECMG,
#          TEMPO and PROB group is decoded on its own span of text.
#
import collections
import re

from . import grammar
from .dates import format_time
from .engine import normalize
from .groups import BECOMING, FROM, PROBABILITY, TEMPORARY, ForecastChangeGroup
from .report import Report, strip_eot
from .temperature import signed, to_fahrenheit

DELIMITER = '\x1e'

ForecastTemperature = collections.namedtuple('ForecastTemperature', 'celsius time')

_re_tempo = re.compile(r'\bTEMP0\b')
_re_prob = re.compile(r'\bPR0B(?=\d\d)')
_re_keyword = re.compile(r'(?<!PROB\d\d)\s+(?=(BECMG|TEMPO|PROB\d\d|RMK|LAST)(\s|$)|FM\d{6}|T[XN]M?\d\d/)')
_re_remark_segment = re.compile(r'^(RMK|LAST)(\s|$)')


def segment(text):
    """Splits a TAF into the main body and one segment per change group"""
    text = normalize(text.replace(DELIMITER, ' '))
    text = _re_prob.sub('PROB', _re_tempo.sub('TEMPO', text))
    text = _re_keyword.sub(DELIMITER, text)
    return [normalize(part) for part in text.split(DELIMITER) if part.strip()]


class Taf(Report):
    """TAF decoder class"""

    report_type = 'TAF'

    def __init__(self, reftime=None):
        super(Taf, self).__init__(reftime)
        self.groups = []
        self.max_temperature = None
        self.min_temperature = None

    def _kind(self, kind):
        return [group for group in self.groups if group.kind == kind]

    @property
    def from_groups(self):
        return self._kind(FROM)

    @property
    def becoming_groups(self):
        return self._kind(BECOMING)

    @property
    def temporary_groups(self):
        return self._kind(TEMPORARY)

    @property
    def probability_groups(self):
        return self._kind(PROBABILITY)

    def handlers(self):
        d = super(Taf, self).handlers()
        d.update({
            'tafstr': self.on_report_type,
            'grpbecmgtempprob': self.on_change_group,
            'grpfm': self.on_from_group,
            'taftemp': self.on_forecast_temperature,
        })
        return d

    def parse(self, text):

        self.raw = text
        text = strip_eot(text)
        if not text.strip():
            return self

        for part in segment(text):
            if _re_remark_segment.match(part):
                if part.startswith('RMK'):
                    part = part[3:]
                self.remarks.decode(part, self)
            else:
                self.decode(part, grammar.TAF, 'taf')
        return self

    def _new_group(self, kind, **kwargs):
        group = ForecastChangeGroup(kind, reftime=self.timestamp or self.reftime, **kwargs)
        self.groups.append(group)
        return group

    #######################################################################
    # Methods called by the engine
    def on_change_group(self, m):

        if m.group('pct'):
            group = self._new_group(PROBABILITY, probability=int(m.group('pct')),
                                    temporary=bool(m.group('tempo')))
        else:
            group = self._new_group(m.group('group'))
        group.decode_body(m.group('obs'))

    def on_from_group(self, m):
        group = self._new_group(FROM)
        group.set_from(m.group('daytime'))
        group.decode_body(m.group('obs'))

    def on_forecast_temperature(self, m):

        celsius = signed(m.group('sign'), m.group('temp'), 'forecast temperature')
        when = self.resolve_time(m.group('zday'), m.group('zhour'), '00',
                                 self.timestamp or self.reftime)
        value = ForecastTemperature(celsius, when)
        if m.group('type') == 'TX':
            self.max_temperature = value
        else:
            self.min_temperature = value

    #######################################################################
    # rendering
    def _render_forecast_temperature(self, label, value):
        if value is None:
            return []
        return ['%s: %s C (%s F) at %s' % (label, value.celsius, to_fahrenheit(value.celsius),
                                            format_time(value.time))]

    def render(self):

        lines = self.render_header()
        lines += self.render_fields()
        if self.temperature.temperature is not None:
            lines += self.temperature.render()
        if self.pressure.altimeter is not None:
            lines += self.pressure.render()
        lines += self._render_forecast_temperature('Maximum temperature', self.max_temperature)
        lines += self._render_forecast_temperature('Minimum temperature', self.min_temperature)
        if self.nosig:
            lines.append('No significant change expected')
        lines += self.render_unparsed()
        for group in self.groups:
            lines += group.render()
        lines += self.render_remarks()
        lines += self.render_diagnostics()
        return '\n'.join(lines)

    def as_dict(self):
        d = super(Taf, self).as_dict()
        for key, value in (('max_temperature', self.max_temperature),
                           ('min_temperature', self.min_temperature)):
            d[key] = value._asdict() if value else None
        d['groups'] = [group.as_dict() for group in self.groups]
        return d


def decode_taf(text, reftime=None):
    """Returns the decoded Taf for text; reftime resolves the day of month"""
    return Taf(reftime).parse(text)
