#
# Name: pressure.py
# Purpose: Altimeter setting, sea-level pressure, pressure tendency and
#          QFE/QNH/QNE. Canonical unit is inches of mercury.
#
from .errors import DecodeError
from .utils import contains_only_numbers, round_value, to_int

HPA_PER_INHG = 33.8639
INHG_PER_HPA = 0.02953

PRECISION = 2
FINE_PRECISION = 5

_Tendency = {
    0: 'increasing, then decreasing',
    1: 'increasing, then steady; or increasing, then increasing more slowly',
    2: 'increasing steadily or unsteadily',
    3: 'decreasing or steady, then increasing; or increasing, then increasing more rapidly',
    4: 'steady',
    5: 'decreasing, then increasing',
    6: 'decreasing, then steady; or decreasing, then decreasing more slowly',
    7: 'decreasing steadily or unsteadily',
    8: 'steady or increasing, then decreasing; or decreasing, then decreasing more rapidly',
}

_PressureQ = {'QFE': 'field elevation', 'QNH': 'normal height', 'QNE': 'normal elevation'}


def inhg_to_hpa(inhg, precision=PRECISION):
    if inhg is None:
        return None
    return round_value(inhg * HPA_PER_INHG, precision)


def hpa_to_inhg(hpa, precision=PRECISION):
    if hpa is None:
        return None
    return round_value(hpa * INHG_PER_HPA, precision)


class Pressure(object):

    def __init__(self):
        self.altimeter = None
        self.sea_level = None
        self.sea_level_available = None
        self.tendency_code = None
        self.tendency = None
        self.q_type = None
        self.q_mm = None
        self.q_mb = None

    @property
    def hpa(self):
        return inhg_to_hpa(self.altimeter)

    @property
    def sea_level_hpa(self):
        return inhg_to_hpa(self.sea_level, 1)

    @property
    def tendency_hpa(self):
        return inhg_to_hpa(self.tendency, 1)

    @property
    def tendency_text(self):
        return _Tendency.get(self.tendency_code)

    def ingest(self, captures):

        press = captures.get('press')
        if not contains_only_numbers(press):
            return

        unit = captures.get('unit')
        if unit in ('A', 'AA', 'QNH') or (unit is None and captures.get('unit2') == 'INS'):
            self.altimeter = round_value(int(press) / 100.0, PRECISION)
        elif unit == 'Q':
            self.altimeter = hpa_to_inhg(int(press))
        else:
            raise DecodeError('pressure', 'unit', press)

    def ingest_sea_level(self, captures):

        press = captures.get('press')
        if press is None or press == 'NO':
            self.sea_level_available = False
            return 'sea-level pressure not available'

        if press[0] == '9':
            hpa = float('9' + press[0:2] + '.' + press[2])
        else:
            hpa = float('10' + press[0:2] + '.' + press[2])
        self.sea_level_available = True
        self.sea_level = hpa_to_inhg(hpa, FINE_PRECISION)
        return 'sea-level pressure %s inHg, %s hPa' % (self.sea_level, self.sea_level_hpa)

    def ingest_tendency(self, captures):

        self.tendency_code = to_int(captures['tend'], 'pressure', 'tendency code')
        text = '3-hour pressure tendency %s' % self.tendency_text
        press = captures['press']
        if '/' not in press:
            self.tendency = hpa_to_inhg(float(press[0:2] + '.' + press[2]), FINE_PRECISION)
            text += ', change of %s inHg (%s hPa)' % (self.tendency, self.tendency_hpa)
        return text

    def ingest_q(self, captures):

        self.q_type = captures['pressq']
        if captures.get('pressmm') is not None:
            self.q_mm = to_int(captures['pressmm'], 'pressure', 'mm')
        if captures.get('pressmb') is not None:
            self.q_mb = to_int(captures['pressmb'], 'pressure', 'mb')

        text = '%s (%s)' % (self.q_type, _PressureQ[self.q_type])
        if self.q_mm is not None:
            text += ' %d mm' % self.q_mm
        if self.q_mb is not None:
            text += ' %d mb' % self.q_mb
        return text

    def render(self):

        if self.altimeter is None:
            return ['Altimeter: cannot be determined']
        return ['Altimeter: %.2f inHg (%s hPa)' % (self.altimeter, self.hpa)]

    def as_dict(self):
        d = {'altimeter': self.altimeter, 'hpa': self.hpa}
        if self.sea_level_available is not None:
            d['sea_level'] = self.sea_level
            d['sea_level_hpa'] = self.sea_level_hpa
        if self.tendency_code is not None:
            d['tendency_code'] = self.tendency_code
            d['tendency'] = self.tendency
        if self.q_type is not None:
            d.update({'q_type': self.q_type, 'q_mm': self.q_mm, 'q_mb': self.q_mb})
        return d
