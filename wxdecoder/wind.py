#
# Name: wind.py
# Purpose: Surface wind, variable direction and peak wind.
#
from .errors import DecodeError, UnsupportedRemark
from .utils import contains_only_numbers, round_value, to_int

MPS_PER_KNOT = 0.5148
MPH_PER_KNOT = 1.1508

MAIN = 'M'
REMARK = 'R'

#
# 16-point compass, half-open intervals [lower, upper) in degrees. North wraps.
_CompassPoints = [(12.5, 'N'), (32.5, 'NNE'), (55.0, 'NE'), (77.5, 'ENE'),
                  (100.0, 'E'), (122.5, 'ESE'), (145.0, 'SE'), (167.5, 'SSE'),
                  (190.0, 'S'), (212.5, 'SSW'), (235.0, 'SW'), (257.5, 'WSW'),
                  (280.0, 'W'), (302.5, 'WNW'), (325.0, 'NW'), (347.5, 'NNW'),
                  (360.0, 'N')]


def compass(degrees):
    """Returns the 16-point compass label for a direction in degrees"""
    d = float(degrees) % 360.0
    for upper, label in _CompassPoints:
        if d < upper:
            return label
    return 'N'


def to_mph(knots):
    if knots is None:
        return None
    return int(round_value(knots * MPH_PER_KNOT, 0))


def _knots(value, units, direction):
    if units in ('KT', 'KTS') or (direction == 'VRB' and units != 'MPS'):
        return value
    return round_value(value / MPS_PER_KNOT, 2)


def _speed_text(knots):
    return '%s knots (%d mph)' % (_number(knots), to_mph(knots))


def _number(value):
    if value == int(value):
        return '%d' % value
    return '%s' % value


class PeakWind(object):

    def __init__(self, direction, speed, hour=None, minute=None, greater_than=False):
        self.direction = direction
        self.speed = speed
        self.hour = hour
        self.minute = minute
        self.greater_than = greater_than

    @property
    def compass(self):
        return compass(self.direction)

    @property
    def speed_mph(self):
        return to_mph(self.speed)

    def render(self):
        text = 'peak wind from the %s (%d degrees) at %s%s' % (
            self.compass, self.direction, 'more than ' if self.greater_than else '',
            _speed_text(self.speed))
        if self.hour is not None:
            text += ' at %02d:%02d' % (self.hour, self.minute)
        elif self.minute is not None:
            text += ' at %d minutes past the hour' % self.minute
        return text

    def as_dict(self):
        return {'direction': self.direction, 'compass': self.compass, 'speed': self.speed,
                'mph': self.speed_mph, 'hour': self.hour, 'minute': self.minute}


class Wind(object):
    """Wind direction in degrees, speed and gusts in knots"""

    def __init__(self):
        self.direction = None
        self.speed = None
        self.gust = None
        self.units = None
        self.calm = False
        self.variable = False
        self.variable_from = None
        self.variable_to = None
        self.not_determined = False
        self.peak = None

    @property
    def compass(self):
        if self.direction is None or self.calm:
            return None
        return compass(self.direction)

    @property
    def variable_range(self):
        """True when the direction varies by 60 degrees or more at more than 6 knots"""
        return self.variable_from is not None

    @property
    def speed_mph(self):
        return to_mph(self.speed)

    @property
    def gust_mph(self):
        return to_mph(self.gust)

    def _set_range(self, variable):
        if variable is not None:
            self.variable_from, self.variable_to = variable

    def ingest(self, captures, role=MAIN):

        if role != MAIN:
            raise UnsupportedRemark('wind group in %s context' % role)

        varfrom, varto = captures.get('varfrom'), captures.get('varto')
        variable = None
        if varfrom and varto:
            variable = (to_int(varfrom, 'wind', 'varfrom'), to_int(varto, 'wind', 'varto'))

        direction = captures.get('dir')
        if direction is None:
            self._set_range(variable)
            return

        if direction != 'VRB' and not contains_only_numbers(direction):
            self._set_range(variable)
            self.not_determined = True
            return

        if direction != 'VRB' and int(direction) > 360:
            raise DecodeError('wind', 'direction', direction)

        units = captures.get('units')
        speed = captures.get('speed')
        if speed is None:
            raise DecodeError('wind', 'speed', direction)
        speed = _knots(to_int(speed, 'wind', 'speed'), units, direction)

        gust = captures.get('gust')
        if gust is not None:
            gust = _knots(to_int(gust, 'wind', 'gust'), units, direction)

        # nothing is stored until every capture has been checked
        self._set_range(variable)
        self.units = units
        self.speed = speed
        self.gust = gust
        if direction == 'VRB':
            self.variable = True
            return

        self.direction = int(direction)
        if self.direction == 0:
            self.calm = True

    def ingest_peak(self, captures):

        speed = captures.get('speed') or ''
        greater_than = speed.startswith('P')
        hour = captures.get('hour')
        self.peak = PeakWind(to_int(captures.get('dir'), 'peak wind', 'direction'),
                             to_int(speed.lstrip('P'), 'peak wind', 'speed'),
                             None if hour is None else to_int(hour, 'peak wind', 'hour'),
                             to_int(captures.get('min'), 'peak wind', 'minute'),
                             greater_than)
        return self.peak

    def render(self):

        lines = []
        if self.not_determined:
            lines.append('Wind: cannot be determined')
        elif self.speed is None:
            if not self.variable_range:
                lines.append('Wind: cannot be determined')
        elif self.calm or (self.speed == 0 and not self.variable):
            lines.append('Wind: calm')
        elif self.variable:
            lines.append('Wind: variable at %s' % _speed_text(self.speed))
        elif self.direction is None:
            lines.append('Wind: cannot be determined')
        else:
            lines.append('Wind: from the %s (%d degrees) at %s' % (
                self.compass, self.direction, _speed_text(self.speed)))

        if self.gust is not None and lines and not self.calm:
            lines[-1] += ', gusting to %s' % _speed_text(self.gust)

        if self.variable_range:
            lines.append('Wind direction variable between %s (%d degrees) and %s (%d degrees)' % (
                compass(self.variable_from), self.variable_from,
                compass(self.variable_to), self.variable_to))

        return lines

    def as_dict(self):
        d = {'direction': self.direction, 'compass': self.compass, 'speed': self.speed,
             'gust': self.gust, 'calm': self.calm, 'variable': self.variable,
             'not_determined': self.not_determined}
        if self.variable_range:
            d.update({'variable_from': self.variable_from, 'variable_to': self.variable_to})
        if self.peak is not None:
            d['peak'] = self.peak.as_dict()
        return d
