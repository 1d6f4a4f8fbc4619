#
# Name: visibility.py
# Purpose: Prevailing visibility plus the visibility remarks (variable,
#          sector, second location, tower and surface).
#
from .errors import DecodeError
from .utils import contains_only_numbers, parse_fraction, round_value, to_int

KM_PER_MILE = 1.609344

_Qualifiers = {'M': 'less than', 'P': 'greater than'}


def km_to_miles(km):
    return km / KM_PER_MILE


def miles_to_km(miles):
    return miles * KM_PER_MILE


def _distance(text):
    """Strips an M/P qualifier and returns (qualifier, miles-or-km value, split)"""
    text = text.strip()
    qualifier = None
    if text[:1] in _Qualifiers:
        qualifier, text = text[0], text[1:]
    return qualifier, parse_fraction(text), ' ' in text


def _miles_text(miles):
    value = round_value(miles, 2)
    if value == int(value):
        value = int(value)
    return '%s statute mile%s' % (value, '' if value == 1 else 's')


class Visibility(object):
    """Prevailing visibility, kept in statute miles"""

    def __init__(self):
        self.miles = None
        self.less_than = False
        self.greater_than = False
        self.cavok = False
        self.no_directional_variation = False
        self.not_known = False
        self.split_fraction = False
        self.direction = None
        #
        # remarks
        self.variable_low = None
        self.variable_high = None
        self.runway = None
        self.runway_miles = None
        self.sector = None
        self.sector_miles = None
        self.tower = None
        self.surface = None

    @property
    def km(self):
        if self.miles is None:
            return None
        return round_value(miles_to_km(self.miles), 2)

    @property
    def meters(self):
        if self.miles is None:
            return None
        return int(round_value(miles_to_km(self.miles) * 1000.0, 0))

    def _qualify(self, qualifier):
        if qualifier == 'M':
            self.less_than = True
        elif qualifier == 'P':
            self.greater_than = True

    def ingest(self, captures):

        vis = captures.get('vis')
        if vis == 'CAVOK':
            self.cavok = True
            return
        if vis == 'NDV':
            self.no_directional_variation = True
            return

        units = captures.get('units')
        if units:
            qualifier, value, self.split_fraction = _distance(captures['distu'])
            self._qualify(qualifier)
            if units == 'KM':
                self.miles = km_to_miles(value)
            elif units == 'M':
                self.miles = km_to_miles(value / 1000.0)
            else:
                self.miles = value
            return

        dist = captures.get('dist') or ''
        if dist[:1] in _Qualifiers:
            self._qualify(dist[0])
            dist = dist[1:]

        if not contains_only_numbers(dist):
            self.not_known = True
            return

        direction = captures.get('dir')
        if direction == 'NDV':
            self.no_directional_variation = True
        elif direction:
            self.direction = direction

        if dist == '9999':
            km = 10.0
        elif dist == '0000':
            km = 0.05
            self.less_than = True
        else:
            km = int(dist) / 1000.0
        self.miles = km_to_miles(km)

    def ingest_variable(self, captures):
        """VIS remark: variable prevailing, second location or sector visibility"""

        qualifier, low, split = _distance(captures['dist1'])
        add = captures.get('add')
        if add == 'V':
            qualifier, high, split = _distance(captures['dist2'])
            if high < low:
                raise DecodeError('visibility', 'variable range', '%s V %s' % (
                    captures['dist1'], captures['dist2']))
            self.variable_low, self.variable_high = low, high
            return 'variable visibility between %s and %s' % (_miles_text(low), _miles_text(high))

        if add == 'RWY':
            self.runway = to_int(captures['dist2'], 'visibility', 'runway')
            self.runway_miles = low
            return 'visibility of %s at runway %02d' % (_miles_text(low), self.runway)

        direction = captures.get('dir')
        if direction is None:
            raise DecodeError('visibility', 'sector', captures.get('dist1'))
        self.sector, self.sector_miles = direction, low
        return 'visibility of %s in the %s octant' % (_miles_text(low), direction)

    def ingest_tower_surface(self, captures):
        """TWR VIS / SFC VIS remark. Recorded only; not merged into the prevailing value."""

        qualifier, miles, split = _distance(captures['dist'])
        if captures['type'] == 'TWR':
            self.tower = miles
            return 'tower visibility %s' % _miles_text(miles)
        self.surface = miles
        return 'surface visibility %s' % _miles_text(miles)

    def render(self):

        if self.cavok:
            return ['Visibility: ceiling and visibility OK (CAVOK)']
        if self.miles is None:
            if self.no_directional_variation:
                return ['Visibility: no directional variation']
            return ['Visibility: cannot be determined']

        qualifier = ''
        if self.less_than:
            qualifier = 'less than '
        elif self.greater_than:
            qualifier = 'greater than '

        text = 'Visibility: %s%s (%s km)' % (qualifier, _miles_text(self.miles), self.km)
        if self.direction:
            text += ' toward the %s' % self.direction
        if self.no_directional_variation:
            text += ', no directional variation'
        return [text]

    def as_dict(self):
        d = {'miles': None if self.miles is None else round_value(self.miles, 2),
             'km': self.km, 'less_than': self.less_than, 'greater_than': self.greater_than,
             'cavok': self.cavok, 'no_directional_variation': self.no_directional_variation,
             'not_known': self.not_known}
        for key in ('direction', 'variable_low', 'variable_high', 'runway', 'runway_miles',
                    'sector', 'sector_miles', 'tower', 'surface'):
            value = getattr(self, key)
            if value is not None:
                d[key] = value
        return d
