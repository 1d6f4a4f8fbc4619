#
# Name: temperature.py
# Purpose: Temperature and dew point in Celsius; Fahrenheit is always derived.
#
from .utils import round_value, to_int


def to_fahrenheit(celsius):
    if celsius is None:
        return None
    return round_value(celsius * 9.0 / 5.0 + 32.0, 2)


def signed(sign, value, field='temperature'):
    """Whole degrees with an M or - sign. Zero is never negative."""
    t = float(to_int(value, 'temperature', field))
    if sign in ('M', '-') and t != 0:
        t = -t
    return t


def tenths(sign, value, field='temperature'):
    """Tenths of a degree with a leading sign digit, 1 for negative"""
    t = to_int(value, 'temperature', field) / 10.0
    if sign == '1' and t != 0:
        t = -t
    return t


def _text(celsius):
    return '%s C (%s F)' % (celsius, to_fahrenheit(celsius))


class Temperature(object):

    def __init__(self):
        self.temperature = None
        self.dewpoint = None
        self.hourly_temperature = None
        self.hourly_dewpoint = None
        self.six_hour_max = None
        self.six_hour_min = None
        self.day_max = None
        self.day_min = None

    @property
    def fahrenheit(self):
        return to_fahrenheit(self.temperature)

    @property
    def dewpoint_fahrenheit(self):
        return to_fahrenheit(self.dewpoint)

    def ingest(self, captures):
        #
        # '//', 'XX' and 'MM' leave the value absent
        if captures.get('temp') is not None:
            self.temperature = signed(captures.get('signt'), captures['temp'])
        if captures.get('dewpt') is not None:
            self.dewpoint = signed(captures.get('signd'), captures['dewpt'], 'dew point')

    def ingest_hourly(self, captures):

        self.hourly_temperature = tenths(captures['tsign'], captures['temp'])
        text = 'hourly temperature %s' % _text(self.hourly_temperature)
        if captures.get('dewpt') is not None:
            self.hourly_dewpoint = tenths(captures['dsign'], captures['dewpt'], 'dew point')
            text += ', dew point %s' % _text(self.hourly_dewpoint)
        return text

    def ingest_six_hour(self, captures):

        value = tenths(captures['sign'], captures['temp'])
        if captures['type'] == '1':
            self.six_hour_max = value
            return '6-hour maximum temperature %s' % _text(value)
        self.six_hour_min = value
        return '6-hour minimum temperature %s' % _text(value)

    def ingest_day(self, captures):

        self.day_max = tenths(captures['maxsign'], captures['maxtemp'])
        self.day_min = tenths(captures['minsign'], captures['mintemp'])
        return '24-hour maximum temperature %s, minimum temperature %s' % (
            _text(self.day_max), _text(self.day_min))

    def render(self):

        lines = []
        if self.temperature is None:
            lines.append('Temperature: cannot be determined')
        else:
            lines.append('Temperature: %s' % _text(self.temperature))
        if self.dewpoint is None:
            lines.append('Dew point: cannot be determined')
        else:
            lines.append('Dew point: %s' % _text(self.dewpoint))
        return lines

    def as_dict(self):
        d = {}
        for key in ('temperature', 'dewpoint', 'hourly_temperature', 'hourly_dewpoint',
                    'six_hour_max', 'six_hour_min', 'day_max', 'day_min'):
            value = getattr(self, key)
            if value is not None:
                d[key] = value
        if self.temperature is not None:
            d['fahrenheit'] = self.fahrenheit
        if self.dewpoint is not None:
            d['dewpoint_fahrenheit'] = self.dewpoint_fahrenheit
        return d
