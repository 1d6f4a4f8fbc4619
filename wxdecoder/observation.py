#
# Name: observation.py
# Purpose: The block of weather fields shared by reports and forecast-change
#          groups, with the handlers that fill it from the rule tables.
#
import logging

from . import engine
from .dates import FORECAST_WINDOW, set_date
from .errors import DateError
from .pressure import Pressure
from .rvr import RunwayVisualRange, render_ranges
from .sky import SkyCondition, render_layers
from .temperature import Temperature
from .visibility import Visibility
from .weather import WeatherCondition, render_conditions
from .wind import Wind

log = logging.getLogger(__name__)


class Observation(object):

    def __init__(self, reftime=None):
        self.reftime = reftime
        self.wind = Wind()
        self.visibility = Visibility()
        self.temperature = Temperature()
        self.pressure = Pressure()
        self.sky = []
        self.weather = []
        self.rvr = []
        self.nosig = False
        self.unparsed = []
        self.diagnostics = []

    def handlers(self):
        return {
            'wind': self.on_wind,
            'visibility': self.on_visibility,
            'runway': self.on_runway,
            'presentweather': self.on_weather,
            'skycondition': self.on_sky,
            'tempdewpoint': self.on_temperature,
            'altimeter': self.on_altimeter,
            'nosigchng': self.on_nosig,
        }

    def decode(self, text, table, name):
        unparsed = engine.decode(text, table, self.handlers(), self.diagnostics, name)
        self.unparsed.extend(unparsed)
        return unparsed

    def resolve_time(self, day, hour, minute, reference):
        """Timestamp within a couple of days after reference, or None"""
        try:
            return set_date(day, hour, minute, reftime=reference, ahead=FORECAST_WINDOW)
        except DateError as e:
            self.missing_context(e)
            return None

    def missing_context(self, e):
        log.warning('Missing date context: %s', e)
        self.diagnostics.append(str(e))

    #######################################################################
    # Methods called by the engine
    def on_wind(self, m):
        self.wind.ingest(m.groupdict())

    def on_visibility(self, m):
        self.visibility.ingest(m.groupdict())

    def on_runway(self, m):
        entry = RunwayVisualRange()
        entry.ingest(m.groupdict())
        self.rvr.append(entry)

    def on_weather(self, m):
        condition = WeatherCondition()
        condition.ingest(m.groupdict())
        self.weather.append(condition)

    def on_sky(self, m):
        layer = SkyCondition()
        layer.ingest(m.groupdict())
        self.sky.append(layer)

    def on_temperature(self, m):
        self.temperature.ingest(m.groupdict())

    def on_altimeter(self, m):
        self.pressure.ingest(m.groupdict())

    def on_nosig(self, m):
        self.nosig = True

    #######################################################################
    # rendering
    def render_fields(self):

        lines = self.wind.render()
        lines += self.visibility.render()
        for text in render_ranges(self.rvr):
            lines.append('Runway visual range: %s' % text)
        for text in render_conditions(self.weather):
            lines.append('Weather: %s' % text)
        lines.append('Total sky conditions: %d' % len(self.sky))
        for text in render_layers(self.sky):
            lines.append('  %s' % text)
        return lines

    def render_unparsed(self):
        if not self.unparsed:
            return ['There is no unparsed data for this']
        return ['Unparsed data: %s' % ' '.join(self.unparsed)]

    def fields_dict(self):
        return {
            'wind': self.wind.as_dict(),
            'visibility': self.visibility.as_dict(),
            'temperature': self.temperature.as_dict(),
            'pressure': self.pressure.as_dict(),
            'sky': [layer.as_dict() for layer in self.sky],
            'weather': [condition.as_dict() for condition in self.weather],
            'rvr': [entry.as_dict() for entry in self.rvr],
            'nosig': self.nosig,
            'unparsed': list(self.unparsed),
            'diagnostics': list(self.diagnostics),
        }
