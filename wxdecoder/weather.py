#
# Name: weather.py
# Purpose: Present weather phenomena, also used for the begin/end weather
#          remarks.
#
from .utils import chunks

_Intensity = {'-': 'light', '+': 'heavy'}

_Descriptors = {
    'MI': 'shallow',
    'PR': 'partial',
    'BC': 'patches of',
    'DR': 'low drifting',
    'BL': 'blowing',
    'SH': 'showers of',
    'TS': 'thunderstorm',
    'FZ': 'freezing',
}

_Precipitation = {
    'DZ': 'drizzle',
    'RA': 'rain',
    'SN': 'snow',
    'SG': 'snow grains',
    'IC': 'ice crystals',
    'PL': 'ice pellets',
    'GR': 'hail',
    'GS': 'small hail and/or snow pellets',
    'UP': 'unknown precipitation',
}

_Obstructions = {
    'BR': 'mist',
    'FG': 'fog',
    'FU': 'smoke',
    'VA': 'volcanic ash',
    'DU': 'widespread dust',
    'SA': 'sand',
    'HZ': 'haze',
    'PY': 'spray',
}

_Other = {
    'PO': 'well-developed dust/sand whirls',
    'SQ': 'squalls',
    'FC': 'funnel cloud',
    'SS': 'sandstorm',
    'DS': 'duststorm',
}


def _event(verb, value):
    if len(value) == 4:
        return ' %s at %s:%s' % (verb, value[:2], value[2:])
    return ' %s at %d minutes past the hour' % (verb, int(value))


class WeatherCondition(object):

    def __init__(self):
        self.intensity = 'moderate'
        self.in_vicinity = False
        self.descriptor = None
        self.precipitation = []
        self.obstruction = None
        self.other = None
        self.no_significant_weather = False
        self.not_observed = False
        self.begin = None
        self.end = None

    def ingest(self, captures):

        if captures.get('other') == 'NSW':
            self.no_significant_weather = True
            return

        intensity = (captures.get('int') or '') + (captures.get('int2') or '')
        if 'VC' in intensity:
            self.in_vicinity = True
        for sign in ('+', '-'):
            if sign in intensity:
                self.intensity = _Intensity[sign]

        desc = captures.get('desc')
        if desc:
            self.descriptor = ' '.join(_Descriptors[code] for code in chunks(desc))

        prec = (captures.get('prec') or '').replace('/', '')
        self.precipitation = [_Precipitation.get(code, code) for code in chunks(prec)]

        obsc = captures.get('obsc')
        if obsc:
            self.obstruction = _Obstructions[obsc]

        other = captures.get('other')
        if other:
            if other.startswith('/'):
                self.not_observed = True
            elif other == 'FC' and self.intensity == 'heavy':
                self.other = 'tornado or waterspout'
            else:
                self.other = _Other[other]

        if '/' in (captures.get('prec') or '') and not prec:
            self.not_observed = True

        if captures.get('begin'):
            self.begin = captures.get('begint')
        if captures.get('end'):
            self.end = captures.get('endt')

    def render(self):

        if self.no_significant_weather:
            return 'no significant weather'
        if self.not_observed and not (self.precipitation or self.descriptor or self.obstruction):
            return 'present weather not observed'

        descriptor = self.descriptor
        if descriptor and not (self.precipitation or self.obstruction or self.other):
            # "showers of" with nothing after it
            descriptor = descriptor.replace(' of', '')
        parts = [self.intensity, descriptor] + self.precipitation
        parts += [self.obstruction, self.other]
        if self.in_vicinity:
            parts.append('in the vicinity')

        text = ' '.join(part for part in parts if part)
        if self.begin is not None:
            text += _event('begins', self.begin)
        if self.end is not None:
            text += _event('ends', self.end)
        return text

    def as_dict(self):
        d = {'intensity': self.intensity, 'in_vicinity': self.in_vicinity,
             'descriptor': self.descriptor, 'precipitation': list(self.precipitation),
             'obstruction': self.obstruction, 'other': self.other,
             'no_significant_weather': self.no_significant_weather}
        if self.begin is not None:
            d['begin'] = self.begin
        if self.end is not None:
            d['end'] = self.end
        return d


def render_conditions(conditions):
    return sorted(condition.render() for condition in conditions)
