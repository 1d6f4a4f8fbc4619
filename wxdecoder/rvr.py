#
# Name: rvr.py
# Purpose: Runway visual range groups.
#
from .utils import to_int

_Approach = {'L': 'left', 'R': 'right', 'C': 'center'}
_Modifier = {'P': 'greater than', 'M': 'less than'}
_Trend = {'U': 'increasing', 'D': 'decreasing', 'N': 'no change'}


class RunwayVisualRange(object):

    def __init__(self):
        self.runway = None
        self.approach = None
        self.modifier = None
        self.high_modifier = None
        self.lowest = None
        self.highest = None
        self.trend = None
        self.ceased = False

    @property
    def name(self):
        return '%02d%s' % (self.runway, self.approach or '')

    def ingest(self, captures):

        name = captures['name']
        self.runway = to_int(name[:2], 'runway visual range', 'runway')
        if captures.get('inden'):
            self.approach = captures['inden'][0]

        if captures.get('lmod'):
            self.modifier = captures['lmod']

        lvalue = captures['lvalue']
        if lvalue == 'CLRD':
            self.ceased = True
        else:
            self.lowest = to_int(lvalue, 'runway visual range', 'lowest')

        if captures.get('trend'):
            self.trend = captures['trend']
        elif captures.get('hvalue'):
            self.highest = to_int(captures['hvalue'], 'runway visual range', 'highest')
            self.high_modifier = captures.get('hmod')

    def render(self):

        text = 'Runway %02d' % self.runway
        if self.approach:
            text += ' %s' % _Approach[self.approach]
        text += ':'
        if self.modifier:
            text += ' %s' % _Modifier[self.modifier]

        if self.ceased:
            text += ' conditions ceased to exist'
        elif self.highest is not None:
            text += ' %d to' % self.lowest
            if self.high_modifier:
                text += ' %s' % _Modifier[self.high_modifier]
            text += ' %d feet' % self.highest
        else:
            text += ' %d feet' % self.lowest

        if self.trend:
            text += ', %s' % _Trend[self.trend]
        return text + '.'

    def as_dict(self):
        return {'runway': self.runway, 'approach': self.approach, 'modifier': self.modifier,
                'lowest': self.lowest, 'highest': self.highest, 'trend': self.trend,
                'ceased': self.ceased}


def render_ranges(ranges):
    return sorted(entry.render() for entry in ranges)
