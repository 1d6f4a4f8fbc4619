#
# Name: sky.py
# Purpose: Sky condition layers.
#
from .errors import DecodeError

_Contractions = {
    'VV': 'vertical visibility',
    'SKC': 'sky clear',
    'SCK': 'sky clear',
    'CLR': 'clear',
    'FEW': 'few',
    'SCT': 'scattered',
    'BKN': 'broken',
    'OVC': 'overcast',
    'NCD': 'no clouds detected',
    'NSC': 'no significant clouds',
    '///': 'not observed',
}

_Clouds = {
    'CB': 'cumulonimbus',
    'TCU': 'towering cumulus',
    '///': 'cloud type not observed',
}

_NoHeight = ('CLR', 'SKC', 'SCK', 'NSC', 'NCD')


class SkyCondition(object):

    def __init__(self):
        self.cover = None
        self.height = None
        self.cloud = None

    @property
    def label(self):
        return _Contractions.get(self.cover, self.cover)

    @property
    def cloud_label(self):
        if self.cloud is None:
            return None
        return _Clouds.get(self.cloud, self.cloud)

    def ingest(self, captures):

        cover = captures['cover']
        if cover in ('0VC', 'OVC'):
            cover = 'OVC'
        self.cover = cover
        if cover in _NoHeight:
            return

        height = captures.get('height')
        if height is not None and height != '///':
            try:
                self.height = int(height.replace('O', '0')) * 100
            except ValueError:
                raise DecodeError('sky condition', 'height', height)
        self.cloud = captures.get('cloud')

    def render(self):

        if self.cover in _NoHeight:
            return self.label
        if self.height is None:
            text = '%s at unknown height' % self.label
        elif self.cover == 'VV':
            text = '%s of %d feet' % (self.label, self.height)
        else:
            text = '%s at %d feet' % (self.label, self.height)
        if self.cloud is not None:
            text += ' (%s)' % self.cloud_label
        return text

    def as_dict(self):
        return {'cover': self.cover, 'label': self.label, 'height': self.height,
                'cloud': self.cloud}


def render_layers(layers):
    return sorted(layer.render() for layer in layers)
