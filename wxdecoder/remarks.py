#
# Name: remarks.py
# Purpose: Decodes the remarks section (after RMK). Each recognized remark
#          becomes one line record; the lines are joined only when rendered.
#          Remarks that carry a measurement also update the report's fields.
#
import collections

from . import engine, grammar
from .errors import UnsupportedRemark
from .utils import chunks, contains_only_numbers, parse_fraction, round_value, to_int
from .weather import WeatherCondition
from .wind import REMARK, Wind

RemarkLine = collections.namedtuple('RemarkLine', 'tag text status')

DECODED = 'decoded'
UNSUPPORTED = 'unsupported'
INCOMPLETE = 'incomplete'

CM_PER_INCH = 2.54

_Frequency = {'OCNL': 'occasional', 'FRQ': 'frequent', 'CONS': 'continuous'}

_Lightning = {'IC': 'in-cloud', 'CC': 'cloud-to-cloud', 'CG': 'cloud-to-ground',
              'CA': 'cloud-to-air', 'CW': 'cloud-to-water'}

_Location = {'OHD': 'overhead', 'VC': 'in the vicinity', 'DSNT': 'distant',
             'DSIPTD': 'dissipated', 'TOP': 'tops', 'TR': 'trace'}

_Convective = {'TS': 'thunderstorm', 'CB': 'cumulonimbus', 'TCU': 'towering cumulus',
               'ACC': 'altocumulus castellanus', 'CBMAM': 'cumulonimbus mammatus',
               'VIRGA': 'virga'}

_Clouds = {'CU': 'cumulus', 'CF': 'cumulus fractus', 'ST': 'stratus', 'SC': 'stratocumulus',
           'SF': 'stratus fractus', 'NS': 'nimbostratus', 'AS': 'altostratus',
           'AC': 'altocumulus', 'CS': 'cirrostratus', 'CC': 'cirrocumulus', 'CI': 'cirrus'}

_Oktas = {1: 'few', 2: 'few', 3: 'scattered', 4: 'scattered', 5: 'broken', 6: 'broken',
          7: 'broken', 8: 'overcast'}

_SensorStatus = {
    'RVRNO': 'runway visual range not available',
    'PWINO': 'present weather identifier not available',
    'PNO': 'precipitation amount not available',
    'FZRANO': 'freezing rain information not available',
    'TSNO': 'lightning information not available',
    'VISNO': 'visibility at second location not available',
    'CHINO': 'cloud height at second location not available',
    'SLPNO': 'sea-level pressure not available',
}

_AutoStation = {'1': 'without a precipitation discriminator',
                '2': 'with a precipitation discriminator'}


def _time_text(value):
    if len(value) == 4:
        return 'at %s:%s' % (value[:2], value[2:])
    return 'at %d minutes past the hour' % int(value)


def _sector_text(captures):
    if not captures.get('dir'):
        return ''
    text = ' to the %s' % captures['dir']
    if captures.get('dir2'):
        text += ' through %s' % captures['dir2']
    return text


def _hour_minute(captures):
    if captures.get('hour') is not None:
        return 'at %s:%s' % (captures['hour'], captures['min'])
    return 'at %d minutes past the hour' % int(captures['min'])


##############################################################################
# remark handlers: (captures, report) -> text or RemarkLine
#
def pressure_rapid(captures, report):
    return 'pressure %s rapidly' % ('rising' if captures['presrisfal'] == 'R' else 'falling')


def tornadic(captures, report):

    text = '%s %s %s' % (captures['type'].lower(),
                         'began' if captures['betime'] == 'B' else 'ended',
                         _time_text(captures['time']))
    if captures.get('dist'):
        text += ', %s statute miles' % captures['dist']
    if captures.get('dirfrom'):
        text += ' to the %s' % captures['dirfrom']
    if captures.get('dirto'):
        text += ', moving %s' % captures['dirto']
    return text


def automated_station(captures, report):
    kind = captures['type']
    text = 'automated station type %s' % kind
    if kind in _AutoStation:
        text += ' (%s)' % _AutoStation[kind]
    return text


def begin_end_weather(captures, report):
    condition = WeatherCondition()
    condition.ingest(captures)
    return condition.render()


def icing(captures, report):
    text = 'icing'
    if captures.get('typeic'):
        text += ' in clouds'
    if captures.get('typeip'):
        text += ' with ice pellets'
    return '%s %s' % (text, ' '.join(captures['extra'].lower().split()))


def peak_wind(captures, report):
    return report.wind.ingest_peak(captures).render()


def wind_shift(captures, report):
    text = 'wind shift %s' % _hour_minute(captures)
    if captures.get('front'):
        text += ' due to frontal passage'
    return text


def lightning(captures, report):

    text = 'lightning'
    if captures.get('freq'):
        text = '%s lightning' % _Frequency[captures['freq']]
    types = captures.get('types')
    if types:
        text += ' (%s)' % ', '.join(_Lightning[code] for code in chunks(types))
    if captures.get('loc'):
        text += ' %s' % _Location[captures['loc']]
    return text + _sector_text(captures)


def sea_level_pressure(captures, report):
    return report.pressure.ingest_sea_level(captures)


def six_hour_temperature(captures, report):
    return report.temperature.ingest_six_hour(captures)


def hourly_precipitation(captures, report):
    amount = to_int(captures['precip'], 'remarks', 'hourly precipitation')
    if amount == 0:
        return '1-hour precipitation: trace'
    return '1-hour precipitation: %d hundredths of an inch' % amount


def hourly_temperature(captures, report):
    return report.temperature.ingest_hourly(captures)


def day_temperature(captures, report):
    return report.temperature.ingest_day(captures)


def pressure_tendency(captures, report):
    return report.pressure.ingest_tendency(captures)


def period_precipitation(captures, report):

    if captures['type'] == '6':
        label = '3- or 6-hour precipitation'
    else:
        label = '24-hour precipitation'
    precip = captures['precip']
    if not contains_only_numbers(precip):
        return '%s: indeterminate' % label
    return '%s: %s inches' % (label, int(precip) / 100.0)


def density_altitude(captures, report):
    return 'density altitude %d feet' % to_int(captures['denalt'], 'remarks', 'density altitude')


def cloud_okta(captures, report):

    text = _Clouds[captures['cloud']]
    if captures.get('okta'):
        okta = int(captures['okta'])
        text += ' %d okta%s (%s)' % (okta, '' if okta == 1 else 's', _Oktas[okta])
    if captures.get('mod') == 'TR':
        text += ' trace'
    elif captures.get('mod') == 'DSNT':
        text += ' distant'
    if captures.get('verb'):
        text += ' moving %s' % captures['dirm']
    return text


def last_observation(captures, report):
    return '%s observation' % captures['last'].lower()


def pressure_q(captures, report):
    return report.pressure.ingest_q(captures)


def maintenance(captures, report):

    if captures.get('typemc'):
        return 'maintenance check indicator'
    text = _SensorStatus[captures['typeam']]
    if captures.get('loc'):
        text += ' at runway %s' % captures['loc'][3:]
    return text


def tower_surface_visibility(captures, report):
    return RemarkLine('twrsfcvis', report.visibility.ingest_tower_surface(captures), INCOMPLETE)


def variable_visibility(captures, report):
    return report.visibility.ingest_variable(captures)


def convective_location(captures, report):

    text = _Convective[captures['type']]
    if captures.get('loc'):
        text += ' %s' % _Location[captures['loc']]
    text += _sector_text(captures)
    if captures.get('dirm'):
        text += ', moving %s' % captures['dirm']
    return text


def snow_on_ground(captures, report):
    amount = to_int(captures['amt'], 'remarks', 'snow on ground')
    return 'snow on ground %d cm (%s inches)' % (amount, round_value(amount / CM_PER_INCH, 2))


def next_forecast(captures, report):

    reference = report.timestamp or report.reftime
    when = report.resolve_time(captures['zday'], captures['zhour'], captures['zmin'], reference)
    if when is None:
        return 'next forecast by day %s %s:%sZ' % (captures['zday'], captures['zhour'],
                                                   captures['zmin'])
    report.next_forecast = when
    return 'next forecast by %s' % when.strftime('%Y-%m-%d %H:%M UTC')


def hail(captures, report):
    size = parse_fraction(captures['size'], 'remarks', 'hail size')
    return 'hail stones %s inches' % size


def variable_ceiling(captures, report):
    low = to_int(captures['low'], 'remarks', 'ceiling') * 100
    high = to_int(captures['high'], 'remarks', 'ceiling') * 100
    return 'variable ceiling between %d and %d feet' % (low, high)


def nospeci(captures, report):
    return 'no SPECI reports are taken at this station'


def wind_remark(captures, report):

    group = '%s%s%s%s' % (captures['dir'], captures.get('speed') or '',
                          'G%s' % captures['gust'] if captures.get('gust') else '',
                          captures['units'])
    try:
        Wind().ingest(captures, role=REMARK)
    except UnsupportedRemark:
        return RemarkLine('windre', 'wind group in remarks not decoded: %s' % group, UNSUPPORTED)


_Handlers = {
    'presrisfal': pressure_rapid,
    'trnfcwsp': tornadic,
    'auto': automated_station,
    'beginendwthr': begin_end_weather,
    'icing': icing,
    'peakwind': peak_wind,
    'windshift': wind_shift,
    'lightning': lightning,
    'sealvlpress': sea_level_pressure,
    'sixhrmaxmintemp': six_hour_temperature,
    'precip1hr': hourly_precipitation,
    'temp1hr': hourly_temperature,
    'temp24hr': day_temperature,
    'press3hr': pressure_tendency,
    'precip3hr24hr': period_precipitation,
    'denalt': density_altitude,
    'cloudokta': cloud_okta,
    'lastobs': last_observation,
    'pressqfn': pressure_q,
    'automaint': maintenance,
    'twrsfcvis': tower_surface_visibility,
    'vpvsvvsl': variable_visibility,
    'tsloc': convective_location,
    'snwongrnd': snow_on_ground,
    'nxtfcstby': next_forecast,
    'hail': hail,
    'vcig': variable_ceiling,
    'nospeci': nospeci,
    'windre': wind_remark,
}


class Remarks(object):
    """Decoded remark lines plus the remark tokens no rule recognized"""

    def __init__(self):
        self.lines = []
        self.unparsed = []

    def __len__(self):
        return len(self.lines)

    @property
    def text(self):
        return '\n'.join(line.text for line in self.lines)

    @property
    def unsupported(self):
        return [line for line in self.lines if line.status == UNSUPPORTED]

    def _handler(self, tag, function, report):

        def handle(m):
            result = function(m.groupdict(), report)
            if not isinstance(result, RemarkLine):
                result = RemarkLine(tag, result, DECODED)
            self.lines.append(result)

        return handle

    def decode(self, text, report):
        handlers = dict((tag, self._handler(tag, function, report))
                        for tag, function in _Handlers.items())
        unparsed = engine.decode(text, grammar.REMARKS, handlers, report.diagnostics, 'remarks')
        self.unparsed.extend(unparsed)
        return self

    def render(self):

        lines = ['  %s' % line.text for line in self.lines]
        if self.unparsed:
            lines.append('  not decoded: %s' % ' '.join(self.unparsed))
        return lines

    def as_dict(self):
        return {'lines': [line._asdict() for line in self.lines],
                'unparsed': list(self.unparsed)}
