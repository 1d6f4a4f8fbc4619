import re

import pytest

from wxdecoder import grammar
from wxdecoder.errors import DecodeError, UnsupportedRemark
from wxdecoder.wind import REMARK, Wind, compass, to_mph


def wind(token):
    w = Wind()
    w.ingest(re.match(grammar.WIND, token + ' ').groupdict())
    return w


@pytest.mark.parametrize('degrees, label', [
    (0, 'N'),
    (12.4, 'N'),
    (12.5, 'NNE'),
    (90, 'E'),
    (180, 'S'),
    (189.9, 'S'),
    (190, 'SSW'),
    (270, 'W'),
    (280, 'WNW'),
    (347.4, 'NNW'),
    (347.5, 'N'),
    (360, 'N'),
])
def test_compass(degrees, label):
    assert compass(degrees) == label


def test_to_mph():
    assert to_mph(8) == 9
    assert to_mph(45) == 52
    assert to_mph(None) is None


def test_direction_and_speed():
    w = wind('18008KT')
    assert w.direction == 180
    assert w.compass == 'S'
    assert w.speed == 8
    assert w.speed_mph == 9
    assert w.render() == ['Wind: from the S (180 degrees) at 8 knots (9 mph)']


def test_calm():
    w = wind('00000KT')
    assert w.calm
    assert w.compass is None
    assert w.render() == ['Wind: calm']


def test_variable_light():
    w = wind('VRB05KT')
    assert w.variable
    assert w.direction is None
    assert w.render() == ['Wind: variable at 5 knots (6 mph)']


def test_gust_and_variable_range():
    w = wind('27015G25KT 240V300')
    assert w.gust == 25
    assert w.variable_range
    assert (w.variable_from, w.variable_to) == (240, 300)
    assert w.render() == [
        'Wind: from the W (270 degrees) at 15 knots (17 mph), gusting to 25 knots (29 mph)',
        'Wind direction variable between WSW (240 degrees) and WNW (300 degrees)',
    ]


def test_meters_per_second_become_knots():
    w = wind('18005MPS')
    assert w.units == 'MPS'
    assert w.speed == 9.71


def test_not_determined():
    w = wind('/////KT')
    assert w.not_determined
    assert w.speed is None
    assert w.render() == ['Wind: cannot be determined']


def test_direction_out_of_range():
    w = Wind()
    captures = re.match(grammar.WIND, '40010G20KT 180V240 ').groupdict()
    with pytest.raises(DecodeError):
        w.ingest(captures)
    assert w.direction is None
    assert w.speed is None
    assert w.gust is None
    assert not w.variable_range
    assert w.render() == ['Wind: cannot be determined']


def test_speed_without_direction_renders():
    w = Wind()
    w.speed = 10
    assert w.render() == ['Wind: cannot be determined']



def test_remark_role_is_unsupported():
    captures = re.match(grammar.WIND, '18008KT ').groupdict()
    with pytest.raises(UnsupportedRemark):
        Wind().ingest(captures, role=REMARK)


def test_peak_wind():
    w = Wind()
    peak = w.ingest_peak(re.match(grammar.PEAK_WIND, 'PK WND 28045/1415 ').groupdict())
    assert w.peak is peak
    assert (peak.direction, peak.speed, peak.hour, peak.minute) == (280, 45, 14, 15)
    assert peak.render() == 'peak wind from the WNW (280 degrees) at 45 knots (52 mph) at 14:15'


def test_peak_wind_minutes_only():
    peak = Wind().ingest_peak(re.match(grammar.PEAK_WIND, 'PK WND 320P100/07 ').groupdict())
    assert peak.greater_than
    assert peak.hour is None
    assert peak.minute == 7
    assert peak.render().endswith('at 7 minutes past the hour')
