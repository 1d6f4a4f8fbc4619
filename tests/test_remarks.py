import pytest

from wxdecoder import decode_metar
from wxdecoder.remarks import DECODED, INCOMPLETE, UNSUPPORTED, Remarks

BODY = 'KCLT 021451Z 18008KT 10SM FEW250 24/18 A3000 RMK '


def remarks(text, reftime):
    return decode_metar(BODY + text, reftime).remarks


@pytest.mark.parametrize('text, line', [
    ('AO1', 'automated station type 1 (without a precipitation discriminator)'),
    ('PRESRR', 'pressure rising rapidly'),
    ('PRESFR', 'pressure falling rapidly'),
    ('FUNNEL CLOUD B1430 6 NE MOV E', 'funnel cloud began at 14:30, 6 statute miles to the NE, moving E'),
    ('TORNADO E05', 'tornado ended at 5 minutes past the hour'),
    ('RAB15E30', 'moderate rain begins at 15 minutes past the hour ends at 30 minutes past the hour'),
    ('WSHFT 1430 FROPA', 'wind shift at 14:30 due to frontal passage'),
    ('WSHFT 30', 'wind shift at 30 minutes past the hour'),
    ('OCNL LTGICCG OHD', 'occasional lightning (in-cloud, cloud-to-ground) overhead'),
    ('LTG DSNT W', 'lightning distant to the W'),
    ('SLPNO', 'sea-level pressure not available'),
    ('P0000', '1-hour precipitation: trace'),
    ('P0015', '1-hour precipitation: 15 hundredths of an inch'),
    ('60217', '3- or 6-hour precipitation: 2.17 inches'),
    ('70125', '24-hour precipitation: 1.25 inches'),
    ('6////', '3- or 6-hour precipitation: indeterminate'),
    ('DENSITY ALT 5400FT', 'density altitude 5400 feet'),
    ('SC6 MOVG NE', 'stratocumulus 6 oktas (broken) moving NE'),
    ('CI1', 'cirrus 1 okta (few)'),
    ('AC TR', 'altocumulus trace'),
    ('LAST', 'last observation'),
    ('FIRST', 'first observation'),
    ('RVRNO', 'runway visual range not available'),
    ('VISNO RWY06', 'visibility at second location not available at runway 06'),
    ('$', 'maintenance check indicator'),
    ('TS OHD MOV E', 'thunderstorm overhead, moving E'),
    ('CB DSNT NE-SE', 'cumulonimbus distant to the NE through SE'),
    ('SOG 10', 'snow on ground 10 cm (3.94 inches)'),
    ('GR 1 3/4', 'hail stones 1.75 inches'),
    ('CIG 005V010', 'variable ceiling between 500 and 1000 feet'),
    ('NOSPECI', 'no SPECI reports are taken at this station'),
    ('QNH1013', 'QNH (normal height) 1013 mm'),
    ('ICGIC 0102 TR', 'icing in clouds 0102 tr'),
])
def test_remark_lines(reftime, text, line):
    r = remarks(text, reftime)
    assert [l.text for l in r.lines] == [line]
    assert r.lines[0].status == DECODED
    assert r.unparsed == []


def test_repeatable_remarks(reftime):
    r = remarks('AUTO? FRQ LTGIC OHD LTG DSNT W', reftime)
    assert [l.tag for l in r.lines] == ['lightning', 'lightning']
    assert r.unparsed == ['AUTO?']


def test_lines_keep_their_order(reftime):
    r = remarks('AO2 SLP134 T02440183', reftime)
    assert [l.tag for l in r.lines] == ['auto', 'sealvlpress', 'temp1hr']
    assert r.text.split('\n')[0].startswith('automated station')


def test_wind_group_in_remarks_is_unsupported(reftime):
    report = decode_metar(BODY + 'AO2 18010KT', reftime)
    line = report.remarks.lines[-1]
    assert line.tag == 'windre'
    assert line.status == UNSUPPORTED
    assert line.text == 'wind group in remarks not decoded: 18010KT'
    assert report.remarks.unsupported == [line]
    # the main wind is untouched
    assert report.wind.speed == 8


def test_tower_visibility_is_incomplete(reftime):
    report = decode_metar(BODY + 'TWR VIS 1 1/2', reftime)
    line = report.remarks.lines[0]
    assert line.status == INCOMPLETE
    assert report.visibility.tower == 1.5
    assert report.visibility.miles == 10


def test_remarks_update_fields(reftime):
    report = decode_metar(BODY + 'PK WND 28045/15 SLP982 10256 21006 402561006 52032', reftime)
    assert report.wind.peak.minute == 15
    assert report.pressure.sea_level_hpa == 998.2
    assert report.temperature.six_hour_max == 25.6
    assert report.temperature.six_hour_min == -0.6
    assert report.temperature.day_max == 25.6
    assert report.temperature.day_min == -0.6
    assert report.pressure.tendency_code == 2


def test_next_forecast(reftime):
    report = decode_metar(BODY + 'NXT FCST BY 021800Z', reftime)
    assert report.next_forecast.strftime('%d %H:%M') == '02 18:00'
    assert report.remarks.lines[0].text == 'next forecast by 2024-05-02 18:00 UTC'


def test_free_text_is_not_decoded(reftime):
    r = remarks('AO2 SOME FREE TEXT', reftime)
    assert len(r) == 1
    assert r.unparsed == ['SOME', 'FREE', 'TEXT']
    assert r.render()[-1] == '  not decoded: SOME FREE TEXT'


def test_render_and_as_dict(reftime):
    r = remarks('AO2 PRESRR', reftime)
    assert r.render() == ['  automated station type 2 (with a precipitation discriminator)',
                          '  pressure rising rapidly']
    d = r.as_dict()
    assert d['lines'][1] == {'tag': 'presrisfal', 'text': 'pressure rising rapidly',
                             'status': DECODED}
    assert d['unparsed'] == []


def test_empty_remarks():
    r = Remarks()
    assert len(r) == 0
    assert r.text == ''
    assert r.render() == []
