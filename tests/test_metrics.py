import pytest

from wxdecoder import decode_metar, decode_taf
from wxdecoder.metrics import format_metrics, gather_metrics, percent_unparsed, unparsed_tokens

CLEAN = 'KCLT 021451Z 18008KT 10SM FEW250 24/18 A3000 RMK AO2'
DIRTY = 'KCLT 021451Z 18008KT XYZZY'


def test_clean_report(reftime):
    assert percent_unparsed(decode_metar(CLEAN, reftime)) == 0.0


def test_unparsed_share(reftime):
    # 'XYZZY' is 5 of the 23 significant characters
    assert percent_unparsed(decode_metar(DIRTY, reftime)) == pytest.approx(500.0 / 23)


def test_empty_report():
    assert percent_unparsed(decode_metar('')) == 0.0


def test_tokens_from_groups_and_remarks(reftime):
    taf = decode_taf('TAF KXYZ 021130Z 0212/0312 18010KT QQQ FM021800 20012KT ZZZ '
                     'RMK AO2 FREE', reftime)
    assert unparsed_tokens(taf) == ['QQQ', 'ZZZ', 'FREE']


def test_gather_metrics(reftime):
    unsupported = decode_metar(CLEAN + ' 18010KT', reftime)
    reports = [decode_metar(CLEAN, reftime), decode_metar(DIRTY, reftime), unsupported]
    metrics = gather_metrics(reports)
    assert metrics['numReports'] == 3
    assert metrics['numClean'] == 2
    assert metrics['numUnparsed'] == 1
    assert metrics['numUnsupported'] == 1
    assert metrics['numDiagnostics'] == 0
    assert metrics['maxPercentUnparsed'] == pytest.approx(500.0 / 23)
    assert metrics['meanPercentUnparsed'] == pytest.approx(500.0 / 23 / 3)
    assert format_metrics(metrics).startswith('Decoded 3 reports')


def test_gather_nothing():
    metrics = gather_metrics([])
    assert metrics['numReports'] == 0
    assert metrics['meanPercentUnparsed'] == 0.0
