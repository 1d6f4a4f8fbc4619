import pytest
import requests

from wxdecoder import fetch
from wxdecoder.errors import FetchError


class FakeResponse(object):

    def __init__(self, text, status_code=200):
        self.text = text
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError('%d Error' % self.status_code)


@pytest.fixture
def calls(monkeypatch):
    calls = []

    def get(url, timeout=None):
        calls.append((url, timeout))
        return FakeResponse('2024/05/02 14:51\nKCLT 021451Z 18008KT 10SM FEW250 24/18 A3000\n')

    monkeypatch.setattr(fetch.requests, 'get', get)
    return calls


def test_report_url(monkeypatch):
    monkeypatch.delenv('WXDECODER_METAR_URL', raising=False)
    monkeypatch.delenv('WXDECODER_TAF_URL', raising=False)
    assert fetch.report_url('kclt') == \
        'https://tgftp.nws.noaa.gov/data/observations/metar/stations/KCLT.TXT'
    assert fetch.report_url('KCLT', fetch.TAF) == \
        'https://tgftp.nws.noaa.gov/data/forecasts/taf/stations/KCLT.TXT'
    with pytest.raises(ValueError):
        fetch.report_url('KCLT', 'X')


def test_url_override(monkeypatch):
    monkeypatch.setenv('WXDECODER_TAF_URL', 'http://localhost/taf/%s')
    assert fetch.report_url('KCLT', fetch.TAF) == 'http://localhost/taf/KCLT'


def test_fetch_report(calls, monkeypatch):
    monkeypatch.delenv('WXDECODER_METAR_URL', raising=False)
    text = fetch.fetch_report('KCLT')
    assert text == '2024/05/02 14:51 KCLT 021451Z 18008KT 10SM FEW250 24/18 A3000 '
    assert calls == [(fetch.METAR_URL % 'KCLT', fetch.TIMEOUT)]


def test_http_error(monkeypatch):
    monkeypatch.setattr(fetch.requests, 'get', lambda url, timeout=None: FakeResponse('', 404))
    with pytest.raises(FetchError):
        fetch.fetch_report('XXXX')


def test_connection_error(monkeypatch):

    def get(url, timeout=None):
        raise requests.ConnectionError('refused')

    monkeypatch.setattr(fetch.requests, 'get', get)
    with pytest.raises(FetchError) as excinfo:
        fetch.fetch_report('KCLT')
    assert 'refused' in str(excinfo.value)
