#
# Name: fetch.py
# Purpose: Downloads the latest report for a station from the NWS text
#          service. One request, no retries.
#
import logging
import os

import requests

from .engine import normalize
from .errors import FetchError

log = logging.getLogger(__name__)

METAR = 'M'
TAF = 'T'

METAR_URL = 'https://tgftp.nws.noaa.gov/data/observations/metar/stations/%s.TXT'
TAF_URL = 'https://tgftp.nws.noaa.gov/data/forecasts/taf/stations/%s.TXT'
TIMEOUT = 10


def report_url(station, kind=METAR):
    """URL of the station file; WXDECODER_METAR_URL / WXDECODER_TAF_URL override"""
    if kind == METAR:
        template = os.environ.get('WXDECODER_METAR_URL', METAR_URL)
    elif kind == TAF:
        template = os.environ.get('WXDECODER_TAF_URL', TAF_URL)
    else:
        raise ValueError('Unknown report kind: %s' % kind)
    return template % station.strip().upper()


def fetch_report(station, kind=METAR, timeout=TIMEOUT):
    """Returns the whitespace-normalized text of the station's latest report"""
    url = report_url(station, kind)
    log.info('Fetching %s', url)
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        log.error('Fetch failed: %s; station: %s', e, station)
        raise FetchError('Cannot fetch %s: %s' % (url, e))

    text = normalize(response.text)
    if not text:
        log.warning('Empty report for station %s', station)
    return text
