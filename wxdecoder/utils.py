#
# Name: utils.py
# Purpose: Small numeric and string helpers shared by the field decoders.
#
import math
import re

from .errors import DecodeError

_re_numbers = re.compile(r'^[0-9]+$')
_re_non_numeric = re.compile(r'[^0-9.]')
_re_fraction = re.compile(r'^(?P<whole>\d+(?![\d/]))?\s*((?P<num>\d+)/(?P<den>\d+))?$')


def contains_only_numbers(text):
    if not text:
        return False
    return _re_numbers.match(text) is not None


def remove_non_numeric(text):
    return _re_non_numeric.sub('', text)


def round_value(value, precision):
    """Rounds half up, the way the reports are conventionally rounded"""
    scale = 10 ** precision
    return math.floor(value * scale + 0.5) / scale


def string_split(text, delimiter=None, start=None, end=None):
    """Splits text on delimiter, dropping empty parts.

start and end select a 1-based, inclusive range of the raw parts; with no
delimiter the text is split into single characters.
"""
    if not delimiter:
        return list(text.strip())

    parts = []
    for count, part in enumerate(text.split(delimiter), 1):
        if start is not None and count < start:
            continue
        if end is not None and count > end:
            break
        if part.strip():
            parts.append(part.strip())

    return parts


def chunks(text, size=2):
    return [text[n:n + size] for n in range(0, len(text), size)]


def to_int(value, decoder, field):
    try:
        return int(value)
    except (TypeError, ValueError):
        raise DecodeError(decoder, field, value)


def parse_fraction(text, decoder='visibility', field='distance'):
    """Returns the value of '1', '1/2' or '1 1/2' as a float"""
    if text is None:
        raise DecodeError(decoder, field, text)

    m = _re_fraction.match(text.strip())
    if m is None or not (m.group('whole') or m.group('num')):
        raise DecodeError(decoder, field, text)

    value = 0.0
    if m.group('whole'):
        value += float(m.group('whole'))
    if m.group('num'):
        den = float(m.group('den'))
        if den == 0:
            raise DecodeError(decoder, field, text)
        value += float(m.group('num')) / den

    return value


def strip_non_alpha(text, strip_whitespace=True):
    if strip_whitespace:
        return ''.join(re.sub(r'[^A-Z0-9/]+', '', text).split())
    return ' '.join(re.sub(r'[^A-Z0-9\s/]+', '', text).split())
