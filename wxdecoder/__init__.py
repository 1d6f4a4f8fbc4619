"""Decodes METAR/SPECI observations and TAF forecasts into structured fields
and plain-language text."""

from .errors import DateError, DecodeError, Error, FetchError, GrammarExhausted, UnsupportedRemark
from .metar import Metar, decode_metar
from .taf import Taf, decode_taf

__version__ = '0.1.0'
