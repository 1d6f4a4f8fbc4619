#
# Name: engine.py
# Purpose: Greedy, first-match dispatcher that walks an ordered rule table
#          over the remaining text of a report.
#
import collections
import logging
import re

from .errors import DecodeError, GrammarExhausted

log = logging.getLogger(__name__)

Rule = collections.namedtuple('Rule', 'pattern tag repeatable')

UNPARSED = 'unparsed'


def rule(regex, tag, repeatable=False):
    return Rule(re.compile(regex), tag, repeatable)


def catch_all():
    """Consumes one whitespace-delimited token"""
    return rule(r'^(?P<unparsed>\S+)\s+', UNPARSED)


def normalize(text):
    """Collapses whitespace; a non-empty result always ends in one space"""
    if not text or not text.strip():
        return ''
    return ' '.join(text.split()) + ' '


def _advance(cursor, end):
    cursor = cursor[end:].strip()
    if cursor:
        cursor += ' '
    return cursor


def _match(rule, cursor):
    m = rule.pattern.match(cursor)
    #
    # A match has to consume something other than the separator or the
    # pass would never finish
    if m is None or not m.group(0).strip():
        return None
    return m


def decode(text, table, handlers, diagnostics=None, name='main'):
    """Decodes text against table, calling handlers[tag](match) for every
recognized token. Returns the tokens consumed by the catch-all rule.

A DecodeError from a handler is logged and recorded in diagnostics; the pass
continues with the next token. GrammarExhausted is raised when no rule matches.
"""
    unparsed = []
    cursor = normalize(text)

    while cursor:
        for entry in table:
            m = _match(entry, cursor)
            if m is None:
                continue

            while m is not None:
                _dispatch(entry.tag, m, handlers, unparsed, diagnostics)
                cursor = _advance(cursor, m.end())
                if not entry.repeatable or not cursor:
                    break
                m = _match(entry, cursor)
            break
        else:
            log.error('Decoder fault: no rule in %s table; remaining: %s', name, cursor)
            raise GrammarExhausted(name, cursor)

    return unparsed


def _dispatch(tag, m, handlers, unparsed, diagnostics):

    if tag == UNPARSED:
        unparsed.append(m.group(UNPARSED))
        handler = handlers.get(UNPARSED)
        if handler is not None:
            handler(m)
        return

    try:
        handlers[tag](m)
    except DecodeError as e:
        log.warning('Decoder fault: %s; token: %s', e, m.group(0).strip())
        if diagnostics is not None:
            diagnostics.append(str(e))
