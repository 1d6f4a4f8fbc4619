#
# Name: metrics.py
# Purpose: How much of a batch of reports fell through to the catch-all rule.
#
import logging

from .utils import strip_non_alpha

log = logging.getLogger(__name__)


def unparsed_tokens(report):
    """Every token of the report no rule recognized, body, remarks and groups"""
    tokens = list(report.unparsed)
    for group in getattr(report, 'groups', []):
        tokens.extend(group.unparsed)
    tokens.extend(report.remarks.unparsed)
    return tokens


def percent_unparsed(report):
    """Share of the report's characters (whitespace and punctuation omitted)
that no rule decoded. A report without text counts as 0.
"""
    orig = strip_non_alpha(report.raw or '')
    if not orig:
        return 0.0
    unparsed = strip_non_alpha(' '.join(unparsed_tokens(report)))
    return len(unparsed) * 100. / len(orig)


def gather_metrics(reports):
    """Counts over a batch of decoded reports"""
    nReports = 0
    nClean = 0
    nUnparsed = 0
    nUnsupported = 0
    nDiagnostics = 0
    percents = []

    for report in reports:
        nReports += 1
        percent = percent_unparsed(report)
        percents.append(percent)
        if percent:
            nUnparsed += 1
        else:
            nClean += 1
        if report.remarks.unsupported:
            nUnsupported += 1
        if report.diagnostics:
            nDiagnostics += 1

    mean = sum(percents) / len(percents) if percents else 0.0
    log.info('%d reports, %d with unparsed text, %.2f%% unparsed on average',
             nReports, nUnparsed, mean)

    return {'numReports': nReports, 'numClean': nClean, 'numUnparsed': nUnparsed,
            'numUnsupported': nUnsupported, 'numDiagnostics': nDiagnostics,
            'meanPercentUnparsed': mean,
            'maxPercentUnparsed': max(percents) if percents else 0.0}


def format_metrics(metrics):
    lines = ['Decoded %d reports' % metrics['numReports'],
             '    %d clean  %d with unparsed text' % (metrics['numClean'], metrics['numUnparsed']),
             '    %d with unsupported remarks' % metrics['numUnsupported'],
             '    %d with fields that could not be decoded' % metrics['numDiagnostics'],
             '%.2f%% unparsed on average, %.2f%% at most' % (metrics['meanPercentUnparsed'],
                                                          metrics['maxPercentUnparsed'])]
    return '\n'.join(lines)
