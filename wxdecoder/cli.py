#
# Name: cli.py
# Purpose: wxdecode command: decodes METAR/TAF bulletins from a file, STDIN
#          or the NWS station files and prints or writes the decoded reports.
#
import logging
import optparse
import os
import pprint
import re
import sys

from . import fetch
from .dates import utcnow
from .errors import Error, FetchError
from .metar import decode_metar
from .metrics import format_metrics, gather_metrics
from .taf import decode_taf

log = logging.getLogger(__name__)

bulletin = re.compile(r'(\x01.*?\x03)', re.DOTALL)

wmo_hdr = re.compile(r"""(
^(?P<prefix>.*?)\s*
(?P<seq>[0-9]{3})?\s*
(?P<wmo>
 (?P<ttaaii>[A-Z0-9]{6})\s
 (?P<cccc>[A-Z][A-Z0-9]{3})\s
 (?P<dd>[0-3][0-9])(?P<hh>[0-2][0-9])(?P<mm>[0-5][0-9])\s
 (?P<bbb>((RR|CC|AA)[A-Z])|P[A-Z]{2})?
)\s*
)""", re.VERBOSE | re.DOTALL)

report_type = re.compile(r"""(
\s*(MTR[A-Z]{3}\s*)?
(?P<type>METAR|SPECI|TAF)\s+
)""", re.VERBOSE | re.DOTALL)

nill = re.compile(r'^((METAR|SPECI|TAF)\s+)?[A-Z][A-Z0-9]{3}\s+[0-9]{6}Z\s+NIL\s*$')

usage = ("Usage: %prog [options] [filename]\n\n"
         "If no filename or station is specified, reads from STDIN")


def option_parser():
    parseopts = optparse.OptionParser(usage=usage, prog='wxdecode')
    parseopts.add_option('-v', action='count', dest='verbosity', default=0,
                         help='Verbosity level')
    parseopts.add_option('-t', action='store_true', dest='taf', default=False,
                         help='Input is TAF instead of METAR')
    parseopts.add_option('-s', action='store', dest='station', default='',
                         help='Fetch the latest report for this station')
    parseopts.add_option('-p', action='store_true', dest='pretty', default=False,
                         help='Pretty-print the decoded fields instead of the text')
    parseopts.add_option('-m', action='store_true', dest='metrics', default=False,
                         help='Print unparsed-text metrics after the reports')
    parseopts.add_option('-D', action='store', dest='outdir', default='',
                         help='Directory in which to output files')
    parseopts.add_option('-w', action='store_true', dest='writefiles', default=False,
                         help='Write output to disk instead of STDOUT')
    parseopts.add_option('-d', action='store_true', dest='date_dirs', default=False,
                         help='Write output dated directories within -D dir')
    return parseopts


def log_level(verbosity):
    if verbosity >= 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO
    return logging.WARNING


def split_reports(filestr):
    """Yields (type, text) for every report in the bulletins of filestr"""
    bulletins = bulletin.findall(filestr)
    if len(bulletins) == 0:
        bulletins = [filestr]

    for text in bulletins:
        text = text.replace('\x01', '').replace('\x03', '').replace('\r', ' ')
        m = wmo_hdr.match(text)
        if m:
            text = text.replace(m.group(0), '', 1)

        rtype = None
        m = report_type.match(text)
        if m:
            rtype = m.group('type')
            text = text.replace(m.group(0), '', 1)

        for stext in re.split(r'=\s*', text):
            stext = ' '.join(stext.split())
            if not stext:
                continue
            if rtype and not stext.startswith(rtype):
                stext = '%s %s' % (rtype, stext)
            yield rtype, stext


def output_dir(outdir, reftime, date_dirs):
    if not date_dirs:
        return outdir
    outdir = os.path.join(outdir, reftime.strftime('%Y%m%d'), reftime.strftime('%H'))
    if not os.path.isdir(outdir):
        os.makedirs(outdir)
    return outdir


def main(argv=None):

    parseopts = option_parser()
    opts, args = parseopts.parse_args(argv)
    logging.basicConfig(level=log_level(opts.verbosity),
                        format='%(levelname)s:%(name)s:%(message)s')

    if opts.writefiles:
        if not opts.outdir:
            sys.stderr.write('writefiles option (-w) also requires outputdir option (-D).\n')
            parseopts.print_help()
            return 2
        if not os.path.isdir(opts.outdir):
            sys.stderr.write('%s does not exist or is not a directory\n' % opts.outdir)
            return 2

    reftime = utcnow()
    #
    # Reports come from the NWS station files, a file or STDIN
    if opts.station:
        try:
            filestr = fetch.fetch_report(opts.station, fetch.TAF if opts.taf else fetch.METAR)
        except FetchError as e:
            sys.stderr.write('ERROR: %s\n' % e)
            return 1
    elif len(args) == 0:
        filestr = sys.stdin.read()
    else:
        with open(args[0], 'r') as fh:
            filestr = fh.read()

    if opts.writefiles:
        outdir = output_dir(opts.outdir, reftime, opts.date_dirs)

    status = 0
    reports = []
    for rtype, stext in split_reports(filestr):

        if nill.match(stext):
            log.info('Nil found: %s', stext)
            continue

        log.debug("Starting to parse:'%s'", stext)
        decoder = decode_taf if opts.taf or rtype == 'TAF' else decode_metar
        try:
            report = decoder(stext, reftime=reftime)
        except Error as e:
            log.error('Decoder fault: %s; report: %s', e, stext)
            status = 1
            continue
        reports.append(report)

        if opts.pretty:
            output = pprint.pformat(report.as_dict())
        else:
            output = report.render()

        if opts.writefiles:
            station = report.station or 'UNKN'
            kind = (report.report_type or rtype or 'report').lower()
            filename = os.path.join(outdir, '%s_%s_%s.txt' % (reftime.strftime('%Y%m%d_%H%M%S'),
                                                               station, kind))
            with open(filename, 'a') as fh:
                fh.write(output + '\n\n')
            log.info('Wrote file %s', filename)
        else:
            sys.stdout.write(output + '\n\n')

    if opts.metrics:
        sys.stdout.write(format_metrics(gather_metrics(reports)) + '\n')
    return status


if __name__ == '__main__':
    sys.exit(main())
