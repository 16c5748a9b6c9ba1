#!/usr/bin/env python3
"""
Summarize today's work activity based on the zsh command history.
"""
import argparse
import configparser
import logging
import sys

from histtime import __version__
from histtime.core.history import parse_history, read_history
from histtime.core.reports import WorkdayReport
from histtime.core.spans import todays_events
from histtime.settings import MAX_LINGER_MINUTES, MAX_WORKDAY_HOURS, Settings


log = logging.getLogger('histtime')

log_handler = logging.StreamHandler()


def setup_logging(debug=False):
    root_logger = logging.getLogger()
    if log_handler not in root_logger.handlers:
        root_logger.addHandler(log_handler)
    if debug:
        root_logger.setLevel(logging.DEBUG)
    else:
        root_logger.setLevel(logging.INFO)


def bounded(maximum):
    def number(value):
        n = int(value)
        if not 0 <= n <= maximum:
            raise argparse.ArgumentTypeError(
                'not between 0 and %d: %r' % (maximum, value))
        return n
    return number


def hour(value):
    n = int(value)
    if not 0 <= n <= 23:
        raise argparse.ArgumentTypeError('not an hour of the day: %r' % value)
    return n


def make_parser():
    parser = argparse.ArgumentParser(
        prog='histtime', description=__doc__.strip())
    parser.add_argument(
        'file', help="history file (zsh EXTENDED_HISTORY format)")
    parser.add_argument(
        '-l', '--linger-minutes', type=bounded(MAX_LINGER_MINUTES),
        help="minimum idle time counted as a break (default: 30)")
    parser.add_argument(
        '-w', '--workday-hours', type=bounded(MAX_WORKDAY_HOURS),
        help="length of a workday in hours (default: 8)")
    parser.add_argument(
        '-W', '--workday-end-hour', type=hour,
        help="hour at which a workday ends (default: 17)")
    tz = parser.add_mutually_exclusive_group()
    tz.add_argument(
        '--local', dest='timezone', action='store_const', const='local',
        help="decide what today is using local time")
    tz.add_argument(
        '--utc', dest='timezone', action='store_const', const='utc',
        help="decide what today is using UTC (default)")
    parser.add_argument(
        '--config', metavar='FILE',
        help="configuration file (default: ~/.config/histtime/histtimerc)")
    parser.add_argument(
        '--debug', action='store_true',
        help="show debug information")
    parser.add_argument(
        '--version', action='version', version='histtime %s' % __version__)
    return parser


def apply_options(settings, opts):
    """Override settings with command-line options that were given."""
    if opts.linger_minutes is not None:
        settings.linger_minutes = opts.linger_minutes
    if opts.workday_hours is not None:
        settings.workday_hours = opts.workday_hours
    if opts.workday_end_hour is not None:
        settings.workday_end_hour = opts.workday_end_hour
    if opts.timezone is not None:
        settings.timezone = opts.timezone
    return settings


def summarize(filename, settings, output, today=None, display_tz=None):
    """Write today's summary of the history in filename to output."""
    tz = settings.reference_timezone()
    if today is None:
        today = settings.today()
    events = parse_history(read_history(filename))
    events = todays_events(events, today, settings.end_of_day(), tz)
    report = WorkdayReport.from_events(events, workday=settings.workday(),
                                       linger=settings.linger())
    report.report(output, tz=display_tz)
    return report


def main(argv=None):
    opts = make_parser().parse_args(argv)
    setup_logging(opts.debug)
    settings = Settings()
    try:
        settings.load(opts.config)
    except (ValueError, configparser.Error) as e:
        log.error("Bad configuration: %s", e)
        return 1
    apply_options(settings, opts)
    log.debug('linger %s, workday %s, workday ends at %s (%s)',
              settings.linger(), settings.workday(), settings.end_of_day(),
              settings.timezone)
    try:
        summarize(opts.file, settings, sys.stdout)
    except OSError as e:
        log.error("Could not read %s: %s", opts.file, e)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
