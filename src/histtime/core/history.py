"""
Reading timestamps out of a zsh extended history file.

Each record of an extended history file starts with a header like

    : 1602489600:0;git status

where the first number is the start time of the command in seconds since
the epoch.  Lines that don't carry such a header (continuation lines of
multi-line commands, lines mangled by concurrent shells, hand edits) are
skipped.
"""

import datetime
import logging
import re


log = logging.getLogger('histtime')

HEADER_RX = re.compile(r'^: ([0-9]+):')


def parse_history_line(line):
    """Return the timestamp of a history record as an aware UTC datetime.

    Returns None if the line is not a valid record.
    """
    m = HEADER_RX.match(line)
    if not m:
        return None
    try:
        return datetime.datetime.fromtimestamp(int(m.group(1)),
                                               datetime.timezone.utc)
    except (OverflowError, OSError, ValueError):
        return None


def parse_history(lines):
    """Iterate over the timestamps of history records.

    Timestamps are yielded in the order the lines are given; malformed
    lines are dropped.
    """
    for line in lines:
        timestamp = parse_history_line(line)
        if timestamp is not None:
            yield timestamp


def split_lines(text):
    """Split text into lines at newlines, dropping trailing carriage returns.

    Other characters str.splitlines() treats as line boundaries can occur
    inside commands and must not start a new record.
    """
    lines = [line.rstrip('\r') for line in text.split('\n')]
    if lines and not lines[-1]:
        lines.pop()
    return lines


def read_history(filename):
    """Read all lines of a history file.

    zsh stores non-ASCII bytes in "metafied" form, so undecodable bytes are
    replaced instead of failing the whole read.
    """
    # Accept any file-like object instead of a filename (for the benefit of
    # unit tests).
    if hasattr(filename, 'read'):
        return split_lines(filename.read())
    with open(filename, encoding='UTF-8', errors='replace', newline='') as f:
        lines = split_lines(f.read())
    log.debug('Read %d lines from %s', len(lines), filename)
    return lines
