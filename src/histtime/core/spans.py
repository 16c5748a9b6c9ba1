import collections
import datetime
import itertools
import logging


log = logging.getLogger('histtime')

Span = collections.namedtuple('Span', 'start end duration')


def select_day(events, today, end_of_day, tz=datetime.timezone.utc):
    """Select the events of today's work session.

    `events` must be ordered newest first.  Events later in the day than
    `end_of_day` are skipped while they're at the newest end; from the first
    event at or before `end_of_day` on, events are taken for as long as they
    fall on `today`.  Dates and times of day are computed in `tz`.

    The day boundary is a heuristic, not a real midnight: it assumes work
    never starts before `end_of_day` on the previous calendar day.  A
    session that runs past midnight is only counted once the clock passes
    `end_of_day` again.

    Yields the selected events, still newest first.
    """
    def after_hours(event):
        return event.astimezone(tz).time() > end_of_day

    def on_today(event):
        return event.astimezone(tz).date() == today

    return itertools.takewhile(on_today,
                               itertools.dropwhile(after_hours, events))


def todays_events(events, today, end_of_day, tz=datetime.timezone.utc):
    """Return today's events in chronological order.

    `events` are in chronological order, as they appear in a history file.
    They are scanned backwards, since only the most recent part of the
    history is relevant for today.
    """
    events = list(events)
    selected = list(select_day(reversed(events), today, end_of_day, tz))
    selected.reverse()
    log.debug('Selected %d of %d events for %s', len(selected), len(events),
              today)
    return selected


def build_spans(events):
    """Iterate over the spans between chronologically adjacent events."""
    start = None
    for end in events:
        if start is not None:
            yield Span(start, end, end - start)
        start = end


def classify_spans(spans, linger):
    """Split spans into work spans and breaks.

    Spans shorter than `linger` are work, everything else is a break.

    Returns two lists: work spans and breaks, both in the original order.
    """
    work = []
    breaks = []
    for span in spans:
        if span.duration < linger:
            work.append(span)
        else:
            breaks.append(span)
    log.debug('%d work spans, %d breaks', len(work), len(breaks))
    return work, breaks
