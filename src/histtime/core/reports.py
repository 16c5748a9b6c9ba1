import datetime

from histtime.core.spans import build_spans, classify_spans
from histtime.core.utils import (
    as_minutes,
    checked_add,
    clamped_sub,
    format_duration_hm,
    format_time_of_day,
)


UNKNOWN = '<Unknown>'


class WorkdayReport(object):
    """Summary of a single workday.

    work_spans and break_spans are lists of Span tuples in chronological
    order, as returned by classify_spans().
    """

    def __init__(self, work_spans, break_spans,
                 workday=datetime.timedelta(hours=8),
                 linger=datetime.timedelta(minutes=30)):
        self.work_spans = work_spans
        self.break_spans = break_spans
        self.workday = workday
        self.linger = linger

    @classmethod
    def from_events(cls, events, workday=datetime.timedelta(hours=8),
                    linger=datetime.timedelta(minutes=30)):
        """Build a report from today's events in chronological order."""
        work, breaks = classify_spans(build_spans(events), linger)
        return cls(work, breaks, workday=workday, linger=linger)

    def first_start(self):
        """Return the start of the first work span, or None."""
        if not self.work_spans:
            return None
        return self.work_spans[0].start

    def last_end(self):
        """Return the end of the last work span, or None."""
        if not self.work_spans:
            return None
        return self.work_spans[-1].end

    def worked(self):
        """Return the total duration of all work spans."""
        total = datetime.timedelta(0)
        for span in self.work_spans:
            total = checked_add(total, span.duration)
        return total

    def remaining(self):
        """Return how much of the workday is left, never less than zero."""
        return clamped_sub(self.workday, self.worked())

    def breaks(self):
        return list(self.break_spans)

    def report(self, output, tz=None):
        """Write the report to output.

        Times of day are shown in `tz`, or in local time if `tz` is None.

        The report looks like

        | Breaks (more than 30m):
        |   - 12:01:13-12:48:02 46m
        | Start: 09:02:45
        | End: 17:55:10
        | Worked: 8h5m
        | Remaining: 0h0m

        """
        breaks = self.breaks()
        output.write("Breaks (more than %dm):" % as_minutes(self.linger))
        output.write(" None\n" if not breaks else "\n")
        for span in breaks:
            output.write("  - %s-%s %dm\n" % (
                format_time_of_day(span.start, tz),
                format_time_of_day(span.end, tz),
                as_minutes(span.duration)))

        start = self.first_start()
        end = self.last_end()
        output.write("Start: %s\n" % (
            format_time_of_day(start, tz) if start is not None else UNKNOWN))
        output.write("End: %s\n" % (
            format_time_of_day(end, tz) if end is not None else UNKNOWN))
        output.write("Worked: %s\n" % format_duration_hm(self.worked()))
        output.write("Remaining: %s\n" % format_duration_hm(self.remaining()))
