"""Tests for histtime.core.utils"""

import datetime
import unittest
from datetime import timedelta, timezone

from histtime.core.utils import (
    as_minutes,
    checked_add,
    clamped_sub,
    end_of_day,
    format_duration_hm,
    format_time_of_day,
)


def doctest_as_minutes():
    """Tests for as_minutes

        >>> as_minutes(timedelta(0))
        0
        >>> as_minutes(timedelta(seconds=59))
        0
        >>> as_minutes(timedelta(minutes=45, seconds=30))
        45
        >>> as_minutes(timedelta(days=1, minutes=3))
        1443

    """


def doctest_format_duration_hm():
    """Tests for format_duration_hm

        >>> format_duration_hm(timedelta(0))
        '0h0m'
        >>> format_duration_hm(timedelta(minutes=5))
        '0h5m'
        >>> format_duration_hm(timedelta(hours=7, minutes=42, seconds=59))
        '7h42m'
        >>> format_duration_hm(timedelta(hours=8))
        '8h0m'
        >>> format_duration_hm(timedelta(days=1, hours=2))
        '26h0m'

    """


def doctest_format_time_of_day():
    """Tests for format_time_of_day

        >>> dt = datetime.datetime(2020, 10, 12, 9, 5, 7, tzinfo=timezone.utc)
        >>> format_time_of_day(dt, timezone.utc)
        '09:05:07'
        >>> format_time_of_day(dt, timezone(timedelta(hours=2)))
        '11:05:07'

    """


def doctest_end_of_day():
    """Tests for end_of_day

        >>> end_of_day(17)
        datetime.time(17, 0)
        >>> end_of_day(0)
        datetime.time(0, 0)
        >>> end_of_day(24)
        Traceback (most recent call last):
          ...
        ValueError: bad workday end hour: 24

    """


class TestCheckedArithmetic(unittest.TestCase):

    def test_checked_add(self):
        self.assertEqual(checked_add(timedelta(minutes=5), timedelta(minutes=3)),
                         timedelta(minutes=8))

    def test_checked_add_leaves_total_unchanged_on_overflow(self):
        self.assertEqual(checked_add(timedelta.max, timedelta(days=1)),
                         timedelta.max)

    def test_clamped_sub(self):
        self.assertEqual(clamped_sub(timedelta(hours=8), timedelta(hours=3)),
                         timedelta(hours=5))

    def test_clamped_sub_never_goes_negative(self):
        self.assertEqual(clamped_sub(timedelta(hours=8), timedelta(hours=9)),
                         timedelta(0))

    def test_clamped_sub_exactly_zero(self):
        self.assertEqual(clamped_sub(timedelta(hours=8), timedelta(hours=8)),
                         timedelta(0))

    def test_clamped_sub_overflow(self):
        self.assertEqual(clamped_sub(timedelta.min, timedelta.max),
                         timedelta(0))
