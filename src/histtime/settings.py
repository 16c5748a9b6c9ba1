"""
Settings for histtime
"""

import datetime
import os
from configparser import RawConfigParser

from histtime.core.utils import end_of_day


default_config_home = os.path.normpath('~/.config')

MAX_LINGER_MINUTES = 65535
MAX_WORKDAY_HOURS = 255


class Settings(object):
    """Configurable settings for histtime."""

    linger_minutes = 30
    workday_hours = 8
    workday_end_hour = 17

    # Reference timezone for "today" and the day boundary: 'utc' or 'local'
    timezone = 'utc'

    # http://standards.freedesktop.org/basedir-spec/basedir-spec-latest.html

    def get_config_dir(self):
        envar_home = os.environ.get('HISTTIME_HOME')
        if envar_home is not None:
            return os.path.expanduser(envar_home)
        xdg = os.environ.get('XDG_CONFIG_HOME') or default_config_home
        return os.path.join(os.path.expanduser(xdg), 'histtime')

    def get_config_file(self):
        return os.path.join(self.get_config_dir(), 'histtimerc')

    def linger(self):
        return datetime.timedelta(minutes=self.linger_minutes)

    def workday(self):
        return datetime.timedelta(hours=self.workday_hours)

    def end_of_day(self):
        return end_of_day(self.workday_end_hour)

    def reference_timezone(self):
        """Return the tzinfo used to decide what "today" is.

        Returns None for the local timezone (see datetime.astimezone()).
        """
        if self.timezone == 'local':
            return None
        return datetime.timezone.utc

    def today(self):
        return datetime.datetime.now(self.reference_timezone()).date()

    def _config(self):
        config = RawConfigParser()
        config.add_section('histtime')
        config.set('histtime', 'linger_minutes', str(self.linger_minutes))
        config.set('histtime', 'workday_hours', str(self.workday_hours))
        config.set('histtime', 'workday_end_hour',
                   str(self.workday_end_hour))
        config.set('histtime', 'timezone', self.timezone)
        return config

    def load(self, filename=None):
        if filename is None:
            filename = self.get_config_file()
        config = self._config()
        config.read([filename])
        self.linger_minutes = config.getint('histtime', 'linger_minutes')
        self.workday_hours = config.getint('histtime', 'workday_hours')
        self.workday_end_hour = config.getint('histtime', 'workday_end_hour')
        self.timezone = config.get('histtime', 'timezone').strip().lower()
        if not 0 <= self.linger_minutes <= MAX_LINGER_MINUTES:
            raise ValueError('bad linger_minutes: %r' % self.linger_minutes)
        if not 0 <= self.workday_hours <= MAX_WORKDAY_HOURS:
            raise ValueError('bad workday_hours: %r' % self.workday_hours)
        if self.timezone not in ('utc', 'local'):
            raise ValueError('bad timezone: %r' % self.timezone)
        end_of_day(self.workday_end_hour)

    def save(self, filename):
        config = self._config()
        with open(filename, 'w') as f:
            config.write(f)
