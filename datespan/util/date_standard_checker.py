"""
Module containing class `DateStandardChecker`.

A date standard checker checks strings against a registry of named
date and time formats, or *standards*. Each standard is a regular
expression that a string must match in its entirety. Patterns are
compiled with `re.ASCII`, so that `\\d` matches only the digits 0-9.
Two standards are built in:

    iso-8601-simplistic
        dates of the form YYYY-MM-DD, optionally followed by a space
        and a time of the form HH:MM:SS.

    iso-8601-simplistic-timezone
        dates and times of the form YYYY-MM-DDTHH:MM:SS followed by
        either "Z" or a UTC offset of the form +HH:MM or -HH:MM.

Additional standards can be registered with a checker, and the default
checker used by the module-level functions also includes the standards
of the `date_standards` package setting.
"""


from zoneinfo import ZoneInfo
import logging
import re

import datespan.datespan_settings as datespan_settings
import datespan.util.time_utils as time_utils


_logger = logging.getLogger(__name__)


ISO_8601_SIMPLISTIC = 'iso-8601-simplistic'
ISO_8601_SIMPLISTIC_TIMEZONE = 'iso-8601-simplistic-timezone'


_DATE_RE = r'(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})'
_TIME_RE = r'(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})'
_ZONE_RE = (
    r'(?P<zone>Z|(?P<offset_sign>\-|\+)'
    r'(?P<offset_hours>\d{2}):(?P<offset_minutes>\d{2}))')


_BUILT_IN_STANDARDS = {
    ISO_8601_SIMPLISTIC: f'{_DATE_RE}( {_TIME_RE})?',
    ISO_8601_SIMPLISTIC_TIMEZONE: f'{_DATE_RE}T{_TIME_RE}{_ZONE_RE}',
}


class UnknownStandardError(ValueError):

    def __init__(self, name):
        super().__init__(f'Unrecognized date standard "{name}".')
        self.name = name


class DateStandardChecker:

    """Checks and parses strings according to named date standards."""


    def __init__(self, standards=None):

        """
        Initializes this checker with the built-in standards and,
        optionally, additional standards.

        :Parameters:

            standards : mapping from `str` to `str`
                additional standards, mapping standard names to regular
                expressions. A standard with the same name as a built-in
                one replaces it.
        """

        self._regexes = {}

        for name, pattern in _BUILT_IN_STANDARDS.items():
            self._regexes[name] = re.compile(pattern, re.ASCII)

        if standards is not None:
            for name, pattern in standards.items():
                self.register_standard(name, pattern)


    @property
    def standard_names(self):
        return tuple(sorted(self._regexes.keys()))


    def register_standard(self, name, pattern):

        """
        Registers a standard with this checker.

        :Raises ValueError:
            if `pattern` is not a valid regular expression.
        """

        try:
            regex = re.compile(pattern, re.ASCII)
        except re.error as e:
            raise ValueError(
                f'Bad regular expression for date standard "{name}": '
                f'{str(e)}')

        self._regexes[name] = regex

        _logger.debug(f'Registered date standard "{name}".')


    def check(self, name, text):

        """
        Checks whether or not `text` conforms to the named standard.

        :Raises UnknownStandardError:
            if the named standard is not registered with this checker.
        """

        regex = self._get_regex(name)

        # Unlike `$`, `fullmatch` does not accept a trailing newline.
        return regex.fullmatch(text) is not None


    def _get_regex(self, name):
        try:
            return self._regexes[name]
        except KeyError:
            raise UnknownStandardError(name)


    def parse(self, name, text):

        """
        Parses `text` according to the named standard.

        A standard supports parsing if its regular expression has the
        named groups `year`, `month`, and `day`, and optionally `hour`,
        `minute`, and `second`, and `zone`, `offset_sign`,
        `offset_hours`, and `offset_minutes`, as the built-in standards
        do.

        :Returns:
            a `datetime`, aware if the text includes a time zone and
            naive otherwise. Times default to midnight.

        :Raises UnknownStandardError:
            if the named standard is not registered with this checker.

        :Raises ValueError:
            if the text does not conform to the standard, if it has
            out-of-range fields, or if the standard does not support
            parsing.
        """

        regex = self._get_regex(name)

        m = regex.fullmatch(text)

        if m is None:
            raise ValueError(
                f'Text "{text}" does not conform to date standard '
                f'"{name}".')

        groups = m.groupdict()

        if not all(groups.get(k) for k in ('year', 'month', 'day')):
            raise ValueError(
                f'Date standard "{name}" does not support parsing.')

        time_zone = _parse_time_zone(groups)

        hour = groups.get('hour')

        if hour is None:
            hour, minute, second = '00', '00', '00'
        else:
            minute = groups.get('minute') or '00'
            second = groups.get('second')

        return time_utils.parse_date_time(
            groups['year'], groups['month'], groups['day'],
            hour, minute, second, time_zone)


def _parse_time_zone(groups):

    zone = groups.get('zone')

    if zone is None:
        return None

    elif zone == 'Z':
        return ZoneInfo('UTC')

    else:
        return time_utils.parse_time_zone_offset(
            groups['offset_sign'], groups['offset_hours'],
            groups['offset_minutes'])


_default_checker = None


def get_default_checker():

    """
    Gets the default checker.

    The default checker has the built-in standards and the standards
    of the `date_standards` package setting. It is created on first
    use.
    """

    global _default_checker

    if _default_checker is None:
        standards = datespan_settings.get_date_standards()
        _default_checker = DateStandardChecker(standards)

    return _default_checker


def reset_default_checker():
    global _default_checker
    _default_checker = None


def get_standard_names():
    return get_default_checker().standard_names


def register_standard(name, pattern):
    get_default_checker().register_standard(name, pattern)


def check(name, text):
    return get_default_checker().check(name, text)


def parse(name, text):
    return get_default_checker().parse(name, text)
