"""Utility functions pertaining to time."""


from datetime import (
    date as Date,
    datetime as DateTime,
    time as Time,
    timedelta as TimeDelta,
    timezone as TimeZone)
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError
import calendar


def get_utc_now():
    return DateTime.now(ZoneInfo('UTC'))


def get_time_zone(time_zone):

    """
    Gets a `datetime.tzinfo` object for the specified time zone.

    The `time_zone` argument can be:

    * `None`, implying UTC.

    * a string acceptable as an argument to the `zoneinfo.ZoneInfo`
      initializer, for example 'US/Eastern' or 'America/Costa_Rica'.

    * a `datetime.tzinfo` object, which is returned as is.

    :Raises ValueError:
        if an unrecognized time zone is specified.
    """

    if time_zone is None:
        return ZoneInfo('UTC')

    elif isinstance(time_zone, str):
        try:
            return ZoneInfo(time_zone)
        except (ZoneInfoNotFoundError, ValueError):
            raise ValueError(
                f'Could not get info for time zone "{time_zone}".')

    else:
        return time_zone


# The parsing functions of this module (`parse_date_time`, `parse_date`,
# `parse_time`, and `parse_time_zone_offset`) are intended for use in
# conjunction with regular expression parsing elsewhere. The regular
# expressions match strings of certain numbers of digits, perhaps mixed
# with other things (e.g. strings of the form yyyy-mm-dd), and then the
# digit strings (e.g. yyyy, mm, and dd) are passed to one or more of the
# functions of this module to complete the parsing. The functions assume
# that their arguments have a reasonable number of digits and do not
# check for this: they assume that such checking happened in the regular
# expression matching. They do check that the values the digits denote
# are in range.


def parse_date_time(y, MM, dd, hh, mm, ss=None, time_zone=None):
    d = parse_date(y, MM, dd)
    t = parse_time(hh, mm, ss)
    return DateTime(
        d.year, d.month, d.day, t.hour, t.minute, t.second,
        tzinfo=time_zone)


def parse_date(y, mm, dd):

    year = int(y)
    month = int(mm)
    day = int(dd)

    _check('year', y, check_year, year)
    _check('month', mm, check_month, month)
    _check('day', dd, check_day, day, year, month)

    return Date(year, month, day)


def parse_time(hh, mm, ss=None):

    hour = int(hh)
    minute = int(mm)
    second = int(ss) if ss is not None else 0

    _check('hour', hh, check_hour, hour)
    _check('minute', mm, check_minute, minute)
    _check('second', ss, check_second, second)

    return Time(hour, minute, second)


def parse_time_zone_offset(sign, hh, mm):

    """
    Parses a UTC offset of the form [+-]hh:mm.

    Returns a fixed-offset `datetime.timezone`.
    """

    hours = int(hh)
    minutes = int(mm)

    _check('offset hours', hh, check_offset_hours, hours)
    _check('offset minutes', mm, check_minutes, minutes)

    offset = TimeDelta(hours=hours, minutes=minutes)

    if sign == '-':
        offset = -offset

    return TimeZone(offset)


def _check(name, s, function, *args):
    try:
        function(*args)
    except ValueError:
        raise ValueError(f'Bad {name} "{s}".')


def check_year(year):
    _check_range(year, Date.min.year, Date.max.year, 'year')


def _check_range(val, min_val, max_val, name):
    if val < min_val or val > max_val:
        raise ValueError(f'Bad {name} {val}.')


def check_month(month):
    _check_range(month, 1, 12, 'month')


def check_day(day, year, month):
    max_day = calendar.monthrange(year, month)[1]
    _check_range(day, 1, max_day, 'day')


def check_hour(hour):
    _check_range(hour, 0, 23, 'hour')


def check_minute(minute):
    _check_range(minute, 0, 59, 'minute')


def check_minutes(minutes):
    _check_range(minutes, 0, 59, 'minutes')


def check_second(second):
    _check_range(second, 0, 59, 'second')


def check_offset_hours(hours):
    # `datetime.timezone` requires offsets strictly less than one day.
    _check_range(hours, 0, 23, 'offset hours')
