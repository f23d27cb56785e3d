from datetime import (
    date as Date,
    datetime as DateTime,
    time as Time,
    timedelta as TimeDelta,
    timezone as TimeZone)
from zoneinfo import ZoneInfo

from datespan.tests.test_case import TestCase
import datespan.util.time_utils as time_utils


_D2 = '{:02d}'.format
_D4 = '{:04d}'.format


def _tuplize(x):
    return x if isinstance(x, tuple) else (x,)


class TimeUtilsTests(TestCase):


    def test_get_utc_now(self):
        before = DateTime.now(ZoneInfo('UTC'))
        now = time_utils.get_utc_now()
        after = DateTime.now(ZoneInfo('UTC'))
        self.assertEqual(now.utcoffset(), TimeDelta())
        self.assertTrue(before <= now <= after)


    def test_get_time_zone(self):

        self.assertEqual(time_utils.get_time_zone(None), ZoneInfo('UTC'))

        self.assertEqual(
            time_utils.get_time_zone('US/Eastern'), ZoneInfo('US/Eastern'))

        tz = TimeZone(TimeDelta(hours=2))
        self.assertIs(time_utils.get_time_zone(tz), tz)


    def test_get_time_zone_errors(self):
        for name in ('Bobo', 'Nowhere/Special'):
            self.assert_raises(ValueError, time_utils.get_time_zone, name)


    def test_parse_date_time(self):

        cases = [
            (2018, 1, 10, 0, 0, 0),
            (2018, 1, 10, 11, 22, 33),
            (1, 1, 1, 0, 0, 0),
            (9999, 12, 31, 23, 59, 59),
        ]

        for y, M, d, h, m, s in cases:
            expected = DateTime(y, M, d, h, m, s)
            result = time_utils.parse_date_time(
                _D4(y), _D2(M), _D2(d), _D2(h), _D2(m), _D2(s))
            self.assertEqual(result, expected)


    def test_parse_date_time_with_time_zone(self):
        tz = TimeZone(TimeDelta(hours=-5))
        result = time_utils.parse_date_time(
            '2018', '01', '10', '11', '22', '33', tz)
        self.assertEqual(result, DateTime(2018, 1, 10, 11, 22, 33, tzinfo=tz))
        self.assertEqual(result.utcoffset(), TimeDelta(hours=-5))


    def test_parse_date_time_errors(self):

        cases = [
            (2018, 0, 1, 0, 0, 0),
            (2018, 1, 32, 0, 0, 0),
            (2018, 1, 1, 24, 0, 0),
            (2018, 1, 1, 0, 60, 0),
            (2018, 1, 1, 0, 0, 60),
        ]

        for y, M, d, h, m, s in cases:
            self.assert_raises(
                ValueError, time_utils.parse_date_time,
                _D4(y), _D2(M), _D2(d), _D2(h), _D2(m), _D2(s))


    def test_parse_date(self):

        cases = [
            (1900, 1, 1),
            (2099, 12, 31),
            (2014, 2, 28),
            (2012, 2, 29),
            (1, 1, 1),
            (9999, 12, 31),
        ]

        for y, m, d in cases:
            result = time_utils.parse_date(_D4(y), _D2(m), _D2(d))
            self.assertEqual(result, Date(y, m, d))


    def test_parse_date_errors(self):

        cases = [

            # year out of range
            (0, 1, 1),

            # month out of range
            (2015, 0, 1),
            (2015, 13, 1),

            # day out of range
            (2015, 1, 0),
            (2015, 1, 32),
            (2015, 2, 29),
            (2015, 4, 31),

        ]

        for y, m, d in cases:
            self.assert_raises(
                ValueError, time_utils.parse_date, _D4(y), _D2(m), _D2(d))


    def test_parse_time(self):

        cases = [
            ((0, 0), Time(0, 0)),
            ((23, 59), Time(23, 59)),
            ((0, 0, 0), Time(0, 0, 0)),
            ((12, 34, 56), Time(12, 34, 56)),
        ]

        for args, expected in cases:
            args = [_D2(a) for a in args]
            self.assertEqual(time_utils.parse_time(*args), expected)


    def test_parse_time_zone_offset(self):

        cases = [
            ('+', '00', '00', TimeDelta()),
            ('+', '10', '00', TimeDelta(hours=10)),
            ('-', '10', '00', TimeDelta(hours=-10)),
            ('-', '05', '30', TimeDelta(hours=-5, minutes=-30)),
            ('+', '23', '59', TimeDelta(hours=23, minutes=59)),
        ]

        for sign, hh, mm, offset in cases:
            result = time_utils.parse_time_zone_offset(sign, hh, mm)
            self.assertEqual(result, TimeZone(offset))


    def test_parse_time_zone_offset_errors(self):
        cases = [('+', '24', '00'), ('-', '10', '60')]
        for sign, hh, mm in cases:
            self.assert_raises(
                ValueError, time_utils.parse_time_zone_offset, sign, hh, mm)


    def test_check_year(self):
        good = [1, 1900, 2000, 9999]
        bad = [-1, 0, 10000]
        self._test(good, bad, time_utils.check_year)


    def _test(self, good, bad, function):
        for case in good:
            function(*_tuplize(case))
        for case in bad:
            self.assert_raises(ValueError, function, *_tuplize(case))


    def test_check_month(self):
        good = range(1, 13)
        bad = [-1, 0, 13, 14]
        self._test(good, bad, time_utils.check_month)


    def test_check_day(self):
        good = [(1, 2012, 1), (31, 2012, 1), (29, 2012, 2), (30, 2012, 4)]
        bad = [(0, 2012, 1), (32, 2012, 1), (30, 2012, 2), (31, 2012, 4)]
        self._test(good, bad, time_utils.check_day)


    def test_check_hour(self):
        good = range(0, 24)
        bad = [-2, -1, 24, 25]
        self._test(good, bad, time_utils.check_hour)


    def test_check_minute(self):
        self._test_ms(time_utils.check_minute)


    def _test_ms(self, function):
        good = range(0, 60)
        bad = [-2, -1, 60, 61]
        self._test(good, bad, function)


    def test_check_minutes(self):
        self._test_ms(time_utils.check_minutes)


    def test_check_second(self):
        self._test_ms(time_utils.check_second)


    def test_check_offset_hours(self):
        good = range(0, 24)
        bad = [-1, 24]
        self._test(good, bad, time_utils.check_offset_hours)
