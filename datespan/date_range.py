"""
Module containing class `DateRange`.

A `DateRange` is an immutable value comprising an optional start
instant, an optional finish instant, and an optional step interval.
At least one of the start and the finish must be present. A range
with a missing start or finish is *open-ended*.

Instants are typically `datetime.datetime` or `datetime.date` objects
and intervals are typically `datetime.timedelta` objects, but any
totally ordered instant type that supports addition and subtraction
of its interval type will do.

For the purposes of comparison, a missing start denotes the unbounded
past and a missing finish denotes the unbounded future. Thus no date
is before a range with an open start, and no date is after a range
with an open finish.
"""


from datetime import (
    date as Date,
    datetime as DateTime,
    timedelta as TimeDelta)


_ONE_SECOND = TimeDelta(seconds=1)
_ONE_DAY = TimeDelta(days=1)


class DateRangeError(ValueError):
    pass


class InvalidRangeError(DateRangeError):

    def __init__(self):
        super().__init__(
            'A date range cannot be constructed with `None` start and '
            'finish dates. Please provide at least one side of the '
            'date range.')


class CannotCreatePeriodError(DateRangeError):

    def __init__(self, message=None):
        if message is None:
            message = (
                'A date period cannot be constructed when one of the '
                'start or finish dates is `None`. Please provide both '
                'start and finish dates.')
        super().__init__(message)


def create(start, finish, interval=None):

    """
    Creates a `DateRange`.

    :Raises InvalidRangeError:
        if both `start` and `finish` are `None`.
    """

    return DateRange(start, finish, interval)


class DateRange:

    """
    Range of dates, optionally with a step interval.

    The comparison methods of this class take an `inclusive` argument
    that determines whether or not range endpoints count for the
    comparison. Note that `is_date_within` inverts the `inclusive`
    argument before delegating to `is_date_before` and `is_date_after`,
    while `is_range_within` passes it through unchanged. So, for
    example, both endpoints of a range are within it according to
    `is_date_within(date, True)`, while a range that starts where
    this one starts is within it according to
    `is_range_within(other, False)` but not according to
    `is_range_within(other, True)`.
    """


    def __init__(self, start, finish, interval=None):

        if start is None and finish is None:
            raise InvalidRangeError()

        self._start = start
        self._finish = finish
        self._interval = interval


    @property
    def start(self):
        return self._start


    @property
    def finish(self):
        return self._finish


    @property
    def interval(self):
        return self._interval


    @property
    def is_open_ended(self):
        return self._start is None or self._finish is None


    @property
    def has_open_start(self):
        return self._start is None


    @property
    def has_open_finish(self):
        return self._finish is None


    def __eq__(self, other):
        if not isinstance(other, DateRange):
            return NotImplemented
        else:
            return self._get_key() == other._get_key()


    def _get_key(self):
        return (self._start, self._finish, self._interval)


    def __hash__(self):
        return hash(self._get_key())


    def __repr__(self):
        return (
            f'{self.__class__.__name__}({self._start!r}, '
            f'{self._finish!r}, {self._interval!r})')


    def __iter__(self):
        return self.period()


    def period(self, inclusive=True, end_shift=None):

        """
        Returns a generator of the instants of this range.

        The generator yields the start of this range and then every
        instant one interval later than the previous one, through the
        last such instant that precedes the finish plus `end_shift`.
        If `inclusive` is `False`, the range is first shrunk by one
        interval at each end, so that neither the start nor the
        finish is yielded.

        `end_shift` defaults to one second for `datetime` instants and
        one day for `date` instants. A `date` has a resolution of one
        day, so a smaller shift would leave it unchanged. The configured
        shift is available from
        `datespan.datespan_settings.get_period_end_shift`.

        Stepping stops at the largest representable instant, so a range
        may finish at `date.max` or `datetime.max`.

        Each call to this method returns a new generator, so a range
        can be materialized any number of times.

        :Raises CannotCreatePeriodError:
            if this range is open-ended, if it has no interval, or if
            its interval does not advance its start.
        """

        if self._start is None or self._finish is None:
            raise CannotCreatePeriodError()

        interval = self._interval

        if interval is None:
            raise CannotCreatePeriodError(
                'A date period cannot be constructed without an interval. '
                'Please provide an interval.')

        start, finish = self._start, self._finish

        if not _advances(start, interval):
            raise CannotCreatePeriodError(
                f'A date period cannot be constructed with interval '
                f'{interval}, since it does not advance the start date.')

        if not inclusive:

            try:
                start = start + interval
                finish = finish - interval

            except OverflowError:
                # Shrinking pushed an end past the representable
                # instants, so nothing remains.
                return _generate_instants(start, start, interval)

        if end_shift is None:
            end_shift = _get_default_end_shift(finish)

        # Stepping stops short of the end, so the end lies one shift
        # past the finish. An end past the largest instant is `None`.
        try:
            end = finish + end_shift
        except OverflowError:
            end = None

        return _generate_instants(start, end, interval)


    def is_date_before(self, date, inclusive=True):
        _check_date(date)
        return self._is_date_before(date, inclusive)


    def _is_date_before(self, date, inclusive):

        # Here `date` may be `None`, denoting the unbounded past.

        start = self._start

        if start is None:
            return date is None and inclusive

        elif date is None:
            return True

        elif inclusive:
            return date <= start

        else:
            return date < start


    def is_date_after(self, date, inclusive=True):
        _check_date(date)
        return self._is_date_after(date, inclusive)


    def _is_date_after(self, date, inclusive):

        # Here `date` may be `None`, denoting the unbounded future.

        finish = self._finish

        if finish is None:
            return date is None and inclusive

        elif date is None:
            return True

        elif inclusive:
            return date >= finish

        else:
            return date > finish


    def is_date_within(self, date, inclusive=True):

        _check_date(date)

        if self._is_date_before(date, not inclusive):
            return False

        elif self._is_date_after(date, not inclusive):
            return False

        else:
            return True


    def is_range_before(self, other, inclusive=True):
        return self._is_date_before(other.start, inclusive)


    def is_range_after(self, other, inclusive=True):
        return self._is_date_after(other.finish, inclusive)


    def is_range_within(self, other, inclusive=True):

        if self.is_range_before(other, inclusive):
            return False

        elif self.is_range_after(other, inclusive):
            return False

        else:
            return True


    def is_range_outside(self, other, inclusive=True):
        return not self.is_range_within(other, inclusive)


    def is_range_colliding(self, other, inclusive=True):

        """
        Tests whether or not this range and `other` intersect.

        The ranges do not collide if and only if one of them finishes
        before the other starts. If `inclusive` is `True`, ranges that
        touch, i.e. for which one finishes exactly where the other
        starts, collide. Otherwise they do not.
        """

        if _finishes_before(other.finish, self._start, inclusive):
            return False

        elif _finishes_before(self._finish, other.start, inclusive):
            return False

        else:
            return True


def _check_date(date):
    if date is None:
        raise ValueError('Date must not be `None`.')


def _finishes_before(finish, start, inclusive):

    # A `None` finish is the unbounded future and a `None` start is
    # the unbounded past, neither of which any finish precedes.
    if finish is None or start is None:
        return False

    elif inclusive:
        return finish < start

    else:
        return finish <= start


def _advances(instant, interval):

    try:
        return instant + interval > instant

    except OverflowError:
        # The step leaves the representable instants, so only its
        # sign matters.
        return interval > interval - interval


def _get_default_end_shift(instant):
    if isinstance(instant, Date) and not isinstance(instant, DateTime):
        return _ONE_DAY
    else:
        return _ONE_SECOND


def _generate_instants(start, end, interval):

    # An `end` of `None` lies beyond the largest representable instant.

    instant = start

    while end is None or instant < end:

        yield instant

        try:
            instant += interval
        except OverflowError:
            return
