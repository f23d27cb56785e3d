"""Module containing class `DateTimeFactory`."""


from datetime import datetime as DateTime

import datespan.util.time_utils as time_utils


class DateTimeFactory:

    """
    Factory for `datetime` objects representing the current time.

    A factory creates aware `datetime` objects in its time zone, which
    is UTC unless otherwise specified. Code that needs the current time
    can accept a factory rather than calling `datetime.now` directly,
    so that tests can substitute a factory that returns fixed times.
    """


    def __init__(self, time_zone=None):
        self._time_zone = time_utils.get_time_zone(time_zone)


    @property
    def time_zone(self):
        return self._time_zone


    def now(self):
        return DateTime.now(self._time_zone)
