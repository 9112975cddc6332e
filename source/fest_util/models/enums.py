"""This module defines the enumerations for the library."""

from enum import StrEnum


class CalendarField(StrEnum):
    """Names the individual fields a Calendar can read and write."""

    YEAR = "year"
    MONTH = "month"
    DAY_OF_MONTH = "day_of_month"
    DAY_OF_WEEK = "day_of_week"
    HOUR_OF_DAY = "hour_of_day"
    MINUTE = "minute"
    SECOND = "second"
    MILLISECOND = "millisecond"

    def __str__(self) -> str:
        """Returns the string representation of the enum member."""
        return self.value
