"""This module defines the mutable Calendar used to manipulate date fields."""

import calendar as _calendar
from datetime import datetime, timedelta, timezone, tzinfo

from fest_util.models.enums import CalendarField

_ELAPSED_FIELDS = {
    CalendarField.HOUR_OF_DAY: "hours",
    CalendarField.MINUTE: "minutes",
    CalendarField.SECOND: "seconds",
    CalendarField.MILLISECOND: "milliseconds",
}


class Calendar:
    """A mutable wrapper around an instant exposing its fields in a timezone.

    Naive datetimes given to the calendar are read as wall time in its
    timezone; aware datetimes are converted into it. The ``time`` property
    always returns an aware datetime in the calendar timezone.
    """

    def __init__(self, time: datetime, tz: tzinfo) -> None:
        """Initializes the Calendar.

        Args:
            time: The instant the calendar starts at.
            tz: The timezone used to decompose the instant into fields.
        """
        self.timezone = tz
        self.time = time

    @property
    def time(self) -> datetime:
        """The instant currently held by the calendar."""
        return self._time

    @time.setter
    def time(self, value: datetime) -> None:
        if value.tzinfo is None:
            value = value.replace(tzinfo=self.timezone)
        self._time = self._normalize(value)

    def _normalize(self, value: datetime) -> datetime:
        """Moves wall times that fall in a DST gap onto a real instant.

        Args:
            value: An aware datetime.

        Returns:
            The same instant expressed in the calendar timezone. Instants too
            close to the ends of the datetime range to pass through UTC are
            only converted into the calendar timezone.
        """
        try:
            return value.astimezone(timezone.utc).astimezone(self.timezone)
        except OverflowError:
            return value.astimezone(self.timezone)

    def get(self, field: CalendarField) -> int:
        """Returns the value of a single field.

        Args:
            field: The field to read.

        Returns:
            The field value. Months start at 1 and days of week follow ISO
            numbering (Monday=1, Sunday=7).
        """
        t = self._time
        if field is CalendarField.YEAR:
            return t.year
        if field is CalendarField.MONTH:
            return t.month
        if field is CalendarField.DAY_OF_MONTH:
            return t.day
        if field is CalendarField.DAY_OF_WEEK:
            return t.isoweekday()
        if field is CalendarField.HOUR_OF_DAY:
            return t.hour
        if field is CalendarField.MINUTE:
            return t.minute
        if field is CalendarField.SECOND:
            return t.second
        if field is CalendarField.MILLISECOND:
            return t.microsecond // 1000
        raise ValueError(f"Unsupported calendar field: {field}")

    def set(self, field: CalendarField, value: int) -> None:
        """Sets a single field, keeping the others unchanged.

        Setting the day of week moves the calendar within its current ISO week.

        Args:
            field: The field to write.
            value: The new value.

        Raises:
            ValueError: If the value is out of range for the field.
        """
        t = self._time
        if field is CalendarField.YEAR:
            t = t.replace(year=value)
        elif field is CalendarField.MONTH:
            t = t.replace(month=value)
        elif field is CalendarField.DAY_OF_MONTH:
            t = t.replace(day=value)
        elif field is CalendarField.DAY_OF_WEEK:
            if not 1 <= value <= 7:
                raise ValueError(f"Day of week must be in 1..7, got {value}")
            t = t + timedelta(days=value - t.isoweekday())
        elif field is CalendarField.HOUR_OF_DAY:
            t = t.replace(hour=value)
        elif field is CalendarField.MINUTE:
            t = t.replace(minute=value)
        elif field is CalendarField.SECOND:
            t = t.replace(second=value)
        elif field is CalendarField.MILLISECOND:
            if not 0 <= value <= 999:
                raise ValueError(f"Millisecond must be in 0..999, got {value}")
            t = t.replace(microsecond=value * 1000 + t.microsecond % 1000)
        else:
            raise ValueError(f"Unsupported calendar field: {field}")
        self._time = self._normalize(t)

    def add(self, field: CalendarField, amount: int) -> None:
        """Adds a signed amount to a single field.

        Year, month and day arithmetic works on wall-clock fields, so adding
        one day keeps the time of day across DST transitions. When a month
        or year change lands on a day the target month lacks, the day is
        clamped to the end of that month. Time-of-day fields add elapsed time.

        Args:
            field: The field to change.
            amount: The signed amount to add.
        """
        t = self._time
        if field is CalendarField.YEAR:
            t = self._shift_months(t, amount * 12)
        elif field is CalendarField.MONTH:
            t = self._shift_months(t, amount)
        elif field in (CalendarField.DAY_OF_MONTH, CalendarField.DAY_OF_WEEK):
            t = t + timedelta(days=amount)
        elif field in _ELAPSED_FIELDS:
            delta = timedelta(**{_ELAPSED_FIELDS[field]: amount})
            t = (t.astimezone(timezone.utc) + delta).astimezone(self.timezone)
        else:
            raise ValueError(f"Unsupported calendar field: {field}")
        self._time = self._normalize(t)

    @staticmethod
    def _shift_months(t: datetime, months: int) -> datetime:
        """Shifts a datetime by whole months, clamping the day of month.

        Args:
            t: The datetime to shift.
            months: The signed number of months.

        Returns:
            The shifted datetime.
        """
        index = t.year * 12 + (t.month - 1) + months
        year, month = divmod(index, 12)
        month += 1
        day = min(t.day, _calendar.monthrange(year, month)[1])
        return t.replace(year=year, month=month, day=day)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Calendar):
            return NotImplemented
        return self._time == other._time and self.timezone == other.timezone

    def __repr__(self) -> str:
        return f"Calendar(time={self._time.isoformat()}, timezone={self.timezone})"
