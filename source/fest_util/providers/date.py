"""This module provides centralized date-related utilities.

All helpers work on ``datetime`` values. Naive datetimes are read as wall
time in the provider timezone and every datetime returned is aware and
expressed in that timezone.
"""

import threading
from datetime import datetime, tzinfo
from zoneinfo import ZoneInfo

from fest_util.exceptions.date import DateParseError
from fest_util.models.calendar import Calendar
from fest_util.models.enums import CalendarField
from fest_util.providers.clock import ClockProvider
from fest_util.providers.config import ConfigProvider
from fest_util.providers.logging import Logger, LoggingProvider

SYSTEM_TIMEZONE_FILE = "/etc/localtime"


class DateProvider:
    """Provides centralized constants and methods for date handling.

    Formatting, parsing, conversion and truncation propagate ``None``;
    field extractors require a datetime and fail on ``None``.
    """

    DATE_FORMAT = "%Y-%m-%d"
    DATE_TIME_FORMAT = "%Y-%m-%dT%H:%M:%S"
    DATE_TIME_WITH_MS_FORMAT = "%Y-%m-%dT%H:%M:%S.%f"

    _format_lock = threading.Lock()

    def __init__(self, timezone: tzinfo | None = None, clock: ClockProvider | None = None) -> None:
        """Initializes the DateProvider.

        Args:
            timezone: The timezone used for field extraction, formatting and
                parsing. Defaults to the configured or system timezone.
            clock: The source of the current instant. Defaults to the system clock.
        """
        self.logger: Logger = LoggingProvider().get_logger()
        self.timezone = timezone if timezone is not None else self._resolve_default_timezone()
        self.clock = clock if clock is not None else ClockProvider()

    def _resolve_default_timezone(self) -> tzinfo:
        """Resolves the timezone used when none is given explicitly.

        The configured TIMEZONE wins. Otherwise the system zone file is read
        so DST rules are honoured, falling back to the current fixed local
        offset when the zone file is not available.

        Returns:
            The default timezone.
        """
        config = ConfigProvider.get_config()
        if config.TIMEZONE:
            self.logger.debug(f"Using configured timezone: {config.TIMEZONE}")
            return ZoneInfo(config.TIMEZONE)
        try:
            with open(SYSTEM_TIMEZONE_FILE, "rb") as zone_file:
                return ZoneInfo.from_file(zone_file, key="localtime")
        except (OSError, ValueError) as e:
            self.logger.debug(f"System timezone file unavailable, using local offset: {e}")
            return datetime.now().astimezone().tzinfo

    def format_as_date(self, date: datetime | None) -> str | None:
        """Formats the given date using the ISO 8601 date format (yyyy-MM-dd).

        Args:
            date: The date to format.

        Returns:
            The formatted date, or None if the given date was None.
        """
        if date is None:
            return None
        return self._render(date, self.DATE_FORMAT)

    def format_as_datetime(self, date: datetime | None) -> str | None:
        """Formats the given date using the ISO 8601 date-time format (yyyy-MM-dd'T'HH:mm:ss).

        Formatting is serialized across all providers so concurrent callers
        always get complete output.

        Args:
            date: The date to format.

        Returns:
            The formatted date, or None if the given date was None.
        """
        if date is None:
            return None
        with self._format_lock:
            return self._render(date, self.DATE_TIME_FORMAT)

    def format_as_datetime_with_ms(self, date: datetime | None) -> str | None:
        """Formats the given date using the ISO 8601 date-time format with milliseconds.

        The layout is yyyy-MM-dd'T'HH:mm:ss.SSS. Formatting is serialized the
        same way as `format_as_datetime`.

        Args:
            date: The date to format.

        Returns:
            The formatted date, or None if the given date was None.
        """
        if date is None:
            return None
        with self._format_lock:
            return self._render(date, self.DATE_TIME_WITH_MS_FORMAT)[:-3]

    def _render(self, date: datetime, date_format: str) -> str:
        """Renders a date with one of the ISO layouts.

        The year is padded to four digits here because `strftime` leaves
        years below 1000 unpadded on some platforms.

        Args:
            date: The date to render.
            date_format: A layout starting with `%Y`.

        Returns:
            The rendered date in the provider timezone.
        """
        t = self.to_calendar(date).time
        return f"{t.year:04d}" + t.strftime(date_format.removeprefix("%Y"))

    def format_calendar_as_datetime(self, calendar: Calendar | None) -> str | None:
        """Formats the instant held by a calendar using the ISO 8601 date-time format.

        Args:
            calendar: The calendar to format.

        Returns:
            The formatted instant, or None if the given calendar was None.
        """
        if calendar is None:
            return None
        return self.format_as_datetime(calendar.time)

    def parse_date(self, text: str | None) -> datetime | None:
        """Parses a date following `DATE_FORMAT`.

        The whole string must match the layout and name a real date: trailing
        text such as a time part is rejected, and so is a day like 2003-02-30.

        Args:
            text: The string to parse.

        Returns:
            The corresponding date at midnight, or None if the given string was None.

        Raises:
            DateParseError: If the string does not follow the layout.
        """
        return self._parse(text, self.DATE_FORMAT)

    def parse_datetime(self, text: str | None) -> datetime | None:
        """Parses a date-time following `DATE_TIME_FORMAT`.

        The whole string must match the layout and name a real date-time.

        Args:
            text: The string to parse.

        Returns:
            The corresponding date with time details, or None if the given
            string was None.

        Raises:
            DateParseError: If the string does not follow the layout.
        """
        return self._parse(text, self.DATE_TIME_FORMAT)

    def _parse(self, text: str | None, date_format: str) -> datetime | None:
        if text is None:
            return None
        try:
            parsed = datetime.strptime(text, date_format)
        except ValueError as e:
            self.logger.debug(f"Failed to parse '{text}' with format '{date_format}': {e}")
            raise DateParseError(text, date_format) from e
        return Calendar(parsed, self.timezone).time

    def to_calendar(self, date: datetime | None) -> Calendar | None:
        """Converts the given date to a Calendar in the provider timezone.

        Args:
            date: The date to convert.

        Returns:
            A new Calendar holding the same instant, or None if the given date was None.
        """
        if date is None:
            return None
        return Calendar(date, self.timezone)

    def year_of(self, date: datetime) -> int:
        """Extracts the year of the given date, which must not be None."""
        return self.to_calendar(date).get(CalendarField.YEAR)

    def month_of(self, date: datetime) -> int:
        """Extracts the month of the given date, starting at 1 (January=1).

        Args:
            date: The date to extract the month from. Must not be None.

        Returns:
            The month in the range 1..12.
        """
        return self.to_calendar(date).get(CalendarField.MONTH)

    def day_of_month_of(self, date: datetime) -> int:
        """Extracts the day of month of the given date, which must not be None."""
        return self.to_calendar(date).get(CalendarField.DAY_OF_MONTH)

    def day_of_week_of(self, date: datetime) -> int:
        """Extracts the ISO day of week of the given date (Monday=1, Sunday=7).

        Args:
            date: The date to extract the day of week from. Must not be None.

        Returns:
            The day of week in the range 1..7.
        """
        return self.to_calendar(date).get(CalendarField.DAY_OF_WEEK)

    def hour_of_day(self, date: datetime) -> int:
        """Extracts the hour of day of the given date (24-hour clock)."""
        return self.to_calendar(date).get(CalendarField.HOUR_OF_DAY)

    def minute_of(self, date: datetime) -> int:
        return self.to_calendar(date).get(CalendarField.MINUTE)

    def second_of(self, date: datetime) -> int:
        return self.to_calendar(date).get(CalendarField.SECOND)

    def millisecond_of(self, date: datetime) -> int:
        return self.to_calendar(date).get(CalendarField.MILLISECOND)

    def truncate_time(self, date: datetime | None) -> datetime | None:
        """Returns a copy of the given date without its time part.

        For example, 2008-12-29T23:45:12 gives 2008-12-29T00:00:00. The given
        date is left untouched.

        Args:
            date: The date to truncate.

        Returns:
            The truncated date, or None if the given date was None.
        """
        if date is None:
            return None
        calendar = self.to_calendar(date)
        calendar.time = calendar.time.replace(hour=0, minute=0, second=0, microsecond=0)
        return calendar.time

    def today(self) -> datetime:
        """Returns the current instant."""
        return self.clock.now(self.timezone)

    def yesterday(self) -> datetime:
        """Returns the current instant minus one calendar day.

        The time of day is kept across DST transitions.
        """
        return self._shift_days(-1)

    def tomorrow(self) -> datetime:
        """Returns the current instant plus one calendar day.

        The time of day is kept across DST transitions.
        """
        return self._shift_days(1)

    def _shift_days(self, days: int) -> datetime:
        calendar = Calendar(self.clock.now(self.timezone), self.timezone)
        calendar.add(CalendarField.DAY_OF_MONTH, days)
        return calendar.time
