"""This module provides the source of the current instant.

Date helpers that depend on "now" receive a clock instead of calling
``datetime.now`` directly, so tests can pin the current instant.
"""

from datetime import datetime, tzinfo


class ClockProvider:
    """Reads the current instant from the system wall clock."""

    def now(self, tz: tzinfo) -> datetime:
        """Returns the current instant.

        Args:
            tz: The timezone the returned datetime is expressed in.

        Returns:
            An aware datetime for the current instant.
        """
        return datetime.now(tz)


class FixedClockProvider(ClockProvider):
    """A clock pinned to a single instant."""

    def __init__(self, instant: datetime) -> None:
        """Initializes the FixedClockProvider.

        Args:
            instant: The instant returned by every call to `now`. Must be
                timezone-aware.

        Raises:
            ValueError: If the instant is naive.
        """
        if instant.tzinfo is None:
            raise ValueError("FixedClockProvider requires a timezone-aware instant")
        self.instant = instant

    def now(self, tz: tzinfo) -> datetime:
        """Returns the pinned instant expressed in the given timezone.

        Args:
            tz: The timezone the returned datetime is expressed in.

        Returns:
            The pinned instant.
        """
        return self.instant.astimezone(tz)
