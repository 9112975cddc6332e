"""This module defines custom exceptions related to date handling."""


class FestUtilError(Exception):
    """Base exception for errors raised by the fest_util library."""

    pass


class DateParseError(FestUtilError, ValueError):
    """Raised when a string does not follow the expected ISO layout.

    The low-level parsing error is chained as ``__cause__``.
    """

    def __init__(self, text: str, date_format: str) -> None:
        """Initializes the error.

        Args:
            text: The string that could not be parsed.
            date_format: The layout the string was expected to follow.
        """
        super().__init__(f"Unable to parse '{text}' using format '{date_format}'")
        self.text = text
        self.date_format = date_format
