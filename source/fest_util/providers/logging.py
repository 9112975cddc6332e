"""This module sets up the logging system for the library.

It provides a `LoggingProvider` singleton that configures and dispenses the
`fest_util` logger, so every provider shares one handler and one level.
"""

from __future__ import annotations

import sys
from logging import Formatter, Logger, StreamHandler, _nameToLevel, getLogger

from fest_util.providers.config import ConfigProvider

__all__ = ["Logger", "LoggingProvider"]


class LoggingProvider:
    """Provides a configured logger instance for the library.

    This class uses a Singleton pattern to ensure that there is only one
    instance of the logger, configured once based on settings from the
    config provider.
    """

    _instance: LoggingProvider | None = None
    _logger: Logger | None = None
    _is_configured: bool = False

    def __new__(cls) -> LoggingProvider:
        """Implements the Singleton pattern.

        Returns:
            The singleton instance of the LoggingProvider.
        """
        if not cls._instance:  # pragma: no cover
            cls._instance = super().__new__(cls)
        return cls._instance

    def _configure_logger(self) -> Logger:
        """Configures the logger. This is called only once.

        Returns:
            The configured logger instance.
        """
        logger = getLogger("fest_util")

        if self._is_configured:  # pragma: no cover
            return logger

        config = ConfigProvider.get_config()
        log_level_str = config.LOG_LEVEL
        numeric_level = _nameToLevel.get(log_level_str.upper(), _nameToLevel["INFO"])
        logger.setLevel(numeric_level)

        if not logger.handlers:
            handler = StreamHandler(sys.stderr)
            formatter = Formatter(
                "%(asctime)s - %(name)s - [%(levelname)s] - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
            handler.setFormatter(formatter)
            logger.addHandler(handler)

        self._is_configured = True
        logger.debug(f"Logger configured with level: {log_level_str}")
        return logger

    def get_logger(self) -> Logger:
        """Returns the configured logger instance.

        The logger is configured lazily on first use, which keeps imports of
        the library free of side effects.

        Returns:
            The configured logger instance.
        """
        if not self._logger:
            self._logger = self._configure_logger()
        return self._logger
