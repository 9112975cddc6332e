"""This module contains shared fixtures for all unit tests."""

import os

import pytest


@pytest.fixture(scope="session", autouse=True)
def unset_library_settings() -> None:
    """Unsets library environment variables for the entire test session.

    This fixture ensures that unit tests never depend on the timezone or log
    level configured on the machine running them.
    """
    os.environ.pop("TIMEZONE", None)
    os.environ.pop("LOG_LEVEL", None)
