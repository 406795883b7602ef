"""Test configuration and fixtures for dealdesk."""

from tests.fixtures import *  # noqa: F401,F403
