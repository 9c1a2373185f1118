# tests/conftest.py
"""
Shared pytest fixtures and configuration for chuk_ai_tool_hints tests.
"""

import logging
from datetime import datetime, timedelta, timezone

import pytest

from chuk_ai_tool_hints.ledger import LedgerConfig
from chuk_ai_tool_hints.models import (
    EnvironmentDescriptor,
    OSFamily,
    ProviderStatus,
    ShellKind,
    ToolDescriptor,
    ToolProvider,
)

# Configure logging for tests
logging.basicConfig(level=logging.WARNING)
logging.getLogger("chuk_ai_tool_hints").setLevel(logging.DEBUG)


class FakeClock:
    """Manually advanced clock; call it to read the time."""

    def __init__(self, start: datetime | None = None):
        self.current = start or datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.current

    def advance(self, **kwargs) -> datetime:
        self.current += timedelta(**kwargs)
        return self.current


@pytest.fixture
def clock():
    """Fixed-start clock tests can move forward."""
    return FakeClock()


@pytest.fixture
def small_ledger_config():
    """Three entries, one hour retention."""
    return LedgerConfig(max_entries=3, ttl=timedelta(hours=1))


@pytest.fixture
def windows_env():
    return EnvironmentDescriptor(os_family=OSFamily.WINDOWS, shell=ShellKind.CMD)


@pytest.fixture
def linux_env():
    return EnvironmentDescriptor(os_family=OSFamily.LINUX, shell=ShellKind.POSIX)


@pytest.fixture
def mac_env():
    return EnvironmentDescriptor(os_family=OSFamily.MAC, shell=ShellKind.POSIX)


@pytest.fixture
def providers():
    """A small registry snapshot with one offline and one disabled provider."""
    return [
        ToolProvider(
            provider_id="filesystem",
            tools=[
                ToolDescriptor(
                    name="read_file",
                    description="Read a file from disk",
                    input_schema={"type": "object", "properties": {"path": {"type": "string"}}},
                ),
                ToolDescriptor(
                    name="write_file",
                    description="Write content to a file",
                    input_schema={"type": "object", "properties": {"path": {"type": "string"}}},
                ),
                ToolDescriptor(name="list_directory", description="List directory entries"),
                ToolDescriptor(name="chmod", description="Change file permissions", enabled=False),
            ],
        ),
        ToolProvider(
            provider_id="web",
            tools=[
                ToolDescriptor(name="fetch_url", description="Fetch a URL over HTTP"),
                ToolDescriptor(name="search", description="Search the web"),
            ],
        ),
        ToolProvider(
            provider_id="offline",
            status=ProviderStatus.DISCONNECTED,
            tools=[ToolDescriptor(name="read_file", description="Read a file")],
        ),
        ToolProvider(
            provider_id="disabled",
            disabled=True,
            tools=[ToolDescriptor(name="write_file", description="Write a file")],
        ),
    ]


# Test markers
def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")
