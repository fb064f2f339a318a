"""
Pytest configuration for sysresolvers tests.

Async tests are marked with @pytest.mark.asyncio (pytest-asyncio, strict mode).
"""

from typing import Generator

import dns.asyncresolver
import pytest

from sysresolvers.logging import Entry, LoggingConfig, LogLevel


@pytest.fixture(autouse=True)
def configure_log_level() -> Generator[None, None, None]:
    config = LoggingConfig()
    config.update(log_level="debug", log_output="stderr")
    yield
    config.update(log_level="info", log_output="stderr")


@pytest.fixture
def temp_log_directory(tmp_path) -> str:
    return str(tmp_path)


@pytest.fixture
def sample_entry_factory():
    def create_entry(
        message: str = "Test log message",
        level: LogLevel = LogLevel.INFO,
    ) -> Entry:
        return Entry(message=message, level=level)

    return create_entry


@pytest.fixture
def stub_resolver_factory():
    """
    Build unconfigured stub resolvers with explicit nameservers.

    Every dial is intercepted, so these never send a packet.
    """

    def create_resolver(
        nameservers: list[str] | None = None,
    ) -> dns.asyncresolver.Resolver:
        resolver = dns.asyncresolver.Resolver(configure=False)
        resolver.nameservers = (
            nameservers if nameservers is not None else ["127.0.0.1", "::1"]
        )
        return resolver

    return create_resolver
