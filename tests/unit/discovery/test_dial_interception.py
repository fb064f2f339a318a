"""
Test: Dial Interception

Validates that the dial step records bare hosts and always refuses the
connection:
1. IPv4 and IPv6 literals, with or without port and zone, are recorded
2. The sentinel FakeDialError is raised after recording
3. Unsplittable addresses and non-IP hosts raise BadAddressError
4. More than one zone separator raises UnexpectedHostFormatError
5. Failed validation leaves the cache untouched

Run with: pytest tests/unit/discovery/test_dial_interception.py
"""

import pytest

from sysresolvers.discovery import (
    AddressSplitError,
    BadAddressError,
    DialError,
    FakeDialError,
    UnexpectedHostFormatError,
    UnixSystemResolvers,
    find_cause,
    validate_dialed_host,
)


@pytest.fixture
def system_resolvers(stub_resolver_factory) -> UnixSystemResolvers:
    return UnixSystemResolvers(resolver=stub_resolver_factory())


class TestInterceptValidAddresses:
    def test_ipv4_without_port(self, system_resolvers: UnixSystemResolvers):
        with pytest.raises(FakeDialError) as exc_info:
            system_resolvers.intercept("127.0.0.1")

        assert exc_info.value.host == "127.0.0.1"
        assert system_resolvers.get() == ["127.0.0.1"]

    def test_ipv4_with_port(self, system_resolvers: UnixSystemResolvers):
        with pytest.raises(FakeDialError):
            system_resolvers.intercept("192.168.1.1:53")

        assert system_resolvers.get() == ["192.168.1.1"]

    def test_ipv6_with_port(self, system_resolvers: UnixSystemResolvers):
        with pytest.raises(FakeDialError):
            system_resolvers.intercept("[::1]:53")

        assert system_resolvers.get() == ["::1"]

    def test_ipv6_zone_is_kept(self, system_resolvers: UnixSystemResolvers):
        with pytest.raises(FakeDialError):
            system_resolvers.intercept("[::1%lo0]:53")

        assert system_resolvers.get() == ["::1%lo0"]

    def test_hosts_accumulate_without_duplicates(
        self,
        system_resolvers: UnixSystemResolvers,
    ):
        for address in ("127.0.0.1", "[::1]:53", "127.0.0.1:53", "[::1%lo0]:53"):
            with pytest.raises(FakeDialError):
                system_resolvers.intercept(address)

        assert sorted(system_resolvers.get()) == ["127.0.0.1", "::1", "::1%lo0"]

    def test_captured_list_bypasses_cache(
        self,
        system_resolvers: UnixSystemResolvers,
    ):
        captured: list[str] = []

        with pytest.raises(FakeDialError):
            system_resolvers.intercept("[::1]:53", captured=captured)

        assert captured == ["::1"]
        assert system_resolvers.get() == []

    def test_sentinel_is_an_os_error(self, system_resolvers: UnixSystemResolvers):
        with pytest.raises(OSError) as exc_info:
            system_resolvers.intercept("127.0.0.1")

        assert isinstance(exc_info.value, DialError)


class TestInterceptInvalidAddresses:
    def test_unsplittable_address(self, system_resolvers: UnixSystemResolvers):
        with pytest.raises(BadAddressError) as exc_info:
            system_resolvers.intercept("127.0.0.1::123")

        split_error = find_cause(exc_info.value, AddressSplitError)
        assert split_error is not None
        assert split_error.reason == "too many colons in address"
        assert system_resolvers.get() == []

    def test_double_zone_separator(self, system_resolvers: UnixSystemResolvers):
        with pytest.raises(UnexpectedHostFormatError):
            system_resolvers.intercept("[::1%%lo0]:53")

        assert system_resolvers.get() == []

    def test_non_ip_host(self, system_resolvers: UnixSystemResolvers):
        with pytest.raises(BadAddressError) as exc_info:
            system_resolvers.intercept("not-ip")

        assert exc_info.value.address == "not-ip"
        assert system_resolvers.get() == []

    def test_non_ip_host_with_zone(self, system_resolvers: UnixSystemResolvers):
        with pytest.raises(BadAddressError):
            system_resolvers.intercept("[resolver%eth0]:53")

        assert system_resolvers.get() == []

    def test_failed_validation_keeps_existing_hosts(
        self,
        system_resolvers: UnixSystemResolvers,
    ):
        with pytest.raises(FakeDialError):
            system_resolvers.intercept("10.0.0.1:53")

        with pytest.raises(BadAddressError):
            system_resolvers.intercept("not-ip")

        assert system_resolvers.get() == ["10.0.0.1"]

    def test_validation_errors_are_not_the_sentinel(
        self,
        system_resolvers: UnixSystemResolvers,
    ):
        with pytest.raises(DialError) as exc_info:
            system_resolvers.intercept("[::1%%lo0]:53")

        assert not isinstance(exc_info.value, FakeDialError)


def test_validate_dialed_host():
    """Only the zone separator count is checked, never the zone itself."""
    validate_dialed_host("127.0.0.1")
    validate_dialed_host("fe80::1%eth0")
    validate_dialed_host("::1%")

    with pytest.raises(UnexpectedHostFormatError):
        validate_dialed_host("fe80::1%eth0%1")

    with pytest.raises(BadAddressError):
        validate_dialed_host("example.org")

    with pytest.raises(BadAddressError):
        validate_dialed_host("")
