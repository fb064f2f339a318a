"""
System resolver discovery for Unix-like platforms.

Rather than reading the resolver configuration, the discovery asks the
stub resolver to look up a throwaway host name and intercepts the point
where it would open a socket to each nameserver. The nameserver address is
recorded and the connection is refused with FakeDialError, so no query
ever leaves the host. A lookup that fails with nothing but FakeDialError is
therefore a successful refresh.
"""

import functools
import ipaddress
from typing import NoReturn

import dns.asyncresolver
import dns.exception
import dns.resolver

from sysresolvers.env import TimeParser
from sysresolvers.logging import Logger

from .cache import AddressCache
from .dial import InterceptingBackend
from .errors import (
    AddressSplitError,
    BadAddressError,
    DialError,
    FakeDialError,
    RefreshError,
    SystemResolversError,
    UnexpectedHostFormatError,
)
from .host_gen import HostGenFunc, default_host_gen, validate_probe_host
from .logging_models import ResolversDebug, ResolversError, ResolversInfo
from .net import split_host
from .system_resolvers import SystemResolvers


def validate_dialed_host(host: str) -> None:
    """
    Check that ``host`` is an IP literal with at most one zone suffix.

    The zone itself is not inspected, only the separator count.
    """
    parts = host.split("%")
    if len(parts) == 1:
        ip = host

    elif len(parts) == 2:
        ip = parts[0]

    else:
        raise UnexpectedHostFormatError(host)

    try:
        ipaddress.ip_address(ip)

    except ValueError as err:
        raise BadAddressError(host) from err


class UnixSystemResolvers(SystemResolvers):
    """
    Captures the nameservers the stub resolver would dial.

    Usage:
        resolvers = UnixSystemResolvers(refresh_interval="1m")
        await resolvers.refresh()
        resolvers.get()  # e.g. ["127.0.0.53"]
    """

    def __init__(
        self,
        refresh_interval: float | str = 0,
        host_gen: HostGenFunc | None = None,
        resolver: dns.asyncresolver.Resolver | None = None,
        lookup_timeout: float | str = 5.0,
        logger: Logger | None = None,
    ) -> None:
        if host_gen is None:
            host_gen = default_host_gen

        time_parser = TimeParser()
        self._refresh_interval = time_parser.parse(refresh_interval)
        self._lookup_timeout = time_parser.parse(lookup_timeout)

        if resolver is None:
            try:
                resolver = dns.asyncresolver.Resolver()

            except (dns.exception.DNSException, OSError) as err:
                raise SystemResolversError(
                    f"systemResolvers: configuring stub resolver: {err}"
                ) from err

        self._resolver = resolver
        self._host_gen = host_gen
        self._addrs = AddressCache()
        self._logger = logger if logger is not None else Logger()

    @property
    def refresh_interval(self) -> float:
        return self._refresh_interval

    @property
    def lookup_timeout(self) -> float:
        return self._lookup_timeout

    def get(self) -> list[str]:
        return self._addrs.get()

    async def refresh(self) -> None:
        probe_host = ""

        try:
            probe_host = self._generate_probe_host()
            captured = await self._lookup(probe_host)

        except RefreshError as err:
            await self._logger.log(
                ResolversError(
                    message="Failed to refresh system resolvers",
                    probe_host=probe_host,
                    known_resolvers=len(self._addrs),
                    error=str(err),
                )
            )

            raise

        self._addrs.update(captured)

        await self._logger.log(
            ResolversDebug(
                message=f"Captured {len(captured)} dial(s) for probe host",
                probe_host=probe_host,
                known_resolvers=len(self._addrs),
                dialed=captured,
            )
        )

        await self._logger.log(
            ResolversInfo(
                message="Refreshed system resolvers",
                probe_host=probe_host,
                known_resolvers=len(self._addrs),
            )
        )

    def _generate_probe_host(self) -> str:
        try:
            probe_host = self._host_gen()
            return validate_probe_host(probe_host)

        except Exception as err:
            raise RefreshError(err) from err

    async def _lookup(self, probe_host: str) -> list[str]:
        captured: list[str] = []
        backend = InterceptingBackend(
            functools.partial(self.intercept, captured=captured)
        )

        try:
            await self._resolver.resolve(
                probe_host,
                "A",
                search=False,
                lifetime=self._lookup_timeout,
                backend=backend,
            )

        except dns.resolver.NoNameservers as err:
            self._check_dial_errors(err)

        except dns.exception.DNSException as err:
            raise RefreshError(err) from err

        else:
            raise RefreshError(
                f"lookup of {probe_host} completed without reaching the dial step"
            )

        return captured

    def _check_dial_errors(self, err: dns.resolver.NoNameservers) -> None:
        dial_errors: list[BaseException] = []
        for attempt in err.kwargs.get("errors") or []:
            dial_errors.extend(
                part for part in attempt if isinstance(part, BaseException)
            )

        failures = [
            error for error in dial_errors if not isinstance(error, FakeDialError)
        ]

        if failures:
            # Validation errors from the dial step outrank anything else.
            failures.sort(key=lambda error: not isinstance(error, DialError))
            raise RefreshError(failures[0]) from failures[0]

        if not dial_errors:
            raise RefreshError(err) from err

    def intercept(
        self,
        address: str,
        captured: list[str] | None = None,
    ) -> NoReturn:
        """
        Record the host of ``address`` and refuse the connection.

        Always raises: FakeDialError once the host is recorded, otherwise
        BadAddressError or UnexpectedHostFormatError. Hosts go straight
        into the cache unless a refresh passes its ``captured`` list.
        """
        try:
            host = split_host(address)

        except AddressSplitError as err:
            raise BadAddressError(address) from err

        validate_dialed_host(host)

        if captured is None:
            self._addrs.add(host)

        else:
            captured.append(host)

        raise FakeDialError(host)
