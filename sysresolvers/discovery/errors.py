"""
Error taxonomy for system resolver discovery.

Dial errors derive from OSError: the stub resolver treats an OSError from
a nameserver as fatal for that nameserver and drops it at once, instead of
retrying it until the lookup lifetime runs out.
"""

from typing import TypeVar

E = TypeVar("E", bound=BaseException)


class SystemResolversError(Exception):
    """Base class for system resolver discovery errors."""


class DialError(SystemResolversError, OSError):
    """Raised by the dial step in place of opening a connection."""


class FakeDialError(DialError):
    """
    Sentinel raised after the dialed address has been captured.

    Not a failure: it aborts the connection attempt and tells the
    refresh that the dial step was reached.
    """

    def __init__(self, host: str | None = None):
        self.host = host
        super().__init__("this error signals the successful dial interception")


class BadAddressError(DialError):
    """The dialed address could not be split or is not an IP literal."""

    def __init__(self, address: str):
        self.address = address
        super().__init__(f"parsing {address!r}: the passed string is not a valid IP address")


class UnexpectedHostFormatError(DialError):
    """The dialed host holds more than one zone separator."""

    def __init__(self, host: str):
        self.host = host
        super().__init__(f"parsing {host!r}: unexpected host format")


class AddressSplitError(SystemResolversError, ValueError):
    """Raised when a host:port string cannot be split."""

    def __init__(self, address: str, reason: str):
        self.address = address
        self.reason = reason
        super().__init__(f"address {address}: {reason}")


class ProbeHostError(SystemResolversError, ValueError):
    """The generated probe host can never reach the dial step."""

    def __init__(self, host: str, reason: str):
        self.host = host
        self.reason = reason
        super().__init__(f"invalid probe host {host!r}: {reason}")


class RefreshError(SystemResolversError):
    """The lookup failed for a reason other than the sentinel."""

    def __init__(self, cause: BaseException | str):
        super().__init__(f"systemResolvers: refresh failed: {cause}")


class UnsupportedPlatformError(SystemResolversError):
    """No discovery strategy exists for the running platform."""

    def __init__(self, platform: str):
        self.platform = platform
        super().__init__(f"system resolvers discovery is not supported on {platform}")


def find_cause(err: BaseException | None, kind: type[E]) -> E | None:
    """
    Return the first exception of ``kind`` in the chain starting at ``err``.

    Follows ``__cause__`` first, then ``__context__``, so identity checks
    work through any number of ``raise ... from`` wrappings.
    """
    seen: set[int] = set()

    while err is not None and id(err) not in seen:
        if isinstance(err, kind):
            return err

        seen.add(id(err))
        err = err.__cause__ if err.__cause__ is not None else err.__context__

    return None
