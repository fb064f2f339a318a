"""
Logging models for system resolver discovery.
"""

from sysresolvers.logging.models import Entry, LogLevel


class ResolversDebug(Entry, kw_only=True):
    """Debug-level logging of the hosts captured by one refresh."""
    probe_host: str
    known_resolvers: int
    dialed: list[str]
    level: LogLevel = LogLevel.DEBUG


class ResolversInfo(Entry, kw_only=True):
    """Info-level logging for refresh cycles."""
    probe_host: str
    known_resolvers: int
    level: LogLevel = LogLevel.INFO


class ResolversError(Entry, kw_only=True):
    """Error-level logging for failed refresh cycles."""
    probe_host: str
    known_resolvers: int
    error: str
    level: LogLevel = LogLevel.ERROR
