"""
System resolver discovery.

Learns which nameservers the operating system's resolver would contact
by intercepting the dial step of a synthetic lookup.

Usage:
    from sysresolvers.discovery import create_system_resolvers

    resolvers = await create_system_resolvers("1m")
    resolvers.get()
"""

from sysresolvers.discovery.cache import (
    AddressCache as AddressCache,
    ReadWriteLock as ReadWriteLock,
)
from sysresolvers.discovery.dial import (
    DialFunc as DialFunc,
    InterceptingBackend as InterceptingBackend,
)
from sysresolvers.discovery.errors import (
    AddressSplitError as AddressSplitError,
    BadAddressError as BadAddressError,
    DialError as DialError,
    FakeDialError as FakeDialError,
    ProbeHostError as ProbeHostError,
    RefreshError as RefreshError,
    SystemResolversError as SystemResolversError,
    UnexpectedHostFormatError as UnexpectedHostFormatError,
    UnsupportedPlatformError as UnsupportedPlatformError,
    find_cause as find_cause,
)
from sysresolvers.discovery.factory import (
    create_system_resolvers as create_system_resolvers,
)
from sysresolvers.discovery.host_gen import (
    HostGenFunc as HostGenFunc,
    default_host_gen as default_host_gen,
    validate_probe_host as validate_probe_host,
)
from sysresolvers.discovery.net import (
    join_host_port as join_host_port,
    split_host as split_host,
)
from sysresolvers.discovery.system_resolvers import (
    SystemResolvers as SystemResolvers,
)
from sysresolvers.discovery.unix_system_resolvers import (
    UnixSystemResolvers as UnixSystemResolvers,
    validate_dialed_host as validate_dialed_host,
)
