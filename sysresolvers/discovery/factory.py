import sys

import dns.asyncresolver

from sysresolvers.env import Env, load_env
from sysresolvers.logging import Logger, LoggingConfig

from .errors import UnsupportedPlatformError
from .host_gen import HostGenFunc
from .system_resolvers import SystemResolvers
from .unix_system_resolvers import UnixSystemResolvers


async def create_system_resolvers(
    refresh_interval: float | str | None = None,
    host_gen: HostGenFunc | None = None,
    *,
    resolver: dns.asyncresolver.Resolver | None = None,
    env: Env | None = None,
    logger: Logger | None = None,
) -> SystemResolvers:
    """
    Build the discovery for the running platform and fill its cache.

    Settings not passed explicitly come from ``env``, or from the process
    environment and a ``.env`` file when ``env`` is omitted. The initial
    refresh runs before returning, so a host generator that produces
    unusable probe hosts fails here with RefreshError.
    """
    if sys.platform == "win32":
        raise UnsupportedPlatformError(sys.platform)

    if env is None:
        env = load_env(Env)

    LoggingConfig().update(
        log_level=env.SYSRESOLVERS_LOG_LEVEL,
        log_output=env.SYSRESOLVERS_LOG_OUTPUT,
    )

    if logger is None:
        logger = Logger()

        if env.SYSRESOLVERS_LOG_PATH:
            logger.configure(path=env.SYSRESOLVERS_LOG_PATH)

    if refresh_interval is None:
        refresh_interval = env.SYSRESOLVERS_REFRESH_INTERVAL

    system_resolvers = UnixSystemResolvers(
        refresh_interval=refresh_interval,
        host_gen=host_gen,
        resolver=resolver,
        lookup_timeout=env.SYSRESOLVERS_LOOKUP_TIMEOUT,
        logger=logger,
    )

    await system_resolvers.refresh()

    return system_resolvers
