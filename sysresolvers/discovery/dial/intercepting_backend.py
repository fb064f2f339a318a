"""
dnspython backend that never opens a socket.

The stub resolver asks its backend for a socket once per nameserver it
queries, passing the nameserver's address as the destination. That call
is the dial step: the backend formats the destination and hands it to the
dial function, which is expected to raise.
"""

import asyncio
from typing import Any, Callable, NoReturn

import dns.asyncbackend

from sysresolvers.discovery.errors import DialError
from sysresolvers.discovery.net import join_host_port

DialFunc = Callable[[str], NoReturn]


class InterceptingBackend(dns.asyncbackend.Backend):
    def __init__(self, dial: DialFunc) -> None:
        self._dial = dial
        # Destinations in dial order, for inspecting a lookup after the fact.
        self.dialed: list[str] = []

    def name(self) -> str:
        return "intercepting"

    def datagram_connection_required(self) -> bool:
        # Forces the resolver to pass the destination for UDP queries too.
        return True

    async def make_socket(
        self,
        af: int,
        socktype: int,
        proto: int = 0,
        source: Any = None,
        destination: Any = None,
        timeout: float | None = None,
        ssl_context: Any = None,
        server_hostname: str | None = None,
    ) -> NoReturn:
        if destination is None:
            raise DialError("resolver did not pass a destination to the dial step")

        address = join_host_port(str(destination[0]), destination[1])
        self.dialed.append(address)

        self._dial(address)

        # The dial function always raises; reaching here is a programming error.
        raise DialError(f"dial function returned for {address}")

    async def sleep(self, interval: float):
        await asyncio.sleep(interval)

    async def wait_for(self, awaitable, timeout: float | None):
        return await asyncio.wait_for(awaitable, timeout)
