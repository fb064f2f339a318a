from sysresolvers.discovery.errors import AddressSplitError

MISSING_PORT = "missing port in address"
TOO_MANY_COLONS = "too many colons in address"


def split_host_port(hostport: str) -> tuple[str, str]:
    """
    Split ``host:port``, ``[host]:port`` or ``[host%zone]:port``.

    Brackets are required around hosts that contain colons. Raises
    AddressSplitError naming what is wrong with the address.
    """
    start, end = 0, 0

    colon = hostport.rfind(":")
    if colon < 0:
        raise AddressSplitError(hostport, MISSING_PORT)

    if hostport.startswith("["):
        closing = hostport.find("]")
        if closing < 0:
            raise AddressSplitError(hostport, "missing ']' in address")

        if closing + 1 == len(hostport):
            raise AddressSplitError(hostport, MISSING_PORT)

        if closing + 1 != colon:
            if hostport[closing + 1] == ":":
                raise AddressSplitError(hostport, TOO_MANY_COLONS)

            raise AddressSplitError(hostport, MISSING_PORT)

        host = hostport[1:closing]
        start, end = 1, closing + 1

    else:
        host = hostport[:colon]
        if ":" in host:
            raise AddressSplitError(hostport, TOO_MANY_COLONS)

    if "[" in hostport[start:]:
        raise AddressSplitError(hostport, "unexpected '[' in address")

    if "]" in hostport[end:]:
        raise AddressSplitError(hostport, "unexpected ']' in address")

    return host, hostport[colon + 1 :]


def split_host(hostport: str) -> str:
    """Return the host of ``hostport``, which may omit the port."""
    try:
        host, _ = split_host_port(hostport)

    except AddressSplitError as err:
        if err.reason != MISSING_PORT:
            raise

        host = hostport

    return host


def join_host_port(host: str, port: int | str) -> str:
    if ":" in host:
        return f"[{host}]:{port}"

    return f"{host}:{port}"
