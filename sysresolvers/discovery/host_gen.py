import ipaddress
import re
import time
from typing import Callable

from .errors import ProbeHostError

HostGenFunc = Callable[[], str]

_label_pattern = re.compile(r"^[A-Za-z0-9_](?:[A-Za-z0-9_-]{0,61}[A-Za-z0-9_])?$")


def default_host_gen() -> str:
    # Unique per call so no resolver-side cache can answer the probe.
    return f"test{time.time_ns()}.org"


def validate_probe_host(host: str) -> str:
    """
    Check that ``host`` is a domain name the resolver would actually query.

    IP literals are answered without dialing anyone, and names that are not
    valid domain names fail before the dial step.
    """
    if not isinstance(host, str) or len(host) == 0:
        raise ProbeHostError(str(host), "empty host")

    try:
        ipaddress.ip_address(host)

    except ValueError:
        pass

    else:
        raise ProbeHostError(host, "IP literals are never dialed")

    name = host[:-1] if host.endswith(".") else host
    if len(name) > 253:
        raise ProbeHostError(host, "name exceeds 253 characters")

    for label in name.split("."):
        if not _label_pattern.match(label):
            raise ProbeHostError(host, f"bad label {label!r}")

    return host
