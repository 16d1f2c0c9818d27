"""
Server configuration.

The only setting that reaches the network is the bind address, given as
``IP:PORT`` (or ``[IPv6]:PORT``) on the command line.
"""

import ipaddress
from dataclasses import dataclass
from typing import Tuple

from .errors import InvalidBindAddress

DEFAULT_BIND = "127.0.0.1:3000"


@dataclass
class Settings:
    """Runtime settings, filled from command line arguments."""

    bind: str = DEFAULT_BIND
    log_level: str = "INFO"
    expose_delete: bool = True


def parse_bind(bind: str) -> Tuple[str, int]:
    """Split a bind string into ``(host, port)``.

    The host must be an IP literal; hostnames are rejected.
    """
    if bind.startswith("["):
        host, sep, port = bind[1:].partition("]:")
        if not sep:
            raise InvalidBindAddress(bind, "expected [IPv6]:PORT")
    else:
        host, sep, port = bind.rpartition(":")
        if not sep or not host:
            raise InvalidBindAddress(bind, "expected IP:PORT")

    try:
        ip = ipaddress.ip_address(host)
    except ValueError:
        raise InvalidBindAddress(bind, f"{host!r} is not an IP address") from None

    if ip.version == 6 and not bind.startswith("["):
        raise InvalidBindAddress(bind, "IPv6 addresses must be bracketed")
    if ip.version == 4 and bind.startswith("["):
        raise InvalidBindAddress(bind, "only IPv6 addresses may be bracketed")

    if not (port.isascii() and port.isdigit()) or int(port) > 65535:
        raise InvalidBindAddress(bind, f"{port!r} is not a valid port")

    return str(ip), int(port)
