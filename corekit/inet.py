"""IP addresses and socket addresses."""

from __future__ import annotations

import ipaddress
import logging
import socket

_log = logging.getLogger(__name__)


def _resolve(host: str, port) -> tuple[str, int]:
    try:
        results = socket.getaddrinfo(host, port, type=socket.SOCK_STREAM)
    except (OSError, UnicodeError) as exc:
        raise ValueError("Unable to resolve host and port") from exc
    if not results:
        raise ValueError("Unable to resolve host and port")
    sockaddr = results[0][4]
    return sockaddr[0], sockaddr[1]


class InetAddress:
    """An IP address with an optional port.

    With a port the host must be an address literal; without one the host
    name is resolved and the first address found is kept.
    """

    __slots__ = ("_ip", "_port")

    def __init__(self, host: str, port: int | None = None) -> None:
        if port is not None:
            if not 0 <= port <= 0xFFFF:
                raise ValueError(f"Port out of range: {port}")
            self._ip = ipaddress.ip_address(host)
            self._port = port
        else:
            address, _ = _resolve(host, None)
            self._ip = ipaddress.ip_address(address)
            self._port = 0

    @property
    def address(self) -> bytes:
        """The raw address: 4 bytes for IPv4, 16 for IPv6."""
        return self._ip.packed

    @property
    def host_address(self) -> str:
        return str(self._ip)

    @property
    def port(self) -> int:
        return self._port

    @staticmethod
    def get_local_host() -> "InetAddress":
        """Return the IPv6 loopback address."""
        return InetAddress(str(ipaddress.IPv6Address("::1")))

    @property
    def canonical_host_name(self) -> str:
        return str(self._ip)

    @property
    def host_name(self) -> str:
        return str(self._ip)

    def is_loopback_address(self) -> bool:
        return self._ip.is_loopback

    def is_multicast_address(self) -> bool:
        return self._ip.is_multicast

    def is_reachable(self, timeout_ms: int) -> bool:
        """Try a TCP connection to the address and port within the timeout."""
        try:
            with socket.create_connection((str(self._ip), self._port), timeout=timeout_ms / 1000.0):
                return True
        except OSError as exc:
            _log.error("Error: %s", exc)
            return False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InetAddress):
            return NotImplemented
        return self._ip == other._ip

    def __hash__(self) -> int:
        return hash(str(self._ip))

    def __str__(self) -> str:
        return str(self._ip)

    def __repr__(self) -> str:
        return f"InetAddress('{self._ip}', {self._port})"


class InetSocketAddress:
    """A resolved host address together with a port.

    Without arguments it is the unspecified IPv4 address with port 0.
    """

    __slots__ = ("_address", "_port")

    def __init__(self, host: str | None = None, port: int = 0) -> None:
        if not 0 <= port <= 0xFFFF:
            raise ValueError(f"Port out of range: {port}")
        if host is None:
            self._address, self._port = "0.0.0.0", port
        else:
            address, resolved_port = _resolve(host, str(port))
            self._address = str(ipaddress.ip_address(address))
            self._port = resolved_port

    @property
    def address(self) -> str:
        return self._address

    @property
    def port(self) -> int:
        return self._port

    @staticmethod
    def from_string(text: str) -> "InetSocketAddress":
        """Parse ``host:port``, splitting at the first colon."""
        host, sep, port_text = text.partition(":")
        if not sep:
            raise ValueError("Invalid address format. Expected host:port")
        port = int(port_text)
        return InetSocketAddress(host, port)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InetSocketAddress):
            return NotImplemented
        return (self._address, self._port) == (other._address, other._port)

    def __hash__(self) -> int:
        return hash((self._address, self._port))

    def __str__(self) -> str:
        if ":" in self._address:
            return f"[{self._address}]:{self._port}"
        return f"{self._address}:{self._port}"

    def __repr__(self) -> str:
        return f"InetSocketAddress('{self._address}', {self._port})"