"""UDP datagrams and a socket that sends and receives them."""

from __future__ import annotations

import ipaddress
import socket
from dataclasses import dataclass

RECEIVE_SIZE = 1024


@dataclass
class DatagramPacket:
    """A payload with the host and port it goes to or came from."""

    data: bytes
    host: str = ""
    port: int = 0

    def __post_init__(self) -> None:
        self.data = bytes(self.data)
        if not 0 <= self.port <= 0xFFFF:
            raise ValueError(f"Port out of range: {self.port}")

    def size(self) -> int:
        return len(self.data)


class DatagramSocket:
    """An IPv4 UDP socket bound to an ephemeral port on all interfaces."""

    def __init__(self) -> None:
        self._sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        self._sock.bind(("0.0.0.0", 0))

    @property
    def local_port(self) -> int:
        return self._sock.getsockname()[1]

    @property
    def timeout(self) -> float | None:
        return self._sock.gettimeout()

    @timeout.setter
    def timeout(self, seconds: float | None) -> None:
        self._sock.settimeout(seconds)

    def send(self, packet: DatagramPacket) -> None:
        """Send ``packet`` to its host, which must be an IP address literal."""
        address = ipaddress.ip_address(packet.host)
        self._sock.sendto(packet.data, (str(address), packet.port))

    def receive(self) -> DatagramPacket:
        """Wait for a datagram of up to 1024 bytes and return it with its sender."""
        data, (host, port) = self._sock.recvfrom(RECEIVE_SIZE)[:2]
        return DatagramPacket(data, host, port)

    def close(self) -> None:
        self._sock.close()

    def __enter__(self) -> "DatagramSocket":
        return self

    def __exit__(self, *args) -> None:
        self.close()