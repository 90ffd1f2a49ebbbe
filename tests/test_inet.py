import socket

import pytest

from corekit.inet import InetAddress, InetSocketAddress


def test_ipv4_address_bytes_and_text():
    addr = InetAddress("127.0.0.1", 80)
    assert addr.address == bytes([127, 0, 0, 1])
    assert addr.host_address == "127.0.0.1"
    assert addr.host_name == "127.0.0.1"
    assert addr.canonical_host_name == "127.0.0.1"
    assert str(addr) == "127.0.0.1"
    assert addr.port == 80


def test_ipv6_address_is_sixteen_bytes():
    assert len(InetAddress("::1", 0).address) == 16


def test_local_host_is_ipv6_loopback():
    local = InetAddress.get_local_host()
    assert str(local) == "::1"
    assert local.is_loopback_address()


def test_resolve_literal_without_port():
    addr = InetAddress("127.0.0.1")
    assert addr.host_address == "127.0.0.1"
    assert addr.port == 0


def test_loopback_and_multicast():
    assert InetAddress("127.0.0.1", 0).is_loopback_address()
    assert not InetAddress("10.0.0.1", 0).is_loopback_address()
    assert InetAddress("224.0.0.1", 0).is_multicast_address()
    assert not InetAddress("127.0.0.1", 0).is_multicast_address()


def test_equality_ignores_port():
    a = InetAddress("127.0.0.1", 80)
    b = InetAddress("127.0.0.1", 443)
    assert a == b
    assert hash(a) == hash(b)
    assert a != InetAddress("127.0.0.2", 80)


def test_invalid_literal_with_port_raises():
    with pytest.raises(ValueError):
        InetAddress("not an address", 80)


def test_is_reachable_with_listener():
    server = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    server.bind(("127.0.0.1", 0))
    server.listen(1)
    port = server.getsockname()[1]
    try:
        assert InetAddress("127.0.0.1", port).is_reachable(2000) is True
    finally:
        server.close()


def test_is_not_reachable_without_listener():
    probe = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    probe.bind(("127.0.0.1", 0))
    port = probe.getsockname()[1]
    probe.close()
    assert InetAddress("127.0.0.1", port).is_reachable(500) is False


def test_socket_address_default():
    addr = InetSocketAddress()
    assert addr.address == "0.0.0.0"
    assert addr.port == 0


def test_socket_address_resolves_literal():
    addr = InetSocketAddress("127.0.0.1", 8080)
    assert addr.address == "127.0.0.1"
    assert addr.port == 8080
    assert str(addr) == "127.0.0.1:8080"


def test_from_string_round_trip():
    addr = InetSocketAddress.from_string("127.0.0.1:8080")
    assert addr == InetSocketAddress("127.0.0.1", 8080)
    assert InetSocketAddress.from_string(str(addr)) == addr
    assert hash(addr) == hash(InetSocketAddress("127.0.0.1", 8080))


def test_socket_addresses_differ_by_port():
    assert InetSocketAddress("127.0.0.1", 1) != InetSocketAddress("127.0.0.1", 2)


@pytest.mark.parametrize("text", ["127.0.0.1", "127.0.0.1:abc", "127.0.0.1:70000"])
def test_from_string_rejects_bad_input(text):
    with pytest.raises(ValueError):
        InetSocketAddress.from_string(text)