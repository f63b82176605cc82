import ipaddress
import socket

from infofetch.local_ip import InterfaceAddress, address_key, detect_addresses, select_addresses

LOOP4 = InterfaceAddress("lo", socket.AF_INET, "127.0.0.1")
LOOP6 = InterfaceAddress("lo", socket.AF_INET6, "::1")
ETH4 = InterfaceAddress("eth0", socket.AF_INET, "192.0.2.10")
ETH6 = InterfaceAddress("eth0", socket.AF_INET6, "2001:db8::10")
ALL = [LOOP4, LOOP6, ETH4, ETH6]


def test_default_selection_is_ipv4_without_loopback():
    assert select_addresses(ALL) == [ETH4]


def test_show_loop_and_ipv6():
    assert select_addresses(ALL, show_loop=True, show_ipv4=True, show_ipv6=True) == ALL


def test_ipv6_only():
    assert select_addresses(ALL, show_ipv4=False, show_ipv6=True) == [ETH6]


def test_nothing_selected():
    assert select_addresses(ALL, show_ipv4=False, show_ipv6=False) == []


def test_address_key_contains_interface():
    assert address_key("wlan0") == "Local IP (wlan0)"


def test_detect_addresses_are_valid():
    addresses = detect_addresses()
    assert all(a.family in (socket.AF_INET, socket.AF_INET6) for a in addresses)
    for address in addresses:
        parsed = ipaddress.ip_address(address.address)
        assert parsed.version == (4 if address.family == socket.AF_INET else 6)