"""Addresses of the local network interfaces."""

from __future__ import annotations

import socket
from collections.abc import Iterable
from dataclasses import dataclass

import psutil

__all__ = ["InterfaceAddress", "select_addresses", "address_key", "detect_addresses"]

MODULE_NAME = "Local IP"
LOOPBACK_INTERFACE = "lo"


@dataclass(frozen=True)
class InterfaceAddress:
    """One IPv4 or IPv6 address of a network interface."""

    interface: str
    family: int
    address: str


def select_addresses(
    addresses: Iterable[InterfaceAddress],
    show_loop: bool = False,
    show_ipv4: bool = True,
    show_ipv6: bool = False,
) -> list[InterfaceAddress]:
    """Keep the addresses that should be shown, in their original order."""
    selected = []
    for address in addresses:
        if address.interface == LOOPBACK_INTERFACE and not show_loop:
            continue
        if address.family == socket.AF_INET and show_ipv4:
            selected.append(address)
        elif address.family == socket.AF_INET6 and show_ipv6:
            selected.append(address)
    return selected


def address_key(interface: str) -> str:
    """The key shown for an interface's address."""
    return f"{MODULE_NAME} ({interface})"


def detect_addresses() -> list[InterfaceAddress]:
    """Every IPv4 and IPv6 address of every interface of this machine."""
    result = []
    for interface, addrs in psutil.net_if_addrs().items():
        for addr in addrs:
            if addr.family in (socket.AF_INET, socket.AF_INET6):
                result.append(InterfaceAddress(interface, addr.family, addr.address.split("%", 1)[0]))
    return result