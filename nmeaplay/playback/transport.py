"""UDP broadcast transport for replayed sentences.

Each log line is sent as one UDP datagram to the broadcast address of the
selected interface, so every chart plotter or instrument app on that subnet
listening on the port (10110 by convention) receives the replayed feed.

Interface discovery uses ``psutil.net_if_addrs()``. The first IPv4 entry of
an interface is used; when the platform does not report a broadcast address
for it, one is derived from the address and netmask.
"""

import ipaddress
import logging
import socket
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import TracebackType
from typing import Any

import psutil

from nmeaplay.playback.errors import InterfaceNotFoundError, TransportError

__all__ = [
    "DEFAULT_UDP_PORT",
    "BroadcastTarget",
    "BroadcastTransport",
    "InterfaceAddress",
    "list_interfaces",
    "resolve_broadcast_target",
]

logger = logging.getLogger(__name__)

DEFAULT_UDP_PORT = 10110

# Bind to any local address, ephemeral port
_BIND_ADDRESS = ("0.0.0.0", 0)


@dataclass(frozen=True)
class InterfaceAddress:
    """An interface's first IPv4 address and its broadcast address."""

    name: str
    address: str
    broadcast: str


@dataclass(frozen=True)
class BroadcastTarget:
    """Destination of every datagram in one playback run.

    Attributes:
        interface: Interface name the target was resolved from.
        address: Local IPv4 address of that interface.
        broadcast: Subnet broadcast address datagrams are sent to.
        port: Destination UDP port.
    """

    interface: str
    address: str
    broadcast: str
    port: int

    @property
    def destination(self) -> tuple[str, int]:
        return (self.broadcast, self.port)


# --- interface discovery -----------------------------------------------------


def _ipv4_entries(addresses: Iterable[Any]) -> list[Any]:
    return [entry for entry in addresses if entry.family == socket.AF_INET]


def _broadcast_of(entry: Any) -> str | None:
    """Return the broadcast address of a psutil ``snicaddr`` IPv4 entry."""
    if entry.broadcast:
        return str(entry.broadcast)
    if not entry.netmask:
        return None
    network = ipaddress.IPv4Network(f"{entry.address}/{entry.netmask}", strict=False)
    return str(network.broadcast_address)


def list_interfaces() -> list[InterfaceAddress]:
    """List interfaces that have an IPv4 address with a broadcast address.

    Intended for populating an interface picker; the entries are in the
    order psutil reports them.
    """
    result = []
    for name, addresses in psutil.net_if_addrs().items():
        entries = _ipv4_entries(addresses)
        if not entries:
            continue
        broadcast = _broadcast_of(entries[0])
        if broadcast is None:
            continue
        result.append(InterfaceAddress(name=name, address=entries[0].address, broadcast=broadcast))
    return result


def _find_entry(interfaces: Mapping[str, Any], identifier: str) -> tuple[str, Any] | None:
    """Find the IPv4 entry for an interface name or one of its addresses."""
    addresses = interfaces.get(identifier)
    if addresses is not None:
        entries = _ipv4_entries(addresses)
        return (identifier, entries[0]) if entries else None

    for name, addresses in interfaces.items():
        for entry in _ipv4_entries(addresses):
            if entry.address == identifier:
                return name, entry
    return None


def resolve_broadcast_target(interface: str, port: int = DEFAULT_UDP_PORT) -> BroadcastTarget:
    """Resolve an interface into the broadcast destination for a run.

    Args:
        interface: Interface name (e.g. ``"eth0"``) or one of its local
            IPv4 addresses.
        port: Destination UDP port.

    Returns:
        BroadcastTarget for the interface's first IPv4 address, or for the
        given address when *interface* is an address.

    Raises:
        ValueError: If *port* is outside 1-65535.
        InterfaceNotFoundError: If no interface matches, or the match has no
            IPv4 address with a known broadcast address.
    """
    if not 0 < port < 65536:
        raise ValueError(f"UDP port must be in 1-65535, got {port}")

    identifier = interface.strip()
    found = _find_entry(psutil.net_if_addrs(), identifier)
    if found is None:
        raise InterfaceNotFoundError(f"Interface '{identifier}' not found")

    name, entry = found
    broadcast = _broadcast_of(entry)
    if broadcast is None:
        raise InterfaceNotFoundError(f"Interface '{name}' has no broadcast address")

    target = BroadcastTarget(interface=name, address=entry.address, broadcast=broadcast, port=port)
    logger.info("Broadcasting on %s (%s) to %s:%d", name, entry.address, broadcast, port)
    return target


# --- socket ------------------------------------------------------------------


class BroadcastTransport:
    """Context manager owning one broadcast-enabled UDP socket.

    Usage::

        with BroadcastTransport(target) as transport:
            transport.send(b"$SDDPT,10.38,0,*6F")

    Args:
        target: Resolved destination for every datagram.
    """

    def __init__(self, target: BroadcastTarget) -> None:
        """Store the target; the socket is opened in ``__enter__``."""
        self._target = target
        self._sock: socket.socket | None = None

    @property
    def target(self) -> BroadcastTarget:
        return self._target

    def __enter__(self) -> "BroadcastTransport":
        """Open the socket, enable broadcast and bind to an ephemeral port.

        Raises:
            TransportError: If any socket setup step fails.
        """
        try:
            sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        except OSError as e:
            raise TransportError(f"Cannot create UDP socket: {e}") from e
        try:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)
            sock.bind(_BIND_ADDRESS)
        except OSError as e:
            sock.close()
            raise TransportError(f"Cannot configure broadcast socket: {e}") from e
        self._sock = sock
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Close the socket."""
        if self._sock is not None:
            self._sock.close()
            self._sock = None

    def send(self, payload: bytes) -> None:
        """Send one raw sentence, without a line terminator.

        Raises:
            RuntimeError: If called outside a ``with`` block.
            OSError: If the datagram cannot be sent.
        """
        if self._sock is None:
            raise RuntimeError("BroadcastTransport must be used as a context manager.")
        self._sock.sendto(payload, self._target.destination)
