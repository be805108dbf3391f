"""
Peer Records
============

A peer record names one network endpoint: an IP address and a port.

Wire format::

    IPv4 record (6 bytes):   address (4 bytes)  || port (2 bytes)
    IPv6 record (18 bytes):  address (16 bytes) || port (2 bytes)

Both fields are in network byte order. There is no tag byte, so the decoder
must know the address family out of band (or infer it from the record width).

Identity
--------

Two records describe the same endpoint when their addresses and ports are
equal. Textual forms do not matter: "2001:db8::1" and
"2001:0db8:0000:0000:0000:0000:0000:0001" parse to the same address. The
identity key is therefore derived from the packed address bytes and the port,
never from the strings a caller happened to pass in.
"""

from __future__ import annotations

import ipaddress
from collections.abc import Hashable
from enum import IntEnum
from typing import Any, Protocol, runtime_checkable

from pydantic import field_validator
from typing_extensions import Self

from ..config import IPV4_RECORD_LENGTH, IPV6_RECORD_LENGTH, PORT_LENGTH
from ..types import FormatError, Port, StrictBaseModel

IPAddress = ipaddress.IPv4Address | ipaddress.IPv6Address
"""Either IP address version."""


class AddressFamily(IntEnum):
    """
    IP address family of a peer record.

    Values match `ipaddress` versions, so `AddressFamily(address.version)` works.
    """

    IPV4 = 4
    """32-bit addresses, 6-byte records."""

    IPV6 = 6
    """128-bit addresses, 18-byte records."""

    @classmethod
    def from_transport(cls, transport_type: str) -> AddressFamily:
        """
        Map a transport socket type to the family of peers it carries.

        Only "udp6" sockets carry IPv6 peers. Everything else is treated as IPv4.
        """
        return cls.IPV6 if transport_type == "udp6" else cls.IPV4


def record_length(family: Any) -> int:
    """
    Wire width of one record for the given family.

    IPv6 selects 18-byte records. Any other value, including None, selects
    the 6-byte IPv4 default.
    """
    return IPV6_RECORD_LENGTH if family == AddressFamily.IPV6 else IPV4_RECORD_LENGTH


@runtime_checkable
class PeerLike(Protocol):
    """
    Capability a value needs to be stored in a peer set.

    The key deduplicates entries; the encoding is what goes on the wire.
    """

    @property
    def key(self) -> Hashable:
        """Identity key derived from the endpoint."""
        ...

    def encode_bytes(self) -> bytes:
        """Fixed-width wire encoding."""
        ...


class PeerRecord(StrictBaseModel):
    """An immutable network endpoint (port and IPv4 or IPv6 address)."""

    port: Port
    """Transport port, encoded as 2 big-endian bytes."""

    address: IPAddress
    """IP address, encoded as 4 or 16 bytes in network byte order."""

    @field_validator("address", mode="before")
    @classmethod
    def _coerce_address(cls, value: Any) -> IPAddress:
        """Normalize textual or packed addresses to an `ipaddress` value."""
        if isinstance(value, (ipaddress.IPv4Address, ipaddress.IPv6Address)):
            return value
        if isinstance(value, (str, bytes, bytearray)):
            # ip_address() accepts packed bytes only as an immutable `bytes`.
            raw = bytes(value) if isinstance(value, bytearray) else value
            return ipaddress.ip_address(raw)
        raise ValueError(f"Cannot interpret {type(value).__name__} as an IP address")

    @property
    def family(self) -> AddressFamily:
        """Address family, which determines the record width."""
        return AddressFamily(self.address.version)

    @property
    def key(self) -> bytes:
        """
        Identity key: packed address followed by the big-endian port.

        The key has the same bytes as the wire encoding. An IPv4 key is 6 bytes
        and an IPv6 key 18, so keys of different families never collide.
        """
        return self.encode_bytes()

    def encode_bytes(self) -> bytes:
        """Serialize to the fixed-width wire form."""
        return self.address.packed + self.port.to_bytes(PORT_LENGTH)

    @classmethod
    def decode_bytes(cls, data: bytes) -> Self:
        """
        Parse one record from its wire form.

        The family is inferred from the width: 6 bytes is IPv4, 18 bytes IPv6.

        Raises:
            FormatError: If `data` is neither 6 nor 18 bytes long.
        """
        if len(data) not in (IPV4_RECORD_LENGTH, IPV6_RECORD_LENGTH):
            raise FormatError(
                cls.__name__,
                f"expected {IPV4_RECORD_LENGTH} or {IPV6_RECORD_LENGTH} bytes, got {len(data)}",
            )
        split = len(data) - PORT_LENGTH
        return cls(
            port=Port.from_bytes_be(bytes(data[split:])),
            address=bytes(data[:split]),
        )

    def __eq__(self, other: object) -> bool:
        """Records are equal when they describe the same endpoint."""
        if not isinstance(other, PeerRecord):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        """Hash by identity key, consistent with equality."""
        return hash(self.key)

    def __str__(self) -> str:
        """Render as `host:port`, bracketing IPv6 hosts."""
        if self.family == AddressFamily.IPV6:
            return f"[{self.address}]:{int(self.port)}"
        return f"{self.address}:{int(self.port)}"
