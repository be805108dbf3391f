"""Tests for peer records and their wire encoding."""

from __future__ import annotations

import ipaddress

import pytest
from pydantic import ValidationError

from peer_exchange import AddressFamily, FormatError, PeerRecord
from peer_exchange.peer import PeerLike, record_length

IPV6_LONG = "2001:0db8:85a3:0000:0000:8a2e:0370:7334"
IPV6_SHORT = "2001:db8:85a3::8a2e:370:7334"


class TestConstruction:
    """Address and port normalization."""

    def test_from_strings(self) -> None:
        """Textual addresses are parsed into ipaddress values."""
        peer = PeerRecord(port=8080, address="10.0.0.1")
        assert peer.address == ipaddress.IPv4Address("10.0.0.1")
        assert peer.port == 8080
        assert peer.family == AddressFamily.IPV4

    def test_from_packed_bytes(self) -> None:
        """Packed 4- and 16-byte addresses are accepted."""
        assert PeerRecord(port=1, address=b"\x7f\x00\x00\x01").address == ipaddress.ip_address(
            "127.0.0.1"
        )
        assert PeerRecord(port=1, address=bytearray(16)).family == AddressFamily.IPV6

    def test_from_ipaddress_instance(self) -> None:
        """ipaddress values pass through unchanged."""
        address = ipaddress.IPv6Address(IPV6_SHORT)
        assert PeerRecord(port=1, address=address).address == address

    @pytest.mark.parametrize("address", ["not-an-ip", "256.0.0.1", b"\x01\x02\x03", 42])
    def test_invalid_address(self, address: object) -> None:
        """Unparseable addresses are validation errors."""
        with pytest.raises(ValidationError):
            PeerRecord(port=1, address=address)

    @pytest.mark.parametrize("port", [-1, 65536, "80", 80.9])
    def test_invalid_port(self, port: object) -> None:
        """Ports outside 16 bits or not given as ints are validation errors."""
        with pytest.raises(ValidationError):
            PeerRecord(port=port, address="127.0.0.1")

    def test_immutable(self) -> None:
        """Records cannot be mutated."""
        peer = PeerRecord(port=1, address="127.0.0.1")
        with pytest.raises(ValidationError):
            peer.port = 2  # type: ignore[misc]

    def test_satisfies_peer_capability(self) -> None:
        """Records can be stored in peer sets."""
        assert isinstance(PeerRecord(port=1, address="127.0.0.1"), PeerLike)


class TestIdentity:
    """Identity keys and equality."""

    def test_textual_forms_share_key(self) -> None:
        """Compressed and expanded IPv6 notations produce the same key."""
        a = PeerRecord(port=15921, address=IPV6_SHORT)
        b = PeerRecord(port=15921, address=IPV6_LONG)
        assert a.key == b.key
        assert a == b
        assert hash(a) == hash(b)

    def test_port_changes_key(self) -> None:
        """Same address on another port is a different endpoint."""
        a = PeerRecord(port=12345, address="127.0.0.1")
        b = PeerRecord(port=8888, address="127.0.0.1")
        assert a.key != b.key
        assert a != b

    def test_key_matches_wire_bytes(self) -> None:
        """The key is the packed address followed by the port."""
        peer = PeerRecord(port=15921, address="83.54.192.20")
        assert peer.key == bytes.fromhex("5336c0143e31")

    def test_not_equal_to_other_types(self) -> None:
        """Comparison with unrelated objects is not equality."""
        assert PeerRecord(port=1, address="127.0.0.1") != ("127.0.0.1", 1)


class TestWireFormat:
    """Fixed-width encoding and decoding."""

    def test_ipv4_encoding(self) -> None:
        """IPv4 records are 4 address bytes then a big-endian port."""
        peer = PeerRecord(port=15921, address="83.54.192.20")
        assert peer.encode_bytes() == bytes.fromhex("5336c014") + b"\x3e\x31"

    def test_ipv6_encoding(self) -> None:
        """IPv6 records are 16 address bytes then a big-endian port."""
        peer = PeerRecord(port=15921, address=IPV6_LONG)
        address = bytes.fromhex("20010db885a3000000008a2e03707334")
        assert peer.encode_bytes() == address + b"\x3e\x31"
        assert len(peer.encode_bytes()) == 18

    @pytest.mark.parametrize(
        "data",
        [bytes.fromhex("7f0000010065"), bytes.fromhex("20010db885a3000000008a2e037073340065")],
        ids=["ipv4", "ipv6"],
    )
    def test_decode(self, data: bytes) -> None:
        """Decoding infers the family from the width."""
        peer = PeerRecord.decode_bytes(data)
        assert peer.port == 101
        assert peer.encode_bytes() == data

    @pytest.mark.parametrize("length", [0, 5, 7, 17, 19])
    def test_decode_bad_length(self, length: int) -> None:
        """Only 6- and 18-byte inputs are records."""
        with pytest.raises(FormatError, match="expected 6 or 18 bytes"):
            PeerRecord.decode_bytes(b"\x00" * length)

    def test_str(self) -> None:
        """Records render as host:port, with IPv6 hosts bracketed."""
        assert str(PeerRecord(port=80, address="10.0.0.1")) == "10.0.0.1:80"
        assert str(PeerRecord(port=80, address="::1")) == "[::1]:80"


class TestAddressFamily:
    """Family selection helpers."""

    @pytest.mark.parametrize(
        ("family", "expected"),
        [(AddressFamily.IPV4, 6), (AddressFamily.IPV6, 18), (None, 6), ("bogus", 6)],
    )
    def test_record_length(self, family: object, expected: int) -> None:
        """Only IPv6 selects the wide record."""
        assert record_length(family) == expected

    @pytest.mark.parametrize(
        ("transport", "expected"),
        [("udp6", AddressFamily.IPV6), ("udp4", AddressFamily.IPV4), ("tcp", AddressFamily.IPV4)],
    )
    def test_from_transport(self, transport: str, expected: AddressFamily) -> None:
        """Only udp6 sockets carry IPv6 peers."""
        assert AddressFamily.from_transport(transport) is expected
