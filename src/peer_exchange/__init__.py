"""Peer endpoint sets with a compact binary encoding for peer exchange."""

from .codec import PayloadCodec, PayloadRegistry, register_peer_set
from .peer import AddressFamily, PeerLike, PeerRecord, PeerSet
from .types import FormatError, PeerCapabilityError, PeerExchangeError, RegistryError

__all__ = [
    "AddressFamily",
    "PeerLike",
    "PeerRecord",
    "PeerSet",
    "PayloadCodec",
    "PayloadRegistry",
    "register_peer_set",
    # Exceptions
    "PeerExchangeError",
    "FormatError",
    "PeerCapabilityError",
    "RegistryError",
]
