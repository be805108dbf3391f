"""Registration of peer exchange payloads with a transport codec table."""

from __future__ import annotations

from ..config import PEER_SET_PAYLOAD_TYPE
from ..peer.set import PeerSet
from ..types import RegistryError
from .registry import PayloadCodec, PayloadRegistry


def register_peer_set(
    registry: PayloadRegistry, peer_set_type: type[PeerSet] = PeerSet
) -> PayloadCodec:
    """
    Register peer sets under `PEER_SET_PAYLOAD_TYPE`.

    The decoder reads the registry's address family on every call, so an IPv6
    channel decodes 18-byte records and any other channel 6-byte records.

    Raises:
        RegistryError: If `registry` is not a payload registry, or the tag is taken.
    """
    if not isinstance(registry, PayloadRegistry):
        raise RegistryError(f"Expected PayloadRegistry, got {type(registry).__name__}")

    return registry.register(
        PEER_SET_PAYLOAD_TYPE,
        peer_set_type,
        lambda peer_set: peer_set.encode_bytes(),
        lambda data: peer_set_type.decode_bytes(data, registry.family),
    )
