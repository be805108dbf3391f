"""
Payload Registry
================

A transport keeps a table of payload codecs keyed by a small type tag. When
sending, it looks up the codec for the payload's Python type and prefixes the
encoded bytes with the tag; when receiving, it uses the tag to find the decoder.

The registry also knows the address family of its channel, so decoders for
address-carrying payloads (such as peer sets) can pick the right record width.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Optional

from ..config import MAX_PAYLOAD_TYPE
from ..peer.record import AddressFamily
from ..types import RegistryError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PayloadCodec:
    """Encode and decode functions for one payload type."""

    type_id: int
    """Wire tag identifying the payload kind."""

    payload_type: type
    """Python type the encoder accepts and the decoder produces."""

    encode: Callable[[Any], bytes]
    """Serialize a payload instance."""

    decode: Callable[[bytes], Any]
    """Deserialize wire bytes into a payload instance."""


class PayloadRegistry:
    """
    Codec table for one transport channel.

    Tags must fall in 0..MAX_PAYLOAD_TYPE and each tag and payload type may be
    registered once.
    """

    def __init__(self, family: AddressFamily = AddressFamily.IPV4) -> None:
        """Initialize an empty registry for a channel of the given family."""
        self.family = family
        self._by_id: dict[int, PayloadCodec] = {}
        self._by_type: dict[type, PayloadCodec] = {}

    @classmethod
    def for_transport(cls, transport_type: str) -> PayloadRegistry:
        """Create a registry whose family follows the socket type ("udp4" or "udp6")."""
        return cls(AddressFamily.from_transport(transport_type))

    def register(
        self,
        type_id: int,
        payload_type: type,
        encode: Callable[[Any], bytes],
        decode: Callable[[bytes], Any],
    ) -> PayloadCodec:
        """
        Register a codec for `payload_type` under `type_id`.

        Raises:
            RegistryError: If the tag is out of range or the tag or type is taken.
        """
        if not 0 <= type_id <= MAX_PAYLOAD_TYPE:
            raise RegistryError(f"Payload type {type_id} outside 0..{MAX_PAYLOAD_TYPE}")
        if type_id in self._by_id:
            raise RegistryError(f"Payload type {type_id} already registered")
        if payload_type in self._by_type:
            raise RegistryError(f"{payload_type.__name__} already registered")

        codec = PayloadCodec(type_id, payload_type, encode, decode)
        self._by_id[type_id] = codec
        self._by_type[payload_type] = codec
        logger.info("Registered %s payload codec as type %d", payload_type.__name__, type_id)
        return codec

    def get_codec(self, type_id: int) -> Optional[PayloadCodec]:
        """Get the codec registered under a tag."""
        return self._by_id.get(type_id)

    def codec_for(self, payload: Any) -> Optional[PayloadCodec]:
        """Get the codec for a payload, matching its class or the nearest registered base."""
        for klass in type(payload).__mro__:
            codec = self._by_type.get(klass)
            if codec is not None:
                return codec
        return None

    def encode(self, payload: Any) -> tuple[int, bytes]:
        """
        Encode a payload.

        Returns:
            The payload's tag and its encoded bytes.

        Raises:
            RegistryError: If no codec handles the payload's type.
        """
        codec = self.codec_for(payload)
        if codec is None:
            raise RegistryError(f"No codec registered for {type(payload).__name__}")
        return codec.type_id, codec.encode(payload)

    def decode(self, type_id: int, data: bytes) -> Any:
        """
        Decode wire bytes tagged with `type_id`.

        Raises:
            RegistryError: If the tag is unknown.
        """
        codec = self.get_codec(type_id)
        if codec is None:
            raise RegistryError(f"Unknown payload type {type_id}")
        return codec.decode(data)
