"""
Peer Sets
=========

An ordered, deduplicated collection of peer records exchanged between nodes.

Membership is keyed by each record's identity key rather than by object
identity, so two separately constructed records for the same endpoint are
interchangeable. The first record added for a key keeps both its position and
its stored instance; adding an equal record later is a no-op.

Wire Format
-----------

A serialized set is the plain concatenation of its members' record encodings
in iteration order::

    record_0 || record_1 || ... || record_n-1

There is no header, length prefix or delimiter. The receiver must know the
address family of the channel to pick the record width (6 or 18 bytes).
Encoding a set with mixed families is allowed (each record uses its native
width) but such a buffer cannot be decoded back as one set.

Paging
------

`slice()` takes an ordered sub-range so a large set can be spread across
several size-limited messages.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable, Iterator, MutableSet
from itertools import islice
from typing import Any, ClassVar

from typing_extensions import Self

from ..types import FormatError, PeerCapabilityError
from .record import AddressFamily, PeerLike, PeerRecord, record_length

logger = logging.getLogger(__name__)


class PeerSet(MutableSet[PeerLike]):
    """
    Insertion-ordered set of peers, deduplicated by identity key.

    Not safe for concurrent mutation; callers sharing a set must serialize access.
    """

    RECORD_TYPE: ClassVar[type[PeerRecord]] = PeerRecord
    """Record type used when decoding wire bytes."""

    def __init__(self, peers: Iterable[PeerLike] | None = None) -> None:
        """
        Create a set, optionally seeded from an iterable of records.

        Records are added in iteration order, so the first of any duplicates wins.
        """
        self._peers: dict[Hashable, PeerLike] = {}
        if peers is not None:
            for peer in peers:
                self.add(peer)

    @classmethod
    def decode_bytes(cls, data: bytes, family: AddressFamily | None = None) -> Self:
        """
        Decode a concatenation of fixed-width records.

        Args:
            data: Wire bytes, possibly empty.
            family: Address family of the channel. IPv6 selects 18-byte records;
                anything else (including None) selects 6-byte IPv4 records.

        Returns:
            A new set with records in buffer order. Later duplicates of a key
            already seen are dropped.

        Raises:
            FormatError: If the length is not a multiple of the record width.
        """
        width = record_length(family)
        if len(data) % width != 0:
            raise FormatError(
                cls.__name__,
                f"length {len(data)} is not a multiple of the {width}-byte record width",
            )

        peer_set = cls()
        for offset in range(0, len(data), width):
            record = cls.RECORD_TYPE.decode_bytes(data[offset : offset + width])
            if record in peer_set:
                logger.debug("Dropping duplicate peer %s at byte offset %d", record, offset)
                continue
            peer_set.add(record)
        return peer_set

    def encode_bytes(self) -> bytes:
        """Concatenate member encodings in iteration order."""
        return b"".join(peer.encode_bytes() for peer in self._peers.values())

    def __bytes__(self) -> bytes:
        return self.encode_bytes()

    @staticmethod
    def _key_of(value: Any) -> Hashable:
        """Return the identity key of `value`, rejecting non-peer values."""
        if not isinstance(value, PeerLike):
            raise PeerCapabilityError("a peer record", type(value).__name__)
        return value.key

    def add(self, value: PeerLike) -> Self:  # type: ignore[override]
        """
        Insert `value` unless a record with the same key is already present.

        Returns:
            This set, for chaining.

        Raises:
            PeerCapabilityError: If `value` is not peer-like.
        """
        self._peers.setdefault(self._key_of(value), value)
        return self

    def delete(self, value: PeerLike) -> bool:
        """
        Remove the record sharing `value`'s key.

        Returns:
            Whether a record was removed.

        Raises:
            PeerCapabilityError: If `value` is not peer-like.
        """
        key = self._key_of(value)
        if key not in self._peers:
            return False
        del self._peers[key]
        return True

    def discard(self, value: PeerLike) -> None:
        """Remove the record sharing `value`'s key, if present."""
        self.delete(value)

    def has(self, value: PeerLike) -> bool:
        """
        Check membership by identity key.

        Raises:
            PeerCapabilityError: If `value` is not peer-like.
        """
        return self._key_of(value) in self._peers

    def get(self, value: PeerLike, default: PeerLike | None = None) -> PeerLike | None:
        """
        Look up the stored record sharing `value`'s key.

        The stored instance is returned, not `value` itself.

        Raises:
            PeerCapabilityError: If `value` is not peer-like.
        """
        return self._peers.get(self._key_of(value), default)

    def clear(self) -> None:
        """Remove every record."""
        self._peers.clear()

    @property
    def size(self) -> int:
        """Number of records in the set."""
        return len(self._peers)

    def slice(self, start: int = 0, end: int | None = None) -> Self:
        """
        Take an ordered sub-range as a new, independent set.

        Indices follow Python sequence slicing over the iteration order:
        negative values count back from the end, `end` is exclusive and
        defaults to the end of the set, and out-of-range values are clamped.
        `slice(-10)` on a 5-record set returns all 5 records and `slice(10)`
        returns an empty set.

        The result shares record instances with this set but not membership,
        so mutating one does not affect the other.
        """
        window = range(len(self._peers))[start:end]
        return type(self)(islice(self._peers.values(), window.start, window.stop))

    def __contains__(self, value: object) -> bool:
        """Membership test for `in`; values that are not peer-like are never members."""
        return isinstance(value, PeerLike) and value.key in self._peers

    def __iter__(self) -> Iterator[PeerLike]:
        return iter(self._peers.values())

    def __len__(self) -> int:
        return len(self._peers)

    def __repr__(self) -> str:
        """String representation listing members in order."""
        return f"{type(self).__name__}([{', '.join(str(peer) for peer in self)}])"
