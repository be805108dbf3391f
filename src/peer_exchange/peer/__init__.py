"""
Peer Records and Sets
=====================

Data structures for exchanging peer endpoints between nodes.

- `PeerRecord`: one endpoint (port and IPv4 or IPv6 address) with a
  fixed-width wire encoding.
- `PeerSet`: an insertion-ordered collection of records, deduplicated by
  endpoint, with whole-set encoding and paging by `slice()`.
"""

from .record import AddressFamily, IPAddress, PeerLike, PeerRecord, record_length
from .set import PeerSet

__all__ = [
    "AddressFamily",
    "IPAddress",
    "PeerLike",
    "PeerRecord",
    "PeerSet",
    "record_length",
]
