"""
Payload Codecs
==============

Plugs peer exchange payloads into a transport's codec table.

A transport tags every payload with a small integer and dispatches encoding
and decoding through a registry. Peer sets register under a fixed tag; the
registry's address family decides how wide each decoded record is.
"""

from .payloads import register_peer_set
from .registry import PayloadCodec, PayloadRegistry

__all__ = [
    "PayloadCodec",
    "PayloadRegistry",
    "register_peer_set",
]
