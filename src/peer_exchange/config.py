"""Peer Exchange Wire Constants."""

from typing_extensions import Final

PORT_LENGTH: Final = 2
"""Encoded port width in bytes (big-endian)."""

IPV4_RECORD_LENGTH: Final = 4 + PORT_LENGTH
"""Wire width of an IPv4 peer record: 4 address bytes followed by the port."""

IPV6_RECORD_LENGTH: Final = 16 + PORT_LENGTH
"""Wire width of an IPv6 peer record: 16 address bytes followed by the port."""

PEER_SET_PAYLOAD_TYPE: Final = 102
"""Payload type tag under which peer sets are registered with a transport."""

MAX_PAYLOAD_TYPE: Final = 127
"""Largest payload type tag a transport codec table accepts."""
