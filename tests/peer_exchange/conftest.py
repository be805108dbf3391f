"""
Shared pytest fixtures for peer_exchange tests.

Import these fixtures automatically via pytest discovery.
"""

from __future__ import annotations

import pytest

from peer_exchange import PeerRecord


@pytest.fixture
def loopback_peers() -> list[PeerRecord]:
    """Five IPv4 loopback peers on ports 101-105, in port order."""
    return [PeerRecord(port=port, address="127.0.0.1") for port in range(101, 106)]


@pytest.fixture
def ipv6_peers() -> list[PeerRecord]:
    """Two distinct IPv6 peers written in different textual forms."""
    return [
        PeerRecord(port=123, address="2001:db8:85a3::8a2e:370:7334"),
        PeerRecord(port=124, address="2001:0db8:85a3:0000:0000:8a2e:0371:7334"),
    ]
