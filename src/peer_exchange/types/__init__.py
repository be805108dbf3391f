"""Reusable type definitions for peer exchange."""

from .base import StrictBaseModel
from .exceptions import (
    FormatError,
    PeerCapabilityError,
    PeerExchangeError,
    RegistryError,
)
from .uint import BaseUint, Port, Uint16

__all__ = [
    # Core types
    "BaseUint",
    "Uint16",
    "Port",
    "StrictBaseModel",
    # Exceptions
    "PeerExchangeError",
    "FormatError",
    "PeerCapabilityError",
    "RegistryError",
]
