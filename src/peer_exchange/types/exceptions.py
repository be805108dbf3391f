"""Exception hierarchy for peer exchange types."""

from __future__ import annotations


class PeerExchangeError(Exception):
    """
    Base exception for all peer exchange errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class FormatError(PeerExchangeError):
    """
    Raised when wire bytes cannot be decoded.

    Attributes:
        type_name: The type being decoded.
        detail: Description of what went wrong.
        offset: The byte offset where the error occurred (if known).
    """

    def __init__(
        self,
        type_name: str,
        detail: str,
        *,
        offset: int | None = None,
    ) -> None:
        self.type_name = type_name
        self.detail = detail
        self.offset = offset

        msg = f"Failed to decode {type_name}: {detail}"
        if offset is not None:
            msg = f"{msg} (at byte offset {offset})"

        super().__init__(msg)


class PeerCapabilityError(PeerExchangeError, TypeError):
    """
    Raised when a value without the peer record capability reaches a peer set.

    This is a programming error, so it also derives from `TypeError`.

    Attributes:
        expected_type: The capability that was expected.
        actual_type: The actual type of the value.
    """

    def __init__(self, expected_type: str, actual_type: str) -> None:
        self.expected_type = expected_type
        self.actual_type = actual_type
        super().__init__(f"Expected {expected_type}, got {actual_type}")


class RegistryError(PeerExchangeError):
    """Raised when a payload registry is misused (bad tag, duplicate or unknown codec)."""
