"""
Type definitions for endpoint construction.

This module defines the bounded buffer, the verb enum and the exception
hierarchy used throughout the endpoint package.
"""

from enum import Enum
from typing import Optional


class EndpointVerb(str, Enum):
    """Final path segment of the pod subresource."""

    ATTACH = "attach"
    EXEC = "exec"

    @classmethod
    def for_command(cls, command: Optional[str]) -> "EndpointVerb":
        """Select exec when a command was supplied, attach otherwise."""
        return cls.EXEC if command is not None else cls.ATTACH


class EndpointError(Exception):
    """Base exception for endpoint construction errors."""

    pass


class BufferTooSmallError(EndpointError):
    """Raised when a write would not fit in its target capacity."""

    def __init__(self, required: int, capacity: int, what: str = "buffer"):
        super().__init__(
            f"{what} requires {required} bytes but capacity is {capacity}"
        )
        self.required = required
        self.capacity = capacity
        self.what = what


class MalformedInputError(EndpointError):
    """Raised when input is not terminated or contains an embedded NUL."""

    pass


class EndpointBuffer:
    """
    Bounded, length-carrying buffer for a URI under construction.

    Capacity is counted in bytes and includes room for a terminator, so a
    buffer of capacity N holds at most N - 1 bytes of content. Appends are
    all-or-nothing: a failed append leaves the buffer untouched.

    Attributes:
        capacity: Usable bytes including the terminator
        name: Label used in error messages
    """

    def __init__(self, capacity: int, initial: str = "", name: str = "buffer"):
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self.name = name
        self._parts: list[str] = []
        self._length = 0
        self._has_query = False
        if initial:
            self.append(initial)

    @classmethod
    def from_raw(cls, data: bytes, capacity: int) -> "EndpointBuffer":
        """
        Adopt a NUL-terminated byte buffer.

        Args:
            data: Raw bytes holding ASCII content followed by a NUL
            capacity: Declared capacity of the raw buffer

        Raises:
            MalformedInputError: If no NUL occurs within capacity bytes
        """
        end = data.find(b"\0", 0, capacity)
        if end < 0:
            raise MalformedInputError(
                f"no terminator within declared capacity of {capacity} bytes"
            )
        try:
            content = data[:end].decode("ascii")
        except UnicodeDecodeError as e:
            raise MalformedInputError(f"buffer holds non-ASCII content: {e}") from e
        return cls(capacity, content)

    def __len__(self) -> int:
        return self._length

    def __str__(self) -> str:
        return self.getvalue()

    def __repr__(self) -> str:
        return f"EndpointBuffer({self.getvalue()!r}, capacity={self.capacity}, name={self.name!r})"

    @property
    def has_query(self) -> bool:
        """Whether a '?' has been written to the buffer."""
        return self._has_query

    @property
    def remaining(self) -> int:
        """Bytes still available, including the terminator slot."""
        return self.capacity - self._length

    def fits(self, text: str) -> bool:
        """Check whether text plus the terminator fits the remaining space."""
        return self._length + len(text) + 1 <= self.capacity

    def append(self, text: str) -> None:
        """
        Append ASCII text to the buffer.

        Raises:
            BufferTooSmallError: If text plus the terminator does not fit
            MalformedInputError: If text is not ASCII
        """
        if not text.isascii():
            raise MalformedInputError(f"buffer content must be ASCII: {text!r}")
        if not self.fits(text):
            raise BufferTooSmallError(
                self._length + len(text) + 1, self.capacity, what=self.name
            )
        self._parts.append(text)
        self._length += len(text)
        if "?" in text:
            self._has_query = True

    def getvalue(self) -> str:
        """Return the buffer content."""
        if len(self._parts) > 1:
            self._parts = ["".join(self._parts)]
        return self._parts[0] if self._parts else ""

    def to_bytes(self) -> bytes:
        """Return the content as NUL-terminated bytes."""
        return self.getvalue().encode("ascii") + b"\0"
