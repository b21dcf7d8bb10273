"""Exception hierarchy for tlvframe.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from TlvError for easy catching of any tlvframe-specific error.
"""

from __future__ import annotations


class TlvError(Exception):
    """Base exception for all tlvframe errors."""

    pass


class EncodeError(TlvError):
    """Raised when encoding a frame fails.

    Examples:
        - Payload length does not fit in 64 bits
        - Model field value cannot be represented (e.g. int outside int64)
    """

    pass


class SinkWriteError(EncodeError):
    """Raised when the sink rejects or shortens a write.

    The sink may hold a partial frame afterwards and should be discarded.
    """

    def __init__(self, message: str, written: int | None = None, expected: int | None = None):
        super().__init__(message)
        self.written = written
        self.expected = expected


class DecodeError(TlvError):
    """Raised when decoding a frame fails.

    Examples:
        - Truncated header or payload
        - Malformed type byte
        - Caller buffer too small for the payload
    """

    pass


class EndOfStream(DecodeError, EOFError):
    """Raised when the source is exhausted before the type byte of a new frame.

    This is the clean end-of-stream signal: no bytes of a frame were consumed.
    """

    pass


class TruncatedFrameError(DecodeError):
    """Raised when the source ends in the middle of a frame."""

    def __init__(self, message: str, expected: int, received: int):
        super().__init__(message)
        self.expected = expected
        self.received = received


class InvalidFrameError(DecodeError):
    """Raised when a frame header cannot be accepted.

    Examples:
        - Length width greater than 8 bytes
        - Upper nibble other than 0xF (strict mode)
        - Non-minimal length width (canonical mode)
    """

    pass


class FrameTooLargeError(DecodeError):
    """Raised when a frame advertises more payload than the configured limit."""

    def __init__(self, message: str, size: int, limit: int):
        super().__init__(message)
        self.size = size
        self.limit = limit


class BufferTooSmallError(DecodeError):
    """Raised when the caller's buffer cannot hold the frame payload."""

    def __init__(self, message: str, size: int, capacity: int):
        super().__init__(message)
        self.size = size
        self.capacity = capacity


class SourceReadError(DecodeError):
    """Raised when the underlying source fails or cannot deliver data."""

    pass


class FramingError(TlvError):
    """Raised when in-memory framing operations fail.

    Examples:
        - Trailing bytes after the frame
        - Truncated or malformed frame in a bytes buffer
    """

    pass


class SchemaError(TlvError):
    """Raised when a model schema cannot be serialized.

    Examples:
        - Unsupported field annotation
        - Complex Union types
    """

    pass
