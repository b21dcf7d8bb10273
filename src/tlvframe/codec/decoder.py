"""Frame decoder.

This module reads frames back from a byte source. Three entry points share
one header parser:

- peek_size(): consume the header, return the payload size
- read_bytes(): consume a whole frame, return the payload
- read_into(): consume the header, then read at least the payload size into
  a caller buffer

End-of-stream before the type byte raises EndOfStream; end-of-stream anywhere
later in the frame raises TruncatedFrameError.
"""

from __future__ import annotations

import logging
import struct
from io import BytesIO
from typing import Iterator, Optional

from ..config import DEFAULT_CONFIG, CodecConfig
from ..exceptions import (
    BufferTooSmallError,
    DecodeError,
    EndOfStream,
    FrameTooLargeError,
    InvalidFrameError,
    TruncatedFrameError,
)
from ..streams import Source, read_at_least, read_exact
from .header import MAX_WIDTH, TYPE_MARKER, length_width, split_type_byte, unpack_length

logger = logging.getLogger(__name__)


def _check_header(width: int, size: int, config: CodecConfig) -> None:
    if config.canonical_width and width != length_width(size):
        raise InvalidFrameError(
            f"Non-canonical length width {width} for payload size {size} "
            f"(expected {length_width(size)})"
        )
    if config.max_payload_size is not None and size > config.max_payload_size:
        raise FrameTooLargeError(
            f"Frame payload of {size} bytes exceeds limit of {config.max_payload_size} bytes",
            size=size,
            limit=config.max_payload_size,
        )


def peek_size(source: Source, config: Optional[CodecConfig] = None) -> int:
    """Consume a frame header and return the payload size.

    The source is left positioned at the first payload byte.

    Args:
        source: Byte source
        config: Header checks to apply (lenient by default)

    Returns:
        Payload size in bytes

    Raises:
        EndOfStream: If the source is exhausted before the type byte
        TruncatedFrameError: If the source ends inside the length field
        InvalidFrameError: If the width exceeds 8, or a strict check fails
        FrameTooLargeError: If the size exceeds config.max_payload_size
        SourceReadError: If the source fails
    """
    config = config or DEFAULT_CONFIG

    head = read_exact(source, 1)
    if not head:
        raise EndOfStream("End of stream before frame type byte")

    marker, width = split_type_byte(head[0])
    if config.strict_type and marker != TYPE_MARKER:
        raise InvalidFrameError(f"Invalid type byte 0x{head[0]:02x}: upper nibble must be 0xF")
    if width > MAX_WIDTH:
        raise InvalidFrameError(
            f"Invalid type byte 0x{head[0]:02x}: length width {width} exceeds {MAX_WIDTH} bytes"
        )

    raw = read_exact(source, width)
    if len(raw) < width:
        raise TruncatedFrameError(
            f"Truncated length field: expected {width} bytes, got {len(raw)}",
            expected=width,
            received=len(raw),
        )

    size = unpack_length(raw)
    _check_header(width, size, config)
    return size


def read_bytes(source: Source, config: Optional[CodecConfig] = None) -> bytes:
    """Consume one frame and return its payload.

    Args:
        source: Byte source
        config: Header checks to apply (lenient by default)

    Returns:
        Payload bytes (freshly allocated)

    Raises:
        EndOfStream: If the source is exhausted before the type byte
        TruncatedFrameError: If the source ends inside the frame
        InvalidFrameError: If the header is malformed
        FrameTooLargeError: If the size exceeds config.max_payload_size
        SourceReadError: If the source fails

    Example:
        >>> import io
        >>> read_bytes(io.BytesIO(bytes.fromhex("f102aabb"))).hex()
        'aabb'
    """
    size = peek_size(source, config)
    payload = read_exact(source, size)
    if len(payload) < size:
        raise TruncatedFrameError(
            f"Truncated payload: expected {size} bytes, got {len(payload)}",
            expected=size,
            received=len(payload),
        )

    logger.debug("Decoded frame: size=%d", size)
    return payload


def read_into(
    source: Source,
    buffer: bytearray | memoryview,
    config: Optional[CodecConfig] = None,
) -> int:
    """Consume a frame header, then read at least the payload size into ``buffer``.

    The read is not limited to the frame: when ``buffer`` is larger than the
    payload and the source has more data, bytes past the frame boundary are
    read into the buffer as well. Callers that need exactly one frame should
    use read_bytes().

    Args:
        source: Byte source
        buffer: Writable destination, at least as large as the payload
        config: Header checks to apply (lenient by default)

    Returns:
        Number of bytes placed in ``buffer`` (>= payload size)

    Raises:
        BufferTooSmallError: If ``buffer`` is smaller than the payload
        EndOfStream: If the source is exhausted before the type byte
        TruncatedFrameError: If the source ends before the payload is complete
        InvalidFrameError: If the header is malformed
        SourceReadError: If the source fails
    """
    size = peek_size(source, config)

    capacity = memoryview(buffer).nbytes
    if capacity < size:
        raise BufferTooSmallError(
            f"Buffer of {capacity} bytes cannot hold {size}-byte payload",
            size=size,
            capacity=capacity,
        )

    count = read_at_least(source, buffer, size)
    if count < size:
        raise TruncatedFrameError(
            f"Truncated payload: expected {size} bytes, got {count}",
            expected=size,
            received=count,
        )
    return count


def decode_bytes(
    data: bytes | bytearray | memoryview, config: Optional[CodecConfig] = None
) -> bytes:
    """Decode the first frame in ``data`` and return its payload.

    Bytes after the first frame are ignored.
    """
    return read_bytes(BytesIO(data), config)


def read_uint(source: Source, config: Optional[CodecConfig] = None) -> int:
    """Read an unsigned integer written by write_uint().

    Payloads shorter than 8 bytes are zero-extended.

    Raises:
        DecodeError: If the payload is longer than 8 bytes
    """
    payload = read_bytes(source, config)
    if len(payload) > 8:
        raise DecodeError(f"Integer payload must be at most 8 bytes, got {len(payload)}")
    return struct.unpack("<Q", payload.ljust(8, b"\x00"))[0]


class TlvReader:
    """Reads frames from a bound source.

    Iterating over a reader yields payloads until the source reaches a clean
    end-of-stream. A truncated final frame still raises.

    Example:
        >>> import io
        >>> reader = TlvReader(io.BytesIO(bytes.fromhex("f10161f1026263")))
        >>> list(reader)
        [b'a', b'bc']
    """

    def __init__(self, source: Source, config: Optional[CodecConfig] = None) -> None:
        self._source = source
        self.config = config or DEFAULT_CONFIG

    @property
    def source(self) -> Source:
        """The underlying source."""
        return self._source

    def into_inner(self) -> Source:
        """Return the underlying source (the reader should not be used afterwards)."""
        return self._source

    def peek_size(self) -> int:
        return peek_size(self._source, self.config)

    def read_bytes(self) -> bytes:
        return read_bytes(self._source, self.config)

    def read_into(self, buffer: bytearray | memoryview) -> int:
        return read_into(self._source, buffer, self.config)

    def read_list(self) -> list[bytes]:
        from .listcodec import decode_list

        return decode_list(self._source, self.config)

    def read_uint(self) -> int:
        return read_uint(self._source, self.config)

    def __iter__(self) -> Iterator[bytes]:
        return self

    def __next__(self) -> bytes:
        try:
            return self.read_bytes()
        except EndOfStream:
            raise StopIteration from None
