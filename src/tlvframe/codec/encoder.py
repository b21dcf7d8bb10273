"""Frame encoder.

This module provides the encode() function that writes one self-delimited
frame (type byte, length field, payload) to a sink, and the TlvWriter wrapper
that binds a sink for repeated writes.
"""

from __future__ import annotations

import logging
import struct
from io import BytesIO
from typing import Iterable

from ..exceptions import EncodeError
from ..streams import Sink, write_checked
from .header import length_width, pack_length, type_byte

logger = logging.getLogger(__name__)

Payload = bytes | bytearray | memoryview


def encode(sink: Sink, payload: Payload) -> int:
    """Write ``payload`` to ``sink`` as a single frame.

    The type byte, the length field and the payload are each emitted with one
    ``sink.write`` call, in that order. Nothing is buffered.

    Args:
        sink: Destination accepting byte writes
        payload: Bytes-like payload to frame

    Returns:
        Total bytes written: 1 + width + len(payload)

    Raises:
        EncodeError: If the payload length does not fit in 64 bits
        SinkWriteError: If the sink fails or accepts fewer bytes than offered.
            Part of the frame may already have been written.

    Example:
        >>> import io
        >>> out = io.BytesIO()
        >>> encode(out, b"\\xaa\\xbb")
        4
        >>> out.getvalue().hex()
        'f102aabb'
    """
    view = memoryview(payload)
    if not view.c_contiguous:
        view = memoryview(view.tobytes())
    view = view.cast("B")
    size = view.nbytes

    try:
        width = length_width(size)
    except ValueError as e:
        raise EncodeError(str(e)) from e

    written = write_checked(sink, bytes((type_byte(width),)))
    written += write_checked(sink, pack_length(size, width))
    written += write_checked(sink, view)

    logger.debug("Encoded frame: width=%d size=%d total=%d", width, size, written)
    return written


def encode_bytes(payload: Payload) -> bytes:
    """Return the frame for ``payload`` as bytes."""
    out = BytesIO()
    encode(out, payload)
    return out.getvalue()


def write_uint(sink: Sink, value: int) -> int:
    """Write an unsigned 64-bit integer as an 8-byte little-endian frame payload.

    Raises:
        EncodeError: If value is negative or does not fit in 64 bits
    """
    try:
        payload = struct.pack("<Q", value)
    except struct.error as e:
        raise EncodeError(f"Value {value} is not an unsigned 64-bit integer") from e
    return encode(sink, payload)


class TlvWriter:
    """Writes frames to a bound sink.

    The writer holds no buffers between calls; each method writes straight
    through to the sink. A writer must not be shared between threads.

    Example:
        >>> import io
        >>> writer = TlvWriter(io.BytesIO())
        >>> writer.write(b"hello")
        7
        >>> writer.write_list([b"a", b"bc"])
        9
    """

    def __init__(self, sink: Sink) -> None:
        self._sink = sink

    @property
    def sink(self) -> Sink:
        """The underlying sink."""
        return self._sink

    def into_inner(self) -> Sink:
        """Return the underlying sink (the writer should not be used afterwards)."""
        return self._sink

    def write(self, payload: Payload) -> int:
        """Encode one frame. See :func:`encode`."""
        return encode(self._sink, payload)

    def write_list(self, items: Iterable[Payload]) -> int:
        """Encode a list of payloads as one outer frame. See :func:`encode_list`."""
        from .listcodec import encode_list

        return encode_list(self._sink, items)

    def write_uint(self, value: int) -> int:
        """Encode an unsigned 64-bit integer. See :func:`write_uint`."""
        return write_uint(self._sink, value)

    def flush(self) -> None:
        """Flush the sink if it supports flushing."""
        flush = getattr(self._sink, "flush", None)
        if flush is not None:
            flush()
