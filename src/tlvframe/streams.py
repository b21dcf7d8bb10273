"""Byte source and sink abstractions.

The codec consumes two capabilities from its collaborators:

- a **source** with ``readinto(buffer)``, returning the number of bytes
  filled, ``0`` at end-of-stream, or ``None`` when a non-blocking source has
  nothing to deliver;
- a **sink** with ``write(data)``, returning the number of bytes accepted.

``io.BytesIO``, binary files and ``socket.makefile("rwb")`` all qualify.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .exceptions import SinkWriteError, SourceReadError

CHUNK_SIZE = 1 << 20


@runtime_checkable
class Source(Protocol):
    """Anything that can fill a caller-owned buffer with bytes."""

    def readinto(self, buffer: bytearray | memoryview, /) -> int | None: ...


@runtime_checkable
class Sink(Protocol):
    """Anything that accepts byte writes."""

    def write(self, data: bytes | bytearray | memoryview, /) -> int | None: ...


def _readinto(source: Source, view: memoryview) -> int:
    try:
        count = source.readinto(view)
    except OSError as exc:
        raise SourceReadError(f"Source read failed: {exc}") from exc

    if count is None:
        raise SourceReadError("Source has no data available (non-blocking source)")
    return count


def read_exact(source: Source, num_bytes: int) -> bytes:
    """Read up to ``num_bytes`` from the source, looping over short reads.

    Stops early only when the source reports end-of-stream, so a result shorter
    than ``num_bytes`` always means the stream ended. Deciding whether that is a
    clean end or a truncation is left to the caller.

    Args:
        source: Byte source
        num_bytes: Number of bytes wanted (>= 0)

    Returns:
        The bytes delivered, at most ``num_bytes`` long

    Raises:
        ValueError: If num_bytes is negative
        SourceReadError: If the source raises or would block
    """
    if num_bytes < 0:
        raise ValueError(f"num_bytes must be >= 0, got {num_bytes}")

    # Grow in chunks so a bogus length cannot force a huge allocation up front
    buffer = bytearray()
    while len(buffer) < num_bytes:
        chunk = bytearray(min(num_bytes - len(buffer), CHUNK_SIZE))
        view = memoryview(chunk)
        filled = 0
        while filled < len(chunk):
            count = _readinto(source, view[filled:])
            if count == 0:
                break
            filled += count
        view.release()
        buffer += chunk[:filled] if filled < len(chunk) else chunk
        if filled < len(chunk):
            break
    return bytes(buffer)


def read_at_least(source: Source, buffer: bytearray | memoryview, minimum: int) -> int:
    """Fill ``buffer`` until at least ``minimum`` bytes have been read.

    Every read is offered the whole remaining buffer, so more than ``minimum``
    bytes may be delivered when the source has them.

    Args:
        source: Byte source
        buffer: Writable destination
        minimum: Lower bound on the bytes to read (<= len(buffer))

    Returns:
        Number of bytes placed in ``buffer``. Smaller than ``minimum`` only when
        the source reached end-of-stream.

    Raises:
        ValueError: If minimum is negative or larger than the buffer
        SourceReadError: If the source raises or would block
    """
    view = memoryview(buffer).cast("B")
    if not 0 <= minimum <= len(view):
        raise ValueError(f"minimum must be 0-{len(view)}, got {minimum}")

    filled = 0
    while filled < minimum:
        count = _readinto(source, view[filled:])
        if count == 0:
            break
        filled += count
    return filled


def write_checked(sink: Sink, data: bytes | bytearray | memoryview) -> int:
    """Write ``data`` to the sink in a single call.

    The codec does not retry: a short write leaves a partial frame behind and
    is reported as a failure.

    Returns:
        Number of bytes written (always ``len(data)``)

    Raises:
        SinkWriteError: If the sink raises, would block, or writes fewer bytes
    """
    expected = len(data)
    try:
        written = sink.write(data)
    except OSError as exc:
        raise SinkWriteError(f"Sink write failed: {exc}", written=None, expected=expected) from exc

    if written is None:
        raise SinkWriteError(
            "Sink could not accept data (non-blocking sink)", written=None, expected=expected
        )
    if written != expected:
        raise SinkWriteError(
            f"Short write: sink accepted {written} of {expected} bytes",
            written=written,
            expected=expected,
        )
    return written
