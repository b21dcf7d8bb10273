"""Basic in-memory framing utilities.

This module frames and unframes whole byte strings. Unlike the streaming
decoder, unframing here expects the buffer to hold exactly one frame and
reports every problem as FramingError.
"""

from __future__ import annotations

from io import BytesIO
from typing import Iterable, Iterator, Optional

from ..codec.decoder import TlvReader, read_bytes
from ..codec.encoder import Payload, encode_bytes
from ..codec.listcodec import join_frames, split_frames
from ..config import CodecConfig
from ..exceptions import DecodeError, FramingError


def frame_payload(payload: Payload) -> bytes:
    """Frame a payload.

    The frame structure is:
    - [Type (1 byte)] [Length (1, 2, 4 or 8 bytes, little-endian)] [Payload]

    Args:
        payload: Payload to frame

    Returns:
        Framed payload

    Example:
        >>> frame_payload(b"\\xaa\\xbb").hex()
        'f102aabb'
    """
    return encode_bytes(payload)


def _unframe_one(source: BytesIO, total: int, config: Optional[CodecConfig]) -> bytes:
    try:
        payload = read_bytes(source, config)
    except DecodeError as e:
        raise FramingError(f"Invalid frame: {e}") from e

    trailing = total - source.tell()
    if trailing:
        raise FramingError(f"Trailing data: {trailing} bytes after frame")
    return payload


def unframe_payload(framed: Payload, *, config: Optional[CodecConfig] = None) -> bytes:
    """Unframe a payload and validate the frame boundary.

    Args:
        framed: Buffer holding exactly one frame
        config: Header checks to apply (lenient by default)

    Returns:
        Original payload

    Raises:
        FramingError: If the buffer is empty, the frame is malformed or
            truncated, or bytes follow the frame

    Example:
        >>> unframe_payload(bytes.fromhex("f102aabb"))
        b'\\xaa\\xbb'
    """
    if not framed:
        raise FramingError("Cannot unframe empty data")

    source = BytesIO(framed)
    return _unframe_one(source, memoryview(framed).nbytes, config)


def frame_list(items: Iterable[Payload]) -> bytes:
    """Frame a list of payloads as one outer frame of inner frames.

    Example:
        >>> frame_list([]).hex()
        'f100'
    """
    return encode_bytes(join_frames(items))


def unframe_list(framed: Payload, *, config: Optional[CodecConfig] = None) -> list[bytes]:
    """Unframe a list produced by frame_list().

    Raises:
        FramingError: If the outer or an inner frame is malformed, or bytes
            follow the outer frame
    """
    outer = unframe_payload(framed, config=config)
    try:
        return split_frames(outer, config)
    except DecodeError as e:
        raise FramingError(f"Invalid list item: {e}") from e


def iter_frames(data: Payload, *, config: Optional[CodecConfig] = None) -> Iterator[bytes]:
    """Yield the payload of every frame in ``data``, in order.

    Raises:
        FramingError: If a frame is malformed or the last frame is truncated
    """
    reader = TlvReader(BytesIO(data), config)
    try:
        yield from reader
    except DecodeError as e:
        raise FramingError(f"Invalid frame: {e}") from e
