"""List encoding as a frame of frames.

A list of payloads is encoded as one outer frame whose payload is the
concatenation of the items' own frames, in order::

    [b"\\x15\\xff", b"\\x20"]  ->  F1 07 | F1 02 15 FF | F1 01 20

Inner frames are self-delimiting, so decoding reads them back one at a time
until the outer payload is exhausted.
"""

from __future__ import annotations

from io import BytesIO
from typing import Iterable, Optional

from ..config import CodecConfig
from ..exceptions import EndOfStream
from ..streams import Sink, Source
from .decoder import read_bytes
from .encoder import Payload, encode


def join_frames(items: Iterable[Payload]) -> bytes:
    """Encode each item as a frame and return the concatenation."""
    buffer = BytesIO()
    for item in items:
        encode(buffer, item)
    return buffer.getvalue()


def split_frames(data: Payload, config: Optional[CodecConfig] = None) -> list[bytes]:
    """Decode consecutive frames from ``data`` until it is exhausted.

    Raises:
        TruncatedFrameError: If the last frame is incomplete
        InvalidFrameError: If a header is malformed
    """
    source = BytesIO(data)
    items: list[bytes] = []
    while True:
        try:
            items.append(read_bytes(source, config))
        except EndOfStream:
            return items


def encode_list(sink: Sink, items: Iterable[Payload]) -> int:
    """Write ``items`` to ``sink`` as one outer frame of inner frames.

    The inner frames are assembled in memory first; the sink sees a single
    frame. An empty list produces ``F1 00``.

    Returns:
        Total bytes written to the sink

    Raises:
        EncodeError: If an item or the outer payload is too long
        SinkWriteError: If the sink fails

    Example:
        >>> import io
        >>> out = io.BytesIO()
        >>> encode_list(out, [b"\\x15\\xff", b"\\x20", b"\\x30", b"\\x40"])
        15
        >>> out.getvalue().hex()
        'f10df10215fff10120f10130f10140'
    """
    return encode(sink, join_frames(items))


def decode_list(source: Source, config: Optional[CodecConfig] = None) -> list[bytes]:
    """Read one outer frame from ``source`` and split it into its items.

    Returns:
        Item payloads in their original order

    Raises:
        EndOfStream: If the source has no outer frame
        TruncatedFrameError: If the outer frame or an inner frame is incomplete
        InvalidFrameError: If a header is malformed
    """
    return split_frames(read_bytes(source, config), config)
