"""tlvframe: Type-Length-Value framing codec

A Python library for wrapping byte payloads in compact, self-delimiting
frames and reading them back from a byte stream.

Wire format:
    [type: 0xF0 | m] [length: m bytes, little-endian] [payload]

where m, the width of the length field, is 1, 2, 4 or 8 (the smallest that
holds the payload size).

Key Features:
- Streaming encoder/decoder over any file-like source or sink
- List codec (a frame of frames) with order preservation
- Clean end-of-stream vs truncated-frame distinction
- Optional strict header validation
- Pydantic model serialization over frames

Quick Start:
    >>> import io
    >>> from tlvframe import encode, read_bytes
    >>>
    >>> stream = io.BytesIO()
    >>> encode(stream, b"\\xaa\\xbb")
    4
    >>> stream.getvalue().hex()
    'f102aabb'
    >>> stream.seek(0)
    0
    >>> read_bytes(stream)
    b'\\xaa\\xbb'
"""

from __future__ import annotations

from .codec import (
    TlvReader,
    TlvWriter,
    decode_bytes,
    decode_list,
    encode,
    encode_bytes,
    encode_list,
    join_frames,
    length_width,
    peek_size,
    read_bytes,
    read_into,
    read_uint,
    split_frames,
    write_uint,
)
from .config import DEFAULT_CONFIG, STRICT_CONFIG, CodecConfig
from .exceptions import (
    BufferTooSmallError,
    DecodeError,
    EncodeError,
    EndOfStream,
    FrameTooLargeError,
    FramingError,
    InvalidFrameError,
    SchemaError,
    SinkWriteError,
    SourceReadError,
    TlvError,
    TruncatedFrameError,
)
from .framing import frame_list, frame_payload, iter_frames, unframe_list, unframe_payload
from .models import TlvModel, dump_model, load_model, model_from_bytes, model_to_bytes
from .streams import Sink, Source
from .utils import encoded_size, frame_overhead, list_encoded_size

__version__ = "0.1.0"

__all__ = [
    # Core API
    "encode",
    "peek_size",
    "read_bytes",
    "read_into",
    "encode_list",
    "decode_list",
    # Convenience
    "encode_bytes",
    "decode_bytes",
    "join_frames",
    "split_frames",
    "write_uint",
    "read_uint",
    "length_width",
    "TlvWriter",
    "TlvReader",
    "Source",
    "Sink",
    # Configuration
    "CodecConfig",
    "DEFAULT_CONFIG",
    "STRICT_CONFIG",
    # Exceptions
    "TlvError",
    "EncodeError",
    "SinkWriteError",
    "DecodeError",
    "EndOfStream",
    "TruncatedFrameError",
    "InvalidFrameError",
    "FrameTooLargeError",
    "BufferTooSmallError",
    "SourceReadError",
    "FramingError",
    "SchemaError",
    # Framing
    "frame_payload",
    "unframe_payload",
    "frame_list",
    "unframe_list",
    "iter_frames",
    # Models
    "TlvModel",
    "dump_model",
    "load_model",
    "model_to_bytes",
    "model_from_bytes",
    # Sizing
    "encoded_size",
    "frame_overhead",
    "list_encoded_size",
    # Version
    "__version__",
]
