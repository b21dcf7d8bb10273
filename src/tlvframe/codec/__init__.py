"""Streaming TLV codec.

This module provides the frame encoder, decoder, and list codec.
"""

from __future__ import annotations

from .decoder import TlvReader, decode_bytes, peek_size, read_bytes, read_into, read_uint
from .encoder import TlvWriter, encode, encode_bytes, write_uint
from .header import length_width, pack_header, type_byte, unpack_length
from .listcodec import decode_list, encode_list, join_frames, split_frames

__all__ = [
    "encode",
    "encode_bytes",
    "write_uint",
    "TlvWriter",
    "peek_size",
    "read_bytes",
    "read_into",
    "read_uint",
    "decode_bytes",
    "TlvReader",
    "encode_list",
    "decode_list",
    "join_frames",
    "split_frames",
    "length_width",
    "type_byte",
    "pack_header",
    "unpack_length",
]
