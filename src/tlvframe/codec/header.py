"""Type byte and length field helpers.

A frame header is one type byte followed by the length field::

    type byte: 1111 mmmm      (upper nibble constant, m = width of the length field)
    length:    m bytes, little-endian payload size

The encoder only ever picks m from {1, 2, 4, 8}.
"""

from __future__ import annotations

import struct

TYPE_MARKER = 0xF0
TYPE_MASK = 0xF0
WIDTH_MASK = 0x0F
MAX_WIDTH = 8
ENCODER_WIDTHS = (1, 2, 4, 8)
MAX_PAYLOAD_SIZE = (1 << 64) - 1

_U64 = struct.Struct("<Q")


def length_width(size: int) -> int:
    """Return the length-field width the encoder uses for a payload size.

    The width starts at one byte and doubles until the size fits, so it is
    always 1, 2, 4 or 8.

    Args:
        size: Payload size in bytes (0 to 2**64 - 1)

    Returns:
        Number of length bytes

    Raises:
        ValueError: If size is negative or does not fit in 64 bits

    Example:
        >>> [length_width(n) for n in (0, 255, 256, 65536, 1 << 32)]
        [1, 1, 2, 4, 8]
    """
    if size < 0:
        raise ValueError(f"Payload size must be non-negative, got {size}")
    if size > MAX_PAYLOAD_SIZE:
        raise ValueError(f"Payload size {size} does not fit in 64 bits")

    width = 1
    while size >> (8 * width):
        width <<= 1
    return width


def type_byte(width: int) -> int:
    """Build the type byte announcing a length field of ``width`` bytes."""
    if not 1 <= width <= MAX_WIDTH:
        raise ValueError(f"Length width must be 1-{MAX_WIDTH}, got {width}")
    return TYPE_MARKER | width


def split_type_byte(value: int) -> tuple[int, int]:
    """Split a type byte into (upper nibble, width)."""
    return value & TYPE_MASK, value & WIDTH_MASK


def pack_length(size: int, width: int) -> bytes:
    """Encode ``size`` as ``width`` little-endian bytes."""
    if size >> (8 * width):
        raise ValueError(f"Payload size {size} does not fit in {width} length bytes")
    return _U64.pack(size)[:width]


def pack_header(size: int) -> bytes:
    """Return the type byte and length field for a payload of ``size`` bytes.

    Example:
        >>> pack_header(2500).hex()
        'f2c409'
    """
    width = length_width(size)
    return bytes((type_byte(width),)) + pack_length(size, width)


def unpack_length(raw: bytes) -> int:
    """Decode a little-endian length field of 0-8 bytes.

    The bytes are copied into the low end of a zeroed 8-byte scratch buffer.
    """
    if len(raw) > MAX_WIDTH:
        raise ValueError(f"Length field must be at most {MAX_WIDTH} bytes, got {len(raw)}")
    scratch = bytearray(MAX_WIDTH)
    scratch[: len(raw)] = raw
    return _U64.unpack(scratch)[0]


def header_size(size: int) -> int:
    """Return the number of header bytes (type + length) for a payload size."""
    return 1 + length_width(size)
