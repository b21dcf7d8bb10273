"""Frame size calculation utilities.

This module provides functions to calculate the encoded size of frames
without actually encoding them.
"""

from __future__ import annotations

from typing import Iterable

from ..codec.encoder import Payload
from ..codec.header import header_size


def _length_of(payload_or_size: Payload | int) -> int:
    if isinstance(payload_or_size, int):
        return payload_or_size
    return memoryview(payload_or_size).nbytes


def encoded_size(payload_or_size: Payload | int) -> int:
    """Calculate the size of the frame for a payload, in bytes.

    Args:
        payload_or_size: Payload, or its length in bytes

    Returns:
        1 + width + payload length

    Raises:
        ValueError: If the length is negative or does not fit in 64 bits

    Example:
        >>> encoded_size(b"\\xaa\\xbb")
        4
        >>> encoded_size(65536)
        65541
    """
    size = _length_of(payload_or_size)
    return header_size(size) + size


def frame_overhead(payload_or_size: Payload | int) -> int:
    """Calculate the header bytes added on top of the payload."""
    return header_size(_length_of(payload_or_size))


def list_encoded_size(items: Iterable[Payload | int]) -> int:
    """Calculate the size of the list frame for ``items``.

    Example:
        >>> list_encoded_size([b"\\x15\\xff", b"\\x20", b"\\x30", b"\\x40"])
        15
        >>> list_encoded_size([])
        2
    """
    inner = sum(encoded_size(item) for item in items)
    return encoded_size(inner)
