"""Frame inspection CLI command."""

from __future__ import annotations

import logging
from io import BytesIO
from pathlib import Path
from typing import Optional

from ..codec.decoder import read_bytes
from ..codec.header import split_type_byte
from ..codec.listcodec import split_frames
from ..config import CodecConfig
from ..exceptions import EndOfStream

logger = logging.getLogger(__name__)

PREVIEW_BYTES = 16


def _preview(payload: bytes) -> str:
    text = payload[:PREVIEW_BYTES].hex(" ")
    if len(payload) > PREVIEW_BYTES:
        text += " ..."
    return text or "<empty>"


def inspect_file(file_path: Path, config: Optional[CodecConfig] = None) -> int:
    """Print one line per frame found in a file.

    Args:
        file_path: File holding consecutive frames
        config: Header checks to apply

    Returns:
        Number of frames found

    Raises:
        DecodeError: If a frame is malformed or truncated
    """
    data = file_path.read_bytes()
    source = BytesIO(data)

    print(f"{'#':>5}  {'offset':>10}  type  width  {'size':>12}  payload")
    count = 0
    while True:
        offset = source.tell()
        try:
            payload = read_bytes(source, config)
        except EndOfStream:
            break

        _, width = split_type_byte(data[offset])
        print(
            f"{count:>5}  {offset:>10}  0x{data[offset]:02x}  {width:>5}  "
            f"{len(payload):>12}  {_preview(payload)}"
        )
        count += 1

    print()
    print(f"{count} frame{'s' if count != 1 else ''}, {len(data)} bytes")
    logger.debug("Inspected %s: %d frames", file_path, count)
    return count


def inspect_list(file_path: Path, config: Optional[CodecConfig] = None) -> int:
    """Decode the first frame of a file as a list and print its items.

    Returns:
        Number of items

    Raises:
        DecodeError: If the outer or an inner frame is malformed
    """
    with file_path.open("rb") as source:
        outer = read_bytes(source, config)

    items = split_frames(outer, config)
    print(f"List of {len(items)} item{'s' if len(items) != 1 else ''} ({len(outer)} payload bytes)")
    for i, item in enumerate(items):
        print(f"{i:>5}  {len(item):>12}  {_preview(item)}")
    return len(items)
