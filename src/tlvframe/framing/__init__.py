"""In-memory framing utilities for tlvframe.

This module provides bytes-in, bytes-out wrappers around the streaming codec.
"""

from __future__ import annotations

from .basic import frame_list, frame_payload, iter_frames, unframe_list, unframe_payload

__all__ = [
    "frame_payload",
    "unframe_payload",
    "frame_list",
    "unframe_list",
    "iter_frames",
]
