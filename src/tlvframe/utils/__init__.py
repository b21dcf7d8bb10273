"""Utility functions for tlvframe.

This module provides size calculation helpers.
"""

from __future__ import annotations

from .sizing import encoded_size, frame_overhead, list_encoded_size

__all__ = [
    "encoded_size",
    "frame_overhead",
    "list_encoded_size",
]
