"""Pydantic model serialization for tlvframe.

This module provides schema introspection and TLV serialization for
Pydantic models.
"""

from __future__ import annotations

from .base import TlvModel
from .schema import FieldSchema, ModelSchema, TypeSchema
from .serde import (
    decode_value,
    dump_model,
    encode_value,
    load_model,
    model_from_bytes,
    model_to_bytes,
)

__all__ = [
    "TlvModel",
    "ModelSchema",
    "FieldSchema",
    "TypeSchema",
    "dump_model",
    "load_model",
    "model_to_bytes",
    "model_from_bytes",
    "encode_value",
    "decode_value",
]
