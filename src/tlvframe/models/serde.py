"""Model serialization over TLV frames.

A model is written as one list frame holding one inner frame per field, in
declaration order. Field payloads:

- bool: 1 byte (0x00 / 0x01)
- int: 8 bytes, little-endian signed
- float: 8 bytes, little-endian IEEE-754 double
- str: UTF-8
- bytes: raw
- Enum: the payload of its value (int or str)
- list[T]: concatenated frames of the elements
- Optional[T]: concatenated frames of zero or one element
- nested model: concatenated frames of its fields
"""

from __future__ import annotations

import enum
import logging
import struct
from io import BytesIO
from typing import Any, Optional, Type, TypeVar

from pydantic import BaseModel

from ..codec.decoder import read_bytes
from ..codec.encoder import encode
from ..codec.listcodec import join_frames, split_frames
from ..config import CodecConfig
from ..exceptions import DecodeError, EncodeError, SchemaError
from ..streams import Sink, Source
from . import schema as s
from .schema import ModelSchema, TypeSchema

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

_I64 = struct.Struct("<q")
_F64 = struct.Struct("<d")


def _item(type_schema: TypeSchema) -> TypeSchema:
    if type_schema.item is None:
        raise SchemaError(f"{type_schema.kind} schema has no item type")
    return type_schema.item


def encode_value(type_schema: TypeSchema, value: Any) -> bytes:
    """Encode one value as a frame payload.

    Raises:
        EncodeError: If the value cannot be represented
        SchemaError: If a nested model schema is unsupported
    """
    kind = type_schema.kind

    if kind == s.BOOL:
        return b"\x01" if value else b"\x00"

    if kind == s.INT:
        try:
            return _I64.pack(value)
        except struct.error as e:
            raise EncodeError(f"Integer {value} does not fit in 64 bits") from e

    if kind == s.FLOAT:
        return _F64.pack(value)

    if kind == s.STR:
        return value.encode("utf-8")

    if kind == s.BYTES:
        return bytes(value)

    if kind == s.ENUM:
        raw = value.value if isinstance(value, enum.Enum) else value
        return encode_value(_item(type_schema), raw)

    if kind == s.LIST:
        return join_frames(encode_value(_item(type_schema), item) for item in value)

    if kind == s.OPTIONAL:
        if value is None:
            return b""
        return join_frames([encode_value(_item(type_schema), value)])

    if kind == s.MODEL:
        model_schema = ModelSchema.from_model(type_schema.python_type)
        return join_frames(
            encode_value(field.type, getattr(value, field.name)) for field in model_schema.fields
        )

    raise EncodeError(f"Unknown wire kind: {kind}")


def decode_value(
    type_schema: TypeSchema, payload: bytes, config: Optional[CodecConfig] = None
) -> Any:
    """Decode one frame payload according to ``type_schema``.

    Raises:
        DecodeError: If the payload does not match the schema
    """
    kind = type_schema.kind

    if kind == s.BOOL:
        if payload not in (b"\x00", b"\x01"):
            raise DecodeError(f"Invalid bool payload: {payload.hex() or '<empty>'}")
        return payload == b"\x01"

    if kind == s.INT:
        if len(payload) != _I64.size:
            raise DecodeError(f"Integer payload must be 8 bytes, got {len(payload)}")
        return _I64.unpack(payload)[0]

    if kind == s.FLOAT:
        if len(payload) != _F64.size:
            raise DecodeError(f"Float payload must be 8 bytes, got {len(payload)}")
        return _F64.unpack(payload)[0]

    if kind == s.STR:
        try:
            return payload.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeError(f"Invalid UTF-8 string payload: {e}") from e

    if kind == s.BYTES:
        return payload

    if kind == s.ENUM:
        enum_type: Type[enum.Enum] = type_schema.python_type
        raw = decode_value(_item(type_schema), payload, config)
        try:
            return enum_type(raw)
        except ValueError as e:
            raise DecodeError(f"Invalid {enum_type.__name__} value: {raw!r}") from e

    if kind == s.LIST:
        return [
            decode_value(_item(type_schema), item, config)
            for item in split_frames(payload, config)
        ]

    if kind == s.OPTIONAL:
        items = split_frames(payload, config)
        if not items:
            return None
        if len(items) > 1:
            raise DecodeError(f"Optional value holds {len(items)} frames, expected 0 or 1")
        return decode_value(_item(type_schema), items[0], config)

    if kind == s.MODEL:
        return _decode_model(type_schema.python_type, payload, config)

    raise DecodeError(f"Unknown wire kind: {kind}")


def _decode_model(model_class: Type[T], payload: bytes, config: Optional[CodecConfig]) -> T:
    model_schema = ModelSchema.from_model(model_class)
    items = split_frames(payload, config)
    if len(items) != len(model_schema.fields):
        raise DecodeError(
            f"{model_class.__name__} expects {len(model_schema.fields)} fields, "
            f"got {len(items)} frames"
        )

    values = {
        field.name: decode_value(field.type, item, config)
        for field, item in zip(model_schema.fields, items)
    }
    # Values are keyed by field name, not alias
    return model_class.model_validate(values, by_name=True)


def dump_model(sink: Sink, model: BaseModel) -> int:
    """Write a model to ``sink`` as one list frame of its fields.

    Args:
        sink: Destination accepting byte writes
        model: Pydantic model instance

    Returns:
        Total bytes written

    Raises:
        SchemaError: If a field annotation is unsupported
        EncodeError: If a field value cannot be represented
        SinkWriteError: If the sink fails

    Example:
        ```python
        class Reading(BaseModel):
            sensor: str
            value: float

        out = io.BytesIO()
        dump_model(out, Reading(sensor="t1", value=21.5))
        ```
    """
    model_type = TypeSchema(s.MODEL, type(model))
    written = encode(sink, encode_value(model_type, model))
    logger.debug("Serialized %s: %d bytes", type(model).__name__, written)
    return written


def load_model(
    source: Source, model_class: Type[T], config: Optional[CodecConfig] = None
) -> T:
    """Read a model written by dump_model().

    Raises:
        SchemaError: If a field annotation is unsupported
        DecodeError: If the frame does not match the model schema
        pydantic.ValidationError: If the decoded values fail model validation
    """
    return _decode_model(model_class, read_bytes(source, config), config)


def model_to_bytes(model: BaseModel) -> bytes:
    """Serialize a model to bytes. See dump_model()."""
    out = BytesIO()
    dump_model(out, model)
    return out.getvalue()


def model_from_bytes(
    model_class: Type[T], data: bytes, config: Optional[CodecConfig] = None
) -> T:
    """Deserialize a model from bytes. See load_model()."""
    return load_model(BytesIO(data), model_class, config)
