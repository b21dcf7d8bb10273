"""Base model class with TLV serialization helpers.

Any Pydantic model can be serialized with dump_model()/load_model();
TlvModel adds the same operations as methods and a stricter default config.
"""

from __future__ import annotations

from typing import Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict

from ..config import CodecConfig
from ..streams import Sink, Source
from .schema import ModelSchema
from .serde import dump_model, load_model, model_from_bytes, model_to_bytes

M = TypeVar("M", bound="TlvModel")


class TlvModel(BaseModel):
    """Base class for models carried in TLV frames.

    Fields are written in declaration order with no type tags, so sender and
    receiver must share the model definition.

    Example:
        >>> class Reading(TlvModel):
        ...     sensor: str
        ...     value: float
        >>> data = Reading(sensor="t1", value=21.5).to_bytes()
        >>> Reading.from_bytes(data)
        Reading(sensor='t1', value=21.5)
    """

    model_config = ConfigDict(
        # Validate on assignment
        validate_assignment=True,
        # Forbid extra fields not defined in schema
        extra="forbid",
    )

    @classmethod
    def tlv_schema(cls) -> ModelSchema:
        """Return the wire schema (raises SchemaError if unsupported)."""
        return ModelSchema.from_model(cls)

    def to_bytes(self) -> bytes:
        return model_to_bytes(self)

    @classmethod
    def from_bytes(cls: Type[M], data: bytes, config: Optional[CodecConfig] = None) -> M:
        return model_from_bytes(cls, data, config)

    def dump(self, sink: Sink) -> int:
        return dump_model(sink, self)

    @classmethod
    def load(cls: Type[M], source: Source, config: Optional[CodecConfig] = None) -> M:
        return load_model(source, cls, config)
