"""Schema introspection for Pydantic models.

This module maps model field annotations to the wire representation used
by the model serializer. Frames carry no type tags, so both ends must agree
on the schema.
"""

from __future__ import annotations

import enum
import types
from dataclasses import dataclass
from typing import Any, List, Optional, Type, Union, get_args, get_origin

from pydantic import BaseModel
from pydantic.fields import FieldInfo

from ..exceptions import SchemaError

# Wire kinds
BOOL = "bool"
INT = "int"
FLOAT = "float"
STR = "str"
BYTES = "bytes"
ENUM = "enum"
LIST = "list"
OPTIONAL = "optional"
MODEL = "model"

_SCALARS = {bool: BOOL, int: INT, float: FLOAT, str: STR, bytes: BYTES}


@dataclass(frozen=True)
class TypeSchema:
    """Wire representation of one annotation.

    Attributes:
        kind: One of the wire kinds (bool, int, float, str, bytes, enum, list,
            optional, model)
        python_type: The resolved Python type
        item: Element schema for list and optional, value schema for enum
    """

    kind: str
    python_type: Any
    item: Optional[TypeSchema] = None

    @classmethod
    def from_annotation(cls, annotation: Any, where: str = "field") -> TypeSchema:
        """Build a schema from a type annotation.

        Raises:
            SchemaError: If the annotation has no wire representation
        """
        if annotation is None:
            raise SchemaError(f"{where} has no type annotation")

        origin = get_origin(annotation)
        args = get_args(annotation)

        # Optional[T] / T | None
        if origin is Union or origin is types.UnionType:
            non_none_args = [arg for arg in args if arg is not type(None)]
            if len(non_none_args) == 1 and len(args) == 2:
                return cls(OPTIONAL, annotation, cls.from_annotation(non_none_args[0], where))
            raise SchemaError(f"{where}: complex Union types not supported")

        if origin is list:
            if not args:
                raise SchemaError(f"{where}: list fields need an element type")
            return cls(LIST, annotation, cls.from_annotation(args[0], where))

        if origin is not None:
            raise SchemaError(f"{where}: unsupported generic type {annotation}")

        if isinstance(annotation, type):
            # Enum before scalars: IntEnum and StrEnum subclass int and str
            if issubclass(annotation, enum.Enum):
                return cls(ENUM, annotation, cls._enum_value_schema(annotation, where))
            if issubclass(annotation, BaseModel):
                return cls(MODEL, annotation)
            if annotation in _SCALARS:
                return cls(_SCALARS[annotation], annotation)

        raise SchemaError(
            f"{where}: unsupported type {annotation}. "
            f"Supported: bool, int, float, str, bytes, Enum, list, Optional, BaseModel."
        )

    @classmethod
    def _enum_value_schema(cls, enum_type: Type[enum.Enum], where: str) -> TypeSchema:
        members = list(enum_type)
        if not members:
            raise SchemaError(f"{where}: enum {enum_type.__name__} has no values")

        if all(isinstance(m.value, int) and not isinstance(m.value, bool) for m in members):
            return cls(INT, int)
        if all(isinstance(m.value, str) for m in members):
            return cls(STR, str)
        raise SchemaError(
            f"{where}: enum {enum_type.__name__} values must be all int or all str"
        )


@dataclass(frozen=True)
class FieldSchema:
    """Schema information for a single model field.

    Attributes:
        name: Field name
        type: Wire representation of the field annotation
    """

    name: str
    type: TypeSchema


class ModelSchema:
    """Schema information for an entire model.

    Fields are listed in declaration order, which is also the order they
    appear on the wire.

    Example:
        >>> schema = ModelSchema.from_model(Reading)
        >>> [f.name for f in schema.fields]
        ['sensor', 'value']
    """

    def __init__(self, model_class: Type[BaseModel]) -> None:
        self.model_class = model_class
        self.fields: List[FieldSchema] = []
        self._introspect()

    @classmethod
    def from_model(cls, model_class: Type[BaseModel]) -> ModelSchema:
        return cls(model_class)

    def _introspect(self) -> None:
        for field_name, field_info in self.model_class.model_fields.items():
            self.fields.append(self._extract_field_schema(field_name, field_info))

    def _extract_field_schema(self, name: str, field_info: FieldInfo) -> FieldSchema:
        where = f"Field {self.model_class.__name__}.{name}"
        return FieldSchema(name=name, type=TypeSchema.from_annotation(field_info.annotation, where))
