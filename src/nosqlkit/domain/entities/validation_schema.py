"""Validation schema entities.

A validation schema is synthesized fresh from a collection definition every
time it is needed and discarded once applied or rendered. Each property maps
to exactly one fragment variant: number, enum or string.
"""

from dataclasses import dataclass, field
from typing import Any, ClassVar


@dataclass
class PropertySchema:
    """Base fragment shared by all property schema variants."""

    kind: ClassVar[str] = "base"

    bson_type: str | None = None
    description: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.bson_type is not None:
            data["bsonType"] = self.bson_type
        if self.description is not None:
            data["description"] = self.description
        return data


@dataclass
class NumberSchema(PropertySchema):
    """Fragment for numeric properties (int, long, double, decimal)."""

    kind: ClassVar[str] = "number"


@dataclass
class StringSchema(PropertySchema):
    """Fallback fragment for every non-numeric, non-enum property."""

    kind: ClassVar[str] = "string"


@dataclass
class EnumSchema(PropertySchema):
    """Fragment restricting a property to a literal list of values."""

    kind: ClassVar[str] = "enum"

    enum: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["enum"] = list(self.enum)
        return data


@dataclass
class ValidationSchema:
    """Synthesized validation document for one collection.

    Attributes:
        properties: Fragment per property name, in declaration order.
        required: Names of required properties, in declaration order.
    """

    properties: dict[str, PropertySchema] = field(default_factory=dict)
    required: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "properties": {name: frag.to_dict() for name, frag in self.properties.items()},
            "required": list(self.required),
        }
