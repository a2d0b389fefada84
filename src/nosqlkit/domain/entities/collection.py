"""Collection entities describing document-database collections.

A collection definition is the authoritative, user-authored description of a
collection: its name and the ordered list of its typed properties. It is
persisted per domain as ``schema.json`` with the shape::

    [{"name": ..., "properties": [{"name", "type", "bsonType",
                                    "description", "required", "enum"?}]}]
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

ENUM_SEPARATOR = "|"


@dataclass
class PropertyDefinition:
    """One typed field of a collection.

    Attributes:
        name: Property name, unique within its collection.
        type: Semantic type tag from the property type registry.
        bson_type: Storage type tag; defaults to ``type``.
        description: Optional free text.
        required: Whether documents must carry the property.
        enum: Allowed values, pipe separated (``"a|b|c"``) or already split.
    """

    name: str
    type: str
    bson_type: str | None = None
    description: str | None = None
    required: bool = False
    enum: str | list[str] | None = None

    def __post_init__(self) -> None:
        if self.bson_type is None and self.type:
            self.bson_type = self.type
        self.required = bool(self.required)

    @property
    def enum_values(self) -> list[str]:
        """Allowed values in their literal source order."""
        if self.enum is None:
            return []
        if isinstance(self.enum, str):
            if not self.enum:
                return []
            return self.enum.split(ENUM_SEPARATOR)
        return [str(value) for value in self.enum]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PropertyDefinition":
        return cls(
            name=data.get("name", ""),
            type=data.get("type", ""),
            bson_type=data.get("bsonType"),
            description=data.get("description"),
            required=data.get("required", False),
            enum=data.get("enum"),
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "name": self.name,
            "type": self.type,
            "bsonType": self.bson_type,
            "description": self.description,
            "required": self.required,
        }
        if self.enum is not None:
            data["enum"] = self.enum
        return data


@dataclass
class CollectionDefinition:
    """A document-database collection and its property schema.

    Attributes:
        name: Collection name, unique within its domain. Used both as the
            collection key in the store and as the generated type name.
        properties: Ordered property definitions.
    """

    name: str
    properties: list[PropertyDefinition] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate collection data after initialization."""
        if not self.name:
            raise ValueError("Collection name is required")
        self.properties = [
            p if isinstance(p, PropertyDefinition) else PropertyDefinition.from_dict(p)
            for p in self.properties
        ]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CollectionDefinition":
        return cls(
            name=data.get("name", ""),
            properties=[PropertyDefinition.from_dict(p) for p in data.get("properties") or []],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "properties": [p.to_dict() for p in self.properties],
        }
