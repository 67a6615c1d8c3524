"""In-memory representation of a JSON Schema and its JSON encoding.

Only the keywords the generator produces are modelled: `type`, `properties`,
`items` (always as `anyOf`), `required` and `additionalProperties`, plus the
`$schema`, `$id` and `$ref` metadata of the root.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from genschema.errors import EncodeError

JSON_SCHEMA_REF = "http://json-schema.org/draft-07/schema"


class JsonType(StrEnum):
    """Data types known to JSON Schema."""

    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    NUMBER = "number"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    NULL = "null"


@dataclass
class Items:
    any_of: list[Property] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"anyOf": [item.to_dict() for item in self.any_of]}


@dataclass(eq=False)
class Property:
    """Schema of a single value.

    `properties`, `required` and `additional_properties` only apply to objects,
    `items` only to arrays. `None` means the keyword is absent. There is no
    `additional_properties=True` state because that is the JSON Schema default.
    """

    type: JsonType
    properties: dict[str, Property] | None = None
    required: list[str] | None = None
    additional_properties: bool | None = None
    items: Items | None = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Property):
            return NotImplemented
        return (
            self.type == other.type
            and self.properties == other.properties
            and _as_set(self.required) == _as_set(other.required)
            and self.additional_properties == other.additional_properties
            and self.items == other.items
        )

    def equals_one_of(self, others: list[Property]) -> bool:
        """Whether this is a duplicate of any of `others` for array items.

        Objects must match exactly. Everything else, arrays included, only needs
        the same type.
        """
        for other in others:
            if self.type != other.type:
                continue
            if self.type is JsonType.OBJECT and self != other:
                continue
            return True
        return False

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.additional_properties is not None:
            out["additionalProperties"] = self.additional_properties
        if self.items is not None:
            out["items"] = self.items.to_dict()
        if self.properties is not None:
            out["properties"] = {
                name: prop.to_dict() for name, prop in self.properties.items()
            }
        out["type"] = str(self.type)
        if self.required is not None:
            out["required"] = list(self.required)
        return out


def _as_set(names: list[str] | None) -> frozenset[str] | None:
    return None if names is None else frozenset(names)


def without_duplicates(properties: list[Property]) -> list[Property]:
    """Remove duplicates from `properties`, keeping the first occurrence of each."""
    unique: list[Property] = []
    for prop in properties:
        if not prop.equals_one_of(unique):
            unique.append(prop)
    return unique


@dataclass
class Schema:
    """Root of a JSON Schema document: metadata plus the root `Property`."""

    property: Property
    id: str = ""
    ref: str = ""
    schema_ref: str = JSON_SCHEMA_REF

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"$schema": self.schema_ref}
        if self.ref:
            out["$ref"] = self.ref
        if self.id:
            out["$id"] = self.id
        out.update(self.property.to_dict())
        return out

    def marshal(self, indent: int | None = None) -> bytes:
        """Encode the schema as JSON. Compact unless `indent` is given."""
        separators = (",", ":") if indent is None else None
        try:
            text = json.dumps(
                self.to_dict(),
                indent=indent,
                separators=separators,
                ensure_ascii=False,
                allow_nan=False,
            )
        except (TypeError, ValueError) as e:
            raise EncodeError(f"cannot encode schema: {e}") from e
        return text.encode()
