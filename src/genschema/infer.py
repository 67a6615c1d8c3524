"""Infer a JSON Schema from a decoded JSON/YAML document, including nested structures."""

import logging
from typing import TypeAlias

from genschema.config import SchemaConfig
from genschema.errors import UnsupportedKeyTypeError, UnsupportedValueTypeError
from genschema.model import Items, JsonType, Property, Schema, without_duplicates

logger = logging.getLogger("genschema")

Json: TypeAlias = float | int | str | bool | None | list["Json"] | dict[str, "Json"]


def generate_schema(data: Json, config: SchemaConfig) -> Schema:
    """Build the root schema for `data`, with `$id` taken from `config`."""
    schema = Schema(property=new_property(data, config), id=config.id)
    logger.debug("Inferred root schema of type %s", schema.property.type)
    return schema


def new_property(data: Json, config: SchemaConfig) -> Property:
    """Infer the schema of a single value, recursing into lists and mappings.

    Raises:
        UnsupportedKeyTypeError: a mapping has a non-string key.
        UnsupportedValueTypeError: a value isn't one of the JSON data types.
    """
    match data:
        case dict(d):
            return _object_property(_check_keys(d), config)
        case list(items):
            return Property(
                type=JsonType.ARRAY,
                items=Items(
                    any_of=without_duplicates(
                        [new_property(item, config) for item in items]
                    )
                ),
            )
        case str():
            return Property(type=JsonType.STRING)
        # bool is a subclass of int, so it must come first
        case bool():
            return Property(type=JsonType.BOOLEAN)
        case int():
            return Property(type=JsonType.INTEGER)
        case float():
            return Property(type=JsonType.NUMBER)
        case None:
            return Property(type=JsonType.NULL)
        case _:
            raise UnsupportedValueTypeError(data)


def _check_keys(d: dict[object, Json]) -> dict[str, Json]:
    for key in d:
        if not isinstance(key, str):
            raise UnsupportedKeyTypeError(key)
    return d  # type: ignore[return-value]


def _object_property(d: dict[str, Json], config: SchemaConfig) -> Property:
    prop = Property(
        type=JsonType.OBJECT,
        properties={key: new_property(value, config) for key, value in d.items()},
    )
    if config.require_all_properties:
        prop.required = list(d)
    if not config.additional_properties:
        prop.additional_properties = False
    return prop
