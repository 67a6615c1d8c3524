"""Generate JSON Schemas from example JSON and YAML documents."""

from genschema.config import SchemaConfig, default_config
from genschema.errors import (
    DecodeError,
    EncodeError,
    GenSchemaError,
    UnsupportedKeyTypeError,
    UnsupportedValueTypeError,
)
from genschema.generate import generate_from_json, generate_from_yaml
from genschema.infer import Json, generate_schema, new_property
from genschema.model import (
    JSON_SCHEMA_REF,
    Items,
    JsonType,
    Property,
    Schema,
    without_duplicates,
)

__all__ = [
    "JSON_SCHEMA_REF",
    "DecodeError",
    "EncodeError",
    "GenSchemaError",
    "Items",
    "Json",
    "JsonType",
    "Property",
    "Schema",
    "SchemaConfig",
    "UnsupportedKeyTypeError",
    "UnsupportedValueTypeError",
    "default_config",
    "generate_from_json",
    "generate_from_yaml",
    "generate_schema",
    "new_property",
    "without_duplicates",
]
