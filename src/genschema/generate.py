"""Generate JSON Schemas (draft-07) from example JSON or YAML documents.

Lists are always described with `anyOf` and are not limited in length. A schema
generated from `[1, true]` accepts a list with any number of integers, booleans
and mixes of both, but rejects other item types such as strings.

Example:
    >>> generate_from_json(b'{"foo": "bar"}')
    b'{"$schema":"http://json-schema.org/draft-07/schema","additionalProperties":false,"properties":{"foo":{"type":"string"}},"type":"object","required":["foo"]}'
"""

from genschema.config import SchemaConfig
from genschema.decode import decode_json, decode_yaml
from genschema.infer import generate_schema


def generate_from_json(data: bytes | str, config: SchemaConfig | None = None) -> bytes:
    """Generate a JSON Schema from a JSON document.

    If `config` is None, the default `SchemaConfig` is used.
    """
    return generate_schema(decode_json(data), config or SchemaConfig()).marshal()


def generate_from_yaml(data: bytes | str, config: SchemaConfig | None = None) -> bytes:
    """Generate a JSON Schema from a YAML document.

    All mapping keys must be strings:

        foo: "bar"  # ok, "foo" is a string
        42: "bar"   # not ok, 42 is an integer

    If `config` is None, the default `SchemaConfig` is used.
    """
    return generate_schema(decode_yaml(data), config or SchemaConfig()).marshal()
