"""Errors raised while decoding documents and generating schemas."""


class GenSchemaError(Exception):
    """Base class for errors raised by genschema."""


class DecodeError(GenSchemaError, ValueError):
    """Input bytes are not valid JSON or YAML.

    The parser's own exception is kept as `__cause__`.
    """


class UnsupportedKeyTypeError(GenSchemaError, TypeError):
    """A mapping has a key that isn't a string."""

    def __init__(self, key: object) -> None:
        self.key = key
        super().__init__(
            f"unsupported type {type(key).__name__} of object key, only string keys"
            " are supported"
        )


class UnsupportedValueTypeError(GenSchemaError, TypeError):
    """A decoded value isn't null, bool, int, float, string, list or mapping."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"unsupported type {type(value).__name__} of data")


class EncodeError(GenSchemaError, ValueError):
    """The schema could not be encoded as JSON."""
