"""Decode JSON and YAML documents into plain Python values."""

import json
import logging
import re
from typing import Any

import yaml

from genschema.errors import DecodeError

logger = logging.getLogger("genschema")


class _Loader(yaml.SafeLoader):
    """Safe loader that keeps timestamps as plain strings and reads `1e5` as a float.

    The schema only has a `string` type for timestamps, so there's no point in
    turning them into `datetime` objects. YAML 1.1 needs a dot in exponent floats,
    but JSON (and YAML 1.2) don't.
    """


_Loader.add_constructor(
    "tag:yaml.org,2002:timestamp", yaml.SafeLoader.construct_yaml_str
)
_Loader.add_implicit_resolver(
    "tag:yaml.org,2002:float",
    re.compile(r"^[-+]?[0-9][0-9_]*(?:\.[0-9_]*)?[eE][-+]?[0-9]+$"),
    list("-+0123456789"),
)


def decode_json(data: bytes | str) -> Any:
    try:
        value = json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DecodeError(f"invalid JSON: {e}") from e
    logger.debug("Decoded JSON document of type %s", type(value).__name__)
    return value


def decode_yaml(data: bytes | str) -> Any:
    """Decode a single YAML document. Mapping keys are not checked here."""
    try:
        value = yaml.load(data, Loader=_Loader)
    except yaml.YAMLError as e:
        raise DecodeError(f"invalid YAML: {e}") from e
    logger.debug("Decoded YAML document of type %s", type(value).__name__)
    return value


def decode_any(data: bytes | str) -> Any:
    """Decode as JSON, falling back to YAML if that fails.

    Trying JSON first means JSON-only syntax, like tabs between tokens, works
    without having to pick the format.
    """
    try:
        return decode_json(data)
    except DecodeError as e:
        logger.debug("Not JSON, trying YAML: %s", e)
    return decode_yaml(data)
