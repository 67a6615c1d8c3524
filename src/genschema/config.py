"""Options that control how schemas are generated."""

from pydantic import BaseModel, ConfigDict


class SchemaConfig(BaseModel):
    """Configuration used when generating a schema.

    The defaults require objects to have exactly the properties seen during
    generation: no unknown properties and no missing ones.
    """

    model_config = ConfigDict(frozen=True)

    id: str = ""
    """`$id` of the schema. Omitted if empty."""
    additional_properties: bool = False
    """Whether objects may have properties that weren't in the example."""
    require_all_properties: bool = True
    """Whether every property of an object is listed as required."""


def default_config() -> SchemaConfig:
    return SchemaConfig()
