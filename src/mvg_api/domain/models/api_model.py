"""Base model for records decoded from MVG API payloads."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Immutable record whose fields map to camelCase upstream keys.

    Unknown keys are ignored and every subclass field defaults to ``None``,
    so a payload that omits a field still decodes. Values of the wrong JSON
    type are rejected rather than coerced.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        strict=True,
    )
