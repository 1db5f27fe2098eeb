"""Reusable, strict base models for the ballot records."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    A base model that converts field names to camel case when serializing.

    For example, the field name `validator_address` in a Python model will be
    represented as `validatorAddress` when it is serialized to JSON, which is
    the spelling used by the wallet and explorer front-ends.

    Raw byte fields are written to JSON as hex strings.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_default=True,
        arbitrary_types_allowed=True,
        ser_json_bytes="hex",
        val_json_bytes="hex",
    )


class StrictBaseModel(CamelModel):
    """A strict, immutable pydantic base model."""

    model_config = CamelModel.model_config | {
        "extra": "forbid",
        "frozen": True,
        "strict": True,
    }
