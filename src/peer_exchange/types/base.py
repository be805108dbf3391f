"""Reusable, strict base model for wire types."""

from pydantic import BaseModel, ConfigDict


class StrictBaseModel(BaseModel):
    """
    A strict, immutable pydantic base model.

    Unknown fields are rejected and instances cannot be mutated after
    construction, so a validated value stays valid for its whole lifetime.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        strict=True,
        validate_default=True,
    )
