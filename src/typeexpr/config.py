from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from typeexpr.utils.stringify import DEFAULT_MAX_DEPTH, DEFAULT_MAX_LENGTH


class TypeOptions(BaseModel):
    """
    Options attached to a named type when it is defined.
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid", frozen=True)

    accept_undefined_properties: bool = Field(
        False,
        alias="acceptUndefinedProperties",
        description="Tolerate properties the object shape does not declare.",
    )


class TypeRegistryConfig(BaseModel):
    """
    Behaviour of a TypeRegistry.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    define_defaults_just_in_time: bool = Field(
        True,
        description="Register the built-in types on first use instead of requiring define_defaults().",
    )
    max_repr_depth: int = Field(DEFAULT_MAX_DEPTH, ge=1, description="Nesting shown for values in descriptions.")
    max_repr_length: int = Field(
        DEFAULT_MAX_LENGTH,
        ge=16,
        description="Longest value representation in descriptions before it is truncated.",
    )
