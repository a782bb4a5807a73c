"""Custom attribute value types.

A custom attribute value is exactly one of four kinds, each identified on the
wire by a one-byte tag. The kinds are modelled as a Pydantic discriminated
union keyed on that tag.
"""

from __future__ import annotations

import enum
from typing import Annotated, Any, Literal, Union

from pydantic import Field

from .base import AttributeModel

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1


class VariantTag(enum.IntEnum):
    """Wire tag of a custom attribute value."""

    TEXT = 1
    INTEGER = 2
    FLOAT = 3
    BOOLEAN = 4


class TextValue(AttributeModel):
    """Text value (tag 1), stored as length-prefixed text."""

    tag: Literal[1] = 1
    value: str


class IntegerValue(AttributeModel):
    """Signed 64-bit integer value (tag 2)."""

    tag: Literal[2] = 2
    value: int = Field(ge=INT64_MIN, le=INT64_MAX)


class FloatValue(AttributeModel):
    """IEEE-754 double value (tag 3)."""

    tag: Literal[3] = 3
    value: float


class BooleanValue(AttributeModel):
    """Boolean value (tag 4), stored as a single byte."""

    tag: Literal[4] = 4
    value: bool


VariantValue = Annotated[
    Union[TextValue, IntegerValue, FloatValue, BooleanValue],
    Field(discriminator="tag"),
]


def to_variant(value: Any) -> VariantValue:
    """Wrap a plain Python value in the matching value model.

    Raises:
        TypeError: If value is not a str, int, float or bool
    """
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return BooleanValue(value=value)
    if isinstance(value, int):
        return IntegerValue(value=value)
    if isinstance(value, float):
        return FloatValue(value=value)
    if isinstance(value, str):
        return TextValue(value=value)
    raise TypeError(f"Unsupported custom attribute value type: {type(value).__name__}")
