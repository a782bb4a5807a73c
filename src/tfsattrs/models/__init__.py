"""Pydantic models for decoded item attributes.

This module provides the ItemAttributes record and the custom attribute
value types.
"""

from __future__ import annotations

from .base import AttributeModel
from .record import CustomAttribute, ItemAttributes
from .values import BooleanValue, FloatValue, IntegerValue, TextValue, VariantTag, VariantValue, to_variant

__all__ = [
    "AttributeModel",
    "ItemAttributes",
    "CustomAttribute",
    "VariantTag",
    "VariantValue",
    "TextValue",
    "IntegerValue",
    "FloatValue",
    "BooleanValue",
    "to_variant",
]
