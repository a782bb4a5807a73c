"""Decoded item attribute record."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import Field, field_validator

from .base import AttributeModel
from .values import VariantValue, to_variant


class CustomAttribute(AttributeModel):
    """A single (key, value) entry of a custom attributes block.

    ``value`` is None only when the stream carried a value tag outside the
    four known kinds.
    """

    key: str
    value: Optional[VariantValue] = None

    @classmethod
    def of(cls, key: str, value: Any) -> CustomAttribute:
        """Build a custom attribute from a plain Python value.

        Example:
            >>> CustomAttribute.of("level", 8).value
            IntegerValue(tag=2, value=8)
        """
        return cls(key=key, value=to_variant(value))

    @property
    def plain_value(self) -> Any:
        """The wrapped Python value, or None for an unknown kind."""
        return None if self.value is None else self.value.value


class ItemAttributes(AttributeModel):
    """Attributes persisted for a single item.

    Fields not present in the decoded stream keep their zero/empty default.
    ``attribute_order`` lists the attribute codes exactly as they were
    encountered; encode() replays it to reproduce the original byte stream.
    ``custom_attribute_blocks`` holds the entry count of each custom
    attributes block in stream order, so repeated blocks are split back
    the way they were read.

    Example:
        >>> item = decode(bytes.fromhex("0F05"))
        >>> item.count, item.attribute_order
        (5, [15])
        >>> item.count = 7
        >>> encode(item).hex()
        '0f07'
    """

    name: Optional[str] = None
    count: int = Field(default=0, ge=0, le=0xFF)
    charges: int = Field(default=0, ge=0, le=0xFFFF)
    wrap_id: int = Field(default=0, ge=0, le=0xFFFF)
    text: Optional[str] = None
    written_by: Optional[str] = None
    written_date: Optional[datetime] = None
    custom_attributes: list[CustomAttribute] = Field(default_factory=list)
    attack: int = Field(default=0, ge=-(1 << 31), le=(1 << 31) - 1)
    store_item: int = Field(default=0, ge=0, le=0xFF)
    soul_owner: Optional[str] = None
    custom_attribute_blocks: list[int] = Field(default_factory=list)
    attribute_order: list[int] = Field(default_factory=list)

    @field_validator("written_date")
    @classmethod
    def _normalize_written_date(cls, value: Optional[datetime]) -> Optional[datetime]:
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    @field_validator("custom_attribute_blocks")
    @classmethod
    def _check_custom_attribute_blocks(cls, value: list[int]) -> list[int]:
        for size in value:
            if size < 0:
                raise ValueError(f"custom attribute block size must be >= 0, got {size}")
        return value

    @field_validator("attribute_order")
    @classmethod
    def _check_attribute_order(cls, value: list[int]) -> list[int]:
        for code in value:
            if not 0 < code <= 0xFF:
                raise ValueError(f"attribute code must be 1-255, got {code}")
        return value

    def custom_attribute(self, key: str) -> Any:
        """Return the plain value of the last custom attribute named key.

        Raises:
            KeyError: If no custom attribute has that key
        """
        for attribute in reversed(self.custom_attributes):
            if attribute.key == key:
                return attribute.plain_value
        raise KeyError(key)
