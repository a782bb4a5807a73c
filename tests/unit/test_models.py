"""Unit tests for the item attribute models."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from tfsattrs import (
    BooleanValue,
    CustomAttribute,
    FloatValue,
    IntegerValue,
    ItemAttributes,
    TextValue,
)
from tfsattrs.codec.variant import to_variant as codec_to_variant
from tfsattrs.models.values import to_variant


class TestItemAttributes:
    """Test ItemAttributes validation."""

    def test_defaults(self) -> None:
        """Test fields default to zero/empty."""
        item = ItemAttributes()

        assert item.name is None
        assert item.count == 0
        assert item.custom_attributes == []
        assert item.attribute_order == []

    @pytest.mark.parametrize(
        "field, value",
        [
            ("count", 256),
            ("count", -1),
            ("charges", 65536),
            ("wrap_id", -1),
            ("attack", 2**31),
            ("store_item", 300),
        ],
    )
    def test_out_of_range_assignment(self, field: str, value: int) -> None:
        """Test assignments are validated against the wire width."""
        item = ItemAttributes()

        with pytest.raises(ValidationError):
            setattr(item, field, value)

    def test_extra_fields_forbidden(self) -> None:
        """Test unknown fields are rejected."""
        with pytest.raises(ValidationError):
            ItemAttributes(description="nope")

    def test_attribute_order_range(self) -> None:
        """Test attribute codes must fit a byte and exclude the sentinel."""
        with pytest.raises(ValidationError):
            ItemAttributes(attribute_order=[0])

        with pytest.raises(ValidationError):
            ItemAttributes(attribute_order=[256])

    def test_custom_attribute_blocks_non_negative(self) -> None:
        """Test custom attribute block sizes can't be negative."""
        with pytest.raises(ValidationError):
            ItemAttributes(custom_attribute_blocks=[1, -1])

    def test_written_date_naive_is_utc(self) -> None:
        """Test naive datetimes are taken as UTC."""
        item = ItemAttributes(written_date=datetime(2020, 10, 28, 0, 29, 45))

        assert item.written_date == datetime(2020, 10, 28, 0, 29, 45, tzinfo=timezone.utc)
        assert item.written_date.tzinfo == timezone.utc

    def test_written_date_normalized_to_utc(self) -> None:
        """Test aware datetimes are converted to UTC."""
        local = datetime(2020, 10, 27, 21, 29, 45, tzinfo=timezone(timedelta(hours=-3)))
        item = ItemAttributes(written_date=local)

        assert item.written_date.tzinfo == timezone.utc
        assert item.written_date.hour == 0

    def test_custom_attribute_lookup(self) -> None:
        """Test custom_attribute() returns the last matching value."""
        item = ItemAttributes(
            custom_attributes=[
                CustomAttribute.of("level", 1),
                CustomAttribute.of("upgrade", "{}"),
                CustomAttribute.of("level", 8),
            ]
        )

        assert item.custom_attribute("level") == 8
        assert item.custom_attribute("upgrade") == "{}"

        with pytest.raises(KeyError):
            item.custom_attribute("missing")


class TestCustomAttribute:
    """Test custom attribute values."""

    def test_of(self) -> None:
        """Test building from plain values."""
        assert CustomAttribute.of("a", "x").value == TextValue(value="x")
        assert CustomAttribute.of("a", 2).value == IntegerValue(value=2)
        assert CustomAttribute.of("a", 0.5).value == FloatValue(value=0.5)
        assert CustomAttribute.of("a", False).value == BooleanValue(value=False)

    def test_discriminated_by_tag(self) -> None:
        """Test values validate from dicts by tag."""
        attribute = CustomAttribute.model_validate({"key": "a", "value": {"tag": 2, "value": 7}})

        assert attribute.value == IntegerValue(value=7)

    def test_unknown_tag_rejected(self) -> None:
        """Test only the four tags validate."""
        with pytest.raises(ValidationError):
            CustomAttribute.model_validate({"key": "a", "value": {"tag": 5, "value": 7}})

    def test_integer_range(self) -> None:
        """Test integer values are limited to signed 64 bits."""
        with pytest.raises(ValidationError):
            IntegerValue(value=2**63)

    def test_plain_value(self) -> None:
        """Test plain_value unwraps, and is None for an absent value."""
        assert CustomAttribute.of("a", 3).plain_value == 3
        assert CustomAttribute(key="a").plain_value is None

    def test_to_variant_shared_with_codec(self) -> None:
        """Test the codec re-exports the model-level value wrapper."""
        assert codec_to_variant is to_variant
        assert to_variant(True) == BooleanValue(value=True)
