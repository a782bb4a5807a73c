"""Tests for JSON dumps of item attributes."""

from __future__ import annotations

import json
from datetime import datetime, timezone

from tfsattrs import CustomAttribute, ItemAttributes, decode, pretty_visualize, to_dict, visualize


class TestVisualize:
    """Test visualization output."""

    def test_omits_defaults_and_order(self) -> None:
        """Test only set fields appear and attribute_order never does."""
        item = decode(bytes.fromhex("0F05"))

        assert to_dict(item) == {"count": 5}

    def test_omits_explicit_empty_values(self) -> None:
        """Test empty text decoded from the stream is omitted."""
        item = decode(b"\x18\x00\x00\x0f\x00")

        assert to_dict(item) == {}

    def test_custom_attributes_flattened(self, emblem_stream: bytes) -> None:
        """Test custom attributes show plain values in order."""
        data = to_dict(decode(emblem_stream))

        assert data == {
            "name": "adorned specialist emblem +8",
            "charges": 1,
            "custom_attributes": [
                {"key": "level", "value": 8},
                {"key": "runeemblemcharges", "value": 5000},
            ],
        }

    def test_absent_custom_value(self) -> None:
        """Test an absent custom value shows as null."""
        item = ItemAttributes(custom_attributes=[CustomAttribute(key="k")])

        assert to_dict(item) == {"custom_attributes": [{"key": "k", "value": None}]}

    def test_written_date_iso(self) -> None:
        """Test written date is rendered as ISO-8601."""
        item = ItemAttributes(written_date=datetime(2020, 10, 28, tzinfo=timezone.utc))

        assert to_dict(item)["written_date"].startswith("2020-10-28T00:00:00")

    def test_visualize_compact(self) -> None:
        """Test the compact dump is single-line JSON."""
        output = visualize(decode(bytes.fromhex("0F05")))

        assert output == '{"count": 5}'

    def test_pretty_visualize(self, text_stream: bytes) -> None:
        """Test the pretty dump is tab-indented and parses back."""
        output = pretty_visualize(decode(text_stream))

        assert "\n\t" in output
        assert json.loads(output)["text"] == "Knekro manda y no tu panda\nsd"

    def test_order_independent(self) -> None:
        """Test the dump doesn't depend on the attribute order."""
        first = decode(bytes.fromhex("0F05 241E00"))
        second = decode(bytes.fromhex("241E00 0F05"))

        assert to_dict(first) == to_dict(second)
