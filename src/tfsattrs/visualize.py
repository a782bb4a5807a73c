"""Human-readable JSON dumps of decoded item attributes.

The dump is a projection of the record for debugging: fields at their
zero/empty default are omitted and the attribute order and block layout are never shown.
"""

from __future__ import annotations

import json
from typing import Any

from .models.record import ItemAttributes

_HIDDEN_FIELDS = {"attribute_order", "custom_attribute_blocks"}


def to_dict(item: ItemAttributes) -> dict[str, Any]:
    """Project an item onto a JSON-compatible dict.

    Custom attributes are flattened to ``{"key": ..., "value": ...}`` with the
    plain value (None for an unknown kind).
    """
    data = item.model_dump(mode="json", exclude_defaults=True, exclude=_HIDDEN_FIELDS)
    for name in list(data):
        # Explicitly set empty values are still "empty"
        if data[name] in ("", 0, [], None):
            del data[name]

    if item.custom_attributes:
        data["custom_attributes"] = [
            {"key": attribute.key, "value": attribute.plain_value}
            for attribute in item.custom_attributes
        ]
    return data


def visualize(item: ItemAttributes) -> str:
    """Return a compact JSON dump of the item."""
    return json.dumps(to_dict(item), ensure_ascii=False)


def pretty_visualize(item: ItemAttributes) -> str:
    """Return a tab-indented JSON dump of the item."""
    return json.dumps(to_dict(item), ensure_ascii=False, indent="\t")
