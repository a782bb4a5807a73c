#!/usr/bin/env python3
"""Basic usage example for tfsattrs.

This example demonstrates:
1. Decoding a stored attribute stream
2. Inspecting and editing the decoded item
3. Re-encoding it in the original attribute order
4. Dumping it as JSON for debugging
"""

from __future__ import annotations

from tfsattrs import CustomAttribute, decode_hex, encode_hex, pretty_visualize

STORED = (
    "160100181C0061646F726E6564207370656369616C69737420656D626C656D202B38220200000000000000"
    "05006C6576656C020800000000000000110072756E65656D626C656D63686172676573028813000000000000"
)


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("tfsattrs Basic Usage Example")
    print("=" * 60)
    print()

    print("1. Decoding a stored item...")
    item = decode_hex(STORED)
    print(f"   Name: {item.name}")
    print(f"   Charges: {item.charges}")
    print(f"   Attribute order: {item.attribute_order}")
    for attribute in item.custom_attributes:
        print(f"   Custom {attribute.key} = {attribute.plain_value!r}")
    print()

    print("2. Re-encoding unchanged...")
    reencoded = encode_hex(item)
    print(f"   Identical: {reencoded == STORED}")
    print()

    print("3. Upgrading the emblem...")
    item.name = "adorned specialist emblem +9"
    item.custom_attributes[0] = CustomAttribute.of("level", 9)
    print(f"   Encoded: {encode_hex(item)}")
    print()

    print("4. Debug dump:")
    print(pretty_visualize(item))


if __name__ == "__main__":
    main()
