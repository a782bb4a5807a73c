"""Attribute stream encoder.

This module provides the encode() function that serializes an ItemAttributes
record back into the persisted attribute stream format.
"""

from __future__ import annotations

import logging
from typing import Iterator, Optional

from ..config import DEFAULT_CONFIG, CodecConfig
from ..exceptions import EncodeError, UnsupportedEncodeError
from ..models.record import CustomAttribute, ItemAttributes
from .attributes import END_OF_ATTRIBUTES, AttributeCode, AttributeSpec, PayloadKind, attribute_name, lookup
from .bytepack import BytePacker
from .variant import write_variant

logger = logging.getLogger(__name__)


def encode(item: ItemAttributes, config: Optional[CodecConfig] = None) -> bytes:
    """Encode an item's attributes to the persisted stream format.

    Attributes are written in the order recorded in ``item.attribute_order``,
    using the item's current field values. Decoding a stream and encoding the
    result reproduces the input exactly, except that depot ids are written
    as zero and rune charges (code 12) are written as count (code 15).

    Args:
        item: ItemAttributes to encode
        config: Codec configuration (defaults to CodecConfig())

    Returns:
        Encoded attribute bytes

    Raises:
        UnrecognizedAttributeError: If attribute_order holds a code with no handler
        UnsupportedEncodeError: If attribute_order holds a decode-only code (soul owner)
        EncodeError: If a field value can't be written

    Examples:
        ```python
        from tfsattrs import decode, encode

        item = decode(data)
        item.name = "blessed sword"
        data = encode(item)
        ```
    """
    config = config or DEFAULT_CONFIG
    packer = BytePacker()
    custom_blocks = iter(_split_custom_attributes(item))

    for code in item.attribute_order:
        spec = lookup(code)
        if not spec.encodable:
            raise UnsupportedEncodeError(code)

        packer.write_uint(spec.encode_as, 1)
        try:
            _encode_attribute(packer, spec, item, config, custom_blocks)
        except ValueError as e:
            raise EncodeError(f"Attribute {attribute_name(code)}: {e}") from e

        logger.debug("Encoded attribute %s as %s", attribute_name(code), spec.encode_as.name)

    if config.append_terminator:
        packer.write_uint(END_OF_ATTRIBUTES, 1)

    return packer.to_bytes()


def _encode_attribute(
    packer: BytePacker,
    spec: AttributeSpec,
    item: ItemAttributes,
    config: CodecConfig,
    custom_blocks: Iterator[list[CustomAttribute]],
) -> None:
    """Write one attribute payload from the item's field values.

    Each custom attributes code takes the next slice from custom_blocks.

    Raises:
        EncodeError: If a required value is missing
        ValueError: If a value doesn't fit its wire width
    """
    kind = spec.kind

    if kind is PayloadKind.FILLER:
        packer.write_bytes(bytes(spec.size or 0))
        return

    if spec.field is None:
        raise EncodeError(f"Attribute {attribute_name(spec.code)}: no field to write")
    value = getattr(item, spec.field)

    if kind is PayloadKind.UINT8:
        packer.write_uint(value, 1)
    elif kind is PayloadKind.UINT16:
        packer.write_uint(value, 2)
    elif kind is PayloadKind.INT32:
        packer.write_int(value, 4)
    elif kind is PayloadKind.TEXT:
        # Absent text is written as empty text
        packer.write_text(value or "", config.text_encoding)
    elif kind is PayloadKind.TIMESTAMP:
        if value is None:
            raise EncodeError(f"Attribute {attribute_name(spec.code)}: {spec.field} is not set")
        packer.write_timestamp(value)
    elif kind is PayloadKind.CUSTOM_ATTRIBUTES:
        block = next(custom_blocks)
        packer.write_uint(len(block), 8)
        for attribute in block:
            packer.write_text(attribute.key, config.text_encoding)
            write_variant(packer, attribute.value, config.text_encoding)
    else:
        raise EncodeError(f"Attribute {attribute_name(spec.code)}: unsupported payload kind {kind}")


def _split_custom_attributes(item: ItemAttributes) -> list[list[CustomAttribute]]:
    """Split the item's custom attributes into one slice per recorded block.

    Every block but the last takes its entry count from
    ``custom_attribute_blocks`` (zero when unrecorded), clamped to the entries
    left. The last block takes everything remaining, including entries a
    caller appended after decoding.
    """
    occurrences = sum(1 for code in item.attribute_order if code == AttributeCode.CUSTOM_ATTRIBUTES)
    entries = item.custom_attributes
    sizes = item.custom_attribute_blocks

    blocks: list[list[CustomAttribute]] = []
    start = 0
    for index in range(occurrences):
        if index == occurrences - 1:
            end = len(entries)
        elif index < len(sizes):
            end = min(start + sizes[index], len(entries))
        else:
            end = start
        blocks.append(entries[start:end])
        start = end
    return blocks
