"""Attribute stream decoder.

This module provides the decode() function that turns a persisted item
attribute stream into an ItemAttributes record.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from pydantic import ValidationError

from ..config import DEFAULT_CONFIG, CodecConfig
from ..exceptions import DecodeError, TruncatedPayloadError
from ..models.record import CustomAttribute, ItemAttributes
from .attributes import END_OF_ATTRIBUTES, AttributeSpec, PayloadKind, attribute_name, lookup
from .bytepack import ByteUnpacker
from .variant import read_variant

logger = logging.getLogger(__name__)


def decode(data: bytes, config: Optional[CodecConfig] = None) -> ItemAttributes:
    """Decode an item attribute stream.

    The stream is read one attribute at a time until the input is exhausted
    or the end-of-attributes sentinel (0) is read. Every other code is
    appended to ``attribute_order`` before its payload is read, so encode()
    can replay the stream in its original order.

    Args:
        data: Raw attribute bytes
        config: Codec configuration (defaults to CodecConfig())

    Returns:
        Decoded ItemAttributes

    Raises:
        UnrecognizedAttributeError: If an attribute code has no handler
        TruncatedPayloadError: If an attribute payload is cut short
        DecodeError: If a payload can't be interpreted

    Examples:
        ```python
        from tfsattrs import decode

        item = decode(bytes.fromhex("0F05"))
        assert item.count == 5
        assert item.attribute_order == [15]
        ```
    """
    config = config or DEFAULT_CONFIG
    unpacker = ByteUnpacker(data)

    field_values: dict[str, Any] = {}
    attribute_order: list[int] = []

    while unpacker.bytes_remaining() > 0:
        offset = unpacker.position()
        code = unpacker.read_uint(1)
        if code == END_OF_ATTRIBUTES:
            break

        attribute_order.append(code)
        spec = lookup(code, offset)

        try:
            _decode_attribute(unpacker, spec, field_values, config)
        except IndexError as e:
            raise TruncatedPayloadError(code, offset, str(e)) from e
        except UnicodeDecodeError as e:
            raise DecodeError(
                f"Attribute {attribute_name(code)} at offset {offset}: "
                f"text is not valid {config.text_encoding}: {e}"
            ) from e

        logger.debug("Decoded attribute %s at offset %d", attribute_name(code), offset)

    field_values["attribute_order"] = attribute_order

    try:
        return ItemAttributes(**field_values)
    except ValidationError as e:
        raise DecodeError(f"Failed to construct ItemAttributes: {e}") from e


def _decode_attribute(
    unpacker: ByteUnpacker,
    spec: AttributeSpec,
    field_values: dict[str, Any],
    config: CodecConfig,
) -> None:
    """Read one attribute payload into field_values.

    Single-valued fields are overwritten by later occurrences; custom
    attribute entries accumulate across blocks, and each block's entry
    count is recorded in custom_attribute_blocks.

    Raises:
        IndexError: If the payload is truncated
    """
    kind = spec.kind

    if kind is PayloadKind.FILLER:
        unpacker.skip(spec.size or 0)
        return

    if spec.field is None:
        raise DecodeError(f"Attribute {attribute_name(spec.code)}: no field to populate")

    if kind is PayloadKind.CUSTOM_ATTRIBUTES:
        entries = _decode_custom_attributes(unpacker, config)
        field_values.setdefault("custom_attributes", []).extend(entries)
        field_values.setdefault("custom_attribute_blocks", []).append(len(entries))
        return

    if kind is PayloadKind.UINT8:
        value: Any = unpacker.read_uint(1)
    elif kind is PayloadKind.UINT16:
        value = unpacker.read_uint(2)
    elif kind is PayloadKind.INT32:
        value = unpacker.read_int(4)
    elif kind is PayloadKind.TEXT:
        value = unpacker.read_text(config.text_encoding)
    elif kind is PayloadKind.TIMESTAMP:
        value = unpacker.read_timestamp()
    else:
        raise DecodeError(f"Attribute {attribute_name(spec.code)}: unsupported payload kind {kind}")

    field_values[spec.field] = value


def _decode_custom_attributes(unpacker: ByteUnpacker, config: CodecConfig) -> list[CustomAttribute]:
    """Read a custom attributes block: uint64 count, then (key, value) pairs."""
    count = unpacker.read_uint(8)

    entries: list[CustomAttribute] = []
    for _ in range(count):
        key = unpacker.read_text(config.text_encoding)
        value = read_variant(unpacker, config.text_encoding)
        entries.append(CustomAttribute(key=key, value=value))
    return entries
