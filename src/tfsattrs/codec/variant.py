"""Custom attribute value codec.

Each value is written as a one-byte tag followed by the tag's fixed encoding:

- 1 text: uint16 length + bytes
- 2 integer: 8-byte signed little-endian
- 3 float: 8-byte IEEE-754 little-endian
- 4 boolean: 1 byte, nonzero is True
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from ..exceptions import UnrepresentableValueError
from ..models.values import (
    BooleanValue,
    FloatValue,
    IntegerValue,
    TextValue,
    VariantTag,
    VariantValue,
    to_variant,
)
from .bytepack import BytePacker, ByteUnpacker

logger = logging.getLogger(__name__)


def read_variant(unpacker: ByteUnpacker, encoding: str = "latin-1") -> Optional[VariantValue]:
    """Read a tagged custom attribute value.

    An unknown tag is tolerated: it yields None and no payload bytes are
    consumed, since malformed blocks exist in stored data.

    Args:
        unpacker: ByteUnpacker positioned at the tag byte
        encoding: Codec for text values

    Returns:
        The decoded value, or None for an unknown tag

    Raises:
        IndexError: If the tag or its payload is truncated
    """
    offset = unpacker.position()
    tag = unpacker.read_uint(1)

    if tag == VariantTag.TEXT:
        return TextValue(value=unpacker.read_text(encoding))
    if tag == VariantTag.INTEGER:
        return IntegerValue(value=unpacker.read_int(8))
    if tag == VariantTag.FLOAT:
        return FloatValue(value=unpacker.read_float64())
    if tag == VariantTag.BOOLEAN:
        return BooleanValue(value=unpacker.read_bool())

    logger.warning("Unknown custom attribute value tag %d at offset %d", tag, offset)
    return None


def write_variant(packer: BytePacker, value: Any, encoding: str = "latin-1") -> None:
    """Write a tagged custom attribute value.

    Args:
        packer: BytePacker to write to
        value: One of TextValue, IntegerValue, FloatValue or BooleanValue
        encoding: Codec for text values

    Raises:
        UnrepresentableValueError: If value is not one of the four kinds
        ValueError: If a text value can't be encoded
    """
    if isinstance(value, TextValue):
        packer.write_uint(VariantTag.TEXT, 1)
        packer.write_text(value.value, encoding)
    elif isinstance(value, IntegerValue):
        packer.write_uint(VariantTag.INTEGER, 1)
        packer.write_int(value.value, 8)
    elif isinstance(value, FloatValue):
        packer.write_uint(VariantTag.FLOAT, 1)
        packer.write_float64(value.value)
    elif isinstance(value, BooleanValue):
        packer.write_uint(VariantTag.BOOLEAN, 1)
        packer.write_bool(value.value)
    else:
        raise UnrepresentableValueError(
            f"Custom attribute value must be text, integer, float or boolean, got {value!r}"
        )


__all__ = ["read_variant", "write_variant", "to_variant"]
