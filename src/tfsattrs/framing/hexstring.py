"""Hex-string wrapping of attribute streams.

The codec itself only deals in bytes; these helpers convert to and from the
uppercase hex text used by fixtures and database dumps.
"""

from __future__ import annotations

import binascii
from typing import Optional

from ..codec.decoder import decode
from ..codec.encoder import encode
from ..config import CodecConfig
from ..exceptions import FramingError
from ..models.record import ItemAttributes


def to_hex(data: bytes, *, uppercase: bool = True) -> str:
    """Convert raw bytes to a hex string.

    Example:
        >>> to_hex(b"\\x0f\\x05")
        '0F05'
    """
    text = data.hex()
    return text.upper() if uppercase else text


def from_hex(text: str) -> bytes:
    """Convert a hex string to raw bytes.

    Whitespace is ignored and either letter case is accepted.

    Raises:
        FramingError: If the text is not valid hex
    """
    compact = "".join(text.split())
    try:
        return binascii.unhexlify(compact)
    except (binascii.Error, ValueError) as e:
        raise FramingError(f"Invalid hex string: {e}") from e


def decode_hex(text: str, config: Optional[CodecConfig] = None) -> ItemAttributes:
    """Decode an attribute stream given as a hex string.

    Raises:
        FramingError: If the text is not valid hex
        DecodeError: If the attribute stream is invalid
    """
    return decode(from_hex(text), config)


def encode_hex(item: ItemAttributes, config: Optional[CodecConfig] = None) -> str:
    """Encode an item's attributes and return them as an uppercase hex string.

    Raises:
        EncodeError: If the item can't be encoded
    """
    return to_hex(encode(item, config))
