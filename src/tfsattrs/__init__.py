"""tfsattrs: Item Attribute Stream Codec

A Python library for decoding and re-encoding the tag-length-value attribute
stream a game server persists for each item: name, inscribed text, charges,
custom key/value attributes and so on.

Key Features:
- Pydantic-based item attribute model
- Order-preserving decode for byte-exact re-encoding
- Hex-string helpers and JSON dumps for debugging

Quick Start:
    >>> from tfsattrs import decode, encode
    >>>
    >>> item = decode(bytes.fromhex("0F1E241E00"))
    >>> item.count, item.wrap_id
    (30, 30)
    >>> encode(item).hex().upper()
    '0F1E241E00'
"""

from __future__ import annotations

__version__ = "0.1.0"

from .codec import ATTRIBUTE_TABLE, END_OF_ATTRIBUTES, AttributeCode, PayloadKind, decode, encode
from .config import CodecConfig
from .exceptions import (
    DecodeError,
    EncodeError,
    FramingError,
    TfsAttrsError,
    TruncatedPayloadError,
    UnrecognizedAttributeError,
    UnrepresentableValueError,
    UnsupportedEncodeError,
)
from .framing import decode_hex, encode_hex, from_hex, to_hex
from .models import (
    BooleanValue,
    CustomAttribute,
    FloatValue,
    IntegerValue,
    ItemAttributes,
    TextValue,
    VariantTag,
    VariantValue,
)
from .visualize import pretty_visualize, to_dict, visualize

__all__ = [
    # Core API
    "decode",
    "encode",
    "CodecConfig",
    # Attribute table
    "AttributeCode",
    "PayloadKind",
    "ATTRIBUTE_TABLE",
    "END_OF_ATTRIBUTES",
    # Models
    "ItemAttributes",
    "CustomAttribute",
    "VariantTag",
    "VariantValue",
    "TextValue",
    "IntegerValue",
    "FloatValue",
    "BooleanValue",
    # Exceptions
    "TfsAttrsError",
    "DecodeError",
    "EncodeError",
    "TruncatedPayloadError",
    "UnrecognizedAttributeError",
    "UnsupportedEncodeError",
    "UnrepresentableValueError",
    "FramingError",
    # Hex strings
    "to_hex",
    "from_hex",
    "decode_hex",
    "encode_hex",
    # Debug dumps
    "to_dict",
    "visualize",
    "pretty_visualize",
    # Version
    "__version__",
]
