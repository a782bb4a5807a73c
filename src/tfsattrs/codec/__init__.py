"""Item attribute stream codec.

This module provides decoding and encoding of the tag-length-value attribute
stream persisted for each item.
"""

from __future__ import annotations

from .attributes import ATTRIBUTE_TABLE, END_OF_ATTRIBUTES, AttributeCode, AttributeSpec, PayloadKind
from .decoder import decode
from .encoder import encode

__all__ = [
    "encode",
    "decode",
    "AttributeCode",
    "AttributeSpec",
    "PayloadKind",
    "ATTRIBUTE_TABLE",
    "END_OF_ATTRIBUTES",
]
