"""Text framing utilities for tfsattrs.

This module provides hex-string wrapping of attribute streams, used to carry
them through text channels such as fixtures and logs.
"""

from __future__ import annotations

from .hexstring import decode_hex, encode_hex, from_hex, to_hex

__all__ = [
    "to_hex",
    "from_hex",
    "decode_hex",
    "encode_hex",
]
