"""Configuration for the attribute codec.

This module provides the configuration dataclass shared by decode() and encode().
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass


@dataclass
class CodecConfig:
    """Configuration for decoding and encoding attribute streams.

    Attributes:
        text_encoding: Codec used to map length-prefixed text bytes to str
            (default "latin-1"). latin-1 maps every byte value, so historical
            data always round-trips unchanged regardless of what the server
            actually stored.

        append_terminator: If True, encode() appends the end-of-attributes
            sentinel byte (0) after the last attribute (default False).
            Streams both with and without the sentinel decode identically.

    Examples:
        ```python
        from tfsattrs import CodecConfig, decode, encode

        item = decode(data, CodecConfig(text_encoding="cp1252"))
        data = encode(item, CodecConfig(append_terminator=True))
        ```
    """

    text_encoding: str = "latin-1"
    append_terminator: bool = False

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        try:
            codecs.lookup(self.text_encoding)
        except LookupError as err:
            raise ValueError(f"Unknown text_encoding: {self.text_encoding!r}") from err


DEFAULT_CONFIG = CodecConfig()
