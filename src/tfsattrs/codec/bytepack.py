"""Byte-level packing and unpacking utilities.

This module provides the scalar codecs of the attribute format: little-endian
integers of width 1, 2, 4 or 8 bytes, IEEE-754 doubles, length-prefixed text
and 32-bit Unix timestamps.
"""

from __future__ import annotations

import struct
from datetime import datetime, timezone

_UINT_FORMATS = {1: "<B", 2: "<H", 4: "<I", 8: "<Q"}
_INT_FORMATS = {1: "<b", 2: "<h", 4: "<i", 8: "<q"}

MAX_TEXT_LENGTH = 0xFFFF
MAX_TIMESTAMP = 0xFFFFFFFF


def _format_for(formats: dict[int, str], width: int) -> str:
    try:
        return formats[width]
    except KeyError:
        raise ValueError(f"width must be 1, 2, 4 or 8 bytes, got {width}") from None


def to_utc(value: datetime) -> datetime:
    """Normalize a datetime to UTC, treating naive values as already UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class BytePacker:
    """Packs little-endian values into a byte buffer.

    Example:
        >>> packer = BytePacker()
        >>> packer.write_uint(15, width=1)
        >>> packer.write_text("sword")
        >>> data = packer.to_bytes()
    """

    def __init__(self) -> None:
        """Initialize an empty packer."""
        self._buffer = bytearray()

    def write_uint(self, value: int, width: int) -> None:
        """Write an unsigned integer of the given byte width.

        Args:
            value: Unsigned integer value to write
            width: Number of bytes (1, 2, 4 or 8)

        Raises:
            ValueError: If value doesn't fit in width bytes
        """
        fmt = _format_for(_UINT_FORMATS, width)
        max_value = (1 << (width * 8)) - 1
        if value < 0 or value > max_value:
            raise ValueError(f"Value {value} doesn't fit in {width} unsigned bytes (max: {max_value})")
        self._buffer.extend(struct.pack(fmt, value))

    def write_int(self, value: int, width: int) -> None:
        """Write a two's complement signed integer of the given byte width.

        Raises:
            ValueError: If value doesn't fit in width bytes
        """
        fmt = _format_for(_INT_FORMATS, width)
        min_value = -(1 << (width * 8 - 1))
        max_value = (1 << (width * 8 - 1)) - 1
        if value < min_value or value > max_value:
            raise ValueError(
                f"Value {value} doesn't fit in {width} signed bytes (range: {min_value} to {max_value})"
            )
        self._buffer.extend(struct.pack(fmt, value))

    def write_float64(self, value: float) -> None:
        """Write an IEEE-754 double."""
        self._buffer.extend(struct.pack("<d", value))

    def write_bool(self, value: bool) -> None:
        """Write a boolean as a single byte (1 or 0)."""
        self._buffer.append(1 if value else 0)

    def write_bytes(self, data: bytes) -> None:
        """Write raw bytes."""
        self._buffer.extend(data)

    def write_text(self, value: str, encoding: str = "latin-1") -> None:
        """Write a uint16 length followed by the encoded text bytes.

        Raises:
            ValueError: If the text can't be encoded or exceeds 65535 bytes
        """
        raw = value.encode(encoding)
        if len(raw) > MAX_TEXT_LENGTH:
            raise ValueError(f"Text of {len(raw)} bytes exceeds maximum of {MAX_TEXT_LENGTH}")
        self.write_uint(len(raw), 2)
        self._buffer.extend(raw)

    def write_timestamp(self, value: datetime) -> None:
        """Write a datetime as 32-bit unsigned Unix seconds (UTC).

        Raises:
            ValueError: If the timestamp falls outside 1970-01-01..2106-02-07
        """
        seconds = int(to_utc(value).timestamp())
        if seconds < 0 or seconds > MAX_TIMESTAMP:
            raise ValueError(f"Timestamp {value.isoformat()} doesn't fit in 32-bit Unix seconds")
        self.write_uint(seconds, 4)

    def byte_length(self) -> int:
        """Return the current number of bytes written."""
        return len(self._buffer)

    def to_bytes(self) -> bytes:
        """Return the packed bytes."""
        return bytes(self._buffer)


class ByteUnpacker:
    """Unpacks little-endian values from a byte buffer.

    Example:
        >>> unpacker = ByteUnpacker(data)
        >>> code = unpacker.read_uint(1)
        >>> name = unpacker.read_text()
    """

    def __init__(self, data: bytes) -> None:
        """Initialize an unpacker over the given data.

        Args:
            data: Byte buffer to unpack
        """
        self._data = memoryview(bytes(data))
        self._position = 0

    def _take(self, num_bytes: int) -> memoryview:
        if self._position + num_bytes > len(self._data):
            raise IndexError(
                f"Not enough bytes: need {num_bytes}, have {len(self._data) - self._position}"
            )
        chunk = self._data[self._position : self._position + num_bytes]
        self._position += num_bytes
        return chunk

    def read_uint(self, width: int) -> int:
        """Read an unsigned integer of the given byte width.

        Raises:
            ValueError: If width is not 1, 2, 4 or 8
            IndexError: If not enough bytes are available
        """
        fmt = _format_for(_UINT_FORMATS, width)
        return struct.unpack(fmt, self._take(width))[0]

    def read_int(self, width: int) -> int:
        """Read a two's complement signed integer of the given byte width.

        Raises:
            ValueError: If width is not 1, 2, 4 or 8
            IndexError: If not enough bytes are available
        """
        fmt = _format_for(_INT_FORMATS, width)
        return struct.unpack(fmt, self._take(width))[0]

    def read_float64(self) -> float:
        """Read an IEEE-754 double."""
        return struct.unpack("<d", self._take(8))[0]

    def read_bool(self) -> bool:
        """Read a single byte as a boolean (nonzero is True)."""
        return self._take(1)[0] != 0

    def read_bytes(self, num_bytes: int) -> bytes:
        """Read raw bytes.

        Raises:
            IndexError: If not enough bytes are available
        """
        return bytes(self._take(num_bytes))

    def skip(self, num_bytes: int) -> None:
        """Discard the next num_bytes bytes."""
        self._take(num_bytes)

    def read_text(self, encoding: str = "latin-1") -> str:
        """Read a uint16 length followed by that many text bytes.

        Raises:
            IndexError: If the length or the text bytes are truncated
            UnicodeDecodeError: If the bytes are invalid for the encoding
        """
        length = self.read_uint(2)
        return bytes(self._take(length)).decode(encoding)

    def read_timestamp(self) -> datetime:
        """Read 32-bit unsigned Unix seconds as an aware UTC datetime."""
        return datetime.fromtimestamp(self.read_uint(4), tz=timezone.utc)

    def bytes_remaining(self) -> int:
        """Return the number of unread bytes."""
        return len(self._data) - self._position

    def position(self) -> int:
        """Return the current read offset in bytes."""
        return self._position
