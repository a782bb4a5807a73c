"""Exception hierarchy for tfsattrs.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from TfsAttrsError for easy catching of any tfsattrs-specific error.
"""

from __future__ import annotations

from typing import Optional


class TfsAttrsError(Exception):
    """Base exception for all tfsattrs errors."""

    pass


class DecodeError(TfsAttrsError):
    """Raised when decoding an attribute stream fails.

    Examples:
        - Truncated payload (insufficient bytes)
        - Unrecognized attribute code
    """

    pass


class EncodeError(TfsAttrsError):
    """Raised when encoding an item's attributes fails.

    Examples:
        - Value out of range for its wire width
        - Attribute code with no encode path
        - Missing value for a recorded attribute
    """

    pass


class TruncatedPayloadError(DecodeError):
    """Raised when fewer bytes remain than an attribute payload requires.

    Attributes:
        code: Attribute code whose payload was being read
        offset: Byte offset of the attribute code in the input
    """

    def __init__(self, code: int, offset: int, detail: str = "") -> None:
        self.code = code
        self.offset = offset
        message = f"Truncated payload for attribute code {code} at offset {offset}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class UnrecognizedAttributeError(DecodeError, EncodeError):
    """Raised when an attribute code has no handler.

    Raised by both the decoder and the encoder, so it can be caught as either
    a DecodeError or an EncodeError.

    Attributes:
        code: The offending attribute code
        offset: Byte offset in the input (decode only, None on encode)
    """

    def __init__(self, code: int, offset: Optional[int] = None) -> None:
        self.code = code
        self.offset = offset
        message = f"Unrecognized attribute code: {code}"
        if offset is not None:
            message = f"{message} at offset {offset}"
        super().__init__(message)


class UnsupportedEncodeError(EncodeError):
    """Raised when a decode-only attribute code is asked to be encoded.

    Attributes:
        code: The attribute code without an encode path
    """

    def __init__(self, code: int) -> None:
        self.code = code
        super().__init__(f"Attribute code {code} can be decoded but not encoded")


class UnrepresentableValueError(EncodeError):
    """Raised when a custom attribute value is not one of the four wire kinds.

    This signals a caller bug: every value produced by the decoder is either
    one of the four kinds or absent, and absent values cannot be written.
    """

    pass


class FramingError(TfsAttrsError):
    """Raised when hex-text wrapping or unwrapping fails.

    Examples:
        - Odd number of hex digits
        - Non-hex characters
    """

    pass
