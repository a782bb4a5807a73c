"""Attribute code table.

This module maps each one-byte attribute code to the shape of its payload and
the item field it populates. The format names 38 codes but only the ones in
ATTRIBUTE_TABLE have a handler; every other code is a hard failure.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional

from ..exceptions import UnrecognizedAttributeError

END_OF_ATTRIBUTES = 0


class AttributeCode(enum.IntEnum):
    """Named attribute codes of the item attribute format."""

    DESCRIPTION = 1
    EXT_FILE = 2
    TILE_FLAGS = 3
    ACTION_ID = 4
    UNIQUE_ID = 5
    TEXT = 6
    DESC = 7
    TELE_DEST = 8
    ITEM = 9
    DEPOT_ID = 10
    EXT_SPAWN_FILE = 11
    RUNE_CHARGES = 12
    EXT_HOUSE_FILE = 13
    HOUSEDOORID = 14
    COUNT = 15
    DURATION = 16
    DECAYING_STATE = 17
    WRITTEN_DATE = 18
    WRITTEN_BY = 19
    SLEEPERGUID = 20
    SLEEPSTART = 21
    CHARGES = 22
    CONTAINER_ITEMS = 23
    NAME = 24
    ARTICLE = 25
    PLURALNAME = 26
    WEIGHT = 27
    ATTACK = 28
    DEFENSE = 29
    EXTRADEFENSE = 30
    ARMOR = 31
    HITCHANCE = 32
    SHOOTRANGE = 33
    CUSTOM_ATTRIBUTES = 34
    DECAYTO = 35
    WRAP_ID = 36
    STORE_ITEM = 37
    SOUL_OWNER = 38


class PayloadKind(enum.Enum):
    """Wire shape of an attribute payload."""

    UINT8 = "uint8"
    UINT16 = "uint16"
    INT32 = "int32"
    TEXT = "text"
    TIMESTAMP = "timestamp"
    CUSTOM_ATTRIBUTES = "custom_attributes"
    FILLER = "filler"


@dataclass(frozen=True)
class AttributeSpec:
    """Handler description for one supported attribute code.

    Attributes:
        code: Attribute code read from the stream
        field: ItemAttributes field populated by the payload (None for filler)
        kind: Payload shape
        size: Fixed payload size in bytes, None for variable-length payloads
        encode_as: Code written back on encode
        encodable: Whether an encode path exists
    """

    code: AttributeCode
    field: Optional[str]
    kind: PayloadKind
    size: Optional[int]
    encode_as: AttributeCode
    encodable: bool = True


def _spec(
    code: AttributeCode,
    field: Optional[str],
    kind: PayloadKind,
    size: Optional[int] = None,
    *,
    encode_as: Optional[AttributeCode] = None,
    encodable: bool = True,
) -> AttributeSpec:
    return AttributeSpec(
        code=code,
        field=field,
        kind=kind,
        size=size,
        encode_as=encode_as if encode_as is not None else code,
        encodable=encodable,
    )


ATTRIBUTE_TABLE: dict[AttributeCode, AttributeSpec] = {
    spec.code: spec
    for spec in (
        _spec(AttributeCode.TEXT, "text", PayloadKind.TEXT),
        # Depot id is read and thrown away; it is always written back as zero.
        _spec(AttributeCode.DEPOT_ID, None, PayloadKind.FILLER, 2),
        # Rune charges share the count field and are normalized to COUNT.
        _spec(
            AttributeCode.RUNE_CHARGES,
            "count",
            PayloadKind.UINT8,
            1,
            encode_as=AttributeCode.COUNT,
        ),
        _spec(AttributeCode.COUNT, "count", PayloadKind.UINT8, 1),
        _spec(AttributeCode.WRITTEN_DATE, "written_date", PayloadKind.TIMESTAMP, 4),
        _spec(AttributeCode.WRITTEN_BY, "written_by", PayloadKind.TEXT),
        _spec(AttributeCode.CHARGES, "charges", PayloadKind.UINT16, 2),
        _spec(AttributeCode.NAME, "name", PayloadKind.TEXT),
        _spec(AttributeCode.ATTACK, "attack", PayloadKind.INT32, 4),
        _spec(AttributeCode.CUSTOM_ATTRIBUTES, "custom_attributes", PayloadKind.CUSTOM_ATTRIBUTES),
        _spec(AttributeCode.WRAP_ID, "wrap_id", PayloadKind.UINT16, 2),
        _spec(AttributeCode.STORE_ITEM, "store_item", PayloadKind.UINT8, 1),
        _spec(AttributeCode.SOUL_OWNER, "soul_owner", PayloadKind.TEXT, encodable=False),
    )
}


def lookup(code: int, offset: Optional[int] = None) -> AttributeSpec:
    """Return the handler description for an attribute code.

    Args:
        code: Raw attribute code
        offset: Byte offset of the code in the input, for error reporting

    Returns:
        AttributeSpec for the code

    Raises:
        UnrecognizedAttributeError: If the code has no handler
    """
    try:
        return ATTRIBUTE_TABLE[AttributeCode(code)]
    except (ValueError, KeyError):
        raise UnrecognizedAttributeError(code, offset) from None


def attribute_name(code: int) -> str:
    """Return the symbolic name of a code, or the number for unnamed codes."""
    try:
        return AttributeCode(code).name
    except ValueError:
        return str(code)
