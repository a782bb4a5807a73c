"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture
def text_stream() -> bytes:
    """Inscribed item: text with an embedded newline, written date and author."""
    return bytes.fromhex(
        "061D004B6E656B726F206D616E64612079206E6F2074752070616E64610A7364"
        "1279BB985F"
        "130600416C7661726F"
    )


@pytest.fixture
def emblem_stream() -> bytes:
    """Named item with charges and two custom attributes."""
    return bytes.fromhex(
        "160100"
        "181C0061646F726E6564207370656369616C69737420656D626C656D202B38"
        "220200000000000000"
        "05006C6576656C020800000000000000"
        "110072756E65656D626C656D63686172676573028813000000000000"
    )
