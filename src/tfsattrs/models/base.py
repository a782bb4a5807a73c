"""Base model class and tfsattrs-specific Pydantic configuration."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class AttributeModel(BaseModel):
    """Base class for all tfsattrs models.

    Assignments are validated, so a record edited by a caller before
    re-encoding can never hold a value that doesn't fit its wire width.
    """

    model_config = ConfigDict(
        # Lax validation (e.g. 5.0 -> 5) like the rest of the codec
        strict=False,
        # Validate on assignment
        validate_assignment=True,
        # Forbid extra fields not defined in schema
        extra="forbid",
    )
