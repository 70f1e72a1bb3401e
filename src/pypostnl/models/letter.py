"""Letter record model."""

from __future__ import annotations

from typing import Any

from pydantic import field_validator

from pypostnl.ingestion.normalize import safe_str
from pypostnl.models._base import PostNLBaseModel, PostNLTimestamp


class LetterRecord(PostNLBaseModel):
    """One scanned mail item from a source's ``letters`` attribute."""

    id: str | None = None
    """Letter identifier; falls back to the mapping key it was stored under."""

    status_message: str | None = None
    """Latest status line."""

    delivery_date: PostNLTimestamp = None
    """Delivery instant. Letters without one are never shown."""

    image: str | None = None
    """URL of the scanned envelope."""

    sender_name: str | None = None
    """Display name of the source the record was read from."""

    @field_validator("id", "status_message", "image", "sender_name", mode="before")
    @classmethod
    def _coerce_str(cls, value: Any) -> str | None:
        return safe_str(value)
