"""Base model for snapshot payloads.

Every record model inherits from :class:`PostNLBaseModel` which provides:

* immutability, so annotated copies never alias the parsed record
* a ``model_validator(mode="before")`` that strips placeholder values
  (``""``, ``"--"``, NaN) so the field default is used
* a ``raw`` dict that captures the original payload
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, model_validator

from pypostnl.ingestion.normalize import is_meaningful, parse_timestamp

PostNLTimestamp = Annotated[datetime | None, BeforeValidator(parse_timestamp)]
"""Annotated type that coerces ISO strings and epoch values to datetimes (``None`` when unparsable)."""


class PostNLBaseModel(BaseModel):
    """Base for records read from snapshot attributes.

    Handles:
    * placeholder values → dropped so the field default is used instead
    * stashes the original payload dict in ``raw``
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    raw: dict[str, Any] = Field(default_factory=dict)
    """Original payload dict."""

    @staticmethod
    def _clean_dict(values: dict[str, Any]) -> dict[str, Any]:
        return {key: value for key, value in values.items() if is_meaningful(value)}

    @model_validator(mode="before")
    @classmethod
    def _clean_values(cls, values: Any) -> Any:
        """Strip placeholder values and stash the raw payload."""
        if not isinstance(values, dict):
            return values
        cleaned = PostNLBaseModel._clean_dict(values)
        # Keep an explicitly passed raw= (e.g. model_copy or kwargs construction).
        if "raw" not in values:
            cleaned["raw"] = dict(values)
        return cleaned
