"""Shipment record model."""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, Field, field_validator

from pypostnl.ingestion.normalize import safe_str
from pypostnl.models._base import PostNLBaseModel, PostNLTimestamp


class ShipmentRecord(PostNLBaseModel):
    """One parcel as listed in a source's ``enroute`` or ``delivered`` attribute.

    Whether a shipment counts as delivered is decided by the list it was
    read from, not by the presence of ``delivery_date``.

    Parameters
    ----------
    key : str or None
        Barcode / tracking key.
    name : str or None
        Human readable shipment title.
    url : str or None
        Track-and-trace link.
    status_message : str or None
        Latest carrier status line.
    planned_date : datetime or None
        Planned delivery day.
    planned_from, planned_to : datetime or None
        Planned delivery window bounds.
    expected_datetime : datetime or None
        Precise expected delivery instant, when announced.
    delivery_date : datetime or None
        Actual delivery instant.
    sender_name : str or None
        Display name of the source the record was read from.
    """

    key: str | None = Field(default=None, validation_alias=AliasChoices("key", "barcode"))
    name: str | None = None
    url: str | None = None
    status_message: str | None = None
    planned_date: PostNLTimestamp = None
    planned_from: PostNLTimestamp = None
    planned_to: PostNLTimestamp = None
    expected_datetime: PostNLTimestamp = None
    delivery_date: PostNLTimestamp = None
    sender_name: str | None = None

    @field_validator("key", "name", "url", "status_message", "sender_name", mode="before")
    @classmethod
    def _coerce_str(cls, value: Any) -> str | None:
        return safe_str(value)

    @property
    def has_delivery_window(self) -> bool:
        return self.planned_from is not None and self.planned_to is not None
