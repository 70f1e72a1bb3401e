"""Source descriptor and snapshot models."""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

from pypostnl.ingestion.normalize import safe_str


class SourceDescriptor(BaseModel):
    """One configured data source: an entity id plus an optional display name."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    entity_id: str = Field(..., validation_alias=AliasChoices("entity", "entity_id"))
    display_name: str | None = Field(default=None, validation_alias=AliasChoices("name", "display_name"))

    @model_validator(mode="before")
    @classmethod
    def _accept_bare_entity_id(cls, values: Any) -> Any:
        if isinstance(values, str):
            return {"entity": values}
        return values

    @field_validator("entity_id")
    @classmethod
    def _normalize_entity_id(cls, value: str) -> str:
        entity_id = value.strip()
        if not entity_id:
            raise ValueError("entity must be non-empty")
        return entity_id

    @field_validator("display_name", mode="before")
    @classmethod
    def _coerce_name(cls, value: Any) -> str | None:
        return safe_str(value)


class Snapshot(BaseModel):
    """Current state of one source as supplied by the host platform.

    Only ``attributes`` is interpreted. ``enroute`` and ``delivered`` are
    lists of shipment payloads, ``letters`` maps opaque ids to letter
    payloads. Any of them may be missing.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    entity_id: str = ""
    state: str | None = None
    attributes: dict[str, Any] = Field(default_factory=dict)

    @field_validator("state", mode="before")
    @classmethod
    def _coerce_state(cls, value: Any) -> str | None:
        return safe_str(value)

    @field_validator("attributes", mode="before")
    @classmethod
    def _coerce_attributes(cls, value: Any) -> dict[str, Any]:
        return value if isinstance(value, dict) else {}

    @property
    def name(self) -> str | None:
        return safe_str(self.attributes.get("name"))

    @property
    def enroute(self) -> list[Any]:
        return _as_list(self.attributes.get("enroute"))

    @property
    def delivered(self) -> list[Any]:
        return _as_list(self.attributes.get("delivered"))

    @property
    def letters(self) -> list[tuple[str | None, Any]]:
        """Letter payloads paired with the key they were stored under."""
        letters = self.attributes.get("letters")
        if isinstance(letters, dict):
            return [(str(key), value) for key, value in letters.items()]
        if isinstance(letters, list):
            return [(None, value) for value in letters]
        return []


class NormalizedSource(BaseModel):
    """A descriptor resolved against the snapshot table."""

    model_config = ConfigDict(frozen=True)

    descriptor: SourceDescriptor
    snapshot: Snapshot
    display_name: str | None = None

    @property
    def entity_id(self) -> str:
        return self.descriptor.entity_id


def _as_list(value: Any) -> list[Any]:
    return list(value) if isinstance(value, (list, tuple)) else []
