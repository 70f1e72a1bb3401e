"""Card configuration for pypostnl."""

from __future__ import annotations

import dataclasses
import os
from collections.abc import Mapping
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import ValidationError

from pypostnl._constants import (
    DEFAULT_DATE_FORMAT,
    DEFAULT_ICON,
    DEFAULT_LANGUAGE,
    DEFAULT_NAME,
    DEFAULT_PAST_DAYS,
    DEFAULT_TIME_FORMAT,
    DEFAULT_TIME_ZONE,
    DELIVERY,
    DISTRIBUTION,
    LETTERS,
    SOURCE_GROUPS,
)
from pypostnl.exceptions import PostNLConfigError
from pypostnl.models.source import SourceDescriptor
from pypostnl.translations import SUPPORTED_LANGUAGES


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _coerce_bool(value: Any) -> bool:
    if isinstance(value, str):
        return _env_bool(value, False)
    return bool(value)


def _parse_descriptors(group: str, value: Any) -> tuple[SourceDescriptor, ...]:
    """Accept a bare entity id, a single ``{entity, name}`` mapping or a list of either."""
    if value is None or value == "" or value == []:
        return ()
    items = value if isinstance(value, (list, tuple)) else [value]
    descriptors: list[SourceDescriptor] = []
    for item in items:
        try:
            descriptors.append(SourceDescriptor.model_validate(item))
        except ValidationError as exc:
            raise PostNLConfigError(f"invalid {group} entry {item!r}: {exc.errors()[0]['msg']}") from exc
    return tuple(descriptors)


def _parse_past_days(value: Any) -> int:
    error = PostNLConfigError(f"past_days must be a non-negative integer, got {value!r}")
    if isinstance(value, bool):
        raise error
    try:
        days = int(value)
    except (TypeError, ValueError) as exc:
        raise error from exc
    # Reject fractional numbers instead of silently truncating them.
    if days < 0 or (not isinstance(value, str) and days != value):
        raise error
    return days


@dataclasses.dataclass(frozen=True)
class CardConfig:
    """Card configuration.

    Parameters
    ----------
    delivery : tuple of SourceDescriptor
        Sources listing parcels addressed to the household.
    distribution : tuple of SourceDescriptor
        Sources listing parcels sent by the household.
    letters : tuple of SourceDescriptor
        Sources listing scanned letters.
    name : str
        Card title.
    icon : str
        Card header icon.
    date_format : str
        Moment-style pattern for dates other than today/tomorrow.
    time_format : str
        Moment-style pattern for clock times.
    past_days : int
        Days before today to keep delivered items and letters for.
        ``0`` shows only today's deliveries.
    language : str or None
        ``"en"`` or ``"nl"``. ``None`` defers to the host's language.
    hide_delivered : bool
        Suppress the delivered shipments section.
    time_zone : str
        IANA zone whose calendar defines "today".
    """

    delivery: tuple[SourceDescriptor, ...] = ()
    distribution: tuple[SourceDescriptor, ...] = ()
    letters: tuple[SourceDescriptor, ...] = ()
    name: str = DEFAULT_NAME
    icon: str = DEFAULT_ICON
    date_format: str = DEFAULT_DATE_FORMAT
    time_format: str = DEFAULT_TIME_FORMAT
    past_days: int = DEFAULT_PAST_DAYS
    language: str | None = None
    hide_delivered: bool = False
    time_zone: str = DEFAULT_TIME_ZONE

    def __post_init__(self) -> None:
        if not (self.delivery or self.distribution or self.letters):
            raise PostNLConfigError("Please define at least one entity (delivery, distribution, or letters)")
        if self.past_days < 0:
            raise PostNLConfigError(f"past_days must be a non-negative integer, got {self.past_days!r}")
        if self.language is not None and self.language not in SUPPORTED_LANGUAGES:
            raise PostNLConfigError(f"unsupported language {self.language!r}")
        try:
            ZoneInfo(self.time_zone)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise PostNLConfigError(f"unknown time zone {self.time_zone!r}") from exc

    @property
    def shipment_sources(self) -> tuple[SourceDescriptor, ...]:
        return self.delivery + self.distribution

    @property
    def zone(self) -> ZoneInfo:
        return ZoneInfo(self.time_zone)

    def resolve_language(self, ambient: str | None = None) -> str:
        """Return the configured language, else the host's if supported, else English."""
        if self.language is not None:
            return self.language
        candidate = (ambient or "").strip().lower()
        if candidate in SUPPORTED_LANGUAGES:
            return candidate
        return DEFAULT_LANGUAGE

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any], **overrides: Any) -> CardConfig:
        """Create configuration from a card definition mapping.

        Scalar options missing from *raw* are read from ``POSTNL_*``
        environment variables. Explicit keyword arguments override both.

        Parameters
        ----------
        raw
            Card definition (``delivery``, ``distribution``, ``letters``,
            ``date_format``, ``time_format``, ``past_days``, ``language``,
            ``hide_delivered``, ``name``, ``icon``, ``time_zone``).
        **overrides
            Explicit field values that take precedence.

        Returns
        -------
        CardConfig
            Validated configuration.

        Raises
        ------
        PostNLConfigError
            No source configured, or an option is invalid.
        """
        if not isinstance(raw, Mapping):
            raise PostNLConfigError(f"card configuration must be a mapping, got {type(raw).__name__}")
        env = os.environ

        config_kwargs: dict[str, Any] = {}
        for group in SOURCE_GROUPS:
            config_kwargs[group] = _parse_descriptors(group, raw.get(group))

        _ENV_CONFIG_MAP = {
            "POSTNL_DATE_FORMAT": "date_format",
            "POSTNL_TIME_FORMAT": "time_format",
            "POSTNL_LANGUAGE": "language",
            "POSTNL_TIME_ZONE": "time_zone",
        }
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val.strip().lower() if field_name == "language" else val

        days_env = env.get("POSTNL_PAST_DAYS")
        if days_env is not None and raw.get("past_days") is None and "past_days" not in overrides:
            config_kwargs["past_days"] = _parse_past_days(days_env)

        config_kwargs["hide_delivered"] = _env_bool(env.get("POSTNL_HIDE_DELIVERED"), False)

        for field_name in ("name", "icon", "date_format", "time_format", "language", "time_zone"):
            value = raw.get(field_name)
            if value:
                config_kwargs[field_name] = str(value).strip().lower() if field_name == "language" else str(value)
        if raw.get("past_days") is not None:
            config_kwargs["past_days"] = _parse_past_days(raw["past_days"])
        if raw.get("hide_delivered") is not None:
            config_kwargs["hide_delivered"] = _coerce_bool(raw["hide_delivered"])

        for group in (DELIVERY, DISTRIBUTION, LETTERS):
            if group in overrides:
                overrides[group] = _parse_descriptors(group, overrides[group])
        if "past_days" in overrides:
            overrides["past_days"] = _parse_past_days(overrides["past_days"])
        config_kwargs.update(overrides)

        return cls(**config_kwargs)
