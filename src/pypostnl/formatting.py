"""Locale-aware date and time formatting for display rows.

Patterns use moment-style tokens (``DD MMM YYYY``, ``HH:mm``) as found in
card configurations; rendering is delegated to :mod:`arrow`, which speaks
the same token language and ships Dutch and English month names.
"""

from __future__ import annotations

from datetime import datetime, timedelta, tzinfo
from zoneinfo import ZoneInfo

import arrow

from pypostnl._constants import DEFAULT_DATE_FORMAT, DEFAULT_LANGUAGE, DEFAULT_TIME_FORMAT, DEFAULT_TIME_ZONE
from pypostnl.ingestion.normalize import ensure_aware, localize
from pypostnl.models.letter import LetterRecord
from pypostnl.models.shipment import ShipmentRecord


def format_relative_date(
    timestamp: datetime,
    now: datetime,
    today_label: str,
    tomorrow_label: str,
    fallback_pattern: str,
    *,
    zone: tzinfo | None = None,
    locale: str = DEFAULT_LANGUAGE,
) -> str:
    """Render *timestamp* as ``today_label``, ``tomorrow_label`` or *fallback_pattern*.

    Calendar days are compared in *zone* (default: *now*'s time zone).
    """
    now = ensure_aware(now)
    zone = zone or now.tzinfo
    assert zone is not None  # noqa: S101
    local = localize(timestamp, zone)
    today = now.astimezone(zone).date()
    if local.date() == today:
        return today_label
    if local.date() == today + timedelta(days=1):
        return tomorrow_label
    return arrow.Arrow.fromdatetime(local).format(fallback_pattern, locale=locale)


def format_clock_time(
    timestamp: datetime,
    pattern: str = DEFAULT_TIME_FORMAT,
    *,
    zone: tzinfo | None = None,
    locale: str = DEFAULT_LANGUAGE,
) -> str:
    local = localize(timestamp, zone) if zone is not None else ensure_aware(timestamp)
    return arrow.Arrow.fromdatetime(local).format(pattern, locale=locale)


class DateTimeFormatter:
    """Formats record dates relative to an injected ``now``.

    Parameters
    ----------
    now : datetime
        Reference instant for the today/tomorrow buckets.
    time_zone : str or tzinfo
        Zone whose calendar defines day boundaries and in which naive
        timestamps are interpreted.
    date_format : str
        Moment-style pattern for dates other than today and tomorrow.
    time_format : str
        Moment-style pattern for clock times.
    locale : str
        Language used for month and weekday names.
    today_label, tomorrow_label, unknown_label : str
        Translated labels.
    """

    def __init__(
        self,
        now: datetime,
        *,
        time_zone: str | tzinfo = DEFAULT_TIME_ZONE,
        date_format: str = DEFAULT_DATE_FORMAT,
        time_format: str = DEFAULT_TIME_FORMAT,
        locale: str = DEFAULT_LANGUAGE,
        today_label: str = "Today",
        tomorrow_label: str = "Tomorrow",
        unknown_label: str = "Unknown",
    ) -> None:
        self._zone = ZoneInfo(time_zone) if isinstance(time_zone, str) else time_zone
        self._now = ensure_aware(now).astimezone(self._zone)
        self.date_format = date_format
        self.time_format = time_format
        self.locale = locale
        self.today_label = today_label
        self.tomorrow_label = tomorrow_label
        self.unknown_label = unknown_label

    @property
    def now(self) -> datetime:
        return self._now

    def format_relative_date(self, timestamp: datetime) -> str:
        return format_relative_date(
            timestamp,
            self._now,
            self.today_label,
            self.tomorrow_label,
            self.date_format,
            zone=self._zone,
            locale=self.locale,
        )

    def format_clock_time(self, timestamp: datetime) -> str:
        return format_clock_time(timestamp, self.time_format, zone=self._zone, locale=self.locale)

    def format_shipment_date(self, shipment: ShipmentRecord) -> str:
        """Render the most precise delivery moment known for *shipment*.

        Order of preference: actual delivery date, announced expected
        instant, planned day with its delivery window. A planned day
        without a complete window is shown as the day alone.
        """
        if shipment.delivery_date is not None:
            return self.format_relative_date(shipment.delivery_date)
        if shipment.planned_date is None:
            return self.unknown_label
        if shipment.expected_datetime is not None:
            expected = shipment.expected_datetime
            return f"{self.format_relative_date(expected)} {self.format_clock_time(expected)}"
        day = self.format_relative_date(shipment.planned_date)
        if not shipment.has_delivery_window:
            return day
        assert shipment.planned_from is not None and shipment.planned_to is not None  # noqa: S101
        return f"{day} {self.format_clock_time(shipment.planned_from)} - {self.format_clock_time(shipment.planned_to)}"

    def format_letter_date(self, letter: LetterRecord) -> str:
        if letter.delivery_date is None:
            return self.unknown_label
        return self.format_relative_date(letter.delivery_date)
