"""Aggregation engine.

Merges shipment and letter records from every resolved source into three
ordered collections: enroute shipments, delivered shipments inside the
``past_days`` window, and letters inside the same window.

The engine is a pure function of its inputs. ``now`` is injected so results
are reproducible; records are annotated via ``model_copy`` and the parsed
snapshot data is never modified.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from datetime import datetime, timedelta, tzinfo
from typing import TypeVar

from pydantic import BaseModel, ConfigDict

from pypostnl.ingestion.normalize import ensure_aware, localize
from pypostnl.ingestion.records import parse_letters, parse_shipments
from pypostnl.models.letter import LetterRecord
from pypostnl.models.shipment import ShipmentRecord
from pypostnl.models.source import NormalizedSource

_logger = logging.getLogger(__name__)

TRecord = TypeVar("TRecord", ShipmentRecord, LetterRecord)


class AggregationResult(BaseModel):
    """Immutable output of one aggregation run."""

    model_config = ConfigDict(frozen=True)

    enroute: tuple[ShipmentRecord, ...] = ()
    """Pending shipments, newest ``planned_date`` first."""

    delivered: tuple[ShipmentRecord, ...] = ()
    """Delivered shipments since ``cutoff``, newest first."""

    letters: tuple[LetterRecord, ...] = ()
    """Letters delivered since ``cutoff``, newest first."""

    cutoff: datetime | None = None
    """Start of the delivery window."""

    generated_at: datetime | None = None
    """The ``now`` this result was computed for."""

    @property
    def is_empty(self) -> bool:
        return not (self.enroute or self.delivered or self.letters)


def window_cutoff(now: datetime, past_days: int) -> datetime:
    """Return the start of the calendar day ``past_days`` days before *now*.

    The day boundary is taken in *now*'s own time zone.
    """
    if past_days < 0:
        raise ValueError(f"past_days must be non-negative, got {past_days}")
    shifted = ensure_aware(now) - timedelta(days=past_days)
    return shifted.replace(hour=0, minute=0, second=0, microsecond=0)


def _annotate(records: Iterable[TRecord], sender_name: str | None) -> list[TRecord]:
    return [record.model_copy(update={"sender_name": sender_name}) for record in records]


def _sort_descending(
    records: Sequence[TRecord],
    date_of: Callable[[TRecord], datetime | None],
    zone: tzinfo,
) -> list[TRecord]:
    """Sort newest first; records without a date go last.

    ``sorted`` is stable under ``reverse=True``, so ties keep input order.
    """

    def _key(record: TRecord) -> tuple[bool, float]:
        value = date_of(record)
        if value is None:
            return (False, 0.0)
        return (True, localize(value, zone).timestamp())

    return sorted(records, key=_key, reverse=True)


def _within_window(value: datetime | None, cutoff: datetime) -> bool:
    if value is None:
        return False
    return localize(value, cutoff.tzinfo) >= cutoff  # type: ignore[arg-type]


def aggregate(
    shipment_sources: Sequence[NormalizedSource],
    letter_sources: Sequence[NormalizedSource],
    past_days: int,
    now: datetime,
) -> AggregationResult:
    """Build enroute, delivered and letter collections from resolved sources.

    Parameters
    ----------
    shipment_sources
        Delivery and distribution sources, in configuration order.
    letter_sources
        Letter sources, in configuration order.
    past_days
        Number of whole days before today to keep delivered items for.
        ``0`` keeps only items delivered today.
    now
        Reference instant. Naive values are treated as UTC.

    Returns
    -------
    AggregationResult
        The three ordered collections plus the window cutoff.
    """
    now = ensure_aware(now)
    zone = now.tzinfo
    assert zone is not None  # noqa: S101
    cutoff = window_cutoff(now, past_days)

    enroute: list[ShipmentRecord] = []
    delivered: list[ShipmentRecord] = []
    for source in shipment_sources:
        enroute.extend(_annotate(parse_shipments(source.snapshot.enroute), source.display_name))
        delivered.extend(_annotate(parse_shipments(source.snapshot.delivered), source.display_name))

    in_window = [shipment for shipment in delivered if _within_window(shipment.delivery_date, cutoff)]
    if len(in_window) != len(delivered):
        _logger.debug("Dropped %d delivered shipment(s) before %s", len(delivered) - len(in_window), cutoff.isoformat())

    letters: list[LetterRecord] = []
    for source in letter_sources:
        kept = [letter for letter in parse_letters(source.snapshot.letters) if _within_window(letter.delivery_date, cutoff)]
        letters.extend(_annotate(kept, source.display_name))

    result = AggregationResult(
        enroute=tuple(_sort_descending(enroute, lambda s: s.planned_date, zone)),
        delivered=tuple(_sort_descending(in_window, lambda s: s.delivery_date, zone)),
        letters=tuple(_sort_descending(letters, lambda letter: letter.delivery_date, zone)),
        cutoff=cutoff,
        generated_at=now,
    )
    _logger.debug(
        "Aggregated enroute=%d delivered=%d letters=%d cutoff=%s",
        len(result.enroute),
        len(result.delivered),
        len(result.letters),
        cutoff.isoformat(),
    )
    return result
