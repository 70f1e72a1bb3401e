"""Record parsing.

Converts the loosely-typed lists stored in snapshot attributes into
validated :class:`ShipmentRecord` / :class:`LetterRecord` instances.
A malformed entry is dropped on its own so that one bad upstream record
cannot blank the whole view.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from pydantic import ValidationError

from pypostnl.models.letter import LetterRecord
from pypostnl.models.shipment import ShipmentRecord

_logger = logging.getLogger(__name__)


def parse_shipments(payloads: Iterable[Any]) -> list[ShipmentRecord]:
    records: list[ShipmentRecord] = []
    for payload in payloads:
        if not isinstance(payload, dict):
            _logger.debug("Skipping non-mapping shipment entry type=%s", type(payload).__name__)
            continue
        try:
            records.append(ShipmentRecord.model_validate(payload))
        except ValidationError:
            _logger.debug("Skipping malformed shipment entry", exc_info=True)
    return records


def parse_letters(payloads: Iterable[tuple[str | None, Any]]) -> list[LetterRecord]:
    """Parse ``(key, payload)`` pairs; the key backs up a missing ``id``."""
    records: list[LetterRecord] = []
    for key, payload in payloads:
        if not isinstance(payload, dict):
            _logger.debug("Skipping non-mapping letter entry key=%s", key)
            continue
        try:
            letter = LetterRecord.model_validate(payload)
        except ValidationError:
            _logger.debug("Skipping malformed letter entry key=%s", key, exc_info=True)
            continue
        if letter.id is None and key is not None:
            letter = letter.model_copy(update={"id": key})
        records.append(letter)
    return records
