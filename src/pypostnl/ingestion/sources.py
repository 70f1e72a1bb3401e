"""Source normalization.

Resolves configured :class:`SourceDescriptor` entries against the snapshot
table delivered by the host platform.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError

from pypostnl._redact import redact_for_log
from pypostnl.exceptions import PostNLSourceUnavailable
from pypostnl.models.source import NormalizedSource, Snapshot, SourceDescriptor

_logger = logging.getLogger(__name__)


def _coerce_snapshot(entity_id: str, value: Any) -> Snapshot | None:
    if value is None:
        return None
    if isinstance(value, Snapshot):
        return value
    if not isinstance(value, Mapping):
        return None
    payload = dict(value)
    payload.setdefault("entity_id", entity_id)
    try:
        return Snapshot.model_validate(payload)
    except ValidationError:
        _logger.debug("Invalid snapshot for entity=%s payload=%s", entity_id, redact_for_log(payload), exc_info=True)
        return None


def normalize_sources(
    descriptors: Iterable[SourceDescriptor],
    snapshots: Mapping[str, Any],
    *,
    kind: str = "",
    strict: bool = False,
) -> list[NormalizedSource]:
    """Pair each descriptor with its snapshot.

    Parameters
    ----------
    descriptors
        Configured sources, in display order. Duplicates are kept.
    snapshots
        Entity id → :class:`Snapshot` or raw state mapping.
    kind
        Source group label used in diagnostics (``"delivery"``, ...).
    strict
        Raise :class:`PostNLSourceUnavailable` instead of skipping a
        source that has no snapshot.

    Returns
    -------
    list[NormalizedSource]
        Resolved sources; unresolved ones are left out.
    """
    configured = list(descriptors)
    resolved: list[NormalizedSource] = []
    for descriptor in configured:
        snapshot = _coerce_snapshot(descriptor.entity_id, snapshots.get(descriptor.entity_id))
        if snapshot is None:
            missing = PostNLSourceUnavailable(descriptor.entity_id, kind=kind)
            if strict:
                raise missing
            _logger.warning("%s", missing)
            continue
        resolved.append(
            NormalizedSource(
                descriptor=descriptor,
                snapshot=snapshot,
                display_name=descriptor.display_name or snapshot.name,
            )
        )
    _logger.debug("Resolved %d of %d %s source(s)", len(resolved), len(configured), kind or "configured")
    return resolved
