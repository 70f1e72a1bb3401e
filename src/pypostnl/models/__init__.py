"""Data models for snapshot payloads and configured sources."""

from pypostnl.models._base import PostNLBaseModel, PostNLTimestamp
from pypostnl.models.letter import LetterRecord
from pypostnl.models.shipment import ShipmentRecord
from pypostnl.models.source import NormalizedSource, Snapshot, SourceDescriptor

__all__ = [
    "LetterRecord",
    "NormalizedSource",
    "PostNLBaseModel",
    "PostNLTimestamp",
    "ShipmentRecord",
    "Snapshot",
    "SourceDescriptor",
]
