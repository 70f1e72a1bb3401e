"""pypostnl - Aggregate PostNL parcel and letter snapshots into display-ready views."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pypostnl")
except PackageNotFoundError:
    __version__ = "0+local"
from pypostnl.aggregation import AggregationResult, aggregate, window_cutoff
from pypostnl.config import CardConfig
from pypostnl.exceptions import PostNLConfigError, PostNLError, PostNLSourceUnavailable
from pypostnl.formatting import DateTimeFormatter, format_clock_time, format_relative_date
from pypostnl.ingestion.sources import normalize_sources
from pypostnl.models import (
    LetterRecord,
    NormalizedSource,
    ShipmentRecord,
    Snapshot,
    SourceDescriptor,
)
from pypostnl.panel import PostNLPanel
from pypostnl.presentation import PanelView
from pypostnl.state import Tab, ViewState

__all__ = [
    "__version__",
    "AggregationResult",
    "CardConfig",
    "DateTimeFormatter",
    "LetterRecord",
    "NormalizedSource",
    "PanelView",
    "PostNLConfigError",
    "PostNLError",
    "PostNLPanel",
    "PostNLSourceUnavailable",
    "ShipmentRecord",
    "Snapshot",
    "SourceDescriptor",
    "Tab",
    "ViewState",
    "aggregate",
    "format_clock_time",
    "format_relative_date",
    "normalize_sources",
    "window_cutoff",
]
