"""Custom exception hierarchy for pypostnl."""

from __future__ import annotations


class PostNLError(Exception):
    """Base exception for all pypostnl errors."""


class PostNLConfigError(PostNLError):
    """Invalid or missing card configuration.

    Raised at setup time, before any snapshot is aggregated, e.g. when no
    delivery, distribution or letters source is configured at all.
    """


class PostNLSourceUnavailable(PostNLError):
    """A configured source has no matching snapshot.

    The normalizer logs this condition and skips the source; it is only
    raised when normalization runs in strict mode.
    """

    def __init__(self, entity_id: str, *, kind: str = "") -> None:
        self.entity_id = entity_id
        self.kind = kind
        label = kind.capitalize() if kind else "Source"
        super().__init__(f"{label} entity {entity_id!r} not found")
