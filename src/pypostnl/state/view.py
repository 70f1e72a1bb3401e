"""Two-tab view state.

Only explicit user selection moves the active tab. Changing tabs never
re-runs aggregation; it merely changes which collection is displayed.
"""

from __future__ import annotations

import logging
from enum import StrEnum

_logger = logging.getLogger(__name__)


class Tab(StrEnum):
    SHIPMENTS = "shipments"
    LETTERS = "letters"


class ViewState:
    """Tracks the active tab and whether the letters tab is offered."""

    def __init__(self, *, letters_available: bool = False) -> None:
        self._active = Tab.SHIPMENTS
        self._letters_available = letters_available

    @property
    def active_tab(self) -> Tab:
        return self._active

    @property
    def letters_available(self) -> bool:
        return self._letters_available

    @property
    def available_tabs(self) -> tuple[Tab, ...]:
        if self._letters_available:
            return (Tab.SHIPMENTS, Tab.LETTERS)
        return (Tab.SHIPMENTS,)

    def select(self, tab: Tab | str) -> bool:
        """Activate *tab*.

        Returns ``True`` when the active tab changed and ``False`` when *tab*
        was already active. Raises :class:`ValueError` for a tab that is not
        offered.
        """
        selected = Tab(tab)
        if selected not in self.available_tabs:
            raise ValueError(f"tab {selected.value!r} is not available")
        if selected == self._active:
            return False
        _logger.debug("Tab changed %s -> %s", self._active, selected)
        self._active = selected
        return True

    def set_letters_available(self, available: bool) -> None:
        """Update whether any letter source resolved.

        The view falls back to shipments when the letters tab disappears
        while active.
        """
        self._letters_available = available
        if not available and self._active == Tab.LETTERS:
            _logger.debug("Letters tab no longer available; falling back to shipments")
            self._active = Tab.SHIPMENTS
