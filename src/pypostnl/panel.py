"""Panel controller.

Owns one card's configuration, the last aggregation result and the view
state. The host calls :meth:`PostNLPanel.update` with a full snapshot table
whenever its state changes; tab selection only affects :meth:`render`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from datetime import UTC, datetime
from typing import Any

from pypostnl._constants import DELIVERY, DISTRIBUTION, LETTERS
from pypostnl.aggregation import AggregationResult, aggregate
from pypostnl.config import CardConfig
from pypostnl.formatting import DateTimeFormatter
from pypostnl.ingestion.normalize import ensure_aware
from pypostnl.ingestion.sources import normalize_sources
from pypostnl.models.source import NormalizedSource
from pypostnl.presentation import PanelView, build_sections, build_summary, letter_preview_url
from pypostnl.state.view import Tab, ViewState
from pypostnl.translations import get_translations

_logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class PostNLPanel:
    """Aggregated delivery and letter overview for one card.

    Usage::

        panel = PostNLPanel(CardConfig.from_mapping(card))
        panel.update(states, ambient_language="nl")
        view = panel.render()
    """

    def __init__(
        self,
        config: CardConfig,
        *,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._config = config
        self._clock = clock
        self._language = config.resolve_language()
        self._translations = get_translations(self._language)
        self._delivery: list[NormalizedSource] = []
        self._distribution: list[NormalizedSource] = []
        self._letters: list[NormalizedSource] = []
        self._result = AggregationResult()
        self._view = ViewState()

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def config(self) -> CardConfig:
        return self._config

    @property
    def language(self) -> str:
        return self._language

    @property
    def translations(self) -> dict[str, str]:
        return self._translations

    @property
    def result(self) -> AggregationResult:
        return self._result

    @property
    def view(self) -> ViewState:
        return self._view

    @property
    def unavailable(self) -> bool:
        """``True`` when none of the configured sources resolved."""
        return not (self._delivery or self._distribution or self._letters)

    # ------------------------------------------------------------------
    # Updates
    # ------------------------------------------------------------------

    def update(
        self,
        snapshots: Mapping[str, Any],
        *,
        now: datetime | None = None,
        ambient_language: str | None = None,
    ) -> AggregationResult:
        """Recompute everything from a fresh snapshot table.

        The previous result is replaced, never patched.
        """
        language = self._config.resolve_language(ambient_language)
        if language != self._language:
            _logger.debug("Language resolved to %s", language)
            self._language = language
            self._translations = get_translations(language)

        self._delivery = normalize_sources(self._config.delivery, snapshots, kind=DELIVERY)
        self._distribution = normalize_sources(self._config.distribution, snapshots, kind=DISTRIBUTION)
        self._letters = normalize_sources(self._config.letters, snapshots, kind=LETTERS)

        reference = ensure_aware(now or self._clock()).astimezone(self._config.zone)
        self._result = aggregate(
            [*self._delivery, *self._distribution],
            self._letters,
            self._config.past_days,
            reference,
        )
        self._view.set_letters_available(bool(self._letters))
        return self._result

    def select_tab(self, tab: Tab | str) -> bool:
        """Switch tabs; returns whether anything changed."""
        return self._view.select(tab)

    # ------------------------------------------------------------------
    # Presentation
    # ------------------------------------------------------------------

    def formatter(self, now: datetime | None = None) -> DateTimeFormatter:
        t = self._translations
        return DateTimeFormatter(
            now or self._result.generated_at or self._clock(),
            time_zone=self._config.zone,
            date_format=self._config.date_format,
            time_format=self._config.time_format,
            locale=self._language,
            today_label=t["today"],
            tomorrow_label=t["tomorrow"],
            unknown_label=t["unknown"],
        )

    def render(self, *, now: datetime | None = None) -> PanelView:
        """Build the display model for the current result and tab."""
        t = self._translations
        if self.unavailable:
            return PanelView(
                name=self._config.name,
                icon=self._config.icon,
                unavailable_message=t["unavailable_entities"],
            )

        tabs = tuple((tab, t[tab.value]) for tab in self._view.available_tabs)
        return PanelView(
            name=self._config.name,
            icon=self._config.icon,
            summary=build_summary(self._result, t, letters_available=self._view.letters_available),
            tabs=tabs,
            active_tab=self._view.active_tab,
            sections=build_sections(
                self._result,
                self._view.active_tab,
                t,
                self.formatter(now),
                hide_delivered=self._config.hide_delivered,
            ),
            preview_image=letter_preview_url(self._result.letters) if self._view.active_tab == Tab.LETTERS else None,
            column_headers=("", t["title"], t["status"], t["deliveryDate"]),
        )
