from __future__ import annotations

import logging
from datetime import datetime
from zoneinfo import ZoneInfo

import pytest

from pypostnl.config import CardConfig
from pypostnl.panel import PostNLPanel
from pypostnl.state.view import Tab

AMS = ZoneInfo("Europe/Amsterdam")
NOW = datetime(2026, 3, 10, 12, 0, tzinfo=AMS)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("POSTNL_PAST_DAYS", "POSTNL_LANGUAGE", "POSTNL_HIDE_DELIVERED", "POSTNL_TIME_ZONE"):
        monkeypatch.delenv(key, raising=False)


def _states() -> dict:
    return {
        "sensor.postnl_delivery": {
            "entity_id": "sensor.postnl_delivery",
            "state": "1",
            "attributes": {
                "enroute": [
                    {
                        "name": "Sneakers",
                        "url": "https://jouw.postnl.nl/track-and-trace/3S1",
                        "status_message": "Sorted",
                        "planned_date": "2026-03-11T00:00:00+01:00",
                        "planned_from": "2026-03-11T14:00:00+01:00",
                        "planned_to": "2026-03-11T16:30:00+01:00",
                    }
                ],
                "delivered": [
                    {"name": "Book", "delivery_date": "2026-03-09T15:00:00+01:00"},
                    {"name": "Old", "delivery_date": "2026-03-01T15:00:00+01:00"},
                ],
            },
        },
        "sensor.postnl_distribution": {
            "entity_id": "sensor.postnl_distribution",
            "attributes": {"name": "Shop", "enroute": [{"name": "Return parcel"}]},
        },
        "sensor.postnl_letters": {
            "entity_id": "sensor.postnl_letters",
            "attributes": {
                "letters": {
                    "L1": {
                        "id": "L1",
                        "delivery_date": "2026-03-10T09:00:00+01:00",
                        "image": "https://example.invalid/scan?id=L1",
                    },
                    "L2": {"id": "L2", "delivery_date": "2026-03-09T09:00:00+01:00", "status_message": "Bezorgd"},
                }
            },
        },
    }


def _panel(**card) -> PostNLPanel:
    raw = {
        "delivery": [{"entity": "sensor.postnl_delivery", "name": "Home"}],
        "distribution": "sensor.postnl_distribution",
        "letters": "sensor.postnl_letters",
    }
    raw.update(card)
    return PostNLPanel(CardConfig.from_mapping(raw))


def test_update_aggregates_all_groups() -> None:
    panel = _panel()

    result = panel.update(_states(), now=NOW)

    assert [s.name for s in result.enroute] == ["Sneakers", "Return parcel"]
    assert [s.sender_name for s in result.enroute] == ["Home", "Shop"]
    assert [s.name for s in result.delivered] == ["Book"]
    assert [letter.id for letter in result.letters] == ["L1", "L2"]
    assert not panel.unavailable


def test_render_shipments_tab() -> None:
    panel = _panel()
    panel.update(_states(), now=NOW)

    view = panel.render()

    assert view.name == "PostNL"
    assert [(item.count, item.label) for item in view.summary] == [(2, "Letters"), (2, "Enroute"), (1, "Delivered")]
    assert [tab for tab, _ in view.tabs] == [Tab.SHIPMENTS, Tab.LETTERS]
    enroute, delivered = view.sections
    assert enroute.rows[0].title == "Sneakers (Home)"
    assert enroute.rows[0].date == "Tomorrow 14:00 - 16:30"
    assert enroute.rows[0].icon == "mdi:truck"
    assert enroute.rows[1].date == "Unknown"
    assert enroute.rows[1].status == "Unknown"
    assert delivered.rows[0].date == "09 Mar 2026"
    assert delivered.rows[0].icon == "mdi:check-circle"
    assert view.preview_image is None


def test_render_letters_tab_dutch() -> None:
    panel = _panel(language="nl")
    panel.update(_states(), now=NOW)

    assert panel.select_tab("letters") is True
    view = panel.render()

    (letters,) = view.sections
    assert letters.heading == "Brieven"
    assert [row.title for row in letters.rows] == ["L1", "L2"]
    assert [row.date for row in letters.rows] == ["Vandaag", "09 mrt 2026"]
    assert letters.rows[0].status == "Onbekend"
    assert view.preview_image == "https://example.invalid/scan?id=L1&width=400&height=300"


def test_select_tab_does_not_reaggregate() -> None:
    panel = _panel()
    result = panel.update(_states(), now=NOW)

    panel.select_tab(Tab.LETTERS)
    panel.select_tab(Tab.LETTERS)

    assert panel.result is result


def test_ambient_language_used_when_not_configured() -> None:
    panel = _panel()
    panel.update(_states(), now=NOW, ambient_language="nl")
    assert panel.language == "nl"
    assert panel.render().summary[1].label == "Onderweg"


def test_hide_delivered() -> None:
    panel = _panel(hide_delivered=True)
    panel.update(_states(), now=NOW)

    assert [section.heading for section in panel.render().sections] == ["Enroute"]


def test_single_letter_label() -> None:
    states = _states()
    del states["sensor.postnl_letters"]["attributes"]["letters"]["L2"]
    panel = _panel()
    panel.update(states, now=NOW)

    assert panel.render().summary[0].label == "Letter"


def test_all_sources_missing_is_unavailable(caplog: pytest.LogCaptureFixture) -> None:
    panel = _panel()

    with caplog.at_level(logging.WARNING):
        result = panel.update({}, now=NOW)

    view = panel.render()
    assert panel.unavailable
    assert view.unavailable
    assert view.unavailable_message == "The given entities are not available. Please check your card configuration"
    assert result.is_empty
    assert caplog.text.count("not found") == 3


def test_letters_tab_hidden_when_letter_source_missing() -> None:
    panel = _panel()
    panel.update(_states(), now=NOW)
    panel.select_tab(Tab.LETTERS)

    states = _states()
    del states["sensor.postnl_letters"]
    panel.update(states, now=NOW)

    view = panel.render()
    assert view.active_tab == Tab.SHIPMENTS
    assert [tab for tab, _ in view.tabs] == [Tab.SHIPMENTS]
    assert [item.label for item in view.summary] == ["Enroute", "Delivered"]


def test_update_replaces_previous_result() -> None:
    panel = _panel()
    panel.update(_states(), now=NOW)

    states = _states()
    states["sensor.postnl_delivery"]["attributes"]["enroute"] = []
    result = panel.update(states, now=NOW)

    assert [s.name for s in result.enroute] == ["Return parcel"]


def test_clock_is_used_without_explicit_now() -> None:
    panel = PostNLPanel(CardConfig.from_mapping({"letters": "sensor.postnl_letters"}), clock=lambda: NOW)

    result = panel.update(_states())

    assert result.generated_at == NOW
    assert [letter.id for letter in result.letters] == ["L1", "L2"]
