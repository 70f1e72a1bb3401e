"""Static UI strings, keyed by language code."""

from __future__ import annotations

from pypostnl._constants import DEFAULT_LANGUAGE

TRANSLATIONS: dict[str, dict[str, str]] = {
    "en": {
        "letters": "Letters",
        "letter": "Letter",
        "enroute": "Enroute",
        "delivered": "Delivered",
        "shipments": "Shipments",
        "title": "Title",
        "status": "Status",
        "deliveryDate": "Delivery Date",
        "today": "Today",
        "tomorrow": "Tomorrow",
        "unknown": "Unknown",
        "unavailable_entities": "The given entities are not available. Please check your card configuration",
        "no_enroute": "No enroute shipments",
        "no_delivered": "No delivered shipments",
        "no_letters": "No letters",
    },
    "nl": {
        "letters": "Brieven",
        "letter": "Brief",
        "enroute": "Onderweg",
        "delivered": "Bezorgd",
        "shipments": "Zendingen",
        "title": "Titel",
        "status": "Status",
        "deliveryDate": "Bezorgdatum",
        "today": "Vandaag",
        "tomorrow": "Morgen",
        "unknown": "Onbekend",
        "unavailable_entities": "De opgegeven entiteiten zijn niet beschikbaar. Controleer je card configuratie",
        "no_enroute": "Geen zendingen onderweg",
        "no_delivered": "Geen bezorgde zendingen",
        "no_letters": "Geen brieven",
    },
}

SUPPORTED_LANGUAGES: frozenset[str] = frozenset(TRANSLATIONS)


def get_translations(language: str | None) -> dict[str, str]:
    """Return the string table for *language*, falling back to English."""
    return TRANSLATIONS.get((language or "").strip().lower(), TRANSLATIONS[DEFAULT_LANGUAGE])
