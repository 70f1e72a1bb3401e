"""Display rows built from an aggregation result.

Turns annotated records into plain, already-translated values (titles,
status lines, formatted dates, icon names). Layout and styling are left to
whatever draws the rows.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from pypostnl._constants import (
    ICON_DELIVERED,
    ICON_ENROUTE,
    ICON_LETTER,
    ICON_SUMMARY_DELIVERED,
    ICON_SUMMARY_ENROUTE,
    ICON_SUMMARY_LETTERS,
    LETTER_PREVIEW_SUFFIX,
)
from pypostnl.aggregation import AggregationResult
from pypostnl.formatting import DateTimeFormatter
from pypostnl.models.letter import LetterRecord
from pypostnl.models.shipment import ShipmentRecord
from pypostnl.state.view import Tab


class Row(BaseModel):
    """One table row."""

    model_config = ConfigDict(frozen=True)

    icon: str
    title: str
    link: str | None = None
    status: str
    date: str
    css_class: str | None = None


class SummaryItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    icon: str
    count: int
    label: str


class Section(BaseModel):
    """A titled list of rows with its empty-state message."""

    model_config = ConfigDict(frozen=True)

    heading: str
    rows: tuple[Row, ...] = ()
    empty_message: str

    @property
    def is_empty(self) -> bool:
        return not self.rows


class PanelView(BaseModel):
    """Everything needed to draw the card for one update."""

    model_config = ConfigDict(frozen=True)

    name: str
    icon: str
    unavailable_message: str | None = None
    summary: tuple[SummaryItem, ...] = ()
    tabs: tuple[tuple[Tab, str], ...] = ()
    active_tab: Tab = Tab.SHIPMENTS
    sections: tuple[Section, ...] = ()
    preview_image: str | None = None
    column_headers: tuple[str, ...] = ()

    @property
    def unavailable(self) -> bool:
        return self.unavailable_message is not None


def shipment_title(shipment: ShipmentRecord, unknown: str) -> str:
    name = shipment.name or unknown
    return f"{name} ({shipment.sender_name})" if shipment.sender_name else name


def letter_title(letter: LetterRecord, unknown: str) -> str:
    letter_id = letter.id or unknown
    return f"{letter.sender_name}: {letter_id}" if letter.sender_name else letter_id


def shipment_row(shipment: ShipmentRecord, *, delivered: bool, formatter: DateTimeFormatter) -> Row:
    unknown = formatter.unknown_label
    return Row(
        icon=ICON_DELIVERED if delivered else ICON_ENROUTE,
        title=shipment_title(shipment, unknown),
        link=shipment.url,
        status=shipment.status_message or unknown,
        date=formatter.format_shipment_date(shipment),
        css_class="delivered" if delivered else "enroute",
    )


def letter_row(letter: LetterRecord, *, formatter: DateTimeFormatter) -> Row:
    unknown = formatter.unknown_label
    return Row(
        icon=ICON_LETTER,
        title=letter_title(letter, unknown),
        link=letter.image,
        status=letter.status_message or unknown,
        date=formatter.format_letter_date(letter),
    )


def letter_preview_url(letters: tuple[LetterRecord, ...]) -> str | None:
    """Thumbnail URL of the newest letter scan, if it has one."""
    if not letters or not letters[0].image:
        return None
    return f"{letters[0].image}{LETTER_PREVIEW_SUFFIX}"


def build_summary(
    result: AggregationResult,
    translations: dict[str, str],
    *,
    letters_available: bool,
) -> tuple[SummaryItem, ...]:
    items: list[SummaryItem] = []
    if letters_available:
        count = len(result.letters)
        items.append(
            SummaryItem(
                icon=ICON_SUMMARY_LETTERS,
                count=count,
                label=translations["letter"] if count == 1 else translations["letters"],
            )
        )
    items.append(SummaryItem(icon=ICON_SUMMARY_ENROUTE, count=len(result.enroute), label=translations["enroute"]))
    items.append(SummaryItem(icon=ICON_SUMMARY_DELIVERED, count=len(result.delivered), label=translations["delivered"]))
    return tuple(items)


def build_sections(
    result: AggregationResult,
    active_tab: Tab,
    translations: dict[str, str],
    formatter: DateTimeFormatter,
    *,
    hide_delivered: bool = False,
) -> tuple[Section, ...]:
    """Sections shown under *active_tab*."""
    if active_tab == Tab.LETTERS:
        return (
            Section(
                heading=translations["letters"],
                rows=tuple(letter_row(letter, formatter=formatter) for letter in result.letters),
                empty_message=translations["no_letters"],
            ),
        )

    sections = [
        Section(
            heading=translations["enroute"],
            rows=tuple(shipment_row(s, delivered=False, formatter=formatter) for s in result.enroute),
            empty_message=translations["no_enroute"],
        )
    ]
    if not hide_delivered:
        sections.append(
            Section(
                heading=translations["delivered"],
                rows=tuple(shipment_row(s, delivered=True, formatter=formatter) for s in result.delivered),
                empty_message=translations["no_delivered"],
            )
        )
    return tuple(sections)
