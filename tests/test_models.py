"""Tests for pydantic record and source models."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from pypostnl.models.letter import LetterRecord
from pypostnl.models.shipment import ShipmentRecord
from pypostnl.models.source import Snapshot, SourceDescriptor

# ------------------------------------------------------------------
# ShipmentRecord
# ------------------------------------------------------------------


class TestShipmentRecord:
    SAMPLE_PAYLOAD: dict = {
        "key": "3SABCD1234567",
        "name": "Webshop order",
        "url": "https://jouw.postnl.nl/track-and-trace/3SABCD1234567-NL-1234AB",
        "status_message": "Zending is bezorgd",
        "planned_date": "2026-03-10T00:00:00+01:00",
        "planned_from": "2026-03-10T14:00:00+01:00",
        "planned_to": "2026-03-10T16:00:00+01:00",
        "expected_datetime": None,
        "delivery_date": "2026-03-10T15:02:11+01:00",
        "delivery_address_type": "Recipient",
    }

    def test_parses_sample(self) -> None:
        shipment = ShipmentRecord.model_validate(self.SAMPLE_PAYLOAD)

        assert shipment.key == "3SABCD1234567"
        assert shipment.delivery_date == datetime(2026, 3, 10, 14, 2, 11, tzinfo=UTC)
        assert shipment.expected_datetime is None
        assert shipment.has_delivery_window
        assert shipment.sender_name is None

    def test_raw_keeps_unknown_fields(self) -> None:
        shipment = ShipmentRecord.model_validate(self.SAMPLE_PAYLOAD)
        assert shipment.raw["delivery_address_type"] == "Recipient"

    def test_placeholders_become_none(self) -> None:
        shipment = ShipmentRecord.model_validate({"name": "--", "status_message": "", "planned_date": "--"})
        assert shipment.name is None
        assert shipment.status_message is None
        assert shipment.planned_date is None

    def test_barcode_alias(self) -> None:
        assert ShipmentRecord.model_validate({"barcode": "3S1"}).key == "3S1"

    def test_is_frozen(self) -> None:
        shipment = ShipmentRecord(name="a")
        with pytest.raises(ValidationError):
            shipment.name = "b"  # type: ignore[misc]

    def test_model_copy_annotation_leaves_original(self) -> None:
        shipment = ShipmentRecord(name="a")
        annotated = shipment.model_copy(update={"sender_name": "Home"})
        assert annotated.sender_name == "Home"
        assert shipment.sender_name is None


# ------------------------------------------------------------------
# LetterRecord
# ------------------------------------------------------------------


class TestLetterRecord:
    def test_parses_letter(self) -> None:
        letter = LetterRecord.model_validate(
            {
                "id": "L1",
                "status_message": "Verwacht",
                "delivery_date": "2026-03-10T08:00:00+01:00",
                "image": "https://example.invalid/scan?id=L1",
            }
        )
        assert letter.id == "L1"
        assert letter.delivery_date is not None

    def test_numeric_id_coerced_to_str(self) -> None:
        assert LetterRecord.model_validate({"id": 991}).id == "991"

    def test_unparsable_date(self) -> None:
        assert LetterRecord.model_validate({"delivery_date": "yesterday"}).delivery_date is None


# ------------------------------------------------------------------
# SourceDescriptor / Snapshot
# ------------------------------------------------------------------


class TestSourceDescriptor:
    def test_entity_and_name_keys(self) -> None:
        descriptor = SourceDescriptor.model_validate({"entity": " sensor.postnl_delivery ", "name": "Home"})
        assert descriptor.entity_id == "sensor.postnl_delivery"
        assert descriptor.display_name == "Home"

    def test_bare_string(self) -> None:
        descriptor = SourceDescriptor.model_validate("sensor.postnl_letters")
        assert descriptor.entity_id == "sensor.postnl_letters"
        assert descriptor.display_name is None

    def test_empty_entity_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SourceDescriptor.model_validate({"entity": "   "})

    def test_missing_entity_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SourceDescriptor.model_validate({"name": "Home"})


class TestSnapshot:
    def test_absent_collections_are_empty(self) -> None:
        snapshot = Snapshot(entity_id="sensor.a")
        assert snapshot.enroute == []
        assert snapshot.delivered == []
        assert snapshot.letters == []
        assert snapshot.name is None

    def test_non_dict_attributes_ignored(self) -> None:
        snapshot = Snapshot.model_validate({"entity_id": "sensor.a", "attributes": "broken"})
        assert snapshot.attributes == {}

    def test_letters_mapping_keys_kept(self) -> None:
        snapshot = Snapshot(entity_id="sensor.a", attributes={"letters": {"a": {}, "b": {}}})
        assert [key for key, _ in snapshot.letters] == ["a", "b"]

    def test_letters_list_accepted(self) -> None:
        snapshot = Snapshot(entity_id="sensor.a", attributes={"letters": [{"id": "x"}]})
        assert snapshot.letters == [(None, {"id": "x"})]
