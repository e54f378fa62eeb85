# tests/test_integration_service.py
"""
Mastery Service Tests - selection rows to fleet mastery
"""

import pytest

from airpower.config import Settings
from airpower.core.exceptions import (
    FleetSizeExceeded,
    InvalidSlotNumber,
    UnsupportedMasteryMode,
)
from airpower.models.enumerations import MasteryMode, RevisionLayer
from airpower.models.mastery import MasteryRequest, ShipSelection, SlotSelection
from airpower.scoring.integration_service import MasteryService
from airpower.scoring.template_registry import TemplateRegistry


@pytest.fixture
def registry(catalog, aircraft_config, ship_config):
    registry = TemplateRegistry(catalog)
    registry.load_aircraft_templates(aircraft_config)
    registry.load_ship_templates(ship_config)
    return registry


@pytest.fixture
def service(registry):
    return MasteryService(registry, Settings())


def _request(mode="sortie", high_altitude=False, ships=()):
    return MasteryRequest(mode=mode, high_altitude=high_altitude, ships=list(ships))


class TestBuildShip:

    def test_equips_selected_aircraft(self, service):
        ship = service.build_ship(ShipSelection(ship="Akagi", slots={
            1: SlotSelection(aircraft="Reppuu", improvement=5),
            3: SlotSelection(aircraft="Suisei"),
        }))
        assert ship.get_aircraft(1).name == "Reppuu"
        assert ship.get_aircraft(1).improvement_level == 5
        assert ship.get_aircraft(2) is None
        assert ship.get_aircraft(3).name == "Suisei"

    def test_type_default_suppression_applied(self, service):
        ship = service.build_ship(ShipSelection(ship="Akagi", slots={
            1: SlotSelection(aircraft="Reppuu"),
            2: SlotSelection(aircraft="Suisei"),
        }))
        assert ship.get_suppress_skill_bonus(1) is False
        assert ship.get_suppress_skill_bonus(2) is True

    def test_suppression_override(self, service):
        ship = service.build_ship(ShipSelection(ship="Akagi", slots={
            1: SlotSelection(aircraft="Reppuu", suppress_skill_bonus=True),
            2: SlotSelection(aircraft="Suisei", suppress_skill_bonus=False),
        }))
        assert ship.get_suppress_skill_bonus(1) is True
        assert ship.get_suppress_skill_bonus(2) is False

    def test_unknown_aircraft_leaves_slot_empty(self, service):
        ship = service.build_ship(ShipSelection(ship="Akagi", slots={
            1: SlotSelection(aircraft="Ghost", suppress_skill_bonus=True),
            2: SlotSelection(aircraft=None),
        }))
        assert ship.get_aircraft(1) is None
        assert ship.get_suppress_skill_bonus(1) is False
        assert ship.get_mastery("sortie") == 0

    def test_template_improvement_kept_without_override(self, catalog):
        registry = TemplateRegistry(catalog)
        registry.load_aircraft_templates([{"name": "Z53", "type": "KS", "ack": 12, "improvement": 5}])
        registry.load_ship_templates([{"name": "Kaga", "slotComposition": [46]}])
        service = MasteryService(registry, Settings())

        ship = service.build_ship(ShipSelection(ship="Kaga", slots={1: SlotSelection(aircraft="Z53")}))
        assert ship.get_aircraft(1).improvement_level == 5
        # (12 + 0.2 × 5) × √46 + 25
        assert ship.get_mastery("sortie") == 113

    def test_improvement_override_replaces_template_level(self, catalog):
        registry = TemplateRegistry(catalog)
        registry.load_aircraft_templates([{"name": "Z53", "type": "KS", "ack": 12, "improvement": 5}])
        registry.load_ship_templates([{"name": "Kaga", "slotComposition": [46]}])
        service = MasteryService(registry, Settings())

        ship = service.build_ship(ShipSelection(ship="Kaga", slots={
            1: SlotSelection(aircraft="Z53", improvement=0),
        }))
        assert ship.get_aircraft(1).improvement_level == 0

    def test_garbage_improvement_resets_to_zero(self, service):
        ship = service.build_ship(ShipSelection(ship="Akagi", slots={
            1: SlotSelection(aircraft="Reppuu", improvement="max"),
        }))
        assert ship.get_aircraft(1).improvement_level == 0

    def test_unknown_ship_is_unassigned(self, service):
        ship = service.build_ship(ShipSelection(ship="Nowhere", slots={
            1: SlotSelection(aircraft="Reppuu"),
        }))
        assert ship.is_unassigned

    def test_slot_outside_ship_raises(self, service):
        with pytest.raises(InvalidSlotNumber):
            service.build_ship(ShipSelection(ship="Akagi", slots={
                5: SlotSelection(aircraft="Reppuu"),
            }))


class TestCalculate:

    def test_single_carrier(self, service):
        result = service.calculate(_request(ships=[
            ShipSelection(ship="Akagi", slots={1: SlotSelection(aircraft="Reppuu")}),
        ]))
        # 10 × √18 + 25
        assert result.total == 67
        assert result.mode is MasteryMode.SORTIE
        assert result.ship_scores == [("Akagi", 67)]
        assert len(result.fleet) == 1

    def test_excluded_rows_do_not_contribute(self, service):
        result = service.calculate(_request(ships=[
            ShipSelection(ship="Akagi", slots={1: SlotSelection(aircraft="Reppuu")}),
            ShipSelection(ship="Akagi", include=False, slots={1: SlotSelection(aircraft="Reppuu")}),
        ]))
        assert result.total == 67
        assert len(result.ship_scores) == 1

    def test_unknown_ship_rows_skipped(self, service):
        result = service.calculate(_request(ships=[
            ShipSelection(ship="Nowhere"),
            ShipSelection(ship="Akagi", slots={1: SlotSelection(aircraft="Reppuu")}),
        ]))
        assert result.total == 67
        assert result.ship_scores == [("Akagi", 67)]

    def test_air_defense_with_high_altitude(self, service):
        result = service.calculate(_request(mode="airDefense", high_altitude=True, ships=[
            ShipSelection(ship="Base 1", slots={
                1: SlotSelection(aircraft="Me163B"),
                2: SlotSelection(aircraft="Raiden"),
            }),
        ]))
        # (109 + 101) × 0.8
        assert result.total == 168
        assert result.high_altitude is True
        assert result.revision_layer is RevisionLayer.FLEET
        assert result.ship_scores == [("Base 1", 210)]

    def test_scouting_revision_on_base(self, service):
        result = service.calculate(_request(mode="airDefense", ships=[
            ShipSelection(ship="Base 1", slots={
                1: SlotSelection(aircraft="Saiun"),
                2: SlotSelection(aircraft="Raiden"),
            }),
        ]))
        # (0 + 101) × 1.3, Saiun's own bonus suppressed by default
        assert result.total == 131

    def test_layer_follows_settings(self, registry):
        service = MasteryService(registry, Settings(HIGH_ALTITUDE_LAYER="both"))
        result = service.calculate(_request(mode="airDefense", high_altitude=True, ships=[
            ShipSelection(ship="Base 1", slots={1: SlotSelection(aircraft="Me163B")}),
        ]))
        # trunc(trunc(109 × 0.8) × 0.8)
        assert result.total == 69
        assert result.revision_layer is RevisionLayer.BOTH

    def test_empty_request(self, service):
        result = service.calculate(_request())
        assert result.total == 0
        assert result.ship_scores == []

    def test_unsupported_mode(self, service):
        with pytest.raises(UnsupportedMasteryMode):
            service.calculate(_request(mode="airDefence"))

    def test_fleet_size_from_settings(self, registry):
        service = MasteryService(registry, Settings(MAX_FLEET_SIZE=1))
        with pytest.raises(FleetSizeExceeded):
            service.calculate(_request(ships=[
                ShipSelection(ship="Akagi"),
                ShipSelection(ship="Akagi"),
            ]))

    def test_request_from_json_payload(self, service):
        request = MasteryRequest.model_validate({
            "mode": "sortie",
            "ships": [{"ship": "Akagi", "slots": {"1": {"aircraft": "Reppuu", "improvement": "10"}}}],
        })
        # (10 + 2) × √18 + 25
        assert service.calculate(request).total == 75
