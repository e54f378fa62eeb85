"""
scoring/integration_service.py

Full pipeline: UI selection → fleet mastery.

Class: MasteryService
Method: calculate(request) → MasteryResult

Pipeline steps:
  1. Parse the mode (fails fast on an unsupported mode)
  2. For each included ship row, build the ship from its template
  3. Skip rows whose template is unknown (unassigned placeholder)
  4. Equip each selected aircraft, apply improvement and suppression overrides
  5. Fleet.get_mastery → total, plus per-ship scores for display
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from airpower.config import Settings, get_settings
from airpower.models.enumerations import MasteryMode, RevisionLayer
from airpower.models.mastery import MasteryRequest, ShipSelection
from airpower.scoring.aircraft import improve
from airpower.scoring.fleet import Fleet
from airpower.scoring.ship import Ship
from airpower.scoring.template_registry import TemplateRegistry

logger = logging.getLogger(__name__)


@dataclass
class MasteryResult:
    """Output of MasteryService.calculate()."""
    total: int
    mode: MasteryMode
    high_altitude: bool
    revision_layer: RevisionLayer
    ship_scores: List[Tuple[str, int]] = field(default_factory=list)  # (name, mastery)
    fleet: Optional[Fleet] = field(default=None, repr=False)


class MasteryService:
    """Turns template selections into a scored fleet."""

    def __init__(self, registry: TemplateRegistry, settings: Optional[Settings] = None):
        self.registry = registry
        self.settings = settings or get_settings()

    def build_ship(self, selection: ShipSelection) -> Ship:
        """
        Ship for one selection row; unassigned when the template is unknown.

        Raises:
            InvalidSlotNumber: if a selection targets a slot the ship lacks.
        """
        ship = self.registry.get_ship(selection.ship)
        if ship.is_unassigned:
            return ship
        for slot_no, slot_sel in sorted(selection.slots.items()):
            aircraft = self.registry.make_aircraft(slot_sel.aircraft) if slot_sel.aircraft else None
            if aircraft is None:
                ship.remove_aircraft(slot_no)
                ship.set_suppress_skill_bonus(slot_no, False)
                continue
            if slot_sel.improvement is not None:
                aircraft = improve(aircraft, slot_sel.improvement)
            ship.equip(slot_no, aircraft)
            if slot_sel.suppress_skill_bonus is not None:
                ship.set_suppress_skill_bonus(slot_no, slot_sel.suppress_skill_bonus)
        return ship

    def calculate(self, request: MasteryRequest) -> MasteryResult:
        """
        Run the selection → mastery pipeline.

        Raises:
            UnsupportedMasteryMode: for an unknown mode.
            InvalidSlotNumber: for a slot selection outside a ship's slots.
            FleetSizeExceeded: when more rows are included than the fleet allows.
        """
        mode = MasteryMode.parse(request.mode)

        ships = []
        for selection in request.ships:
            if not selection.include:
                continue
            ship = self.build_ship(selection)
            if ship.is_unassigned:
                logger.info("ship_selection_skipped", extra={"ship": selection.ship})
                continue
            ships.append(ship)

        fleet = Fleet(
            ships,
            revision_layer=self.settings.HIGH_ALTITUDE_LAYER,
            max_size=self.settings.MAX_FLEET_SIZE,
        )
        total = fleet.get_mastery(mode, request.high_altitude)
        # Per-ship figures for display only; they ignore the fleet-wide revision
        ship_scores = [(ship.name, ship.get_mastery(mode)) for ship in fleet.ships]

        logger.info(
            "mastery_request_calculated",
            extra={
                "mode": mode.value,
                "ships": len(ships),
                "high_altitude": request.high_altitude,
                "total": total,
            },
        )

        return MasteryResult(
            total=total,
            mode=mode,
            high_altitude=request.high_altitude,
            revision_layer=fleet.revision_layer,
            ship_scores=ship_scores,
            fleet=fleet,
        )
