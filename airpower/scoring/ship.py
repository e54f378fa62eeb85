"""
Ships and Air-Bases
airpower/scoring/ship.py

A Ship owns a fixed, 1-based run of Slots built from a list of capacities.
Air-bases are Ships with ``is_air_base=True``; only they receive the
scouting and high-altitude revisions.

Ship mastery:
    total = Σ slot_mastery(slot)                       (ascending slot order)
    if air-base:             total × scouting_revision
    if air-base and high-alt: × high_altitude_revision(own rocket count)
    result = trunc(total)

The "no ship selected" placeholder is a Ship with zero slots and
``assigned=False``: slot mutation is ignored and mastery is always 0.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional

import structlog
from pydantic import TypeAdapter

from airpower.core.exceptions import InvalidSlotCapacity, InvalidSlotNumber
from airpower.models.enumerations import MasteryMode
from airpower.models.snapshot import ShipSnapshot, SlotSnapshot
from airpower.scoring.aircraft import Aircraft, create_aircraft
from airpower.scoring.catalog import AircraftCatalog, default_catalog
from airpower.scoring.mastery_functions import (
    high_altitude_revision,
    scouting_revision,
    slot_mastery,
)
from airpower.scoring.utils import truncate

logger = structlog.get_logger(__name__)

_SNAPSHOT_ADAPTER = TypeAdapter(Dict[str, ShipSnapshot])


def _check_capacity(capacity) -> int:
    """Normalise a slot capacity; None counts as 0."""
    if capacity is None:
        return 0
    try:
        value = int(capacity)
    except (TypeError, ValueError):
        raise InvalidSlotCapacity(capacity) from None
    if value < 0:
        raise InvalidSlotCapacity(capacity)
    return value


@dataclass
class Slot:
    """Equipment position holding at most one aircraft."""
    capacity: int = 0
    aircraft: Optional[Aircraft] = None
    suppress_skill_bonus: bool = False

    def __str__(self) -> str:
        return ",".join([
            f"capacity={self.capacity}",
            f"{{{self.aircraft or 'empty'}}}",
            f"skill_bonus={'off' if self.suppress_skill_bonus else 'on'}",
        ])


class Ship:
    """A ship or air-base carrying aircraft in numbered slots."""

    def __init__(
        self,
        name: str,
        slot_capacities: Iterable[int] = (),
        is_air_base: bool = False,
        catalog: Optional[AircraftCatalog] = None,
        assigned: bool = True,
    ):
        capacities = [_check_capacity(capacity) for capacity in slot_capacities]
        self.name = name
        self.is_air_base = bool(is_air_base)
        self.catalog = catalog or default_catalog()
        self.assigned = assigned
        self.slots: Dict[int, Slot] = {
            slot_no: Slot(capacity=capacity)
            for slot_no, capacity in enumerate(capacities, start=1)
        }

    @classmethod
    def unassigned(cls, catalog: Optional[AircraftCatalog] = None) -> "Ship":
        return cls("", [], False, catalog=catalog, assigned=False)

    @property
    def is_unassigned(self) -> bool:
        return not self.assigned

    @property
    def slot_count(self) -> int:
        return len(self.slots)

    def slot_numbers(self) -> List[int]:
        return sorted(self.slots)

    # ------------------------------------------------------------------
    # Slot access
    # ------------------------------------------------------------------

    def _check_slot(self, slot_no) -> None:
        if slot_no not in self.slots:
            raise InvalidSlotNumber(slot_no)

    def get_slot(self, slot_no: int) -> Slot:
        self._check_slot(slot_no)
        return self.slots[slot_no]

    def set_slot(self, slot_no: int, slot: Slot) -> None:
        if self.is_unassigned:
            return
        self._check_slot(slot_no)
        slot.capacity = _check_capacity(slot.capacity)
        self.slots[slot_no] = slot

    def get_aircraft(self, slot_no: int) -> Optional[Aircraft]:
        return self.get_slot(slot_no).aircraft

    def set_aircraft(self, slot_no: int, aircraft: Optional[Aircraft]) -> None:
        if self.is_unassigned:
            return
        self.get_slot(slot_no).aircraft = aircraft

    def equip(self, slot_no: int, aircraft: Aircraft) -> None:
        """Set ``aircraft`` and reset suppression to its type's default."""
        if self.is_unassigned:
            return
        slot = self.get_slot(slot_no)
        slot.aircraft = aircraft
        slot.suppress_skill_bonus = aircraft.type.default_suppresses_bonus

    def remove_aircraft(self, slot_no: int) -> None:
        self.set_aircraft(slot_no, None)

    def get_suppress_skill_bonus(self, slot_no: int) -> bool:
        return self.get_slot(slot_no).suppress_skill_bonus

    def set_suppress_skill_bonus(self, slot_no: int, suppressed: bool = False) -> None:
        if self.is_unassigned:
            return
        self.get_slot(slot_no).suppress_skill_bonus = bool(suppressed)

    # ------------------------------------------------------------------
    # Equipped aircraft queries
    # ------------------------------------------------------------------

    def equipped_aircraft(self) -> List[Aircraft]:
        return [
            self.slots[slot_no].aircraft
            for slot_no in self.slot_numbers()
            if self.slots[slot_no].aircraft is not None
        ]

    def collect_aircraft(self, type_id) -> List[Aircraft]:
        type_def = self.catalog.lookup(type_id)
        return [ac for ac in self.equipped_aircraft() if ac.type.id == type_def.id]

    def scouting_aircraft(self) -> List[Aircraft]:
        return [ac for ac in self.equipped_aircraft() if self.catalog.is_scouting(ac.type.id)]

    def rocket_aircraft(self) -> List[Aircraft]:
        return [ac for ac in self.equipped_aircraft() if ac.type.high_altitude]

    def scouting_revision(self, mode) -> float:
        return scouting_revision(self.catalog, self.scouting_aircraft(), mode)

    # ------------------------------------------------------------------
    # Mastery
    # ------------------------------------------------------------------

    def get_mastery_one_slot(self, slot_no: int, mode=MasteryMode.SORTIE) -> int:
        """Mastery of one slot; 0 for an empty or nonexistent slot."""
        mode = MasteryMode.parse(mode)
        slot = self.slots.get(slot_no)
        if slot is None or slot.aircraft is None:
            return 0
        return slot_mastery(
            self.catalog,
            mode,
            slot.aircraft,
            slot.capacity,
            slot.suppress_skill_bonus,
        )

    def mastery_breakdown(self, mode=MasteryMode.SORTIE) -> Dict[int, int]:
        mode = MasteryMode.parse(mode)
        return {
            slot_no: self.get_mastery_one_slot(slot_no, mode)
            for slot_no in self.slot_numbers()
        }

    def get_mastery(self, mode=MasteryMode.SORTIE, high_altitude: bool = False) -> int:
        """
        Ship (or air-base) mastery.

        Raises:
            UnsupportedMasteryMode: for an unknown mode string.
        """
        if self.is_unassigned:
            return 0
        mode = MasteryMode.parse(mode)

        breakdown = self.mastery_breakdown(mode)
        total = sum(breakdown.values())
        scouting = 1.0
        altitude = 1.0
        if self.is_air_base:
            scouting = self.scouting_revision(mode)
            if high_altitude:
                altitude = high_altitude_revision(len(self.rocket_aircraft()))
        mastery = truncate(total * scouting * altitude)

        logger.debug(
            "ship_mastery_calculated",
            ship=self.name,
            mode=mode.value,
            air_base=self.is_air_base,
            slot_scores=breakdown,
            scouting_revision=scouting,
            high_altitude_revision=altitude,
            mastery=mastery,
        )
        return mastery

    # ------------------------------------------------------------------
    # Snapshot
    # ------------------------------------------------------------------

    def snapshot_model(self) -> ShipSnapshot:
        slots = {}
        for slot_no in self.slot_numbers():
            slot = self.slots[slot_no]
            slots[slot_no] = SlotSnapshot(
                capacity=slot.capacity,
                aircraft=None if slot.aircraft is None else slot.aircraft.to_snapshot(),
                suppress_skill_bonus=slot.suppress_skill_bonus,
            )
        return ShipSnapshot(is_air_base=self.is_air_base, slots=slots)

    def to_snapshot(self) -> Dict[str, Any]:
        """``{name: {isAirBase, slots: {slotNo: {...}}}}``, JSON-encodable."""
        return {self.name: self.snapshot_model().model_dump(by_alias=True)}

    def __str__(self) -> str:
        lines = [self.name]
        lines.extend(f"slot[{slot_no}]:{self.slots[slot_no]}" for slot_no in self.slot_numbers())
        return "\n".join(lines)


def unassigned_ship(catalog: Optional[AircraftCatalog] = None) -> Ship:
    """Placeholder for "no ship selected"."""
    return Ship.unassigned(catalog)


def ships_from_snapshot(
    catalog: AircraftCatalog,
    snapshot: Mapping[str, Any],
) -> List[Ship]:
    """
    Rebuild ships from a structural snapshot.

    Raises:
        pydantic.ValidationError: if the snapshot is malformed.
        UnknownAircraftType: if an aircraft references an unregistered type.
        InvalidSlotNumber: if a ship's slot numbers are not exactly 1..n.
    """
    parsed = _SNAPSHOT_ADAPTER.validate_python(dict(snapshot))
    ships: List[Ship] = []
    for name, ship_snap in parsed.items():
        slot_numbers = sorted(ship_snap.slots)
        for expected, slot_no in enumerate(slot_numbers, start=1):
            if slot_no != expected:
                raise InvalidSlotNumber(slot_no)
        ship = Ship(
            name,
            [ship_snap.slots[n].capacity for n in slot_numbers],
            ship_snap.is_air_base,
            catalog=catalog,
        )
        for slot_no in slot_numbers:
            slot_snap = ship_snap.slots[slot_no]
            if slot_snap.aircraft is not None:
                ac = slot_snap.aircraft
                ship.set_aircraft(slot_no, create_aircraft(
                    catalog,
                    name=ac.name,
                    type_id=ac.type,
                    attack=ac.attack,
                    intercept=ac.intercept,
                    anti_bomber_power=ac.anti_bomber_power,
                    search=ac.search,
                    proficiency=ac.proficiency,
                    improvement_level=ac.improvement_level,
                ))
            ship.set_suppress_skill_bonus(slot_no, slot_snap.suppress_skill_bonus)
        ships.append(ship)
    return ships
