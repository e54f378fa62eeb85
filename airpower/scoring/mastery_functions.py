"""
Mastery Functions
airpower/scoring/mastery_functions.py

Per-slot mastery (air-power) formulas and the revision-factor lookups.

Formulas:
    effective_attack = attack + improvement_bonus
    sortie      = trunc((effective_attack + 1.5 × intercept) × √size + bonus)
    airDefense  = trunc((effective_attack + intercept + 2 × anti_bomber) × √size + bonus)

    bonus = 0 when the slot suppresses the skill bonus, else type.skill_bonus

High-altitude revision (rocket interceptors equipped):
    0 → 0.5,  1 → 0.8,  2 → 1.1,  3+ → 1.2
"""

import math
from typing import Callable, Dict, Iterable

from airpower.models.enumerations import MasteryMode
from airpower.scoring.aircraft import Aircraft
from airpower.scoring.catalog import AircraftCatalog
from airpower.scoring.utils import truncate

HIGH_ALTITUDE_REVISIONS = (0.5, 0.8, 1.1, 1.2)


def improvement_bonus(catalog: AircraftCatalog, aircraft: Aircraft) -> float:
    """Attack added by the aircraft's improvement level."""
    rule = catalog.correction_rule(aircraft.type.id)
    return rule.apply(aircraft.improvement_level)


def skill_bonus(aircraft: Aircraft, suppressed: bool) -> float:
    return 0 if suppressed else aircraft.type.skill_bonus


def sortie_mastery(
    catalog: AircraftCatalog,
    aircraft: Aircraft,
    size: int,
    suppressed: bool = False,
) -> int:
    attack = aircraft.attack + improvement_bonus(catalog, aircraft)
    bonus = skill_bonus(aircraft, suppressed)
    mastery = (attack + aircraft.intercept * 1.5) * math.sqrt(size) + bonus
    return truncate(mastery)


def air_defense_mastery(
    catalog: AircraftCatalog,
    aircraft: Aircraft,
    size: int,
    suppressed: bool = False,
) -> int:
    attack = aircraft.attack + improvement_bonus(catalog, aircraft)
    bonus = skill_bonus(aircraft, suppressed)
    mastery = (
        attack + aircraft.intercept + aircraft.anti_bomber_power * 2
    ) * math.sqrt(size) + bonus
    return truncate(mastery)


MASTERY_FUNCTIONS: Dict[MasteryMode, Callable[..., int]] = {
    MasteryMode.SORTIE: sortie_mastery,
    MasteryMode.AIR_DEFENSE: air_defense_mastery,
}


def slot_mastery(
    catalog: AircraftCatalog,
    mode,
    aircraft: Aircraft,
    size: int,
    suppressed: bool = False,
) -> int:
    """
    Mastery of one occupied slot.

    Raises:
        UnsupportedMasteryMode: if ``mode`` is neither sortie nor airDefense.
    """
    func = MASTERY_FUNCTIONS[MasteryMode.parse(mode)]
    return func(catalog, aircraft, size, suppressed)


def high_altitude_revision(rocket_count: int) -> float:
    """Step function of the number of rocket interceptors equipped."""
    index = max(0, min(rocket_count, len(HIGH_ALTITUDE_REVISIONS) - 1))
    return HIGH_ALTITUDE_REVISIONS[index]


def scouting_revision(
    catalog: AircraftCatalog,
    aircraft: Iterable[Aircraft],
    mode,
) -> float:
    """Product of the scouting factors of ``aircraft`` (1 when none scout)."""
    mode = MasteryMode.parse(mode)
    revision = 1.0
    # Sorted so the float product does not depend on slot order
    for factor in sorted(catalog.scouting_factor(ac, mode) for ac in aircraft):
        revision *= factor
    return revision
