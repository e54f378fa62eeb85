"""
Aircraft value objects
airpower/scoring/aircraft.py

An Aircraft is an immutable record of one equipped unit. ``improve``
returns a copy with a normalised improvement level, so aircraft can be
shared between ships and snapshots freely.
"""

from dataclasses import dataclass, replace

from airpower.models.snapshot import AircraftSnapshot
from airpower.scoring.catalog import AircraftCatalog, AircraftTypeDef
from airpower.scoring.utils import (
    IMPROVEMENT_DEFAULT,
    IMPROVEMENT_MAX,
    IMPROVEMENT_MIN,
    clamp_improvement,
)

DEFAULT_PROFICIENCY = 7


@dataclass(frozen=True)
class Aircraft:
    """A single equipped aircraft."""
    name: str
    type: AircraftTypeDef
    attack: float = 0              # anti-air
    intercept: float = 0
    anti_bomber_power: float = 0
    search: float = 0
    proficiency: int = DEFAULT_PROFICIENCY   # carried for display, not scored
    improvement_level: int = IMPROVEMENT_DEFAULT

    def to_snapshot(self) -> AircraftSnapshot:
        return AircraftSnapshot(
            name=self.name,
            type=self.type.id,
            attack=self.attack,
            intercept=self.intercept,
            anti_bomber_power=self.anti_bomber_power,
            search=self.search,
            proficiency=self.proficiency,
            improvement_level=self.improvement_level,
        )

    def __str__(self) -> str:
        return ", ".join([
            f"name={self.name}",
            f"attack={self.attack}",
            f"intercept={self.intercept}",
            f"anti_bomber_power={self.anti_bomber_power}",
            f"search={self.search}",
            f"proficiency={self.proficiency}",
            f"improvement_level={self.improvement_level}",
        ])


def create_aircraft(
    catalog: AircraftCatalog,
    name: str,
    type_id,
    attack: float = 0,
    intercept: float = 0,
    anti_bomber_power: float = 0,
    search: float = 0,
    proficiency: int = DEFAULT_PROFICIENCY,
    improvement_level=IMPROVEMENT_DEFAULT,
) -> Aircraft:
    """
    Build an Aircraft of a catalog type.

    Raises:
        UnknownAircraftType: if ``type_id`` is not registered in ``catalog``.
    """
    return Aircraft(
        name=name,
        type=catalog.lookup(type_id),
        attack=attack,
        intercept=intercept,
        anti_bomber_power=anti_bomber_power,
        search=search,
        proficiency=proficiency,
        improvement_level=clamp_improvement(improvement_level),
    )


def improve(aircraft: Aircraft, value) -> Aircraft:
    """Return a copy of ``aircraft`` at the clamped improvement level."""
    return replace(aircraft, improvement_level=clamp_improvement(value))


def improvement_label(value) -> str:
    """Display label for an improvement level: '', '★1'..'★9' or '★max'."""
    try:
        level = int(float(value))
    except (TypeError, ValueError, OverflowError):
        return ""
    if level <= IMPROVEMENT_MIN:
        return ""
    if level >= IMPROVEMENT_MAX:
        return "★max"
    return f"★{level}"
