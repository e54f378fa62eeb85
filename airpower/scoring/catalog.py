"""
Aircraft Catalog
airpower/scoring/catalog.py

Static reference data for the mastery formulas:

  type id ──► AircraftTypeDef   (skill bonus, default suppression, high-altitude flag)
          ──► CorrectionRule    (improvement correction: linear or sqrt)
          ──► ScoutingRule      (per-mode revision: constant or search-tiered)

A catalog is built once at startup (normally via ``default_catalog()``)
and passed by reference into the aircraft factory, ships and fleets.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple

import structlog

from airpower.core.exceptions import UnknownAircraftType
from airpower.models.enumerations import (
    AIRCRAFT_TYPE_CODES,
    AircraftTypeId,
    MasteryMode,
)

logger = structlog.get_logger(__name__)


class CorrectionKind(str, Enum):
    """Closed set of improvement-correction strategies."""
    LINEAR = "linear"   # coefficient × level
    SQRT = "sqrt"       # coefficient × √level


@dataclass(frozen=True)
class AircraftTypeDef:
    """One aircraft category."""
    id: str
    skill_bonus: float
    default_suppresses_bonus: bool = False
    high_altitude: bool = False    # counted by the high-altitude revision

    def __str__(self) -> str:
        return self.id


@dataclass(frozen=True)
class CorrectionRule:
    """Improvement correction for one aircraft type."""
    coefficient: float = 0.0
    kind: CorrectionKind = CorrectionKind.LINEAR

    def apply(self, improvement_level: int) -> float:
        if self.kind is CorrectionKind.SQRT:
            return self.coefficient * math.sqrt(improvement_level)
        return self.coefficient * improvement_level


NO_CORRECTION = CorrectionRule()


@dataclass(frozen=True)
class ScoutingRule:
    """
    Scouting revision for one (type, mode) pair.

    ``tiers`` is a sequence of (min_search, factor) checked from the highest
    threshold down; ``default`` applies below every threshold. A rule with
    no tiers is a constant factor.
    """
    default: float = 1.0
    tiers: Tuple[Tuple[float, float], ...] = ()

    def factor(self, search: float) -> float:
        for min_search, factor in self.tiers:
            if search >= min_search:
                return factor
        return self.default


def _key(type_id) -> str:
    if isinstance(type_id, Enum):
        return str(type_id.value)
    return str(type_id)


@dataclass
class AircraftCatalog:
    """Registry of aircraft types and their per-type scoring rules."""

    types: Dict[str, AircraftTypeDef] = field(default_factory=dict)
    correction_rules: Dict[str, CorrectionRule] = field(default_factory=dict)
    scouting_rules: Dict[Tuple[str, MasteryMode], ScoutingRule] = field(default_factory=dict)

    # ------------------------------------------------------------------
    # Type definitions
    # ------------------------------------------------------------------

    def define_type(
        self,
        type_id,
        skill_bonus: float,
        suppresses_bonus_by_default: bool = False,
        high_altitude: bool = False,
    ) -> AircraftTypeDef:
        type_def = AircraftTypeDef(
            id=_key(type_id),
            skill_bonus=skill_bonus,
            default_suppresses_bonus=suppresses_bonus_by_default,
            high_altitude=high_altitude,
        )
        self.types[type_def.id] = type_def
        return type_def

    def lookup(self, type_id) -> AircraftTypeDef:
        try:
            return self.types[_key(type_id)]
        except KeyError:
            raise UnknownAircraftType(_key(type_id)) from None

    def type_ids(self) -> List[str]:
        return list(self.types.keys())

    def resolve_type_code(self, code_or_id: str) -> AircraftTypeDef:
        """Resolve a template abbreviation (``KS``) or a plain type id."""
        code = _key(code_or_id)
        mapped = AIRCRAFT_TYPE_CODES.get(code.upper())
        if mapped is not None:
            return self.lookup(mapped)
        return self.lookup(code)

    # ------------------------------------------------------------------
    # Improvement correction
    # ------------------------------------------------------------------

    def define_correction_rule(
        self,
        type_id,
        coefficient: float,
        kind=CorrectionKind.LINEAR,
    ) -> CorrectionRule:
        type_def = self.lookup(type_id)
        rule = CorrectionRule(coefficient=coefficient, kind=CorrectionKind(kind))
        self.correction_rules[type_def.id] = rule
        return rule

    def correction_rule(self, type_id) -> CorrectionRule:
        # Types that cannot be improved (torpedo bombers, seaplane bombers...)
        return self.correction_rules.get(_key(type_id), NO_CORRECTION)

    # ------------------------------------------------------------------
    # Scouting revision
    # ------------------------------------------------------------------

    def define_scouting_rule(
        self,
        type_id,
        mode,
        default: float = 1.0,
        tiers: Iterable[Tuple[float, float]] = (),
    ) -> ScoutingRule:
        type_def = self.lookup(type_id)
        ordered = tuple(sorted(((float(s), float(f)) for s, f in tiers), reverse=True))
        rule = ScoutingRule(default=default, tiers=ordered)
        self.scouting_rules[(type_def.id, MasteryMode.parse(mode))] = rule
        return rule

    def is_scouting(self, type_id) -> bool:
        key = _key(type_id)
        return any(rule_type == key for rule_type, _ in self.scouting_rules)

    def scouting_factor(self, aircraft, mode) -> float:
        """Revision factor contributed by one aircraft; 1 for non-scouts."""
        rule: Optional[ScoutingRule] = self.scouting_rules.get(
            (aircraft.type.id, MasteryMode.parse(mode))
        )
        if rule is None:
            return 1.0
        return rule.factor(aircraft.search)


def default_catalog() -> AircraftCatalog:
    """
    Build the standard 14-type catalog.

    Skill bonuses assume maximum proficiency; lower proficiency is not modelled.
    """
    catalog = AircraftCatalog()
    T = AircraftTypeId

    catalog.define_type(T.CARRIER_FIGHTER, 25)
    catalog.define_type(T.CARRIER_TORPEDO_BOMBER, 3, True)
    catalog.define_type(T.CARRIER_DIVE_BOMBER, 3, True)
    catalog.define_type(T.FIGHTER_BOMBER, 3, True)
    catalog.define_type(T.SEAPLANE_BOMBER, 9, True)
    catalog.define_type(T.SEAPLANE_FIGHTER, 25)
    catalog.define_type(T.JET_BOMBER, 3, True)
    catalog.define_type(T.ARMY_FIGHTER, 25)
    catalog.define_type(T.INTERCEPTOR, 25)
    catalog.define_type(T.ROCKET_INTERCEPTOR, 25, high_altitude=True)
    catalog.define_type(T.LAND_ATTACKER, 3, True)
    catalog.define_type(T.CARRIER_RECON, 3, True)
    catalog.define_type(T.SEAPLANE_RECON, 3, True)
    catalog.define_type(T.LAND_RECON, 3, True)

    catalog.define_correction_rule(T.CARRIER_FIGHTER, 0.2)
    catalog.define_correction_rule(T.FIGHTER_BOMBER, 0.25)
    catalog.define_correction_rule(T.SEAPLANE_FIGHTER, 0.2)
    catalog.define_correction_rule(T.INTERCEPTOR, 0.2)
    catalog.define_correction_rule(T.ARMY_FIGHTER, 0.2)
    catalog.define_correction_rule(T.LAND_ATTACKER, 0.5, CorrectionKind.SQRT)

    S, D = MasteryMode.SORTIE, MasteryMode.AIR_DEFENSE
    catalog.define_scouting_rule(T.CARRIER_RECON, S, 1.0)
    catalog.define_scouting_rule(T.CARRIER_RECON, D, 1.2, [(9, 1.3)])
    catalog.define_scouting_rule(T.LAND_RECON, S, 1.15, [(9, 1.18)])
    # Air-defense land-recon revision does not depend on search
    catalog.define_scouting_rule(T.LAND_RECON, D, 1.18)
    catalog.define_scouting_rule(T.SEAPLANE_RECON, S, 1.0)
    catalog.define_scouting_rule(T.SEAPLANE_RECON, D, 1.1, [(9, 1.16), (8, 1.13)])

    logger.debug(
        "catalog_built",
        types=len(catalog.types),
        correction_rules=len(catalog.correction_rules),
        scouting_rules=len(catalog.scouting_rules),
    )
    return catalog
