"""
Fleet
airpower/scoring/fleet.py

Aggregates ship mastery and applies the fleet-wide high-altitude revision.

Formula (layer = fleet, the default):
    total = Σ ship.get_mastery(mode, high_altitude=False)
    if high_altitude: total × high_altitude_revision(Σ rockets over all ships)
    result = trunc(total)

Layer ``ship`` lets each air-base apply its own revision and skips the
fleet-wide one; layer ``both`` applies both, compounding the factor.
"""

from typing import Any, Dict, Iterable, List, Optional

import structlog

from airpower.config import get_settings
from airpower.core.exceptions import FleetSizeExceeded
from airpower.models.enumerations import MasteryMode, RevisionLayer
from airpower.scoring.mastery_functions import high_altitude_revision
from airpower.scoring.ship import Ship
from airpower.scoring.utils import truncate

logger = structlog.get_logger(__name__)


class Fleet:
    """Ordered collection of ships and air-bases."""

    def __init__(
        self,
        ships: Optional[Iterable[Ship]] = None,
        revision_layer=None,
        max_size: Optional[int] = None,
    ):
        settings = get_settings()
        self.max_size = max_size if max_size is not None else settings.MAX_FLEET_SIZE
        self.revision_layer = RevisionLayer(revision_layer or settings.HIGH_ALTITUDE_LAYER)
        self.ships: List[Ship] = []
        for ship in ships or []:
            self.add_ship(ship)

    def add_ship(self, ship: Ship) -> None:
        if len(self.ships) >= self.max_size:
            raise FleetSizeExceeded(self.max_size)
        self.ships.append(ship)

    def rocket_count(self) -> int:
        return sum(len(ship.rocket_aircraft()) for ship in self.ships)

    def get_mastery(self, mode=MasteryMode.SORTIE, high_altitude: bool = False) -> int:
        """
        Fleet mastery.

        Raises:
            UnsupportedMasteryMode: for an unknown mode string.
        """
        mode = MasteryMode.parse(mode)
        per_ship = high_altitude and self.revision_layer in (RevisionLayer.SHIP, RevisionLayer.BOTH)
        fleet_wide = high_altitude and self.revision_layer in (RevisionLayer.FLEET, RevisionLayer.BOTH)

        ship_scores = [ship.get_mastery(mode, per_ship) for ship in self.ships]
        revision = high_altitude_revision(self.rocket_count()) if fleet_wide else 1.0
        mastery = truncate(sum(ship_scores) * revision)

        logger.info(
            "fleet_mastery_calculated",
            mode=mode.value,
            ships=len(self.ships),
            high_altitude=high_altitude,
            revision_layer=self.revision_layer.value,
            ship_scores=ship_scores,
            high_altitude_revision=revision,
            mastery=mastery,
        )
        return mastery

    def to_snapshot(self) -> Dict[str, Any]:
        """Merged ship snapshots; repeated names are suffixed ' (2)', ' (3)'..."""
        merged: Dict[str, Any] = {}
        for ship in self.ships:
            (name, body), = ship.to_snapshot().items()
            key, n = name, 1
            while key in merged:
                n += 1
                key = f"{name} ({n})"
            merged[key] = body
        return merged

    def __str__(self) -> str:
        return ",".join(str(ship) for ship in self.ships)

    def __len__(self) -> int:
        return len(self.ships)
