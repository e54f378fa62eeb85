from enum import Enum
from typing import Dict

from airpower.core.exceptions import UnsupportedMasteryMode


class MasteryMode(str, Enum):
    SORTIE = "sortie"            # Sortie (fleet/air-base sent out)
    AIR_DEFENSE = "airDefense"   # Air-base defending against raids

    @classmethod
    def parse(cls, mode) -> "MasteryMode":
        """Return the mode for ``mode`` or raise UnsupportedMasteryMode."""
        if isinstance(mode, cls):
            return mode
        try:
            return cls(mode)
        except ValueError:
            raise UnsupportedMasteryMode(mode) from None


class AircraftTypeId(str, Enum):
    CARRIER_FIGHTER = "carrier_fighter"
    CARRIER_TORPEDO_BOMBER = "carrier_torpedo_bomber"
    CARRIER_DIVE_BOMBER = "carrier_dive_bomber"
    FIGHTER_BOMBER = "fighter_bomber"
    SEAPLANE_BOMBER = "seaplane_bomber"
    SEAPLANE_FIGHTER = "seaplane_fighter"
    JET_BOMBER = "jet_bomber"
    ARMY_FIGHTER = "army_fighter"
    INTERCEPTOR = "interceptor"
    ROCKET_INTERCEPTOR = "rocket_interceptor"
    LAND_ATTACKER = "land_attacker"
    CARRIER_RECON = "carrier_recon"
    SEAPLANE_RECON = "seaplane_recon"       # includes large flying boats
    LAND_RECON = "land_recon"


class RevisionLayer(str, Enum):
    FLEET = "fleet"   # one high-altitude revision over the fleet total
    SHIP = "ship"     # per air-base revision only
    BOTH = "both"     # per air-base, then again over the fleet total


# Abbreviations used by template configuration files
AIRCRAFT_TYPE_CODES: Dict[str, AircraftTypeId] = {
    "KS": AircraftTypeId.CARRIER_FIGHTER,
    "KK": AircraftTypeId.CARRIER_TORPEDO_BOMBER,
    "KB": AircraftTypeId.CARRIER_DIVE_BOMBER,
    "BS": AircraftTypeId.FIGHTER_BOMBER,
    "SB": AircraftTypeId.SEAPLANE_BOMBER,
    "SS": AircraftTypeId.SEAPLANE_FIGHTER,
    "HB": AircraftTypeId.JET_BOMBER,
    "RS": AircraftTypeId.ARMY_FIGHTER,
    "KYS": AircraftTypeId.INTERCEPTOR,
    "ROS": AircraftTypeId.ROCKET_INTERCEPTOR,
    "RK": AircraftTypeId.LAND_ATTACKER,
    "KT": AircraftTypeId.CARRIER_RECON,
    "ST": AircraftTypeId.SEAPLANE_RECON,
    "RT": AircraftTypeId.LAND_RECON,
}
