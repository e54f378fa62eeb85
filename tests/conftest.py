# tests/conftest.py

"""
Pytest Fixtures - Shared catalog, aircraft and ship loadouts for all tests

LOADOUT REFERENCE:
- sortie_carrier:   "ag"  [20, 20, 32, 10]  three carrier fighters + suppressed dive bomber
- defense_base:     "no1base" [4, 18, 18, 18]  carrier recon (search 9) + three land fighters
- high_altitude_base: [18, 18, 18, 18]  two rocket interceptors + one interceptor
"""

import pytest

from airpower.config import get_settings
from airpower.models.enumerations import AircraftTypeId
from airpower.scoring.aircraft import create_aircraft
from airpower.scoring.catalog import default_catalog
from airpower.scoring.ship import Ship


# =============================================================================
# SETTINGS
# =============================================================================

@pytest.fixture(autouse=True)
def fresh_settings():
    """Settings are cached process-wide; reset around every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# CATALOG / AIRCRAFT FIXTURES
# =============================================================================

@pytest.fixture
def catalog():
    """Standard 14-type catalog."""
    return default_catalog()


@pytest.fixture
def make_aircraft(catalog):
    """Factory: make_aircraft(name, type_id, attack=..., ...)."""
    def _make(name, type_id, **stats):
        return create_aircraft(catalog, name=name, type_id=type_id, **stats)
    return _make


# =============================================================================
# SHIP FIXTURES
# =============================================================================

@pytest.fixture
def sortie_carrier(catalog, make_aircraft):
    ship = Ship("ag", [20, 20, 32, 10], catalog=catalog)
    ship.set_aircraft(1, make_aircraft("rp", AircraftTypeId.CARRIER_FIGHTER, attack=10))
    ship.set_aircraft(2, make_aircraft("rp601", AircraftTypeId.CARRIER_FIGHTER, attack=11))
    ship.set_aircraft(3, make_aircraft("rpk", AircraftTypeId.CARRIER_FIGHTER, attack=12))
    ship.set_aircraft(4, make_aircraft("z62i", AircraftTypeId.CARRIER_DIVE_BOMBER, attack=7))
    ship.set_suppress_skill_bonus(4, True)
    return ship


@pytest.fixture
def defense_base(catalog, make_aircraft):
    base = Ship("no1base", [4, 18, 18, 18], True, catalog=catalog)
    base.set_aircraft(1, make_aircraft("Saiun", AircraftTypeId.CARRIER_RECON, search=9))
    base.set_aircraft(2, make_aircraft(
        "Hayabusa II", AircraftTypeId.ARMY_FIGHTER, attack=6, intercept=2))
    base.set_aircraft(3, make_aircraft(
        "Raiden", AircraftTypeId.INTERCEPTOR, attack=6, intercept=2, anti_bomber_power=5))
    base.set_aircraft(4, make_aircraft(
        "Hien", AircraftTypeId.ARMY_FIGHTER, attack=8, intercept=3, anti_bomber_power=1))
    return base


@pytest.fixture
def high_altitude_base(catalog, make_aircraft):
    base = Ship("high altitude base", [18, 18, 18, 18], True, catalog=catalog)
    base.set_aircraft(1, make_aircraft(
        "Shusui prototype", AircraftTypeId.ROCKET_INTERCEPTOR, attack=2, anti_bomber_power=8))
    base.set_aircraft(2, make_aircraft(
        "Me163B", AircraftTypeId.ROCKET_INTERCEPTOR, attack=2, anti_bomber_power=9))
    base.set_aircraft(3, make_aircraft(
        "Reppuu Kai (352)", AircraftTypeId.INTERCEPTOR,
        attack=11, intercept=3, anti_bomber_power=7))
    return base


# =============================================================================
# TEMPLATE CONFIG FIXTURES
# =============================================================================

@pytest.fixture
def aircraft_config():
    """Aircraft template config in the on-disk key format."""
    return {
        "Reppuu": {"name": "Reppuu", "type": "KS", "ack": 10},
        "Suisei": {"name": "Suisei", "type": "KB", "ack": 0},
        "Saiun": {"name": "Saiun", "type": "KT", "search": 9},
        "Raiden": {"name": "Raiden", "type": "KYS", "ack": 6, "intercept": 2, "antibomb": 5},
        "Me163B": {"name": "Me163B", "type": "ROS", "ack": 2, "antibomb": 9},
    }


@pytest.fixture
def ship_config():
    return {
        "Akagi": {"name": "Akagi", "slotComposition": [18, 18, 27, 10]},
        "Base 1": {"name": "Base 1", "slotComposition": [18, 18, 18, 18], "airbase": True},
    }
