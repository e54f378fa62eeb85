"""
Core Package - Air-Power Mastery Engine
airpower/core/__init__.py

Core infrastructure: exceptions, logging setup.
"""

from airpower.core.exceptions import (
    FleetSizeExceeded,
    InvalidSlotCapacity,
    InvalidSlotNumber,
    MasteryEngineException,
    TemplateConfigError,
    UnknownAircraftType,
    UnsupportedMasteryMode,
)
from airpower.core.logging import configure_logging

__all__ = [
    "FleetSizeExceeded",
    "InvalidSlotCapacity",
    "InvalidSlotNumber",
    "MasteryEngineException",
    "TemplateConfigError",
    "UnknownAircraftType",
    "UnsupportedMasteryMode",
    "configure_logging",
]
