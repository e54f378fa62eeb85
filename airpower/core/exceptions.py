"""
Custom Exceptions - Air-Power Mastery Engine
airpower/core/exceptions.py

Custom exception classes for catalog, ship and fleet operations.
"""


class MasteryEngineException(Exception):
    """Base exception for scoring engine operations."""

    pass


class UnknownAircraftType(MasteryEngineException):
    """Aircraft type id is not registered in the catalog."""

    def __init__(self, type_id: str):
        self.type_id = type_id
        super().__init__(f"Unknown aircraft type: {type_id}")


class InvalidSlotNumber(MasteryEngineException):
    """Slot number is not one of the ship's assigned slots."""

    def __init__(self, slot_no):
        self.slot_no = slot_no
        super().__init__(f"Invalid slot number : {slot_no}")


class InvalidSlotCapacity(MasteryEngineException):
    """Slot capacity is negative or not an integer."""

    def __init__(self, capacity):
        self.capacity = capacity
        super().__init__(f"Invalid slot capacity : {capacity}")


class UnsupportedMasteryMode(MasteryEngineException):
    """Mode matches neither sortie nor airDefense."""

    def __init__(self, mode):
        self.mode = mode
        super().__init__(f"Unsupported mastery mode: {mode}")


class FleetSizeExceeded(MasteryEngineException):
    """Fleet already holds the maximum number of ships."""

    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"Fleet cannot hold more than {limit} ships")


class TemplateConfigError(MasteryEngineException):
    """Template configuration could not be parsed or validated."""

    def __init__(self, message: str = "Invalid template configuration"):
        self.message = message
        super().__init__(message)
