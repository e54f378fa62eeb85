from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Dict, Optional


class SnapshotModel(BaseModel):
    """
    Base model for structural snapshots.

    Dumped with camelCase keys (``by_alias=True``) for display and debugging.
    Not a versioned protocol.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class AircraftSnapshot(SnapshotModel):
    name: str
    type: str = Field(..., description="Aircraft type id")
    attack: float = 0
    intercept: float = 0
    anti_bomber_power: float = 0
    search: float = 0
    proficiency: int = 7
    improvement_level: int = Field(default=0, ge=0, le=10)


class SlotSnapshot(SnapshotModel):
    capacity: int = Field(..., ge=0)
    aircraft: Optional[AircraftSnapshot] = None
    suppress_skill_bonus: bool = False


class ShipSnapshot(SnapshotModel):
    is_air_base: bool = False
    slots: Dict[int, SlotSnapshot] = Field(default_factory=dict)
