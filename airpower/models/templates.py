from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List


class AircraftTemplate(BaseModel):
    """
    Pydantic model for one entry of the aircraft template file.

    Field aliases match the configuration keys (``ack``, ``antibomb``...).
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str = Field(
        ...,
        min_length=1,
        description="Display name, also the template key"
    )

    type: str = Field(
        ...,
        min_length=1,
        description="Type code (KS, KYS, ...) or aircraft type id"
    )

    attack: float = Field(
        default=0,
        ge=0,
        alias="ack",
        description="Anti-air stat"
    )

    intercept: float = Field(default=0, ge=0)

    anti_bomber_power: float = Field(
        default=0,
        ge=0,
        alias="antibomb",
        description="Anti-bomber stat (land-based fighters)"
    )

    search: float = Field(default=0, ge=0)

    proficiency: int = Field(
        default=7,
        ge=0,
        le=7,
        alias="skill",
        description="Internal proficiency; carried but not scored"
    )

    improvement_level: int = Field(
        default=0,
        alias="improvement",
        description="Initial improvement level; clamped to [0, 10] on creation"
    )

    @field_validator("type")
    @classmethod
    def strip_type(cls, v: str) -> str:
        return v.strip()


class ShipTemplate(BaseModel):
    """
    Pydantic model for one entry of the ship template file.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str = Field(..., min_length=1)

    slot_capacities: List[int] = Field(
        default_factory=list,
        alias="slotComposition",
        description="Aircraft capacity per slot, slot 1 first"
    )

    is_air_base: bool = Field(
        default=False,
        alias="airbase",
        description="Air-bases receive scouting and high-altitude revisions"
    )

    @field_validator("slot_capacities")
    @classmethod
    def validate_capacities(cls, v: List[int]) -> List[int]:
        if any(capacity < 0 for capacity in v):
            raise ValueError("slot capacities must be >= 0")
        return v
