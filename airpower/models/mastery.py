from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional


class SlotSelection(BaseModel):
    """
    What the user picked for one slot.
    """

    aircraft: Optional[str] = Field(
        default=None,
        description="Aircraft template name; None or unknown leaves the slot empty"
    )

    improvement: Optional[Any] = Field(
        default=None,
        description="Raw improvement input, normalised to [0, 10]; None keeps the template level"
    )

    suppress_skill_bonus: Optional[bool] = Field(
        default=None,
        description="Override; None applies the aircraft type's default"
    )


class ShipSelection(BaseModel):
    """
    One ship/air-base row of a calculation request.
    """

    ship: str = Field(..., description="Ship template name")

    include: bool = Field(
        default=True,
        description="Whether the row takes part in the calculation"
    )

    slots: Dict[int, SlotSelection] = Field(default_factory=dict)


class MasteryRequest(BaseModel):
    """
    Model for a fleet mastery calculation.
    """

    mode: str = Field(
        default="sortie",
        description="sortie or airDefense"
    )

    high_altitude: bool = False

    ships: List[ShipSelection] = Field(default_factory=list)
