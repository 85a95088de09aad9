"""Pydantic models representing hole inputs and strokes-gained outputs."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    computed_field,
    model_validator,
)


class SGCategory(str, Enum):
    OFF_TEE = "off_tee"
    APPROACH = "approach"
    AROUND_GREEN = "around_green"
    PUTTING = "putting"


# Tie-break order whenever categories are ranked.
SG_CATEGORY_ORDER = (
    SGCategory.OFF_TEE,
    SGCategory.APPROACH,
    SGCategory.AROUND_GREEN,
    SGCategory.PUTTING,
)


class HoleRecord(BaseModel):
    """One hole of a scorecard as supplied by the persistence layer."""

    hole_number: int = Field(
        ge=1, le=18, validation_alias=AliasChoices("hole_number", "holeNumber")
    )
    par: int = Field(ge=3, le=5)
    score: int = Field(ge=1)
    putts: int = Field(ge=0)
    fairway_hit: Optional[bool] = Field(
        default=None, validation_alias=AliasChoices("fairway_hit", "fairwayHit")
    )
    green_in_regulation: bool = Field(
        default=False,
        validation_alias=AliasChoices("green_in_regulation", "greenInRegulation", "gir"),
    )
    approach_distance: Optional[float] = Field(
        default=None,
        ge=0,
        validation_alias=AliasChoices("approach_distance", "approachDistance"),
    )
    first_putt_distance: Optional[float] = Field(
        default=None,
        ge=0,
        validation_alias=AliasChoices("first_putt_distance", "firstPuttDistance"),
    )
    penalties: int = Field(default=0, ge=0)

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @model_validator(mode="after")
    def check_putts_within_score(self) -> "HoleRecord":
        if self.putts > self.score:
            raise ValueError("putts cannot exceed score")
        return self


class StrokesGainedResult(BaseModel):
    """Strokes gained per category; positive is better than the tour baseline."""

    off_tee: float = Field(
        default=0.0, validation_alias=AliasChoices("off_tee", "offTee", "sg_off_tee")
    )
    approach: float = Field(
        default=0.0, validation_alias=AliasChoices("approach", "sg_approach")
    )
    around_green: float = Field(
        default=0.0,
        validation_alias=AliasChoices("around_green", "aroundGreen", "sg_around_green"),
    )
    putting: float = Field(
        default=0.0, validation_alias=AliasChoices("putting", "sg_putting")
    )

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total(self) -> float:
        return self.off_tee + self.approach + self.around_green + self.putting

    @classmethod
    def zero(cls) -> "StrokesGainedResult":
        return cls(off_tee=0.0, approach=0.0, around_green=0.0, putting=0.0)

    def value(self, category: SGCategory) -> float:
        return getattr(self, SGCategory(category).value)

    def by_category(self) -> dict[SGCategory, float]:
        return {category: self.value(category) for category in SG_CATEGORY_ORDER}

    def rounded(self, ndigits: int = 2) -> "StrokesGainedResult":
        """Display copy with each category rounded; ``total`` follows the rounded parts."""

        return StrokesGainedResult(
            off_tee=round(self.off_tee, ndigits),
            approach=round(self.approach, ndigits),
            around_green=round(self.around_green, ndigits),
            putting=round(self.putting, ndigits),
        )


__all__ = [
    "HoleRecord",
    "SGCategory",
    "SG_CATEGORY_ORDER",
    "StrokesGainedResult",
]
