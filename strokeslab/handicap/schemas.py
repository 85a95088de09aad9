"""Pydantic models for handicap history and results."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

# Absent while fewer than the minimum number of qualifying rounds exist.
HandicapIndex = Optional[float]


class RoundHistoryEntry(BaseModel):
    total_score: int = Field(
        ge=1, validation_alias=AliasChoices("total_score", "totalScore")
    )
    course_rating: Optional[float] = Field(
        default=None, validation_alias=AliasChoices("course_rating", "courseRating")
    )
    slope_rating: Optional[int] = Field(
        default=None, validation_alias=AliasChoices("slope_rating", "slopeRating")
    )
    played_at: datetime = Field(
        validation_alias=AliasChoices("played_at", "playedAt")
    )

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @field_validator("played_at")
    @classmethod
    def assume_utc_when_naive(cls, value: datetime) -> datetime:
        # Dates without an offset are read as UTC so histories stay sortable.
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @property
    def qualifies(self) -> bool:
        """Both ratings present and a usable slope."""

        return (
            self.course_rating is not None
            and self.slope_rating is not None
            and self.slope_rating > 0
        )


class HandicapResult(BaseModel):
    index: float
    display_index: float = Field(serialization_alias="displayIndex")
    rounds_considered: int = Field(serialization_alias="roundsConsidered")
    differentials_used: List[float] = Field(serialization_alias="differentialsUsed")

    model_config = ConfigDict(populate_by_name=True, frozen=True)


__all__ = ["HandicapIndex", "HandicapResult", "RoundHistoryEntry"]
