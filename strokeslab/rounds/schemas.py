from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from strokeslab.sg.schemas import SGCategory, StrokesGainedResult

TrendDirection = Literal["improving", "stable", "worsening"]


class PlayerSGStats(BaseModel):
    rounds_count: int = Field(serialization_alias="roundsCount")
    averages: StrokesGainedResult
    trend: Optional[float] = None
    trend_direction: TrendDirection = Field(
        default="stable", serialization_alias="trendDirection"
    )
    weakest_category: Optional[SGCategory] = Field(
        default=None, serialization_alias="weakestCategory"
    )
    strongest_category: Optional[SGCategory] = Field(
        default=None, serialization_alias="strongestCategory"
    )
    recommendation: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class RoundScoringSummary(BaseModel):
    holes_played: int = Field(serialization_alias="holesPlayed")
    total_score: int = Field(serialization_alias="totalScore")
    total_par: int = Field(serialization_alias="totalPar")
    score_to_par: int = Field(serialization_alias="scoreToPar")

    total_putts: int = Field(serialization_alias="totalPutts")
    putts_per_hole: Optional[float] = Field(
        default=None, serialization_alias="puttsPerHole"
    )

    fairways_hit: int = Field(serialization_alias="fairwaysHit")
    fairways_total: int = Field(serialization_alias="fairwaysTotal")
    fairway_pct: Optional[float] = Field(default=None, serialization_alias="fairwayPct")

    gir_count: int = Field(serialization_alias="girCount")
    gir_pct: Optional[float] = Field(default=None, serialization_alias="girPct")

    penalties: int

    model_config = ConfigDict(populate_by_name=True, frozen=True)


__all__ = ["PlayerSGStats", "RoundScoringSummary", "TrendDirection"]
