from __future__ import annotations

from typing import Iterable, Optional, Sequence

from strokeslab.config import Settings, get_settings
from strokeslab.sg.schemas import (
    SG_CATEGORY_ORDER,
    HoleRecord,
    SGCategory,
    StrokesGainedResult,
)

from .schemas import PlayerSGStats, RoundScoringSummary, TrendDirection

RECOMMENDATIONS: dict[SGCategory, str] = {
    SGCategory.OFF_TEE: "Focus on driving accuracy and distance control",
    SGCategory.APPROACH: "Work on iron play and distance control with approaches",
    SGCategory.AROUND_GREEN: "Practice chipping, pitching, and bunker play",
    SGCategory.PUTTING: "Focus on speed control and short putts",
}


def weakest_category(result: StrokesGainedResult) -> SGCategory:
    """Lowest category; ties go to the earliest in ``SG_CATEGORY_ORDER``."""

    values = result.by_category()
    return min(SG_CATEGORY_ORDER, key=lambda category: values[category])


def strongest_category(result: StrokesGainedResult) -> SGCategory:
    values = result.by_category()
    return max(SG_CATEGORY_ORDER, key=lambda category: values[category])


def _mean(values: Sequence[float]) -> float:
    return sum(values) / len(values)


def _trend(totals: Sequence[float], window: int) -> Optional[float]:
    if len(totals) < window * 2:
        return None
    recent = totals[-window:]
    previous = totals[-window * 2 : -window]
    return _mean(recent) - _mean(previous)


def _trend_direction(trend: Optional[float], threshold: float) -> TrendDirection:
    if trend is None:
        return "stable"
    if trend > threshold:
        return "improving"
    if trend < -threshold:
        return "worsening"
    return "stable"


def aggregate_player_stats(
    rounds: Iterable[StrokesGainedResult], *, settings: Optional[Settings] = None
) -> PlayerSGStats:
    """Average round results and compare recent form.

    ``rounds`` must be in chronological order, oldest first.
    """

    resolved = settings or get_settings()
    rounds = list(rounds)
    if not rounds:
        return PlayerSGStats(rounds_count=0, averages=StrokesGainedResult.zero())

    averages = StrokesGainedResult(
        off_tee=_mean([r.off_tee for r in rounds]),
        approach=_mean([r.approach for r in rounds]),
        around_green=_mean([r.around_green for r in rounds]),
        putting=_mean([r.putting for r in rounds]),
    )
    trend = _trend([r.total for r in rounds], resolved.trend_window)
    weakest = weakest_category(averages)

    return PlayerSGStats(
        rounds_count=len(rounds),
        averages=averages,
        trend=trend,
        trend_direction=_trend_direction(trend, resolved.trend_threshold),
        weakest_category=weakest,
        strongest_category=strongest_category(averages),
        recommendation=RECOMMENDATIONS[weakest],
    )


def _safe_divide(numerator: float, denominator: float) -> float | None:
    if denominator <= 0:
        return None
    return numerator / denominator


def summarize_round(holes: Iterable[HoleRecord]) -> RoundScoringSummary:
    """Traditional scorecard stats for the holes played."""

    played = list(holes)
    holes_played = len(played)
    total_score = sum(h.score for h in played)
    total_par = sum(h.par for h in played)
    total_putts = sum(h.putts for h in played)

    # Only holes where a fairway outcome was recorded count towards the total.
    fairway_holes = [h for h in played if h.fairway_hit is not None]
    fairways_hit = sum(1 for h in fairway_holes if h.fairway_hit)
    gir_count = sum(1 for h in played if h.green_in_regulation)

    fairway_ratio = _safe_divide(fairways_hit, len(fairway_holes))
    gir_ratio = _safe_divide(gir_count, holes_played)

    return RoundScoringSummary(
        holes_played=holes_played,
        total_score=total_score,
        total_par=total_par,
        score_to_par=total_score - total_par,
        total_putts=total_putts,
        putts_per_hole=_safe_divide(total_putts, holes_played),
        fairways_hit=fairways_hit,
        fairways_total=len(fairway_holes),
        fairway_pct=fairway_ratio * 100 if fairway_ratio is not None else None,
        gir_count=gir_count,
        gir_pct=gir_ratio * 100 if gir_ratio is not None else None,
        penalties=sum(h.penalties for h in played),
    )


__all__ = [
    "RECOMMENDATIONS",
    "aggregate_player_stats",
    "strongest_category",
    "summarize_round",
    "weakest_category",
]
