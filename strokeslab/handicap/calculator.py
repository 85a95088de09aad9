"""Handicap index from score differentials (best-N-of-M)."""

from __future__ import annotations

import logging
import math
from typing import Iterable, Optional

from strokeslab.config import Settings, get_settings

from .schemas import HandicapIndex, HandicapResult, RoundHistoryEntry

_LOG = logging.getLogger(__name__)

STANDARD_SLOPE = 113


def score_differential(
    total_score: float, course_rating: float, slope_rating: float
) -> float:
    return (total_score - course_rating) * STANDARD_SLOPE / slope_rating


def best_differential_count(rounds: int, fraction: float) -> int:
    return max(1, math.floor(rounds * fraction))


def calculate_handicap(
    history: Iterable[RoundHistoryEntry], *, settings: Optional[Settings] = None
) -> Optional[HandicapResult]:
    """Compute the index together with the differentials that produced it."""

    resolved = settings or get_settings()
    qualifying = [entry for entry in history if entry.qualifies]
    if len(qualifying) < resolved.handicap_min_rounds:
        _LOG.debug(
            "handicap unavailable: %d qualifying rounds (need %d)",
            len(qualifying),
            resolved.handicap_min_rounds,
        )
        return None

    recent = sorted(qualifying, key=lambda entry: entry.played_at, reverse=True)
    recent = recent[: resolved.handicap_window]

    differentials = sorted(
        score_differential(entry.total_score, entry.course_rating, entry.slope_rating)
        for entry in recent
    )
    count = best_differential_count(len(differentials), resolved.handicap_best_fraction)
    best = differentials[:count]

    index = sum(best) / len(best) * resolved.handicap_multiplier
    return HandicapResult(
        index=index,
        display_index=round(index, 1),
        rounds_considered=len(recent),
        differentials_used=best,
    )


def calculate_index(
    history: Iterable[RoundHistoryEntry], *, settings: Optional[Settings] = None
) -> HandicapIndex:
    """Full-precision handicap index, or ``None`` without enough rated rounds."""

    result = calculate_handicap(history, settings=settings)
    if result is None:
        return None
    return result.index


def course_handicap(handicap_index: float, slope_rating: int) -> int:
    """Strokes a player receives on a tee with the given slope."""

    return int(round(handicap_index * slope_rating / STANDARD_SLOPE))


__all__ = [
    "STANDARD_SLOPE",
    "best_differential_count",
    "calculate_handicap",
    "calculate_index",
    "course_handicap",
    "score_differential",
]
