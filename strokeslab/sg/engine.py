"""Pure strokes-gained attribution for scorecard-level hole data."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from strokeslab.config import Settings, get_settings

from .benchmarks import BENCHMARKS, BenchmarkCategory, interpolate
from .schemas import HoleRecord, StrokesGainedResult

_LOG = logging.getLogger(__name__)

# Tour-average score from the tee for a hole of each par.
EXPECTED_SCORE_BY_PAR: dict[int, float] = {3: 2.9, 4: 3.95, 5: 5.05}


def expected_total_for_par(par: int) -> float:
    try:
        return EXPECTED_SCORE_BY_PAR[par]
    except KeyError:
        raise ValueError(f"unsupported par: {par}") from None


def _putting_sg(hole: HoleRecord, settings: Settings) -> float:
    if hole.first_putt_distance is None:
        _LOG.debug(
            "hole %s: no first putt distance, using %.2f expected putts",
            hole.hole_number,
            settings.expected_putts_fallback,
        )
        return settings.expected_putts_fallback - hole.putts
    expected = interpolate(
        BENCHMARKS[BenchmarkCategory.PUTTING], hole.first_putt_distance
    )
    return expected - hole.putts


def _off_tee_sg(hole: HoleRecord, settings: Settings) -> float:
    # Par-3 tee shots are scored as approach shots.
    if hole.par < 4 or hole.fairway_hit is None:
        return 0.0
    if hole.fairway_hit:
        return settings.tee_shot_differential
    return -settings.tee_shot_differential


def _approach_start_expectation(hole: HoleRecord, distance: float) -> float:
    fairway = interpolate(BENCHMARKS[BenchmarkCategory.FAIRWAY], distance)
    if hole.fairway_hit is True or (hole.fairway_hit is None and hole.par == 3):
        return fairway
    rough = interpolate(BENCHMARKS[BenchmarkCategory.ROUGH], distance)
    if hole.fairway_hit is False:
        return rough
    return (fairway + rough) / 2


def _approach_sg(hole: HoleRecord) -> float:
    if hole.approach_distance is None:
        _LOG.debug("hole %s: no approach distance recorded", hole.hole_number)
        return 0.0
    shots_to_green = 1 if hole.green_in_regulation else 2
    start = _approach_start_expectation(hole, hole.approach_distance)
    return start - shots_to_green


def attribute_hole(
    hole: HoleRecord, *, settings: Optional[Settings] = None
) -> StrokesGainedResult:
    """Split a hole's score against the par baseline into the four categories.

    Putting, tee and approach are estimated from whatever was recorded; around
    the green takes the remainder so the categories always add up to
    ``expected_total_for_par(par) - score``.
    """

    resolved = settings or get_settings()
    strokes_vs_baseline = expected_total_for_par(hole.par) - hole.score

    putting = _putting_sg(hole, resolved)
    off_tee = _off_tee_sg(hole, resolved)
    approach = _approach_sg(hole)
    around_green = strokes_vs_baseline - (off_tee + approach + putting)

    return StrokesGainedResult(
        off_tee=off_tee,
        approach=approach,
        around_green=around_green,
        putting=putting,
    )


def aggregate_round(
    holes: Iterable[HoleRecord], *, settings: Optional[Settings] = None
) -> StrokesGainedResult:
    """Sum per-hole strokes gained over a (possibly partial) round."""

    resolved = settings or get_settings()
    off_tee = approach = around_green = putting = 0.0
    for hole in holes:
        result = attribute_hole(hole, settings=resolved)
        off_tee += result.off_tee
        approach += result.approach
        around_green += result.around_green
        putting += result.putting

    return StrokesGainedResult(
        off_tee=off_tee,
        approach=approach,
        around_green=around_green,
        putting=putting,
    )


__all__ = [
    "EXPECTED_SCORE_BY_PAR",
    "aggregate_round",
    "attribute_hole",
    "expected_total_for_par",
]
