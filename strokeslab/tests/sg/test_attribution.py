from __future__ import annotations

import itertools
import math

import pytest
from pydantic import ValidationError

from strokeslab.config import Settings
from strokeslab.sg.benchmarks import BENCHMARKS, BenchmarkCategory, interpolate
from strokeslab.sg.engine import (
    aggregate_round,
    attribute_hole,
    expected_total_for_par,
)
from strokeslab.sg.schemas import HoleRecord, StrokesGainedResult


def _category_sum(result: StrokesGainedResult) -> float:
    return result.off_tee + result.approach + result.around_green + result.putting


def test_reference_hole_reconciles(make_hole) -> None:
    hole = make_hole(approach_distance=150, first_putt_distance=20)
    result = attribute_hole(hole)

    assert result.putting == pytest.approx(1.877 - 2)
    assert result.off_tee == pytest.approx(0.1)
    assert result.approach == pytest.approx(3.00 - 1)
    assert result.around_green == pytest.approx(-0.05 - (0.1 + 2.0 - 0.123))
    assert math.isclose(_category_sum(result), 3.95 - 4, abs_tol=1e-9)
    assert math.isclose(result.total, -0.05, abs_tol=1e-9)


@pytest.mark.parametrize(
    "par, score, putts, fairway_hit, gir, approach, first_putt",
    list(
        itertools.product(
            [3, 4, 5],
            [1, 4, 9],
            [0, 1],
            [True, False, None],
            [True, False],
            [None, 12.0, 165.0, 450.0],
            [None, 0.5, 18.0, 120.0],
        )
    ),
)
def test_categories_sum_to_score_vs_par(
    par, score, putts, fairway_hit, gir, approach, first_putt
) -> None:
    hole = HoleRecord(
        hole_number=7,
        par=par,
        score=score,
        putts=putts,
        fairway_hit=fairway_hit,
        green_in_regulation=gir,
        approach_distance=approach,
        first_putt_distance=first_putt,
    )
    result = attribute_hole(hole)

    baseline = expected_total_for_par(par) - score
    assert math.isclose(_category_sum(result), baseline, abs_tol=1e-9)
    assert math.isclose(result.total, baseline, abs_tol=1e-9)
    if par == 3:
        assert result.off_tee == 0.0


def test_putting_fallback_without_distance(make_hole) -> None:
    result = attribute_hole(make_hole(putts=3))
    assert result.putting == pytest.approx(1.8 - 3)


def test_zero_putts_gets_full_expected_value(make_hole) -> None:
    result = attribute_hole(make_hole(score=2, putts=0))
    assert result.putting == pytest.approx(1.8)

    measured = attribute_hole(make_hole(score=2, putts=0, first_putt_distance=30))
    assert measured.putting == pytest.approx(2.040)


def test_off_tee_differential(make_hole) -> None:
    assert attribute_hole(make_hole(fairway_hit=True)).off_tee == pytest.approx(0.1)
    assert attribute_hole(make_hole(fairway_hit=False)).off_tee == pytest.approx(-0.1)
    assert attribute_hole(make_hole(fairway_hit=None)).off_tee == 0.0
    assert attribute_hole(make_hole(par=3, score=3, fairway_hit=True)).off_tee == 0.0


def test_approach_uses_lie_of_tee_shot(make_hole) -> None:
    fairway = attribute_hole(make_hole(fairway_hit=True, approach_distance=150))
    rough = attribute_hole(make_hole(fairway_hit=False, approach_distance=150))

    assert fairway.approach == pytest.approx(3.00 - 1)
    assert rough.approach == pytest.approx(3.17 - 1)


def test_approach_counts_extra_shot_when_green_missed(make_hole) -> None:
    hit = attribute_hole(make_hole(approach_distance=100))
    missed = attribute_hole(
        make_hole(approach_distance=100, green_in_regulation=False, score=5)
    )
    assert hit.approach - missed.approach == pytest.approx(1.0)


def test_approach_with_unknown_lie(make_hole) -> None:
    par_three = attribute_hole(
        make_hole(par=3, score=3, fairway_hit=None, approach_distance=175)
    )
    assert par_three.approach == pytest.approx(3.08 - 1)

    par_four = attribute_hole(make_hole(fairway_hit=None, approach_distance=175))
    assert par_four.approach == pytest.approx((3.08 + 3.28) / 2 - 1)


def test_approach_zero_without_distance(make_hole) -> None:
    assert attribute_hole(make_hole()).approach == 0.0


def test_putting_table_is_feet(make_hole) -> None:
    result = attribute_hole(make_hole(first_putt_distance=10, putts=2))
    assert result.putting == pytest.approx(
        interpolate(BENCHMARKS[BenchmarkCategory.PUTTING], 10) - 2
    )


def test_settings_override_constants(make_hole) -> None:
    settings = Settings(expected_putts_fallback=2.0, tee_shot_differential=0.25)
    result = attribute_hole(make_hole(putts=2), settings=settings)

    assert result.putting == pytest.approx(0.0)
    assert result.off_tee == pytest.approx(0.25)
    assert math.isclose(result.total, 3.95 - 4, abs_tol=1e-9)


def test_env_configuration_is_read(make_hole, monkeypatch) -> None:
    monkeypatch.setenv("STROKESLAB_TEE_SHOT_DIFFERENTIAL", "0.3")
    result = attribute_hole(make_hole(fairway_hit=False))
    assert result.off_tee == pytest.approx(-0.3)


def test_expected_total_for_par_rejects_unknown_par() -> None:
    assert expected_total_for_par(5) == 5.05
    with pytest.raises(ValueError):
        expected_total_for_par(6)


def test_aggregate_round_is_additive(make_hole) -> None:
    holes = [
        make_hole(hole_number=1, approach_distance=140, first_putt_distance=22),
        make_hole(hole_number=2, par=3, score=4, putts=2, fairway_hit=None,
                  green_in_regulation=False, approach_distance=180),
        make_hole(hole_number=3, par=5, score=6, putts=3, fairway_hit=False,
                  green_in_regulation=False, first_putt_distance=35),
        make_hole(hole_number=4, score=3, putts=1, first_putt_distance=8),
    ]
    per_hole = [attribute_hole(h) for h in holes]
    result = aggregate_round(holes)

    assert result.total == pytest.approx(sum(r.total for r in per_hole), abs=1e-9)
    assert result.putting == pytest.approx(sum(r.putting for r in per_hole))
    assert result.off_tee == pytest.approx(sum(r.off_tee for r in per_hole))
    expected_baseline = sum(expected_total_for_par(h.par) - h.score for h in holes)
    assert result.total == pytest.approx(expected_baseline, abs=1e-9)


def test_aggregate_empty_round_is_zero() -> None:
    result = aggregate_round([])
    assert result == StrokesGainedResult.zero()
    assert result.total == 0.0


def test_partial_round_is_not_normalised(make_hole) -> None:
    nine = [make_hole(hole_number=n, score=5) for n in range(1, 10)]
    assert aggregate_round(nine).total == pytest.approx(9 * (3.95 - 5))


@pytest.mark.parametrize(
    "overrides",
    [
        {"par": 2},
        {"par": 6},
        {"score": 0},
        {"putts": -1},
        {"score": 2, "putts": 3},
        {"hole_number": 19},
        {"penalties": -1},
        {"approach_distance": -10},
    ],
)
def test_malformed_records_rejected(make_hole, overrides) -> None:
    with pytest.raises(ValidationError):
        make_hole(**overrides)


def test_hole_record_accepts_camel_case_payload() -> None:
    hole = HoleRecord.model_validate(
        {
            "holeNumber": 12,
            "par": 5,
            "score": 5,
            "putts": 2,
            "fairwayHit": False,
            "greenInRegulation": True,
            "approachDistance": 95,
            "firstPuttDistance": 14,
        }
    )
    assert hole.hole_number == 12
    assert hole.fairway_hit is False
    assert hole.approach_distance == 95.0
    assert hole.penalties == 0
