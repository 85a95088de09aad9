"""Strokes gained core package."""

from .benchmarks import (  # noqa: F401
    BENCHMARKS,
    BenchmarkCategory,
    BenchmarkTable,
    expected_strokes,
    interpolate,
)
from .engine import (  # noqa: F401
    EXPECTED_SCORE_BY_PAR,
    aggregate_round,
    attribute_hole,
    expected_total_for_par,
)
from .schemas import (  # noqa: F401
    SG_CATEGORY_ORDER,
    HoleRecord,
    SGCategory,
    StrokesGainedResult,
)
