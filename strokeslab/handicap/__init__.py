"""Handicap index calculation."""

from .calculator import (  # noqa: F401
    STANDARD_SLOPE,
    best_differential_count,
    calculate_handicap,
    calculate_index,
    course_handicap,
    score_differential,
)
from .schemas import HandicapIndex, HandicapResult, RoundHistoryEntry  # noqa: F401
