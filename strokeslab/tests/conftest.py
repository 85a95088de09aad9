"""Shared pytest fixtures for engine tests."""

from __future__ import annotations

import os
from datetime import datetime, timedelta, timezone
from typing import Callable

import pytest

from strokeslab.config import reset_settings_cache
from strokeslab.handicap.schemas import RoundHistoryEntry
from strokeslab.sg.schemas import HoleRecord


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch):
    for name in list(os.environ):
        if name.startswith("STROKESLAB_"):
            monkeypatch.delenv(name, raising=False)
    reset_settings_cache()
    yield
    reset_settings_cache()


@pytest.fixture
def make_hole() -> Callable[..., HoleRecord]:
    def build(**overrides) -> HoleRecord:
        payload = {
            "hole_number": 1,
            "par": 4,
            "score": 4,
            "putts": 2,
            "fairway_hit": True,
            "green_in_regulation": True,
        }
        payload.update(overrides)
        return HoleRecord(**payload)

    return build


@pytest.fixture
def make_history() -> Callable[..., list[RoundHistoryEntry]]:
    """Build a history from scores, oldest first, one week apart."""

    start = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def build(
        scores: list[int], *, rating: float = 72.0, slope: int = 113
    ) -> list[RoundHistoryEntry]:
        return [
            RoundHistoryEntry(
                total_score=score,
                course_rating=rating,
                slope_rating=slope,
                played_at=start + timedelta(weeks=i),
            )
            for i, score in enumerate(scores)
        ]

    return build
