from strokeslab.sg.engine import aggregate_round

from .schemas import PlayerSGStats, RoundScoringSummary
from .stats import (
    RECOMMENDATIONS,
    aggregate_player_stats,
    strongest_category,
    summarize_round,
    weakest_category,
)

__all__ = [
    "PlayerSGStats",
    "RECOMMENDATIONS",
    "RoundScoringSummary",
    "aggregate_player_stats",
    "aggregate_round",
    "strongest_category",
    "summarize_round",
    "weakest_category",
]
