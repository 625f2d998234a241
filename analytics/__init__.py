from .stats import (
    all_player_statistics,
    calculate_totals,
    leaderboard,
    player_statistics,
    running_totals,
    score_type_distribution,
    transaction_matrix,
)

__all__ = [
    "calculate_totals",
    "leaderboard",
    "transaction_matrix",
    "player_statistics",
    "all_player_statistics",
    "running_totals",
    "score_type_distribution",
]
