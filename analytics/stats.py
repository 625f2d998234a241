from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Sequence

from models.hole_score import HoleScores
from models.player import Player
from models.results import HoleExtreme, LeaderboardEntry, PlayerStats
from models.scoring_config import ScoreTier

SCORE_TYPE_ORDER = [
    ScoreTier.EAGLE_OR_BETTER,
    ScoreTier.BIRDIE,
    ScoreTier.PAR,
    ScoreTier.BOGEY,
    ScoreTier.WORSE,
]

_STAT_FIELD = {
    ScoreTier.EAGLE_OR_BETTER: "eagles",
    ScoreTier.BIRDIE: "birdies",
    ScoreTier.PAR: "pars",
    ScoreTier.BOGEY: "bogeys",
    ScoreTier.WORSE: "worse",
}


def calculate_totals(holes: Iterable[HoleScores], players: Sequence[Player]) -> Dict[str, int]:
    """Sum each player's points across all holes (unplayed holes add 0)."""
    totals = {p.id: 0 for p in players}
    for hole_scores in holes:
        for player_id, points in hole_scores.points.items():
            totals[player_id] = totals.get(player_id, 0) + points
    return totals


def leaderboard(players: Sequence[Player], totals: Mapping[str, int]) -> List[LeaderboardEntry]:
    """
    Players by total points, highest first.

    Equal totals share a rank and the next total takes its position in the
    list (1, 1, 1, 4). Ties keep roster order.
    """
    rows = sorted(
        ((p, totals.get(p.id, 0)) for p in players),
        key=lambda row: -row[1],
    )

    entries: List[LeaderboardEntry] = []
    rank = 1
    for position, (player, points) in enumerate(rows, start=1):
        if entries and points < entries[-1].points:
            rank = position
        entries.append(LeaderboardEntry(player_id=player.id, name=player.name, points=points, rank=rank))
    return entries


def transaction_matrix(holes: Iterable[HoleScores], players: Sequence[Player]) -> Dict[str, Dict[str, int]]:
    """Net points each player took from each other player over the round.

    ``matrix[a][b] == -matrix[b][a]`` as long as every hole's exchanges are
    antisymmetric, which both scoring systems guarantee.
    """
    matrix = {
        p.id: {o.id: 0 for o in players if o.id != p.id}
        for p in players
    }
    for hole_scores in holes:
        for player_id, row in hole_scores.transactions.items():
            if player_id not in matrix:
                continue
            for opponent_id, points in row.items():
                if opponent_id in matrix[player_id]:
                    matrix[player_id][opponent_id] += points
    return matrix


def player_statistics(
    holes: Iterable[HoleScores],
    player_id: str,
    total_points: int = 0,
) -> PlayerStats:
    """
    Score-type counts and best/worst hole for one player.

    Only holes where the player has a gross score count. The first hole
    reaching a new best (or worst) points value is kept.
    """
    counts = {name: 0 for name in _STAT_FIELD.values()}
    best = None
    worst = None
    holes_played = 0
    holes_won = 0

    for hole_scores in holes:
        tier = hole_scores.get_score_type(player_id)
        if tier is None:
            continue
        holes_played += 1
        counts[_STAT_FIELD[tier]] += 1

        points = hole_scores.points.get(player_id, 0)
        if points > 0:
            holes_won += 1
        if best is None or points > best.points:
            best = HoleExtreme(number=hole_scores.number, points=points)
        if worst is None or points < worst.points:
            worst = HoleExtreme(number=hole_scores.number, points=points)

    return PlayerStats(
        player_id=player_id,
        holes_played=holes_played,
        holes_won=holes_won,
        best_hole=best,
        worst_hole=worst,
        total_points=total_points,
        **counts,
    )


def all_player_statistics(
    holes: Sequence[HoleScores],
    players: Sequence[Player],
    totals: Mapping[str, int],
) -> Dict[str, PlayerStats]:
    return {
        p.id: player_statistics(holes, p.id, totals.get(p.id, 0))
        for p in players
    }


def running_totals(holes: Iterable[HoleScores], players: Sequence[Player]) -> List[Dict[str, Any]]:
    """
    Cumulative points after each hole, for a hole-by-hole breakdown.

    Output rows:
    - hole_number
    - points: points earned on that hole
    - totals: cumulative totals including that hole
    """
    cumulative = {p.id: 0 for p in players}
    results: List[Dict[str, Any]] = []
    for hole_scores in holes:
        hole_points = {p.id: hole_scores.points.get(p.id, 0) for p in players}
        for player_id, points in hole_points.items():
            cumulative[player_id] += points
        results.append(
            {
                "hole_number": hole_scores.number,
                "points": hole_points,
                "totals": dict(cumulative),
            }
        )
    return results


def score_type_distribution(holes: Sequence[HoleScores], players: Sequence[Player]) -> List[Dict[str, Any]]:
    """
    Percentage of played holes by score type for each player.

    Categories follow SCORE_TYPE_ORDER; worse covers double bogey and up.
    """
    results: List[Dict[str, Any]] = []
    for player in players:
        stats = player_statistics(holes, player.id)
        row: Dict[str, Any] = {"player_id": player.id, "holes_played": stats.holes_played}
        for tier in SCORE_TYPE_ORDER:
            count = getattr(stats, _STAT_FIELD[tier])
            row[tier.value] = (count / stats.holes_played * 100.0) if stats.holes_played else 0.0
        results.append(row)
    return results
