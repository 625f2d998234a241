from typing import Dict, Optional, Sequence, Set

from models.hole_score import HoleScores
from models.player import Player

from .strokes import has_stroke


def net_score(gross: Optional[int], has_stroke_on_hole: bool) -> Optional[int]:
    """Gross minus the voor stroke, if any. None while no score is entered."""
    if gross is None:
        return None
    return gross - 1 if has_stroke_on_hole else gross


def hole_net_scores(
    hole_scores: HoleScores,
    players: Sequence[Player],
    stroke_holes: Dict[str, Set[int]],
) -> Dict[str, int]:
    """Net scores for the players who have a gross score on this hole."""
    net_scores = {}
    for player in players:
        net = net_score(
            hole_scores.gross(player.id),
            has_stroke(player.id, hole_scores.number, stroke_holes),
        )
        if net is not None:
            net_scores[player.id] = net
    return net_scores


def is_hole_complete(hole_scores: HoleScores, players: Sequence[Player]) -> bool:
    """A hole only counts once every registered player has a score on it."""
    return hole_scores.is_complete(p.id for p in players)
