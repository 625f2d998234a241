"""Per-hole point systems.

A system looks at one hole at a time and returns the points each player
earns there plus the pairwise exchanges behind those points. Holes missing
any player's score earn nobody anything.
"""

from __future__ import annotations

from typing import Dict, Optional, Protocol, Sequence

from models.base import BaseGolfModel
from models.hole import Hole
from models.hole_score import HoleScores
from models.player import Player
from models.scoring_config import ScoreTier, ScoringConfiguration, ScoringSystemKind

from .exceptions import UnknownScoringSystemError
from .strokes import gets_stroke_from


class HoleOutcome(BaseGolfModel):
    """Points per player on one hole, and who took them from whom."""
    points: Dict[str, int]
    transactions: Dict[str, Dict[str, int]]  # [a][b]: points a took from b
    settled: bool = False

    @classmethod
    def unsettled(cls, players: Sequence[Player]) -> "HoleOutcome":
        return cls(
            points={p.id: 0 for p in players},
            transactions=_empty_transactions(players),
        )


def _empty_transactions(players: Sequence[Player]) -> Dict[str, Dict[str, int]]:
    return {
        p.id: {o.id: 0 for o in players if o.id != p.id}
        for p in players
    }


class ScoringSystem(Protocol):
    """Interface every point system implements."""

    kind: ScoringSystemKind

    def score_hole(
        self,
        hole_scores: HoleScores,
        players: Sequence[Player],
        net_scores: Dict[str, int],
        layout: Sequence[Hole],
        config: ScoringConfiguration,
    ) -> HoleOutcome:
        ...


class FighterSystem:
    """Every player plays every other player on every hole.

    The lower net score takes the pair; the award depends on how good the
    winning net score is relative to par. On a net tie, a player who holds
    a stroke from that very opponent on this hole wins the pair, unless
    their gross score is double bogey or worse.
    """

    kind = ScoringSystemKind.FIGHTER

    def score_hole(self, hole_scores, players, net_scores, layout, config) -> HoleOutcome:
        if len(net_scores) != len(players) or not hole_scores.is_complete(p.id for p in players):
            return HoleOutcome.unsettled(players)

        transactions = _empty_transactions(players)
        points = {}
        for player in players:
            total = 0
            for opponent in players:
                if opponent.id == player.id:
                    continue
                result = self.pair_result(player, opponent, hole_scores, net_scores, layout, config)
                transactions[player.id][opponent.id] = result
                total += result
            points[player.id] = total
        return HoleOutcome(points=points, transactions=transactions, settled=True)

    def pair_result(
        self,
        player: Player,
        opponent: Player,
        hole_scores: HoleScores,
        net_scores: Dict[str, int],
        layout: Sequence[Hole],
        config: ScoringConfiguration,
    ) -> int:
        """Points ``player`` takes from ``opponent`` (negative when losing)."""
        player_net = net_scores[player.id]
        opponent_net = net_scores[opponent.id]

        if player_net < opponent_net:
            return self._win_award(player.id, hole_scores, net_scores, config)
        if player_net > opponent_net:
            return -self._win_award(opponent.id, hole_scores, net_scores, config)

        player_receives = gets_stroke_from(opponent, player.id, hole_scores.number, layout)
        opponent_receives = gets_stroke_from(player, opponent.id, hole_scores.number, layout)
        if player_receives and not opponent_receives:
            return self._tie_break_award(player.id, hole_scores, net_scores, config)
        if opponent_receives and not player_receives:
            return -self._tie_break_award(opponent.id, hole_scores, net_scores, config)
        return 0

    @staticmethod
    def _win_award(winner_id, hole_scores, net_scores, config) -> int:
        return config.award_for_to_par(net_scores[winner_id] - hole_scores.par)

    def _tie_break_award(self, winner_id, hole_scores, net_scores, config) -> int:
        # A stroke never rescues a gross double bogey.
        if hole_scores.get_score_type(winner_id) is ScoreTier.WORSE:
            return 0
        return self._win_award(winner_id, hole_scores, net_scores, config)


class SingleWinnerSystem:
    """The lowest net score takes the hole; nobody else scores.

    On an exact tie for lowest, the first of the tied players in roster
    order is the winner. The award follows the winner's gross score.
    """

    kind = ScoringSystemKind.SINGLE_WINNER

    def score_hole(self, hole_scores, players, net_scores, layout, config) -> HoleOutcome:
        outcome = HoleOutcome.unsettled(players)
        if len(net_scores) != len(players) or not hole_scores.is_complete(p.id for p in players):
            return outcome

        winner_id = self.find_winner(players, net_scores)
        outcome.settled = True
        if winner_id is None:
            return outcome

        award = config.award_for_to_par(hole_scores.to_par(winner_id))
        outcome.points[winner_id] = award
        for player in players:
            if player.id != winner_id:
                outcome.transactions[winner_id][player.id] += award
                outcome.transactions[player.id][winner_id] -= award
        return outcome

    @staticmethod
    def find_winner(players: Sequence[Player], net_scores: Dict[str, int]) -> Optional[str]:
        lowest = None
        winner_id = None
        for player in players:
            net = net_scores.get(player.id)
            if net is None:
                continue
            if lowest is None or net < lowest:
                lowest = net
                winner_id = player.id
        return winner_id


def get_scoring_system(kind: ScoringSystemKind) -> ScoringSystem:
    """Implementation for a scoring system kind."""
    try:
        kind = ScoringSystemKind(kind)
    except ValueError as exc:
        raise UnknownScoringSystemError(f"No implementation for scoring system {kind!r}") from exc
    if kind is ScoringSystemKind.FIGHTER:
        return FighterSystem()
    if kind is ScoringSystemKind.SINGLE_WINNER:
        return SingleWinnerSystem()
    raise UnknownScoringSystemError(f"No implementation for scoring system {kind!r}")
