from datetime import datetime
from pydantic import Field
from typing import Dict, List, Optional, Sequence

from .base import BaseGolfModel
from .hole import Hole
from .hole_score import HoleScores
from .player import Player
from .scoring_config import ScoringConfiguration, ScoringSystemKind


class RoundState(BaseGolfModel):
    """A round in progress: roster, layout with scores, and derived totals.

    Players, layout, scoring configuration and system are fixed when the
    round is created. Score changes go through ``with_score``, which returns
    a new state; the engine then recomputes every derived field at once.
    """
    id: Optional[str] = None
    players: List[Player]
    holes: List[HoleScores] = Field(default_factory=list)
    scoring_config: ScoringConfiguration = Field(default_factory=ScoringConfiguration)
    scoring_system: ScoringSystemKind = ScoringSystemKind.FIGHTER
    totals: Dict[str, int] = Field(default_factory=dict)
    created_at: Optional[datetime] = None

    @classmethod
    def start(
        cls,
        players: Sequence[Player],
        holes: Sequence[Hole],
        scoring_config: Optional[ScoringConfiguration] = None,
        scoring_system: ScoringSystemKind = ScoringSystemKind.FIGHTER,
        id: Optional[str] = None,
    ) -> "RoundState":
        """Create an empty round: no scores yet, every total at 0."""
        ordered = sorted(holes, key=lambda h: h.number)
        return cls(
            id=id,
            players=list(players),
            holes=[HoleScores(hole=h) for h in ordered],
            scoring_config=scoring_config or ScoringConfiguration(),
            scoring_system=scoring_system,
            totals={p.id: 0 for p in players},
            created_at=datetime.now(),
        )

    @property
    def player_ids(self) -> List[str]:
        return [p.id for p in self.players]

    @property
    def layout(self) -> List[Hole]:
        """The round's holes without scores, in hole-number order."""
        return [hs.hole for hs in self.holes]

    def get_player(self, player_id: str) -> Optional[Player]:
        for player in self.players:
            if player.id == player_id:
                return player
        return None

    def get_hole(self, number: int) -> Optional[HoleScores]:
        """Get scores for a hole by its number."""
        for hole_scores in self.holes:
            if hole_scores.number == number:
                return hole_scores
        return None

    def is_hole_complete(self, number: int) -> bool:
        hole_scores = self.get_hole(number)
        return hole_scores is not None and hole_scores.is_complete(self.player_ids)

    def holes_completed(self) -> int:
        """Number of holes every player has a score on."""
        ids = self.player_ids
        return sum(1 for hs in self.holes if hs.is_complete(ids))

    def is_complete(self) -> bool:
        """Check if all holes have scores from every player."""
        return bool(self.holes) and self.holes_completed() == len(self.holes)

    def current_hole(self) -> Optional[int]:
        """First hole still missing a score, or None once the round is done."""
        ids = self.player_ids
        for hole_scores in self.holes:
            if not hole_scores.is_complete(ids):
                return hole_scores.number
        return None

    def with_score(self, hole_number: int, player_id: str, gross: Optional[int]) -> "RoundState":
        """Copy of this round with one gross score set (or cleared with None).

        Derived fields of the copy are stale until recomputed.
        """
        holes = []
        for hole_scores in self.holes:
            if hole_scores.number == hole_number:
                gross_scores = dict(hole_scores.gross_scores)
                if gross is None:
                    gross_scores.pop(player_id, None)
                else:
                    gross_scores[player_id] = gross
                hole_scores = hole_scores.model_copy(update={"gross_scores": gross_scores})
            holes.append(hole_scores)
        return self.model_copy(update={"holes": holes})
