from pydantic import Field, field_validator
from typing import Dict, Iterable, Optional

from .base import BaseGolfModel
from .hole import Hole
from .scoring_config import ScoreTier

MIN_GROSS_SCORE = 1
MAX_GROSS_SCORE = 15


class HoleScores(BaseGolfModel):
    """All players' scores on a single hole.

    ``gross_scores`` holds only entered scores; a missing player means the
    hole has not been played by them yet. ``net_scores``, ``points`` and
    ``transactions`` are derived by the engine and never edited by hand.
    """

    hole: Hole
    gross_scores: Dict[str, int] = Field(default_factory=dict)
    net_scores: Dict[str, int] = Field(default_factory=dict)
    points: Dict[str, int] = Field(default_factory=dict)
    # transactions[a][b]: points a took from b on this hole
    transactions: Dict[str, Dict[str, int]] = Field(default_factory=dict)

    @field_validator('gross_scores')
    @classmethod
    def validate_gross_scores(cls, v):
        for player_id, strokes in v.items():
            if not MIN_GROSS_SCORE <= strokes <= MAX_GROSS_SCORE:
                raise ValueError(f"Score {strokes} for player '{player_id}' must be {MIN_GROSS_SCORE}-{MAX_GROSS_SCORE}")
        return v

    @property
    def number(self) -> int:
        return self.hole.number

    @property
    def par(self) -> int:
        return self.hole.par

    def gross(self, player_id: str) -> Optional[int]:
        return self.gross_scores.get(player_id)

    def to_par(self, player_id: str) -> Optional[int]:
        """Gross score relative to par (+2, -1, etc.)."""
        strokes = self.gross(player_id)
        if strokes is None:
            return None
        return strokes - self.par

    def get_score_type(self, player_id: str) -> Optional[ScoreTier]:
        """Tier of the player's gross score, or None if not entered."""
        relative = self.to_par(player_id)
        if relative is None:
            return None
        return ScoreTier.from_to_par(relative)

    def is_complete(self, player_ids: Iterable[str]) -> bool:
        """True once every listed player has a gross score."""
        return all(player_id in self.gross_scores for player_id in player_ids)
