"""Read-only records the engine hands back to its caller."""

from pydantic import Field
from typing import Any, Dict, List, Optional

from .base import BaseGolfModel
from .hole_score import HoleScores
from .scoring_config import ScoringSystemKind


class LeaderboardEntry(BaseGolfModel):
    player_id: str
    name: str
    points: int
    rank: int = Field(..., ge=1)


class HoleExtreme(BaseGolfModel):
    """A hole singled out in a player's stats (best or worst by points)."""
    number: int
    points: int


class PlayerStats(BaseGolfModel):
    """Per-player summary over all holes with a gross score entered."""
    player_id: str
    eagles: int = 0  # eagle or better
    birdies: int = 0
    pars: int = 0
    bogeys: int = 0
    worse: int = 0
    holes_played: int = 0
    holes_won: int = 0
    best_hole: Optional[HoleExtreme] = None
    worst_hole: Optional[HoleExtreme] = None
    total_points: int = 0


class VoorGrant(BaseGolfModel):
    """One giving relationship: ``giver`` grants ``receiver`` some strokes."""
    giver_id: str
    giver: str
    receiver_id: str
    receiver: str
    strokes: int


class StrokeAllocation(BaseGolfModel):
    """Where a player receives strokes.

    ``strokes_received`` is the configured total from all givers;
    ``hole_count`` can be lower when givers' hardest holes overlap.
    """
    player_id: str
    strokes_received: int
    stroke_holes: List[int] = Field(default_factory=list)
    hole_count: int = 0


class RoundResult(BaseGolfModel):
    """Everything derived from a round's scores."""
    round_id: Optional[str] = None
    scoring_system: ScoringSystemKind
    holes: List[HoleScores]
    totals: Dict[str, int]
    leaderboard: List[LeaderboardEntry]
    transaction_matrix: Dict[str, Dict[str, int]]
    player_stats: Dict[str, PlayerStats]
    stroke_allocations: List[StrokeAllocation]
    voor: List[VoorGrant] = Field(default_factory=list)
    running_totals: List[Dict[str, Any]] = Field(default_factory=list)
    holes_completed: int = 0
    is_complete: bool = False
    current_hole: Optional[int] = None
    winners: List[str] = Field(default_factory=list)
