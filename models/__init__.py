from .base import BaseGolfModel
from .course import Course, DEFAULT_PARS, DEFAULT_STROKE_INDEX, course_presets, standard_course
from .hole import Hole
from .hole_score import HoleScores
from .player import Player, players_from_voor_pairs
from .results import (
    HoleExtreme,
    LeaderboardEntry,
    PlayerStats,
    RoundResult,
    StrokeAllocation,
    VoorGrant,
)
from .round import RoundState
from .scoring_config import ScoreTier, ScoringConfiguration, ScoringSystemKind

__all__ = [
    "BaseGolfModel",
    "Course",
    "DEFAULT_PARS",
    "DEFAULT_STROKE_INDEX",
    "course_presets",
    "standard_course",
    "Hole",
    "HoleScores",
    "Player",
    "players_from_voor_pairs",
    "HoleExtreme",
    "LeaderboardEntry",
    "PlayerStats",
    "RoundResult",
    "StrokeAllocation",
    "VoorGrant",
    "RoundState",
    "ScoreTier",
    "ScoringConfiguration",
    "ScoringSystemKind",
]
