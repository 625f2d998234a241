from .config import EngineSettings, get_settings, reset_settings_cache
from .engine import RoundEngine, RoundSetup, ScoreEntry, score_round
from .exceptions import ScoringError, UnknownScoringSystemError
from .logger import StructuredLogger, get_logger, reset_logger
from .net import hole_net_scores, is_hole_complete, net_score
from .strokes import (
    allocate_stroke_holes,
    gets_stroke_from,
    hardest_holes,
    stroke_allocations,
    strokes_received,
    voor_grants,
)
from .systems import FighterSystem, HoleOutcome, ScoringSystem, SingleWinnerSystem, get_scoring_system
from .validation import (
    ValidationIssue,
    ValidationResult,
    validate_holes,
    validate_players,
    validate_round_setup,
    validate_score,
)

__all__ = [
    "EngineSettings",
    "get_settings",
    "reset_settings_cache",
    "RoundEngine",
    "RoundSetup",
    "ScoreEntry",
    "score_round",
    "ScoringError",
    "UnknownScoringSystemError",
    "StructuredLogger",
    "get_logger",
    "reset_logger",
    "hole_net_scores",
    "is_hole_complete",
    "net_score",
    "allocate_stroke_holes",
    "gets_stroke_from",
    "hardest_holes",
    "stroke_allocations",
    "strokes_received",
    "voor_grants",
    "FighterSystem",
    "HoleOutcome",
    "ScoringSystem",
    "SingleWinnerSystem",
    "get_scoring_system",
    "ValidationIssue",
    "ValidationResult",
    "validate_holes",
    "validate_players",
    "validate_round_setup",
    "validate_score",
]
