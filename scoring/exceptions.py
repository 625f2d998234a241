class ScoringError(Exception):
    """Base for all scoring engine errors."""


class UnknownScoringSystemError(ScoringError):
    """Scoring system kind without an implementation."""
