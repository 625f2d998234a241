"""Checks run before a round starts and before each score is accepted.

Failures are returned as data (``ValidationResult``) so a setup form or
scorecard can show them next to the offending field.
"""

from __future__ import annotations

from pydantic import Field, ValidationError
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from models.base import BaseGolfModel, error_locations
from models.hole import Hole
from models.hole_score import MAX_GROSS_SCORE, MIN_GROSS_SCORE
from models.player import Player

MIN_PLAYERS = 3
MAX_PLAYERS = 6
HOLE_COUNTS = (9, 18)


class ValidationIssue(BaseGolfModel):
    """A rejected value and why."""
    field: str
    reason: str


class ValidationResult(BaseGolfModel):
    """Outcome of a validation step: blocking errors plus non-blocking advisories."""
    errors: List[ValidationIssue] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors

    def add_error(self, field: str, reason: str) -> None:
        self.errors.append(ValidationIssue(field=field, reason=reason))

    def add_pydantic_errors(self, exc: ValidationError, prefix: str = "") -> None:
        for field, reason in error_locations(exc, prefix):
            self.add_error(field, reason)

    def extend(self, other: "ValidationResult") -> "ValidationResult":
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self

    def messages(self) -> List[str]:
        return [f"{issue.field}: {issue.reason}" for issue in self.errors]


# ================================================================
# Scores
# ================================================================

def whole_number(value: Any, label: str = "Score") -> Tuple[Optional[int], Optional[str]]:
    """Coerce user input to an int. Returns (number, None) or (None, error)."""
    if isinstance(value, bool):
        return None, f"{label} must be a number"
    if isinstance(value, int):
        return value, None
    if isinstance(value, float):
        if not value.is_integer():
            return None, f"{label} must be a whole number"
        return int(value), None
    if isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None, f"{label} must be a number"
        return whole_number(number, label)
    return None, f"{label} must be a number"


def validate_score(
    score: Any,
    par: int = 4,
    min_score: int = MIN_GROSS_SCORE,
    max_score: int = MAX_GROSS_SCORE,
) -> ValidationResult:
    """Reject impossible gross scores; flag unusual ones without blocking them."""
    result = ValidationResult()
    number, error = whole_number(score)
    if error:
        result.add_error("score", error)
        return result

    if number < min_score:
        result.add_error("score", f"Score must be at least {min_score}")
    elif number > max_score:
        result.add_error("score", f"Score too high (max {max_score})")
    elif number == 1 and par > 3:
        result.warnings.append("Hole-in-one on par 4/5? Please confirm.")
    elif number >= par + 5:
        result.warnings.append("Very high score. Please confirm.")
    return result


# ================================================================
# Players and voor
# ================================================================

def validate_player_name(name: Optional[str], existing_names: Iterable[str] = ()) -> Optional[str]:
    """Error message for a bad player name, or None."""
    if not name or not name.strip():
        return "Player name cannot be empty"
    if len(name.strip()) > 50:
        return "Player name too long (max 50 characters)"
    normalized = name.strip().lower()
    if normalized in {n.strip().lower() for n in existing_names}:
        return "Player name already exists"
    return None


def validate_voor(strokes: Any, max_strokes: int = 18) -> Optional[str]:
    """Error message for a bad strokes-given value, or None."""
    number, error = whole_number(strokes, label="Strokes")
    if error:
        return error
    if number < 0:
        return "Strokes cannot be negative"
    if number > max_strokes:
        return f"Strokes cannot exceed {max_strokes}"
    return None


def find_reciprocal_voor(players: Sequence[Player]) -> List[Tuple[Player, Player]]:
    """Pairs of players who both give the other strokes."""
    conflicts = []
    for i, first in enumerate(players):
        for second in players[i + 1:]:
            if first.strokes_to(second.id) > 0 and second.strokes_to(first.id) > 0:
                conflicts.append((first, second))
    return conflicts


def validate_players(players: Sequence[Player], max_strokes: int = 18) -> ValidationResult:
    """Roster size, unique names and ids, and a sane voor configuration."""
    result = ValidationResult()
    if len(players) < MIN_PLAYERS:
        result.add_error("players", f"At least {MIN_PLAYERS} players required")
    elif len(players) > MAX_PLAYERS:
        result.add_error("players", f"Maximum {MAX_PLAYERS} players allowed")

    ids = [p.id for p in players]
    seen_names: List[str] = []
    seen_ids = set()
    for i, player in enumerate(players):
        if player.id in seen_ids:
            result.add_error(f"players.{i}.id", f"Duplicate player id '{player.id}'")
        seen_ids.add(player.id)

        error = validate_player_name(player.name, seen_names)
        if error:
            result.add_error(f"players.{i}.name", error)
        seen_names.append(player.name)

        for receiver_id, strokes in player.gives_strokes.items():
            field = f"players.{i}.gives_strokes.{receiver_id}"
            if receiver_id == player.id:
                result.add_error(field, "A player cannot give strokes to themselves")
            elif receiver_id not in ids:
                result.add_error(field, f"Unknown player '{receiver_id}'")
            error = validate_voor(strokes, max_strokes)
            if error:
                result.add_error(field, error)

    for first, second in find_reciprocal_voor(players):
        result.add_error(
            "voor",
            f"Reciprocal voor: {first.name} and {second.name} are giving strokes to each other",
        )
    return result


# ================================================================
# Holes
# ================================================================

def validate_holes(holes: Sequence[Hole]) -> ValidationResult:
    """9 or 18 holes, numbered 1..N, with stroke indices exactly 1..N."""
    result = ValidationResult()
    count = len(holes)
    if count not in HOLE_COUNTS:
        result.add_error("holes", "Round must have 9 or 18 holes")
        return result

    expected = list(range(1, count + 1))
    if sorted(h.number for h in holes) != expected:
        result.add_error("holes", f"Hole numbers must be 1-{count}, each used once")
    if sorted(h.stroke_index for h in holes) != expected:
        result.add_error("holes", f"Stroke indexes must contain all numbers 1-{count}")
    return result


# ================================================================
# Round setup
# ================================================================

PlayerInput = Union[Player, Mapping[str, Any]]
HoleInput = Union[Hole, Mapping[str, Any]]


def parse_round_setup(
    players: Sequence[PlayerInput],
    holes: Sequence[HoleInput],
    max_strokes: int = 18,
) -> Tuple[List[Player], List[Hole], ValidationResult]:
    """Build models from raw setup input and validate the round as a whole.

    Models that fail to build are reported and left out of the returned
    lists; the result is only valid when nothing was left out.
    """
    result = ValidationResult()

    parsed_players: List[Player] = []
    for i, raw in enumerate(players):
        try:
            parsed_players.append(raw if isinstance(raw, Player) else Player.model_validate(raw))
        except ValidationError as exc:
            result.add_pydantic_errors(exc, prefix=f"players.{i}")

    parsed_holes: List[Hole] = []
    for i, raw in enumerate(holes):
        try:
            parsed_holes.append(raw if isinstance(raw, Hole) else Hole.model_validate(raw))
        except ValidationError as exc:
            result.add_pydantic_errors(exc, prefix=f"holes.{i}")

    if result.valid:
        result.extend(validate_players(parsed_players, max_strokes))
        result.extend(validate_holes(parsed_holes))
    return parsed_players, parsed_holes, result


def validate_round_setup(
    players: Sequence[PlayerInput],
    holes: Sequence[HoleInput],
    max_strokes: int = 18,
) -> ValidationResult:
    return parse_round_setup(players, holes, max_strokes)[2]
