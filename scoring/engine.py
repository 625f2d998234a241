"""Round orchestration: setup, score entry and full recomputation."""

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence, Set

from models.base import BaseGolfModel
from models.results import RoundResult
from models.round import RoundState
from models.scoring_config import ScoringConfiguration, ScoringSystemKind

from analytics.stats import (
    all_player_statistics,
    calculate_totals,
    leaderboard,
    running_totals,
    transaction_matrix,
)

from .config import EngineSettings, get_settings
from .logger import StructuredLogger, get_logger
from .net import hole_net_scores
from .strokes import allocate_stroke_holes, stroke_allocations, voor_grants
from .systems import get_scoring_system
from .validation import (
    HoleInput,
    PlayerInput,
    ValidationResult,
    find_reciprocal_voor,
    parse_round_setup,
    validate_score,
    whole_number,
)


class RoundSetup(BaseGolfModel):
    """A new round, or the reasons it could not be created."""
    state: Optional[RoundState] = None
    validation: ValidationResult

    @property
    def ok(self) -> bool:
        return self.state is not None


class ScoreEntry(BaseGolfModel):
    """Result of entering one score.

    ``state`` is the recomputed round when accepted, or the untouched input
    round when rejected.
    """
    state: RoundState
    accepted: bool
    validation: ValidationResult


def score_round(state: RoundState) -> RoundState:
    """Recompute net scores, points, exchanges and totals for every hole.

    Pure: returns a new RoundState and leaves ``state`` as it was. Holes are
    independent of each other; they are folded in order here.
    """
    layout = state.layout
    stroke_holes = allocate_stroke_holes(state.players, layout)
    system = get_scoring_system(state.scoring_system)

    holes = []
    for hole_scores in state.holes:
        net_scores = hole_net_scores(hole_scores, state.players, stroke_holes)
        outcome = system.score_hole(hole_scores, state.players, net_scores, layout, state.scoring_config)
        holes.append(hole_scores.model_copy(update={
            "net_scores": net_scores,
            "points": outcome.points,
            "transactions": outcome.transactions,
        }))

    return state.model_copy(update={
        "holes": holes,
        "totals": calculate_totals(holes, state.players),
    })


class RoundEngine:
    """Entry point for callers: creates rounds, takes scores, reports results.

    Settings (including the default scoring configuration) are handed in
    explicitly; nothing in the scoring path reads global state.

    Without a ``logger`` the engine uses the shared logger from
    ``get_logger()``, whose level is set by whichever caller created it
    first. Pass a ``StructuredLogger`` to log at a different level.
    """

    def __init__(
        self,
        settings: Optional[EngineSettings] = None,
        logger: Optional[StructuredLogger] = None,
    ):
        self.settings = settings or get_settings()
        self.logger = logger or get_logger(level=self.settings.log_level)

    def create_round(
        self,
        players: Sequence[PlayerInput],
        holes: Sequence[HoleInput],
        scoring_config: Optional[ScoringConfiguration] = None,
        scoring_system: ScoringSystemKind = ScoringSystemKind.FIGHTER,
        round_id: Optional[str] = None,
    ) -> RoundSetup:
        """Validate a roster and layout and start a round on them."""
        parsed_players, parsed_holes, validation = parse_round_setup(
            players, holes, max_strokes=self.settings.max_strokes_given
        )
        if not validation.valid:
            self.logger.record("setups_rejected")
            self.logger.warning("Round setup rejected", errors=validation.messages())
            return RoundSetup(validation=validation)

        state = RoundState.start(
            parsed_players,
            parsed_holes,
            scoring_config=scoring_config or self.settings.default_scoring,
            scoring_system=scoring_system,
            id=round_id,
        )
        self.logger.record("rounds_created")
        self.logger.info(
            "Round created",
            round_id=round_id,
            players=len(parsed_players),
            holes=len(parsed_holes),
            scoring_system=ScoringSystemKind(scoring_system).value,
        )
        return RoundSetup(state=self.recompute(state), validation=validation)

    def recompute(self, state: RoundState) -> RoundState:
        """Full recomputation of every derived field; idempotent."""
        # Setup validation already rejects this; the engine does not rely on it.
        if find_reciprocal_voor(state.players):
            self.logger.warning("Reciprocal voor in round; tied pairs between them stay tied",
                                round_id=state.id)
        self.logger.record("recomputations")
        scored = score_round(state)
        self.logger.debug("Round recomputed", round_id=state.id, totals=scored.totals)
        return scored

    def enter_score(
        self,
        state: RoundState,
        hole_number: int,
        player_id: str,
        gross: Any,
    ) -> ScoreEntry:
        """Set (or clear, with None) one gross score and recompute the round."""
        validation = ValidationResult()
        hole_scores = state.get_hole(hole_number)
        if hole_scores is None:
            validation.add_error("hole_number", f"Hole {hole_number} is not part of this round")
        if state.get_player(player_id) is None:
            validation.add_error("player_id", f"Unknown player '{player_id}'")

        number = None
        if validation.valid and gross is not None:
            validation.extend(validate_score(
                gross,
                par=hole_scores.par,
                min_score=self.settings.min_gross_score,
                max_score=self.settings.max_gross_score,
            ))
            number, _ = whole_number(gross)

        if not validation.valid:
            self.logger.record("entries_rejected")
            self.logger.warning(
                "Score entry rejected",
                round_id=state.id,
                hole=hole_number,
                player=player_id,
                errors=validation.messages(),
            )
            return ScoreEntry(state=state, accepted=False, validation=validation)

        for warning in validation.warnings:
            self.logger.info(warning, round_id=state.id, hole=hole_number, player=player_id, score=number)

        self.logger.record("scores_entered")
        self.logger.debug("Score entered", round_id=state.id, hole=hole_number, player=player_id, score=number)
        updated = self.recompute(state.with_score(hole_number, player_id, number))
        return ScoreEntry(state=updated, accepted=True, validation=validation)

    def stroke_holes(self, state: RoundState) -> Dict[str, Set[int]]:
        return allocate_stroke_holes(state.players, state.layout)

    def result(self, state: RoundState) -> RoundResult:
        """Everything the presentation layer shows for a round."""
        board = leaderboard(state.players, state.totals)
        top = [entry.player_id for entry in board if entry.rank == 1]
        return RoundResult(
            round_id=state.id,
            scoring_system=state.scoring_system,
            holes=state.holes,
            totals=dict(state.totals),
            leaderboard=board,
            transaction_matrix=transaction_matrix(state.holes, state.players),
            player_stats=all_player_statistics(state.holes, state.players, state.totals),
            stroke_allocations=stroke_allocations(state.players, state.layout),
            voor=voor_grants(state.players),
            running_totals=running_totals(state.holes, state.players),
            holes_completed=state.holes_completed(),
            is_complete=state.is_complete(),
            current_hole=state.current_hole(),
            winners=top if state.holes_completed() else [],
        )
