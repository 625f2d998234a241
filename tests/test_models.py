import pytest
from pydantic import ValidationError

from models import (
    Course,
    Hole,
    HoleScores,
    Player,
    RoundState,
    ScoreTier,
    ScoringConfiguration,
    ScoringSystemKind,
    course_presets,
    players_from_voor_pairs,
    standard_course,
)


def _players():
    return [
        Player(id="a", name="Alice", gives_strokes={"b": 1}),
        Player(id="b", name="Bob"),
        Player(id="c", name="Carol"),
    ]


# ================================================================
# Hole
# ================================================================

def test_hole_validation():
    h = Hole(number=1, par=4, stroke_index=18)
    assert h.number == 1
    assert h.label == "Hole 1"
    assert h.nine == "Front 9"
    assert Hole(number=10, par=4, stroke_index=2).nine == "Back 9"

    with pytest.raises(ValidationError):
        Hole(number=1, par=6, stroke_index=1)     # par > 5

    with pytest.raises(ValidationError):
        Hole(number=1, par=2, stroke_index=1)     # par < 3

    with pytest.raises(ValidationError):
        Hole(number=1, par=4, stroke_index=19)    # stroke index > 18


def test_hole_update_field_returns_message():
    h = Hole(number=1, par=4, stroke_index=1)
    assert h.update_field("par", 5) is None
    assert h.par == 5

    error = h.update_field("par", 7)
    assert error is not None
    assert h.par == 5


# ================================================================
# Player
# ================================================================

def test_player_strips_name_and_ignores_non_positive_strokes():
    p = Player(id="a", name="  Alice ", gives_strokes={"b": 2, "c": 0, "d": -1})
    assert p.name == "Alice"
    assert p.strokes_to("b") == 2
    assert p.strokes_to("c") == 0
    assert p.strokes_to("d") == 0
    assert p.strokes_to("nobody") == 0

    with pytest.raises(ValidationError):
        Player(id="a", name="   ")

    with pytest.raises(ValidationError):
        Player(id="a", name="x" * 51)


def test_players_from_voor_pairs_resolves_indices_to_ids():
    roster = [("p1", "Alice"), ("p2", "Bob"), ("p3", "Carol")]
    players = players_from_voor_pairs(roster, [(0, 1, 2), (2, 1, 1)])

    assert [p.id for p in players] == ["p1", "p2", "p3"]
    assert players[0].gives_strokes == {"p2": 2}
    assert players[1].gives_strokes == {}
    assert players[2].gives_strokes == {"p2": 1}


# ================================================================
# ScoringConfiguration / ScoreTier
# ================================================================

@pytest.mark.parametrize("to_par, tier", [
    (-3, ScoreTier.EAGLE_OR_BETTER),
    (-2, ScoreTier.EAGLE_OR_BETTER),
    (-1, ScoreTier.BIRDIE),
    (0, ScoreTier.PAR),
    (1, ScoreTier.BOGEY),
    (2, ScoreTier.WORSE),
    (6, ScoreTier.WORSE),
])
def test_score_tier_from_to_par(to_par, tier):
    assert ScoreTier.from_to_par(to_par) is tier


def test_scoring_configuration_awards():
    config = ScoringConfiguration(eagle_or_better=5, birdie=3, par=-1, bogey=2)
    assert config.award_for(ScoreTier.EAGLE_OR_BETTER) == 5
    assert config.award_for(ScoreTier.BIRDIE) == 3
    assert config.award_for(ScoreTier.PAR) == -1
    assert config.award_for(ScoreTier.BOGEY) == 2
    assert config.award_for(ScoreTier.WORSE) == 0
    assert config.award_for_to_par(-4) == 5
    assert config.award_for_to_par(3) == 0


def test_scoring_configuration_defaults_and_range():
    config = ScoringConfiguration()
    assert (config.eagle_or_better, config.birdie, config.par, config.bogey) == (4, 2, 1, 1)

    with pytest.raises(ValidationError):
        ScoringConfiguration(birdie=11)

    with pytest.raises(ValidationError):
        ScoringConfiguration(par=-11)


# ================================================================
# HoleScores
# ================================================================

def test_hole_scores_to_par_and_score_type():
    hs = HoleScores(hole=Hole(number=3, par=5, stroke_index=7), gross_scores={"a": 3, "b": 7})
    assert hs.number == 3
    assert hs.par == 5
    assert hs.to_par("a") == -2
    assert hs.get_score_type("a") is ScoreTier.EAGLE_OR_BETTER
    assert hs.get_score_type("b") is ScoreTier.WORSE
    assert hs.to_par("c") is None
    assert hs.get_score_type("c") is None

    assert hs.is_complete(["a", "b"])
    assert not hs.is_complete(["a", "b", "c"])


def test_hole_scores_reject_out_of_range_gross():
    with pytest.raises(ValidationError):
        HoleScores(hole=Hole(number=1, par=4, stroke_index=1), gross_scores={"a": 0})

    with pytest.raises(ValidationError):
        HoleScores(hole=Hole(number=1, par=4, stroke_index=1), gross_scores={"a": 16})


# ================================================================
# Course
# ================================================================

def test_standard_course_layout():
    course = standard_course()
    assert len(course.holes) == 18
    assert course.get_par() == 72
    assert course.front_nine_par == 36
    assert course.back_nine_par == 36
    assert course.get_hole(10).stroke_index == 2
    assert course.get_hole(19) is None
    assert sorted(h.stroke_index for h in course.holes) == list(range(1, 19))


def test_course_presets():
    presets = course_presets()
    assert set(presets) == {"standard", "executive", "championship"}
    assert presets["standard"].get_par() == 72
    assert presets["executive"].get_par() == 63
    assert presets["championship"].get_par() == 72
    for course in presets.values():
        assert course.front_nine_par + course.back_nine_par == course.get_par()
        assert sorted(h.stroke_index for h in course.holes) == list(range(1, 19))


def test_course_from_nines_offsets_back_nine():
    front = Course.from_layout([4] * 9, [1, 3, 5, 7, 9, 2, 4, 6, 8], name="Oak")
    back = Course.from_layout([3, 4, 5, 4, 3, 4, 5, 4, 4], [2, 4, 6, 8, 1, 3, 5, 7, 9], name="Pine")
    combined = Course.from_nines(front, back)

    assert combined.name == "Oak + Pine"
    assert [h.number for h in combined.holes] == list(range(1, 19))
    assert combined.get_hole(10).stroke_index == 11
    assert combined.get_hole(14).stroke_index == 10
    assert sorted(h.stroke_index for h in combined.holes) == list(range(1, 19))
    assert combined.front_nine_par == 36
    assert combined.back_nine_par == 36

    with pytest.raises(ValueError):
        Course.from_nines(front, standard_course())


# ================================================================
# RoundState
# ================================================================

def test_round_state_start():
    state = RoundState.start(
        _players(),
        list(reversed(standard_course().holes)),
        scoring_system=ScoringSystemKind.SINGLE_WINNER,
    )
    assert [hs.number for hs in state.holes] == list(range(1, 19))
    assert state.totals == {"a": 0, "b": 0, "c": 0}
    assert state.scoring_system is ScoringSystemKind.SINGLE_WINNER
    assert state.scoring_config == ScoringConfiguration()
    assert state.current_hole() == 1
    assert state.holes_completed() == 0
    assert not state.is_complete()


def test_round_state_with_score_returns_copy():
    state = RoundState.start(_players(), standard_course().holes)
    updated = state.with_score(1, "a", 4)

    assert updated.get_hole(1).gross_scores == {"a": 4}
    assert state.get_hole(1).gross_scores == {}

    cleared = updated.with_score(1, "a", None)
    assert cleared.get_hole(1).gross_scores == {}


def test_round_state_completion_tracking():
    state = RoundState.start(_players(), standard_course().holes[:9])
    for player_id in ("a", "b", "c"):
        state = state.with_score(1, player_id, 4)
    state = state.with_score(2, "a", 5)

    assert state.is_hole_complete(1)
    assert not state.is_hole_complete(2)
    assert not state.is_hole_complete(42)
    assert state.holes_completed() == 1
    assert state.current_hole() == 2
    assert state.get_player("b").name == "Bob"
    assert state.get_player("zzz") is None
    assert state.get_hole(10) is None
