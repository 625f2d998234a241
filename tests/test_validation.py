import pytest

from models import Hole, Player, standard_course
from scoring.validation import (
    ValidationResult,
    find_reciprocal_voor,
    parse_round_setup,
    validate_holes,
    validate_player_name,
    validate_players,
    validate_round_setup,
    validate_score,
    validate_voor,
    whole_number,
)


def _roster(*names):
    return [Player(id=name[0].lower(), name=name) for name in names]


# ================================================================
# Scores
# ================================================================

@pytest.mark.parametrize("value, expected", [
    (4, 4),
    (4.0, 4),
    ("7", 7),
    (" 3 ", 3),
])
def test_whole_number_accepts(value, expected):
    assert whole_number(value) == (expected, None)


@pytest.mark.parametrize("value, message", [
    (4.5, "Score must be a whole number"),
    ("4.5", "Score must be a whole number"),
    ("four", "Score must be a number"),
    (True, "Score must be a number"),
    (None, "Score must be a number"),
])
def test_whole_number_rejects(value, message):
    assert whole_number(value) == (None, message)


def test_validate_score_range():
    assert validate_score(1, par=3).valid
    assert validate_score(15).valid

    result = validate_score(0)
    assert result.errors[0].reason == "Score must be at least 1"
    result = validate_score(16)
    assert result.errors[0].reason == "Score too high (max 15)"


def test_validate_score_custom_limits():
    assert not validate_score(11, max_score=10).valid
    assert validate_score(2, min_score=2).valid


def test_validate_score_advisories_do_not_block():
    ace = validate_score(1, par=4)
    assert ace.valid
    assert ace.warnings == ["Hole-in-one on par 4/5? Please confirm."]

    assert validate_score(1, par=3).warnings == []

    high = validate_score(8, par=3)
    assert high.valid
    assert high.warnings == ["Very high score. Please confirm."]
    assert validate_score(8, par=4).warnings == []


# ================================================================
# Players and voor
# ================================================================

def test_validate_player_name():
    assert validate_player_name("Alice") is None
    assert validate_player_name("  ") == "Player name cannot be empty"
    assert validate_player_name(None) == "Player name cannot be empty"
    assert validate_player_name("x" * 51) == "Player name too long (max 50 characters)"
    assert validate_player_name(" alice ", ["Bob", "ALICE"]) == "Player name already exists"


def test_validate_voor():
    assert validate_voor(0) is None
    assert validate_voor("3") is None
    assert validate_voor(-1) == "Strokes cannot be negative"
    assert validate_voor(19) == "Strokes cannot exceed 18"
    assert validate_voor(10, max_strokes=9) == "Strokes cannot exceed 9"
    assert validate_voor(1.5) == "Strokes must be a whole number"


def test_find_reciprocal_voor():
    players = [
        Player(id="a", name="Alice", gives_strokes={"b": 2}),
        Player(id="b", name="Bob", gives_strokes={"a": 1, "c": 1}),
        Player(id="c", name="Carol", gives_strokes={"b": 0}),
    ]
    conflicts = find_reciprocal_voor(players)
    assert [(x.id, y.id) for x, y in conflicts] == [("a", "b")]


def test_validate_players_ok():
    players = _roster("Alice", "Bob", "Carol")
    players[0] = Player(id="a", name="Alice", gives_strokes={"b": 3})
    assert validate_players(players).valid


@pytest.mark.parametrize("count, message", [
    (2, "At least 3 players required"),
    (7, "Maximum 6 players allowed"),
])
def test_validate_players_roster_size(count, message):
    players = [Player(id=f"p{i}", name=f"Player {i}") for i in range(count)]
    result = validate_players(players)
    assert result.messages() == [f"players: {message}"]


def test_validate_players_duplicates():
    players = [
        Player(id="a", name="Alice"),
        Player(id="a", name="Bob"),
        Player(id="c", name="alice"),
    ]
    fields = {issue.field: issue.reason for issue in validate_players(players).errors}

    assert fields["players.1.id"] == "Duplicate player id 'a'"
    assert fields["players.2.name"] == "Player name already exists"


def test_validate_players_bad_voor():
    players = [
        Player(id="a", name="Alice", gives_strokes={"a": 1, "z": 2}),
        Player(id="b", name="Bob", gives_strokes={"c": 25}),
        Player(id="c", name="Carol", gives_strokes={"a": -1}),
    ]
    fields = {issue.field: issue.reason for issue in validate_players(players).errors}

    assert fields["players.0.gives_strokes.a"] == "A player cannot give strokes to themselves"
    assert fields["players.0.gives_strokes.z"] == "Unknown player 'z'"
    assert fields["players.1.gives_strokes.c"] == "Strokes cannot exceed 18"
    assert fields["players.2.gives_strokes.a"] == "Strokes cannot be negative"


def test_validate_players_reciprocal_voor():
    players = [
        Player(id="a", name="Alice", gives_strokes={"b": 1}),
        Player(id="b", name="Bob", gives_strokes={"a": 2}),
        Player(id="c", name="Carol"),
    ]
    result = validate_players(players)

    assert not result.valid
    assert result.errors[0].field == "voor"
    assert "Alice and Bob" in result.errors[0].reason


# ================================================================
# Holes
# ================================================================

def test_validate_holes_accepts_nine_and_eighteen():
    holes = standard_course().holes
    assert validate_holes(holes).valid
    assert validate_holes([Hole(number=n, par=4, stroke_index=10 - n) for n in range(1, 10)]).valid


def test_validate_holes_count():
    holes = [Hole(number=n, par=4, stroke_index=n) for n in range(1, 11)]
    assert validate_holes(holes).messages() == ["holes: Round must have 9 or 18 holes"]


def test_validate_holes_numbering_and_stroke_indexes():
    holes = [Hole(number=n, par=4, stroke_index=n) for n in range(1, 10)]
    holes[8] = Hole(number=8, par=4, stroke_index=12)

    reasons = [issue.reason for issue in validate_holes(holes).errors]
    assert reasons == [
        "Hole numbers must be 1-9, each used once",
        "Stroke indexes must contain all numbers 1-9",
    ]


# ================================================================
# Round setup
# ================================================================

def test_parse_round_setup_builds_models():
    players = [{"id": "a", "name": " Alice "}, {"id": "b", "name": "Bob"}, Player(id="c", name="Carol")]
    holes = [{"number": n, "par": 4, "stroke_index": n} for n in range(1, 10)]

    parsed_players, parsed_holes, result = parse_round_setup(players, holes)

    assert result.valid
    assert [p.name for p in parsed_players] == ["Alice", "Bob", "Carol"]
    assert all(isinstance(h, Hole) for h in parsed_holes)


def test_parse_round_setup_reports_model_errors_by_field():
    players = [{"id": "a", "name": "Alice"}, {"id": "b", "name": ""}, {"id": "c", "name": "Carol"}]
    holes = [{"number": n, "par": 4, "stroke_index": n} for n in range(1, 10)]
    holes[2]["par"] = 6

    parsed_players, parsed_holes, result = parse_round_setup(players, holes)

    fields = [issue.field for issue in result.errors]
    assert fields == ["players.1.name", "holes.2.par"]
    assert len(parsed_players) == 2
    assert len(parsed_holes) == 8


def test_validate_round_setup():
    players = _roster("Alice", "Bob", "Carol")
    assert validate_round_setup(players, standard_course().holes).valid
    assert not validate_round_setup(players[:2], standard_course().holes).valid


def test_validation_result_extend_and_messages():
    result = ValidationResult()
    result.add_error("score", "Score must be at least 1")
    other = ValidationResult(warnings=["Very high score. Please confirm."])

    result.extend(other)

    assert not result.valid
    assert result.messages() == ["score: Score must be at least 1"]
    assert result.warnings == ["Very high score. Please confirm."]
