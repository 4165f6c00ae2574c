"""
Tests for the round state machine and answer evaluation
"""
import pytest
from quote_quiz.core.evaluator import evaluate
from quote_quiz.core.round import Round, RoundPhase
from quote_quiz.models import GameConfig, HintKind


PARAMS = GameConfig()


def _active_round(scene, params=PARAMS):
    rnd = Round(params)
    rnd.activate(scene)
    return rnd


def test_activate_initializes_state(make_scene):
    """EMPTY -> ACTIVE sets starting points and clears flags"""
    rnd = Round(PARAMS)
    assert rnd.phase == RoundPhase.EMPTY

    rnd.activate(make_scene())

    assert rnd.phase == RoundPhase.ACTIVE
    assert rnd.state.points_remaining == 100
    assert rnd.state.revealed_hints == set()
    assert rnd.state.is_guessed is False
    assert rnd.state.is_won is False


def test_activate_twice_not_allowed(make_scene):
    """A round holds a single scene"""
    rnd = _active_round(make_scene())
    with pytest.raises(RuntimeError):
        rnd.activate(make_scene())


def test_hint_costs(make_scene):
    """Season (20) then Image (30) leaves 50; repeating Season is a no-op"""
    rnd = _active_round(make_scene())

    assert rnd.reveal_hint(HintKind.SEASON) is True
    assert rnd.reveal_hint(HintKind.IMAGE) is True
    assert rnd.state.points_remaining == 50

    assert rnd.reveal_hint(HintKind.SEASON) is False
    assert rnd.state.points_remaining == 50
    assert rnd.state.revealed_hints == {HintKind.SEASON, HintKind.IMAGE}


def test_points_floor_at_zero(make_scene):
    """Points never go negative"""
    params = GameConfig(starting_points=50)
    rnd = _active_round(make_scene(), params)

    rnd.reveal_hint(HintKind.EPISODE_NUMBER)  # 50 - 40 = 10
    rnd.reveal_hint(HintKind.IMAGE)           # 10 - 30 -> 0

    assert rnd.state.points_remaining == 0


def test_empty_round_ignores_actions():
    """No scene: hints and guesses are no-ops"""
    rnd = Round(PARAMS)
    assert rnd.reveal_hint(HintKind.IMAGE) is False
    assert rnd.submit_guess("anything") is None
    assert rnd.phase == RoundPhase.EMPTY


def test_correct_guess_keeps_points(make_scene):
    """Winning keeps the remaining points"""
    rnd = _active_round(make_scene())
    rnd.reveal_hint(HintKind.SEASON)

    result = rnd.submit_guess("the crepes of wrath")

    assert result.is_correct is True
    assert result.similarity_score == 1.0
    assert result.final_round_points == 80
    assert rnd.state.is_won is True
    assert rnd.state.points_remaining == 80
    assert rnd.phase == RoundPhase.GUESSED


def test_wrong_title_keeps_structured_bonus(make_scene):
    """Losing on the title zeroes the base but keeps the season bonus"""
    rnd = _active_round(make_scene())

    result = rnd.submit_guess("Bart the General", season_guess=1)

    assert result.is_correct is False
    assert result.bonus_points == 25
    assert result.final_round_points == 25
    assert rnd.state.is_won is False
    assert rnd.state.points_remaining == 25


def test_blank_guess_ignored(make_scene):
    """Whitespace-only guess leaves the round active"""
    rnd = _active_round(make_scene())
    assert rnd.submit_guess("   ") is None
    assert rnd.phase == RoundPhase.ACTIVE
    assert rnd.state.is_guessed is False


def test_second_guess_ignored(make_scene):
    """Only the first guess counts"""
    rnd = _active_round(make_scene())
    first = rnd.submit_guess("Krusty Gets Busted")
    second = rnd.submit_guess("The Crepes of Wrath")

    assert first.is_correct is False
    assert second is None
    assert rnd.state.is_won is False
    assert rnd.state.result == first


def test_no_hints_after_guess(make_scene):
    """Hints cannot be bought once the round is over"""
    rnd = _active_round(make_scene())
    rnd.submit_guess("The Crepes of Wrath")

    assert rnd.reveal_hint(HintKind.IMAGE) is False
    assert rnd.state.revealed_hints == set()
    assert rnd.state.points_remaining == 100


def test_evaluate_structured_notes_order(make_scene):
    """Season note comes before episode note; wrong guesses add no points"""
    result = evaluate(60, make_scene(), "The Crepes of Wrath", 1, 3, params=PARAMS)

    assert result.is_correct is True
    assert result.bonus_points == 25
    assert result.final_round_points == 85
    assert result.bonus_notes == [
        "Correct season (+25)",
        "Wrong episode number: guessed 3, was 11",
    ]


def test_evaluate_both_bonuses_without_title(make_scene):
    """Correct season and episode earn both bonuses on a wrong title"""
    result = evaluate(100, make_scene(), "no idea", 1, 11, params=PARAMS)

    assert result.is_correct is False
    assert result.final_round_points == 50


def test_evaluate_no_structured_guesses(make_scene):
    """Title alone is enough to win"""
    result = evaluate(70, make_scene(), "Crepes of Wrath", params=PARAMS)

    assert result.bonus_notes == []
    assert result.bonus_points == 0
    assert result.actual_title == "The Crepes of Wrath"


def test_evaluate_threshold_boundary(make_scene):
    """Similarity exactly at the threshold counts as correct"""
    scene = make_scene(title="abcd")
    result = evaluate(100, scene, "abcx", params=PARAMS)

    assert result.similarity_score == 0.75
    assert result.is_correct is True


def test_evaluate_threshold_configurable(make_scene):
    """Stricter threshold turns a near miss into a loss"""
    scene = make_scene(title="Bart the Genius")
    strict = GameConfig(similarity_threshold=0.95)

    assert evaluate(100, scene, "bart the genus", params=PARAMS).is_correct is True
    assert evaluate(100, scene, "bart the genus", params=strict).is_correct is False
