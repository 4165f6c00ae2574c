"""
Tests for scene acceptance rules
"""
import pytest
from quote_quiz.core.validator import clamp_season_range, count_words, is_acceptable
from quote_quiz.models import SeasonRange


RANGE_1_5 = SeasonRange(min=1, max=5)


def test_example_quote_accepted(make_scene):
    """9-word quote from season 1 passes with min_words=5"""
    scene = make_scene(quote_text="I didn't know you could smoke four at once")
    assert count_words(scene.quote_text) == 9
    assert is_acceptable(scene, RANGE_1_5, 5) is True


def test_season_outside_range_rejected(make_scene):
    """Season outside range is rejected even with a perfect quote"""
    assert is_acceptable(make_scene(season=6), RANGE_1_5, 5) is False
    assert is_acceptable(make_scene(season=0), RANGE_1_5, 5) is False


def test_season_range_bounds_inclusive(make_scene):
    """Both ends of the range are allowed"""
    assert is_acceptable(make_scene(season=1), RANGE_1_5, 5) is True
    assert is_acceptable(make_scene(season=5), RANGE_1_5, 5) is True


def test_empty_quote_rejected(make_scene):
    """Empty quote never passes"""
    assert is_acceptable(make_scene(quote_text=""), RANGE_1_5, 0) is False


def test_exactly_min_words_accepted(make_scene):
    """Word count equal to min_words is enough"""
    assert is_acceptable(make_scene(quote_text="one two three four five"), RANGE_1_5, 5) is True


def test_below_min_words_rejected(make_scene):
    """One word short is rejected"""
    assert is_acceptable(make_scene(quote_text="one two three four"), RANGE_1_5, 5) is False


def test_stage_direction_rejected(make_scene):
    """Quote starting with [ is a sound effect"""
    assert is_acceptable(make_scene(quote_text="[GRUNTING]"), RANGE_1_5, 1) is False


def test_leading_whitespace_stage_direction_rejected(make_scene):
    """Leading whitespace does not hide a stage direction"""
    scene = make_scene(quote_text="  [SIGHS] Oh well I guess that is fine")
    assert is_acceptable(scene, RANGE_1_5, 5) is False


def test_mostly_bracketed_rejected(make_scene):
    """Bracketed spans over half the characters are rejected"""
    # 40 bracketed characters out of 48
    scene = make_scene(quote_text="Oh [LAUGHING HYSTERICALLY] [GROANS] [SCREAMS] no")
    assert is_acceptable(scene, RANGE_1_5, 5) is False


def test_some_bracketed_accepted(make_scene):
    """A trailing sound effect is fine"""
    scene = make_scene(quote_text="Well I never said that [LAUGHS]")
    assert is_acceptable(scene, RANGE_1_5, 5) is True


def test_exactly_half_bracketed_accepted(make_scene):
    """The 50% rule is strict: exactly half passes"""
    # 5 bracketed characters out of 10
    scene = make_scene(quote_text="abcd [xyz]")
    assert is_acceptable(scene, RANGE_1_5, 2) is True


def test_clamp_season_range():
    """Requested range is clamped to provider bounds"""
    clamped = clamp_season_range(0, 25, 1, 20)
    assert clamped.min == 1
    assert clamped.max == 20


def test_clamp_season_range_inverted():
    """min > max is an error"""
    with pytest.raises(ValueError):
        clamp_season_range(7, 3, 1, 20)


def test_season_range_model_rejects_inverted():
    """SeasonRange enforces min <= max"""
    with pytest.raises(ValueError):
        SeasonRange(min=4, max=2)
