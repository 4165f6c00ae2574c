"""
Answer evaluation

Formula:
  is_correct   = similarity(guess, title) >= similarity_threshold
  final_points = (round_points if is_correct else 0) + season_bonus + episode_bonus

Rules:
  - Season/episode bonuses are awarded independently of the title guess
  - A wrong structured guess adds a note but no points
  - Structured guesses are optional
"""
from typing import Optional

from quote_quiz.core.similarity import similarity
from quote_quiz.models import GameConfig, GuessResult, Scene


def _structured_bonus(
    label: str,
    guessed: Optional[int],
    actual: int,
    bonus: int,
    notes: list
) -> int:
    if guessed is None:
        return 0
    if guessed == actual:
        notes.append(f"Correct {label} (+{bonus})")
        return bonus
    notes.append(f"Wrong {label}: guessed {guessed}, was {actual}")
    return 0


def evaluate(
    round_points: int,
    scene: Scene,
    guess_text: str,
    guessed_season: Optional[int] = None,
    guessed_episode_number: Optional[int] = None,
    *,
    params: GameConfig
) -> GuessResult:
    """
    Score a guess against the round's scene

    Args:
        round_points: Points left in the round before the guess
        scene: Scene being guessed
        guess_text: Free-text episode title guess
        guessed_season: Optional season number guess
        guessed_episode_number: Optional episode number guess
        params: Game parameters (threshold and bonuses)

    Returns:
        GuessResult
    """
    score = similarity(guess_text, scene.title)
    is_correct = score >= params.similarity_threshold

    notes = []
    season_bonus = _structured_bonus(
        "season", guessed_season, scene.season, params.season_bonus, notes
    )
    episode_bonus = _structured_bonus(
        "episode number", guessed_episode_number, scene.episode_number, params.episode_bonus, notes
    )
    bonus_points = season_bonus + episode_bonus

    base = round_points if is_correct else 0

    return GuessResult(
        is_correct=is_correct,
        similarity_score=score,
        bonus_points=bonus_points,
        bonus_notes=notes,
        final_round_points=base + bonus_points,
        actual_title=scene.title
    )
