"""
Scene acceptance rules

A scene is rejected when:
  - its season is outside the configured range
  - the quote is empty or shorter than min_words
  - the quote starts with "[" (pure stage direction, e.g. "[GRUNTING]")
  - bracketed spans make up more than 50% of the quote's characters
"""
import re
from typing import List

from quote_quiz.models import Scene, SeasonRange


# Non-nested [...] spans
_BRACKETED = re.compile(r"\[[^\]]+\]")

MAX_BRACKETED_RATIO = 0.5


def count_words(text: str) -> int:
    """Whitespace-tokenized word count"""
    return len(text.split())


def bracketed_spans(text: str) -> List[str]:
    """All non-nested [...] spans in order of appearance"""
    return _BRACKETED.findall(text)


def is_acceptable(scene: Scene, season_range: SeasonRange, min_words: int) -> bool:
    """
    Check whether a fetched scene can be used for a round

    Args:
        scene: Candidate scene
        season_range: Allowed seasons (inclusive)
        min_words: Minimum number of words in the quote

    Returns:
        True if the scene passes every rule
    """
    if not season_range.contains(scene.season):
        return False

    quote = scene.quote_text
    if not quote:
        return False

    if count_words(quote) < min_words:
        return False

    # Sound effects like [GRUNTING]
    if quote.strip().startswith("["):
        return False

    spans = bracketed_spans(quote)
    if spans:
        bracketed_length = len("".join(spans))
        if bracketed_length > len(quote) * MAX_BRACKETED_RATIO:
            return False

    return True


def clamp_season_range(season_min: int, season_max: int, lower: int, upper: int) -> SeasonRange:
    """
    Clamp a requested season range to the provider's season bounds

    Raises:
        ValueError: If min exceeds max after clamping
    """
    clamped_min = max(lower, min(season_min, upper))
    clamped_max = max(lower, min(season_max, upper))
    return SeasonRange(min=clamped_min, max=clamped_max)
