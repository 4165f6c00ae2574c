"""
Shared fixtures
"""
import pytest

from quote_quiz.models import Scene


GOOD_QUOTE = "I didn't know you could smoke four at once"


@pytest.fixture
def make_scene():
    """Factory for scenes with sensible defaults"""
    def _make(**overrides) -> Scene:
        fields = {
            "episode_key": "S01E11",
            "season": 1,
            "episode_number": 11,
            "title": "The Crepes of Wrath",
            "frame_timestamp_ms": 353652,
            "quote_text": GOOD_QUOTE,
            "image_url": "https://frinkiac.com/img/S01E11/353652.jpg",
        }
        fields.update(overrides)
        return Scene(**fields)
    return _make
