"""
Scene acquisition: bounded fetch-and-validate loop
"""
import logging
from typing import Callable

from quote_quiz.core.validator import is_acceptable
from quote_quiz.errors import FetchFailed, NoValidSceneFound
from quote_quiz.models import Scene, SeasonRange


logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 50

SceneFetcher = Callable[[], Scene]


def acquire_valid_scene(
    season_range: SeasonRange,
    min_words: int,
    fetch_one: SceneFetcher,
    max_attempts: int = MAX_ATTEMPTS
) -> Scene:
    """
    Fetch candidates until one passes validation

    Args:
        season_range: Allowed seasons
        min_words: Minimum quote length in words
        fetch_one: Collaborator returning one random scene per call
        max_attempts: Fetch budget (default 50)

    Returns:
        First acceptable scene

    Raises:
        NoValidSceneFound: If max_attempts candidates were all rejected
        FetchFailed: If the collaborator fails
    """
    for attempt in range(1, max_attempts + 1):
        try:
            scene = fetch_one()
        except FetchFailed:
            raise
        except Exception as e:
            raise FetchFailed(f"{type(e).__name__}: {e}") from e

        if is_acceptable(scene, season_range, min_words):
            logger.info(f"🎬 Accepted {scene.episode_key} after {attempt} attempt(s)")
            return scene

        logger.debug(f"Rejected {scene.episode_key} (attempt {attempt}/{max_attempts})")

    logger.warning(
        f"⚠️ No valid scene in seasons {season_range.min}-{season_range.max} "
        f"after {max_attempts} attempts"
    )
    raise NoValidSceneFound(max_attempts)
