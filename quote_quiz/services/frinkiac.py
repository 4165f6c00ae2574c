"""
Frinkiac scene provider client

Response format of GET /api/random:
    {
        "Episode": {"Key": "S01E11", "Season": 1, "EpisodeNumber": 11,
                    "Title": "The Crepes of Wrath", ...},
        "Frame": {"Episode": "S01E11", "Timestamp": 353652, ...},
        "Subtitles": [{"Content": "I didn't know you could", ...},
                      {"Content": "smoke four at once.", ...}],
        ...
    }
"""
import logging
import time
from typing import Dict, Optional

import requests

from quote_quiz.errors import FetchFailed
from quote_quiz.models import ProviderParams, Scene


logger = logging.getLogger(__name__)


def image_url(base_url: str, episode_key: str, timestamp_ms: int) -> str:
    """Screenshot URL for a frame"""
    return f"{base_url.rstrip('/')}/img/{episode_key}/{timestamp_ms}.jpg"


def get_quote_text(data: Dict) -> str:
    """Join subtitle fragments with a single space ("" when there are none)"""
    subtitles = data.get("Subtitles") or []
    return " ".join(sub["Content"] for sub in subtitles)


def parse_scene(data: Dict, base_url: Optional[str] = None) -> Scene:
    """
    Parse a provider response into a Scene

    Raises:
        FetchFailed: If required fields are missing or malformed
    """
    try:
        episode = data["Episode"]
        frame = data["Frame"]
        episode_key = episode.get("Key") or frame["Episode"]
        timestamp = int(frame["Timestamp"])

        return Scene(
            episode_key=episode_key,
            season=int(episode["Season"]),
            episode_number=int(episode["EpisodeNumber"]),
            title=episode["Title"],
            frame_timestamp_ms=timestamp,
            quote_text=get_quote_text(data),
            image_url=image_url(base_url, episode_key, timestamp) if base_url else None
        )
    except (KeyError, TypeError, ValueError) as e:
        raise FetchFailed(f"Malformed scene payload ({type(e).__name__}: {e})") from e


class FrinkiacClient:
    """Fetches random scenes from the Frinkiac API"""

    def __init__(self, params: Optional[ProviderParams] = None, session: Optional[requests.Session] = None):
        self.params = params or ProviderParams()
        self.base_url = self.params.base_url.rstrip("/")
        self.timeout = self.params.timeout
        self._session = session or requests.Session()

    def fetch_random_scene(self) -> Scene:
        """
        One round-trip to the provider

        Raises:
            FetchFailed: On transport error, non-200 status or malformed data
        """
        url = f"{self.base_url}/api/random"
        # Cache buster, the endpoint is otherwise cached upstream
        query = {"t": int(time.time() * 1000)}

        try:
            resp = self._session.get(url, params=query, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"❌ Frinkiac request failed: {e}")
            raise FetchFailed(str(e)) from e

        if resp.status_code != 200:
            logger.error(f"❌ Frinkiac returned {resp.status_code}")
            raise FetchFailed("Unexpected status from scene provider", status_code=resp.status_code)

        try:
            data = resp.json()
        except ValueError as e:
            raise FetchFailed("Response body is not JSON") from e

        if not isinstance(data, dict):
            raise FetchFailed(f"Expected JSON object, got {type(data).__name__}")

        return parse_scene(data, self.base_url)
