"""Player session registry"""
import logging
import time
import uuid
from typing import Optional

from quote_quiz import state
from quote_quiz.core.acquisition import SceneFetcher
from quote_quiz.core.game import GameController
from quote_quiz.services.frinkiac import FrinkiacClient


logger = logging.getLogger(__name__)


def get_scene_fetcher() -> SceneFetcher:
    if state.SCENE_FETCHER is None:
        client = FrinkiacClient(state.GAME_CONFIG.provider)
        state.SCENE_FETCHER = client.fetch_random_scene
    return state.SCENE_FETCHER


def prune_stale_sessions(now: Optional[float] = None) -> int:
    """
    Drop player sessions idle longer than GAME_CONFIG.session_ttl_seconds

    Args:
        now: Reference time (defaults to time.time())

    Returns:
        Number of sessions removed
    """
    now = time.time() if now is None else now
    ttl = state.GAME_CONFIG.session_ttl_seconds
    stale = [
        sid for sid, controller in list(state.PLAYER_SESSIONS.items())
        if controller.is_stale(ttl, now)
    ]
    for sid in stale:
        state.PLAYER_SESSIONS.pop(sid, None)

    if stale:
        logger.info(f"🧹 Dropped {len(stale)} idle player session(s)")
    return len(stale)


def create_player_session() -> str:
    prune_stale_sessions()

    session_id = uuid.uuid4().hex
    state.PLAYER_SESSIONS[session_id] = GameController(
        params=state.GAME_CONFIG,
        fetch_scene=get_scene_fetcher(),
    )
    logger.info(f"👤 New player session {session_id[:8]}")
    return session_id


def get_controller(session_id: str) -> Optional[GameController]:
    controller = state.PLAYER_SESSIONS.get(session_id)
    if controller is not None:
        controller.touch()
    return controller


def reset_player_sessions() -> int:
    count = len(state.PLAYER_SESSIONS)
    state.PLAYER_SESSIONS.clear()
    return count
