"""
Global application state
Shared resources accessible across all modules
"""
from typing import TYPE_CHECKING, Callable, Dict, List, Optional

from quote_quiz.models import Episode, GameConfig, Scene

if TYPE_CHECKING:
    from quote_quiz.core.game import GameController

# Game parameters (replaced from config/game.yaml at startup)
GAME_CONFIG: GameConfig = GameConfig()

# Static episode list for autocomplete
EPISODES: List[Episode] = []

# Scene provider; built lazily from GAME_CONFIG.provider if not set
SCENE_FETCHER: Optional[Callable[[], Scene]] = None

# Player sessions: session-id -> GameController
PLAYER_SESSIONS: Dict[str, "GameController"] = {}
