"""
FastAPI main application
Quote Quiz - guess the episode from a random quote

Modular architecture with separated API routers in quote_quiz/api/:
- health.py: Health check and system status
- config.py: Game parameters
- episodes.py: Episode title search for autocomplete
- game.py: Player sessions, rounds, hints and guesses

All routers access shared state via quote_quiz.state module.
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from contextlib import asynccontextmanager
import logging
import os

from quote_quiz import state
from quote_quiz.config import DEFAULT_CONFIG_PATH, load_config
from quote_quiz.services.episodes import load_episodes
from quote_quiz.services.player_registry import get_scene_fetcher, reset_player_sessions

# Import all API routers
from quote_quiz.api import health, episodes, game
from quote_quiz.api import config as config_router


# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

CONFIG_PATH = os.environ.get("QUOTE_QUIZ_CONFIG", DEFAULT_CONFIG_PATH)
EPISODES_PATH = os.environ.get("QUOTE_QUIZ_EPISODES", "data/episodes.csv")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events"""
    # Startup: game parameters
    try:
        state.GAME_CONFIG = load_config(CONFIG_PATH)
        logger.info(f"✅ Loaded game config from {CONFIG_PATH}")
    except FileNotFoundError as e:
        logger.warning(f"⚠️ {e} - using default game parameters")

    # Episode list is optional; autocomplete is empty without it
    try:
        state.EPISODES = load_episodes(EPISODES_PATH)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"❌ Failed to load episodes: {e}")

    # Scene provider (tests may install their own fetcher beforehand)
    get_scene_fetcher()

    logger.info("✅ Server started")

    yield

    # Shutdown
    dropped = reset_player_sessions()
    logger.info(f"🛑 Server shutting down ({dropped} player sessions dropped)")


# Create FastAPI app
app = FastAPI(
    title="Quote Quiz",
    description="Guess the episode from a random quote",
    version="1.0.0",
    lifespan=lifespan
)

# CORS middleware (allow all origins for development)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ==================== INCLUDE ROUTERS ====================

# Health check (GET /)
app.include_router(health.router)

# Config endpoint (GET /config)
app.include_router(config_router.router)

# Episode search (GET /episodes)
app.include_router(episodes.router)

# Game endpoints (POST /sessions, /sessions/{id}/rounds, /hints, /guess)
app.include_router(game.router)


# ==================== STATIC FILES ====================

# Mount static files directory for the browser front end
if os.path.exists("static"):
    app.mount("/static", StaticFiles(directory="static"), name="static")


# ==================== RUN SERVER ====================

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
