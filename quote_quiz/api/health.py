"""
Health check and system status endpoints
"""
from fastapi import APIRouter
from quote_quiz import state


router = APIRouter(tags=["health"])


@router.get("/")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "ok",
        "message": "Quote Quiz Server",
        "version": "1.0.0",
        "total_episodes": len(state.EPISODES),
        "active_players": len(state.PLAYER_SESSIONS)
    }
