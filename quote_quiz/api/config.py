"""
Configuration endpoints
"""
from fastapi import APIRouter

from quote_quiz import state


router = APIRouter(tags=["config"])


@router.get("/config")
async def get_config():
    """Get current game parameters (provider connection settings excluded)"""
    params = state.GAME_CONFIG
    return params.model_dump(mode="json", exclude={"provider"})
