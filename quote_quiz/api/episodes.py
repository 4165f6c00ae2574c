"""
Episode list endpoints (autocomplete)
"""
from fastapi import APIRouter, Query

from quote_quiz import state
from quote_quiz.services.episodes import DEFAULT_SEARCH_LIMIT, search_episodes


router = APIRouter(prefix="/episodes", tags=["episodes"])


@router.get("")
async def list_episodes(
    q: str = "",
    limit: int = Query(DEFAULT_SEARCH_LIMIT, ge=1, le=50)
):
    """
    Search episode titles

    A blank `q` matches nothing.
    """
    matches = search_episodes(state.EPISODES, q, limit)
    return {"episodes": [ep.model_dump() for ep in matches]}
