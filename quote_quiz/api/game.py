"""
Player session and game action endpoints
"""
from fastapi import APIRouter, HTTPException
import logging

from quote_quiz import state
from quote_quiz.core.game import GameController, is_round_active
from quote_quiz.core.validator import clamp_season_range
from quote_quiz.errors import AcquisitionInProgress, FetchFailed, NoValidSceneFound
from quote_quiz.models import GuessIn, RevealHintIn, StartRoundIn
from quote_quiz.services.player_registry import create_player_session, get_controller


router = APIRouter(prefix="/sessions", tags=["game"])
logger = logging.getLogger(__name__)


def _require_controller(session_id: str) -> GameController:
    controller = get_controller(session_id)
    if not controller:
        raise HTTPException(status_code=404, detail=f"Session {session_id} not found")
    return controller


@router.post("")
async def start_session():
    """Create a player session"""
    session_id = create_player_session()
    return {
        "session_id": session_id,
        "state": get_controller(session_id).snapshot()
    }


@router.get("/{session_id}")
async def get_session(session_id: str):
    """Current round and session totals"""
    return _require_controller(session_id).snapshot()


@router.post("/{session_id}/rounds")
def start_round(session_id: str, payload: StartRoundIn = StartRoundIn()):
    """
    Start a new round (blocks while scenes are fetched)

    Request:
        {"season_min": 1, "season_max": 5}   # both optional

    Errors:
        400 invalid season range
        409 a round is already loading
        502 scene provider failed
        503 no acceptable scene within the attempt budget
        500 anything unexpected (logged with traceback)
    """
    controller = _require_controller(session_id)
    params = state.GAME_CONFIG
    default = params.default_season_range
    bounds = params.season_bounds

    try:
        season_range = clamp_season_range(
            payload.season_min if payload.season_min is not None else default.min,
            payload.season_max if payload.season_max is not None else default.max,
            bounds.min,
            bounds.max
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Invalid season range: {e}")

    if is_round_active(controller):
        logger.info(f"↩️ Session {session_id[:8]} abandons an unguessed round")

    try:
        controller.start_new_round(season_range)
    except AcquisitionInProgress as e:
        raise HTTPException(status_code=409, detail=str(e))
    except NoValidSceneFound as e:
        logger.warning(f"⚠️ Session {session_id[:8]}: {e}")
        raise HTTPException(
            status_code=503,
            detail={
                "error": "no_valid_scene",
                "attempts": e.attempts,
                "message": "No suitable quote found. Try different settings or retry."
            }
        )
    except FetchFailed as e:
        logger.error(f"❌ Session {session_id[:8]}: {e}")
        raise HTTPException(
            status_code=502,
            detail={
                "error": "fetch_failed",
                "message": "Error loading quote. Please retry."
            }
        )
    except Exception as e:
        logger.error(
            f"❌ ERROR starting round for session {session_id[:8]}\n"
            f"Error: {str(e)}\n"
            f"Error Type: {type(e).__name__}",
            exc_info=True
        )
        raise HTTPException(status_code=500, detail=f"Internal server error: {str(e)}")

    return controller.snapshot()


@router.post("/{session_id}/hints")
async def reveal_hint(session_id: str, payload: RevealHintIn):
    """
    Buy a hint

    Request:
        {"kind": "image" | "season" | "episode_number"}

    Already revealed hints and finished rounds are left unchanged.
    """
    controller = _require_controller(session_id)
    revealed = controller.reveal_hint(payload.kind)
    return {
        "revealed": revealed,
        "state": controller.snapshot()
    }


@router.post("/{session_id}/guess")
def submit_guess(session_id: str, payload: GuessIn):
    """
    Submit the round's single guess

    Request:
        {"text": "The Crepes of Wrath", "season_guess": 1, "episode_guess": 11}

    A blank guess or a second guess is ignored ("accepted": false).
    """
    controller = _require_controller(session_id)
    result = controller.submit_guess(payload.text, payload.season_guess, payload.episode_guess)
    return {
        "accepted": result is not None,
        "result": result.model_dump() if result else None,
        "state": controller.snapshot()
    }
