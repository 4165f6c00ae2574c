"""
Game controller: owns one player's current round and session totals
"""
import logging
import threading
import time
from typing import Dict, Optional

from quote_quiz.core.acquisition import SceneFetcher, acquire_valid_scene
from quote_quiz.core.round import Round, RoundPhase
from quote_quiz.core.session import average_points, record_round
from quote_quiz.errors import AcquisitionInProgress
from quote_quiz.models import GameConfig, GuessResult, HintKind, SeasonRange, SessionState


logger = logging.getLogger(__name__)


class GameController:
    """
    One instance per player session.

    Only one scene acquisition may be in flight at a time; a second
    start_new_round call while one is loading raises AcquisitionInProgress.
    """

    def __init__(self, params: GameConfig, fetch_scene: SceneFetcher):
        self.params = params
        self.fetch_scene = fetch_scene
        self.round = Round(params)
        self.session = SessionState()
        self._acquiring = threading.Lock()
        self.last_seen = time.time()

    def touch(self) -> None:
        """Mark the session as used now"""
        self.last_seen = time.time()

    def is_stale(self, ttl_seconds: float, now: Optional[float] = None) -> bool:
        """Idle longer than ttl_seconds; a session loading a round is never stale"""
        now = time.time() if now is None else now
        return not self.is_loading and now - self.last_seen > ttl_seconds

    @property
    def is_loading(self) -> bool:
        return self._acquiring.locked()

    def start_new_round(self, season_range: Optional[SeasonRange] = None) -> Round:
        """
        Acquire a scene and replace the current round with a fresh one.
        On failure the previous round is left as it was.
        """
        if not self._acquiring.acquire(blocking=False):
            raise AcquisitionInProgress()

        try:
            season_range = season_range or self.params.default_season_range
            scene = acquire_valid_scene(
                season_range,
                self.params.min_quote_words,
                self.fetch_scene,
                max_attempts=self.params.max_attempts
            )
            new_round = Round(self.params)
            new_round.activate(scene)
            self.round = new_round
        finally:
            self._acquiring.release()

        logger.info(
            f"🎯 New round: {scene.episode_key} (seasons {season_range.min}-{season_range.max})"
        )
        return self.round

    def reveal_hint(self, kind: HintKind) -> bool:
        return self.round.reveal_hint(kind)

    def submit_guess(
        self,
        text: str,
        season_guess: Optional[int] = None,
        episode_guess: Optional[int] = None
    ) -> Optional[GuessResult]:
        result = self.round.submit_guess(text, season_guess, episode_guess)
        if result is not None:
            self.session = record_round(self.session, result.final_round_points)
        return result

    def snapshot(self) -> Dict:
        """
        Read-only view for display

        Hint values appear once bought, and all of them once the round
        is guessed. The title is only shown after the guess.
        """
        state = self.round.state
        scene = state.scene
        finished = state.is_guessed

        round_view = {
            "phase": self.round.phase.value,
            "points_remaining": state.points_remaining,
            "revealed_hints": sorted(kind.value for kind in state.revealed_hints),
            "is_guessed": state.is_guessed,
            "is_won": state.is_won,
            "quote": None,
            "hints": {},
            "title": None,
            "result": None,
        }

        if scene is not None:
            def visible(kind: HintKind) -> bool:
                return finished or kind in state.revealed_hints

            round_view["quote"] = scene.quote_text
            round_view["hints"] = {
                HintKind.IMAGE.value: scene.image_url if visible(HintKind.IMAGE) else None,
                HintKind.SEASON.value: scene.season if visible(HintKind.SEASON) else None,
                HintKind.EPISODE_NUMBER.value: (
                    scene.episode_number if visible(HintKind.EPISODE_NUMBER) else None
                ),
            }
            if finished:
                round_view["title"] = scene.title
                round_view["result"] = state.result.model_dump() if state.result else None

        return {
            "loading": self.is_loading,
            "round": round_view,
            "session": {
                "total_points": self.session.total_points,
                "rounds_played": self.session.rounds_played,
                "average": average_points(self.session),
            },
            "hint_costs": {kind.value: cost for kind, cost in self.params.hint_costs.items()},
        }


def is_round_active(controller: GameController) -> bool:
    return controller.round.phase == RoundPhase.ACTIVE
