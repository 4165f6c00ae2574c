"""
Round state machine

States:
  EMPTY   -> no scene yet
  ACTIVE  -> scene loaded, hints can be bought, one guess allowed
  GUESSED -> terminal; start a new Round for the next scene
"""
import logging
from enum import Enum
from typing import Optional

from quote_quiz.core.evaluator import evaluate
from quote_quiz.models import GameConfig, GuessResult, HintKind, RoundState, Scene


logger = logging.getLogger(__name__)


class RoundPhase(str, Enum):
    EMPTY = "empty"
    ACTIVE = "active"
    GUESSED = "guessed"


class Round:
    """
    Owns one RoundState and its transitions.
    Invalid requests (duplicate hint, second guess, blank guess) are no-ops.
    """

    def __init__(self, params: GameConfig):
        self.params = params
        self.state = RoundState()

    @property
    def phase(self) -> RoundPhase:
        if self.state.scene is None:
            return RoundPhase.EMPTY
        if self.state.is_guessed:
            return RoundPhase.GUESSED
        return RoundPhase.ACTIVE

    def activate(self, scene: Scene) -> None:
        """EMPTY -> ACTIVE"""
        if self.phase != RoundPhase.EMPTY:
            raise RuntimeError("Round already has a scene; start a new round instead")

        self.state = RoundState(
            scene=scene,
            points_remaining=self.params.starting_points,
            revealed_hints=set(),
            is_guessed=False,
            is_won=False
        )

    def reveal_hint(self, kind: HintKind) -> bool:
        """
        Buy a hint

        Returns:
            True if the hint was newly revealed, False for a no-op
        """
        if self.phase != RoundPhase.ACTIVE or kind in self.state.revealed_hints:
            return False

        cost = self.params.hint_costs.get(kind, 0)
        self.state.points_remaining = max(0, self.state.points_remaining - cost)
        self.state.revealed_hints.add(kind)
        return True

    def submit_guess(
        self,
        text: str,
        season_guess: Optional[int] = None,
        episode_guess: Optional[int] = None
    ) -> Optional[GuessResult]:
        """
        ACTIVE -> GUESSED

        Losing on the title wipes the base points; structured bonuses
        still land on top.

        Returns:
            GuessResult, or None when the guess was ignored
        """
        if self.phase != RoundPhase.ACTIVE:
            return None

        guess = text.strip()
        if not guess:
            return None

        self.state.is_guessed = True

        result = evaluate(
            self.state.points_remaining,
            self.state.scene,
            guess,
            season_guess,
            episode_guess,
            params=self.params
        )

        self.state.is_won = result.is_correct
        # final_round_points already has the base zeroed on a loss
        self.state.points_remaining = result.final_round_points
        self.state.result = result

        logger.info(
            f"{'✅' if result.is_correct else '❌'} Guess '{guess}' vs '{result.actual_title}' | "
            f"Similarity: {result.similarity_score:.2f} | Points: {result.final_round_points}"
        )
        return result
