"""
Data models for the quote quiz
"""
from enum import Enum
from typing import Dict, List, Optional, Set

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class HintKind(str, Enum):
    """Player-purchasable reveals"""
    IMAGE = "image"
    SEASON = "season"
    EPISODE_NUMBER = "episode_number"


class Scene(BaseModel):
    """One quote + screenshot unit from the scene provider"""
    model_config = ConfigDict(frozen=True)

    episode_key: str           # e.g. "S01E11"
    season: int
    episode_number: int
    title: str
    frame_timestamp_ms: int
    quote_text: str            # subtitle fragments joined with a single space
    image_url: Optional[str] = None


class SeasonRange(BaseModel):
    """Inclusive range of seasons a scene may come from"""
    min: int
    max: int

    @model_validator(mode="after")
    def _check_order(self) -> "SeasonRange":
        if self.min > self.max:
            raise ValueError(f"Season range min ({self.min}) must not exceed max ({self.max})")
        return self

    def contains(self, season: int) -> bool:
        return self.min <= season <= self.max


class GuessResult(BaseModel):
    """Outcome of the single guess of a round"""
    model_config = ConfigDict(frozen=True)

    is_correct: bool
    similarity_score: float
    bonus_points: int = 0
    bonus_notes: List[str] = []
    final_round_points: int
    actual_title: str


class RoundState(BaseModel):
    """Per-round state; scene is absent until acquisition succeeds"""
    scene: Optional[Scene] = None
    points_remaining: int = 0
    revealed_hints: Set[HintKind] = set()
    is_guessed: bool = False
    is_won: bool = False
    result: Optional[GuessResult] = None


class SessionState(BaseModel):
    """Accumulated outcomes for one player session"""
    total_points: int = 0
    rounds_played: int = 0


class Episode(BaseModel):
    """Entry of the static episode list used for autocomplete"""
    season: int
    title: str


class ProviderParams(BaseModel):
    """Scene provider connection settings"""
    base_url: str = "https://frinkiac.com"
    timeout: float = 10.0


DEFAULT_HINT_COSTS: Dict[HintKind, int] = {
    HintKind.IMAGE: 30,
    HintKind.SEASON: 20,
    HintKind.EPISODE_NUMBER: 40,
}

# Guesses are compared against episode titles; anything longer is rejected
MAX_GUESS_LENGTH = 200


class GameConfig(BaseModel):
    """Game parameters"""
    starting_points: int = 100
    hint_costs: Dict[HintKind, int] = Field(default_factory=lambda: dict(DEFAULT_HINT_COSTS))
    min_quote_words: int = 5
    similarity_threshold: float = 0.75
    season_bonus: int = 25
    episode_bonus: int = 25
    max_attempts: int = 50
    default_season_range: SeasonRange = SeasonRange(min=1, max=5)
    season_bounds: SeasonRange = SeasonRange(min=1, max=20)
    session_ttl_seconds: int = 3600   # idle player sessions are dropped after this
    provider: ProviderParams = ProviderParams()

    @field_validator("hint_costs")
    @classmethod
    def _merge_hint_costs(cls, value: Dict[HintKind, int]) -> Dict[HintKind, int]:
        # Kinds missing from the config keep their default cost
        return {**DEFAULT_HINT_COSTS, **value}


# ==================== REQUEST BODIES ====================

class StartRoundIn(BaseModel):
    season_min: Optional[int] = None
    season_max: Optional[int] = None


class RevealHintIn(BaseModel):
    kind: HintKind


class GuessIn(BaseModel):
    text: str = Field(..., max_length=MAX_GUESS_LENGTH)
    season_guess: Optional[int] = None
    episode_guess: Optional[int] = None
