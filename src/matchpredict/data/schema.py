"""
Schemas for the payloads exchanged with the remote scoring service.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, RootModel

from matchpredict.utils.logging_utils import get_logger

logger = get_logger(__name__)


class Outcome(str, Enum):
    """Predicted match result."""

    HOME = "Home"
    DRAW = "Draw"
    AWAY = "Away"

    @classmethod
    def from_tag(cls, tag: Optional[str]) -> "Outcome":
        """Map the service's single-letter tag; anything unrecognized is a draw."""
        if tag == "H":
            return cls.HOME
        if tag == "A":
            return cls.AWAY
        return cls.DRAW


class TeamList(RootModel[List[str]]):
    """Ordered list of team names as returned by ``GET /teams``."""

    def unique(self) -> List[str]:
        """Return the names in order, keeping the first of any duplicates."""
        teams = list(dict.fromkeys(self.root))
        if len(teams) < len(self.root):
            logger.warning(
                "Dropped %d duplicate team names from the catalog.",
                len(self.root) - len(teams),
            )
        return teams


class PredictionRequest(BaseModel):
    home_team: str
    away_team: str


class PredictionResult(BaseModel):
    """
    A single match prediction.

    ``prediction`` is the raw outcome tag ('H', 'D' or 'A'); use
    ``outcome`` for the interpreted value.
    """

    home_team: str
    away_team: str
    home_win_probability: float = Field(..., ge=0.0, le=1.0)
    draw_probability: float = Field(..., ge=0.0, le=1.0)
    away_win_probability: float = Field(..., ge=0.0, le=1.0)
    prediction: Optional[str] = None
    model_used: str
    key_factors: Dict[str, Any] = Field(default_factory=dict)

    @property
    def outcome(self) -> Outcome:
        return Outcome.from_tag(self.prediction)
