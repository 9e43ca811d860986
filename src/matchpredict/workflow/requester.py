"""
Prediction requests against the scoring service.

When the service fails, exactly one pairing (Liverpool at home to
Southampton) gets a canned result so the demo still shows something. Every
other pairing just reports the failure.
"""

from __future__ import annotations

from typing import Optional

from matchpredict.api.client import PredictionApiClient
from matchpredict.config import (
    FALLBACK_MODEL_NAME,
    FALLBACK_PAIRING,
    FALLBACK_PROBABILITIES,
)
from matchpredict.data.schema import PredictionResult
from matchpredict.utils.logging_utils import get_logger

logger = get_logger(__name__)


def request_prediction(
    client: PredictionApiClient, home: str, away: str
) -> PredictionResult:
    """Ask the service for a prediction. Raises PredictionServiceError on failure."""
    result = client.predict(home, away)
    logger.info(
        "Prediction for %s vs %s: H=%.3f D=%.3f A=%.3f (%s, model=%s)",
        result.home_team,
        result.away_team,
        result.home_win_probability,
        result.draw_probability,
        result.away_win_probability,
        result.outcome.value,
        result.model_used,
    )
    return result


def fallback_prediction(home: str, away: str) -> Optional[PredictionResult]:
    """Return the canned result for the one supported pairing, else None."""
    if (home, away) != FALLBACK_PAIRING:
        return None

    home_win, draw, away_win = FALLBACK_PROBABILITIES
    logger.info("Using fallback prediction for %s vs %s", home, away)
    return PredictionResult(
        home_team=home,
        away_team=away,
        home_win_probability=home_win,
        draw_probability=draw,
        away_win_probability=away_win,
        prediction="H",
        model_used=FALLBACK_MODEL_NAME,
        key_factors={
            "note": (
                f"Using fallback {home} vs {away} prediction (API unavailable)"
            )
        },
    )
