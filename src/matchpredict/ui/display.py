"""
Formatting helpers used when rendering a prediction.

Kept free of Streamlit so they can be tested directly.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Tuple

import pandas as pd

from matchpredict.config import (
    HIGH_PROBABILITY_THRESHOLD,
    MEDIUM_PROBABILITY_THRESHOLD,
)
from matchpredict.data.schema import Outcome, PredictionResult


class ProbabilityBand(str, Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"

    @property
    def color(self) -> str:
        """Bootstrap-style colour name for this band."""
        return {
            ProbabilityBand.HIGH: "success",
            ProbabilityBand.MEDIUM: "warning",
            ProbabilityBand.LOW: "danger",
        }[self]


BAND_BADGE_COLORS = {
    "success": "green",
    "warning": "orange",
    "danger": "red",
}


def probability_band(probability: float) -> ProbabilityBand:
    """Classify a single probability as High (>= 0.6), Medium (>= 0.3) or Low."""
    if probability >= HIGH_PROBABILITY_THRESHOLD:
        return ProbabilityBand.HIGH
    if probability >= MEDIUM_PROBABILITY_THRESHOLD:
        return ProbabilityBand.MEDIUM
    return ProbabilityBand.LOW


def outcome_label(result: PredictionResult) -> str:
    """Name the predicted winner, or "Draw"."""
    outcome = result.outcome
    if outcome is Outcome.HOME:
        return result.home_team
    if outcome is Outcome.AWAY:
        return result.away_team
    return "Draw"


def format_probability(probability: float) -> str:
    return f"{probability * 100:.1f}%"


def format_factor_name(key: str) -> str:
    return key.replace("_", " ")


def probability_rows(result: PredictionResult) -> List[Tuple[str, float]]:
    """The three probabilities in display order."""
    return [
        ("Home Win", result.home_win_probability),
        ("Draw", result.draw_probability),
        ("Away Win", result.away_win_probability),
    ]


def probability_table(result: PredictionResult) -> pd.DataFrame:
    """
    Build a table of the three probabilities with their severity band,
    indexed by outcome name, ready for ``st.bar_chart`` / ``st.dataframe``.
    """
    rows = probability_rows(result)
    return pd.DataFrame(
        {
            "Outcome": [name for name, _ in rows],
            "Probability": [p for _, p in rows],
            "Band": [probability_band(p).value for _, p in rows],
        }
    ).set_index("Outcome")


def key_factor_table(result: PredictionResult) -> pd.DataFrame:
    """Key factors as a two-column table with readable factor names."""
    return pd.DataFrame(
        {
            "Factor": [format_factor_name(k) for k in result.key_factors],
            "Value": [str(v) for v in result.key_factors.values()],
        }
    )
