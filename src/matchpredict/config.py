"""
Global configuration for the MatchPredict project.

This module centralizes the scoring-service location, the built-in team list
and the user-facing messages, so you can tweak them in one place.
"""

import os
from typing import List, Tuple

# Remote scoring service
API_URL_ENV_VAR: str = "MATCHPREDICT_API_URL"
DEFAULT_API_URL: str = "http://localhost:8000/api"

API_TIMEOUT_ENV_VAR: str = "MATCHPREDICT_API_TIMEOUT"
REQUEST_TIMEOUT_SECONDS: float = 10.0

# Used when the live team list cannot be fetched. Order = display order.
DEFAULT_TEAMS: List[str] = [
    "Manchester City",
    "Liverpool",
    "Arsenal",
    "Manchester United",
    "Chelsea",
    "Tottenham",
    "Newcastle United",
    "Aston Villa",
    "Brighton & Hove Albion",
    "West Ham United",
    "Crystal Palace",
    "Wolverhampton",
    "Everton",
    "Leicester City",
    "Brentford",
    "Fulham",
    "Bournemouth",
    "Nottingham Forest",
    "Leeds United",
    "Southampton",
]

# User-facing messages
TEAMS_UNAVAILABLE_MESSAGE: str = "Cannot load teams from API. Using default list."
SAME_TEAM_MESSAGE: str = "Teams must differ"
INCOMPLETE_SELECTION_MESSAGE: str = "Select both a home and an away team"
PREDICTION_FAILED_MESSAGE: str = "Prediction failed"

# The only pairing that gets a synthetic result when the service is down.
FALLBACK_PAIRING: Tuple[str, str] = ("Liverpool", "Southampton")
FALLBACK_PROBABILITIES: Tuple[float, float, float] = (0.75, 0.15, 0.10)
FALLBACK_MODEL_NAME: str = "Fallback Model"

# Probability severity bands (lower bounds, inclusive)
HIGH_PROBABILITY_THRESHOLD: float = 0.6
MEDIUM_PROBABILITY_THRESHOLD: float = 0.3


def get_api_base_url() -> str:
    """Return the scoring-service base URL, without a trailing slash."""
    return os.environ.get(API_URL_ENV_VAR, DEFAULT_API_URL).rstrip("/")


def get_request_timeout() -> float:
    """Return the request timeout in seconds."""
    raw = os.environ.get(API_TIMEOUT_ENV_VAR)
    if not raw:
        return REQUEST_TIMEOUT_SECONDS
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(
            f"{API_TIMEOUT_ENV_VAR} must be a number of seconds, got {raw!r}"
        ) from exc
