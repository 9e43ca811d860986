"""
Team catalog loading.

The live list comes from the scoring service; if that fails for any reason
the built-in list is used instead and an advisory message is returned for
the UI to show. Loading never raises.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from matchpredict.api.client import PredictionApiClient
from matchpredict.config import DEFAULT_TEAMS, TEAMS_UNAVAILABLE_MESSAGE
from matchpredict.errors import PredictionServiceError
from matchpredict.utils.logging_utils import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class CatalogLoad:
    """Outcome of a catalog load."""

    teams: List[str]
    advisory: Optional[str] = None

    @property
    def is_default(self) -> bool:
        return self.advisory is not None


def default_catalog() -> List[str]:
    """Return a fresh copy of the built-in team list."""
    return list(DEFAULT_TEAMS)


def load_teams(client: PredictionApiClient) -> CatalogLoad:
    """
    Fetch the team catalog, degrading to the built-in list on failure.

    Parameters
    ----------
    client : PredictionApiClient
        Client bound to the scoring service.

    Returns
    -------
    CatalogLoad
        The teams in display order, plus an advisory message when the
        built-in list had to be used.
    """
    try:
        teams = client.get_teams()
    except PredictionServiceError as exc:
        logger.warning("Teams loading error: %s", exc)
        return CatalogLoad(teams=default_catalog(), advisory=TEAMS_UNAVAILABLE_MESSAGE)

    if len(teams) < 2:
        logger.warning(
            "Team list has %d entries; at least 2 are needed to make a selection.",
            len(teams),
        )
    return CatalogLoad(teams=teams)
