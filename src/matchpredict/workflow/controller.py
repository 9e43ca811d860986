"""
The prediction workflow controller.

Owns the single ``WorkflowState`` for a session. The UI calls ``load``,
``select_home``/``select_away`` and ``predict`` and renders whatever state
results; it never changes the state itself.
"""

from __future__ import annotations

from dataclasses import replace
from typing import List, Optional

from matchpredict.api.client import PredictionApiClient
from matchpredict.config import PREDICTION_FAILED_MESSAGE
from matchpredict.data.schema import PredictionResult
from matchpredict.errors import (
    IncompleteSelectionError,
    PredictionServiceError,
    SelectionError,
)
from matchpredict.utils.logging_utils import get_logger
from matchpredict.workflow.catalog import load_teams
from matchpredict.workflow.requester import fallback_prediction, request_prediction
from matchpredict.workflow.state import WorkflowState
from matchpredict.workflow.validation import validate

logger = get_logger(__name__)


class PredictionWorkflow:
    """
    Team selection and prediction for one user session.

    Parameters
    ----------
    client : PredictionApiClient | None
        Scoring-service client. If None, one is built from config.
    """

    def __init__(self, client: Optional[PredictionApiClient] = None) -> None:
        self.client = client if client is not None else PredictionApiClient()
        self.state = WorkflowState()

    def _update(self, **changes) -> WorkflowState:
        self.state = replace(self.state, **changes)
        return self.state

    def _set_catalog(self, teams: List[str]) -> None:
        # Reseed the selection whenever the catalog changes.
        if len(teams) >= 2:
            self._update(teams=list(teams), home=teams[0], away=teams[1])
        else:
            self._update(teams=list(teams), home=None, away=None)

    def load(self) -> WorkflowState:
        """Load the team catalog and seed the default selection."""
        loaded = load_teams(self.client)
        self._set_catalog(loaded.teams)
        if loaded.advisory:
            self._update(error=loaded.advisory)
        logger.info(
            "Catalog ready with %d teams (home=%s, away=%s)",
            len(self.state.teams),
            self.state.home,
            self.state.away,
        )
        return self.state

    def _check_team(self, team: str) -> None:
        if team not in self.state.teams:
            raise ValueError(f"Unknown team: {team!r}")

    def select_home(self, team: str) -> WorkflowState:
        self._check_team(team)
        return self._update(home=team)

    def select_away(self, team: str) -> WorkflowState:
        self._check_team(team)
        return self._update(away=team)

    def predict(
        self, home: Optional[str] = None, away: Optional[str] = None
    ) -> Optional[PredictionResult]:
        """
        Submit a fixture to the scoring service.

        Defaults to the current selection. Returns the result that ended up
        in the state, or None when there is none (rejected, invalid, or the
        service failed without a fallback).
        """
        home = home if home is not None else self.state.home
        away = away if away is not None else self.state.away

        if self.state.loading:
            logger.warning(
                "Prediction already in progress; ignoring %s vs %s", home, away
            )
            return None

        try:
            if not home or not away:
                raise IncompleteSelectionError()
            validate(home, away)
        except SelectionError as exc:
            self._update(error=str(exc))
            return None

        self._update(error=None, loading=True)
        try:
            try:
                result = request_prediction(self.client, home, away)
                error = None
            except PredictionServiceError as exc:
                logger.warning("Prediction error for %s vs %s: %s", home, away, exc)
                result = fallback_prediction(home, away)
                error = PREDICTION_FAILED_MESSAGE
            self._update(result=result, error=error)
        finally:
            self._update(loading=False)

        return self.state.result
