"""
Client for the remote scoring service.

All transport, status and payload problems surface as a single
``PredictionServiceError`` so callers only have one failure to handle.
"""

from __future__ import annotations

from typing import Any, List, Optional

import requests
from pydantic import ValidationError

from matchpredict.config import get_api_base_url, get_request_timeout
from matchpredict.data.schema import PredictionRequest, PredictionResult, TeamList
from matchpredict.errors import PredictionServiceError
from matchpredict.utils.logging_utils import get_logger

logger = get_logger(__name__)


class PredictionApiClient:
    """
    Thin wrapper around a ``requests.Session`` bound to one base URL.

    Parameters
    ----------
    base_url : str | None
        Service root, e.g. "http://localhost:8000/api". If None, read from
        the environment via ``matchpredict.config``.
    session : requests.Session | None
        Session to issue requests with. Anything exposing ``get``/``post``
        with the same signatures works.
    timeout : float | None
        Per-request timeout in seconds. If None, read from config.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.base_url = (base_url or get_api_base_url()).rstrip("/")
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout if timeout is not None else get_request_timeout()

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def _read_json(self, response: requests.Response, url: str) -> Any:
        try:
            response.raise_for_status()
            return response.json()
        except (requests.RequestException, ValueError) as exc:
            raise PredictionServiceError(f"Bad response from {url}: {exc}") from exc

    def get_teams(self) -> List[str]:
        """Fetch the ordered team catalog."""
        url = self._url("teams")
        logger.info("Fetching team list from %s", url)
        try:
            response = self.session.get(url, timeout=self.timeout)
        except (requests.RequestException, ValueError) as exc:
            raise PredictionServiceError(f"Could not reach {url}: {exc}") from exc

        payload = self._read_json(response, url)
        try:
            teams = TeamList.model_validate(payload).unique()
        except ValidationError as exc:
            raise PredictionServiceError(
                f"Malformed team list from {url}: {exc}"
            ) from exc

        logger.info("Received %d teams.", len(teams))
        return teams

    def predict(self, home_team: str, away_team: str) -> PredictionResult:
        """Request a prediction for ``home_team`` vs ``away_team``."""
        url = self._url("predict")
        body = PredictionRequest(home_team=home_team, away_team=away_team)
        logger.info("Requesting prediction for %s vs %s", home_team, away_team)
        try:
            response = self.session.post(
                url, json=body.model_dump(), timeout=self.timeout
            )
        except (requests.RequestException, ValueError) as exc:
            raise PredictionServiceError(f"Could not reach {url}: {exc}") from exc

        payload = self._read_json(response, url)
        try:
            return PredictionResult.model_validate(payload)
        except ValidationError as exc:
            raise PredictionServiceError(
                f"Malformed prediction from {url}: {exc}"
            ) from exc
