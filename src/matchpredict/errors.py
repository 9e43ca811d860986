"""
Exceptions shared by the MatchPredict client and workflow.
"""

from matchpredict.config import INCOMPLETE_SELECTION_MESSAGE, SAME_TEAM_MESSAGE


class MatchPredictError(Exception):
    """Base class for all MatchPredict errors."""


class PredictionServiceError(MatchPredictError):
    """The scoring service could not be reached or returned an unusable reply."""


class SelectionError(MatchPredictError):
    """The home/away selection cannot be submitted."""


class SameTeamError(SelectionError):
    def __init__(self, team: str) -> None:
        super().__init__(SAME_TEAM_MESSAGE)
        self.team = team


class IncompleteSelectionError(SelectionError):
    def __init__(self) -> None:
        super().__init__(INCOMPLETE_SELECTION_MESSAGE)
