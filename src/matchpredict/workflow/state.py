"""
Workflow state shared between the controller and the UI.

The UI only reads this; all changes go through ``PredictionWorkflow``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from matchpredict.data.schema import PredictionResult


@dataclass(frozen=True)
class WorkflowState:
    teams: List[str] = field(default_factory=list)
    home: Optional[str] = None
    away: Optional[str] = None
    result: Optional[PredictionResult] = None
    loading: bool = False
    error: Optional[str] = None

    @property
    def can_submit(self) -> bool:
        """Whether the submit control should be enabled."""
        return (
            not self.loading
            and bool(self.home)
            and bool(self.away)
            and self.home != self.away
        )
