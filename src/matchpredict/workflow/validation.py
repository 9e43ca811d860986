"""
Selection validation.
"""

from __future__ import annotations

from typing import Optional

from matchpredict.errors import SameTeamError


def validate(home: Optional[str], away: Optional[str]) -> None:
    """
    Check that a home/away selection may be submitted.

    Unset fields are not rejected here; the UI keeps submission disabled
    until both teams are picked.

    Raises
    ------
    SameTeamError
        If both sides name the same team.
    """
    if home == away and home is not None:
        raise SameTeamError(home)
