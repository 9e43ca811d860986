"""
Prediction workflow for MatchPredict.

- `catalog` loads the selectable teams, falling back to a built-in list.
- `validation` gates submissions on distinct home/away teams.
- `requester` calls the scoring service and builds the fallback result.
- `controller` owns the workflow state and ties the three together.
"""
