"""
HTTP client for the remote MatchPredict scoring service.

Wraps the two endpoints the workflow needs:
- GET  /teams    -> ordered list of team names
- POST /predict  -> win/draw/loss probabilities for a fixture
"""
