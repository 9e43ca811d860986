"""
MatchPredict: pick two football teams and get win/draw/loss probabilities
from a remote scoring service.
"""

__version__ = "0.1.0"
