"""
Data layer for MatchPredict.

Includes:
- Wire schemas for the scoring service (`schema`)
"""
