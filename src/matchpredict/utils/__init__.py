"""Shared helpers for MatchPredict."""
