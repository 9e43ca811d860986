"""
Streamlit front-end for MatchPredict.

- `display` holds the pure formatting helpers (outcome labels, probability
  bands, tables).
- `app` is the Streamlit script.
"""
