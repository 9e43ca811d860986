"""
Streamlit UI for MatchPredict – football match outcome predictions.

Run from project root:

    streamlit run src/matchpredict/ui/app.py

The scoring service location is read from MATCHPREDICT_API_URL.
"""

from __future__ import annotations

import sys
from pathlib import Path

import streamlit as st

# ---------------------------------------------------------------------------
# Ensure the project src/ directory is on sys.path so that
# "streamlit run src/matchpredict/ui/app.py" works without an install.
# ---------------------------------------------------------------------------
SRC_ROOT = Path(__file__).resolve().parents[2]  # .../src
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from matchpredict.data.schema import PredictionResult  # noqa: E402
from matchpredict.ui.display import (  # noqa: E402
    BAND_BADGE_COLORS,
    format_probability,
    key_factor_table,
    outcome_label,
    probability_band,
    probability_rows,
    probability_table,
)
from matchpredict.workflow.controller import PredictionWorkflow  # noqa: E402

WORKFLOW_KEY = "workflow"


def get_workflow() -> PredictionWorkflow:
    """Return this session's workflow, loading the team list on first use."""
    if WORKFLOW_KEY not in st.session_state:
        workflow = PredictionWorkflow()
        with st.spinner("Loading teams..."):
            workflow.load()
        st.session_state[WORKFLOW_KEY] = workflow
    return st.session_state[WORKFLOW_KEY]


def render_landing() -> None:
    st.markdown(
        """
### Who wins the next match?

Pick a home and an away team and MatchPredict asks the scoring model for
home win, draw and away win probabilities, along with the key factors
behind them.

Switch to **Predict a match** above to get started.
"""
    )


def render_result(result: PredictionResult) -> None:
    st.markdown("---")
    st.subheader("Prediction Result")
    st.write(f"**{result.home_team}** vs **{result.away_team}**")

    columns = st.columns(3)
    for column, (name, probability) in zip(columns, probability_rows(result)):
        band = probability_band(probability)
        with column:
            st.metric(name, format_probability(probability))
            st.markdown(f":{BAND_BADGE_COLORS[band.color]}[{band.value}]")

    st.bar_chart(probability_table(result)[["Probability"]])

    st.markdown(f"#### Outcome: {outcome_label(result)}")
    st.caption(f"Model: {result.model_used}")

    if result.key_factors:
        st.subheader("Key factors")
        st.dataframe(key_factor_table(result), use_container_width=True, hide_index=True)


def render_predict(workflow: PredictionWorkflow) -> None:
    state = workflow.state

    if len(state.teams) < 2:
        st.warning("Not enough teams available to make a prediction.")
        if state.error:
            st.error(state.error)
        return

    col_home, col_vs, col_away = st.columns([5, 1, 5])
    with col_home:
        home = st.selectbox(
            "Home Team", options=state.teams, index=state.teams.index(state.home)
        )
    with col_vs:
        st.markdown("<br><b>VS</b>", unsafe_allow_html=True)
    with col_away:
        away = st.selectbox(
            "Away Team", options=state.teams, index=state.teams.index(state.away)
        )

    if home != state.home:
        workflow.select_home(home)
    if away != state.away:
        workflow.select_away(away)

    if workflow.state.home == workflow.state.away:
        st.warning("Home and away team must be different.")

    if st.button(
        "Predict Match",
        type="primary",
        disabled=not workflow.state.can_submit,
    ):
        with st.spinner("Predicting..."):
            workflow.predict()

    if workflow.state.error:
        st.error(workflow.state.error)

    if workflow.state.result is not None:
        render_result(workflow.state.result)


def main() -> None:
    st.set_page_config(
        page_title="MatchPredict – Football Match Prediction",
        layout="centered",
    )

    st.title("⚽ Football Match Prediction")

    mode = st.radio(
        "View",
        options=["Home", "Predict a match"],
        horizontal=True,
        label_visibility="collapsed",
    )

    if mode == "Home":
        render_landing()
    else:
        render_predict(get_workflow())


if __name__ == "__main__":
    main()
