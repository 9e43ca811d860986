import pytest

from matchpredict.data.schema import PredictionResult
from matchpredict.ui.display import (
    ProbabilityBand,
    format_factor_name,
    format_probability,
    key_factor_table,
    outcome_label,
    probability_band,
    probability_table,
)

from fakes import SAMPLE_PREDICTION


def make_result(**overrides) -> PredictionResult:
    return PredictionResult.model_validate(dict(SAMPLE_PREDICTION, **overrides))


@pytest.mark.parametrize(
    "tag, expected",
    [("H", "Arsenal"), ("A", "Chelsea"), ("D", "Draw"), ("Z", "Draw"), (None, "Draw")],
)
def test_outcome_label(tag, expected):
    assert outcome_label(make_result(prediction=tag)) == expected


@pytest.mark.parametrize(
    "probability, band",
    [
        (0.75, ProbabilityBand.HIGH),
        (0.6, ProbabilityBand.HIGH),
        (1.0, ProbabilityBand.HIGH),
        (0.45, ProbabilityBand.MEDIUM),
        (0.3, ProbabilityBand.MEDIUM),
        (0.5999, ProbabilityBand.MEDIUM),
        (0.1, ProbabilityBand.LOW),
        (0.2999, ProbabilityBand.LOW),
        (0.0, ProbabilityBand.LOW),
    ],
)
def test_probability_band(probability, band):
    assert probability_band(probability) is band


def test_band_colors():
    assert ProbabilityBand.HIGH.color == "success"
    assert ProbabilityBand.MEDIUM.color == "warning"
    assert ProbabilityBand.LOW.color == "danger"


def test_each_probability_is_banded_independently():
    table = probability_table(
        make_result(home_win_probability=0.1, draw_probability=0.45, away_win_probability=0.75)
    )
    assert list(table.index) == ["Home Win", "Draw", "Away Win"]
    assert list(table["Band"]) == ["Low", "Medium", "High"]
    assert table.loc["Away Win", "Probability"] == 0.75


def test_format_probability():
    assert format_probability(0.75) == "75.0%"
    assert format_probability(0.1234) == "12.3%"


def test_factor_names_are_readable():
    assert format_factor_name("home_form_last_5") == "home form last 5"
    table = key_factor_table(make_result())
    assert list(table["Factor"]) == ["home form", "elo difference"]
    assert list(table["Value"]) == ["W W D W L", "84"]


def test_unusual_factor_values_are_rendered_as_text():
    table = key_factor_table(make_result(key_factors={"injuries": None, "head_to_head": {"wins": 3}}))
    assert list(table["Factor"]) == ["injuries", "head to head"]
    assert list(table["Value"]) == ["None", "{'wins': 3}"]
