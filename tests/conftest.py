import pytest
import requests

from matchpredict.workflow.controller import PredictionWorkflow

from fakes import SAMPLE_PREDICTION, FakeSession, make_client


@pytest.fixture
def live_session() -> FakeSession:
    return FakeSession(
        teams=["Arsenal", "Chelsea", "Everton"],
        prediction=dict(SAMPLE_PREDICTION),
    )


@pytest.fixture
def down_session() -> FakeSession:
    return FakeSession(
        teams=requests.ConnectionError("connection refused"),
        prediction=requests.ConnectionError("connection refused"),
    )


@pytest.fixture
def live_workflow(live_session: FakeSession) -> PredictionWorkflow:
    workflow = PredictionWorkflow(client=make_client(live_session))
    workflow.load()
    return workflow


@pytest.fixture
def down_workflow(down_session: FakeSession) -> PredictionWorkflow:
    workflow = PredictionWorkflow(client=make_client(down_session))
    workflow.load()
    return workflow
