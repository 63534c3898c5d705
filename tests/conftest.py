import pytest

from datadog_listener.delivery.transport import Outcome
from datadog_listener.events.schemas import Event


class StubTransport:
    def __init__(self, outcome: Outcome | None = None, exc: Exception | None = None):
        self.outcome = outcome or Outcome(status_code=202, message="Accepted")
        self.exc = exc
        self.calls = []

    def send(self, api_key, payload):
        self.calls.append((api_key, payload))
        if self.exc is not None:
            raise self.exc
        return self.outcome


@pytest.fixture
def pipeline_event() -> Event:
    return Event.model_validate({
        "eventId": "123",
        "details": {
            "source": "orca",
            "type": "orca:task:complete",
            "created": "1583776971240",
            "application": "plugintest",
        },
        "content": {
            "execution": {
                "type": "PIPELINE",
                "id": "01E307DBPNB1YJ9D0BW5X4NAEY",
                "application": "plugintest",
                "name": "testNewStageFromPlugin",
                "status": "RUNNING",
                "pipelineConfigId": "f514b57a-63af-4f5f-ac0a-2bc12d6c363b",
            }
        },
    })


@pytest.fixture
def stub_transport():
    return StubTransport()
