# tests/test_listener.py
import logging

import pytest

from datadog_listener.delivery.listener import DataDogEventListener
from datadog_listener.delivery.transport import Outcome
from conftest import StubTransport


def test_success_sends_once_and_logs_nothing(pipeline_event, stub_transport, caplog):
    caplog.set_level(logging.DEBUG)
    listener = DataDogEventListener(api_key="asdf", transport=stub_transport)

    assert listener.process_event(pipeline_event) is None

    assert len(stub_transport.calls) == 1
    api_key, payload = stub_transport.calls[0]
    assert api_key == "asdf"
    assert "pipelineName:testNewStageFromPlugin" in payload.tags
    assert caplog.records == []


def test_error_outcome_logs_one_error(pipeline_event, caplog):
    transport = StubTransport(Outcome(status_code=400, message="it failed"))
    listener = DataDogEventListener(api_key="asdf", transport=transport)

    listener.process_event(pipeline_event)

    assert len(transport.calls) == 1
    errors = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert len(errors) == 1
    assert errors[0].getMessage() == "DataDog event listener failed with response: 400 - it failed"
    assert errors[0].event_id == "123"


def test_error_outcome_uses_injected_logger(pipeline_event, caplog):
    transport = StubTransport(Outcome(status_code=503, message=None))
    listener = DataDogEventListener(
        api_key="asdf", transport=transport, logger=logging.getLogger("custom.listener")
    )

    listener.process_event(pipeline_event)

    [record] = caplog.records
    assert record.name == "custom.listener"
    assert record.getMessage() == "DataDog event listener failed with response: 503 - null"


def test_transport_exception_propagates(pipeline_event):
    transport = StubTransport(exc=ConnectionError("boom"))
    listener = DataDogEventListener(api_key="asdf", transport=transport)

    with pytest.raises(ConnectionError):
        listener.process_event(pipeline_event)


def test_missing_api_key_is_rejected(stub_transport):
    with pytest.raises(ValueError):
        DataDogEventListener(api_key="", transport=stub_transport)


@pytest.mark.parametrize("code,is_error", [(200, False), (202, False), (299, False), (302, True), (403, True), (500, True)])
def test_outcome_is_error(code, is_error):
    assert Outcome(status_code=code).is_error is is_error
