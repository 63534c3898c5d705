import logging

from datadog_listener.delivery.transport import DataDogHttpTransport, Transport
from datadog_listener.events.normalizer import normalize, render_value
from datadog_listener.events.schemas import Event
from datadog_listener.shared.config import settings
from datadog_listener.shared.logging import EventAdapter

log = logging.getLogger("datadog_listener")


class DataDogEventListener:
    """
    Forwards echo events to Datadog, best effort.

    A non-success response is logged and dropped; nothing is retried or queued.
    Exceptions raised by the transport itself are not caught here.
    """
    def __init__(
        self,
        api_key: str | None = None,
        transport: Transport | None = None,
        logger: logging.Logger | None = None,
    ):
        self.api_key = api_key or settings.datadog_api_key
        if not self.api_key:
            raise ValueError("DATADOG_API_KEY is not configured")
        self.transport = transport or DataDogHttpTransport()
        self.log = logger or log

    def process_event(self, event: Event) -> None:
        dd_event = normalize(event)
        outcome = self.transport.send(self.api_key, dd_event)
        if outcome.is_error:
            elog = EventAdapter(self.log, {"event_id": event.event_id})
            elog.error(
                "DataDog event listener failed with response: %s - %s",
                outcome.status_code,
                render_value(outcome.message),
            )
