from dataclasses import dataclass
from typing import Optional, Protocol
import json
import urllib.error
import urllib.parse
import urllib.request

from datadog_listener.events.schemas import DataDogEvent
from datadog_listener.shared.config import settings


@dataclass(frozen=True)
class Outcome:
    status_code: int
    message: Optional[str] = None

    @property
    def is_error(self) -> bool:
        return not 200 <= self.status_code < 300


class Transport(Protocol):
    def send(self, api_key: str, payload: DataDogEvent) -> Outcome:
        ...


class DataDogHttpTransport:
    """
    POST to the Datadog events API, api key as query parameter.
    Error statuses come back as an Outcome; network failures raise.
    """
    def __init__(self, base_url: str | None = None, timeout: float | None = None):
        self.base_url = (base_url or settings.datadog_url).rstrip("/")
        self.timeout = settings.datadog_timeout_s if timeout is None else timeout

    def events_url(self, api_key: str) -> str:
        query = urllib.parse.urlencode({"api_key": api_key})
        return f"{self.base_url}/api/v1/events?{query}"

    def send(self, api_key: str, payload: DataDogEvent) -> Outcome:
        req = urllib.request.Request(
            self.events_url(api_key),
            data=json.dumps(payload.to_payload()).encode("utf-8"),
            headers={"Content-Type": "application/json", "Accept": "application/json"},
            method="POST",
        )
        try:
            with urllib.request.urlopen(req, timeout=self.timeout) as resp:
                return Outcome(status_code=resp.status, message=resp.reason)
        except urllib.error.HTTPError as e:
            with e:
                return Outcome(status_code=e.code, message=e.reason)
