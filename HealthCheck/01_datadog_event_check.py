"""
Datadog Event Check — Echo listener
Purpose:
- Prove DATADOG_API_KEY is accepted
- Prove the events endpoint is reachable
- Push one fixture event through the real transport
NO pytest. NO mocks.
"""

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

import os
from datadog_listener.delivery.listener import DataDogEventListener
from datadog_listener.events.normalizer import normalize
from datadog_listener.events.schemas import Event
from datadog_listener.shared.logging import setup_logging


FIXTURE = {
    "details": {
        "source": "orca",
        "type": "orca:pipeline:complete",
        "created": "1583776971240",
        "application": "healthcheck",
    },
    "content": {
        "execution": {
            "type": "PIPELINE",
            "id": "01E307DBPNB1YJ9D0BW5X4NAEY",
            "application": "healthcheck",
            "name": "datadog-event-check",
            "status": "SUCCEEDED",
        }
    },
    "eventId": "healthcheck-001",
}


def main():
    setup_logging()
    print("=== Datadog Event Check ===")

    print("\n[Config visibility]")
    print("DATADOG_API_KEY set:", bool(os.getenv("DATADOG_API_KEY")))
    print("DATADOG_URL:", os.getenv("DATADOG_URL", "(default)"))

    print("\n[Normalize]")
    event = Event.model_validate(FIXTURE)
    for tag in sorted(normalize(event).tags):
        print(" -", tag)

    print("\n[Send]")
    listener = DataDogEventListener()
    outcome = listener.transport.send(listener.api_key, normalize(event))
    print("status:", outcome.status_code, outcome.message)
    if outcome.is_error:
        print("\n❌ DATADOG EVENT CHECK FAILED")
        sys.exit(1)

    print("\n✅ DATADOG EVENT CHECK PASSED")


if __name__ == "__main__":
    main()
