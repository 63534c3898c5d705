from collections.abc import Mapping
from typing import Any

from datadog_listener.events.schemas import Event, DataDogEvent

TITLE = "Spinnaker Event"
PRIORITY = "normal"
ALERT_TYPE = "info"


class MalformedEvent(Exception):
    pass


def render_value(value: Any) -> str:
    """
    Text form used in tags and log lines.

    None -> "null", True -> "true", lists -> "[a, b]", mappings -> "{k=1}".
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Mapping):
        return "{" + ", ".join(f"{render_value(k)}={render_value(v)}" for k, v in value.items()) + "}"
    if isinstance(value, (list, tuple, set, frozenset)):
        return "[" + ", ".join(render_value(v) for v in value) + "]"
    return str(value)


def _tag(key: str, value: Any) -> str:
    return f"{key}:{render_value(value)}"


def normalize(event: Event) -> DataDogEvent:
    """
    Echo event -> Datadog event. Pure: no I/O.

    type/id/status tags are emitted even when the value is missing (as "null"),
    name/pipelineConfigId only when set.
    """
    details = getattr(event, "details", None)
    if details is None:
        raise MalformedEvent("event has no details")

    tags = {
        _tag("source", details.source),
        _tag("eventType", details.type),
        _tag("application", details.application),
    }

    execution = (event.content or {}).get("execution")
    if isinstance(execution, Mapping):
        tags.add(_tag("executionType", execution.get("type")))
        tags.add(_tag("executionStatus", execution.get("status")))
        tags.add(_tag("executionId", execution.get("id")))
        if execution.get("name") is not None:
            tags.add(_tag("pipelineName", execution["name"]))
        if execution.get("pipelineConfigId") is not None:
            tags.add(_tag("pipelineConfigId", execution["pipelineConfigId"]))

    return DataDogEvent(
        title=TITLE,
        text=event.model_dump_json(by_alias=True),
        priority=PRIORITY,
        tags=frozenset(tags),
        alert_type=ALERT_TYPE,
    )
