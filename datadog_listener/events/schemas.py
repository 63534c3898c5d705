from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, FrozenSet, Optional

class Metadata(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    source: str = Field(..., description="emitting service, e.g. orca/igor/front50")
    type: str = Field(..., description="echo event type, e.g. orca:task:complete")
    created: Optional[str] = Field(default=None, description="epoch millis as string")
    organization: Optional[str] = None
    project: Optional[str] = None
    application: str
    content_id: Optional[str] = Field(default=None, alias="_content_id")
    attributes: Optional[Dict[str, str]] = None
    request_headers: Optional[Dict[str, Any]] = Field(default=None, alias="requestHeaders")

class Event(BaseModel):
    # unknown top-level fields are kept so the serialized text stays complete
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    details: Metadata
    content: Dict[str, Any] = Field(default_factory=dict)
    raw_content: Optional[str] = Field(default=None, alias="rawContent")
    payload: Optional[Dict[str, Any]] = None
    event_id: Optional[str] = Field(default=None, alias="eventId")

class DataDogEvent(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    text: str = Field(..., description="JSON of the originating echo event")
    priority: str
    tags: FrozenSet[str] = Field(default_factory=frozenset)
    alert_type: str

    def to_payload(self) -> Dict[str, Any]:
        """Body for POST /api/v1/events."""
        body = self.model_dump()
        body["tags"] = sorted(self.tags)
        return body
