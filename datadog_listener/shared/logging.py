import logging
import os


class EventIdFilter(logging.Filter):
    """Ensure event_id always exists on LogRecord."""

    def filter(self, record):
        if not hasattr(record, "event_id"):
            record.event_id = "-"
        return True


class EventAdapter(logging.LoggerAdapter):
    """Stamps the Echo event id onto every record it emits."""

    def process(self, msg, kwargs):
        extra = dict(kwargs.get("extra") or {})
        extra.setdefault("event_id", self.extra.get("event_id") or "-")
        kwargs["extra"] = extra
        return msg, kwargs


def setup_logging():
    level = os.getenv("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s event=%(event_id)s %(name)s - %(message)s"
    )
    for handler in logging.getLogger().handlers:
        if not any(isinstance(f, EventIdFilter) for f in handler.filters):
            handler.addFilter(EventIdFilter())
