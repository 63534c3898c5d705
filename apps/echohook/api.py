from contextlib import asynccontextmanager
from functools import lru_cache

from fastapi import Depends, FastAPI
from datadog_listener.delivery.listener import DataDogEventListener
from datadog_listener.events.schemas import Event
from datadog_listener.shared.logging import setup_logging, EventAdapter

import logging

setup_logging()
log = logging.getLogger("echohook")


@asynccontextmanager
async def lifespan(app: FastAPI):
    log.info("echohook start()")
    yield
    log.info("echohook stop()")


app = FastAPI(title="Echo Datadog Listener", version="0.1.0", lifespan=lifespan)


@lru_cache
def get_listener() -> DataDogEventListener:
    return DataDogEventListener()


@app.get("/healthz")
def healthz():
    return {"ok": True}


@app.post("/v1/events")
def receive_event(evt: Event, listener: DataDogEventListener = Depends(get_listener)):
    listener.process_event(evt)
    EventAdapter(log, {"event_id": evt.event_id}).debug("forwarded %s", evt.details.type)
    return {"ok": True, "event_id": evt.event_id}
