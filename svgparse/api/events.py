"""POST /api/events: tokenize a document into structural events."""

from __future__ import annotations

import logging

from fastapi import APIRouter

from svgparse.config import Settings
from svgparse.dependencies import SettingsDep, check_document_size
from svgparse.models.requests import DocumentRequest
from svgparse.models.responses import ErrorModel, EventModel, EventsResponse
from svgparse.parser import Comment, Declaration, Error, Event, Instruction, Tag, Text, Tokenizer

router = APIRouter()
logger = logging.getLogger(__name__)


def event_to_model(event: Event) -> EventModel:
    if isinstance(event, Tag):
        return EventModel(
            type="tag",
            name=event.name,
            kind=event.kind.value,
            attributes=dict(event.attributes),
        )
    if isinstance(event, Error):
        return EventModel(type="error", error=ErrorModel.from_error(event.error))
    if isinstance(event, Text):
        return EventModel(type="text", content=event.content)
    if isinstance(event, Comment):
        return EventModel(type="comment", content=event.content)
    if isinstance(event, Declaration):
        return EventModel(type="declaration", content=event.content)
    if isinstance(event, Instruction):
        return EventModel(type="instruction", content=event.content)
    raise TypeError(f"unknown event {event!r}")


# Plain def: FastAPI runs it in its threadpool, off the event loop
@router.post("/events", response_model=EventsResponse)
def events(request: DocumentRequest, config: Settings = SettingsDep) -> EventsResponse:
    check_document_size(request.svg, config)
    models = [event_to_model(event) for event in Tokenizer(request.svg)]
    error_count = sum(1 for model in models if model.type == "error")
    if error_count:
        logger.warning("Tokenized document with %d errors", error_count)
    return EventsResponse(events=models, error_count=error_count)
