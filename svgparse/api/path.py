"""Path-data endpoints: parse, serialize, and extract every path of a document."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from svgparse.config import Settings
from svgparse.dependencies import SettingsDep, check_document_size
from svgparse.models.requests import DocumentRequest, PathParseRequest, PathSerializeRequest
from svgparse.models.responses import (
    CommandModel,
    ErrorModel,
    PathParseResponse,
    PathResult,
    PathSerializeResponse,
    PathsResponse,
)
from svgparse.parser import ParseError, Tag, TagKind, Tokenizer
from svgparse.path import Data

router = APIRouter(prefix="/path")
paths_router = APIRouter()
logger = logging.getLogger(__name__)


# Handlers are plain def so FastAPI runs them in its threadpool, off the event loop
@router.post("/parse", response_model=PathParseResponse)
def parse_path(request: PathParseRequest) -> PathParseResponse:
    try:
        data = Data.parse(request.d)
    except ParseError as e:
        logger.warning("Rejected path data: %s", e)
        raise HTTPException(status_code=422, detail=str(e)) from e
    return PathParseResponse(
        commands=[CommandModel.from_command(command) for command in data],
        d=data.serialize(),
    )


@router.post("/serialize", response_model=PathSerializeResponse)
def serialize_path(request: PathSerializeRequest) -> PathSerializeResponse:
    try:
        data = Data(model.to_command() for model in request.commands)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    return PathSerializeResponse(d=data.serialize())


@paths_router.post("/paths", response_model=PathsResponse)
def extract_paths(request: DocumentRequest, config: Settings = SettingsDep) -> PathsResponse:
    """Parse the `d` attribute of every path tag, in document order."""
    check_document_size(request.svg, config)
    results: list[PathResult] = []
    for event in Tokenizer(request.svg):
        if not isinstance(event, Tag) or event.name != "path" or event.kind is TagKind.END:
            continue
        d = event.attributes.get("d")
        if d is None:
            continue
        result = PathResult(index=len(results), d=d)
        try:
            result.commands = [CommandModel.from_command(command) for command in Data.parse(d)]
        except ParseError as e:
            logger.warning("Path %d has malformed data: %s", result.index, e)
            result.error = ErrorModel.from_error(e)
        results.append(result)
    return PathsResponse(paths=results)
