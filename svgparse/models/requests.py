"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from svgparse.models.responses import CommandModel


class DocumentRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG/XML markup")


class PathParseRequest(BaseModel):
    d: str = Field(..., description="Path data, as found in a path's `d` attribute")


class PathSerializeRequest(BaseModel):
    commands: list[CommandModel] = Field(..., description="Commands to render as path data")
