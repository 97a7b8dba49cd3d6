"""FastAPI dependency injection."""

from __future__ import annotations

from fastapi import Depends, HTTPException

from svgparse.config import Settings, settings


def get_settings() -> Settings:
    return settings


def check_document_size(text: str, config: Settings) -> None:
    """Reject documents larger than the configured limit with HTTP 413."""
    if len(text) > config.max_document_chars:
        raise HTTPException(
            status_code=413,
            detail=f"Document too large: {len(text)} chars (limit {config.max_document_chars})",
        )


SettingsDep = Depends(get_settings)
