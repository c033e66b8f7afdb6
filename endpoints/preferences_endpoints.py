from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Request

from persistence.preferences_service import PreferencesService

router = APIRouter(tags=["preferences"])
logger = logging.getLogger(__name__)


def get_preferences_service(request: Request) -> PreferencesService:
    return request.app.state.preferences_service


@router.get("")
async def read_preferences(service: PreferencesService = Depends(get_preferences_service)) -> dict[str, Any]:
    try:
        prefs = await service.get_preferences()
    except Exception:
        logger.exception("Failed to get preferences")
        raise
    return prefs.model_dump(mode="json")


@router.put("")
async def update_preferences(
    body: dict[str, Any] = Body(...),
    service: PreferencesService = Depends(get_preferences_service),
) -> dict[str, Any]:
    try:
        updated = await service.update_preferences(body)
    except Exception:
        logger.exception("Failed to update preferences")
        raise
    return updated.model_dump(mode="json")
