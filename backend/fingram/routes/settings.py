"""Endpoints for viewing and updating site-wide display settings."""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from fingram.database import get_session
from fingram.schemas import SettingsRead, SettingsUpdate
from fingram.crud import get_settings, save_settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("/", response_model=SettingsRead)
async def read_settings(db: AsyncSession = Depends(get_session)):
    """Retrieve the current configuration values."""
    settings = await get_settings(db)
    return SettingsRead(
        site_name=settings.site_name,
        currency_symbol=settings.currency_symbol,
        locale=settings.locale,
    )


@router.put("/", response_model=SettingsRead)
async def update_settings(
    data: SettingsUpdate,
    db: AsyncSession = Depends(get_session),
):
    settings = await get_settings(db)
    changes = data.model_dump(exclude_unset=True, exclude_none=True)
    for field, value in changes.items():
        setattr(settings, field, value)
    updated = await save_settings(db, settings)
    logger.info("Settings updated: %s", ", ".join(changes) or "nothing")
    return SettingsRead(
        site_name=updated.site_name,
        currency_symbol=updated.currency_symbol,
        locale=updated.locale,
    )
