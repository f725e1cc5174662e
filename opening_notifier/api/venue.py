from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from opening_notifier.config import get_settings
from opening_notifier.db.database import get_db
from opening_notifier.models.store import Store
from opening_notifier.scheduling.clock import now_in_zone, weekday_key
from opening_notifier.scheduling.day_counter import estimate_days_open

router = APIRouter(prefix="/api", tags=["venue"])


class VenueResponse(BaseModel):
    venue_id: int
    name: str
    zone_id: str
    weekday: str
    days_open: Optional[int]
    estimated_days_open: int


@router.get("/venue", response_model=VenueResponse)
async def get_venue(db: AsyncSession = Depends(get_db)):
    settings = get_settings()
    config = settings.venue_config
    now = now_in_zone(config.zone_id)
    store = await db.get(Store, config.venue_id)

    return VenueResponse(
        venue_id=config.venue_id,
        name=config.venue_name,
        zone_id=config.zone_id,
        weekday=weekday_key(now),
        days_open=store.days_open if store else None,
        estimated_days_open=estimate_days_open(config.opening_epoch, now),
    )
