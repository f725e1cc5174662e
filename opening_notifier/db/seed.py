from typing import Optional

from loguru import logger

from opening_notifier.config import get_settings
from opening_notifier.db.database import Base, get_sync_session, sync_engine
from opening_notifier.models import Store
from opening_notifier.scheduling.clock import now_in_zone
from opening_notifier.scheduling.day_counter import estimate_days_open


def seed_store(days_open: Optional[int] = None) -> int:
    """建立場館種子資料

    Args:
        days_open: Day number to announce next. Defaults to the estimate from
            the opening epoch.

    Returns:
        The stored day number.
    """
    settings = get_settings()
    config = settings.venue_config
    Base.metadata.create_all(sync_engine)

    if days_open is None:
        days_open = estimate_days_open(config.opening_epoch, now_in_zone(config.zone_id))

    with get_sync_session() as session:
        store = session.get(Store, config.venue_id)
        if store is None:
            store = Store(store_id=config.venue_id, name=config.venue_name)
            session.add(store)
            logger.info(f"Added store: {config.venue_name}")
        else:
            logger.info(f"Store already exists: {config.venue_name}")
        store.days_open = days_open
        session.commit()

    logger.info(f"Seed completed (days_open={days_open})")
    return days_open


if __name__ == "__main__":
    seed_store()
