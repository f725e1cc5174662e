from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import Optional

from opening_notifier.config import VenueConfig

SECONDS_PER_DAY = 24 * 60 * 60


def estimate_days_open(opening_epoch: datetime, now: datetime) -> int:
    """Day number assuming the venue has opened every day since the epoch.

    Partial days round up and the epoch day itself is day 1.
    """
    elapsed = now.astimezone(timezone.utc) - opening_epoch.astimezone(timezone.utc)
    return math.ceil(elapsed.total_seconds() / SECONDS_PER_DAY) + 1


def resolve_day_number(
    persisted_value: Optional[int], config: VenueConfig, now: datetime
) -> int:
    """Day number to announce today, preferring the stored counter."""
    if persisted_value is not None:
        return persisted_value
    return estimate_days_open(config.opening_epoch, now)
