from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Mapping, Optional, Union

from loguru import logger

from opening_notifier.config import VenueConfig
from opening_notifier.scheduling.clock import weekday_key
from opening_notifier.scheduling.parser import ParseFailure, parse_opening


class TimeoutSource(enum.Enum):
    resolved = "resolved"
    fallback_fixed = "fallback_fixed"
    fallback_time_of_day = "fallback_time_of_day"


@dataclass(frozen=True)
class TimeoutDecision:
    milliseconds: int
    source: TimeoutSource

    @property
    def wait_seconds(self) -> float:
        """Seconds to sleep; openings already passed resolve immediately."""
        return max(self.milliseconds, 0) / 1000


def milliseconds_between(start: datetime, end: datetime) -> int:
    # Compare in UTC so DST offsets are honoured even when both share a tzinfo
    delta = end.astimezone(timezone.utc) - start.astimezone(timezone.utc)
    return int(delta.total_seconds() * 1000)


def compute_timeout(
    resolved_opening: Union[datetime, ParseFailure, None], now: datetime
) -> Optional[int]:
    """Milliseconds from now until the resolved opening.

    Negative when the opening has already passed. None when the opening
    could not be resolved.
    """
    if resolved_opening is None or isinstance(resolved_opening, ParseFailure):
        return None
    return milliseconds_between(now, resolved_opening)


def compute_fallback_timeout(config: VenueConfig, now: datetime) -> TimeoutDecision:
    """Timeout used when the hours source is unavailable.

    Waits until the configured fallback hour today; if that hour cannot be
    applied, waits the fixed fallback duration instead.
    """
    try:
        fallback_opening = now.replace(
            hour=config.fallback_hour, minute=0, second=0, microsecond=0
        )
    except ValueError as e:
        logger.warning(
            f"Invalid fallback hour {config.fallback_hour}: {e}; "
            f"using fixed fallback of {config.fallback_timeout_ms} ms"
        )
        return TimeoutDecision(config.fallback_timeout_ms, TimeoutSource.fallback_fixed)

    return TimeoutDecision(
        milliseconds_between(now, fallback_opening), TimeoutSource.fallback_time_of_day
    )


def decide_timeout(
    hours: Optional[Mapping[str, object]], config: VenueConfig, now: datetime
) -> Optional[TimeoutDecision]:
    """Pick how long to wait before announcing the opening.

    Args:
        hours: Weekday -> hours text map from the hours source, or None if the
            fetch failed.
        config: Venue configuration.
        now: Current moment in the venue's time zone.

    Returns:
        A TimeoutDecision, or None when the venue should not be announced today
        (no hours for today, or hours that cannot be parsed).
    """
    if hours is None:
        return compute_fallback_timeout(config, now)

    day = weekday_key(now)
    hours_text = hours.get(day)
    if not isinstance(hours_text, str):
        logger.warning(f"No usable hours for {day}: {hours_text!r}")
        return None

    milliseconds = compute_timeout(parse_opening(hours_text, now), now)
    if milliseconds is None:
        return None
    return TimeoutDecision(milliseconds, TimeoutSource.resolved)
