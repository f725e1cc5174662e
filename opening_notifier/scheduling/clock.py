from __future__ import annotations

from datetime import datetime, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from opening_notifier.errors import ZoneResolutionError


def resolve_zone(zone_id: str) -> tzinfo:
    """Look up a civil time zone by IANA name.

    Raises:
        ZoneResolutionError: the zone is unknown to this host.
    """
    try:
        return ZoneInfo(zone_id)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ZoneResolutionError(f"Unknown time zone: {zone_id!r}") from e


def now_in_zone(zone_id: str) -> datetime:
    """Current wall-clock time in the given zone, independent of the host zone."""
    return datetime.now(resolve_zone(zone_id))


def weekday_key(moment: datetime) -> str:
    """Lowercase English weekday name, as used by the hours source ("monday")."""
    return WEEKDAYS[moment.weekday()]


WEEKDAYS = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)
