"""Opening-time parsing for the free-text hours returned by Storepoint.

There are currently three formats in use for the venue:

- ``10AM - 2AM``
- ``10am-2am``
- ``10am to 2am``

Only the opening side of the range matters here. Hour tokens carry no
minutes upstream, so none are parsed or invented.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Union

from loguru import logger

_TO_SEPARATOR = re.compile(r"to", re.IGNORECASE)
_HOUR_COMPACT = re.compile(r"^(\d{1,2})(am|pm)$", re.IGNORECASE)
_HOUR_SPACED = re.compile(r"^(\d{1,2}) (am|pm)$", re.IGNORECASE)


@dataclass(frozen=True)
class ParseFailure:
    hours_text: str
    reason: str


def split_range(hours_text: str) -> List[str]:
    """Split an hours range into its parts, preferring ``-`` over ``to``."""
    parts = hours_text.split("-")
    if len(parts) == 2 and all(part.strip() for part in parts):
        return parts
    return _TO_SEPARATOR.split(hours_text)


def parse_hour_token(token: str) -> Optional[int]:
    """Convert ``10am`` / ``10 PM`` style tokens to a 24-hour clock hour.

    Returns:
        The hour (0-23), or None if the token is not a valid 12-hour time.
    """
    for pattern in (_HOUR_COMPACT, _HOUR_SPACED):
        match = pattern.match(token)
        if not match:
            continue
        hour = int(match.group(1))
        if not 1 <= hour <= 12:
            continue
        hour = hour % 12
        if match.group(2).lower() == "pm":
            hour += 12
        return hour
    return None


def parse_opening(hours_text: str, today: datetime) -> Union[datetime, ParseFailure]:
    """Resolve today's opening instant from a free-text hours range.

    Args:
        hours_text: Hours string for today, e.g. ``"10am - 2am"``.
        today: Current moment in the venue's time zone; its date and zone are kept.

    Returns:
        The opening moment, or a ParseFailure describing why it could not be read.
    """
    logger.info(f"Attempting to parse the opening time from: {hours_text}")

    opening_token = split_range(hours_text)[0].strip()
    hour = parse_hour_token(opening_token)
    if hour is None:
        failure = ParseFailure(hours_text, f"unrecognised opening hour {opening_token!r}")
        logger.warning(f"Could not parse opening time: {failure.reason}")
        return failure

    return today.replace(hour=hour, minute=0, second=0, microsecond=0)
