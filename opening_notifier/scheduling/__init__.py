from opening_notifier.scheduling.clock import now_in_zone, weekday_key
from opening_notifier.scheduling.day_counter import estimate_days_open, resolve_day_number
from opening_notifier.scheduling.parser import ParseFailure, parse_opening
from opening_notifier.scheduling.timeout import (
    TimeoutDecision,
    TimeoutSource,
    compute_fallback_timeout,
    compute_timeout,
    decide_timeout,
)

__all__ = [
    "ParseFailure",
    "TimeoutDecision",
    "TimeoutSource",
    "compute_fallback_timeout",
    "compute_timeout",
    "decide_timeout",
    "estimate_days_open",
    "now_in_zone",
    "parse_opening",
    "resolve_day_number",
    "weekday_key",
]
