from datetime import datetime

import pytest

from opening_notifier.errors import ZoneResolutionError
from opening_notifier.scheduling.clock import now_in_zone, resolve_zone, weekday_key


def test_now_in_zone_is_aware():
    now = now_in_zone("America/Los_Angeles")
    assert now.tzinfo is not None
    assert str(now.tzinfo) == "America/Los_Angeles"


def test_unknown_zone_raises():
    with pytest.raises(ZoneResolutionError):
        resolve_zone("Mars/Olympus_Mons")


@pytest.mark.parametrize(
    "day,expected",
    [(1, "monday"), (3, "wednesday"), (6, "saturday"), (7, "sunday")],
)
def test_weekday_key(day, expected):
    assert weekday_key(datetime(2024, 7, day)) == expected
