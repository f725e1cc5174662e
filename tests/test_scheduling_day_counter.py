from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from opening_notifier.config import VenueConfig
from opening_notifier.scheduling.day_counter import estimate_days_open, resolve_day_number

PT = ZoneInfo("America/Los_Angeles")
EPOCH = datetime(2024, 6, 22, 10, 0, tzinfo=timezone(timedelta(hours=-7)))


@pytest.fixture
def config():
    return VenueConfig(
        venue_id=39156327,
        venue_name="Round1 Plaza Bonita",
        zone_id="America/Los_Angeles",
        fallback_hour=10,
        fallback_timeout_ms=180000,
        opening_epoch=EPOCH,
    )


class TestEstimateDaysOpen:
    def test_epoch_is_day_one(self):
        assert estimate_days_open(EPOCH, EPOCH) == 1

    def test_five_whole_days_later(self):
        assert estimate_days_open(EPOCH, EPOCH + timedelta(days=5)) == 6

    def test_partial_day_rounds_up(self):
        assert estimate_days_open(EPOCH, EPOCH + timedelta(hours=1)) == 2

    def test_zone_of_now_does_not_matter(self):
        now_pt = datetime(2024, 6, 27, 10, 0, tzinfo=PT)
        now_utc = now_pt.astimezone(timezone.utc)
        assert estimate_days_open(EPOCH, now_pt) == estimate_days_open(EPOCH, now_utc) == 6


class TestResolveDayNumber:
    def test_prefers_persisted_value(self, config):
        assert resolve_day_number(7, config, EPOCH + timedelta(days=30)) == 7

    def test_persisted_zero_is_kept(self, config):
        assert resolve_day_number(0, config, EPOCH + timedelta(days=30)) == 0

    def test_falls_back_to_estimate(self, config):
        assert resolve_day_number(None, config, EPOCH + timedelta(days=5)) == 6

    def test_estimate_is_repeatable(self, config):
        now = EPOCH + timedelta(days=12, hours=3)
        assert resolve_day_number(None, config, now) == resolve_day_number(None, config, now)
