"""Daily opening announcement job.

One run per scheduled tick:
  FETCHING -> TIMEOUT_DECIDED -> WAITING -> SENDING -> PERSISTING -> DONE
with SKIPPED reachable from TIMEOUT_DECIDED when today's opening can't be
resolved from a successful hours response.
"""
from __future__ import annotations

import enum
import time
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Mapping, Optional, Protocol

from loguru import logger

from opening_notifier.clients.storepoint import StorepointClient
from opening_notifier.config import VenueConfig, get_settings
from opening_notifier.db.database import get_sync_session
from opening_notifier.errors import FetchFailure, PersistenceFailure
from opening_notifier.notifications.discord import DiscordSender
from opening_notifier.notifications.formatter import format_opening_message
from opening_notifier.repositories.days_open import DaysOpenRepository
from opening_notifier.scheduling.clock import now_in_zone, weekday_key
from opening_notifier.scheduling.day_counter import resolve_day_number
from opening_notifier.scheduling.timeout import TimeoutDecision, decide_timeout


class HoursSource(Protocol):
    def fetch_hours(self, location_id: int) -> Mapping[str, object]: ...


class Notifier(Protocol):
    def send(self, text: str) -> bool: ...


class CounterStore(Protocol):
    def read(self, venue_id: int) -> Optional[int]: ...

    def write(self, venue_id: int, days_open: int) -> None: ...


class RunState(enum.Enum):
    fetching = "FETCHING"
    timeout_decided = "TIMEOUT_DECIDED"
    waiting = "WAITING"
    sending = "SENDING"
    persisting = "PERSISTING"
    done = "DONE"
    skipped = "SKIPPED"


class SkipReason(enum.Enum):
    no_hours_today = "no_hours_today"
    unparseable_hours = "unparseable_hours"


@dataclass
class RunReport:
    state: RunState = RunState.fetching
    timeout: Optional[TimeoutDecision] = None
    day_number: Optional[int] = None
    message: Optional[str] = None
    delivered: bool = False
    persisted: bool = False
    skip_reason: Optional[SkipReason] = None


class OpeningNotifier:
    """Waits for the venue to open, announces it, then advances the day counter."""

    def __init__(
        self,
        config: VenueConfig,
        hours_source: HoursSource,
        notifier: Notifier,
        counter_store: CounterStore,
        clock: Optional[Callable[[], datetime]] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.config = config
        self.hours_source = hours_source
        self.notifier = notifier
        self.counter_store = counter_store
        self.clock = clock or (lambda: now_in_zone(config.zone_id))
        self.sleep = sleep

    def run(self, wait: bool = True) -> RunReport:
        report = RunReport()

        hours = self._fetch_hours()
        now = self.clock()
        report.timeout = decide_timeout(hours, self.config, now)
        report.state = RunState.timeout_decided

        if report.timeout is None:
            report.skip_reason = self._skip_reason(hours, now)
            report.state = RunState.skipped
            logger.warning(
                f"Failed to calculate the timeout despite getting a response from "
                f"storepoint ({report.skip_reason.value}). Maybe the venue is closed today? "
                f"Hours: {hours}"
            )
            return report

        report.state = RunState.waiting
        logger.info(
            f"Waiting {report.timeout.milliseconds} ms "
            f"({report.timeout.source.value}) before announcing"
        )
        if wait:
            self.sleep(report.timeout.wait_seconds)

        report.state = RunState.sending
        # Tick time; after the wait ceil() would already count the next day
        report.day_number = resolve_day_number(self._read_counter(), self.config, now)
        report.message = format_opening_message(self.config.venue_name, report.day_number)
        logger.info(f"Sending the message [{report.message}]")
        report.delivered = self.notifier.send(report.message)
        if not report.delivered:
            logger.error(f"Failed to deliver [{report.message}]; not retrying")

        report.state = RunState.persisting
        next_day = report.day_number + 1
        logger.info(f"Updating database days to {next_day}")
        try:
            self.counter_store.write(self.config.venue_id, next_day)
            report.persisted = True
        except PersistenceFailure as e:
            logger.error(f"Could not persist days open: {e}")

        report.state = RunState.done
        return report

    def _fetch_hours(self) -> Optional[Mapping[str, object]]:
        try:
            return self.hours_source.fetch_hours(self.config.venue_id)
        except FetchFailure as e:
            logger.warning(f"Hours fetch failed, using fallback timeout: {e}")
            return None

    def _read_counter(self) -> Optional[int]:
        try:
            return self.counter_store.read(self.config.venue_id)
        except PersistenceFailure as e:
            logger.error(f"Could not read days open, estimating from epoch: {e}")
            return None

    @staticmethod
    def _skip_reason(hours: Mapping[str, object], now: datetime) -> SkipReason:
        if isinstance(hours.get(weekday_key(now)), str):
            return SkipReason.unparseable_hours
        return SkipReason.no_hours_today


def run_opening_notification(wait: bool = True) -> Optional[RunReport]:
    """每日開店通知任務"""
    settings = get_settings()
    if not settings.notification_enabled:
        logger.info("Notifications are disabled, skipping opening announcement")
        return None
    if not DiscordSender.is_configured():
        logger.warning("Discord webhook is not configured, skipping opening announcement")
        return None

    logger.info(f"Starting opening notification for venue {settings.venue_id}")

    with get_sync_session() as session:
        notifier = OpeningNotifier(
            config=settings.venue_config,
            hours_source=StorepointClient(),
            notifier=DiscordSender(),
            counter_store=DaysOpenRepository(session),
        )
        report = notifier.run(wait=wait)

    logger.info(f"Opening notification finished: {report}")
    return report
