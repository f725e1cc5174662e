from datetime import datetime
from zoneinfo import ZoneInfo

import pytest

from opening_notifier.scheduling.parser import (
    ParseFailure,
    parse_hour_token,
    parse_opening,
    split_range,
)

PT = ZoneInfo("America/Los_Angeles")


@pytest.fixture
def today():
    return datetime(2024, 7, 1, 9, 12, 34, 567000, tzinfo=PT)


class TestSplitRange:
    def test_dash_with_spaces(self):
        assert split_range("10AM - 2AM") == ["10AM ", " 2AM"]

    def test_dash_without_spaces(self):
        assert split_range("10am-2am") == ["10am", "2am"]

    def test_falls_back_to_to(self):
        assert split_range("10am to 2am") == ["10am ", " 2am"]

    def test_empty_dash_part_falls_back_to_to(self):
        assert split_range("-2am") == ["-2am"]


class TestParseHourToken:
    @pytest.mark.parametrize(
        "token,expected",
        [
            ("10AM", 10),
            ("10am", 10),
            ("10 am", 10),
            ("10 PM", 22),
            ("1pm", 13),
            ("12am", 0),
            ("12pm", 12),
        ],
    )
    def test_valid_tokens(self, token, expected):
        assert parse_hour_token(token) == expected

    @pytest.mark.parametrize(
        "token",
        ["13am", "0am", "10:30am", "10  am", "10", "am", "Closed", ""],
    )
    def test_invalid_tokens(self, token):
        assert parse_hour_token(token) is None


class TestParseOpening:
    @pytest.mark.parametrize("hours", ["10AM - 2AM", "10am-2am", "10am to 2am"])
    def test_known_formats_open_at_ten(self, hours, today):
        opening = parse_opening(hours, today)

        assert isinstance(opening, datetime)
        assert opening.hour == 10
        assert opening.minute == 0
        assert opening.second == 0
        assert opening.microsecond == 0

    def test_keeps_date_and_zone(self, today):
        opening = parse_opening("11am - 11pm", today)

        assert opening.date() == today.date()
        assert opening.tzinfo is PT

    def test_spaced_designator_with_to(self, today):
        opening = parse_opening("10 am to 2 am", today)
        assert opening.hour == 10

    def test_closed_is_failure(self, today):
        result = parse_opening("Closed", today)

        assert isinstance(result, ParseFailure)
        assert result.hours_text == "Closed"
        assert "Closed" in result.reason

    def test_empty_is_failure(self, today):
        assert isinstance(parse_opening("", today), ParseFailure)

    def test_minutes_are_not_guessed(self, today):
        assert isinstance(parse_opening("10:30am - 2am", today), ParseFailure)
