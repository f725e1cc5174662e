from opening_notifier.notifications.formatter import format_opening_message


def test_format_opening_message():
    assert format_opening_message("Round1 Plaza Bonita", 7) == "Round1 Plaza Bonita Day 7: START"


def test_format_opening_message_other_venue():
    assert format_opening_message("Round1 Puente Hills", 1) == "Round1 Puente Hills Day 1: START"
