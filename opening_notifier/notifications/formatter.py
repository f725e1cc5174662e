def format_opening_message(venue_name: str, day_number: int) -> str:
    """Message announcing that the venue has opened for the given day."""
    return f"{venue_name} Day {day_number}: START"
