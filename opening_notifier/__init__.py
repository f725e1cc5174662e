"""Daily "venue has opened" notifier."""

__version__ = "0.1.0"
