class OpeningNotifierError(Exception):
    """Base class for opening notifier errors."""


class FetchFailure(OpeningNotifierError):
    """The hours source could not be reached or returned an unusable payload."""


class PersistenceFailure(OpeningNotifierError):
    """The days-open counter could not be read or written."""


class ZoneResolutionError(OpeningNotifierError):
    """The configured civil time zone does not exist on this host."""
