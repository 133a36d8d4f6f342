# lowprice/errors.py


class FinderError(Exception):
    """Base class for errors raised by the low-price finder."""


class InvalidLevelError(FinderError):
    """The requested price tier is not one of the configured levels."""

    def __init__(self, level):
        super().__init__(f"invalid level: {level!r}")
        self.level = level


class MissingCredentialsError(FinderError):
    """Upstream API credentials are not configured."""


class UpstreamError(FinderError):
    """A single upstream search call failed (bad status, timeout, bad body)."""
