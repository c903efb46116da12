class FintrackError(Exception):
    """Base class for errors raised by the analytics and transaction services."""


class ValidationError(FintrackError):
    """The caller supplied a missing or malformed parameter."""


class UpstreamFetchError(FintrackError):
    """The transaction store failed to deliver the requested records."""
