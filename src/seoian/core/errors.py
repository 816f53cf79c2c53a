class SeoianError(Exception):
    """Base error."""

class PreconditionError(SeoianError, ValueError):
    """Raised when an engine call is made with arguments it cannot honour."""

class UnknownZoneError(SeoianError, KeyError):
    """Raised when a timezone identifier is not in the IANA database."""

class TableError(SeoianError):
    """Raised when a lookup table cannot be read as a table at all."""
