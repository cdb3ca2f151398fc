from shipnote.core.exceptions.errors import (
    ConfigurationError,
    MessengerError,
    ShipnoteError,
    SourceAuthenticationError,
    SourceError,
    SourceNotFoundError,
    SourceRateLimitError,
    TicketLookupError,
)

__all__ = [
    "ShipnoteError",
    "ConfigurationError",
    "SourceError",
    "SourceAuthenticationError",
    "SourceRateLimitError",
    "SourceNotFoundError",
    "TicketLookupError",
    "MessengerError",
]
