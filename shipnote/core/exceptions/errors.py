from datetime import datetime
from typing import Sequence


class ShipnoteError(Exception):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigurationError(ShipnoteError):
    def __init__(self, message: str, missing: Sequence[str] = ()) -> None:
        self.missing = tuple(missing)
        super().__init__(message)


class SourceError(ShipnoteError):
    pass


class SourceAuthenticationError(SourceError):
    pass


class SourceRateLimitError(SourceError):
    def __init__(self, message: str, retry_after: datetime) -> None:
        self.retry_after = retry_after
        super().__init__(message)


class SourceNotFoundError(SourceError):
    def __init__(self, message: str, resource: str) -> None:
        self.resource = resource
        super().__init__(message)


class TicketLookupError(ShipnoteError):
    def __init__(self, message: str, identifier: str) -> None:
        self.identifier = identifier
        super().__init__(message)


class MessengerError(ShipnoteError):
    def __init__(self, message: str, method: str) -> None:
        self.method = method
        super().__init__(message)
