from typing import Optional, Protocol, runtime_checkable

from shipnote.core.schema.pr import Ticket


@runtime_checkable
class IssueTracker(Protocol):
    def get_ticket(self, identifier: str) -> Optional[Ticket]:
        ...
