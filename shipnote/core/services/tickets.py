import re
from typing import Dict, Iterable, List, Optional

from shipnote.core.exceptions import TicketLookupError
from shipnote.core.ports.issue_tracker import IssueTracker
from shipnote.core.ports.logger import Logger
from shipnote.core.schema.lookup import Lookup
from shipnote.core.schema.pr import Ticket

BRANCH_TICKET_PATTERN = re.compile(r"^([A-Za-z]+-\d+)")
TEXT_TICKET_PATTERN = re.compile(r"\b([A-Za-z]+-\d+)\b")


def ticket_id_from_branch(branch: str) -> Optional[str]:
    match = BRANCH_TICKET_PATTERN.match(branch or "")
    if not match:
        return None
    return match.group(1).upper()


def ticket_ids_from_text(text: str) -> List[str]:
    """Return every ticket-looking token in ``text``, upper-cased, in order,
    without repeats."""
    seen: Dict[str, None] = {}
    for token in TEXT_TICKET_PATTERN.findall(text or ""):
        seen.setdefault(token.upper(), None)
    return list(seen)


class TicketResolver:
    def __init__(self, tracker: IssueTracker, logger: Logger) -> None:
        self._tracker = tracker
        self._logger = logger
        self._resolved: Dict[str, Lookup[Ticket]] = {}

    def resolve(self, identifier: str) -> Lookup[Ticket]:
        key = identifier.upper()
        if key not in self._resolved:
            self._resolved[key] = self._fetch(key)
        return self._resolved[key]

    def from_branch(self, branch: str) -> Lookup[Ticket]:
        identifier = ticket_id_from_branch(branch)
        if identifier is None:
            return Lookup.missing()
        return self.resolve(identifier)

    def from_text(self, text: str, exclude: Optional[Iterable[str]] = None) -> List[Ticket]:
        excluded = {identifier.upper() for identifier in exclude or ()}
        tickets: List[Ticket] = []
        for identifier in ticket_ids_from_text(text):
            if identifier in excluded:
                continue
            ticket = self.resolve(identifier).value
            if ticket is None or ticket.identifier.upper() in excluded:
                continue
            excluded.add(ticket.identifier.upper())
            tickets.append(ticket)
        return tickets

    def _fetch(self, identifier: str) -> Lookup[Ticket]:
        try:
            ticket = self._tracker.get_ticket(identifier)
        except TicketLookupError as error:
            self._logger.warning(
                "Ticket lookup failed",
                identifier=identifier,
                error=str(error),
            )
            return Lookup.failure(str(error))
        if ticket is None:
            self._logger.debug("Ticket not found", identifier=identifier)
            return Lookup.missing()
        return Lookup.found(ticket)
