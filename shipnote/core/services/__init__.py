from shipnote.core.services.commits import CommitRangeExpander
from shipnote.core.services.correlator import PullRequestCorrelator, linked_pull_number
from shipnote.core.services.deployments import DeploymentResolver
from shipnote.core.services.formatter import (
    MessageContext,
    MessageFormatter,
    environment_label,
)
from shipnote.core.services.notifier import Notifier
from shipnote.core.services.tickets import (
    TicketResolver,
    ticket_id_from_branch,
    ticket_ids_from_text,
)

__all__ = [
    "CommitRangeExpander",
    "DeploymentResolver",
    "MessageContext",
    "MessageFormatter",
    "Notifier",
    "PullRequestCorrelator",
    "TicketResolver",
    "environment_label",
    "linked_pull_number",
    "ticket_id_from_branch",
    "ticket_ids_from_text",
]
