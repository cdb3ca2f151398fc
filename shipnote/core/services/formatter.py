from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from shipnote.core.ports.clock import Clock
from shipnote.core.schema.message import Attachment, AttachmentField
from shipnote.core.schema.pr import CorrelatedPullRequest

DEFAULT_LINES_PER_FIELD = 8
PULL_REQUESTS_TITLE = "Pull Requests and Linear Tickets"
NO_PULL_REQUESTS_TITLE = "Pull Requests"
NO_PULL_REQUESTS_TEXT = "No pull requests found"
NO_TICKET_TEXT = "No ticket"
FOOTER_ICON = "https://github.githubassets.com/favicon.ico"
GITHUB_URL = "https://github.com"


@dataclass(frozen=True, slots=True)
class MessageContext:
    service_name: str
    environment: str
    status: str
    color: str
    owner: str
    repo: str
    head_sha: str
    base_sha: Optional[str] = None


def environment_label(environment: str) -> str:
    lowered = environment.lower()
    if "qa" in lowered:
        return "QA"
    if "prod" in lowered:
        return ":warning: PROD :warning:"
    return environment.upper()


def escape(text: str) -> str:
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def link(url: str, label: str) -> str:
    return f"<{url}|{escape(label)}>"


def pull_request_lines(item: CorrelatedPullRequest) -> List[str]:
    """One line per ticket, or a single "no ticket" line."""
    pull = item.pull_request
    prefix = (
        f"• {link(pull.url, f'#{pull.number} {pull.title}')}"
        f" by {escape(item.display_author)}"
    )
    if not item.tickets:
        return [f"{prefix} · {NO_TICKET_TEXT}"]
    return [
        f"{prefix} · {link(ticket.url, f'{ticket.identifier}: {ticket.title}')}"
        for ticket in item.tickets
    ]


class MessageFormatter:
    def __init__(
        self,
        clock: Clock,
        *,
        lines_per_field: int = DEFAULT_LINES_PER_FIELD,
    ) -> None:
        if lines_per_field < 1:
            raise ValueError("lines_per_field must be positive")
        self._clock = clock
        self._lines_per_field = lines_per_field

    def build(
        self,
        context: MessageContext,
        pull_requests: Sequence[CorrelatedPullRequest],
    ) -> List[Dict[str, Any]]:
        return [self.build_attachment(context, pull_requests).to_payload()]

    def build_attachment(
        self,
        context: MessageContext,
        pull_requests: Sequence[CorrelatedPullRequest],
    ) -> Attachment:
        fields = [
            AttachmentField("Service", context.service_name, True),
            AttachmentField("Environment", environment_label(context.environment), True),
            AttachmentField("Status", context.status, True),
            AttachmentField("Commits", self._commits_value(context), True),
        ]
        fields.extend(self._pull_request_fields(pull_requests))
        repository = f"{context.owner}/{context.repo}"
        return Attachment(
            color=context.color,
            fields=tuple(fields),
            footer_icon=FOOTER_ICON,
            footer=f"<{GITHUB_URL}/{repository} | {repository}>",
            ts=int(self._clock.now().timestamp()),
        )

    def _pull_request_fields(
        self, pull_requests: Sequence[CorrelatedPullRequest]
    ) -> List[AttachmentField]:
        lines = [line for item in pull_requests for line in pull_request_lines(item)]
        if not lines:
            return [AttachmentField(NO_PULL_REQUESTS_TITLE, NO_PULL_REQUESTS_TEXT, False)]

        fields = []
        for index, start in enumerate(range(0, len(lines), self._lines_per_field)):
            title = PULL_REQUESTS_TITLE if index == 0 else f"{PULL_REQUESTS_TITLE} ({index + 1})"
            chunk = lines[start:start + self._lines_per_field]
            fields.append(AttachmentField(title, "\n".join(chunk), False))
        return fields

    def _commits_value(self, context: MessageContext) -> str:
        repository_url = f"{GITHUB_URL}/{context.owner}/{context.repo}"
        head = context.head_sha[:7]
        if context.base_sha:
            base = context.base_sha[:7]
            return link(
                f"{repository_url}/compare/{context.base_sha}...{context.head_sha}",
                f"{base}...{head}",
            )
        return link(f"{repository_url}/commit/{context.head_sha}", head)
