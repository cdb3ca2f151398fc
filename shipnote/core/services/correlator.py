import re
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, Iterable, List, Optional, Pattern, Sequence

from shipnote.core.exceptions import SourceError
from shipnote.core.ports.logger import Logger
from shipnote.core.ports.source_host import SourceHost
from shipnote.core.schema.commit import Commit
from shipnote.core.schema.pr import CorrelatedPullRequest, PullRequest, Ticket
from shipnote.core.services.tickets import TicketResolver

DEFAULT_RELEASE_BRANCH_PATTERN = r"^(release|hotfix)[/-]"
DEFAULT_AUTHOR_LOOKUP_WORKERS = 4
_BACK_REFERENCE_PATTERN = re.compile(r"\(#(\d+)\)\s*$")


def linked_pull_number(title: str) -> Optional[int]:
    match = _BACK_REFERENCE_PATTERN.search(title or "")
    if not match:
        return None
    return int(match.group(1))


class PullRequestCorrelator:
    """Expands commits into the pull requests that shipped them and the
    tickets those pull requests reference."""

    def __init__(
        self,
        source: SourceHost,
        tickets: TicketResolver,
        logger: Logger,
        *,
        default_branch: str,
        release_branch_pattern: str | Pattern[str] = DEFAULT_RELEASE_BRANCH_PATTERN,
        author_lookup_workers: int = DEFAULT_AUTHOR_LOOKUP_WORKERS,
    ) -> None:
        self._source = source
        self._tickets = tickets
        self._logger = logger
        self._default_branch = default_branch
        self._release_branch_pattern = re.compile(release_branch_pattern)
        self._author_lookup_workers = max(1, author_lookup_workers)

    def correlate(self, commits: Sequence[Commit]) -> List[CorrelatedPullRequest]:
        pulls: Dict[int, PullRequest] = {}
        for commit in commits:
            for pull in self._pulls_for(commit):
                if self._is_relevant(pull):
                    pulls.setdefault(pull.number, pull)

        correlated = [self._correlate_pull(pull) for pull in pulls.values()]
        names = self.resolve_author_names({item.author for item in correlated})
        result = [
            item.with_author_name(names.get(item.author, item.author))
            for item in correlated
        ]
        self._logger.info(
            "Correlated pull requests",
            commits=len(commits),
            pull_requests=len(result),
            tickets=sum(len(item.tickets) for item in result),
        )
        return result

    def resolve_author_names(self, logins: Iterable[str]) -> Dict[str, str]:
        ordered = sorted({login for login in logins if login})
        if not ordered:
            return {}
        workers = min(self._author_lookup_workers, len(ordered))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            names = list(executor.map(self._author_name, ordered))
        return dict(zip(ordered, names))

    def _pulls_for(self, commit: Commit) -> List[PullRequest]:
        try:
            return self._source.pulls_for_commit(commit.sha)
        except SourceError as error:
            self._logger.warning(
                "Failed to fetch pull requests for commit",
                sha=commit.sha,
                error=str(error),
            )
            return []

    def _is_relevant(self, pull: PullRequest) -> bool:
        if pull.base_branch == self._default_branch:
            return True
        return bool(self._release_branch_pattern.search(pull.base_branch))

    def _correlate_pull(self, pull: PullRequest) -> CorrelatedPullRequest:
        tickets = self._tickets_for(pull)
        author = pull.author

        linked_number = linked_pull_number(pull.title)
        if linked_number is not None and linked_number != pull.number:
            linked = self._linked_pull(pull, linked_number)
            if linked is not None:
                author = linked.author or author
                known = {ticket.identifier.upper() for ticket in tickets}
                for ticket in self._tickets_for(linked):
                    if ticket.identifier.upper() not in known:
                        known.add(ticket.identifier.upper())
                        tickets.append(ticket)

        return CorrelatedPullRequest(
            pull_request=pull,
            tickets=tuple(tickets),
            author=author,
        )

    def _tickets_for(self, pull: PullRequest) -> List[Ticket]:
        tickets: List[Ticket] = []
        branch_ticket = self._tickets.from_branch(pull.head_branch).value
        if branch_ticket is not None:
            tickets.append(branch_ticket)
        tickets.extend(
            self._tickets.from_text(
                pull.text,
                exclude=[ticket.identifier for ticket in tickets],
            )
        )
        return tickets

    def _linked_pull(self, pull: PullRequest, number: int) -> Optional[PullRequest]:
        try:
            return self._source.get_pull(number)
        except SourceError as error:
            self._logger.warning(
                "Failed to fetch linked pull request",
                pr_number=pull.number,
                linked_pr_number=number,
                error=str(error),
            )
            return None

    def _author_name(self, login: str) -> str:
        try:
            name = self._source.get_user_name(login)
        except SourceError as error:
            self._logger.warning(
                "Failed to resolve author name",
                login=login,
                error=str(error),
            )
            return login
        return name or login
