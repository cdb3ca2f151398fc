from datetime import datetime, timedelta, timezone
from typing import Optional, Sequence

from shipnote.core.schema.deployment import Deployment, DeploymentStatus
from shipnote.core.schema.pr import CorrelatedPullRequest, PullRequest, Ticket

BASE_TIME = datetime(2024, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


def make_pull(
    number: int = 1,
    title: str = "Test PR",
    body: Optional[str] = None,
    base_branch: str = "main",
    head_branch: str = "feature",
    author: str = "octocat",
) -> PullRequest:
    return PullRequest(
        number=number,
        title=title,
        body=body,
        base_branch=base_branch,
        head_branch=head_branch,
        author=author,
        url=f"https://github.com/test-owner/test-repo/pull/{number}",
    )


def make_deployment(
    id: int,
    sha: str,
    hours_ago: int,
    states: Sequence[str] = ("success",),
) -> Deployment:
    created_at = BASE_TIME - timedelta(hours=hours_ago)
    return Deployment(
        id=id,
        sha=sha,
        created_at=created_at,
        statuses=tuple(
            DeploymentStatus(state=state, created_at=created_at) for state in states
        ),
    )


def make_correlated(
    number: int,
    tickets: Sequence[Ticket] = (),
    author_name: Optional[str] = "The Octocat",
    title: str = "Test PR",
) -> CorrelatedPullRequest:
    return CorrelatedPullRequest(
        pull_request=make_pull(number=number, title=title),
        tickets=tuple(tickets),
        author="octocat",
        author_name=author_name,
    )
