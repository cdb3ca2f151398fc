from tests.fakes.clock import FakeClock
from tests.fakes.github import (
    FakeCommit,
    FakeComparison,
    FakeDeployment,
    FakeDeploymentStatus,
    FakeGitHubClient,
    FakePullRequest,
    FakePullRequestPart,
    FakeRepository,
    FakeUser,
)
from tests.fakes.session import FakeResponse, FakeSession
from tests.fakes.issue_tracker import FakeIssueTracker, make_ticket
from tests.fakes.logger import FakeLogger
from tests.fakes.messenger import FakeMessenger
from tests.fakes.source_host import FakeSourceHost

__all__ = [
    "FakeClock",
    "FakeCommit",
    "FakeComparison",
    "FakeDeployment",
    "FakeDeploymentStatus",
    "FakeGitHubClient",
    "FakeIssueTracker",
    "FakeLogger",
    "FakeMessenger",
    "FakePullRequest",
    "FakePullRequestPart",
    "FakeRepository",
    "FakeResponse",
    "FakeSession",
    "FakeSourceHost",
    "FakeUser",
    "make_ticket",
]
