from typing import List, Optional, Protocol, runtime_checkable

from shipnote.core.schema.commit import Commit
from shipnote.core.schema.deployment import Deployment
from shipnote.core.schema.pr import PullRequest


@runtime_checkable
class SourceHost(Protocol):
    def list_deployments(
        self,
        environment: str,
        limit: int,
        status_limit: int,
    ) -> List[Deployment]:
        ...

    def compare_commits(self, base: str, head: str) -> List[Commit]:
        ...

    def get_commit(self, sha: str) -> Commit:
        ...

    def pulls_for_commit(self, sha: str) -> List[PullRequest]:
        ...

    def get_pull(self, number: int) -> PullRequest:
        ...

    def get_user_name(self, login: str) -> Optional[str]:
        ...
