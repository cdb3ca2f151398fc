from datetime import datetime, timezone
from itertools import islice
from typing import List, NoReturn, Optional

import requests
from github import GithubException
from github.Repository import Repository

from shipnote.core.exceptions import (
    SourceAuthenticationError,
    SourceError,
    SourceNotFoundError,
    SourceRateLimitError,
)
from shipnote.core.ports.source_host import SourceHost
from shipnote.core.schema.commit import Commit
from shipnote.core.schema.deployment import Deployment, DeploymentStatus
from shipnote.core.schema.pr import PullRequest
from shipnote.infra.github.client import GitHubClient

_TRANSPORT_ERRORS = (GithubException, requests.RequestException)


class GitHubSourceHost(SourceHost):
    def __init__(
        self,
        client: GitHubClient,
        owner: str,
        repo: str,
    ) -> None:
        self._client = client
        self._owner = owner
        self._repo_name = repo
        self._repo: Repository | None = None

    @property
    def _resource(self) -> str:
        return f"{self._owner}/{self._repo_name}"

    def list_deployments(
        self,
        environment: str,
        limit: int,
        status_limit: int,
    ) -> List[Deployment]:
        repo = self._get_repo()
        try:
            deployments = islice(repo.get_deployments(environment=environment), limit)
            return [self._to_deployment(item, status_limit) for item in deployments]
        except _TRANSPORT_ERRORS as error:
            self._translate_exception(
                "Failed to list deployments",
                error,
                resource=f"{self._resource}@{environment}",
            )

    def compare_commits(self, base: str, head: str) -> List[Commit]:
        repo = self._get_repo()
        try:
            comparison = repo.compare(base, head)
            return [self._to_commit(commit) for commit in comparison.commits]
        except _TRANSPORT_ERRORS as error:
            self._translate_exception(
                "Failed to compare commits",
                error,
                resource=f"{self._resource}@{base}...{head}",
            )

    def get_commit(self, sha: str) -> Commit:
        repo = self._get_repo()
        try:
            return self._to_commit(repo.get_commit(sha))
        except _TRANSPORT_ERRORS as error:
            self._translate_exception(
                "Failed to fetch commit",
                error,
                resource=f"{self._resource}@{sha}",
            )

    def pulls_for_commit(self, sha: str) -> List[PullRequest]:
        repo = self._get_repo()
        try:
            pulls = repo.get_commit(sha).get_pulls()
            return [self._to_pull_request(pull) for pull in pulls]
        except _TRANSPORT_ERRORS as error:
            self._translate_exception(
                "Failed to fetch pull requests for commit",
                error,
                resource=f"{self._resource}@{sha}",
            )

    def get_pull(self, number: int) -> PullRequest:
        repo = self._get_repo()
        try:
            return self._to_pull_request(repo.get_pull(number))
        except _TRANSPORT_ERRORS as error:
            self._translate_exception(
                "Failed to fetch pull request",
                error,
                resource=f"{self._resource}#{number}",
            )

    def get_user_name(self, login: str) -> Optional[str]:
        try:
            return self._client.get_user(login).name
        except _TRANSPORT_ERRORS as error:
            self._translate_exception(
                "Failed to fetch user",
                error,
                resource=login,
            )

    def _to_deployment(self, deployment, status_limit: int) -> Deployment:
        statuses = tuple(
            DeploymentStatus(state=status.state, created_at=status.created_at)
            for status in islice(deployment.get_statuses(), status_limit)
        )
        return Deployment(
            id=deployment.id,
            sha=deployment.sha,
            created_at=deployment.created_at,
            statuses=statuses,
        )

    def _to_commit(self, commit) -> Commit:
        return Commit(sha=commit.sha, parent_count=len(commit.parents))

    def _to_pull_request(self, pr) -> PullRequest:
        return PullRequest(
            number=pr.number,
            title=pr.title or "",
            body=pr.body,
            base_branch=pr.base.ref if pr.base else "",
            head_branch=pr.head.ref if pr.head else "",
            author=pr.user.login if pr.user else "",
            url=pr.html_url,
        )

    def _get_repo(self) -> Repository:
        if self._repo is None:
            try:
                self._repo = self._client.get_repo(
                    self._owner,
                    self._repo_name,
                )
            except _TRANSPORT_ERRORS as error:
                self._translate_exception(
                    "Failed to access repository",
                    error,
                    resource=self._resource,
                )
        assert self._repo is not None
        return self._repo

    def _translate_exception(
        self,
        message: str,
        error: Exception,
        resource: str | None = None,
    ) -> NoReturn:
        status = getattr(error, "status", None)
        headers = getattr(error, "headers", {}) or {}
        if status == 401:
            raise SourceAuthenticationError(message) from error
        if status == 404:
            raise SourceNotFoundError(
                message,
                resource or "resource",
            ) from error
        if status == 403:
            retry_after = self._retry_after_from_headers(headers)
            if retry_after:
                raise SourceRateLimitError(message, retry_after) from error
        raise SourceError(message) from error

    def _retry_after_from_headers(self, headers) -> datetime | None:  # noqa: ANN001
        reset = headers.get("Retry-After") or headers.get("X-RateLimit-Reset")
        if reset is None:
            return None
        try:
            reset_time = float(reset)
            return datetime.fromtimestamp(reset_time, tz=timezone.utc)
        except (TypeError, ValueError):
            return None
