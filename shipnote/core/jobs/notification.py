from dataclasses import replace
from typing import Optional

from shipnote.core.ports.logger import Logger
from shipnote.core.services.commits import CommitRangeExpander
from shipnote.core.services.correlator import PullRequestCorrelator
from shipnote.core.services.deployments import DeploymentResolver
from shipnote.core.services.formatter import MessageContext, MessageFormatter
from shipnote.core.services.notifier import Notifier


class NotificationJob:
    def __init__(
        self,
        logger: Logger,
        resolver: DeploymentResolver,
        expander: CommitRangeExpander,
        correlator: PullRequestCorrelator,
        formatter: MessageFormatter,
        notifier: Notifier,
        *,
        context: MessageContext,
    ) -> None:
        self._logger = logger
        self._resolver = resolver
        self._expander = expander
        self._correlator = correlator
        self._formatter = formatter
        self._notifier = notifier
        self._context = context

    def run(self) -> str:
        context = self._context
        self._logger.info(
            "Job starting",
            job=self.__class__.__name__,
            environment=context.environment,
            sha=context.head_sha,
        )
        base_sha = self._previous_sha()
        commits = self._expander.expand(base_sha, context.head_sha).value or []
        pull_requests = self._correlator.correlate(commits)

        attachments = self._formatter.build(
            replace(context, base_sha=base_sha),
            pull_requests,
        )
        message_id = self._notifier.send(attachments)
        self._logger.info(
            "Job complete",
            job=self.__class__.__name__,
            message_id=message_id,
            commits=len(commits),
            pull_requests=len(pull_requests),
        )
        return message_id

    def _previous_sha(self) -> Optional[str]:
        deployment = self._resolver.latest_successful(
            self._context.environment,
            exclude_sha=self._context.head_sha,
        ).value
        if deployment is None:
            return None
        return deployment.sha
