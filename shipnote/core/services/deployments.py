from typing import Optional

from shipnote.core.exceptions import SourceError
from shipnote.core.ports.logger import Logger
from shipnote.core.ports.source_host import SourceHost
from shipnote.core.schema.deployment import Deployment
from shipnote.core.schema.lookup import Lookup

DEFAULT_MAX_DEPLOYMENTS = 100
DEFAULT_MAX_STATUSES = 10


class DeploymentResolver:
    def __init__(
        self,
        source: SourceHost,
        logger: Logger,
        *,
        max_deployments: int = DEFAULT_MAX_DEPLOYMENTS,
        max_statuses: int = DEFAULT_MAX_STATUSES,
    ) -> None:
        self._source = source
        self._logger = logger
        self._max_deployments = max_deployments
        self._max_statuses = max_statuses

    def latest_successful(
        self,
        environment: str,
        exclude_sha: Optional[str] = None,
    ) -> Lookup[Deployment]:
        """Find the newest successful deployment to ``environment``.

        Deployments of ``exclude_sha`` are ignored so that the revision
        currently being deployed never counts as its own predecessor.
        """
        try:
            deployments = self._source.list_deployments(
                environment,
                limit=self._max_deployments,
                status_limit=self._max_statuses,
            )
        except SourceError as error:
            self._logger.warning(
                "Failed to list deployments",
                environment=environment,
                error=str(error),
            )
            return Lookup.failure(str(error))

        candidates = [
            deployment
            for deployment in deployments
            if deployment.is_successful and deployment.sha != exclude_sha
        ]
        if not candidates:
            self._logger.info(
                "No previous successful deployment",
                environment=environment,
                inspected=len(deployments),
            )
            return Lookup.missing()

        latest = max(candidates, key=lambda deployment: deployment.created_at)
        self._logger.info(
            "Resolved previous deployment",
            environment=environment,
            deployment_id=latest.id,
            sha=latest.sha,
        )
        return Lookup.found(latest)
