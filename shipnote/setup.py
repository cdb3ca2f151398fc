import sys

from shipnote.config import Settings, load_settings
from shipnote.core.exceptions import ShipnoteError
from shipnote.core.jobs import NotificationJob
from shipnote.core.ports.logger import Logger
from shipnote.core.services import (
    CommitRangeExpander,
    DeploymentResolver,
    MessageContext,
    MessageFormatter,
    Notifier,
    PullRequestCorrelator,
    TicketResolver,
)
from shipnote.infra import (
    ActionOutputs,
    ConsoleLogger,
    GitHubClient,
    GitHubSourceHost,
    LinearIssueTracker,
    LogfireLogger,
    SlackMessenger,
    SystemClock,
    configure_logfire,
    report_failure,
)


def main() -> None:
    logger: Logger | None = None
    try:
        settings = load_settings()
        logger = _build_logger(settings)
        settings.validate()
        message_id = run(settings, logger)
        ActionOutputs(settings.github.output_path, logger).set(
            'message_id', message_id
        )
    except Exception as error:  # noqa: BLE001
        _fail(logger, error)


def run(settings: Settings, logger: Logger) -> str:
    clock = SystemClock()
    timeout = settings.lookup.http_timeout
    with GitHubClient(settings.github.token) as github_client, LinearIssueTracker(
        settings.linear.api_key,
        url=settings.linear.api_url,
        timeout=timeout,
    ) as tracker, SlackMessenger(
        settings.slack.bot_token,
        url=settings.slack.api_url,
        timeout=timeout,
    ) as messenger:
        source = GitHubSourceHost(
            github_client,
            settings.github.owner,
            settings.github.repo,
        )
        job = NotificationJob(
            logger=logger,
            resolver=DeploymentResolver(
                source,
                logger,
                max_deployments=settings.lookup.max_deployments,
                max_statuses=settings.lookup.max_deployment_statuses,
            ),
            expander=CommitRangeExpander(source, logger),
            correlator=PullRequestCorrelator(
                source,
                TicketResolver(tracker, logger),
                logger,
                default_branch=settings.notification.default_branch,
                release_branch_pattern=settings.notification.release_branch_pattern,
                author_lookup_workers=settings.lookup.author_lookup_workers,
            ),
            formatter=MessageFormatter(
                clock,
                lines_per_field=settings.notification.lines_per_field,
            ),
            notifier=Notifier(
                messenger,
                logger,
                channel=settings.slack.channel_id,
                message_id=settings.slack.message_id,
            ),
            context=_build_context(settings),
        )
        return job.run()


def _build_context(settings: Settings) -> MessageContext:
    return MessageContext(
        service_name=settings.notification.service_name,
        environment=settings.notification.environment,
        status=settings.notification.status,
        color=settings.notification.color,
        owner=settings.github.owner,
        repo=settings.github.repo,
        head_sha=settings.github.sha,
    )


def _build_logger(settings: Settings) -> Logger:
    if settings.logging.backend == 'console':
        return ConsoleLogger(settings.logging.name, settings.logging.level)
    if settings.logging.backend == 'logfire':
        if not settings.logging.logfire_token:
            raise ShipnoteError(
                'Logfire backend selected but SHIPNOTE_LOGFIRE_TOKEN is not set'
            )
        configure_logfire(settings.logging.logfire_token, settings.logging.name)
        return LogfireLogger(settings.logging.name)
    raise ShipnoteError(f'Unknown logging backend {settings.logging.backend}')


def _fail(logger: Logger | None, error: BaseException) -> None:
    if logger is not None:
        logger.exception('Notification failed', error=str(error))
    report_failure(error)
    sys.exit(1)
