from shipnote.infra.actions import ActionOutputs, report_failure
from shipnote.infra.clock import SystemClock
from shipnote.infra.github import GitHubClient, GitHubSourceHost
from shipnote.infra.linear import LinearIssueTracker
from shipnote.infra.logging import ConsoleLogger, LogfireLogger, configure_logfire
from shipnote.infra.slack import SlackMessenger

__all__ = [
    'ActionOutputs',
    'GitHubClient',
    'GitHubSourceHost',
    'LinearIssueTracker',
    'SlackMessenger',
    'ConsoleLogger',
    'LogfireLogger',
    'configure_logfire',
    'SystemClock',
    'report_failure',
]
