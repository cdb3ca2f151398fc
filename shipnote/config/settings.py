import os
from dataclasses import dataclass
from typing import List, Optional

from shipnote.core.exceptions import ConfigurationError


@dataclass(frozen=True, slots=True)
class GitHubSettings:
    token: str
    owner: str
    repo: str
    sha: str
    output_path: Optional[str]


@dataclass(frozen=True, slots=True)
class LinearSettings:
    api_key: str
    api_url: str


@dataclass(frozen=True, slots=True)
class SlackSettings:
    bot_token: str
    channel_id: str
    message_id: Optional[str]
    api_url: str


@dataclass(frozen=True, slots=True)
class NotificationSettings:
    status: str
    color: str
    environment: str
    default_branch: str
    service_name: str
    release_branch_pattern: str
    lines_per_field: int


@dataclass(frozen=True, slots=True)
class LookupSettings:
    max_deployments: int
    max_deployment_statuses: int
    author_lookup_workers: int
    http_timeout: float


@dataclass(frozen=True, slots=True)
class LoggingSettings:
    backend: str
    name: str
    level: str
    logfire_token: Optional[str]


@dataclass(frozen=True, slots=True)
class Settings:
    github: GitHubSettings
    linear: LinearSettings
    slack: SlackSettings
    notification: NotificationSettings
    lookup: LookupSettings
    logging: LoggingSettings

    def validate(self) -> None:
        required = {
            "INPUT_STATUS": self.notification.status,
            "INPUT_CHANNEL_ID": self.slack.channel_id,
            "INPUT_ENVIRONMENT": self.notification.environment,
            "INPUT_SERVICE_NAME": self.notification.service_name,
            "GITHUB_TOKEN": self.github.token,
            "GITHUB_REPOSITORY": self.github.owner and self.github.repo,
            "GITHUB_SHA": self.github.sha,
            "LINEAR_API_KEY": self.linear.api_key,
            "SLACK_BOT_TOKEN": self.slack.bot_token,
        }
        missing: List[str] = [name for name, value in required.items() if not value]
        if missing:
            raise ConfigurationError(
                f"Missing required settings: {', '.join(missing)}",
                missing,
            )
        if self.notification.lines_per_field < 1:
            raise ConfigurationError("SHIPNOTE_LINES_PER_FIELD must be positive")


def load_settings() -> Settings:
    from dotenv import load_dotenv

    load_dotenv()

    owner, repo = _split_repository(_ge_env_or_default("GITHUB_REPOSITORY", ""))

    return Settings(
        github=GitHubSettings(
            token=_ge_env_str("GITHUB_TOKEN"),
            owner=owner,
            repo=repo,
            sha=_ge_env_str("GITHUB_SHA"),
            output_path=_ge_env_or_default("GITHUB_OUTPUT"),
        ),
        linear=LinearSettings(
            api_key=_ge_env_str("LINEAR_API_KEY"),
            api_url=_ge_env_str("LINEAR_API_URL", "https://api.linear.app/graphql"),
        ),
        slack=SlackSettings(
            bot_token=_ge_env_str("SLACK_BOT_TOKEN"),
            channel_id=_input("channel_id"),
            message_id=_input("message_id") or None,
            api_url=_ge_env_str("SLACK_API_URL", "https://slack.com/api"),
        ),
        notification=NotificationSettings(
            status=_input("status"),
            color=_input("color", "#cccccc"),
            environment=_input("environment"),
            default_branch=_input("default_branch_name", "main"),
            service_name=_input("service_name"),
            release_branch_pattern=_ge_env_str(
                "SHIPNOTE_RELEASE_BRANCH_PATTERN", r"^(release|hotfix)[/-]"
            ),
            lines_per_field=_env_int("SHIPNOTE_LINES_PER_FIELD", 8),
        ),
        lookup=LookupSettings(
            max_deployments=_env_int("SHIPNOTE_MAX_DEPLOYMENTS", 100),
            max_deployment_statuses=_env_int("SHIPNOTE_MAX_DEPLOYMENT_STATUSES", 10),
            author_lookup_workers=_env_int("SHIPNOTE_AUTHOR_LOOKUP_WORKERS", 4),
            http_timeout=_env_float("SHIPNOTE_HTTP_TIMEOUT", 30.0),
        ),
        logging=LoggingSettings(
            backend=_ge_env_str("SHIPNOTE_LOGGER_BACKEND", "console").lower(),
            name=_ge_env_str("SHIPNOTE_LOGGER_NAME", "shipnote"),
            level=_ge_env_str("SHIPNOTE_LOG_LEVEL", "INFO").upper(),
            logfire_token=_ge_env_or_default("SHIPNOTE_LOGFIRE_TOKEN"),
        ),
    )


def _split_repository(value: str) -> tuple[str, str]:
    owner, _, repo = value.partition("/")
    return owner, repo


def _input(name: str, default: str = "") -> str:
    # GitHub Actions exposes `with:` inputs as INPUT_<NAME>, upper-cased.
    value = _ge_env_str(f"INPUT_{name.upper()}", default)
    return value.strip()


def _ge_env_or_default(name: str, default: Optional[str] = None) -> Optional[str]:
    value = os.getenv(name)
    if not value:
        return default
    return value


def _ge_env_str(name: str, default: str = "") -> str:
    return _ge_env_or_default(name, default) or default


def _env_int(name: str, default: int) -> int:
    value = _ge_env_or_default(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError as error:
        raise ConfigurationError(f"{name} must be an integer, got {value!r}") from error


def _env_float(name: str, default: float) -> float:
    value = _ge_env_or_default(name)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError as error:
        raise ConfigurationError(f"{name} must be a number, got {value!r}") from error
