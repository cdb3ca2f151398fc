from shipnote.config.settings import (
    GitHubSettings,
    LinearSettings,
    LoggingSettings,
    LookupSettings,
    NotificationSettings,
    Settings,
    SlackSettings,
)


def get_test_settings() -> Settings:
    return Settings(
        github=GitHubSettings(
            token="test-token",
            owner="test-owner",
            repo="test-repo",
            sha="c0ffee0000000000000000000000000000000000",
            output_path=None,
        ),
        linear=LinearSettings(
            api_key="lin_test",
            api_url="https://api.linear.app/graphql",
        ),
        slack=SlackSettings(
            bot_token="xoxb-test",
            channel_id="C0123",
            message_id=None,
            api_url="https://slack.com/api",
        ),
        notification=NotificationSettings(
            status="Deployed",
            color="#36a64f",
            environment="staging",
            default_branch="main",
            service_name="api",
            release_branch_pattern=r"^(release|hotfix)[/-]",
            lines_per_field=8,
        ),
        lookup=LookupSettings(
            max_deployments=100,
            max_deployment_statuses=10,
            author_lookup_workers=4,
            http_timeout=5.0,
        ),
        logging=LoggingSettings(
            backend="console",
            name="shipnote-test",
            level="DEBUG",
            logfire_token=None,
        ),
    )
