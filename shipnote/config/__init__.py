from shipnote.config.settings import (
    GitHubSettings,
    LinearSettings,
    LoggingSettings,
    LookupSettings,
    NotificationSettings,
    Settings,
    SlackSettings,
    load_settings,
)

__all__ = [
    'Settings',
    'GitHubSettings',
    'LinearSettings',
    'SlackSettings',
    'NotificationSettings',
    'LookupSettings',
    'LoggingSettings',
    'load_settings',
]
