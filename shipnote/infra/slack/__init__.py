from shipnote.infra.slack.client import SLACK_API_URL, SlackMessenger

__all__ = ["SLACK_API_URL", "SlackMessenger"]
