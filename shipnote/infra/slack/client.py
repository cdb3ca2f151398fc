from typing import Any, Dict, List, Optional

import requests

from shipnote.core.exceptions import MessengerError
from shipnote.core.ports.messenger import Messenger
from shipnote.infra.http import DEFAULT_TIMEOUT, build_session

SLACK_API_URL = "https://slack.com/api"


class SlackMessenger(Messenger):
    def __init__(
        self,
        bot_token: str,
        *,
        url: str = SLACK_API_URL,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._url = url.rstrip("/")
        self._timeout = timeout
        self._session = session or build_session(
            {"Authorization": f"Bearer {bot_token}"}
        )

    def post_message(
        self, channel: str, attachments: List[Dict[str, Any]]
    ) -> str:
        return self._call(
            "chat.postMessage",
            {"channel": channel, "attachments": attachments},
        )

    def update_message(
        self, channel: str, ts: str, attachments: List[Dict[str, Any]]
    ) -> str:
        return self._call(
            "chat.update",
            {"channel": channel, "ts": ts, "attachments": attachments},
        )

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "SlackMessenger":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:  # noqa: ANN001
        self.close()

    def _call(self, method: str, payload: Dict[str, Any]) -> str:
        try:
            response = self._session.post(
                f"{self._url}/{method}",
                json=payload,
                timeout=self._timeout,
            )
            response.raise_for_status()
            body = response.json()
        except requests.RequestException as error:
            raise MessengerError(f"Slack request failed: {error}", method) from error
        except ValueError as error:
            raise MessengerError("Slack returned a non-JSON response", method) from error

        if not body.get("ok"):
            raise MessengerError(
                f"Slack API error: {body.get('error', 'unknown_error')}", method
            )
        ts = body.get("ts")
        if not ts:
            raise MessengerError("Slack response did not include a ts", method)
        return ts
