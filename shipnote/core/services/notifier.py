from typing import Any, Dict, List, Optional

from shipnote.core.ports.logger import Logger
from shipnote.core.ports.messenger import Messenger


class Notifier:
    def __init__(
        self,
        messenger: Messenger,
        logger: Logger,
        *,
        channel: str,
        message_id: Optional[str] = None,
    ) -> None:
        self._messenger = messenger
        self._logger = logger
        self._channel = channel
        self._message_id = message_id

    def send(self, attachments: List[Dict[str, Any]]) -> str:
        """Update the existing message when one is configured, otherwise
        post a new one. Returns the message id."""
        if self._message_id:
            ts = self._messenger.update_message(
                self._channel, self._message_id, attachments
            )
            self._logger.info("Updated message", channel=self._channel, ts=ts)
        else:
            ts = self._messenger.post_message(self._channel, attachments)
            self._logger.info("Posted message", channel=self._channel, ts=ts)
        return ts
