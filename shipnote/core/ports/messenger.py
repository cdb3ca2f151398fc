from typing import Any, Dict, List, Protocol, runtime_checkable


@runtime_checkable
class Messenger(Protocol):
    def post_message(
        self, channel: str, attachments: List[Dict[str, Any]]
    ) -> str:
        ...

    def update_message(
        self, channel: str, ts: str, attachments: List[Dict[str, Any]]
    ) -> str:
        ...
