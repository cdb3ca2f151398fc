from typing import Any

from shipnote.core.ports.logger import Logger


class FakeLogger(Logger):
    def __init__(self) -> None:
        self.records: list[tuple[str, str, dict[str, Any]]] = []

    def debug(self, message: str, **context: object) -> None:
        self.records.append(("debug", message, dict(context)))

    def info(self, message: str, **context: object) -> None:
        self.records.append(("info", message, dict(context)))

    def warning(self, message: str, **context: object) -> None:
        self.records.append(("warning", message, dict(context)))

    def error(self, message: str, **context: object) -> None:
        self.records.append(("error", message, dict(context)))

    def exception(self, message: str, **context: object) -> None:
        self.records.append(("exception", message, dict(context)))

    def messages(self, level: str) -> list[str]:
        return [message for lvl, message, _ in self.records if lvl == level]
