import logging
from typing import Any

from shipnote.core.ports.logger import Logger

_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'


class _KeyValueFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        context = getattr(record, 'context', None)
        if context:
            pairs = ' '.join(
                f'{key}={value!r}' for key, value in sorted(context.items())
            )
            return f'{base} | {pairs}'
        return base


class ConsoleLogger(Logger):
    def __init__(self, name: str, level: str = 'INFO') -> None:
        self._logger = logging.getLogger(name)
        self._logger.setLevel(logging.getLevelName(level.upper()))
        if not self._logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(_KeyValueFormatter(_FORMAT))
            self._logger.addHandler(handler)
        self._logger.propagate = False

    def debug(self, message: str, **context: Any) -> None:
        self._log(logging.DEBUG, message, context)

    def info(self, message: str, **context: Any) -> None:
        self._log(logging.INFO, message, context)

    def warning(self, message: str, **context: Any) -> None:
        self._log(logging.WARNING, message, context)

    def error(self, message: str, **context: Any) -> None:
        self._log(logging.ERROR, message, context)

    def exception(self, message: str, **context: Any) -> None:
        self._logger.exception(message, extra={'context': context})

    def _log(self, level: int, message: str, context: dict) -> None:
        self._logger.log(level, message, extra={'context': context})
