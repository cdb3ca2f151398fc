import logging

from shipnote.infra.logging import ConsoleLogger


class TestConsoleLogger:
    def test_appends_context_pairs(self) -> None:
        logger = ConsoleLogger("shipnote-console-test", "DEBUG")
        handler = logging.getLogger("shipnote-console-test").handlers[0]
        records: list[str] = []

        class _Capture(logging.Handler):
            def emit(self, record: logging.LogRecord) -> None:
                records.append(handler.format(record))

        logging.getLogger("shipnote-console-test").addHandler(_Capture())

        logger.info("Posted message", ts="1.0", channel="C1")

        assert records[-1].endswith("Posted message | channel='C1' ts='1.0'")

    def test_respects_level(self) -> None:
        ConsoleLogger("shipnote-level-test", "warning")

        assert logging.getLogger("shipnote-level-test").level == logging.WARNING
