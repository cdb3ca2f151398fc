from shipnote.infra.logging.console import ConsoleLogger
from shipnote.infra.logging.logfire import LogfireLogger, configure_logfire

__all__ = ["ConsoleLogger", "LogfireLogger", "configure_logfire"]
