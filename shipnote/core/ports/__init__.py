from shipnote.core.ports.clock import Clock
from shipnote.core.ports.issue_tracker import IssueTracker
from shipnote.core.ports.logger import Logger
from shipnote.core.ports.messenger import Messenger
from shipnote.core.ports.source_host import SourceHost

__all__ = [
    "Logger",
    "Clock",
    "SourceHost",
    "IssueTracker",
    "Messenger",
]
