import sys
import uuid
from pathlib import Path
from typing import Optional, TextIO

from shipnote.core.ports.logger import Logger


class ActionOutputs:
    """Writes step outputs to the file GitHub Actions names in
    ``GITHUB_OUTPUT``."""

    def __init__(self, output_path: Optional[str], logger: Logger) -> None:
        self._path = Path(output_path) if output_path else None
        self._logger = logger

    def set(self, name: str, value: str) -> None:
        if self._path is None:
            self._logger.info("Step output", name=name, value=value)
            return
        with self._path.open("a", encoding="utf-8") as handle:
            if "\n" in value:
                delimiter = f"ghadelimiter_{uuid.uuid4()}"
                handle.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")
            else:
                handle.write(f"{name}={value}\n")


def report_failure(error: BaseException, stream: Optional[TextIO] = None) -> None:
    if stream is None:
        stream = sys.stdout
    message = str(error).replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")
    stream.write(f"::error::{message}\n")
    stream.flush()
