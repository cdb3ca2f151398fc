from dataclasses import dataclass
from datetime import datetime
from typing import Tuple

STATE_SUCCESS = "success"


@dataclass(frozen=True, slots=True)
class DeploymentStatus:
    state: str
    created_at: datetime


@dataclass(frozen=True, slots=True)
class Deployment:
    id: int
    sha: str
    created_at: datetime
    statuses: Tuple[DeploymentStatus, ...]

    @property
    def is_successful(self) -> bool:
        return any(status.state == STATE_SUCCESS for status in self.statuses)
