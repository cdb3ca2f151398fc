from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Commit:
    sha: str
    parent_count: int

    @property
    def is_merge(self) -> bool:
        return self.parent_count > 1
