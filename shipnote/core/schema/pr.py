from dataclasses import dataclass, replace
from typing import Optional, Tuple


@dataclass(frozen=True, slots=True)
class Ticket:
    identifier: str
    url: str
    title: str


@dataclass(frozen=True, slots=True)
class PullRequest:
    number: int
    title: str
    body: Optional[str]
    base_branch: str
    head_branch: str
    author: str
    url: str

    @property
    def text(self) -> str:
        return f"{self.title}\n{self.body or ''}"


@dataclass(frozen=True, slots=True)
class CorrelatedPullRequest:
    pull_request: PullRequest
    tickets: Tuple[Ticket, ...]
    author: str
    author_name: Optional[str] = None

    @property
    def display_author(self) -> str:
        return self.author_name or self.author

    def with_author_name(self, name: str) -> "CorrelatedPullRequest":
        return replace(self, author_name=name)
