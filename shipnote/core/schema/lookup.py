from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Lookup(Generic[T]):
    """Outcome of an optional enrichment call.

    ``value`` is set when something was found. ``error`` is set when the
    call itself failed, which lets callers tell "nothing there" apart from
    "could not ask".
    """

    value: Optional[T] = None
    error: Optional[str] = None

    @classmethod
    def found(cls, value: T) -> "Lookup[T]":
        return cls(value=value)

    @classmethod
    def missing(cls) -> "Lookup[T]":
        return cls()

    @classmethod
    def failure(cls, error: str, fallback: Optional[T] = None) -> "Lookup[T]":
        return cls(value=fallback, error=error)

    @property
    def failed(self) -> bool:
        return self.error is not None
