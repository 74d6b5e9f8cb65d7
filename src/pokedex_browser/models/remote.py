"""Lifecycle of a single asynchronous fetch, and fetch outcomes."""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class NotRequested:
    """Nothing has been asked for yet."""


@dataclass(frozen=True)
class InFlight:
    """A fetch for ``pokemon_id`` has been issued and not yet answered."""

    pokemon_id: int


@dataclass(frozen=True)
class Ready(Generic[T]):
    value: T


@dataclass(frozen=True)
class Failed:
    message: str


RemoteStatus = NotRequested | InFlight | Ready[T] | Failed


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful fetch outcome."""

    value: T


@dataclass(frozen=True)
class Err:
    """Failed fetch outcome with a user-facing message."""

    message: str


Result = Ok[T] | Err
