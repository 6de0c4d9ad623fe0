"""Tagged outcome of a fetch, flattened to ``(data, error)`` at the boundary."""

from dataclasses import dataclass
from typing import Any, Generic, TypeAlias, TypeVar

__all__ = ["Err", "FetchResult", "FetchTuple", "Ok"]

T = TypeVar("T")
E = TypeVar("E", bound=BaseException)

FetchTuple: TypeAlias = tuple[Any, BaseException | None]


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful fetch carrying the decoded payload ("" for an empty body)."""

    value: T

    @property
    def is_ok(self) -> bool:
        return True

    def as_tuple(self) -> tuple[T, None]:
        return (self.value, None)


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failed fetch carrying the error that describes it."""

    error: E

    @property
    def is_ok(self) -> bool:
        return False

    def as_tuple(self) -> tuple[None, E]:
        return (None, self.error)


FetchResult: TypeAlias = Ok[Any] | Err[BaseException]
