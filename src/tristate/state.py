"""Tri-state result type for operations that may be pending, failed, or done.

Extends the Ok/Err pattern with a third case for outcomes that are not
available yet. A state is always exactly one of:

- Idle: the operation has not run, no result is available
- Error: the operation ran and failed, only the message is kept
- Content: the operation succeeded and holds its value

States are immutable. Callers build them with the factories at the bottom of
this module and eliminate them with ``fold`` where a decision has to be made.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")
T_co = TypeVar("T_co", covariant=True)

UNKNOWN_ERROR_MESSAGE = "Unknown error occurred"


def _noop(*_args: object) -> None:
    return None


def _identity(value: T) -> T:
    return value


class TriState(ABC, Generic[T_co]):
    """Base of the closed Idle / Error / Content union.

    Only the three variants below subclass this. Each one implements the
    abstract dispatch methods, the rest of the API is built on top of them.
    """

    __slots__ = ()

    # Predicates

    @abstractmethod
    def is_idle(self) -> bool: ...

    @abstractmethod
    def is_error(self) -> bool: ...

    @abstractmethod
    def is_content(self) -> bool: ...

    # Functor / monad

    @abstractmethod
    def map(self, transform: Callable[[T_co], R]) -> TriState[R]:
        """Transform the payload of a Content, pass other variants through."""

    @abstractmethod
    def flat_map(self, transform: Callable[[T_co], TriState[R]]) -> TriState[R]:
        """Chain an operation that itself yields a TriState."""

    @abstractmethod
    def fold(
        self,
        on_content: Callable[[T_co], R],
        on_error: Callable[[str], R],
        on_idle: Callable[[], R],
    ) -> R:
        """Eliminate the state by calling exactly one handler.

        Returns:
            Whatever the invoked handler returns.
        """

    # Extraction

    @abstractmethod
    def get_or_none(self) -> Optional[T_co]: ...

    @abstractmethod
    def get_error_message(self) -> Optional[str]: ...

    def get_or_default(self, default: T) -> T_co | T:  # type: ignore[misc]
        """Return the payload, or ``default`` for Idle and Error."""
        return self.fold(_identity, lambda _message: default, lambda: default)

    def get_or_else(self, supplier: Callable[[], T]) -> T_co | T:
        """Return the payload, or call ``supplier`` for Idle and Error."""
        return self.fold(_identity, lambda _message: supplier(), supplier)

    # Recovery

    @abstractmethod
    def recover(self, transform: Callable[[str], T]) -> TriState[T_co | T]:
        """Heal an Error into Content. Idle stays Idle."""

    @abstractmethod
    def recover_with(
        self, transform: Callable[[str], TriState[T]]
    ) -> TriState[T_co | T]:
        """Replace an Error with another state. Idle stays Idle."""

    # Observation

    def on_each(
        self,
        on_idle: Callable[[], object] = _noop,
        on_error: Callable[[str], object] = _noop,
        on_content: Callable[[T_co], object] = _noop,
    ) -> TriState[T_co]:
        """Run the callback matching this variant and return self."""
        self.fold(on_content, on_error, on_idle)
        return self

    def on_idle(self, effect: Callable[[], object]) -> TriState[T_co]:
        return self.on_each(on_idle=effect)

    def on_error(self, effect: Callable[[str], object]) -> TriState[T_co]:
        return self.on_each(on_error=effect)

    def on_content(self, effect: Callable[[T_co], object]) -> TriState[T_co]:
        return self.on_each(on_content=effect)

    # Combination

    def zip(self, other: TriState[U]) -> TriState[tuple[T_co, U]]:
        """Pair this state with ``other``.

        ``other`` is only consulted when self is Content, so an Idle or Error
        receiver wins regardless of what ``other`` holds.
        """
        return self.flat_map(lambda left: other.map(lambda right: (left, right)))

    def combine(
        self, other: TriState[U], transform: Callable[[T_co, U], R]
    ) -> TriState[R]:
        """Like ``zip``, but merge both payloads with ``transform``."""
        return self.flat_map(
            lambda left: other.map(lambda right: transform(left, right))
        )

    def flatten(self: TriState[TriState[T]]) -> TriState[T]:
        """Remove one level of nesting from a TriState of TriState."""
        return self.flat_map(_identity)


@dataclass(frozen=True, slots=True)
class Idle(TriState[Any]):
    """Operation not attempted yet, no result available."""

    def is_idle(self) -> bool:
        return True

    def is_error(self) -> bool:
        return False

    def is_content(self) -> bool:
        return False

    def map(self, transform: Callable[[Any], R]) -> TriState[R]:
        return self

    def flat_map(self, transform: Callable[[Any], TriState[R]]) -> TriState[R]:
        return self

    def fold(
        self,
        on_content: Callable[[Any], R],
        on_error: Callable[[str], R],
        on_idle: Callable[[], R],
    ) -> R:
        return on_idle()

    def get_or_none(self) -> None:
        return None

    def get_error_message(self) -> None:
        return None

    def recover(self, transform: Callable[[str], T]) -> TriState[T]:
        return self

    def recover_with(self, transform: Callable[[str], TriState[T]]) -> TriState[T]:
        return self


@dataclass(frozen=True, slots=True)
class Error(TriState[T_co]):
    """Operation attempted and failed. The message is the only diagnostic."""

    message: str

    def __post_init__(self) -> None:
        if not isinstance(self.message, str) or not self.message:
            raise ValueError(
                f"Error message must be a non-empty string, got {self.message!r}"
            )

    def is_idle(self) -> bool:
        return False

    def is_error(self) -> bool:
        return True

    def is_content(self) -> bool:
        return False

    def map(self, transform: Callable[[T_co], R]) -> TriState[R]:
        return Error(self.message)

    def flat_map(self, transform: Callable[[T_co], TriState[R]]) -> TriState[R]:
        return Error(self.message)

    def fold(
        self,
        on_content: Callable[[T_co], R],
        on_error: Callable[[str], R],
        on_idle: Callable[[], R],
    ) -> R:
        return on_error(self.message)

    def get_or_none(self) -> None:
        return None

    def get_error_message(self) -> str:
        return self.message

    def recover(self, transform: Callable[[str], T]) -> TriState[T]:
        return Content(transform(self.message))

    def recover_with(self, transform: Callable[[str], TriState[T]]) -> TriState[T]:
        return transform(self.message)


@dataclass(frozen=True, slots=True)
class Content(TriState[T_co]):
    """Operation succeeded and produced ``data``."""

    data: T_co

    def is_idle(self) -> bool:
        return False

    def is_error(self) -> bool:
        return False

    def is_content(self) -> bool:
        return True

    def map(self, transform: Callable[[T_co], R]) -> TriState[R]:
        return Content(transform(self.data))

    def flat_map(self, transform: Callable[[T_co], TriState[R]]) -> TriState[R]:
        result = transform(self.data)
        if not isinstance(result, TriState):
            raise TypeError(
                f"flat_map transform must return a TriState, got {type(result).__name__}"
            )
        return result

    def fold(
        self,
        on_content: Callable[[T_co], R],
        on_error: Callable[[str], R],
        on_idle: Callable[[], R],
    ) -> R:
        return on_content(self.data)

    def get_or_none(self) -> T_co:
        return self.data

    def get_error_message(self) -> None:
        return None

    def recover(self, transform: Callable[[str], T]) -> TriState[T_co]:
        return self

    def recover_with(self, transform: Callable[[str], TriState[T]]) -> TriState[T_co]:
        return self


_IDLE: Idle = Idle()


def idle() -> TriState[Any]:
    """Return the shared Idle state."""
    return _IDLE


def error(message: Optional[str] = None) -> TriState[Any]:
    """Create an Error, falling back to a generic message when none is given."""
    return Error(message or UNKNOWN_ERROR_MESSAGE)


def content(value: T) -> TriState[T]:
    return Content(value)


def pure(value: T) -> TriState[T]:
    """Monadic unit. Same as ``content``."""
    return content(value)
