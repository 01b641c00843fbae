"""Capability protocol for result-like types.

Any type that can be built from a value, built from an error, and project its
current :data:`~resultkit.result.Result` satisfies :class:`ResultProtocol`.
The helpers below are written against the protocol only, so they work for
``Success``/``Failure`` and for domain wrappers alike.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Self, runtime_checkable

from resultkit.result import Failure, Success, attempt

if TYPE_CHECKING:
    from collections.abc import Callable

    from resultkit.result import Result


@runtime_checkable
class ResultProtocol[T](Protocol):
    """Structural interface generic result algorithms rely on."""

    @classmethod
    def from_value(cls, value: T) -> Self: ...

    @classmethod
    def from_error(cls, error: BaseException) -> Self: ...

    @property
    def result(self) -> Result[T]: ...


def to_result[T](subject: ResultProtocol[T]) -> Result[T]:
    """Project ``subject`` onto a plain ``Success`` or ``Failure``."""
    return subject.result


def lift[T, K: ResultProtocol](kind: type[K], result: Result[T]) -> K:
    """Rebuild ``result`` as an instance of ``kind``."""
    match result:
        case Success(value):
            return kind.from_value(value)
        case Failure(error):
            return kind.from_error(error)
    raise TypeError(f"Expected Success or Failure, got {type(result).__name__}")


def attempt_as[T, K: ResultProtocol](kind: type[K], f: Callable[[], T]) -> K:
    """Run ``f`` and wrap its outcome in ``kind``."""
    return lift(kind, attempt(f))


def bind[T, U, K: ResultProtocol](
    subject: K, transform: Callable[[T], ResultProtocol[U]]
) -> K:
    """Chain ``transform`` through ``subject``, keeping ``subject``'s type.

    A failure short-circuits: ``transform`` is not called and the error is
    re-wrapped unchanged.
    """
    outcome = subject.result.flat_map(lambda value: transform(value).result)
    return lift(type(subject), outcome)
