"""Result type for explicit, composable failure handling.

A ``Result[T]`` is either ``Success(value)`` or ``Failure(error)``. Failures
are ordinary exception instances kept as data: combinators propagate them
untouched, and ``dematerialize`` is the one place they are raised again.

    >>> from_value(3).map(lambda n: n * 2)
    Success(6)
    >>> attempt(lambda: int("x")).recover(lambda: 0)
    0
"""

from __future__ import annotations

import dataclasses
import typing

from resultkit.errors import errors_equal

if typing.TYPE_CHECKING:
    from collections.abc import Callable

T = typing.TypeVar("T")


@dataclasses.dataclass(frozen=True, slots=True)
class Success[TSuccess]:
    """A successful outcome holding a value."""

    value: TSuccess

    def __repr__(self) -> str:
        return f"Success({self.value!r})"

    @classmethod
    def from_value[V](cls, value: V) -> Success[V]:
        return Success(value)

    @classmethod
    def from_error(cls, error: BaseException) -> Failure:
        return Failure(error)

    @property
    def error(self) -> None:
        return None

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    @property
    def result(self) -> Success[TSuccess]:
        return self

    def map[U](self, transform: Callable[[TSuccess], U]) -> Result[U]:
        """Apply ``transform`` to the value and wrap the outcome."""
        return self.flat_map(lambda value: Success(transform(value)))

    def flat_map[U](self, transform: Callable[[TSuccess], Result[U]]) -> Result[U]:
        """Return ``transform(value)`` as is."""
        return transform(self.value)

    def fanout[U](
        self, other: Result[U] | Callable[[], Result[U]]
    ) -> Result[tuple[TSuccess, U]]:
        """Pair this value with ``other``'s, evaluating ``other`` now."""
        return self.flat_map(
            lambda left: _force(other).map(lambda right: (left, right))
        )

    def try_map[U](self, transform: Callable[[TSuccess], U]) -> Result[U]:
        """Like ``map``, capturing an exception raised by ``transform``."""
        return self.flat_map(lambda value: attempt(lambda: transform(value)))

    def recover(self, fallback: Callable[[], TSuccess]) -> TSuccess:
        return self.value

    def recover_with(
        self, fallback: Result[TSuccess] | Callable[[], Result[TSuccess]]
    ) -> Result[TSuccess]:
        return self

    def analysis[R](
        self,
        if_success: Callable[[TSuccess], R],
        if_failure: Callable[[BaseException], R],
    ) -> R:
        return if_success(self.value)

    def dematerialize(self) -> TSuccess:
        return self.value


@dataclasses.dataclass(frozen=True, slots=True, eq=False)
class Failure:
    """A failed outcome holding the exception that caused it.

    The error is stored as given, never wrapped. Two failures compare equal
    when their errors do under :func:`resultkit.errors.errors_equal`.
    """

    error: BaseException

    def __post_init__(self) -> None:
        if not isinstance(self.error, BaseException):
            raise TypeError(
                f"Failure requires an exception instance, got {type(self.error).__name__}"
            )

    @classmethod
    def from_value[V](cls, value: V) -> Success[V]:
        return Success(value)

    @classmethod
    def from_error(cls, error: BaseException) -> Failure:
        return Failure(error)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Failure):
            return NotImplemented
        return errors_equal(self.error, other.error)

    def __hash__(self) -> int:
        # Must agree with structural error equality.
        return hash(Failure)

    def __repr__(self) -> str:
        return f"Failure({self.error!r})"

    @property
    def value(self) -> None:
        return None

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    @property
    def result(self) -> Failure:
        return self

    def map(self, transform: Callable[[typing.Any], typing.Any]) -> Failure:
        return self

    def flat_map(self, transform: Callable[[typing.Any], typing.Any]) -> Failure:
        return self

    def fanout(self, other: typing.Any) -> Failure:
        """Short-circuit: ``other`` is never evaluated."""
        return self

    def try_map(self, transform: Callable[[typing.Any], typing.Any]) -> Failure:
        return self

    def recover[V](self, fallback: Callable[[], V]) -> V:
        """Return ``fallback()``."""
        return fallback()

    def recover_with[V](self, fallback: Result[V] | Callable[[], Result[V]]) -> Result[V]:
        """Return ``fallback``, calling it first when it is a thunk."""
        return _force(fallback)

    def analysis[R](
        self,
        if_success: Callable[[typing.Any], R],
        if_failure: Callable[[BaseException], R],
    ) -> R:
        return if_failure(self.error)

    def dematerialize(self) -> typing.NoReturn:
        """Raise the stored error."""
        raise self.error


Result = Success[T] | Failure


# --- Constructors ---


def from_value[V](value: V) -> Success[V]:
    """Wrap ``value`` in a ``Success``."""
    return Success(value)


def from_error(error: BaseException) -> Failure:
    """Wrap ``error`` in a ``Failure``."""
    return Failure(error)


def from_optional[V](
    value: V | None, fail_with: Callable[[], BaseException]
) -> Result[V]:
    """Build a result from an optional value.

    ``fail_with`` is called only when ``value`` is None, and at most once.
    """
    if value is not None:
        return Success(value)
    return Failure(fail_with())


def attempt[V](f: Callable[[], V]) -> Result[V]:
    """Call ``f`` and capture its return value or the exception it raises.

    Only ``Exception`` subclasses are captured; ``KeyboardInterrupt`` and
    ``SystemExit`` propagate.
    """
    try:
        return Success(f())
    except Exception as exc:
        return Failure(exc)


def _force[V](other: Result[V] | Callable[[], Result[V]]) -> Result[V]:
    if isinstance(other, Success | Failure):
        return other
    return other()
