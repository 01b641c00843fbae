"""Test helpers (small, reusable fixtures and doubles).

Keep this file tiny and purpose-built: shared error fixtures and call
counters live here so individual suites stay focused on behavior.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from resultkit import Failure, Success


class SampleError(Exception):
    """Error with a fixed kind and the full set of description fields."""

    def __init__(self, kind: str) -> None:
        super().__init__(kind)
        self.kind = kind

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SampleError):
            return NotImplemented
        return self.kind == other.kind

    def __hash__(self) -> int:
        return hash(self.kind)

    @property
    def error_description(self) -> str:
        return "localized description"

    @property
    def failure_reason(self) -> str:
        return "failure reason"

    @property
    def recovery_suggestion(self) -> str:
        return "recovery suggestion"

    @property
    def help_anchor(self) -> str:
        return "help anchor"


ERROR_A = SampleError("a")
ERROR_B = SampleError("b")

SUCCESS = Success("success")
FAILURE = Failure(ERROR_A)
FAILURE_2 = Failure(ERROR_B)


def try_is_success(text: str | None) -> str:
    """Return ``text`` when it is exactly "success", otherwise raise ERROR_A."""
    if text is None or text != "success":
        raise ERROR_A
    return text


@dataclass
class CallCounter:
    """Callable double that records invocations and returns a fixed value."""

    returns: Any = None
    calls: int = 0
    args: list[tuple[Any, ...]] = field(default_factory=list)

    def __call__(self, *args: Any) -> Any:
        self.calls += 1
        self.args.append(args)
        return self.returns
