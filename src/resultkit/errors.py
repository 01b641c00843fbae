"""Exception hierarchy and provenance errors for resultkit."""

from __future__ import annotations

import inspect
import logging
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Literal

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)

DEFAULT_ERROR_DOMAIN = "com.antitypical.Result"

# Keys for the optional textual fields an error may carry in ``user_info``.
DESCRIPTION_KEY = "description"
FAILURE_REASON_KEY = "failure_reason"
RECOVERY_SUGGESTION_KEY = "recovery_suggestion"
HELP_ANCHOR_KEY = "help_anchor"

EqualityMode = Literal["structural", "identity"]


class ResultkitError(Exception):
    """Base exception for all resultkit errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


def function_key(domain: str = DEFAULT_ERROR_DOMAIN) -> str:
    """Return the ``user_info`` key holding the source function name."""
    return f"{domain}.function"


def file_key(domain: str = DEFAULT_ERROR_DOMAIN) -> str:
    """Return the ``user_info`` key holding the source file path."""
    return f"{domain}.file"


def line_key(domain: str = DEFAULT_ERROR_DOMAIN) -> str:
    """Return the ``user_info`` key holding the source line number."""
    return f"{domain}.line"


class ProvenanceError(ResultkitError):
    """An error tagged with the call site that constructed it.

    Carries a domain identifier, a numeric code and a read-only ``user_info``
    mapping. Errors built by :func:`make_error` store the originating
    function, file and line under domain-scoped keys and, when given, the
    message under ``"description"``.
    """

    def __init__(
        self,
        domain: str,
        code: int = 0,
        user_info: Mapping[str, Any] | None = None,
        *,
        hint: str | None = None,
    ) -> None:
        self.domain = domain
        self.code = code
        self.user_info: Mapping[str, Any] = MappingProxyType(dict(user_info or {}))
        message = self.user_info.get(DESCRIPTION_KEY)
        super().__init__(message or f"{domain} error {code}", hint=hint)

    @property
    def message(self) -> str | None:
        return self.user_info.get(DESCRIPTION_KEY)

    @property
    def function(self) -> str | None:
        return self.user_info.get(function_key(self.domain))

    @property
    def file(self) -> str | None:
        return self.user_info.get(file_key(self.domain))

    @property
    def line(self) -> int | None:
        return self.user_info.get(line_key(self.domain))

    @property
    def error_description(self) -> str | None:
        return self.message

    @property
    def failure_reason(self) -> str | None:
        return self.user_info.get(FAILURE_REASON_KEY)

    @property
    def recovery_suggestion(self) -> str | None:
        return self.user_info.get(RECOVERY_SUGGESTION_KEY)

    @property
    def help_anchor(self) -> str | None:
        return self.user_info.get(HELP_ANCHOR_KEY)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ProvenanceError):
            return NotImplemented
        return (
            type(self) is type(other)
            and self.domain == other.domain
            and self.code == other.code
            and dict(self.user_info) == dict(other.user_info)
        )

    def __hash__(self) -> int:
        return hash((type(self), self.domain, self.code))

    def __reduce__(self) -> tuple[Any, ...]:
        # BaseException pickles via ``args``, which holds only the message.
        return (
            type(self),
            (self.domain, self.code, dict(self.user_info)),
            {"hint": self.hint},
        )

    def __repr__(self) -> str:
        return (
            f"ProvenanceError(domain={self.domain!r}, code={self.code}, "
            f"user_info={dict(self.user_info)!r})"
        )


def make_error(
    message: str | None = None,
    *,
    function: str | None = None,
    file: str | None = None,
    line: int | None = None,
    stacklevel: int = 1,
    full_path: bool = True,
) -> ProvenanceError:
    """Construct a :class:`ProvenanceError` describing the caller's location.

    Args:
        message: Optional human-readable message, stored under
            ``"description"`` only when given.
        function: Overrides the captured function name.
        file: Overrides the captured file path.
        line: Overrides the captured line number.
        stacklevel: Which frame to attribute the error to; ``1`` is the
            direct caller, ``2`` its caller, and so on.
        full_path: When False, only the file's basename is recorded.

    Returns:
        A ProvenanceError in :data:`DEFAULT_ERROR_DOMAIN` with code 0.
    """
    if function is None or file is None or line is None:
        captured_function, captured_file, captured_line = _caller_location(
            stacklevel + 1
        )
        function = captured_function if function is None else function
        file = captured_file if file is None else file
        line = captured_line if line is None else line
    if not full_path:
        file = Path(file).name

    domain = DEFAULT_ERROR_DOMAIN
    user_info: dict[str, Any] = {
        function_key(domain): function,
        file_key(domain): file,
        line_key(domain): line,
    }
    if message is not None:
        user_info[DESCRIPTION_KEY] = message

    logger.debug("Constructed provenance error at %s:%s in %s", file, line, function)
    return ProvenanceError(domain, 0, user_info)


def _caller_location(depth: int) -> tuple[str, str, int]:
    """Return ``(function, file, line)`` for the frame ``depth`` levels up."""
    frame = inspect.currentframe()
    try:
        for _ in range(depth):
            if frame is None:
                break
            frame = frame.f_back
        if frame is None:
            return "<unknown>", "<unknown>", 0
        code = frame.f_code
        return code.co_qualname, code.co_filename, frame.f_lineno
    finally:
        del frame


# --- Description delegation ---


def _field(error: BaseException, attr: str, key: str) -> str | None:
    value = getattr(error, attr, None)
    if value is None:
        user_info = getattr(error, "user_info", None)
        if user_info is not None and hasattr(user_info, "get"):
            value = user_info.get(key)
    return value


def localized_description(error: BaseException) -> str:
    """Return the error's description, falling back to ``str`` and type name."""
    description = _field(error, "error_description", DESCRIPTION_KEY)
    if description is not None:
        return description
    return str(error) or type(error).__name__


def failure_reason(error: BaseException) -> str | None:
    """Return the error's failure reason, or None when it has none."""
    return _field(error, "failure_reason", FAILURE_REASON_KEY)


def recovery_suggestion(error: BaseException) -> str | None:
    """Return the error's recovery suggestion, or None when it has none."""
    return _field(error, "recovery_suggestion", RECOVERY_SUGGESTION_KEY)


def help_anchor(error: BaseException) -> str | None:
    """Return the error's help anchor, or None when it has none."""
    return _field(error, "help_anchor", HELP_ANCHOR_KEY)


# --- Equality ---


def errors_equal(
    left: BaseException, right: BaseException, *, mode: EqualityMode = "structural"
) -> bool:
    """Compare two errors under a fixed equality contract.

    The outcome depends only on the two errors and ``mode``.
    ``identity`` honours only ``is`` and the errors' own ``__eq__``.
    ``structural`` (the default) additionally treats errors of the same concrete type with
    equal ``args`` and equal instance attributes as equal.
    """
    if left is right:
        return True
    if left == right:
        return True
    if mode == "identity":
        return False
    return (
        type(left) is type(right)
        and left.args == right.args
        and _attributes(left) == _attributes(right)
    )


def _attributes(error: BaseException) -> dict[str, Any]:
    attrs = getattr(error, "__dict__", {})
    return {k: v for k, v in attrs.items() if not k.startswith("__")}
