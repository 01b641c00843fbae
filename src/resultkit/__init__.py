"""resultkit: success/failure outcomes as values.

Public API:
    - Success / Failure / Result: the two-case outcome type
    - from_value(), from_error(), from_optional(), attempt(): constructors
    - ResultProtocol: capability interface for result-like types
    - make_error(): errors tagged with their call site
"""

from __future__ import annotations

import logging

from resultkit.errors import (
    ProvenanceError,
    ResultkitError,
    errors_equal,
    failure_reason,
    help_anchor,
    localized_description,
    make_error,
    recovery_suggestion,
)
from resultkit.protocol import ResultProtocol, attempt_as, bind, lift, to_result
from resultkit.result import (
    Failure,
    Result,
    Success,
    attempt,
    from_error,
    from_optional,
    from_value,
)

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("resultkit")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("resultkit").addHandler(logging.NullHandler())

__all__ = [
    "Failure",
    "ProvenanceError",
    "Result",
    "ResultProtocol",
    "ResultkitError",
    "Success",
    "attempt",
    "attempt_as",
    "bind",
    "errors_equal",
    "failure_reason",
    "from_error",
    "from_optional",
    "from_value",
    "help_anchor",
    "lift",
    "localized_description",
    "make_error",
    "recovery_suggestion",
    "to_result",
]
