"""Argument contracts: check chains, single-shot checks and their failures.

This package turns function preconditions into consistent errors.
A failing check either returns an IllegalArgumentError or aborts the
call stack with ArgumentAbort, depending on the configured mode of the
check's category.

Key principle:
- Pydantic validates configuration
- Check chains validate arguments
- require() validates the library's own environment
"""

from iae.contracts.failure import (
    ArgumentAbort,
    CheckMode,
    IllegalArgumentError,
    InternalFault,
)
from iae.contracts.categories import Axis, Category, is_exported
from iae.contracts.base import require
from iae.contracts.attribution import CallSite, attribute
from iae.contracts.chain import Chain, check
from iae.contracts.single import check_arg, check_arg_debug
from iae.contracts.supervise import Supervision, abort_boundary

__all__ = [
    "ArgumentAbort",
    "CheckMode",
    "IllegalArgumentError",
    "InternalFault",
    "Axis",
    "Category",
    "is_exported",
    "require",
    "CallSite",
    "attribute",
    "Chain",
    "check",
    "check_arg",
    "check_arg_debug",
    "Supervision",
    "abort_boundary",
]
