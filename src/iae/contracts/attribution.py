"""Caller attribution for failing checks.

When a check fails we need two things:

1. The function whose precondition was violated. That is the function
   that built the chain, not the library itself.
2. The call site that passed the offending argument into that function.

Both come from the live frame stack. Every frame that belongs to this
package is skipped. Attribution only ever runs on the failure path.
"""

import inspect
from dataclasses import dataclass
from types import FrameType

from iae.contracts.base import require

_PACKAGE = __name__.partition(".")[0]


@dataclass(frozen=True)
class CallSite:
    """Where a failing check came from."""
    func_name: str
    file_name: str
    line: int


def _is_library_frame(frame: FrameType) -> bool:
    module = frame.f_globals.get("__name__", "")
    return module == _PACKAGE or module.startswith(_PACKAGE + ".")


def qualified_name(frame: FrameType) -> str:
    """Module-qualified name of the function running in ``frame``."""
    module = frame.f_globals.get("__name__", "<unknown>")
    return f"{module}.{frame.f_code.co_qualname}"


def attribute() -> CallSite:
    """Attribute a failing check to its function and call site.

    Returns
    -------
    CallSite
        ``func_name`` is the checked function, ``file_name`` and ``line``
        locate the statement that called it.

    Raises
    ------
    InternalFault
        If the frame stack is not available or too shallow.
    """
    frame = inspect.currentframe()
    require(frame is not None, "can't get callers")
    try:
        while frame is not None and _is_library_frame(frame):
            frame = frame.f_back
        require(frame is not None, "can't get callee")

        caller = frame.f_back
        require(caller is not None, "can't get caller")

        return CallSite(
            func_name=qualified_name(frame),
            file_name=caller.f_code.co_filename,
            line=caller.f_lineno,
        )
    finally:
        del frame
