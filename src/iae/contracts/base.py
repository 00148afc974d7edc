"""Internal invariant enforcement.

The require() function is the single enforcement mechanism for the
library's own invariants. It is NOT used for user preconditions (those
go through check chains and respect the configured modes).
"""

from iae.contracts.failure import InternalFault


def require(condition: bool, message: str) -> None:
    """Enforce an internal invariant of the library.

    Called where the library depends on its runtime environment, most
    notably on stack introspection. It is fail-fast: no recovery, no
    fallback, no policy lookup.

    Parameters
    ----------
    condition : bool
        The invariant that must be true. If False, InternalFault is raised.

    message : str
        Error message explaining the broken invariant (for debugging).

    Raises
    ------
    InternalFault
        If condition is False. This indicates a broken runtime.

    Examples
    --------
    >>> require(frame is not None, "can't get caller frame")
    """
    if not condition:
        raise InternalFault(message)
