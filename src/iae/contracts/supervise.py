"""Top-level interception of aborts.

ArgumentAbort unwinds through ordinary error handling. Long-running
programs (servers, workers, pipelines) can put an abort_boundary around
each unit of work to log the abort and decide whether to stop.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from iae.contracts.failure import ArgumentAbort, IllegalArgumentError


logger = logging.getLogger(__name__)


class Supervision:
    """Outcome of a supervised block."""

    def __init__(self) -> None:
        self.failure: Optional[IllegalArgumentError] = None

    @property
    def aborted(self) -> bool:
        return self.failure is not None


@contextmanager
def abort_boundary(reraise: bool = False) -> Iterator[Supervision]:
    """Intercept ArgumentAbort raised inside the block.

    Parameters
    ----------
    reraise : bool, optional
        If True, log the abort and let it continue unwinding.

    Yields
    ------
    Supervision
        Holds the failure carried by the abort, if one occurred.

    Examples
    --------
    >>> with abort_boundary() as outcome:
    ...     widget.resize(-1, 10)
    >>> outcome.aborted
    True
    """
    outcome = Supervision()
    try:
        yield outcome
    except ArgumentAbort as abort:
        outcome.failure = abort.failure
        logger.critical("Argument check aborted: %s", abort.failure)
        if reraise:
            raise
