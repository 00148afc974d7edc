"""Chains of argument checks.

A chain is started with check() at the top of a function, followed by any
number of arg()/recv() calls and finished with err()::

    def resize(self, width, height):
        err = (
            check()
            .recv(self.open, self, "open")
            .arg(width > 0, 1, width, ">0")
            .arg(height > 0, 2, height, ">0")
            .err()
        )
        if err is not None:
            return err

The first failing check wins. Every later call is a no-op, so the
stored failure never changes once set.
"""

import logging
from typing import Any, Optional

from iae.contracts.attribution import attribute
from iae.contracts.categories import Category, classifier_for
from iae.contracts.failure import (
    ArgumentAbort,
    CheckMode,
    IllegalArgumentError,
    validate_position,
)
from iae.policy import get_policy
from iae.schemas.internal import PolicyConfig


logger = logging.getLogger(__name__)


def check(policy: Optional[PolicyConfig] = None) -> "Chain":
    """Start a chain of argument checks.

    Parameters
    ----------
    policy : PolicyConfig, optional
        Policy snapshot to evaluate against. Defaults to the process-wide
        policy at the time of the call.

    Returns
    -------
    Chain
        A new chain, owned by the calling function.
    """
    return Chain(policy if policy is not None else get_policy())


class Chain:
    """Short-circuiting accumulator of argument checks.

    The chain reads the policy once, at creation. Checks in one chain all
    belong to the same function, so the category derived from the
    function name (visibility axis) is computed once and cached.

    Do not share a chain between function invocations or threads.
    """

    def __init__(self, policy: PolicyConfig):
        self._policy = policy
        self._classifier = classifier_for(policy.axis)
        self._category: Optional[Category] = self._classifier.initial
        self._switched = False
        self._failure: Optional[IllegalArgumentError] = None
        self._execute = self._enabled()

    def _enabled(self) -> bool:
        return any(
            self._policy.mode_for(category) is not CheckMode.DISABLED
            for category in self._classifier.reachable(self._category)
        )

    @property
    def failed(self) -> bool:
        return self._failure is not None

    @property
    def category(self) -> Optional[Category]:
        """Category of the following checks, None while not yet known."""
        return self._category

    def arg(self, check: bool, argument: int, value: Any, condition: str) -> "Chain":
        """Check one argument of the calling function.

        Parameters
        ----------
        check : bool
            The already evaluated precondition (e.g. ``0 < a < 10``).
        argument : int
            1-based position of the argument in the parameter list. 0
            denotes the receiver.
        value : Any
            The argument under test. Put into the error message.
        condition : str
            Very brief description of the precondition (e.g. ``"0<a<10"``).

        Returns
        -------
        Chain
            This chain, for further checks.

        Raises
        ------
        ArgumentAbort
            If the check fails and its category is configured to abort.
        ValueError
            If the check fails and ``argument`` is not an int >= 0.
        """
        if self._failure is not None or not self._execute or check:
            return self

        self._process(validate_position(argument), value, condition)
        return self

    def recv(self, check: bool, value: Any, condition: str) -> "Chain":
        """Check the receiver (``self``) of the calling method."""
        if self._failure is not None or not self._execute or check:
            return self

        self._process(0, value, condition)
        return self

    def debug(self) -> "Chain":
        """Treat the following checks as debug checks.

        Only meaningful on the release/debug axis, and only once: the
        category never switches back.
        """
        alternate = self._classifier.alternate
        if alternate is None or self._switched:
            return self

        self._switched = True
        self._category = alternate
        if self._failure is None:
            self._execute = self._enabled()
        return self

    def abort(self) -> "Chain":
        """Escalate a pending failure to an abort, whatever the policy says.

        Raises
        ------
        ArgumentAbort
            If a previous check in this chain failed.
        """
        if self._failure is not None:
            raise ArgumentAbort(self._failure)
        return self

    def err(self) -> Optional[IllegalArgumentError]:
        """Return the first failure of the chain, or None."""
        return self._failure

    def raise_if_failed(self) -> None:
        """Raise the first failure of the chain as an ordinary exception."""
        if self._failure is not None:
            raise self._failure

    def _process(self, argument: int, value: Any, condition: str) -> None:
        site = attribute()

        category = self._classifier.classify(self._category, site.func_name)
        self._category = category
        mode = self._policy.mode_for(category)
        if mode is CheckMode.DISABLED:
            self._execute = False
            return

        failure = IllegalArgumentError(
            func_name=site.func_name,
            file_name=site.file_name,
            line=site.line,
            argument=argument,
            value=value,
            condition=condition,
        )
        self._failure = failure
        self._execute = False
        logger.debug(
            "Check failed (%s, %s): %s", category.value, mode.value, failure,
            extra=failure.to_dict(),
        )

        if mode is CheckMode.ABORT:
            raise ArgumentAbort(failure)
