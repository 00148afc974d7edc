"""Single-shot argument checks.

For functions with exactly one precondition a chain is overkill::

    def sqrt(x):
        err = check_arg(x >= 0, 1, x, ">=0")
        if err is not None:
            raise err

A passing check returns immediately: no policy lookup, no attribution,
no allocation.
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


def check_arg(
    check: bool,
    argument: int,
    value: Any,
    condition: str,
    policy: Optional[PolicyConfig] = None,
) -> Optional[IllegalArgumentError]:
    """Check one argument as a release check.

    Parameters
    ----------
    check : bool
        The already evaluated precondition (e.g. ``a > 10``).
    argument : int
        1-based position of the argument, 0 for the receiver.
    value : Any
        The argument under test.
    condition : str
        Very brief description of the precondition.
    policy : PolicyConfig, optional
        Policy snapshot to evaluate against. Defaults to the process-wide
        policy.

    Returns
    -------
    IllegalArgumentError or None
        The failure if the check failed and its category reports errors.

    Raises
    ------
    ArgumentAbort
        If the check failed and its category is configured to abort.
    ValueError
        If the check failed and ``argument`` is not an int >= 0.
    """
    if check:
        return None
    return _fail(None, argument, value, condition, policy)


def check_arg_debug(
    check: bool,
    argument: int,
    value: Any,
    condition: str,
    policy: Optional[PolicyConfig] = None,
) -> Optional[IllegalArgumentError]:
    """Check one argument as a debug check. See check_arg()."""
    if check:
        return None
    return _fail(Category.DEBUG, argument, value, condition, policy)


def _fail(
    requested: Optional[Category],
    argument: int,
    value: Any,
    condition: str,
    policy: Optional[PolicyConfig],
) -> Optional[IllegalArgumentError]:
    policy = policy if policy is not None else get_policy()
    classifier = classifier_for(policy.axis)

    # The visibility axis ignores the requested category.
    category = requested if classifier.alternate is not None else None
    if category is None:
        category = classifier.initial

    if all(
        policy.mode_for(candidate) is CheckMode.DISABLED
        for candidate in classifier.reachable(category)
    ):
        return None

    validate_position(argument)
    site = attribute()
    category = classifier.classify(category, site.func_name)
    mode = policy.mode_for(category)
    if mode is CheckMode.DISABLED:
        return None

    failure = IllegalArgumentError(
        func_name=site.func_name,
        file_name=site.file_name,
        line=site.line,
        argument=argument,
        value=value,
        condition=condition,
    )
    logger.debug(
        "Check failed (%s, %s): %s", category.value, mode.value, failure,
        extra=failure.to_dict(),
    )

    if mode is CheckMode.ABORT:
        raise ArgumentAbort(failure)
    return failure
