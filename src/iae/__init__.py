"""`iae` - Illegal Argument Errors: consistent precondition checks.

Subpackages:
- contracts: Check chains, single-shot checks, failures, attribution
- schemas: Pydantic policy configuration
- cli: Config file loading and the iae-policy command

Example::

    from iae import check

    def scale(factor):
        err = check().arg(factor > 0, 1, factor, ">0").err()
        if err is not None:
            return err
"""

__version__ = "0.2.0"

from iae.contracts import (
    ArgumentAbort,
    Axis,
    Category,
    Chain,
    CheckMode,
    IllegalArgumentError,
    InternalFault,
    Supervision,
    abort_boundary,
    check,
    check_arg,
    check_arg_debug,
)
from iae.policy import (
    PolicyStore,
    configure,
    get_policy,
    get_store,
    policy_override,
    reset_policy,
)
from iae.schemas import PolicyConfig, resolve_config
from iae.cli import configure_from_file

__all__ = [
    "ArgumentAbort",
    "Axis",
    "Category",
    "Chain",
    "CheckMode",
    "IllegalArgumentError",
    "InternalFault",
    "Supervision",
    "abort_boundary",
    "check",
    "check_arg",
    "check_arg_debug",
    "PolicyStore",
    "configure",
    "get_policy",
    "get_store",
    "policy_override",
    "reset_policy",
    "PolicyConfig",
    "resolve_config",
    "configure_from_file",
]
