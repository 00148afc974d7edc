"""PolicyConfig: Authoritative runtime policy.

This is the ONLY config schema that check chains see. It is fully
validated, normalized and frozen: a chain holds on to the snapshot it
started with, so a policy update never changes a check in flight.
"""

from pydantic import ConfigDict

from iae.contracts.categories import Axis, Category
from iae.contracts.failure import CheckMode
from iae.schemas.base import IaeBaseModel, LogLevel


class InternalLoggingConfig(IaeBaseModel):
    """Runtime logging configuration."""
    level: LogLevel


class PolicyConfig(IaeBaseModel):
    """Immutable policy snapshot.

    Usage
    -----
    Chains look up the mode of a category directly::

        mode = policy.mode_for(Category.DEBUG)

    Only the two settings of the active axis are consulted. The settings
    of the other axis are carried along unused.
    """

    axis: Axis
    release: CheckMode
    debug: CheckMode
    exported: CheckMode
    not_exported: CheckMode
    logging: InternalLoggingConfig

    model_config = ConfigDict(
        extra='forbid',
        validate_assignment=True,
        use_enum_values=True,
        str_strip_whitespace=True,
        frozen=True,  # Immutable after construction
    )

    def mode_for(self, category) -> CheckMode:
        """Return the configured mode for ``category``."""
        return CheckMode(getattr(self, Category(category).value))

    @property
    def active_settings(self) -> dict:
        """The two settings the active axis consults, by category name."""
        if Axis(self.axis) is Axis.VISIBILITY:
            categories = (Category.EXPORTED, Category.NOT_EXPORTED)
        else:
            categories = (Category.RELEASE, Category.DEBUG)
        return {c.value: self.mode_for(c).value for c in categories}
