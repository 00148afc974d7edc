"""ParamConfig: Library defaults for iae.

ALL policy parameters must have defaults here. No runtime code should
define fallback values - this is the single source of truth for defaults.

The defaults are strict where code is likely still in development (debug
checks, not exported functions abort) and recoverable where it is meant
for production (release checks, exported functions report errors).
"""

from pydantic import Field

from iae.contracts.categories import Axis
from iae.contracts.failure import CheckMode
from iae.schemas.base import IaeBaseModel, LogLevel


class LoggingConfig(IaeBaseModel):
    """Logging configuration for tools built on iae."""
    level: LogLevel = "WARNING"


class ParamConfig(IaeBaseModel):
    """Complete default policy."""
    axis: Axis = Field(Axis.RELEASE_DEBUG, description="Which pair of categories is in use")
    release: CheckMode = Field(CheckMode.REPORT_ERROR, description="Mode for release checks")
    debug: CheckMode = Field(CheckMode.ABORT, description="Mode for debug checks")
    exported: CheckMode = Field(CheckMode.REPORT_ERROR, description="Mode for exported functions")
    not_exported: CheckMode = Field(CheckMode.ABORT, description="Mode for not exported functions")
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
