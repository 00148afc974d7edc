"""EnvConfig: Deployment profile overrides from environment variables.

Build and deployment profiles set check modes without touching code::

    IAE_RELEASE=error IAE_DEBUG=off python -m myservice

Recognized variables: IAE_AXIS, IAE_RELEASE, IAE_DEBUG, IAE_EXPORTED,
IAE_NOT_EXPORTED, IAE_LOG_LEVEL. Values are as forgiving as UserConfig.
"""

import os
from typing import Mapping, Optional

from pydantic import Field, field_validator

from iae.contracts.categories import Axis
from iae.contracts.failure import CheckMode
from iae.schemas.base import (
    IaeBaseModel,
    LogLevel,
    normalize_axis,
    normalize_level,
    normalize_mode,
)

ENV_PREFIX = "IAE_"


class EnvConfig(IaeBaseModel):
    """Environment variable overrides. Priority between user and CLI config."""

    axis: Optional[Axis] = Field(None, alias="IAE_AXIS")
    release: Optional[CheckMode] = Field(None, alias="IAE_RELEASE")
    debug: Optional[CheckMode] = Field(None, alias="IAE_DEBUG")
    exported: Optional[CheckMode] = Field(None, alias="IAE_EXPORTED")
    not_exported: Optional[CheckMode] = Field(None, alias="IAE_NOT_EXPORTED")
    log_level: Optional[LogLevel] = Field(None, alias="IAE_LOG_LEVEL")

    model_config = IaeBaseModel.model_config.copy()
    # Unrelated IAE_* variables must not break startup
    model_config.update({"populate_by_name": True, "extra": "ignore"})

    @field_validator("release", "debug", "exported", "not_exported", mode="before")
    @classmethod
    def normalize_modes(cls, v):
        return normalize_mode(v)

    @field_validator("axis", mode="before")
    @classmethod
    def normalize_axis_name(cls, v):
        return normalize_axis(v)

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_level_name(cls, v):
        return normalize_level(v)

    @classmethod
    def from_environ(cls, environ: Optional[Mapping[str, str]] = None) -> "EnvConfig":
        """Build from ``environ`` (defaults to ``os.environ``).

        Empty variables count as unset.
        """
        environ = os.environ if environ is None else environ
        values = {
            key: value
            for key, value in environ.items()
            if key.startswith(ENV_PREFIX) and value.strip()
        }
        return cls.model_validate(values)

    def to_internal_overrides(self) -> dict:
        """Convert to nested PolicyConfig structure."""
        overrides = self.model_dump(
            include={"axis", "release", "debug", "exported", "not_exported"},
            exclude_none=True,
        )
        if self.log_level is not None:
            overrides["logging"] = {"level": self.log_level}
        return overrides
