"""UserConfig: Forgiving, minimal user-facing configuration.

This schema accepts user inputs in a variety of formats, with aliases
for common naming patterns (e.g., RELEASE → release, NotExported →
not_exported) and historical mode names ("off", "panic").

UserConfig is intentionally minimal - users only specify what they want
to override from the library defaults.
"""

from typing import Optional

from pydantic import AliasChoices, Field, field_validator

from iae.contracts.categories import Axis
from iae.contracts.failure import CheckMode
from iae.schemas.base import (
    IaeBaseModel,
    LogLevel,
    normalize_axis,
    normalize_level,
    normalize_mode,
)


class UserLoggingConfig(IaeBaseModel):
    """User-facing logging config."""
    level: Optional[LogLevel] = None

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level_name(cls, v):
        return normalize_level(v)


class UserConfig(IaeBaseModel):
    """User-facing configuration schema.

    Usage
    -----
        user_cfg = UserConfig(RELEASE="off", DEBUG="panic")

        # Or from a config file dict
        user_cfg = UserConfig.model_validate({"NotExported": "error"})

        policy = resolve_config(ParamConfig(), user_cfg)
    """

    axis: Optional[Axis] = Field(None, validation_alias=AliasChoices("axis", "AXIS", "Axis"))
    release: Optional[CheckMode] = Field(
        None, validation_alias=AliasChoices("release", "RELEASE", "Release")
    )
    debug: Optional[CheckMode] = Field(
        None, validation_alias=AliasChoices("debug", "DEBUG", "Debug")
    )
    exported: Optional[CheckMode] = Field(
        None, validation_alias=AliasChoices("exported", "EXPORTED", "Exported")
    )
    not_exported: Optional[CheckMode] = Field(
        None,
        validation_alias=AliasChoices("not_exported", "NOT_EXPORTED", "NotExported"),
    )
    log_level: Optional[LogLevel] = Field(
        None, validation_alias=AliasChoices("log_level", "LOG_LEVEL")
    )

    # Nested overrides (advanced users)
    logging: Optional[UserLoggingConfig] = None

    model_config = IaeBaseModel.model_config.copy()
    # Spellings are forgiving, unknown keys are not
    model_config.update({"populate_by_name": True})

    @field_validator("release", "debug", "exported", "not_exported", mode="before")
    @classmethod
    def normalize_modes(cls, v):
        """Accept "OFF", "Error", "panic" and friends."""
        return normalize_mode(v)

    @field_validator("axis", mode="before")
    @classmethod
    def normalize_axis_name(cls, v):
        return normalize_axis(v)

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_level_name(cls, v):
        return normalize_level(v)

    def to_internal_overrides(self) -> dict:
        """Convert flat UserConfig to nested PolicyConfig structure.

        Returns
        -------
        dict
            Nested dictionary matching PolicyConfig structure
        """
        overrides = self.model_dump(
            include={"axis", "release", "debug", "exported", "not_exported"},
            exclude_none=True,
        )

        logging_cfg = {}
        if self.log_level is not None:
            logging_cfg["level"] = self.log_level

        # Merge with explicit logging config
        if self.logging is not None:
            logging_cfg.update(self.logging.model_dump(exclude_none=True))

        if logging_cfg:
            overrides["logging"] = logging_cfg

        return overrides
