"""CLIConfig: Command-line overrides.

Highest priority in config resolution. This schema handles arguments
parsed by argparse in iae.cli.
"""

from typing import Optional

from pydantic import field_validator, model_validator

from iae.contracts.categories import Axis
from iae.contracts.failure import CheckMode
from iae.schemas.base import (
    IaeBaseModel,
    LogLevel,
    normalize_axis,
    normalize_level,
    normalize_mode,
)


class CLIConfig(IaeBaseModel):
    """Command-line configuration overrides.

    Notes
    -----
    If only visibility settings (exported / not_exported) are given and
    no axis, the axis is set to "visibility": asking for them means the
    visibility axis is wanted. The same holds for release / debug.
    Mixing both without an explicit axis is rejected.
    """

    axis: Optional[Axis] = None
    release: Optional[CheckMode] = None
    debug: Optional[CheckMode] = None
    exported: Optional[CheckMode] = None
    not_exported: Optional[CheckMode] = None
    log_level: Optional[LogLevel] = None

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

    @model_validator(mode="after")
    def infer_axis_from_settings(self):
        """Pick the axis implied by the given settings."""
        if self.axis is not None:
            return self

        build = self.release is not None or self.debug is not None
        visibility = self.exported is not None or self.not_exported is not None
        if build and visibility:
            raise ValueError(
                "release/debug and exported/not_exported settings given "
                "without an axis; pass --axis to choose one"
            )
        if visibility:
            self.axis = Axis.VISIBILITY.value
        elif build:
            self.axis = Axis.RELEASE_DEBUG.value
        return self

    def to_internal_overrides(self) -> dict:
        """Convert CLI config to PolicyConfig structure.

        Returns
        -------
        dict
            Nested dictionary matching PolicyConfig structure
        """
        overrides = self.model_dump(
            include={"axis", "release", "debug", "exported", "not_exported"},
            exclude_none=True,
        )
        if self.log_level is not None:
            overrides["logging"] = {"level": self.log_level}
        return overrides
