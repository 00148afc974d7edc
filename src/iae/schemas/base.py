"""Base Pydantic model with strict defaults for iae configs.

All iae config schemas inherit from this base to ensure consistent
validation behavior across param, user, environment, CLI and internal
configs.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# Historical and shorthand spellings accepted in user-facing configs
_MODE_ALIASES = {
    "off": "disabled",
    "disable": "disabled",
    "none": "disabled",
    "report": "error",
    "report_error": "error",
    "reporterror": "error",
    "err": "error",
    "panic": "abort",
    "fatal": "abort",
}

_AXIS_ALIASES = {
    "release_debug": "release_debug",
    "releasedebug": "release_debug",
    "build": "release_debug",
    "visibility": "visibility",
    "exported": "visibility",
    "exported_not_exported": "visibility",
}


class IaeBaseModel(BaseModel):
    """Base model for all iae configuration schemas.

    Enforces strict validation:
    - No extra fields allowed
    - Validates assignments after initialization
    - Stores enum values (plain strings) rather than enum members
    - Strips whitespace from strings
    """

    model_config = ConfigDict(
        extra='forbid',           # Reject unknown fields
        validate_assignment=True, # Validate on field mutation
        use_enum_values=True,     # Convert enums to values
        str_strip_whitespace=True,# Strip whitespace from strings
    )


def _key(v: str) -> str:
    return v.strip().lower().replace("-", "_").replace("/", "_").replace(" ", "_")


def normalize_mode(v: Any) -> Any:
    """Map forgiving mode spellings ("OFF", "panic", ...) to CheckMode values."""
    if isinstance(v, str):
        key = _key(v)
        return _MODE_ALIASES.get(key, key)
    return v


def normalize_axis(v: Any) -> Any:
    """Map forgiving axis spellings ("release/debug", "exported") to Axis values."""
    if isinstance(v, str):
        key = _key(v)
        return _AXIS_ALIASES.get(key, key)
    return v


def normalize_level(v: Any) -> Any:
    """Upper-case log level names."""
    if isinstance(v, str):
        return v.strip().upper()
    return v
