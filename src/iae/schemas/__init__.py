"""Pydantic configuration schemas for iae.

This module provides strictly typed configuration models for check
modes. All configuration validation, coercion, and normalization happens
at schema validation time via Pydantic.

Exports
-------
resolve_config : function
    Single entrypoint for policy resolution
PolicyConfig : class
    Fully validated, immutable runtime policy
ParamConfig : class
    Library defaults (complete)
UserConfig : class
    User-facing configuration (forgiving, minimal)
EnvConfig : class
    Deployment profile overrides from IAE_* environment variables
CLIConfig : class
    Command-line overrides
"""

from iae.schemas.resolve import resolve_config
from iae.schemas.internal import PolicyConfig
from iae.schemas.param import ParamConfig
from iae.schemas.user import UserConfig
from iae.schemas.env import EnvConfig
from iae.schemas.cli import CLIConfig

__all__ = [
    'resolve_config',
    'PolicyConfig',
    'ParamConfig',
    'UserConfig',
    'EnvConfig',
    'CLIConfig',
]
