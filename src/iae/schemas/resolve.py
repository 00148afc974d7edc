"""Configuration resolution and merging logic.

This module provides the single entrypoint for policy resolution:
resolve_config(). It merges ParamConfig, UserConfig, EnvConfig and
CLIConfig in the correct precedence order and returns a frozen
PolicyConfig.

Precedence (highest to lowest):
1. CLIConfig (command-line overrides)
2. EnvConfig (deployment profile)
3. UserConfig (user file)
4. ParamConfig (library defaults)
"""

from typing import Optional, Union

from iae.schemas.cli import CLIConfig
from iae.schemas.env import EnvConfig
from iae.schemas.internal import PolicyConfig
from iae.schemas.param import ParamConfig
from iae.schemas.user import UserConfig


def deep_merge(base: dict, *overrides: dict) -> dict:
    """Deep merge multiple dictionaries.

    Later dictionaries override earlier ones. Nested dictionaries are
    merged recursively; other values are replaced.

    Parameters
    ----------
    base : dict
        Base dictionary (lowest priority)
    *overrides : dict
        Override dictionaries (higher priority, left to right)

    Returns
    -------
    dict
        Merged dictionary

    Examples
    --------
    >>> base = {"release": "error", "logging": {"level": "WARNING"}}
    >>> override = {"logging": {"level": "DEBUG"}, "debug": "disabled"}
    >>> deep_merge(base, override)
    {'release': 'error', 'logging': {'level': 'DEBUG'}, 'debug': 'disabled'}
    """
    result = base.copy()

    for override in overrides:
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                # Recursive merge for nested dicts
                result[key] = deep_merge(result[key], value)
            else:
                # Replace value
                result[key] = value

    return result


def _as_model(cfg, model):
    if cfg is None or (isinstance(cfg, dict) and not cfg):
        return model()
    if isinstance(cfg, model):
        return cfg
    return model.model_validate(cfg)


def resolve_config(
    param_cfg: Optional[Union[dict, ParamConfig]] = None,
    user_cfg: Optional[Union[dict, UserConfig]] = None,
    cli_cfg: Optional[Union[dict, CLIConfig]] = None,
    env_cfg: Optional[Union[dict, EnvConfig]] = None,
) -> PolicyConfig:
    """Resolve the runtime policy from param, user, env and CLI configs.

    This is the SINGLE ENTRYPOINT for policy resolution.

    Parameters
    ----------
    param_cfg : dict or ParamConfig, optional
        Library defaults. If None, ParamConfig() is used.
    user_cfg : dict or UserConfig, optional
        User overrides (forgiving keys and mode names).
    cli_cfg : dict or CLIConfig, optional
        Command-line overrides.
    env_cfg : dict or EnvConfig, optional
        Environment overrides. NOT read from os.environ here; pass
        EnvConfig.from_environ() to apply the process environment.

    Returns
    -------
    PolicyConfig
        Fully validated, immutable policy snapshot

    Raises
    ------
    ValidationError
        If any config fails Pydantic validation

    Examples
    --------
    >>> policy = resolve_config(user_cfg={"RELEASE": "panic", "DEBUG": "off"})
    >>> policy.release, policy.debug
    ('abort', 'disabled')
    """
    param = _as_model(param_cfg, ParamConfig)
    user = _as_model(user_cfg, UserConfig)
    env = _as_model(env_cfg, EnvConfig)
    cli = _as_model(cli_cfg, CLIConfig)

    merged = deep_merge(
        param.model_dump(),
        user.to_internal_overrides(),
        env.to_internal_overrides(),
        cli.to_internal_overrides(),
    )

    return PolicyConfig.model_validate(merged)
