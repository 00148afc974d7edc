"""Policy loading from config files, and the ``iae-policy`` command.

Applications usually call configure_from_file() once at startup. The
command resolves the same layers and prints the result, which is handy
to check what a deployment profile will do before shipping it.
"""

import argparse
import importlib.util
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from iae.policy import get_store
from iae.schemas import CLIConfig, EnvConfig, PolicyConfig, UserConfig, resolve_config


logger = logging.getLogger(__name__)

_MODE_CHOICES = ["disabled", "off", "error", "abort", "panic"]


def load_user_config_dict(config_path: str) -> dict:
    """Load user config dict from Python file.

    Returns the raw dict before Pydantic validation.

    Parameters
    ----------
    config_path : str
        Path to user config Python file containing a CONFIG dict.

    Returns
    -------
    dict
        Raw user configuration dictionary.

    Raises
    ------
    FileNotFoundError
        If config file does not exist.
    ValueError
        If no CONFIG dict found in file.
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config not found: {path}")

    spec = importlib.util.spec_from_file_location("iae_config_module", path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    # Find CONFIG dict
    for name in dir(module):
        if name.startswith('CONFIG'):
            obj = getattr(module, name)
            if isinstance(obj, dict):
                return obj

    raise ValueError(f"No CONFIG dict found in {path}")


def resolve_policy(
    user_config_path: Optional[str] = None,
    cli_args: Optional[Dict[str, Any]] = None,
    use_environ: bool = True,
) -> PolicyConfig:
    """Resolve a policy from a config file, the environment and CLI args.

    Parameters
    ----------
    user_config_path : str, optional
        Path to a Python file with a CONFIG dict.
    cli_args : dict, optional
        CLI overrides. Keys: axis, release, debug, exported, not_exported,
        log_level. None values are ignored.
    use_environ : bool, optional
        If True, apply IAE_* environment variables.

    Returns
    -------
    PolicyConfig
        The resolved, not yet installed, policy.
    """
    user_cfg = None
    if user_config_path is not None:
        user_cfg = UserConfig.model_validate(load_user_config_dict(user_config_path))

    env_cfg = EnvConfig.from_environ() if use_environ else None

    # Filter None values
    cli_dict = {k: v for k, v in (cli_args or {}).items() if v is not None}
    cli_cfg = CLIConfig.model_validate(cli_dict) if cli_dict else None

    return resolve_config(None, user_cfg, cli_cfg, env_cfg)


def configure_from_file(
    user_config_path: Optional[str] = None,
    cli_args: Optional[Dict[str, Any]] = None,
    use_environ: bool = True,
) -> PolicyConfig:
    """Resolve a policy (see resolve_policy()) and install it process-wide.

    Examples
    --------
    At application startup::

        configure_from_file("config/iae_profile.py")
    """
    policy = resolve_policy(user_config_path, cli_args, use_environ)
    get_store().replace(policy)
    logger.info("Check policy configured: %s", policy.active_settings)
    return policy


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="iae-policy",
        description="Resolve and print the argument check policy",
    )
    parser.add_argument("config", nargs="?", help="Path to user config file")
    parser.add_argument("--axis", choices=["release_debug", "visibility"], help="Override axis")
    parser.add_argument("--release", choices=_MODE_CHOICES, help="Mode for release checks")
    parser.add_argument("--debug", choices=_MODE_CHOICES, help="Mode for debug checks")
    parser.add_argument("--exported", choices=_MODE_CHOICES, help="Mode for exported functions")
    parser.add_argument("--not-exported", choices=_MODE_CHOICES, help="Mode for not exported functions")
    parser.add_argument("--no-env", action="store_true", help="Ignore IAE_* environment variables")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging, print all settings")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    cli_args = {
        "axis": args.axis,
        "release": args.release,
        "debug": args.debug,
        "exported": args.exported,
        "not_exported": args.not_exported,
        "log_level": "DEBUG" if args.verbose else None,
    }
    policy = resolve_policy(args.config, cli_args, use_environ=not args.no_env)

    logging.basicConfig(
        level=getattr(logging, policy.logging.level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.debug("Resolved policy from %s", args.config or "defaults")

    if args.verbose:
        print(json.dumps(policy.model_dump(), indent=2))
    else:
        print(json.dumps({"axis": policy.axis, **policy.active_settings}, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
