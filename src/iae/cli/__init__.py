"""Command-line and startup helpers for configuring check policy."""

from iae.cli.show_policy import configure_from_file, load_user_config_dict, resolve_policy

__all__ = ['configure_from_file', 'load_user_config_dict', 'resolve_policy']
