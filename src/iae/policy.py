"""Process-wide policy store.

The store holds the current PolicyConfig snapshot. Check chains read it
once, at creation, and keep that snapshot for their whole lifetime.

Configure the store once at startup::

    import iae
    iae.configure(release="error", debug="off")

IAE_* environment variables are applied on top of the library defaults
when the store is created and on every reset, so a deployment profile
works without any code::

    IAE_RELEASE=error IAE_DEBUG=off python -m myservice

Readers never lock: the snapshot is immutable and swapped in one
assignment. Writers serialize on a lock. Changing the policy while
checks run in other threads is allowed but those checks may observe
either the old or the new snapshot.
"""

import logging
import threading
from contextlib import contextmanager
from typing import Iterator, Optional, Union

from iae.schemas import (
    CLIConfig,
    EnvConfig,
    ParamConfig,
    PolicyConfig,
    UserConfig,
    resolve_config,
)


logger = logging.getLogger(__name__)


class PolicyStore:
    """Holder of the current policy snapshot.

    Parameters
    ----------
    policy : PolicyConfig, optional
        Initial snapshot. Defaults to the library defaults overridden by
        the IAE_* environment variables.
    """

    def __init__(self, policy: Optional[PolicyConfig] = None):
        self._lock = threading.Lock()
        self._policy = policy if policy is not None else _default_policy()

    def current(self) -> PolicyConfig:
        """Return the current snapshot."""
        return self._policy

    def replace(self, policy: PolicyConfig) -> PolicyConfig:
        """Install ``policy`` and return the snapshot it replaced."""
        with self._lock:
            previous = self._policy
            self._policy = policy
        logger.debug("Check policy updated: %s", policy.active_settings)
        return previous

    def configure(
        self,
        config: Optional[Union[PolicyConfig, dict, UserConfig]] = None,
        *,
        env_cfg: Optional[Union[dict, EnvConfig]] = None,
        cli_cfg: Optional[Union[dict, CLIConfig]] = None,
        **overrides,
    ) -> PolicyConfig:
        """Resolve and install a new policy.

        Parameters
        ----------
        config : PolicyConfig, dict or UserConfig, optional
            A complete snapshot, or user-level overrides of the library
            defaults. A snapshot given together with other layers serves
            as their base instead of the defaults.
        env_cfg, cli_cfg : optional
            Higher priority layers, see resolve_config().
        **overrides
            User-level overrides as keywords, e.g. ``release="panic"``.
            Applied on top of ``config``.

        Returns
        -------
        PolicyConfig
            The installed snapshot.
        """
        if isinstance(config, PolicyConfig):
            if not overrides and env_cfg is None and cli_cfg is None:
                self.replace(config)
                return config
            param, user = _param_from(config), dict(overrides)
        else:
            if isinstance(config, UserConfig):
                config = config.model_dump(exclude_none=True)
            param, user = None, {**(config or {}), **overrides}

        policy = resolve_config(param, user, cli_cfg, env_cfg)
        self.replace(policy)
        return policy

    def reset(self) -> PolicyConfig:
        """Reinstall the library defaults and the IAE_* environment profile."""
        policy = _default_policy()
        self.replace(policy)
        return policy

    @contextmanager
    def override(self, **overrides) -> Iterator[PolicyConfig]:
        """Temporarily apply user-level overrides to the current policy.

        The previous snapshot is restored on exit, also on error.
        Intended for tests; do not nest it across threads.
        """
        previous = self._policy
        policy = resolve_config(_param_from(previous), overrides)
        self.replace(policy)
        try:
            yield policy
        finally:
            self.replace(previous)


def _default_policy() -> PolicyConfig:
    return resolve_config(env_cfg=EnvConfig.from_environ())


def _param_from(policy: PolicyConfig) -> ParamConfig:
    return ParamConfig.model_validate(policy.model_dump())


_store = PolicyStore()


def get_store() -> PolicyStore:
    """Return the process-wide store."""
    return _store


def get_policy() -> PolicyConfig:
    """Return the current process-wide policy snapshot."""
    return _store.current()


def configure(config=None, **kwargs) -> PolicyConfig:
    """Configure the process-wide policy. See PolicyStore.configure()."""
    return _store.configure(config, **kwargs)


def reset_policy() -> PolicyConfig:
    """Restore the process-wide policy to the defaults and the environment."""
    return _store.reset()


def policy_override(**overrides):
    """Temporarily override the process-wide policy (context manager)."""
    return _store.override(**overrides)
