"""Tests for policy resolution and precedence."""

import pytest
from pydantic import ValidationError

from iae import Category, CheckMode
from iae.schemas import CLIConfig, EnvConfig, ParamConfig, PolicyConfig, UserConfig, resolve_config
from iae.schemas.resolve import deep_merge

pytestmark = pytest.mark.unit


def test_defaults():
    policy = resolve_config()
    assert policy.axis == "release_debug"
    assert policy.mode_for(Category.RELEASE) is CheckMode.REPORT_ERROR
    assert policy.mode_for(Category.DEBUG) is CheckMode.ABORT
    assert policy.mode_for(Category.EXPORTED) is CheckMode.REPORT_ERROR
    assert policy.mode_for(Category.NOT_EXPORTED) is CheckMode.ABORT
    assert policy.logging.level == "WARNING"


def test_precedence_param_user_env_cli():
    policy = resolve_config(
        ParamConfig(release="disabled"),
        UserConfig(release="error", debug="off"),
        CLIConfig(release="panic"),
        EnvConfig.from_environ({"IAE_RELEASE": "off", "IAE_DEBUG": "error"}),
    )
    assert policy.release == "abort"  # CLI
    assert policy.debug == "error"    # env beats user


def test_dicts_accepted():
    policy = resolve_config({"release": "disabled"}, {"DEBUG": "off"})
    assert policy.release == "disabled"
    assert policy.debug == "disabled"


def test_policy_is_frozen():
    policy = resolve_config()
    with pytest.raises(ValidationError):
        policy.release = "abort"


def test_policy_rejects_unknown_fields():
    data = resolve_config().model_dump()
    data["verbose"] = True
    with pytest.raises(ValidationError):
        PolicyConfig.model_validate(data)


def test_mode_for_accepts_values():
    assert resolve_config().mode_for("not_exported") is CheckMode.ABORT


def test_active_settings():
    assert resolve_config().active_settings == {"release": "error", "debug": "abort"}
    visibility = resolve_config(user_cfg={"axis": "visibility"})
    assert visibility.active_settings == {"exported": "error", "not_exported": "abort"}


def test_deep_merge_nested():
    merged = deep_merge({"a": 1, "b": {"c": 2, "d": 3}}, {"b": {"d": 4}}, {"e": 5})
    assert merged == {"a": 1, "b": {"c": 2, "d": 4}, "e": 5}
