"""Tests for UserConfig normalization."""

import pytest
from pydantic import ValidationError

from iae.schemas.user import UserConfig

pytestmark = pytest.mark.unit


def test_uppercase_keys_accepted():
    user = UserConfig.model_validate({"RELEASE": "error", "DEBUG": "panic"})
    assert user.release == "error"
    assert user.debug == "abort"


def test_camel_case_not_exported():
    user = UserConfig.model_validate({"NotExported": "OFF"})
    assert user.not_exported == "disabled"


@pytest.mark.parametrize(
    "given,expected",
    [
        ("off", "disabled"),
        ("OFF", "disabled"),
        ("Disabled", "disabled"),
        ("error", "error"),
        ("report-error", "error"),
        ("ReportError", "error"),
        ("panic", "abort"),
        (" abort ", "abort"),
    ],
)
def test_mode_spellings(given, expected):
    assert UserConfig(release=given).release == expected


@pytest.mark.parametrize(
    "given,expected",
    [
        ("release/debug", "release_debug"),
        ("RELEASE_DEBUG", "release_debug"),
        ("exported", "visibility"),
        ("Visibility", "visibility"),
    ],
)
def test_axis_spellings(given, expected):
    assert UserConfig(axis=given).axis == expected


def test_unknown_mode_rejected():
    with pytest.raises(ValidationError):
        UserConfig(release="sometimes")


@pytest.mark.parametrize("key", ["relese", "LEGACY_FLAG", "not-exported"])
def test_unknown_keys_rejected(key):
    with pytest.raises(ValidationError, match=key):
        UserConfig.model_validate({"RELEASE": "off", key: "off"})


def test_overrides_empty():
    assert UserConfig().to_internal_overrides() == {}


def test_log_level_flat_and_nested():
    user = UserConfig.model_validate({"LOG_LEVEL": "info"})
    assert user.to_internal_overrides() == {"logging": {"level": "INFO"}}

    nested = UserConfig.model_validate({"LOG_LEVEL": "info", "logging": {"level": "debug"}})
    assert nested.to_internal_overrides()["logging"] == {"level": "DEBUG"}
