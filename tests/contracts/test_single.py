"""Tests for single-shot checks."""

import inspect
import logging

import pytest

from iae import ArgumentAbort, IllegalArgumentError, check_arg
from iae.contracts import single
from tests.helpers.sample_api import single_debug, single_release

pytestmark = pytest.mark.unit


@pytest.fixture
def no_attribution(monkeypatch):
    """Make any attribution attempt fail the test."""
    def fail():
        raise AssertionError("attribution must not run")

    monkeypatch.setattr(single, "attribute", fail)


class TestPassingCheck:
    def test_returns_none_without_attribution(self, set_modes, no_attribution):
        for mode in ("off", "error", "panic"):
            set_modes(release=mode, debug=mode)
            assert single_release(11) is None
            assert single_debug(11) is None

    def test_does_not_read_policy(self, monkeypatch):
        def fail():
            raise AssertionError("policy must not be read")

        monkeypatch.setattr(single, "get_policy", fail)
        assert check_arg(True, 1, 11, ">10") is None


class TestFailingCheck:
    def test_disabled_returns_none_without_attribution(self, set_modes, no_attribution):
        set_modes(release="off", debug="off")
        assert single_release(5) is None
        assert single_debug(5) is None

    def test_error_mode_returns_failure(self, set_modes):
        set_modes(release="error")
        line = inspect.currentframe().f_lineno + 1
        err = single_release(5)

        assert isinstance(err, IllegalArgumentError)
        assert err.func_name == "tests.helpers.sample_api.single_release"
        assert err.line == line
        assert (err.argument, err.value, err.condition) == (1, 5, ">10")

    def test_abort_mode_raises(self, set_modes):
        set_modes(release="panic")
        with pytest.raises(ArgumentAbort) as excinfo:
            single_release(5)
        assert excinfo.value.failure.value == 5

    def test_debug_uses_debug_mode(self, set_modes):
        set_modes(release="off", debug="error")
        assert single_release(5) is None
        assert single_debug(5).condition == ">10"

    def test_debug_abort(self, set_modes):
        set_modes(release="error", debug="panic")
        with pytest.raises(ArgumentAbort):
            single_debug(5)

    def test_explicit_policy(self, make_policy):
        err = check_arg(False, 2, "x", "y", policy=make_policy(release="error"))
        assert err.subject == "argument 2"


class TestArgumentPosition:
    def test_bad_position_rejected_on_failure(self, set_modes):
        set_modes(release="error")
        with pytest.raises(ValueError, match="argument position"):
            check_arg(False, -1, 5, ">10")

    def test_position_ignored_on_success(self):
        assert check_arg(True, -1, 5, ">10") is None

    def test_position_ignored_when_disabled(self, set_modes, no_attribution):
        set_modes(release="off")
        assert check_arg(False, -1, 5, ">10") is None


def test_failure_logged_with_fields(set_modes, caplog):
    set_modes(release="error")
    with caplog.at_level(logging.DEBUG, logger="iae.contracts.single"):
        err = single_release(5)

    record = caplog.records[-1]
    assert record.subject == "argument 1"
    assert record.file_name == err.file_name
    assert record.condition == ">10"
