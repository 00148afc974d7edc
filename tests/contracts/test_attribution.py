"""Tests for caller attribution."""

import inspect
import types

import pytest

from iae import InternalFault, check
from iae.contracts import attribution
from iae.contracts.attribution import CallSite, attribute, qualified_name

pytestmark = pytest.mark.unit


def checked_function():
    """Stands in for a function validating its arguments."""
    return attribute()


class Widget:
    def resize(self):
        return attribute()


class TestAttribute:
    def test_names_the_calling_function(self):
        site = checked_function()
        assert site.func_name == f"{__name__}.checked_function"

    def test_names_methods_by_qualname(self):
        site = Widget().resize()
        assert site.func_name == f"{__name__}.Widget.resize"

    def test_locates_the_call_site(self):
        line = inspect.currentframe().f_lineno + 1
        site = checked_function()
        assert site.line == line
        assert site.file_name == inspect.currentframe().f_code.co_filename

    def test_call_site_is_frozen(self):
        site = checked_function()
        with pytest.raises(AttributeError):
            site.line = 1

    def test_qualified_name_of_current_frame(self):
        frame = inspect.currentframe()
        assert qualified_name(frame) == (
            f"{__name__}.TestAttribute.test_qualified_name_of_current_frame"
        )


class TestInternalFault:
    """Missing stack information is fatal, whatever the policy says."""

    def test_no_frame_support(self, monkeypatch, set_modes):
        set_modes(release="off")
        monkeypatch.setattr(
            attribution, "inspect", types.SimpleNamespace(currentframe=lambda: None)
        )
        with pytest.raises(InternalFault, match="can't get callers"):
            attribute()

    def test_only_library_frames(self, monkeypatch):
        monkeypatch.setattr(attribution, "_is_library_frame", lambda frame: True)
        with pytest.raises(InternalFault, match="can't get callee"):
            attribute()

    def test_fault_propagates_from_chain(self, monkeypatch, set_modes):
        set_modes(release="error")
        monkeypatch.setattr(
            attribution, "inspect", types.SimpleNamespace(currentframe=lambda: None)
        )
        with pytest.raises(InternalFault):
            check().arg(False, 1, 0, ">0")

    def test_call_site_type(self):
        assert isinstance(checked_function(), CallSite)
