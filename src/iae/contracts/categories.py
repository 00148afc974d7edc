"""Check categories and the axes that group them.

A category selects which configured mode governs a check. Categories
come in pairs, called axes:

- release/debug: the caller picks the category. Chains start as release
  checks and may switch to debug checks once.
- visibility: the category follows from the checked function's name.
  Public names are exported, names with a leading underscore are not.

The two axes are alternative setups, only one is active at a time.
"""

from enum import Enum
from typing import Optional, Tuple


class Category(str, Enum):
    """A policy category a check can fall under."""
    RELEASE = "release"
    DEBUG = "debug"
    EXPORTED = "exported"
    NOT_EXPORTED = "not_exported"


class Axis(str, Enum):
    """The pair of categories in use."""
    RELEASE_DEBUG = "release_debug"
    VISIBILITY = "visibility"


def is_exported(func_name: str) -> bool:
    """Classify a qualified function name by its last component.

    Python marks private names with a leading underscore rather than by
    case, so this rule replaces the "upper-case first letter is exported"
    rule: every name not starting with ``_`` is exported, whatever its case.
    Dunder methods count as not exported.

    >>> is_exported("pkg.mod.Widget.resize")
    True
    >>> is_exported("pkg.mod.Widget._resize")
    False
    >>> is_exported("pkg.mod.widget_factory")
    True
    """
    short_name = func_name.rsplit(".", 1)[-1]
    return not short_name.startswith("_")


class ReleaseDebugClassifier:
    """Caller-selected categories: release by default, debug on request."""

    axis = Axis.RELEASE_DEBUG
    initial: Optional[Category] = Category.RELEASE
    alternate: Optional[Category] = Category.DEBUG

    def reachable(self, category: Optional[Category]) -> Tuple[Category, ...]:
        return (category,)

    def classify(self, category: Optional[Category], func_name: str) -> Category:
        return category


class VisibilityClassifier:
    """Name-derived categories: exported vs not exported.

    The category is unknown until a check fails and the caller is
    attributed. There is no alternate category to switch to.
    """

    axis = Axis.VISIBILITY
    initial: Optional[Category] = None
    alternate: Optional[Category] = None

    def reachable(self, category: Optional[Category]) -> Tuple[Category, ...]:
        if category is None:
            return (Category.EXPORTED, Category.NOT_EXPORTED)
        return (category,)

    def classify(self, category: Optional[Category], func_name: str) -> Category:
        if category is not None:
            return category
        if is_exported(func_name):
            return Category.EXPORTED
        return Category.NOT_EXPORTED


_CLASSIFIERS = {
    Axis.RELEASE_DEBUG: ReleaseDebugClassifier(),
    Axis.VISIBILITY: VisibilityClassifier(),
}


def classifier_for(axis):
    """Return the classifier for ``axis`` (an Axis or its value)."""
    return _CLASSIFIERS[Axis(axis)]
