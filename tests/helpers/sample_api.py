"""A small API whose functions declare their preconditions with iae.

The functions mirror typical usage: release checks only, debug checks
only, and a chain that switches from release to debug checks.
"""

from iae import check, check_arg, check_arg_debug


class Counter:
    """Wraps an int value."""

    def __init__(self):
        self.value = 0

    def set_negated(self, a):
        """Store -a. ``a`` must be greater than 10 but not 12.

        A missing receiver always aborts.
        """
        err = (
            check()
            .recv(self is not None, self, "not None")
            .abort()
            .arg(a > 10, 1, a, ">10")
            .arg(a != 12, 1, a, "!=12")
            .err()
        )
        if err is not None:
            return err

        self.value = -1 * a
        return None


def set_negated(counter, a):
    """Unbound form of Counter.set_negated, so None can be the receiver."""
    return Counter.set_negated(counter, a)


def release_only(a):
    return check().arg(a > 0, 1, a, ">0").err()


def debug_only(a):
    return (
        check().debug()
        .arg(a > 1, 1, a, ">1")
        .arg(a > 2, 2, a, ">2")
        .err()
    )


def mixed(a):
    return (
        check()
        .arg(a > 0, 1, a, ">0")
        .debug()
        .arg(a > 1, 1, a, ">1")
        .err()
    )


def single_release(a):
    return check_arg(a > 10, 1, a, ">10")


def single_debug(a):
    return check_arg_debug(a > 10, 1, a, ">10")


def public_scale(factor):
    return check().arg(factor > 0, 1, factor, ">0").err()


def _private_scale(factor):
    return check().arg(factor > 0, 1, factor, ">0").err()


def public_single(factor):
    return check_arg(factor > 0, 1, factor, ">0")


def _private_single(factor):
    return check_arg(factor > 0, 1, factor, ">0")
