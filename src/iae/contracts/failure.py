"""Centralized failure types for argument checks.

Checks fail in one of three ways. All of them are represented here so
callers can handle them uniformly:

- IllegalArgumentError: a precondition did not hold and policy says
  "report". Returned as a value by the checks.
- ArgumentAbort: a precondition did not hold and policy says "abort",
  or the caller escalated a pending failure. Unwinds the call stack.
- InternalFault: stack introspection is broken. Always fatal.
"""

import re
from enum import Enum
from typing import Any


class CheckMode(str, Enum):
    """Mode of operation for one check category.

    DISABLED: Checks in this category are not evaluated at all
    REPORT_ERROR: Failing checks return an IllegalArgumentError
    ABORT: Failing checks raise ArgumentAbort
    """
    DISABLED = "disabled"
    REPORT_ERROR = "error"
    ABORT = "abort"


_MESSAGE_PATTERN = re.compile(
    r"^illegal argument error: (?P<subject>receiver|argument (?P<argument>\d+)) "
    r"of (?P<func_name>\S+) is '(?P<value>.*)' but must be (?P<condition>.*) "
    r"at (?P<file_name>.+):(?P<line>\d+)$",
    re.DOTALL,
)


class IllegalArgumentError(ValueError):
    """Raised (or returned) when an illegal argument was passed into a function.

    The record is immutable once constructed. ``line`` and ``file_name``
    point at the call site that passed the offending value, not at the
    check itself, so the blame lands on the caller.

    Parameters
    ----------
    func_name : str
        Module-qualified name of the function whose precondition failed.
    file_name : str
        Source file of the offending call site.
    line : int
        Line number of the offending call site.
    argument : int
        1-based position of the argument. 0 denotes the receiver (``self``).
    value : Any
        The offending value, rendered with ``str()``.
    condition : str
        Short description of the required condition (e.g. ``">10"``).
    """

    def __init__(
        self,
        func_name: str,
        file_name: str,
        line: int,
        argument: int,
        value: Any,
        condition: str,
    ) -> None:
        self._func_name = func_name
        self._file_name = file_name
        self._line = line
        self._argument = argument
        self._value = value
        self._condition = condition
        super().__init__(self.render())

    @property
    def func_name(self) -> str:
        return self._func_name

    @property
    def file_name(self) -> str:
        return self._file_name

    @property
    def line(self) -> int:
        return self._line

    @property
    def argument(self) -> int:
        return self._argument

    @property
    def value(self) -> Any:
        return self._value

    @property
    def condition(self) -> str:
        return self._condition

    @property
    def subject(self) -> str:
        """``"receiver"`` for position 0, ``"argument N"`` otherwise."""
        if self._argument == 0:
            return "receiver"
        return f"argument {self._argument}"

    def render(self) -> str:
        return (
            f"illegal argument error: {self.subject} of {self._func_name} "
            f"is '{self._value}' but must be {self._condition} "
            f"at {self._file_name}:{self._line}"
        )

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (
            f"IllegalArgumentError(func_name={self._func_name!r}, "
            f"argument={self._argument}, value={self._value!r}, "
            f"condition={self._condition!r})"
        )

    def __reduce__(self):
        return (
            self.__class__,
            (self._func_name, self._file_name, self._line,
             self._argument, self._value, self._condition),
        )

    def to_dict(self) -> dict:
        """Structured form for log records."""
        return {
            "func_name": self._func_name,
            "file_name": self._file_name,
            "line": self._line,
            "argument": self._argument,
            "subject": self.subject,
            "value": str(self._value),
            "condition": self._condition,
        }

    @classmethod
    def parse(cls, message: str) -> "IllegalArgumentError":
        """Rebuild a record from its rendered message.

        The value comes back as the string it was rendered to.

        Raises
        ------
        ValueError
            If ``message`` is not a rendered IllegalArgumentError.

        Examples
        --------
        >>> err = IllegalArgumentError.parse(
        ...     "illegal argument error: receiver of m.B.foo is 'None' "
        ...     "but must be not None at m.py:12")
        >>> err.argument, err.subject
        (0, 'receiver')
        """
        match = _MESSAGE_PATTERN.match(message)
        if match is None:
            raise ValueError(f"Not an illegal argument error message: {message!r}")

        argument = match.group("argument")
        return cls(
            func_name=match.group("func_name"),
            file_name=match.group("file_name"),
            line=int(match.group("line")),
            argument=int(argument) if argument is not None else 0,
            value=match.group("value"),
            condition=match.group("condition"),
        )


class ArgumentAbort(BaseException):
    """Raised when a failing check must stop the current call stack.

    Not an ``Exception`` subclass, so ``except Exception`` handlers do
    not catch it. Only a top-level supervisor (see
    ``iae.contracts.supervise.abort_boundary``) should catch it. The library
    does not guarantee safe continuation afterwards.

    Parameters
    ----------
    failure : IllegalArgumentError
        The failure that triggered the abort.
    """

    def __init__(self, failure: IllegalArgumentError) -> None:
        super().__init__(str(failure))
        self.failure = failure


class InternalFault(RuntimeError):
    """Raised when the library cannot introspect the call stack.

    This indicates a broken runtime, not bad user input. It is raised
    regardless of the configured check modes.
    """
    pass


def validate_position(argument: Any) -> int:
    """Return ``argument`` if it is a valid argument position.

    Positions are ints >= 0, 0 being the receiver. ``bool`` is rejected
    although it is an int subclass.

    Raises
    ------
    ValueError
        If ``argument`` is not a valid position.
    """
    if isinstance(argument, bool) or not isinstance(argument, int) or argument < 0:
        raise ValueError(f"argument position must be an int >= 0, got {argument!r}")
    return argument
