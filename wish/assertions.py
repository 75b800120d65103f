"""Assertions that compare values with checker functions and report to a test."""

import unittest
from typing import Any, Callable, List, Tuple

from .indent import indent
from .util import checker_short_name

Checker = Callable[[Any, Any], Tuple[str, bool]]


class RequirementFailed(AssertionError):
    """Raised when a :func:`require` check is rejected."""


class T:
    """Records the outcome of a test: log lines and whether it failed."""

    def __init__(self, name: str = "test") -> None:
        self._name = name
        self.logs: List[str] = []
        self.failed = False

    def helper(self) -> None:
        """Mark the caller as a helper; recorded tests need no bookkeeping."""

    def fail(self) -> None:
        """Mark the test as failed and keep going."""
        self.failed = True

    def fail_now(self) -> None:
        """Mark the test as failed and stop it."""
        self.failed = True
        raise RequirementFailed(self.logs[-1] if self.logs else self._name)

    def skip_now(self) -> None:
        """Stop the test and mark it as skipped."""
        raise unittest.SkipTest(self._name)

    def log(self, *args: Any) -> None:
        """Record one log line built from the arguments."""
        self.logs.append(" ".join(str(arg) for arg in args))

    def name(self) -> str:
        """Return the name of the test."""
        return self._name


def wish(t: T, actual: Any, check: Checker, desired: Any) -> bool:
    """Check that ``actual`` matches ``desired``; log and fail ``t`` if not.

    Returns whether the check passed; execution always continues.
    """
    t.helper()
    problem, passed = check(actual, desired)
    if not passed:
        t.log(f"{checker_short_name(check)} check rejected:\n{indent(problem)}")
        t.fail()
    return passed


def require(t: T, actual: Any, check: Checker, desired: Any) -> None:
    """Like :func:`wish`, but halt with :class:`RequirementFailed` on rejection."""
    t.helper()
    problem, passed = check(actual, desired)
    if not passed:
        message = (
            f"halting: critical {checker_short_name(check)} check rejected:\n"
            f"{indent(problem)}"
        )
        t.log(message)
        t.fail_now()
        raise RequirementFailed(message)