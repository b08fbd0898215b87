"""
Leaf matchers: comparison, membership and string tests.

Every leaf captures its expected value at construction time, so a
matcher never observes later mutation of the object it was built from.
"""

from __future__ import annotations

import copy
import re
from typing import TYPE_CHECKING, Any, TypeVar

from .base import Matcher
from .kinds import MatcherKind

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

V = TypeVar("V")


def _map_if_str(value: Any, fn: Callable[[str], str]) -> Any:
    return fn(value) if isinstance(value, str) else value


# -- comparison ---------------------------------------------------------------


class Equal(Matcher[V]):
    def __init__(self, expected: V) -> None:
        self.expected = copy.deepcopy(expected)

    @property
    def kind(self) -> MatcherKind:
        return MatcherKind.EQ

    def matches(self, value: V) -> bool:
        return bool(value == self.expected)

    def describe(self) -> dict[str, Any]:
        return {"op": self.kind.value, "val": self.expected}

    def map_strings(self, fn: Callable[[str], str]) -> Equal[V]:
        return Equal(_map_if_str(self.expected, fn))


class NotEqual(Matcher[V]):
    def __init__(self, expected: V) -> None:
        self.expected = copy.deepcopy(expected)

    @property
    def kind(self) -> MatcherKind:
        return MatcherKind.NE

    def matches(self, value: V) -> bool:
        return bool(value != self.expected)

    def describe(self) -> dict[str, Any]:
        return {"op": self.kind.value, "val": self.expected}

    def map_strings(self, fn: Callable[[str], str]) -> NotEqual[V]:
        return NotEqual(_map_if_str(self.expected, fn))


class GreaterThan(Matcher[Any]):
    def __init__(self, bound: Any) -> None:
        self.bound = copy.deepcopy(bound)

    @property
    def kind(self) -> MatcherKind:
        return MatcherKind.GT

    def matches(self, value: Any) -> bool:
        if value is None:
            return False
        return bool(value > self.bound)

    def describe(self) -> dict[str, Any]:
        return {"op": self.kind.value, "val": self.bound}


class LessThan(Matcher[Any]):
    def __init__(self, bound: Any) -> None:
        self.bound = copy.deepcopy(bound)

    @property
    def kind(self) -> MatcherKind:
        return MatcherKind.LT

    def matches(self, value: Any) -> bool:
        if value is None:
            return False
        return bool(value < self.bound)

    def describe(self) -> dict[str, Any]:
        return {"op": self.kind.value, "val": self.bound}


class Between(Matcher[Any]):
    """Inclusive range check: ``low <= value <= high``."""

    def __init__(self, low: Any, high: Any) -> None:
        self.low = copy.deepcopy(low)
        self.high = copy.deepcopy(high)

    @property
    def kind(self) -> MatcherKind:
        return MatcherKind.BETWEEN

    def matches(self, value: Any) -> bool:
        if value is None:
            return False
        return bool(self.low <= value <= self.high)

    def describe(self) -> dict[str, Any]:
        return {"op": self.kind.value, "val": [self.low, self.high]}


class IsIn(Matcher[V]):
    def __init__(self, values: Iterable[V]) -> None:
        self.values = tuple(copy.deepcopy(v) for v in values)

    @property
    def kind(self) -> MatcherKind:
        return MatcherKind.IN

    def matches(self, value: V) -> bool:
        return value in self.values

    def describe(self) -> dict[str, Any]:
        return {"op": self.kind.value, "val": list(self.values)}

    def map_strings(self, fn: Callable[[str], str]) -> IsIn[V]:
        return IsIn(_map_if_str(v, fn) for v in self.values)


# -- strings ------------------------------------------------------------------


class StartsWith(Matcher[str]):
    """True iff the value begins with ``prefix``. The empty prefix matches all."""

    def __init__(self, prefix: str) -> None:
        self.prefix = prefix

    @property
    def kind(self) -> MatcherKind:
        return MatcherKind.STARTSWITH

    def matches(self, value: str) -> bool:
        if value is None:
            return False
        return value.startswith(self.prefix)

    def describe(self) -> dict[str, Any]:
        return {"op": self.kind.value, "val": self.prefix}

    def map_strings(self, fn: Callable[[str], str]) -> StartsWith:
        return StartsWith(fn(self.prefix))


class EndsWith(Matcher[str]):
    """True iff the value ends with ``suffix``. The empty suffix matches all."""

    def __init__(self, suffix: str) -> None:
        self.suffix = suffix

    @property
    def kind(self) -> MatcherKind:
        return MatcherKind.ENDSWITH

    def matches(self, value: str) -> bool:
        if value is None:
            return False
        return value.endswith(self.suffix)

    def describe(self) -> dict[str, Any]:
        return {"op": self.kind.value, "val": self.suffix}

    def map_strings(self, fn: Callable[[str], str]) -> EndsWith:
        return EndsWith(fn(self.suffix))


class Contains(Matcher[str]):
    def __init__(self, substring: str) -> None:
        self.substring = substring

    @property
    def kind(self) -> MatcherKind:
        return MatcherKind.CONTAINS

    def matches(self, value: str) -> bool:
        if value is None:
            return False
        return self.substring in value

    def describe(self) -> dict[str, Any]:
        return {"op": self.kind.value, "val": self.substring}

    def map_strings(self, fn: Callable[[str], str]) -> Contains:
        return Contains(fn(self.substring))


class Regex(Matcher[str]):
    """
    ``re.search`` against the value. The pattern is compiled once, at
    construction, so an invalid pattern fails early with ``re.error``.
    Under :class:`IgnoringCase` the pattern text is kept as written and
    recompiled with ``re.IGNORECASE | re.ASCII``, which folds ``A``-``Z`` only.
    """

    def __init__(self, pattern: str, flags: int = 0) -> None:
        self.pattern = pattern
        self.flags = flags
        self._compiled = re.compile(pattern, flags)

    @property
    def kind(self) -> MatcherKind:
        return MatcherKind.REGEX

    def matches(self, value: str) -> bool:
        if value is None:
            return False
        return self._compiled.search(value) is not None

    def describe(self) -> dict[str, Any]:
        return {"op": self.kind.value, "val": self.pattern}

    def map_strings(self, fn: Callable[[str], str]) -> Regex:  # noqa: ARG002
        return Regex(self.pattern, self.flags | re.IGNORECASE | re.ASCII)
