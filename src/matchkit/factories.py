"""
Lower-case factory functions for building matcher trees.

These read well when nested and keep the matcher's value type visible
to the type checker::

    name_matcher(ignoring_case(starts_with("res")))
    all_of(name_matcher(equal_to("ResNet")), version_matcher(equal_to(1)))
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from .base import AllOf, Always, AnyOf, Never, Not, Predicate
from .decorators import IgnoringCase
from .leaves import (
    Between,
    Contains,
    EndsWith,
    Equal,
    GreaterThan,
    IsIn,
    LessThan,
    NotEqual,
    Regex,
    StartsWith,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from .base import Matcher

T = TypeVar("T")

# -- leaves -------------------------------------------------------------------


def equal_to(expected: T) -> Matcher[T]:
    return Equal(expected)


def not_equal_to(expected: T) -> Matcher[T]:
    return NotEqual(expected)


def greater_than(bound: Any) -> Matcher[Any]:
    return GreaterThan(bound)


def less_than(bound: Any) -> Matcher[Any]:
    return LessThan(bound)


def between(low: Any, high: Any) -> Matcher[Any]:
    """Inclusive on both ends."""
    return Between(low, high)


def is_in(values: Iterable[T]) -> Matcher[T]:
    return IsIn(values)


def starts_with(prefix: str) -> Matcher[str]:
    return StartsWith(prefix)


def ends_with(suffix: str) -> Matcher[str]:
    return EndsWith(suffix)


def contains(substring: str) -> Matcher[str]:
    return Contains(substring)


def matches_regex(pattern: str, flags: int = 0) -> Matcher[str]:
    return Regex(pattern, flags)


def ignoring_case(matcher: Matcher[str]) -> Matcher[str]:
    return IgnoringCase(matcher)


# -- combinators --------------------------------------------------------------


def not_(matcher: Matcher[T]) -> Matcher[T]:
    return Not(matcher)


def all_of(*matchers: Matcher[T]) -> Matcher[T]:
    """Conjunction; ``all_of()`` matches everything."""
    return AllOf(*matchers)


def any_of(*matchers: Matcher[T]) -> Matcher[T]:
    """Disjunction; ``any_of()`` matches nothing."""
    return AnyOf(*matchers)


def always() -> Matcher[Any]:
    return Always()


def never() -> Matcher[Any]:
    return Never()


def predicate(fn: Callable[[T], object], label: str | None = None) -> Matcher[T]:
    return Predicate(fn, label)
