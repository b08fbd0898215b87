"""
Matcher primitives and logical combinators.

A matcher is an immutable predicate over values of some type ``T``.
Leaf matchers live in :mod:`matchkit.leaves`; this module holds the
abstract base, the constant matchers and the ``AllOf`` / ``AnyOf`` /
``Not`` combinators that compose them.

Composition uses ``&``, ``|`` and ``~``::

    matcher = StartsWith("Res") & ~Equal("ResNeXt")
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Generic, Protocol, TypeVar, runtime_checkable

from .kinds import MatcherKind

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T", contravariant=True)


@runtime_checkable
class IMatcher(Protocol, Generic[T]):
    """
    Protocol for anything that can decide whether a value matches.
    Third-party predicate objects satisfy it without inheriting from
    :class:`Matcher`.
    """

    def matches(self, value: T) -> bool:
        """Return ``True`` if *value* satisfies the condition."""
        ...


class Matcher(ABC, Generic[T]):
    """Base class for matchers with logic operator support."""

    @property
    @abstractmethod
    def kind(self) -> MatcherKind:
        """The node tag of this matcher."""
        ...

    @abstractmethod
    def matches(self, value: T) -> bool:
        """
        Evaluate the matcher against *value*.

        Implementations must be referentially transparent: the same
        input always gives the same answer and nothing is mutated.
        """
        ...

    @abstractmethod
    def describe(self) -> dict[str, Any]:
        """Return a tagged tree describing this matcher, for logs and debugging."""
        ...

    def map_strings(self, fn: Callable[[str], str]) -> Matcher[T]:  # noqa: ARG002
        """
        Return a copy with every captured string value passed through *fn*.

        Matchers holding no string values return themselves.
        """
        return self

    def __call__(self, value: T) -> bool:
        return self.matches(value)

    def __and__(self, other: Matcher[T]) -> AllOf[T]:
        return AllOf(self, other)

    def __or__(self, other: Matcher[T]) -> AnyOf[T]:
        return AnyOf(self, other)

    def __invert__(self) -> Not[T]:
        return Not(self)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.describe()!r}>"


class Always(Matcher[Any]):
    """Matches every value."""

    @property
    def kind(self) -> MatcherKind:
        return MatcherKind.ALWAYS

    def matches(self, _value: Any) -> bool:
        return True

    def describe(self) -> dict[str, Any]:
        return {"op": self.kind.value}


class Never(Matcher[Any]):
    """Matches no value."""

    @property
    def kind(self) -> MatcherKind:
        return MatcherKind.NEVER

    def matches(self, _value: Any) -> bool:
        return False

    def describe(self) -> dict[str, Any]:
        return {"op": self.kind.value}


class AllOf(Matcher[T]):
    """
    Logical AND over an ordered sequence of matchers.

    Children are evaluated left to right and evaluation stops at the
    first one that fails. An empty ``AllOf`` matches everything.
    """

    def __init__(self, *matchers: Matcher[T]) -> None:
        self.matchers: tuple[Matcher[T], ...] = tuple(matchers)

    @property
    def kind(self) -> MatcherKind:
        return MatcherKind.ALL

    def matches(self, value: T) -> bool:
        return all(m.matches(value) for m in self.matchers)

    def describe(self) -> dict[str, Any]:
        return {
            "op": self.kind.value,
            "conditions": [m.describe() for m in self.matchers],
        }

    def map_strings(self, fn: Callable[[str], str]) -> AllOf[T]:
        return AllOf(*(m.map_strings(fn) for m in self.matchers))


class AnyOf(Matcher[T]):
    """
    Logical OR over an ordered sequence of matchers.

    Children are evaluated left to right and evaluation stops at the
    first one that succeeds. An empty ``AnyOf`` matches nothing.
    """

    def __init__(self, *matchers: Matcher[T]) -> None:
        self.matchers: tuple[Matcher[T], ...] = tuple(matchers)

    @property
    def kind(self) -> MatcherKind:
        return MatcherKind.ANY

    def matches(self, value: T) -> bool:
        return any(m.matches(value) for m in self.matchers)

    def describe(self) -> dict[str, Any]:
        return {
            "op": self.kind.value,
            "conditions": [m.describe() for m in self.matchers],
        }

    def map_strings(self, fn: Callable[[str], str]) -> AnyOf[T]:
        return AnyOf(*(m.map_strings(fn) for m in self.matchers))


class Not(Matcher[T]):
    """Logical NOT of a single matcher."""

    def __init__(self, matcher: Matcher[T]) -> None:
        self.matcher = matcher

    @property
    def kind(self) -> MatcherKind:
        return MatcherKind.NOT

    def matches(self, value: T) -> bool:
        return not self.matcher.matches(value)

    def describe(self) -> dict[str, Any]:
        return {
            "op": self.kind.value,
            "conditions": [self.matcher.describe()],
        }

    def map_strings(self, fn: Callable[[str], str]) -> Not[T]:
        return Not(self.matcher.map_strings(fn))


class Predicate(Matcher[T]):
    """
    Adapts a plain callable into a matcher.

    The callable must be pure; its result is coerced to ``bool``.
    ``label`` only shows up in :meth:`describe`.
    """

    def __init__(self, fn: Callable[[T], object], label: str | None = None) -> None:
        self.fn = fn
        self.label = label or getattr(fn, "__name__", "predicate")

    @property
    def kind(self) -> MatcherKind:
        return MatcherKind.PREDICATE

    def matches(self, value: T) -> bool:
        return bool(self.fn(value))

    def describe(self) -> dict[str, Any]:
        return {"op": self.kind.value, "label": self.label}
