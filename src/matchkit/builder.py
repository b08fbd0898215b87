"""
Step-by-step construction of record matchers.

``MatcherBuilder`` is handy when conditions are collected incrementally,
for example from optional query parameters::

    builder = MatcherBuilder()
    if prefix:
        builder.where("name", ignoring_case(starts_with(prefix)))
    if min_version is not None:
        builder.where("version", greater_than(min_version - 1))
    store.find(builder.build())

Nested logic is expressed with explicit groups::

    either_net = (
        MatcherBuilder()
        .or_group()
        .where("name", equal_to("ResNet"))
        .where("name", equal_to("GoogleNet"))
        .end_group()
        .where(lambda r: r.version, equal_to(1))
        .build()
    )
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .base import AllOf, AnyOf, Not
from .fields import attribute, field

if TYPE_CHECKING:
    from collections.abc import Callable

    from .base import Matcher

_AND, _OR, _NOT = "and", "or", "not"


class MatcherBuilder:
    """
    Accumulates record matchers and joins them into one tree.

    Conditions at the top level are joined by ``AllOf``. Each
    ``*_group()`` call opens a nested level that ``end_group()`` folds
    back into its parent.
    """

    def __init__(self) -> None:
        self._root: list[Matcher[Any]] = []
        self._open: list[tuple[str, list[Matcher[Any]]]] = []

    def where(
        self,
        target: str | Callable[[Any], Any],
        matcher: Matcher[Any],
    ) -> MatcherBuilder:
        """
        Lift *matcher* onto a record field and add it to the innermost level.

        A string *target* is read as a dotted attribute path, anything
        else as an extraction function.
        """
        if isinstance(target, str):
            lifted = attribute(target, matcher)
        else:
            lifted = field(target, matcher)
        self._level().append(lifted)
        return self

    def add(self, matcher: Matcher[Any]) -> MatcherBuilder:
        """Add a ready-made record matcher to the innermost level."""
        self._level().append(matcher)
        return self

    def and_group(self) -> MatcherBuilder:
        self._open.append((_AND, []))
        return self

    def or_group(self) -> MatcherBuilder:
        self._open.append((_OR, []))
        return self

    def not_group(self) -> MatcherBuilder:
        """Open a level whose single condition will be negated."""
        self._open.append((_NOT, []))
        return self

    def end_group(self) -> MatcherBuilder:
        if not self._open:
            raise ValueError("end_group() called with no group open")
        how, members = self._open.pop()
        if not members:
            raise ValueError(f"'{how}' group closed without any condition")
        self._level().append(_join(how, members))
        return self

    def build(self) -> Matcher[Any]:
        """
        Return the accumulated matcher.

        One top-level condition comes back as is. No conditions at all
        give ``AllOf()``, which accepts every record.

        Raises:
            ValueError: If a group is still open.
        """
        if self._open:
            raise ValueError(f"cannot build: {len(self._open)} unclosed group(s)")
        if not self._root:
            return AllOf()
        return _join(_AND, self._root)

    def reset(self) -> MatcherBuilder:
        """Drop every condition and open group."""
        self._root.clear()
        self._open.clear()
        return self

    def _level(self) -> list[Matcher[Any]]:
        return self._open[-1][1] if self._open else self._root


def _join(how: str, members: list[Matcher[Any]]) -> Matcher[Any]:
    if how == _NOT:
        if len(members) != 1:
            raise ValueError(
                f"'not' group takes one condition, got {len(members)}"
            )
        return Not(members[0])
    if len(members) == 1:
        return members[0]
    return AllOf(*members) if how == _AND else AnyOf(*members)
