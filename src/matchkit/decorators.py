"""Matchers that wrap a single string matcher and normalise its input."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .base import Matcher
from .kinds import MatcherKind

if TYPE_CHECKING:
    from collections.abc import Callable

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def ascii_lower(value: str) -> str:
    """Lower-case ``A``-``Z`` only. Every other character is kept as is."""
    return value.translate(_ASCII_LOWER)


class IgnoringCase(Matcher[str]):
    """
    Case-insensitive view of a string matcher.

    Both the value under test and every string captured inside the
    wrapped matcher are folded with :func:`ascii_lower` before the
    comparison. Folding is ASCII only: ``"É"`` and ``"é"`` stay distinct.
    Values that are not strings, ``None`` included, reach the wrapped
    matcher unchanged.
    """

    def __init__(
        self,
        matcher: Matcher[str],
        fold: Callable[[str], str] = ascii_lower,
    ) -> None:
        self.matcher = matcher
        self.fold = fold
        self._folded = matcher.map_strings(fold)

    @property
    def kind(self) -> MatcherKind:
        return MatcherKind.IGNORING_CASE

    def matches(self, value: str) -> bool:
        if not isinstance(value, str):
            return self._folded.matches(value)
        return self._folded.matches(self.fold(value))

    def describe(self) -> dict[str, Any]:
        return {
            "op": self.kind.value,
            "conditions": [self.matcher.describe()],
        }

    def map_strings(self, fn: Callable[[str], str]) -> IgnoringCase:
        return IgnoringCase(self.matcher.map_strings(fn), self.fold)
