"""
Field adapters.

A field adapter lifts a matcher over one attribute type into a matcher
over the whole record by pairing it with an extraction function::

    by_name = field(lambda r: r.name, Equal("ResNet"))
    by_name.matches(record)  # == Equal("ResNet").matches(record.name)

The same leaf and combinator library therefore serves every attribute
without per-attribute matcher classes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Generic, TypeVar

from .base import Matcher
from .exceptions import FieldNotFoundError
from .kinds import MatcherKind
from .records import ModelRecord

if TYPE_CHECKING:
    from collections.abc import Callable

    from pydantic import BaseModel

R = TypeVar("R")
F = TypeVar("F")


class FieldMatcher(Matcher[R], Generic[R, F]):
    """Matches a record when ``matcher`` matches the extracted field."""

    def __init__(
        self,
        extractor: Callable[[R], F],
        matcher: Matcher[F],
        label: str | None = None,
    ) -> None:
        self.extractor = extractor
        self.matcher = matcher
        self.label = label or getattr(extractor, "__name__", "<field>")

    @property
    def kind(self) -> MatcherKind:
        return MatcherKind.FIELD

    def matches(self, value: R) -> bool:
        return self.matcher.matches(self.extractor(value))

    def describe(self) -> dict[str, Any]:
        return {
            "op": self.kind.value,
            "attr": self.label,
            "conditions": [self.matcher.describe()],
        }


def field(
    extractor: Callable[[R], F],
    matcher: Matcher[F],
    *,
    label: str | None = None,
) -> FieldMatcher[R, F]:
    """Lift *matcher* over a field into a matcher over records."""
    return FieldMatcher(extractor, matcher, label)


# -- attribute paths ----------------------------------------------------------


def resolve_attribute(obj: Any, attr_path: str) -> Any:
    """
    Resolve a dot-separated attribute path on *obj*.

    Dict keys and object attributes are both supported. A ``None``
    anywhere along the path, or a missing attribute, yields ``None``.
    """
    for part in attr_path.split("."):
        if obj is None:
            return None
        obj = obj.get(part) if isinstance(obj, dict) else getattr(obj, part, None)
    return obj


def attribute(
    path: str,
    matcher: Matcher[Any],
    *,
    record_type: type[BaseModel] | None = None,
) -> FieldMatcher[Any, Any]:
    """
    Field adapter addressing the attribute by a dotted *path*.

    When *record_type* is given, the first path segment is checked
    against its declared fields here, before any record is scanned.

    Raises:
        FieldNotFoundError: If *record_type* has no such field.
    """
    if record_type is not None:
        head = path.split(".", 1)[0]
        available = list(record_type.model_fields)
        if head not in available:
            raise FieldNotFoundError(
                invalid_field=head,
                record_name=record_type.__name__,
                available_fields=available,
                full_path=path,
            )

    def extract(record: Any) -> Any:
        return resolve_attribute(record, path)

    return FieldMatcher(extract, matcher, label=path)


# -- ModelRecord adapters -----------------------------------------------------


def _name_of(record: ModelRecord) -> str:
    return record.name


def _version_of(record: ModelRecord) -> int:
    return record.version


def name_matcher(matcher: Matcher[str]) -> FieldMatcher[ModelRecord, str]:
    """Match a :class:`ModelRecord` on its ``name``."""
    return FieldMatcher(_name_of, matcher, label="name")


def version_matcher(matcher: Matcher[int]) -> FieldMatcher[ModelRecord, int]:
    """Match a :class:`ModelRecord` on its ``version``."""
    return FieldMatcher(_version_of, matcher, label="version")
