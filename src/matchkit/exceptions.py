"""
Matchkit exception hierarchy.

All exceptions inherit from ``MatchkitError`` and provide ``to_dict()``
for API-friendly error responses. A ``find`` that matches nothing is
not an error and returns ``None``.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import Any


class MatchkitError(Exception):
    """Root exception for the matchkit library."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class StoreError(MatchkitError):
    """Base class for record store errors."""


class CapacityExceededError(StoreError):
    """Raised by ``RecordStore.add`` when the store already holds ``capacity`` records."""

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        super().__init__(f"Store is full: capacity of {capacity} record(s) reached")

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "CAPACITY_EXCEEDED",
            "message": str(self),
            "capacity": self.capacity,
        }


class FieldNotFoundError(MatchkitError):
    """
    An attribute adapter named a field its record type does not declare.

    ``attribute("verison", ..., record_type=ModelRecord)`` fails with::

        ModelRecord has no field 'verison' (path 'verison'); closest: version
    """

    def __init__(
        self,
        invalid_field: str,
        record_name: str,
        available_fields: list[str],
        full_path: str | None = None,
        cutoff: float = 0.6,
    ) -> None:
        self.invalid_field = invalid_field
        self.record_name = record_name
        self.available_fields = available_fields
        self.full_path = full_path or invalid_field
        self.suggestions = get_close_matches(
            invalid_field, available_fields, n=3, cutoff=cutoff
        )
        super().__init__(self._describe())

    def _describe(self) -> str:
        message = (
            f"{self.record_name} has no field '{self.invalid_field}' "
            f"(path '{self.full_path}')"
        )
        if self.suggestions:
            return f"{message}; closest: {', '.join(self.suggestions)}"
        known = sorted(self.available_fields)
        shown = ", ".join(known[:10])
        if len(known) > 10:
            shown += f" and {len(known) - 10} more"
        return f"{message}; known fields: {shown}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "FIELD_NOT_FOUND",
            "field": self.invalid_field,
            "record": self.record_name,
            "full_path": self.full_path,
            "suggestions": self.suggestions,
            "available_fields": sorted(self.available_fields),
        }
