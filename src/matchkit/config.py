"""Configuration for record stores."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_CAPACITY = 64


class StoreConfig(BaseModel):
    """Configuration for :class:`~matchkit.store.RecordStore`."""

    model_config = ConfigDict(frozen=True)

    # Upper bound on the number of records the store will accept
    capacity: int = Field(default=DEFAULT_CAPACITY, gt=0)
