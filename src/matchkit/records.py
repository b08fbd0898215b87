"""Record base class and the sample model record used by the field adapters."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Record(BaseModel):
    """Base class for everything a :class:`~matchkit.store.RecordStore` holds.

    Records are frozen once validated, so references handed out by
    ``find`` can not change what the store owns.

    Usage::

        class Dataset(Record):
            title: str
            rows: int = 0
    """

    model_config = ConfigDict(frozen=True)


class ModelRecord(Record):
    """A named, versioned model entry (``ResNet`` v1, ``GoogleNet`` v1, ...)."""

    name: str
    version: int
