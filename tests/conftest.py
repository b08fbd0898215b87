"""Shared fixtures for matchkit tests."""

from __future__ import annotations

import pytest

from matchkit import ModelRecord, RecordStore


@pytest.fixture
def resnet() -> ModelRecord:
    return ModelRecord(name="ResNet", version=1)


@pytest.fixture
def googlenet() -> ModelRecord:
    return ModelRecord(name="GoogleNet", version=1)


@pytest.fixture
def store(resnet: ModelRecord, googlenet: ModelRecord) -> RecordStore[ModelRecord]:
    """Capacity-64 store holding ResNet then GoogleNet."""
    s: RecordStore[ModelRecord] = RecordStore(capacity=64)
    s.add(resnet)
    s.add(googlenet)
    return s
