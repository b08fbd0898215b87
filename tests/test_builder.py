"""Tests for the MatcherBuilder fluent API."""

from __future__ import annotations

import pytest

from matchkit import (
    AllOf,
    AnyOf,
    FieldMatcher,
    MatcherBuilder,
    ModelRecord,
    Not,
    RecordStore,
    equal_to,
    greater_than,
    name_matcher,
    starts_with,
)


@pytest.fixture
def builder() -> MatcherBuilder:
    return MatcherBuilder()


@pytest.fixture
def vgg() -> ModelRecord:
    return ModelRecord(name="VGG", version=16)


# -- Single condition -------------------------------------------------------


def test_single_where_is_returned_unwrapped(
    builder: MatcherBuilder, resnet: ModelRecord
) -> None:
    m = builder.where("name", equal_to("ResNet")).build()
    assert isinstance(m, FieldMatcher)
    assert m.matches(resnet) is True


def test_where_accepts_extractor(builder: MatcherBuilder, vgg: ModelRecord) -> None:
    m = builder.where(lambda r: r.version, greater_than(10)).build()
    assert m.matches(vgg) is True


# -- Implicit AND ------------------------------------------------------------


def test_multiple_where_implicit_and(
    builder: MatcherBuilder, resnet: ModelRecord, vgg: ModelRecord
) -> None:
    m = (
        builder.where("name", starts_with("Res"))
        .where("version", equal_to(1))
        .build()
    )
    assert isinstance(m, AllOf)
    assert m.matches(resnet) is True
    assert m.matches(vgg) is False


def test_empty_builder_matches_everything(
    builder: MatcherBuilder, resnet: ModelRecord
) -> None:
    m = builder.build()
    assert isinstance(m, AllOf)
    assert m.matches(resnet) is True


# -- Groups ------------------------------------------------------------------


def test_or_group(
    builder: MatcherBuilder,
    resnet: ModelRecord,
    googlenet: ModelRecord,
    vgg: ModelRecord,
) -> None:
    m = (
        builder.or_group()
        .where("name", equal_to("ResNet"))
        .where("name", equal_to("GoogleNet"))
        .end_group()
        .where("version", equal_to(1))
        .build()
    )
    assert isinstance(m, AllOf)
    assert isinstance(m.matchers[0], AnyOf)
    assert m.matches(resnet) is True
    assert m.matches(googlenet) is True
    assert m.matches(vgg) is False


def test_not_group(builder: MatcherBuilder, resnet: ModelRecord, vgg: ModelRecord) -> None:
    m = builder.not_group().where("version", equal_to(1)).end_group().build()
    assert isinstance(m, Not)
    assert m.matches(resnet) is False
    assert m.matches(vgg) is True


def test_nested_groups_with_prebuilt_matcher(
    builder: MatcherBuilder, googlenet: ModelRecord
) -> None:
    m = (
        builder.and_group()
        .add(name_matcher(starts_with("Goo")))
        .or_group()
        .where("version", equal_to(1))
        .where("version", equal_to(2))
        .end_group()
        .end_group()
        .build()
    )
    assert m.matches(googlenet) is True


def test_built_matcher_drives_store(
    builder: MatcherBuilder,
    store: RecordStore[ModelRecord],
    googlenet: ModelRecord,
) -> None:
    m = builder.where("name", starts_with("Goo")).build()
    assert store.find(m) is googlenet


def test_reset_clears_conditions(builder: MatcherBuilder, vgg: ModelRecord) -> None:
    builder.where("name", equal_to("ResNet")).or_group().reset()
    assert builder.build().matches(vgg) is True


# -- Errors --------------------------------------------------------------------


def test_end_group_without_open_group(builder: MatcherBuilder) -> None:
    with pytest.raises(ValueError, match="no group open"):
        builder.end_group()


def test_build_with_open_group(builder: MatcherBuilder) -> None:
    builder.or_group().where("name", equal_to("a"))
    with pytest.raises(ValueError, match="unclosed group"):
        builder.build()


def test_empty_group_is_rejected(builder: MatcherBuilder) -> None:
    with pytest.raises(ValueError, match="without any condition"):
        builder.or_group().end_group()


def test_not_group_with_two_children(builder: MatcherBuilder) -> None:
    builder.not_group().where("name", equal_to("a")).where("name", equal_to("b"))
    with pytest.raises(ValueError, match="takes one condition"):
        builder.end_group()
