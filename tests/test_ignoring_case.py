"""Tests for IgnoringCase and ASCII folding."""

from __future__ import annotations

import pytest

from matchkit import (
    Equal,
    IgnoringCase,
    ModelRecord,
    Regex,
    all_of,
    any_of,
    ascii_lower,
    attribute,
    ends_with,
    equal_to,
    ignoring_case,
    is_in,
    matches_regex,
    not_,
    starts_with,
)


def test_ascii_lower_folds_only_ascii_letters() -> None:
    assert ascii_lower("ResNet-50") == "resnet-50"
    assert ascii_lower("ÉCOLE") == "École"
    assert ascii_lower("ΣIGMA") == "Σigma"


@pytest.mark.parametrize(
    ("value", "expected"),
    [("resnet", True), ("RESNET", True), ("ResNet", True), ("resnett", False)],
)
def test_ignoring_case_equal(value: str, expected: bool) -> None:
    assert IgnoringCase(Equal("ResNet")).matches(value) is expected


def test_ignoring_case_prefix_and_suffix() -> None:
    assert ignoring_case(starts_with("RES")).matches("resnet") is True
    assert ignoring_case(ends_with("net")).matches("GOOGLENET") is True
    assert ignoring_case(starts_with("goo")).matches("resnet") is False


def test_non_ascii_is_not_folded() -> None:
    m = ignoring_case(equal_to("École"))
    assert m.matches("école") is False
    assert m.matches("ÉCOLE") is True


def test_folding_reaches_through_combinators() -> None:
    m = ignoring_case(
        all_of(starts_with("Res"), not_(any_of(equal_to("RESNEXT"), ends_with("V2"))))
    )
    assert m.matches("resnet") is True
    assert m.matches("ResNeXt") is False
    assert m.matches("resnet-v2") is False


def test_folding_applies_to_membership() -> None:
    assert ignoring_case(is_in(["ResNet", "VGG"])).matches("vgg") is True


def test_wrapped_matcher_is_left_untouched() -> None:
    inner = Equal("ResNet")
    IgnoringCase(inner)
    assert inner.expected == "ResNet"
    assert inner.matches("resnet") is False


def test_regex_ignores_ascii_case_on_both_sides() -> None:
    assert ignoring_case(matches_regex("^Res")).matches("RESNET") is True
    assert ignoring_case(Regex("^res")).matches("ResNet") is True
    assert ignoring_case(Regex(r"^RES\w+T$")).matches("resnet") is True
    assert ignoring_case(Regex("^Goo")).matches("resnet") is False


def test_regex_folding_stays_ascii_only() -> None:
    assert ignoring_case(Regex("^École")).matches("ÉCOLE") is True
    assert ignoring_case(Regex("^école")).matches("ÉCOLE") is False


def test_wrapped_regex_keeps_its_pattern_and_flags() -> None:
    inner = Regex("^Res")
    ignoring_case(inner)
    assert inner.flags == 0
    assert inner.matches("resnet") is False


def test_non_string_values_are_not_folded() -> None:
    assert ignoring_case(equal_to("1")).matches(1) is False  # type: ignore[arg-type]
    assert ignoring_case(not_(equal_to("1"))).matches(1) is True  # type: ignore[arg-type]


def test_non_string_field_through_attribute_adapter() -> None:
    record = ModelRecord(name="ResNet", version=1)
    assert attribute("version", ignoring_case(equal_to("1"))).matches(record) is False
    assert attribute("name", ignoring_case(equal_to("resnet"))).matches(record) is True


def test_none_is_delegated_unfolded() -> None:
    assert ignoring_case(equal_to("x")).matches(None) is False  # type: ignore[arg-type]
    assert ignoring_case(not_(equal_to("x"))).matches(None) is True  # type: ignore[arg-type]


def test_describe_shows_original_matcher() -> None:
    assert ignoring_case(equal_to("ResNet")).describe() == {
        "op": "ignoring_case",
        "conditions": [{"op": "=", "val": "ResNet"}],
    }
