# Copyright 2026 Flagset Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the flags / set_array / containing_type pipeline."""

from __future__ import annotations

import enum
import itertools
import types

import pytest

import flagset
from flagset import (
    DefaultSet,
    EmptyPathError,
    IncompatibleTypeError,
    MalformedListError,
    MixedSeparators,
    ParserOptions,
    UnresolvedElementError,
    containing_type,
    expand,
    flags,
    set_array,
)

# ###############
# Flag Types
# ###############


class Pair(enum.Flag):
    A = 0b01
    B = 0b10


class PonyFlags(enum.Flag):
    Winged = 0b01
    Horned = 0b10


ponydom = types.SimpleNamespace(Flags=PonyFlags)


class Mode(enum.IntFlag):
    R = 4
    W = 2
    X = 1


class Reg:
    """Bitmask struct with named constants attached after class creation."""

    def __init__(self, bits: int = 0) -> None:
        self.bits = bits

    def __or__(self, other: Reg) -> Reg:
        return Reg(self.bits | other.bits)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Reg) and other.bits == self.bits

    def __hash__(self) -> int:
        return hash(self.bits)

    def __repr__(self) -> str:
        return f"Reg({self.bits:#b})"


Reg.A = Reg(0b0001)  # type: ignore[attr-defined]
Reg.B = Reg(0b0010)  # type: ignore[attr-defined]
Reg.C = Reg(0b0100)  # type: ignore[attr-defined]


class Feature(DefaultSet):
    __default_set__ = frozenset

    def __init__(self, name: str) -> None:
        self.name = name

    def __repr__(self) -> str:
        return f"Feature({self.name!r})"


Feature.Fast = Feature("fast")  # type: ignore[attr-defined]
Feature.Safe = Feature("safe")  # type: ignore[attr-defined]

outer = types.SimpleNamespace(inner=types.SimpleNamespace(Mode=Mode))

values = types.SimpleNamespace(A=1, B=2, C=3)

_TEST_SCOPE = {"Test": Pair}


# ###############
# Concrete Scenarios
# ###############


class TestScenarios:
    def test_empty_braces_give_empty_value(self) -> None:
        assert flags("Test::{}", _TEST_SCOPE) == Pair(0)

    def test_single_item(self) -> None:
        result = flags("Test::{A}", _TEST_SCOPE)
        assert result == Pair.A
        assert result.value == 0b01

    def test_two_items(self) -> None:
        result = flags("Test::{A | B}", _TEST_SCOPE)
        assert result == Pair.A | Pair.B
        assert result.value == 0b11

    def test_deeper_path(self) -> None:
        alicorn = flags("ponydom::Flags::{Winged | Horned}")
        assert alicorn == ponydom.Flags.Winged | ponydom.Flags.Horned

    def test_empty_path(self) -> None:
        with pytest.raises(EmptyPathError):
            flags("{A}", _TEST_SCOPE)


# ###############
# Properties
# ###############


class TestProperties:
    def test_comma_and_pipe_agree(self) -> None:
        assert flags("Pair::{A, B}") == flags("Pair::{A | B}")

    def test_listing_order_does_not_matter(self) -> None:
        expected = Reg(0b0111)
        for order in itertools.permutations(["A", "B", "C"]):
            assert flags("Reg::{" + " | ".join(order) + "}") == expected

    def test_singleton(self) -> None:
        for member in Mode:
            assert flags(f"Mode::{{{member.name}}}") == member

    @pytest.mark.parametrize("items", ["", "A", "A | B", "A, B"])
    def test_empty_path_always_rejected(self, items: str) -> None:
        with pytest.raises(EmptyPathError):
            flags("{" + items + "}", _TEST_SCOPE)

    def test_three_segment_path(self) -> None:
        assert flags("outer::inner::Mode::{R | W}") == Mode.R | Mode.W
        assert [str(e) for e in expand("outer::inner::Mode::{R | W}")] == [
            "outer::inner::Mode::R",
            "outer::inner::Mode::W",
        ]

    def test_first_stage_matches_what_is_folded(self) -> None:
        elements = expand("Pair::{A | B}")
        assert [str(e) for e in elements] == ["Pair::A", "Pair::B"]
        assert set_array("Pair::{A | B}") == [Pair.A, Pair.B]

    def test_repeated_evaluation_is_identical(self) -> None:
        results = [flags("Pair::{A | B}") for _ in range(10)]
        assert all(result == results[0] for result in results)

    def test_duplicates_are_harmless(self) -> None:
        assert flags("Pair::{A | A}") == Pair.A


# ###############
# Flag Representations
# ###############


class TestRepresentations:
    def test_int_flag(self) -> None:
        assert flags("Mode::{R | X}") == 5

    def test_bitmask_class_empty(self) -> None:
        assert flags("Reg::{}") == Reg(0)

    def test_bitmask_class(self) -> None:
        assert flags("Reg::{A, C}") == Reg(0b0101)

    def test_collection_set(self) -> None:
        assert flags("Feature::{Fast | Safe}") == frozenset({Feature.Fast, Feature.Safe})  # type: ignore[attr-defined]

    def test_collection_set_empty(self) -> None:
        assert flags("Feature::{}") == frozenset()

    def test_locally_defined_type(self) -> None:
        class Local(enum.Flag):
            X = 1
            Y = 2

        assert flags("Local::{X | Y}") == Local.X | Local.Y


# ###############
# Errors
# ###############


class TestErrors:
    def test_unknown_item(self) -> None:
        with pytest.raises(UnresolvedElementError) as exc_info:
            flags("Pair::{A | C}")
        assert exc_info.value.name == "Pair::C"
        assert exc_info.value.segment == "C"

    def test_unknown_type(self) -> None:
        with pytest.raises(UnresolvedElementError) as exc_info:
            flags("Missing::{A}")
        assert exc_info.value.segment == "Missing"

    def test_incompatible_type(self) -> None:
        with pytest.raises(IncompatibleTypeError):
            flags("values::{A}")

    def test_incompatible_type_detected_before_items(self) -> None:
        with pytest.raises(IncompatibleTypeError):
            flags("values::{DoesNotExist}")

    def test_malformed_list(self) -> None:
        with pytest.raises(MalformedListError):
            flags("Pair::{A |}")

    def test_strict_options(self) -> None:
        strict = ParserOptions(mixed_separators=MixedSeparators.FORBID)
        assert flags("Pair::{A | B}", options=strict) == Pair.A | Pair.B
        with pytest.raises(MalformedListError):
            flags("Pair::{A | B, A}", options=strict)

    def test_all_errors_share_a_base(self) -> None:
        for source in ["{A}", "Pair::{A |}", "Pair::{Z}", "values::{A}"]:
            with pytest.raises(flagset.FlagsetError):
                flags(source)


# ###############
# First Stage Only
# ###############


class TestSetArray:
    def test_empty(self) -> None:
        assert set_array("values::{}") == []

    def test_single(self) -> None:
        assert set_array("values::{A}") == [values.A]

    def test_pipe_and_comma(self) -> None:
        assert set_array("values::{A | B}") == [values.A, values.B]
        assert set_array("values::{A, B}") == [values.A, values.B]

    def test_keeps_order_and_duplicates(self) -> None:
        assert set_array("values::{C, A, C}") == [3, 1, 3]

    def test_explicit_scope(self) -> None:
        assert set_array("v::{B}", {"v": values}) == [2]

    def test_unresolved(self) -> None:
        with pytest.raises(UnresolvedElementError):
            set_array("values::{D}")


class TestContainingType:
    def test_single_segment(self) -> None:
        assert containing_type("Pair::{}") is Pair

    def test_nested(self) -> None:
        assert containing_type("ponydom::Flags::{Winged}") is PonyFlags

    def test_explicit_scope(self) -> None:
        assert containing_type("T::{}", {"T": Mode}) is Mode
