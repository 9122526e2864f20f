# Copyright 2026 Flagset Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the invocation model."""

import pydantic
import pytest

from flagset.model.entities import FlagPath, Invocation, QualifiedElement, Separator


class TestFlagPath:
    def test_names(self) -> None:
        path = FlagPath(segments=("ponydom", "Flags"))
        assert path.qualified_name == "ponydom::Flags"
        assert path.dotted_name == "ponydom.Flags"
        assert str(path) == "ponydom::Flags"

    def test_empty_path_rejected(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            FlagPath(segments=())

    def test_qualify(self) -> None:
        element = FlagPath(segments=("A", "B")).qualify("X")
        assert element == QualifiedElement(path=FlagPath(segments=("A", "B")), name="X")
        assert element.segments == ("A", "B", "X")
        assert str(element) == "A::B::X"
        assert element.dotted_name == "A.B.X"

    def test_hashable(self) -> None:
        path = FlagPath(segments=("A",))
        assert len({path.qualify("X"), path.qualify("X"), path.qualify("Y")}) == 2


class TestInvocation:
    def test_elements_in_order(self) -> None:
        invocation = Invocation(
            path=FlagPath(segments=("T",)),
            items=("B", "A"),
            separators=(Separator.PIPE,),
        )
        assert [str(e) for e in invocation.elements()] == ["T::B", "T::A"]

    def test_empty(self) -> None:
        invocation = Invocation(path=FlagPath(segments=("T",)))
        assert invocation.elements() == []
        assert str(invocation) == "T::{}"

    def test_str_keeps_separators(self) -> None:
        invocation = Invocation(
            path=FlagPath(segments=("a", "T")),
            items=("A", "B", "C"),
            separators=(Separator.PIPE, Separator.COMMA),
        )
        assert str(invocation) == "a::T::{A | B , C}"

    def test_separator_count_checked(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            Invocation(path=FlagPath(segments=("T",)), items=("A", "B"))
