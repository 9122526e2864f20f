# Copyright 2026 Flagset Contributors
# SPDX-License-Identifier: Apache-2.0

"""Syntactic entities produced by parsing a flag invocation."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############

PATH_SEPARATOR = "::"


class Separator(Enum):
    """Item separators accepted inside the braces."""

    PIPE = "|"
    COMMA = ","


class FlagPath(BaseModel):
    """The namespace path in front of the braces, e.g. ``ponydom::Flags``."""

    model_config = ConfigDict(frozen=True)

    segments: tuple[str, ...] = _Field(min_length=1)

    @property
    def qualified_name(self) -> str:
        """The path joined with ``::``."""
        return PATH_SEPARATOR.join(self.segments)

    @property
    def dotted_name(self) -> str:
        """The path as a Python attribute chain."""
        return ".".join(self.segments)

    def qualify(self, name: str) -> QualifiedElement:
        """Return the element ``<path>::<name>``."""
        return QualifiedElement(path=self, name=name)

    def __str__(self) -> str:
        return self.qualified_name


class QualifiedElement(BaseModel):
    """A bare item name prefixed by its containing path."""

    model_config = ConfigDict(frozen=True)

    path: FlagPath
    name: str

    @property
    def segments(self) -> tuple[str, ...]:
        """All segments including the item name."""
        return (*self.path.segments, self.name)

    @property
    def qualified_name(self) -> str:
        return PATH_SEPARATOR.join(self.segments)

    @property
    def dotted_name(self) -> str:
        return ".".join(self.segments)

    def __str__(self) -> str:
        return self.qualified_name


class Invocation(BaseModel):
    """A parsed ``path::{item <sep> item ...}`` invocation.

    Attributes:
        path: The containing path.
        items: Bare item names in source order.
        separators: The separator found between each pair of adjacent items.
    """

    model_config = ConfigDict(frozen=True)

    path: FlagPath
    items: tuple[str, ...] = ()
    separators: tuple[Separator, ...] = ()

    @model_validator(mode="after")
    def check_separator_count(self) -> Invocation:
        expected = max(len(self.items) - 1, 0)
        if len(self.separators) != expected:
            raise ValueError(
                f"expected {expected} separator(s) for {len(self.items)} item(s), got {len(self.separators)}"
            )
        return self

    def elements(self) -> list[QualifiedElement]:
        """Return the qualified elements in source order."""
        return [self.path.qualify(item) for item in self.items]

    def __str__(self) -> str:
        body = ""
        for index, item in enumerate(self.items):
            if index > 0:
                body += f" {self.separators[index - 1].value} "
            body += item
        return f"{self.path.qualified_name}{PATH_SEPARATOR}{{{body}}}"
