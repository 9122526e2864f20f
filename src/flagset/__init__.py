# Copyright 2026 Flagset Contributors
# SPDX-License-Identifier: Apache-2.0

"""Build flag sets from ``Namespace::Type::{A | B}`` invocations.

Works with any flag-like type: ``enum.Flag`` and ``enum.IntFlag``, bitmask
classes that support ``|``, and types that declare a collection as their
default set.

Example::

    import enum

    from flagset import flags

    class Test(enum.Flag):
        A = 0b01
        B = 0b10

    assert flags("Test::{}") == Test(0)
    assert flags("Test::{A}") == Test.A
    assert flags("Test::{A | B}") == Test.A | Test.B
"""

from flagset.api import containing_type, flags, set_array
from flagset.builder import DefaultSet, SetBuilder, Strategy, SupportsFromIter, default_set, set_from_iter
from flagset.compiler import RenderForm, containing_path, expand, parse, render
from flagset.config import ConfigError, FlagsetConfig, MixedSeparators, ParserOptions, load_config
from flagset.errors import (
    EmptyPathError,
    FlagsetError,
    IncompatibleTypeError,
    MalformedListError,
    ParseError,
    UnresolvedElementError,
)
from flagset.model import FlagPath, Invocation, QualifiedElement, Separator

__all__ = [
    # Pipeline
    "flags",
    "set_array",
    "containing_type",
    # Compiler
    "parse",
    "expand",
    "containing_path",
    "render",
    "RenderForm",
    # Set builder
    "DefaultSet",
    "SetBuilder",
    "Strategy",
    "SupportsFromIter",
    "default_set",
    "set_from_iter",
    # Model
    "FlagPath",
    "Invocation",
    "QualifiedElement",
    "Separator",
    # Configuration
    "ParserOptions",
    "MixedSeparators",
    "FlagsetConfig",
    "load_config",
    "ConfigError",
    # Errors
    "FlagsetError",
    "ParseError",
    "EmptyPathError",
    "MalformedListError",
    "UnresolvedElementError",
    "IncompatibleTypeError",
]
