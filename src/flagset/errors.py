# Copyright 2026 Flagset Contributors
# SPDX-License-Identifier: Apache-2.0

"""Exception hierarchy shared by the parser, resolver and set builder."""

# ###############
# Public Interface
# ###############


class FlagsetError(Exception):
    """Base class for every error raised while evaluating a flag invocation."""


class ParseError(FlagsetError):
    """Raised when an invocation is syntactically invalid.

    Attributes:
        line: 1-based line number of the offending token.
        column: 1-based column number of the offending token.
    """

    def __init__(self, message: str, line: int, column: int) -> None:
        super().__init__(f"Line {line}, column {column}: {message}")
        self.line = line
        self.column = column


class EmptyPathError(ParseError):
    """Raised when the path prefix (``A::`` of ``A::{...}``) is missing."""


class MalformedListError(ParseError):
    """Raised when the brace-enclosed item list does not match the grammar."""


class UnresolvedElementError(FlagsetError):
    """Raised when a qualified name cannot be found in the lookup scope.

    Attributes:
        name: The qualified name that failed to resolve (``A::B::C``).
        segment: The first segment that could not be found.
    """

    def __init__(self, name: str, segment: str) -> None:
        super().__init__(f"Cannot resolve {name!r}: no attribute or name {segment!r}")
        self.name = name
        self.segment = segment


class IncompatibleTypeError(FlagsetError):
    """Raised when a type can neither be collected into nor folded into a set."""

    def __init__(self, element_type: object, reason: str) -> None:
        type_name = getattr(element_type, "__qualname__", repr(element_type))
        super().__init__(f"Type {type_name!r} has no default set: {reason}")
        self.element_type = element_type
