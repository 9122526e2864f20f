# Copyright 2026 Flagset Contributors
# SPDX-License-Identifier: Apache-2.0

"""First-stage expansion: path and element sequence, without building a set.

These are usable on their own, for example to list the qualified names an
invocation refers to without resolving or combining them.
"""

from flagset.compiler.parser import parse
from flagset.config import ParserOptions
from flagset.model.entities import FlagPath, QualifiedElement

# ###############
# Public Interface
# ###############


def containing_path(source: str, options: ParserOptions | None = None) -> FlagPath:
    """Return the containing path of an invocation: ``A::B::{...}`` gives ``A::B``."""
    return parse(source, options).path


def expand(source: str, options: ParserOptions | None = None) -> list[QualifiedElement]:
    """Return the qualified elements of an invocation in source order.

    ``expand("P::{A | B}")`` yields ``[P::A, P::B]``; an empty brace list
    yields ``[]``. No name is checked for existence.
    """
    return parse(source, options).elements()
