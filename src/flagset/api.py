# Copyright 2026 Flagset Contributors
# SPDX-License-Identifier: Apache-2.0

"""The full pipeline: parse an invocation, resolve its names, build the set.

``flags("ponydom::Flags::{Winged | Horned}")`` evaluates to
``ponydom.Flags.Winged | ponydom.Flags.Horned``. Names are looked up in the
caller's scope unless an explicit *scope* mapping is given.
"""

import logging
from typing import Any

from flagset.builder.default_set import default_set
from flagset.compiler.parser import parse
from flagset.config import ParserOptions
from flagset.resolver import Scope, caller_scope, resolve_in, resolve_path

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def flags(source: str, scope: Scope | None = None, *, options: ParserOptions | None = None) -> Any:
    """Evaluate a flag invocation to a value of its type's default set.

    Args:
        source: Invocation text, e.g. ``"Test::{A | B}"``.
        scope: Mapping used to look up the first path segment. Defaults to the
            caller's locals, globals and builtins.
        options: Parser options.

    Returns:
        The combination of all listed items, or the empty set value when the
        braces are empty.

    Raises:
        EmptyPathError: If the path prefix is missing.
        MalformedListError: If the item list does not match the grammar.
        UnresolvedElementError: If the path or an item does not exist.
        IncompatibleTypeError: If the containing type has no default set.
    """
    if scope is None:
        scope = caller_scope(2)
    invocation = parse(source, options)
    owner = resolve_path(invocation.path, scope)
    builder = default_set(owner)
    values = [resolve_in(owner, element) for element in invocation.elements()]
    result = builder.build(values)
    logger.debug("%s -> %r", invocation, result)
    return result


def set_array(source: str, scope: Scope | None = None, *, options: ParserOptions | None = None) -> list[Any]:
    """Resolve the listed items in source order without combining them.

    ``set_array("values::{A, B}")`` returns ``[values.A, values.B]``. The
    containing path may be any namespace (a module, a class, an object).
    """
    if scope is None:
        scope = caller_scope(2)
    invocation = parse(source, options)
    owner = resolve_path(invocation.path, scope)
    return [resolve_in(owner, element) for element in invocation.elements()]


def containing_type(source: str, scope: Scope | None = None, *, options: ParserOptions | None = None) -> Any:
    """Resolve the containing path of an invocation: ``A::B::{...}`` gives ``A.B``."""
    if scope is None:
        scope = caller_scope(2)
    return resolve_path(parse(source, options).path, scope)
