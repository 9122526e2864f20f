# Copyright 2026 Flagset Contributors
# SPDX-License-Identifier: Apache-2.0

"""Resolution of qualified names against a Python scope.

The parser only reassembles names; this module looks them up. The first
segment is a name in the scope, every following segment an attribute.
"""

import builtins
import logging
import sys
from collections import ChainMap
from collections.abc import Mapping
from typing import Any

from flagset.errors import UnresolvedElementError
from flagset.model.entities import PATH_SEPARATOR, FlagPath, QualifiedElement

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

Scope = Mapping[str, Any]


def caller_scope(depth: int = 1) -> Scope:
    """Return the locals, globals and builtins visible *depth* frames up.

    ``depth=1`` is the function calling ``caller_scope``; public entry points
    pass ``2`` so that names are looked up where *they* were called.
    """
    frame = sys._getframe(depth)
    try:
        return ChainMap(dict(frame.f_locals), frame.f_globals, vars(builtins))
    finally:
        del frame


def resolve_path(path: FlagPath, scope: Scope) -> Any:
    """Return the object named by *path* (the containing type or namespace).

    Raises:
        UnresolvedElementError: If any segment cannot be found.
    """
    return _lookup(path.segments, scope)


def resolve_element(element: QualifiedElement, scope: Scope) -> Any:
    """Return the value named by a qualified element.

    Raises:
        UnresolvedElementError: If any segment cannot be found.
    """
    return _lookup(element.segments, scope)


def resolve_in(owner: Any, element: QualifiedElement) -> Any:
    """Return ``element.name`` looked up on an already resolved *owner*."""
    try:
        return getattr(owner, element.name)
    except AttributeError:
        raise UnresolvedElementError(element.qualified_name, element.name) from None


# ################
# Implementation
# ################


def _lookup(segments: tuple[str, ...], scope: Scope) -> Any:
    """Resolve the first segment in *scope* and the rest as attributes."""
    qualified_name = PATH_SEPARATOR.join(segments)
    head, *rest = segments
    try:
        value = scope[head]
    except KeyError:
        raise UnresolvedElementError(qualified_name, head) from None
    for segment in rest:
        try:
            value = getattr(value, segment)
        except AttributeError:
            raise UnresolvedElementError(qualified_name, segment) from None
    logger.debug("Resolved %s to %r", qualified_name, value)
    return value
