# Copyright 2026 Flagset Contributors
# SPDX-License-Identifier: Apache-2.0

"""The default "set" type of an element type, and how to build it.

An element type ``E`` is asked two questions: what its set type ``S`` is, and
how a sequence of ``E`` becomes an ``S``. There are two answers:

- **collect**: ``E`` names ``S`` via ``__default_set__`` and ``S`` is built
  straight from the sequence (``S.from_iter(seq)`` or ``S(seq)``). Any
  collection-like set representation works this way.
- **fold**: ``E`` supports ``|``; the sequence is folded left to right
  starting from ``E``'s empty value. This covers ``enum.Flag`` and
  bitmask-style classes.

An empty sequence goes through the same path and yields ``S``'s own empty
value (``S(())`` or the fold seed).
"""

from __future__ import annotations

import enum
import functools
import logging
import operator
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any, ClassVar, Protocol, runtime_checkable

from flagset.errors import IncompatibleTypeError

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


@runtime_checkable
class SupportsFromIter(Protocol):
    """A set type that builds itself from a sequence of elements."""

    @classmethod
    def from_iter(cls, iterable: Iterable[Any]) -> Any: ...


class Strategy(enum.Enum):
    """How a SetBuilder turns elements into a set."""

    COLLECT = "collect"
    FOLD = "fold"


class DefaultSet:
    """Mixin declaring the set type of an element type.

    Subclasses set ``__default_set__`` to the set type. ``set_from_iter``
    builds that type from a sequence of elements and may be overridden.

    Example::

        class Color(DefaultSet):
            __default_set__ = frozenset
    """

    __default_set__: ClassVar[type]

    @classmethod
    def set_from_iter(cls, iterable: Iterable[Any]) -> Any:
        """Construct the default set from *iterable*."""
        return _collect(cls.__default_set__, iterable)


@dataclass(frozen=True)
class SetBuilder:
    """The resolved default set of one element type.

    Attributes:
        element_type: The element type this builder was resolved for.
        set_type: The type of the values ``build`` returns.
        strategy: Whether elements are collected or folded.
    """

    element_type: Any
    set_type: Any
    strategy: Strategy
    _build: Callable[[Iterable[Any]], Any] = field(repr=False, compare=False)

    def build(self, iterable: Iterable[Any]) -> Any:
        """Combine *iterable* into one value of ``set_type``."""
        return self._build(iterable)


def default_set(element_type: Any) -> SetBuilder:
    """Resolve the default set of *element_type*.

    Raises:
        IncompatibleTypeError: If the type declares no set type and its
            instances do not support ``|``.
    """
    declared = getattr(element_type, "__default_set__", None)
    if declared is not None:
        if isinstance(element_type, type) and issubclass(element_type, DefaultSet):
            build = element_type.set_from_iter
        else:
            build = functools.partial(_collect, declared)
        return SetBuilder(element_type, declared, Strategy.COLLECT, build)

    if not isinstance(element_type, type):
        raise IncompatibleTypeError(element_type, "not a type")

    if issubclass(element_type, enum.Flag):
        return SetBuilder(element_type, element_type, Strategy.FOLD, functools.partial(_fold, element_type(0)))

    if not _supports_or(element_type):
        raise IncompatibleTypeError(element_type, "declares no __default_set__ and does not support '|'")

    empty = _empty_value(element_type)
    return SetBuilder(element_type, type(empty), Strategy.FOLD, functools.partial(_fold, empty))


def set_from_iter(element_type: Any, iterable: Iterable[Any]) -> Any:
    """Build the default set of *element_type* from *iterable*."""
    builder = default_set(element_type)
    result = builder.build(iterable)
    logger.debug("Built %r from %s via %s", result, _type_name(element_type), builder.strategy.value)
    return result


# ################
# Implementation
# ################


def _collect(set_type: Any, iterable: Iterable[Any]) -> Any:
    """Build-from-sequence: prefer ``from_iter``, else the constructor."""
    if isinstance(set_type, SupportsFromIter):
        return set_type.from_iter(iterable)
    return set_type(iterable)


def _supports_or(element_type: type) -> bool:
    # Looked up in the MRO only; `type` itself defines __or__ for unions.
    return any("__or__" in vars(klass) for klass in element_type.__mro__)


def _fold(seed: Any, iterable: Iterable[Any]) -> Any:
    return functools.reduce(operator.or_, iterable, seed)


def _empty_value(element_type: type) -> Any:
    """Return the fold seed: ``E.empty()`` when defined, else ``E()``."""
    empty = getattr(element_type, "empty", None)
    try:
        if callable(empty):
            return empty()
        return element_type()
    except TypeError as exc:
        raise IncompatibleTypeError(
            element_type,
            f"no empty value (define empty() or a no-argument constructor): {exc}",
        ) from exc


def _type_name(element_type: Any) -> str:
    return getattr(element_type, "__qualname__", repr(element_type))
