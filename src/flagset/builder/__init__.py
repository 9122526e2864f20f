# Copyright 2026 Flagset Contributors
# SPDX-License-Identifier: Apache-2.0

"""Generic set builder: the default set type of an element type."""

from flagset.builder.default_set import (
    DefaultSet,
    SetBuilder,
    Strategy,
    SupportsFromIter,
    default_set,
    set_from_iter,
)

__all__ = [
    "DefaultSet",
    "SetBuilder",
    "Strategy",
    "SupportsFromIter",
    "default_set",
    "set_from_iter",
]
