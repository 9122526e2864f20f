# Copyright 2026 Flagset Contributors
# SPDX-License-Identifier: Apache-2.0

"""Syntactic model for flag invocations (paths, elements, item lists)."""

from flagset.model.entities import (
    PATH_SEPARATOR,
    FlagPath,
    Invocation,
    QualifiedElement,
    Separator,
)

__all__ = [
    "PATH_SEPARATOR",
    "FlagPath",
    "Invocation",
    "QualifiedElement",
    "Separator",
]
