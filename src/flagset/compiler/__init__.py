# Copyright 2026 Flagset Contributors
# SPDX-License-Identifier: Apache-2.0

"""Invocation compiler: scanning, parsing, expansion and rendering."""

from flagset.compiler.codegen import RenderForm, render
from flagset.compiler.expansion import containing_path, expand
from flagset.compiler.parser import parse

__all__ = [
    "parse",
    "containing_path",
    "expand",
    "render",
    "RenderForm",
]
