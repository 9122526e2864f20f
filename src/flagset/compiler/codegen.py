# Copyright 2026 Flagset Contributors
# SPDX-License-Identifier: Apache-2.0

"""Render a parsed invocation as an equivalent Python expression."""

import enum

from flagset.model.entities import Invocation

# ###############
# Public Interface
# ###############


class RenderForm(enum.Enum):
    """Shapes of generated expression."""

    # P.A | P.B
    FOLD = "fold"
    # flagset.set_from_iter(P, [P.A, P.B])
    CALL = "call"
    # [P.A, P.B]
    LIST = "list"


def render(invocation: Invocation, form: RenderForm = RenderForm.FOLD) -> str:
    """Return Python source equivalent to evaluating *invocation*.

    The FOLD form has no spelling for an empty list, so an empty invocation
    falls back to the CALL form.
    """
    owner = invocation.path.dotted_name
    values = [element.dotted_name for element in invocation.elements()]
    if form == RenderForm.LIST:
        return f"[{', '.join(values)}]"
    if form == RenderForm.FOLD and values:
        return " | ".join(values)
    return f"flagset.set_from_iter({owner}, [{', '.join(values)}])"
