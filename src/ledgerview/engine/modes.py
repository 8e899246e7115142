"""
LedgerView Mode Filter

Projects one element stream onto a display mode. Regular mode hides
expert-only elements; expert mode shows everything. Because both views are
projections of the same stream, the expert view is always a superset of the
regular one.
"""
from __future__ import annotations

from typing import Iterable

from ..models import Element, Mode


def filter_elements(elements: Iterable[Element], mode: Mode) -> list[Element]:
    """
    Keep the elements visible in `mode`, in their original order.

    Indices are not carried over; pagination numbers the filtered sequence
    from zero.
    """
    if mode is Mode.EXPERT:
        return list(elements)
    return [element for element in elements if not element.expert_only]
