"""
LedgerView Engine

The transaction-to-pages pipeline.

Services:
- map_transaction: Transaction -> ordered Elements
- filter_elements: regular/expert projection
- paginate: Elements -> Pages under a display geometry
- check / PolicyChecker: Pages -> ValidityOutcome
- render_transaction / Renderer: the whole pipeline

Usage:
    from ledgerview.engine import Renderer

    renderer = Renderer(geometry, thresholds)
    result = renderer.render(transaction)
"""
from __future__ import annotations

from .formatters import (
    format_amount,
    format_duration,
    format_hash,
    format_key,
    format_public_key,
    format_target,
    format_timestamp,
    format_uref,
    format_version,
    group_digits,
)
from .mapper import ALL_LABELS, map_transaction
from .modes import filter_elements
from .paginator import (
    check_labels,
    chop,
    group_lines,
    page_count,
    page_label,
    paginate,
    paginate_element,
    worst_case_label,
)
from .pipeline import RenderResult, Renderer, render_elements, render_transaction
from .policy_checker import PolicyChecker, check, field_warnings

__all__ = [
    # Formatters
    "format_amount",
    "format_duration",
    "format_hash",
    "format_key",
    "format_public_key",
    "format_target",
    "format_timestamp",
    "format_uref",
    "format_version",
    "group_digits",
    # Mapper
    "ALL_LABELS",
    "map_transaction",
    # Modes
    "filter_elements",
    # Paginator
    "check_labels",
    "chop",
    "group_lines",
    "page_count",
    "page_label",
    "paginate",
    "paginate_element",
    "worst_case_label",
    # Policy
    "PolicyChecker",
    "check",
    "field_warnings",
    # Pipeline
    "RenderResult",
    "Renderer",
    "render_elements",
    "render_transaction",
]
