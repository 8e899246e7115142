"""
LedgerView Policy Checker

Classifies a mode's paginated output against configured thresholds.

Rules:
- Total page count above the mode's maximum marks the mode invalid
- An element spanning more pages than the per-field comfort limit is
  reported as a FieldWarning (a candidate for an interstitial warning
  screen); warnings alone do not invalidate the mode

Thresholds are always passed in; the checker holds no limits of its own.
"""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Sequence

from ..models import FieldWarning, Mode, Page, PolicyThresholds, ValidityOutcome
from .paginator import page_label


def _base_label(first_page: Page, total: int) -> str:
    """Strip the "[1/m]" suffix the paginator put on an element's first page."""
    suffix = page_label("", 1, total)
    if total > 1 and first_page.label.endswith(suffix):
        return first_page.label[: -len(suffix)]
    return first_page.label


def field_warnings(pages: Sequence[Page], max_pages_per_field: int) -> tuple[FieldWarning, ...]:
    """Elements whose page span exceeds the comfort limit, in display order."""
    counts = Counter(page.index for page in pages)
    warnings = []
    seen: set[int] = set()
    for page in pages:
        if page.index in seen:
            continue
        seen.add(page.index)
        total = counts[page.index]
        if total > max_pages_per_field:
            warnings.append(FieldWarning(
                index=page.index,
                label=_base_label(page, total),
                page_count=total,
            ))
    return tuple(warnings)


def check(pages: Sequence[Page], mode: Mode, thresholds: PolicyThresholds) -> ValidityOutcome:
    """
    Evaluate one mode's page sequence.

    Args:
        pages: Paginated output for the mode
        mode: Which mode the pages belong to
        thresholds: Injected policy limits

    Returns:
        ValidityOutcome with the verdict, total page count and warnings
    """
    total = len(pages)
    limit = thresholds.max_pages(mode)
    valid = limit is None or total <= limit

    warnings: tuple[FieldWarning, ...] = ()
    if thresholds.max_pages_per_field is not None:
        warnings = field_warnings(pages, thresholds.max_pages_per_field)

    return ValidityOutcome(mode=mode, valid=valid, total_pages=total, warnings=warnings)


@dataclass(frozen=True)
class PolicyChecker:
    """
    Policy checker bound to one set of thresholds.

    Usage:
        checker = PolicyChecker(PolicyThresholds(max_regular_pages=40))
        outcome = checker.check(pages, Mode.REGULAR)
    """
    thresholds: PolicyThresholds

    def check(self, pages: Sequence[Page], mode: Mode) -> ValidityOutcome:
        return check(pages, mode, self.thresholds)
