"""
LedgerView Pipeline

Runs the full transformation for one transaction:

    Transaction -> Elements -> {regular, expert} -> Pages -> ValidityOutcome

The pipeline is pure: the same transaction, geometry and thresholds always
produce the same result.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..models import (
    DisplayGeometry,
    Element,
    Mode,
    Page,
    PolicyThresholds,
    Transaction,
    ValidityOutcome,
)
from .mapper import map_transaction
from .modes import filter_elements
from .paginator import paginate
from .policy_checker import check


@dataclass(frozen=True)
class RenderResult:
    """
    Complete output of the pipeline for one transaction.

    Attributes:
        elements: Mapped elements, expert-only ones included
        regular_pages: Pages shown in regular mode
        expert_pages: Pages shown in expert mode
        regular_outcome: Policy verdict for regular mode
        expert_outcome: Policy verdict for expert mode
    """
    elements: tuple[Element, ...]
    regular_pages: tuple[Page, ...]
    expert_pages: tuple[Page, ...]
    regular_outcome: ValidityOutcome
    expert_outcome: ValidityOutcome

    def pages(self, mode: Mode) -> tuple[Page, ...]:
        return self.regular_pages if mode is Mode.REGULAR else self.expert_pages

    def outcome(self, mode: Mode) -> ValidityOutcome:
        return self.regular_outcome if mode is Mode.REGULAR else self.expert_outcome

    @property
    def valid(self) -> bool:
        return self.regular_outcome.valid and self.expert_outcome.valid

    def to_dict(self) -> dict[str, Any]:
        return {
            "regular_pages": [p.to_dict() for p in self.regular_pages],
            "expert_pages": [p.to_dict() for p in self.expert_pages],
            "regular_outcome": self.regular_outcome.to_dict(),
            "expert_outcome": self.expert_outcome.to_dict(),
        }


def render_elements(
    elements: list[Element],
    geometry: DisplayGeometry,
    thresholds: PolicyThresholds,
) -> RenderResult:
    """Project, paginate and check an already mapped element stream."""
    paged: dict[Mode, tuple[Page, ...]] = {}
    outcomes: dict[Mode, ValidityOutcome] = {}
    for mode in (Mode.REGULAR, Mode.EXPERT):
        paged[mode] = tuple(paginate(filter_elements(elements, mode), geometry))
        outcomes[mode] = check(paged[mode], mode, thresholds)

    return RenderResult(
        elements=tuple(elements),
        regular_pages=paged[Mode.REGULAR],
        expert_pages=paged[Mode.EXPERT],
        regular_outcome=outcomes[Mode.REGULAR],
        expert_outcome=outcomes[Mode.EXPERT],
    )


def render_transaction(
    transaction: Transaction,
    geometry: DisplayGeometry,
    thresholds: PolicyThresholds,
) -> RenderResult:
    """
    Render a transaction for both display modes.

    Args:
        transaction: Sealed transaction
        geometry: Target display geometry
        thresholds: Policy limits

    Returns:
        RenderResult with both page sequences and both verdicts
    """
    return render_elements(map_transaction(transaction), geometry, thresholds)


@dataclass(frozen=True)
class Renderer:
    """
    Pipeline bound to one display configuration.

    Usage:
        renderer = Renderer(geometry, thresholds)
        result = renderer.render(transaction)
    """
    geometry: DisplayGeometry
    thresholds: PolicyThresholds = field(default_factory=PolicyThresholds)

    def render(self, transaction: Transaction) -> RenderResult:
        return render_transaction(transaction, self.geometry, self.thresholds)
