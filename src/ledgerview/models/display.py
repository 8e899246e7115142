"""
LedgerView Display Models

The values flowing between pipeline stages:

- Element: one labelled transaction field, produced by the mapper
- Page: one screen of text for one element, produced by the paginator
- DisplayGeometry: character/line capacity of the target screen
- PolicyThresholds: page-count limits applied by the policy checker
- ValidityOutcome: the policy verdict for one mode

All of them are immutable once built.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from ..exceptions import GeometryError, ThresholdError
from .enums import Mode


# =============================================================================
# Element
# =============================================================================

@dataclass(frozen=True)
class Element:
    """
    A single labelled field of a transaction.

    Attributes:
        label: Text shown in the page title (e.g., "Txn hash")
        value: Full rendered value, before pagination
        expert_only: Whether the element is hidden in regular mode
    """
    label: str
    value: str
    expert_only: bool = False

    def __post_init__(self) -> None:
        if not self.label:
            raise ValueError("Element label cannot be empty")

    @classmethod
    def regular(cls, label: str, value: str) -> Element:
        return cls(label=label, value=value, expert_only=False)

    @classmethod
    def expert(cls, label: str, value: str) -> Element:
        return cls(label=label, value=value, expert_only=True)


# =============================================================================
# Page
# =============================================================================

@dataclass(frozen=True)
class Page:
    """
    One screen of device text.

    Attributes:
        index: Position of the source element in the element sequence
        label: Element label, with a "[k/m]" suffix when the element spans pages
        lines: Rendered value lines (may be empty)
    """
    index: int
    label: str
    lines: tuple[str, ...] = ()

    @property
    def text(self) -> str:
        """All lines joined, as the user reads them."""
        return "".join(self.lines)

    def to_dict(self) -> dict[str, Any]:
        return {
            "index": self.index,
            "label": self.label,
            "lines": list(self.lines),
        }


# =============================================================================
# Configuration Values
# =============================================================================

def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


@dataclass(frozen=True)
class DisplayGeometry:
    """
    Text capacity of a hardware screen.

    Attributes:
        max_chars_per_line: Characters that fit on one value line
        max_lines_per_page: Value lines shown under one page title
        max_label_chars: Characters available for a page title
    """
    max_chars_per_line: int
    max_lines_per_page: int
    max_label_chars: int = 11

    def __post_init__(self) -> None:
        invalid = {
            name: getattr(self, name)
            for name in ("max_chars_per_line", "max_lines_per_page", "max_label_chars")
            if not _is_positive_int(getattr(self, name))
        }
        if invalid:
            raise GeometryError(
                message="Display geometry limits must be positive integers",
                details=invalid,
            )

    @property
    def chars_per_page(self) -> int:
        return self.max_chars_per_line * self.max_lines_per_page

    def to_dict(self) -> dict[str, int]:
        return {
            "max_chars_per_line": self.max_chars_per_line,
            "max_lines_per_page": self.max_lines_per_page,
            "max_label_chars": self.max_label_chars,
        }


@dataclass(frozen=True)
class PolicyThresholds:
    """
    Limits the policy checker applies to paginated output.

    A limit of None disables the corresponding rule.

    Attributes:
        max_regular_pages: Total page limit in regular mode
        max_expert_pages: Total page limit in expert mode
        max_pages_per_field: Pages one element may span before it is flagged
    """
    max_regular_pages: Optional[int] = None
    max_expert_pages: Optional[int] = None
    max_pages_per_field: Optional[int] = None

    def __post_init__(self) -> None:
        invalid = {
            name: getattr(self, name)
            for name in ("max_regular_pages", "max_expert_pages", "max_pages_per_field")
            if getattr(self, name) is not None and not _is_positive_int(getattr(self, name))
        }
        if invalid:
            raise ThresholdError(
                message="Policy thresholds must be positive integers or None",
                details=invalid,
            )

    def max_pages(self, mode: Mode) -> Optional[int]:
        """Total page limit for the given mode."""
        if mode is Mode.REGULAR:
            return self.max_regular_pages
        return self.max_expert_pages

    def to_dict(self) -> dict[str, Optional[int]]:
        return {
            "max_regular_pages": self.max_regular_pages,
            "max_expert_pages": self.max_expert_pages,
            "max_pages_per_field": self.max_pages_per_field,
        }


# =============================================================================
# Policy Outcome
# =============================================================================

@dataclass(frozen=True)
class FieldWarning:
    """An element whose value spans more pages than is comfortable to review."""
    index: int
    label: str
    page_count: int


@dataclass(frozen=True)
class ValidityOutcome:
    """
    Policy verdict for one mode's page sequence.

    Attributes:
        mode: Regular or expert
        valid: False when the page sequence breaks a hard limit
        total_pages: Number of pages the user clicks through
        warnings: Elements that should be preceded by a warning screen
    """
    mode: Mode
    valid: bool
    total_pages: int
    warnings: tuple[FieldWarning, ...] = field(default_factory=tuple)

    @property
    def needs_warning(self) -> bool:
        return bool(self.warnings)

    def to_dict(self) -> dict[str, Any]:
        return {
            "mode": self.mode.value,
            "valid": self.valid,
            "total_pages": self.total_pages,
            "warnings": [
                {"index": w.index, "label": w.label, "page_count": w.page_count}
                for w in self.warnings
            ],
        }
