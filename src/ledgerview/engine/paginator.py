"""
LedgerView Paginator

Splits element values into fixed-size pages for the device screen.

The chop is positional, not word-aware: values are opaque hex and digit
strings, so line i of a value is characters [i*W, (i+1)*W) where W is the
line width. Lines are grouped into pages of at most H lines. An element that
needs more than one page gets a "[k/m]" suffix on every page label.

Everything here is a stateless function over slices.
"""
from __future__ import annotations

from typing import Iterable, Sequence

from ..exceptions import LabelOverflowError
from ..models import DisplayGeometry, Element, Page


def chop(value: str, width: int) -> list[str]:
    """
    Split value into consecutive chunks of at most width characters.

    Example:
        >>> chop("abcdefg", 3)
        ['abc', 'def', 'g']
    """
    return [value[start:start + width] for start in range(0, len(value), width)]


def group_lines(lines: Sequence[str], lines_per_page: int) -> list[tuple[str, ...]]:
    """
    Group lines into pages, preserving order.

    Always returns at least one page; an empty input yields one empty page.
    """
    if not lines:
        return [()]
    return [
        tuple(lines[start:start + lines_per_page])
        for start in range(0, len(lines), lines_per_page)
    ]


def page_label(label: str, position: int, total: int) -> str:
    """Label for page `position` (1-based) of `total`."""
    if total == 1:
        return label
    return f"{label} [{position}/{total}]"


def paginate_element(element: Element, index: int, geometry: DisplayGeometry) -> list[Page]:
    """
    Paginate a single element.

    Args:
        element: Element to split
        index: Position of the element in its sequence
        geometry: Target display geometry

    Returns:
        One or more pages, all sharing `index`
    """
    lines = chop(element.value, geometry.max_chars_per_line)
    groups = group_lines(lines, geometry.max_lines_per_page)
    total = len(groups)
    return [
        Page(index=index, label=page_label(element.label, position, total), lines=group)
        for position, group in enumerate(groups, start=1)
    ]


def paginate(elements: Iterable[Element], geometry: DisplayGeometry) -> list[Page]:
    """
    Paginate an element sequence.

    Example:
        >>> geometry = DisplayGeometry(max_chars_per_line=35, max_lines_per_page=1)
        >>> [p.label for p in paginate([Element("Hash", "ab" * 35)], geometry)]
        ['Hash [1/2]', 'Hash [2/2]']
    """
    pages: list[Page] = []
    for index, element in enumerate(elements):
        pages.extend(paginate_element(element, index, geometry))
    return pages


def page_count(element: Element, geometry: DisplayGeometry) -> int:
    """Number of pages an element occupies, without building them."""
    if not element.value:
        return 1
    return -(-len(element.value) // geometry.chars_per_page)


# =============================================================================
# Label Budget
# =============================================================================

def worst_case_label(element: Element, geometry: DisplayGeometry) -> str:
    """
    Longest page title the element produces under geometry.

    Example:
        >>> worst_case_label(Element("Entry point", "x" * 100), DisplayGeometry(17, 2))
        'Entry point [3/3]'
    """
    total = page_count(element, geometry)
    return page_label(element.label, total, total)


def check_labels(elements: Iterable[Element], geometry: DisplayGeometry) -> None:
    """
    Verify every page title fits the display's label budget.

    The title checked is the label with its "[m/m]" suffix, m being the page
    count the element actually paginates to. Labels are fixed strings chosen
    when the mapping is designed, so an overflow is a defect in the mapping
    or the profile rather than in the input. Call this from tests and before
    emitting vectors, not on the pagination path.

    Raises:
        LabelOverflowError: If any title is longer than max_label_chars
    """
    overflowing = sorted({
        title
        for title in (worst_case_label(element, geometry) for element in elements)
        if len(title) > geometry.max_label_chars
    })
    if overflowing:
        raise LabelOverflowError(
            message=(
                f"Page titles exceed {geometry.max_label_chars} characters: "
                + ", ".join(repr(label) for label in overflowing)
            ),
            details={
                "max_label_chars": geometry.max_label_chars,
                "labels": overflowing,
            },
        )
