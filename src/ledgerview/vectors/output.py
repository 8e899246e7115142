"""
LedgerView Test Vector Output

Shapes rendered samples into test-vector records and reads/writes the
vector file.

Record layout (keys in this order):
    index, name, valid_regular, valid_expert, testnet, blob,
    output, output_expert

`output` and `output_expert` hold one string per physical page line:

    "<page index> | <page label> : <line text>"

The file is a JSON array indented with two spaces and ending in a newline,
so that regenerated files diff cleanly against committed ones.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Sequence, Union

from ..canon import content_hash
from ..codec import to_blob
from ..engine import check_labels, render_transaction
from ..exceptions import LedgerViewError, VectorFileError
from ..models import DisplayGeometry, Page, PolicyThresholds, Transaction
from .generator import MAINNET_CHAIN_NAME
from .sample import Sample

logger = logging.getLogger(__name__)

RECORD_KEYS = (
    "index",
    "name",
    "valid_regular",
    "valid_expert",
    "testnet",
    "blob",
    "output",
    "output_expert",
)


# =============================================================================
# Page Lines
# =============================================================================

def render_page_lines(pages: Iterable[Page]) -> list[str]:
    """
    Flatten pages into vector output lines.

    A page without lines still produces one line with empty text.

    Example:
        >>> render_page_lines([Page(0, "Type", ("Delegate",))])
        ['0 | Type : Delegate']
    """
    output = []
    for page in pages:
        for line in page.lines or ("",):
            output.append(f"{page.index} | {page.label} : {line}")
    return output


# =============================================================================
# Records
# =============================================================================

@dataclass(frozen=True)
class TestVector:
    """
    One published test vector.

    Attributes:
        index: Position in the vector file
        name: Sample name
        valid_regular: Policy verdict for regular mode
        valid_expert: Policy verdict for expert mode
        testnet: Whether the transaction targets a non-mainnet chain
        blob: Hex of the serialized transaction
        output: Regular-mode page lines
        output_expert: Expert-mode page lines
    """
    __test__ = False

    index: int
    name: str
    valid_regular: bool
    valid_expert: bool
    testnet: bool
    blob: str
    output: tuple[str, ...] = field(default_factory=tuple)
    output_expert: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {
            "index": self.index,
            "name": self.name,
            "valid_regular": self.valid_regular,
            "valid_expert": self.valid_expert,
            "testnet": self.testnet,
            "blob": self.blob,
            "output": list(self.output),
            "output_expert": list(self.output_expert),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TestVector:
        return cls(
            index=data["index"],
            name=data["name"],
            valid_regular=data["valid_regular"],
            valid_expert=data["valid_expert"],
            testnet=data["testnet"],
            blob=data["blob"],
            output=tuple(data.get("output", ())),
            output_expert=tuple(data.get("output_expert", ())),
        )


def build_vector(
    index: int,
    sample: Sample[Transaction],
    geometry: DisplayGeometry,
    thresholds: PolicyThresholds,
) -> TestVector:
    """
    Render one sample into a test vector.

    Raises:
        LabelOverflowError: If a page title does not fit the label budget
    """
    transaction = sample.value
    try:
        result = render_transaction(transaction, geometry, thresholds)
        check_labels(result.elements, geometry)
    except LedgerViewError as e:
        e.sample = sample.name
        raise

    return TestVector(
        index=index,
        name=sample.name,
        valid_regular=sample.valid and result.regular_outcome.valid,
        valid_expert=sample.valid and result.expert_outcome.valid,
        testnet=transaction.header.chain_name != MAINNET_CHAIN_NAME,
        blob=to_blob(transaction),
        output=tuple(render_page_lines(result.regular_pages)),
        output_expert=tuple(render_page_lines(result.expert_pages)),
    )


def build_vectors(
    samples: Sequence[Sample[Transaction]],
    geometry: DisplayGeometry,
    thresholds: PolicyThresholds,
) -> list[TestVector]:
    """Render samples into vectors, numbered in order."""
    vectors = [
        build_vector(index, sample, geometry, thresholds)
        for index, sample in enumerate(samples)
    ]
    invalid = sum(1 for v in vectors if not (v.valid_regular and v.valid_expert))
    logger.info("Built %d vectors (%d rejected by policy)", len(vectors), invalid)
    return vectors


# =============================================================================
# File I/O
# =============================================================================

def dumps_vectors(vectors: Iterable[TestVector]) -> str:
    """Serialize vectors as the published JSON document."""
    return json.dumps([v.to_dict() for v in vectors], indent=2, ensure_ascii=False) + "\n"


def write_vectors(vectors: Sequence[TestVector], path: Union[str, Path]) -> Path:
    path = Path(path)
    path.write_text(dumps_vectors(vectors), encoding="utf-8")
    logger.info("Wrote %d vectors to %s", len(vectors), path)
    return path


def read_vectors(path: Union[str, Path]) -> list[TestVector]:
    """
    Read a previously written vector file.

    Raises:
        VectorFileError: If the file cannot be read or is not a vector array
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise VectorFileError(
            message=f"Failed to read vector file: {e}",
            details={"path": str(path)},
        ) from e

    if not isinstance(data, list):
        raise VectorFileError(
            message="Vector file must contain a JSON array",
            details={"path": str(path), "type": type(data).__name__},
        )

    try:
        return [TestVector.from_dict(item) for item in data]
    except (KeyError, TypeError) as e:
        raise VectorFileError(
            message=f"Malformed vector record: {e}",
            details={"path": str(path)},
        ) from e


# =============================================================================
# Comparison
# =============================================================================

def vector_set_fingerprint(vectors: Iterable[TestVector]) -> str:
    """SHA-256 over the canonical JSON of the whole vector set."""
    return content_hash([v.to_dict() for v in vectors])


@dataclass(frozen=True)
class VectorDiff:
    """
    Differences between an old and a new generation, matched by sample name.

    Attributes:
        changed: Names present in both whose records differ
        added: Names only in the new generation
        removed: Names only in the old generation
    """
    changed: tuple[str, ...] = ()
    added: tuple[str, ...] = ()
    removed: tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not (self.changed or self.added or self.removed)

    def to_dict(self) -> dict[str, list[str]]:
        return {
            "changed": list(self.changed),
            "added": list(self.added),
            "removed": list(self.removed),
        }


def _content(vector: TestVector) -> dict[str, Any]:
    record = vector.to_dict()
    del record["index"]
    return record


def diff_vectors(old: Sequence[TestVector], new: Sequence[TestVector]) -> VectorDiff:
    """
    Compare two generations.

    Records are matched by name and compared without their index, so
    inserting a sample does not flag every record after it.
    """
    old_by_name = {v.name: v for v in old}
    new_by_name = {v.name: v for v in new}

    changed = tuple(
        v.name for v in new
        if v.name in old_by_name and _content(old_by_name[v.name]) != _content(v)
    )
    added = tuple(v.name for v in new if v.name not in old_by_name)
    removed = tuple(v.name for v in old if v.name not in new_by_name)
    return VectorDiff(changed=changed, added=added, removed=removed)
