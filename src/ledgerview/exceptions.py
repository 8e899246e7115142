"""
LedgerView Exception Hierarchy

Domain-specific exceptions for transaction display pagination.
All exceptions include error codes for tracking and logging.

Exception codes follow the pattern: LV_<CATEGORY>_<SPECIFIC>
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class LedgerViewError(Exception):
    """
    Base exception for all LedgerView errors.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code (LV_*)
        details: Additional context about the error
        sample: Name of the sample being processed, if applicable
    """
    message: str
    code: str = "LV_INTERNAL_ERROR"
    details: dict[str, Any] = field(default_factory=dict)
    sample: Optional[str] = None

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        parts = [f"[{self.code}] {self.message}"]
        if self.sample:
            parts.append(f"(sample: {self.sample})")
        return " ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Serialize exception for logging/CLI output."""
        result: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.sample:
            result["sample"] = self.sample
        return result


# =============================================================================
# Configuration Errors
# =============================================================================

@dataclass
class GeometryError(LedgerViewError):
    """Display geometry limits are not positive integers."""
    code: str = "LV_GEOMETRY_INVALID"


@dataclass
class ThresholdError(LedgerViewError):
    """Policy thresholds are out of range."""
    code: str = "LV_THRESHOLD_INVALID"


# =============================================================================
# Profile Errors
# =============================================================================

@dataclass
class ProfileLoadError(LedgerViewError):
    """Failed to load display profile from file."""
    code: str = "LV_PROFILE_LOAD_ERROR"


@dataclass
class ProfileValidationError(LedgerViewError):
    """Display profile schema validation failed."""
    code: str = "LV_PROFILE_VALIDATION_ERROR"


@dataclass
class ProfileVersionMismatch(LedgerViewError):
    """Display profile schema version is not supported."""
    code: str = "LV_PROFILE_VERSION_MISMATCH"


# =============================================================================
# Mapping / Pagination Errors
# =============================================================================

@dataclass
class LabelOverflowError(LedgerViewError):
    """A display label does not fit the label budget."""
    code: str = "LV_LABEL_OVERFLOW"


@dataclass
class UnsupportedTransactionError(LedgerViewError):
    """Transaction value is not one of the supported kinds."""
    code: str = "LV_UNSUPPORTED_TRANSACTION"


# =============================================================================
# Outer Layer Errors
# =============================================================================

@dataclass
class SerializationError(LedgerViewError):
    """Value cannot be encoded into the binary representation."""
    code: str = "LV_SERIALIZATION_ERROR"


@dataclass
class SampleGenerationError(LedgerViewError):
    """Sample generation could not be set up."""
    code: str = "LV_SAMPLE_ERROR"


@dataclass
class VectorFileError(LedgerViewError):
    """Existing test-vector file could not be read."""
    code: str = "LV_VECTOR_FILE_ERROR"
