"""
LedgerView - Transaction Display Pagination for Hardware Wallets

LedgerView turns a transaction into the exact sequence of fixed-size text
pages a hardware wallet shows before the user approves it, and publishes
those pages as golden test vectors for device firmware.

Pipeline:
    Transaction -> Elements -> {regular, expert} -> Pages -> ValidityOutcome

Key Features:
- One element stream per transaction, projected into regular and expert mode
- Positional pagination with "[k/m]" labels for multi-page values
- Injected policy thresholds (total page limits, per-field warnings)
- Deterministic, seeded sample generation and JSON test-vector output
- YAML display profiles

Quick Start:
    from ledgerview import Renderer, load_profile
    from ledgerview.vectors import SampleGenerator, build_vectors

    profile = load_profile("default")
    renderer = Renderer(profile.geometry, profile.thresholds)
    result = renderer.render(transaction)

    samples = SampleGenerator().generate()
    vectors = build_vectors(samples, profile.geometry, profile.thresholds)

Version: 0.1.0
"""
from __future__ import annotations

__version__ = "0.1.0"
__author__ = "LedgerView Team"

# =============================================================================
# Core Models (Re-exported for convenience)
# =============================================================================
from .models import (
    # Enums
    Mode,
    TransactionKind,
    # Display
    DisplayGeometry,
    Element,
    FieldWarning,
    Page,
    PolicyThresholds,
    ValidityOutcome,
    # Transactions
    Delegate,
    GenericExecution,
    NativeTransfer,
    Redelegate,
    Transaction,
    TransactionHeader,
    Undelegate,
)

# =============================================================================
# Engine
# =============================================================================
from .engine import (
    PolicyChecker,
    RenderResult,
    Renderer,
    filter_elements,
    map_transaction,
    paginate,
    render_transaction,
)

# =============================================================================
# Configuration
# =============================================================================
from .profiles import DisplayProfile, load_profile

# =============================================================================
# Exceptions
# =============================================================================
from .exceptions import (
    GeometryError,
    LabelOverflowError,
    LedgerViewError,
    ProfileLoadError,
    ProfileValidationError,
    ProfileVersionMismatch,
    SampleGenerationError,
    SerializationError,
    ThresholdError,
    UnsupportedTransactionError,
    VectorFileError,
)

# =============================================================================
# Public API
# =============================================================================
__all__ = [
    # Version
    "__version__",
    # Enums
    "Mode",
    "TransactionKind",
    # Display
    "DisplayGeometry",
    "Element",
    "FieldWarning",
    "Page",
    "PolicyThresholds",
    "ValidityOutcome",
    # Transactions
    "Delegate",
    "GenericExecution",
    "NativeTransfer",
    "Redelegate",
    "Transaction",
    "TransactionHeader",
    "Undelegate",
    # Engine
    "PolicyChecker",
    "RenderResult",
    "Renderer",
    "filter_elements",
    "map_transaction",
    "paginate",
    "render_transaction",
    # Configuration
    "DisplayProfile",
    "load_profile",
    # Exceptions
    "GeometryError",
    "LabelOverflowError",
    "LedgerViewError",
    "ProfileLoadError",
    "ProfileValidationError",
    "ProfileVersionMismatch",
    "SampleGenerationError",
    "SerializationError",
    "ThresholdError",
    "UnsupportedTransactionError",
    "VectorFileError",
]
