"""
LedgerView Models

Domain models for transactions and their device display.

Usage:
    from ledgerview.models import (
        Element, Page, DisplayGeometry, PolicyThresholds,
        NativeTransfer, TransactionHeader, PublicKey,
    )
"""
from __future__ import annotations

from .display import (
    DisplayGeometry,
    Element,
    FieldWarning,
    Page,
    PolicyThresholds,
    ValidityOutcome,
)
from .enums import (
    AccessRights,
    CLType,
    ExecutionKind,
    KeyAlgorithm,
    KeyKind,
    Mode,
    TargetKind,
    TransactionKind,
)
from .transaction import (
    HASH_LENGTH,
    U64_MAX,
    U512_MAX,
    ByHash,
    ByHashVersioned,
    ByName,
    ByNameVersioned,
    CLValue,
    Delegate,
    ExecutionDescriptor,
    GenericExecution,
    Key,
    NamedArg,
    NativeTransfer,
    PublicKey,
    Redelegate,
    Transaction,
    TransactionHeader,
    TransferTarget,
    Undelegate,
    URef,
)

__all__ = [
    # Enums
    "AccessRights",
    "CLType",
    "ExecutionKind",
    "KeyAlgorithm",
    "KeyKind",
    "Mode",
    "TargetKind",
    "TransactionKind",
    # Display
    "DisplayGeometry",
    "Element",
    "FieldWarning",
    "Page",
    "PolicyThresholds",
    "ValidityOutcome",
    # Transaction
    "HASH_LENGTH",
    "U64_MAX",
    "U512_MAX",
    "ByHash",
    "ByHashVersioned",
    "ByName",
    "ByNameVersioned",
    "CLValue",
    "Delegate",
    "ExecutionDescriptor",
    "GenericExecution",
    "Key",
    "NamedArg",
    "NativeTransfer",
    "PublicKey",
    "Redelegate",
    "Transaction",
    "TransactionHeader",
    "TransferTarget",
    "Undelegate",
    "URef",
]
