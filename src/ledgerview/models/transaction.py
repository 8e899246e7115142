"""
LedgerView Transaction Models

The transaction record the pipeline consumes. It is a closed union of five
kinds, each carrying a shared TransactionHeader:

- NativeTransfer: move motes to a target account or purse
- Delegate / Undelegate: stake to or unstake from a validator
- Redelegate: move stake from one validator to another
- GenericExecution: call a stored contract with runtime arguments

The models are plain immutable values. Well-formedness of amounts and byte
lengths is checked here; everything else is the codec's concern.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Union

from .enums import (
    AccessRights,
    CLType,
    ExecutionKind,
    KeyAlgorithm,
    KeyKind,
    TargetKind,
    TransactionKind,
)


HASH_LENGTH = 32
U64_MAX = 2**64 - 1
U512_MAX = 2**512 - 1


def _check_length(name: str, value: bytes, length: int) -> None:
    if len(value) != length:
        raise ValueError(f"{name} must be {length} bytes, got {len(value)}")


def _check_motes(name: str, value: int) -> None:
    if not 0 <= value <= U512_MAX:
        raise ValueError(f"{name} must fit an unsigned 512-bit integer")


# =============================================================================
# Keys
# =============================================================================

@dataclass(frozen=True)
class PublicKey:
    """
    An account public key.

    Attributes:
        algorithm: Signature scheme, also the one-byte tag
        raw: Key bytes (32 for ed25519, 33 for compressed secp256k1)
    """
    algorithm: KeyAlgorithm
    raw: bytes

    def __post_init__(self) -> None:
        _check_length(f"{self.algorithm.name} public key", self.raw, self.algorithm.key_length)

    @classmethod
    def ed25519(cls, raw: bytes) -> PublicKey:
        return cls(KeyAlgorithm.ED25519, bytes(raw))

    @classmethod
    def secp256k1(cls, raw: bytes) -> PublicKey:
        return cls(KeyAlgorithm.SECP256K1, bytes(raw))

    @property
    def tag(self) -> int:
        return int(self.algorithm.value, 16)


@dataclass(frozen=True)
class URef:
    """Unforgeable reference to a purse or other stored value."""
    addr: bytes
    access_rights: AccessRights = AccessRights.READ_ADD_WRITE

    def __post_init__(self) -> None:
        _check_length("URef address", self.addr, HASH_LENGTH)


@dataclass(frozen=True)
class Key:
    """
    A global state key.

    Era keys carry an era number; every other kind carries a 32-byte address.
    """
    kind: KeyKind
    addr: bytes = b""
    era: Optional[int] = None

    def __post_init__(self) -> None:
        if self.kind is KeyKind.ERA_INFO:
            if self.era is None or not 0 <= self.era <= U64_MAX:
                raise ValueError("Era key requires an era id in u64 range")
        else:
            _check_length(f"{self.kind.value} key address", self.addr, HASH_LENGTH)


# =============================================================================
# Runtime Arguments
# =============================================================================

@dataclass(frozen=True)
class CLValue:
    """
    A typed runtime argument value.

    Attributes:
        cl_type: Declared type
        value: Python value (int, bool, str, bytes, Key, URef, PublicKey,
            tuple of CLValue for lists, CLValue or None for options)
        inner_type: Element type for OPTION and LIST values
    """
    cl_type: CLType
    value: Any = None
    inner_type: Optional[CLType] = None


@dataclass(frozen=True)
class NamedArg:
    """A runtime argument as passed to a contract entry point."""
    name: str
    value: CLValue


# =============================================================================
# Transfer Target
# =============================================================================

@dataclass(frozen=True)
class TransferTarget:
    """
    Recipient of a native transfer.

    Attributes:
        kind: How the recipient is encoded
        value: bytes (account hash), URef, Key or PublicKey, matching kind
    """
    kind: TargetKind
    value: Union[bytes, URef, Key, PublicKey]

    @classmethod
    def account_hash(cls, raw: bytes) -> TransferTarget:
        _check_length("Account hash", raw, HASH_LENGTH)
        return cls(TargetKind.BYTES, bytes(raw))

    @classmethod
    def purse(cls, uref: URef) -> TransferTarget:
        return cls(TargetKind.UREF, uref)

    @classmethod
    def account(cls, key: Key) -> TransferTarget:
        return cls(TargetKind.KEY, key)

    @classmethod
    def public_key(cls, key: PublicKey) -> TransferTarget:
        return cls(TargetKind.PUBLIC_KEY, key)


# =============================================================================
# Execution Descriptors
# =============================================================================

@dataclass(frozen=True)
class ByHash:
    """Call a stored contract by its hash."""
    hash: bytes

    kind = ExecutionKind.BY_HASH

    def __post_init__(self) -> None:
        _check_length("Contract hash", self.hash, HASH_LENGTH)


@dataclass(frozen=True)
class ByHashVersioned:
    """Call a contract package by hash; version None means latest."""
    hash: bytes
    version: Optional[int] = None

    kind = ExecutionKind.BY_HASH_VERSIONED

    def __post_init__(self) -> None:
        _check_length("Contract package hash", self.hash, HASH_LENGTH)


@dataclass(frozen=True)
class ByName:
    """Call a contract stored under a named key of the caller's account."""
    name: str

    kind = ExecutionKind.BY_NAME


@dataclass(frozen=True)
class ByNameVersioned:
    """Call a contract package by named key; version None means latest."""
    name: str
    version: Optional[int] = None

    kind = ExecutionKind.BY_NAME_VERSIONED


ExecutionDescriptor = Union[ByHash, ByHashVersioned, ByName, ByNameVersioned]


# =============================================================================
# Header
# =============================================================================

@dataclass(frozen=True)
class TransactionHeader:
    """
    Fields shared by every transaction kind.

    Attributes:
        chain_name: Network the transaction is bound to
        account: Public key of the sending account
        fee: Payment amount in motes
        hash: 32-byte transaction hash (empty until sealed by the codec)
        timestamp: Creation time, milliseconds since the Unix epoch
        ttl: Time to live, milliseconds
        gas_price: Gas price multiplier
        dependencies: Hashes of transactions that must execute first
        approvals: Number of signatures attached
    """
    chain_name: str
    account: PublicKey
    fee: int
    hash: bytes = b""
    timestamp: Optional[int] = None
    ttl: Optional[int] = None
    gas_price: Optional[int] = None
    dependencies: Optional[tuple[bytes, ...]] = None
    approvals: int = 1

    def __post_init__(self) -> None:
        _check_motes("Fee", self.fee)
        if self.hash:
            _check_length("Transaction hash", self.hash, HASH_LENGTH)
        for dep in self.dependencies or ():
            _check_length("Dependency hash", dep, HASH_LENGTH)
        if self.approvals < 0:
            raise ValueError("Approval count cannot be negative")

    @property
    def is_sealed(self) -> bool:
        return len(self.hash) == HASH_LENGTH


# =============================================================================
# Transaction Kinds
# =============================================================================

@dataclass(frozen=True)
class NativeTransfer:
    """Transfer of motes handled by the system mint."""
    header: TransactionHeader
    target: TransferTarget
    amount: int
    id: Optional[int] = None
    source: Optional[URef] = None

    kind = TransactionKind.NATIVE_TRANSFER

    def __post_init__(self) -> None:
        _check_motes("Amount", self.amount)
        if self.id is not None and not 0 <= self.id <= U64_MAX:
            raise ValueError("Transfer id must fit an unsigned 64-bit integer")


@dataclass(frozen=True)
class Delegate:
    """Stake motes with a validator."""
    header: TransactionHeader
    delegator: PublicKey
    validator: PublicKey
    amount: int

    kind = TransactionKind.DELEGATE

    def __post_init__(self) -> None:
        _check_motes("Amount", self.amount)


@dataclass(frozen=True)
class Undelegate:
    """Withdraw staked motes from a validator."""
    header: TransactionHeader
    delegator: PublicKey
    validator: PublicKey
    amount: int

    kind = TransactionKind.UNDELEGATE

    def __post_init__(self) -> None:
        _check_motes("Amount", self.amount)


@dataclass(frozen=True)
class Redelegate:
    """Move stake from one validator to another."""
    header: TransactionHeader
    delegator: PublicKey
    validator: PublicKey
    new_validator: PublicKey
    amount: int

    kind = TransactionKind.REDELEGATE

    def __post_init__(self) -> None:
        _check_motes("Amount", self.amount)


@dataclass(frozen=True)
class GenericExecution:
    """Call into a stored contract."""
    header: TransactionHeader
    execution: ExecutionDescriptor
    entry_point: str
    args: tuple[NamedArg, ...] = field(default_factory=tuple)

    kind = TransactionKind.GENERIC

    def __post_init__(self) -> None:
        if not self.entry_point:
            raise ValueError("Entry point cannot be empty")


Transaction = Union[NativeTransfer, Delegate, Undelegate, Redelegate, GenericExecution]
