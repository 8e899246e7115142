"""
LedgerView Enumerations

All enumeration types used throughout the LedgerView system.

All enums inherit from (str, Enum) for JSON serialization compatibility.
"""
from __future__ import annotations

from enum import Enum


# =============================================================================
# Display Modes
# =============================================================================

class Mode(str, Enum):
    """Visibility tier of the device UI."""
    REGULAR = "regular"
    EXPERT = "expert"                  # Shows every element


# =============================================================================
# Transaction Kinds
# =============================================================================

class TransactionKind(str, Enum):
    """Supported transaction kinds and their on-device `Type` text."""
    NATIVE_TRANSFER = "native_transfer"
    DELEGATE = "delegate"
    UNDELEGATE = "undelegate"
    REDELEGATE = "redelegate"
    GENERIC = "generic"

    @property
    def display_name(self) -> str:
        return _KIND_DISPLAY_NAMES[self]


_KIND_DISPLAY_NAMES = {
    TransactionKind.NATIVE_TRANSFER: "Token transfer",
    TransactionKind.DELEGATE: "Delegate",
    TransactionKind.UNDELEGATE: "Undelegate",
    TransactionKind.REDELEGATE: "Redelegate",
    TransactionKind.GENERIC: "Contract execution",
}


class ExecutionKind(str, Enum):
    """How a generic execution locates the stored contract."""
    BY_HASH = "by-hash"
    BY_HASH_VERSIONED = "by-hash-versioned"
    BY_NAME = "by-name"
    BY_NAME_VERSIONED = "by-name-versioned"


# =============================================================================
# Keys and Values
# =============================================================================

class KeyAlgorithm(str, Enum):
    """Public key algorithms. Values are the one-byte tags."""
    ED25519 = "01"
    SECP256K1 = "02"

    @property
    def key_length(self) -> int:
        return 32 if self is KeyAlgorithm.ED25519 else 33


class TargetKind(str, Enum):
    """Encodings of a native transfer target."""
    BYTES = "bytes"                    # Raw 32-byte account hash
    UREF = "uref"                      # Purse
    KEY = "key"                        # Account key
    PUBLIC_KEY = "public_key"


class AccessRights(int, Enum):
    """URef access rights bit flags."""
    NONE = 0b000
    READ = 0b001
    WRITE = 0b010
    ADD = 0b100
    READ_ADD = 0b101
    READ_WRITE = 0b011
    ADD_WRITE = 0b110
    READ_ADD_WRITE = 0b111


class CLType(str, Enum):
    """Types a runtime argument value can carry."""
    BOOL = "bool"
    I32 = "i32"
    I64 = "i64"
    U8 = "u8"
    U32 = "u32"
    U64 = "u64"
    U128 = "u128"
    U256 = "u256"
    U512 = "u512"
    UNIT = "unit"
    STRING = "string"
    KEY = "key"
    UREF = "uref"
    PUBLIC_KEY = "public_key"
    OPTION = "option"
    LIST = "list"
    BYTE_ARRAY = "byte_array"          # Fixed length
    BYTES = "bytes"                    # Length-prefixed

    @property
    def tag(self) -> int:
        """Numeric type tag used by the binary encoding."""
        return _CL_TYPE_TAGS[self]


_CL_TYPE_TAGS = {
    CLType.BOOL: 0,
    CLType.I32: 1,
    CLType.I64: 2,
    CLType.U8: 3,
    CLType.U32: 4,
    CLType.U64: 5,
    CLType.U128: 6,
    CLType.U256: 7,
    CLType.U512: 8,
    CLType.UNIT: 9,
    CLType.STRING: 10,
    CLType.KEY: 11,
    CLType.UREF: 12,
    CLType.OPTION: 13,
    CLType.LIST: 14,
    CLType.BYTE_ARRAY: 15,
    CLType.PUBLIC_KEY: 22,
    CLType.BYTES: 23,
}


class KeyKind(str, Enum):
    """Global state key variants that can appear as argument values."""
    ACCOUNT = "account-hash"
    HASH = "hash"
    UREF = "uref"
    TRANSFER = "transfer"
    DEPLOY_INFO = "deploy"
    ERA_INFO = "era"
    BALANCE = "balance"
    BID = "bid"
    WITHDRAW = "withdraw"
    DICTIONARY = "dictionary"

    @property
    def tag(self) -> int:
        return list(KeyKind).index(self)
