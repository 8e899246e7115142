"""
Transaction Binary Codec

Deterministic byte serialization of transactions, used for:

- the hex "blob" stored in every test vector
- the transaction hash (sealing)
- the Args hash shown for generic executions

Encoding rules:
- fixed-width integers are little-endian
- big unsigned integers (u128/u256/u512) are a length byte followed by the
  minimal little-endian bytes
- strings, byte strings and lists are prefixed with a u32 length/count
- options are a 0/1 byte followed by the value when present
"""
from __future__ import annotations

import struct
from dataclasses import replace
from typing import Callable, Iterable, Optional, TypeVar

from .canon import blake2b_256
from .exceptions import SerializationError
from .models import (
    ByHash,
    ByHashVersioned,
    ByName,
    ByNameVersioned,
    CLType,
    CLValue,
    Delegate,
    ExecutionDescriptor,
    GenericExecution,
    Key,
    KeyKind,
    NamedArg,
    NativeTransfer,
    PublicKey,
    Redelegate,
    TargetKind,
    Transaction,
    TransactionHeader,
    TransferTarget,
    Undelegate,
    URef,
)

T = TypeVar("T")

_BIG_UINT_BITS = {CLType.U128: 128, CLType.U256: 256, CLType.U512: 512}

_FIXED_INT_FORMATS = {
    CLType.I32: "<i",
    CLType.I64: "<q",
    CLType.U8: "<B",
    CLType.U32: "<I",
    CLType.U64: "<Q",
}

_EXECUTION_TAGS = {
    ByHash: 1,
    ByName: 2,
    ByHashVersioned: 3,
    ByNameVersioned: 4,
}

_TRANSACTION_TAGS = {
    NativeTransfer: 5,
    Delegate: 6,
    Undelegate: 7,
    Redelegate: 8,
    GenericExecution: 9,
}


# =============================================================================
# Primitives
# =============================================================================

def encode_u8(value: int) -> bytes:
    return _pack("<B", value, "u8")


def encode_u32(value: int) -> bytes:
    return _pack("<I", value, "u32")


def encode_u64(value: int) -> bytes:
    return _pack("<Q", value, "u64")


def _pack(fmt: str, value: int, type_name: str) -> bytes:
    try:
        return struct.pack(fmt, value)
    except struct.error as e:
        raise SerializationError(
            message=f"Value {value!r} does not fit {type_name}",
            details={"type": type_name, "value": str(value)},
        ) from e


def encode_big_uint(value: int, bits: int = 512) -> bytes:
    """Length byte followed by the minimal little-endian representation."""
    if not 0 <= value < 2**bits:
        raise SerializationError(
            message=f"Value does not fit u{bits}",
            details={"type": f"u{bits}", "value": str(value)},
        )
    raw = value.to_bytes((value.bit_length() + 7) // 8, "little")
    return encode_u8(len(raw)) + raw


def encode_bytes(value: bytes) -> bytes:
    return encode_u32(len(value)) + bytes(value)


def encode_string(value: str) -> bytes:
    return encode_bytes(value.encode("utf-8"))


def encode_option(value: Optional[T], encoder: Callable[[T], bytes]) -> bytes:
    if value is None:
        return b"\x00"
    return b"\x01" + encoder(value)


def encode_list(values: Iterable[T], encoder: Callable[[T], bytes]) -> bytes:
    items = [encoder(v) for v in values]
    return encode_u32(len(items)) + b"".join(items)


# =============================================================================
# Keys
# =============================================================================

def encode_public_key(key: PublicKey) -> bytes:
    return encode_u8(key.tag) + key.raw


def encode_uref(uref: URef) -> bytes:
    return uref.addr + encode_u8(int(uref.access_rights))


def encode_key(key: Key) -> bytes:
    if key.kind is KeyKind.ERA_INFO:
        return encode_u8(key.kind.tag) + encode_u64(key.era)
    return encode_u8(key.kind.tag) + key.addr


# =============================================================================
# Runtime Arguments
# =============================================================================

def encode_cl_payload(value: CLValue) -> bytes:
    """Encode the value part of a CLValue, without type information."""
    cl_type = value.cl_type
    if cl_type is CLType.BOOL:
        return b"\x01" if value.value else b"\x00"
    if cl_type in _FIXED_INT_FORMATS:
        return _pack(_FIXED_INT_FORMATS[cl_type], value.value, cl_type.value)
    if cl_type in _BIG_UINT_BITS:
        return encode_big_uint(value.value, _BIG_UINT_BITS[cl_type])
    if cl_type is CLType.UNIT:
        return b""
    if cl_type is CLType.STRING:
        return encode_string(value.value)
    if cl_type is CLType.KEY:
        return encode_key(value.value)
    if cl_type is CLType.UREF:
        return encode_uref(value.value)
    if cl_type is CLType.PUBLIC_KEY:
        return encode_public_key(value.value)
    if cl_type is CLType.OPTION:
        return encode_option(value.value, encode_cl_payload)
    if cl_type is CLType.LIST:
        return encode_list(value.value, encode_cl_payload)
    if cl_type is CLType.BYTE_ARRAY:
        return bytes(value.value)
    if cl_type is CLType.BYTES:
        return encode_bytes(value.value)
    raise SerializationError(
        message=f"Unsupported argument type: {cl_type}",
        details={"type": str(cl_type)},
    )


def encode_cl_type(value: CLValue) -> bytes:
    """Encode the type descriptor of a CLValue."""
    out = encode_u8(value.cl_type.tag)
    if value.cl_type in (CLType.OPTION, CLType.LIST):
        inner = value.inner_type or CLType.UNIT
        out += encode_u8(inner.tag)
    elif value.cl_type is CLType.BYTE_ARRAY:
        out += encode_u32(len(value.value))
    return out


def encode_cl_value(value: CLValue) -> bytes:
    return encode_bytes(encode_cl_payload(value)) + encode_cl_type(value)


def encode_named_arg(arg: NamedArg) -> bytes:
    return encode_string(arg.name) + encode_cl_value(arg.value)


def encode_args(args: Iterable[NamedArg]) -> bytes:
    return encode_list(args, encode_named_arg)


def args_hash(args: Iterable[NamedArg]) -> bytes:
    """blake2b-256 digest of the serialized runtime arguments."""
    return blake2b_256(encode_args(args))


# =============================================================================
# Transaction Parts
# =============================================================================

def encode_transfer_target(target: TransferTarget) -> bytes:
    tag = encode_u8(list(TargetKind).index(target.kind))
    if target.kind is TargetKind.BYTES:
        return tag + target.value
    if target.kind is TargetKind.UREF:
        return tag + encode_uref(target.value)
    if target.kind is TargetKind.KEY:
        return tag + encode_key(target.value)
    return tag + encode_public_key(target.value)


def encode_execution(execution: ExecutionDescriptor) -> bytes:
    out = encode_u8(_EXECUTION_TAGS[type(execution)])
    if isinstance(execution, (ByHash, ByHashVersioned)):
        out += execution.hash
    else:
        out += encode_string(execution.name)
    if isinstance(execution, (ByHashVersioned, ByNameVersioned)):
        out += encode_option(execution.version, encode_u32)
    return out


def encode_header(header: TransactionHeader) -> bytes:
    """Header fields covered by the transaction hash (the hash itself excluded)."""
    return b"".join([
        encode_public_key(header.account),
        encode_option(header.timestamp, encode_u64),
        encode_option(header.ttl, encode_u64),
        encode_option(header.gas_price, encode_u64),
        encode_option(header.dependencies, lambda deps: encode_list(deps, bytes)),
        encode_string(header.chain_name),
    ])


def encode_body(transaction: Transaction) -> bytes:
    """Payment and kind-specific session bytes."""
    tx_type = type(transaction)
    if tx_type not in _TRANSACTION_TAGS:
        raise SerializationError(
            message=f"Cannot serialize {tx_type.__name__}",
            details={"type": tx_type.__name__},
        )
    out = encode_big_uint(transaction.header.fee) + encode_u8(_TRANSACTION_TAGS[tx_type])

    if isinstance(transaction, NativeTransfer):
        out += encode_transfer_target(transaction.target)
        out += encode_big_uint(transaction.amount)
        out += encode_option(transaction.id, encode_u64)
        out += encode_option(transaction.source, encode_uref)
    elif isinstance(transaction, (Delegate, Undelegate)):
        out += encode_public_key(transaction.delegator)
        out += encode_public_key(transaction.validator)
        out += encode_big_uint(transaction.amount)
    elif isinstance(transaction, Redelegate):
        out += encode_public_key(transaction.delegator)
        out += encode_public_key(transaction.validator)
        out += encode_public_key(transaction.new_validator)
        out += encode_big_uint(transaction.amount)
    else:
        out += encode_execution(transaction.execution)
        out += encode_string(transaction.entry_point)
        out += encode_args(transaction.args)
    return out


# =============================================================================
# Whole Transaction
# =============================================================================

def compute_hash(transaction: Transaction) -> bytes:
    """Transaction hash: blake2b over the header bytes and the body digest."""
    header_bytes = encode_header(transaction.header)
    return blake2b_256(header_bytes + blake2b_256(encode_body(transaction)))


def seal(transaction: Transaction) -> Transaction:
    """Return a copy of the transaction whose header carries its computed hash."""
    header = replace(transaction.header, hash=compute_hash(transaction))
    return replace(transaction, header=header)


def to_bytes(transaction: Transaction) -> bytes:
    """
    Serialize a transaction.

    Layout: header, hash, body, approval count. Unsealed transactions are
    hashed on the fly.
    """
    header = transaction.header
    tx_hash = header.hash if header.is_sealed else compute_hash(transaction)
    return b"".join([
        encode_header(header),
        tx_hash,
        encode_body(transaction),
        encode_u32(header.approvals),
    ])


def to_blob(transaction: Transaction) -> str:
    """Lowercase hex of the serialized transaction."""
    return to_bytes(transaction).hex()
