"""
Canonical Encodings

Deterministic hashing and text encodings shared by the mapper, the codec
and the vector output:

- blake2b-256 digests (transaction hashes, argument hashes)
- checksummed hex: mixed-case hex whose letter casing is driven by the
  blake2b digest of the input, similar in spirit to EIP-55
- canonical JSON (sorted keys, no whitespace) for fingerprinting a whole
  vector set

The same input always produces the same output; generated test vectors are
compared byte for byte across generations.
"""
from __future__ import annotations

import hashlib
import json
from dataclasses import asdict, is_dataclass
from enum import Enum
from itertools import cycle
from typing import Any, Iterator


BLAKE2B_DIGEST_LENGTH = 32

# Inputs longer than this are rendered as plain lowercase hex.
SMALL_BYTES_COUNT = 75

HEX_CHARS = "0123456789abcdef"


# =============================================================================
# Digests
# =============================================================================

def blake2b_256(data: bytes) -> bytes:
    """Compute the 32-byte blake2b digest of data."""
    return hashlib.blake2b(data, digest_size=BLAKE2B_DIGEST_LENGTH).digest()


# =============================================================================
# Checksummed Hex
# =============================================================================

def _nibbles(data: bytes) -> Iterator[int]:
    for byte in data:
        yield (byte >> 4) & 0x0F
        yield byte & 0x0F


def _bits_cycle(digest: bytes) -> Iterator[bool]:
    """Endless stream of digest bits, least significant bit of each byte first."""
    for byte in cycle(digest):
        for offset in range(8):
            yield (byte >> offset) & 0x01 == 0x01


def checksummed_hex(data: bytes) -> str:
    """
    Encode bytes as checksummed hex.

    Each nibble in a-f consumes the next bit of the blake2b digest of the
    input; a set bit uppercases the letter. Digits never consume bits.

    Args:
        data: Bytes to encode

    Returns:
        Hex string, mixed-case for inputs of at most SMALL_BYTES_COUNT bytes,
        lowercase otherwise

    Example:
        >>> checksummed_hex(bytes(32))
        '0000000000000000000000000000000000000000000000000000000000000000'
    """
    data = bytes(data)
    if len(data) > SMALL_BYTES_COUNT:
        return data.hex()

    hash_bits = _bits_cycle(blake2b_256(data))
    chars = []
    for nibble in _nibbles(data):
        char = HEX_CHARS[nibble]
        if nibble >= 10 and next(hash_bits):
            char = char.upper()
        chars.append(char)
    return "".join(chars)


# =============================================================================
# Canonical JSON
# =============================================================================

def _default_serializer(obj: Any) -> Any:
    """
    Custom JSON serializer for non-standard types.

    Handles:
    - Enum: value
    - dataclass: dict
    - tuple/frozenset: list
    - bytes: lowercase hex
    """
    if isinstance(obj, Enum):
        return obj.value
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    if isinstance(obj, frozenset):
        return sorted(obj, key=str)
    if isinstance(obj, bytes):
        return obj.hex()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def canonical_json(obj: Any) -> str:
    """
    Serialize object to canonical JSON string.

    Example:
        >>> canonical_json({"b": 1, "a": 2})
        '{"a":2,"b":1}'
    """
    return json.dumps(
        obj,
        sort_keys=True,
        separators=(",", ":"),
        default=_default_serializer,
        ensure_ascii=False,
    )


def content_hash(obj: Any) -> str:
    """
    Compute SHA-256 hash of canonical JSON representation.

    Returns:
        Hex-encoded SHA-256 hash string (64 characters)
    """
    return hashlib.sha256(canonical_json(obj).encode("utf-8")).hexdigest()
