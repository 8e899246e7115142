"""
Tests for canonical encodings and the transaction codec.

Tests cover:
- Primitive encodings and range errors
- Argument hashing
- Sealing and blob determinism
- Canonical JSON / content hashing
"""
from dataclasses import replace

import pytest

from ledgerview import codec
from ledgerview.canon import blake2b_256, canonical_json, content_hash
from ledgerview.exceptions import SerializationError
from ledgerview.models import (
    AccessRights,
    ByHash,
    ByName,
    CLType,
    CLValue,
    Key,
    KeyKind,
    NamedArg,
    URef,
)
from tests.conftest import make_args, make_delegate, make_generic, make_header, make_key, make_transfer


# =============================================================================
# Primitives
# =============================================================================

class TestPrimitives:
    def test_fixed_width_little_endian(self):
        assert codec.encode_u8(7) == b"\x07"
        assert codec.encode_u32(1) == b"\x01\x00\x00\x00"
        assert codec.encode_u64(2**64 - 1) == b"\xff" * 8

    @pytest.mark.parametrize("encoder,value", [
        (codec.encode_u8, 256),
        (codec.encode_u32, -1),
        (codec.encode_u64, 2**64),
    ])
    def test_out_of_range_raises(self, encoder, value):
        with pytest.raises(SerializationError) as exc_info:
            encoder(value)
        assert exc_info.value.code == "LV_SERIALIZATION_ERROR"

    def test_big_uint_minimal_bytes(self):
        assert codec.encode_big_uint(0) == b"\x00"
        assert codec.encode_big_uint(1) == b"\x01\x01"
        assert codec.encode_big_uint(256) == b"\x02\x00\x01"
        assert codec.encode_big_uint(2**512 - 1) == b"\x40" + b"\xff" * 64

    def test_big_uint_overflow(self):
        with pytest.raises(SerializationError):
            codec.encode_big_uint(2**128, bits=128)

    def test_length_prefixed(self):
        assert codec.encode_string("ab") == b"\x02\x00\x00\x00ab"
        assert codec.encode_bytes(b"") == b"\x00\x00\x00\x00"

    def test_option(self):
        assert codec.encode_option(None, codec.encode_u8) == b"\x00"
        assert codec.encode_option(5, codec.encode_u8) == b"\x01\x05"

    def test_list(self):
        assert codec.encode_list([1, 2], codec.encode_u8) == b"\x02\x00\x00\x00\x01\x02"


class TestKeys:
    def test_public_key(self):
        key = make_key(1)
        assert codec.encode_public_key(key) == b"\x01" + key.raw

    def test_uref(self):
        uref = URef(bytes(32), AccessRights.READ)
        assert codec.encode_uref(uref) == bytes(32) + b"\x01"

    def test_era_key(self):
        assert codec.encode_key(Key(KeyKind.ERA_INFO, era=1)) == bytes([5]) + (1).to_bytes(8, "little")


# =============================================================================
# Arguments
# =============================================================================

class TestArguments:
    def test_args_hash_is_digest_of_encoding(self):
        args = make_args()
        assert codec.args_hash(args) == blake2b_256(codec.encode_args(args))
        assert len(codec.args_hash(args)) == 32

    def test_args_hash_depends_on_order(self):
        args = make_args()
        assert codec.args_hash(args) != codec.args_hash(tuple(reversed(args)))

    def test_empty_args(self):
        assert codec.encode_args(()) == b"\x00\x00\x00\x00"

    def test_cl_value_carries_type(self):
        value = CLValue(CLType.U8, 3)
        assert codec.encode_cl_value(value) == b"\x01\x00\x00\x00\x03" + bytes([CLType.U8.tag])

    def test_option_and_list_types_carry_inner(self):
        option = CLValue(CLType.OPTION, CLValue(CLType.U8, 1), CLType.U8)
        assert codec.encode_cl_type(option) == bytes([CLType.OPTION.tag, CLType.U8.tag])
        assert codec.encode_cl_payload(option) == b"\x01\x01"

    def test_out_of_range_argument(self):
        with pytest.raises(SerializationError):
            codec.encode_named_arg(NamedArg("x", CLValue(CLType.I32, 2**31)))


# =============================================================================
# Transactions
# =============================================================================

class TestSealing:
    def test_seal_sets_hash(self):
        tx = make_transfer()
        assert tx.header.is_sealed
        assert tx.header.hash == codec.compute_hash(tx)

    def test_hash_excludes_itself(self):
        tx = make_delegate()
        assert codec.compute_hash(tx) == codec.compute_hash(codec.seal(tx))

    def test_hash_changes_with_body(self):
        assert make_transfer(amount=1).header.hash != make_transfer(amount=2).header.hash

    def test_hash_changes_with_header(self):
        a = make_delegate(header=make_header(chain_name="casper"))
        b = make_delegate(header=make_header(chain_name="casper-test"))
        assert a.header.hash != b.header.hash

    def test_execution_tags_differ(self):
        assert codec.encode_execution(ByHash(bytes(32)))[0] != codec.encode_execution(ByName("x"))[0]


class TestBlob:
    def test_blob_deterministic(self):
        assert codec.to_blob(make_generic()) == codec.to_blob(make_generic())

    def test_blob_is_lowercase_hex(self):
        blob = codec.to_blob(make_transfer())
        assert blob == blob.lower()
        assert bytes.fromhex(blob) == codec.to_bytes(make_transfer())

    def test_blob_layout(self):
        tx = make_transfer()
        raw = codec.to_bytes(tx)
        header = codec.encode_header(tx.header)
        assert raw.startswith(header + tx.header.hash)
        assert raw.endswith(codec.encode_u32(tx.header.approvals))

    def test_unsealed_transaction_hashed_on_the_fly(self):
        tx = make_transfer()
        unsealed = replace(tx, header=replace(tx.header, hash=b""))
        assert codec.to_bytes(unsealed) == codec.to_bytes(tx)

    def test_unsupported_type(self):
        with pytest.raises(SerializationError):
            codec.encode_body(object())


# =============================================================================
# Canonical JSON
# =============================================================================

class TestCanonicalJson:
    def test_sorted_compact(self):
        assert canonical_json({"b": 1, "a": [1, 2]}) == '{"a":[1,2],"b":1}'

    def test_bytes_and_enums(self):
        assert canonical_json({"k": b"\x01", "t": CLType.U8}) == '{"k":"01","t":"u8"}'

    def test_content_hash_stable(self):
        assert content_hash({"a": 1, "b": 2}) == content_hash({"b": 2, "a": 1})
        assert len(content_hash({})) == 64
