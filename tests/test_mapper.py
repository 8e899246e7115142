"""
Tests for the transaction mapper.

Validates:
- Universal prefix/suffix order and visibility
- Kind-specific layouts
- Optional header fields
- Label budget of every emitted label
"""
import pytest

from ledgerview.codec import args_hash
from ledgerview.engine import ALL_LABELS, check_labels, format_amount, format_public_key, map_transaction, paginate
from ledgerview.exceptions import LabelOverflowError, UnsupportedTransactionError
from ledgerview.models import ByHash, ByHashVersioned, ByName, ByNameVersioned, DisplayGeometry, Element
from tests.conftest import (
    make_delegate,
    make_generic,
    make_header,
    make_key,
    make_purse,
    make_redelegate,
    make_transfer,
    make_undelegate,
)


def labels(elements):
    return [e.label for e in elements]


def expert_labels(elements):
    return [e.label for e in elements if e.expert_only]


def value_of(elements, label):
    return next(e.value for e in elements if e.label == label)


PREFIX = ["Txn hash", "Type", "Chain ID", "Timestamp", "Ttl", "Gas price", "Deps#", "Account", "Fee"]


# =============================================================================
# Universal Prefix / Suffix
# =============================================================================

class TestUniversalFields:
    """Every kind shares the header prefix and the approvals suffix."""

    def test_prefix_and_suffix(self, all_transactions):
        for tx in all_transactions:
            elements = map_transaction(tx)
            assert labels(elements)[:9] == PREFIX
            assert elements[-1].label == "Approvals#"
            assert elements[-1].expert_only

    def test_prefix_visibility(self):
        elements = map_transaction(make_transfer())
        assert expert_labels(elements[:9]) == ["Timestamp", "Ttl", "Gas price", "Deps#"]

    def test_header_values(self):
        tx = make_transfer(header=make_header(fee=2_500_000_000, approvals=3, gas_price=7))
        elements = map_transaction(tx)
        assert value_of(elements, "Type") == "Token transfer"
        assert value_of(elements, "Chain ID") == "casper-test"
        assert value_of(elements, "Timestamp") == "2021-05-04T14:10:55Z"
        assert value_of(elements, "Ttl") == "30m"
        assert value_of(elements, "Gas price") == "7"
        assert value_of(elements, "Deps#") == "0"
        assert value_of(elements, "Account") == format_public_key(make_key(2))
        assert value_of(elements, "Fee") == "2 500 000 000 motes"
        assert value_of(elements, "Approvals#") == "3"

    def test_txn_hash_is_checksummed_hash(self):
        tx = make_delegate()
        value = value_of(map_transaction(tx), "Txn hash")
        assert len(value) == 64
        assert value.lower() == tx.header.hash.hex()

    def test_optional_header_fields_omitted(self):
        header = make_header(timestamp=None, ttl=None, gas_price=None, dependencies=None)
        elements = map_transaction(make_transfer(header=header))
        assert labels(elements)[:5] == ["Txn hash", "Type", "Chain ID", "Account", "Fee"]
        for label in ("Timestamp", "Ttl", "Gas price", "Deps#"):
            assert label not in labels(elements)

    def test_dependency_count(self):
        header = make_header(dependencies=(bytes(32), bytes([1]) * 32))
        assert value_of(map_transaction(make_delegate(header=header)), "Deps#") == "2"


# =============================================================================
# Kind-Specific Layouts
# =============================================================================

class TestNativeTransfer:
    def test_layout(self):
        elements = map_transaction(make_transfer(amount=1_000))
        assert labels(elements)[9:] == ["Target", "Amount", "ID", "Approvals#"]
        assert value_of(elements, "Amount") == "1 000 motes"
        assert expert_labels(elements[9:]) == ["ID", "Approvals#"]

    def test_id_defaults_to_zero(self):
        assert value_of(map_transaction(make_transfer()), "ID") == "0"

    def test_explicit_id(self):
        assert value_of(map_transaction(make_transfer(transfer_id=42)), "ID") == "42"

    def test_source_purse_shown_in_expert(self):
        elements = map_transaction(make_transfer(source=make_purse()))
        assert labels(elements)[9:] == ["Target", "From", "Amount", "ID", "Approvals#"]
        assert "From" in expert_labels(elements)


class TestDelegation:
    @pytest.mark.parametrize("factory,type_text", [
        (make_delegate, "Delegate"),
        (make_undelegate, "Undelegate"),
    ])
    def test_layout(self, factory, type_text):
        elements = map_transaction(factory(amount=500))
        assert value_of(elements, "Type") == type_text
        assert labels(elements)[9:] == ["Delegator", "Validator", "Amount", "Approvals#"]
        assert value_of(elements, "Delegator") == format_public_key(make_key(1))
        assert value_of(elements, "Validator") == format_public_key(make_key(3))
        assert value_of(elements, "Amount") == format_amount(500)
        assert not any(e.expert_only for e in elements[9:12])


class TestRedelegation:
    def test_old_new_labels(self):
        elements = map_transaction(make_redelegate())
        assert labels(elements)[9:] == ["Delegator", "Old", "New", "Amount", "Approvals#"]
        assert value_of(elements, "Old") == format_public_key(make_key(3))
        assert value_of(elements, "New") == format_public_key(make_key(6))

    @pytest.mark.parametrize("geometry_name", ["device_geometry", "wide_geometry"])
    def test_paged_titles_fit_eleven_chars(self, geometry_name, request):
        geometry = request.getfixturevalue(geometry_name)
        pages = paginate(map_transaction(make_redelegate()), geometry)
        titles = [p.label for p in pages if p.label.split(" [")[0] in ("Old", "New")]
        assert len(titles) >= 2
        for title in titles:
            assert len(title) <= 11, title
            assert len(title) <= geometry.max_label_chars, title


class TestGenericExecution:
    @pytest.mark.parametrize("descriptor,expected", [
        (ByHash(bytes([1]) * 32), ["Execution", "Address", "Entry point", "Args hash"]),
        (ByHashVersioned(bytes([1]) * 32, 1), ["Execution", "Address", "Entry point", "Version", "Args hash"]),
        (ByName("counter"), ["Execution", "Name", "Entry point", "Args hash"]),
        (ByNameVersioned("counter", None), ["Execution", "Name", "Entry point", "Version", "Args hash"]),
    ])
    def test_layout_per_descriptor(self, descriptor, expected):
        elements = map_transaction(make_generic(execution=descriptor))
        assert labels(elements)[9:-1] == expected

    def test_execution_values(self):
        elements = map_transaction(make_generic(execution=ByNameVersioned("counter", None)))
        assert value_of(elements, "Type") == "Contract execution"
        assert value_of(elements, "Execution") == "by-name-versioned"
        assert value_of(elements, "Name") == "counter"
        assert value_of(elements, "Version") == "latest"
        assert value_of(elements, "Entry point") == "transfer"

    def test_visibility(self):
        elements = map_transaction(make_generic())
        kind_part = elements[9:-1]
        assert expert_labels(kind_part) == ["Execution", "Entry point", "Version"]

    def test_args_hash_lowercase_hex(self):
        tx = make_generic()
        assert value_of(map_transaction(tx), "Args hash") == args_hash(tx.args).hex()

    def test_empty_args(self):
        tx = make_generic(args=())
        assert value_of(map_transaction(tx), "Args hash") == args_hash(()).hex()


# =============================================================================
# Dispatch / Labels
# =============================================================================

class TestDispatch:
    def test_unsupported_transaction(self):
        with pytest.raises(UnsupportedTransactionError) as exc_info:
            map_transaction(object())
        assert exc_info.value.code == "LV_UNSUPPORTED_TRANSACTION"

    def test_deterministic(self, all_transactions):
        for tx in all_transactions:
            assert map_transaction(tx) == map_transaction(tx)


class TestLabelBudget:
    def test_all_labels_fit_eleven_chars(self):
        for label in ALL_LABELS:
            assert len(label) <= 11, label

    def test_mapped_labels_pass_check(self, all_transactions, device_geometry):
        for tx in all_transactions:
            check_labels(map_transaction(tx), device_geometry)

    def test_overflow_raises(self):
        geometry = DisplayGeometry(max_chars_per_line=17, max_lines_per_page=2, max_label_chars=5)
        with pytest.raises(LabelOverflowError) as exc_info:
            check_labels([Element("Fee", "1"), Element("Delegator", "x")], geometry)
        assert exc_info.value.details["labels"] == ["Delegator"]

    def test_suffix_counts_against_budget(self):
        geometry = DisplayGeometry(max_chars_per_line=17, max_lines_per_page=2, max_label_chars=11)
        with pytest.raises(LabelOverflowError) as exc_info:
            check_labels([Element("Entry point", "x" * 100)], geometry)
        assert exc_info.value.details["labels"] == ["Entry point [3/3]"]

    def test_single_page_label_has_no_suffix(self):
        geometry = DisplayGeometry(max_chars_per_line=17, max_lines_per_page=2, max_label_chars=11)
        check_labels([Element("Entry point", "x" * 34)], geometry)

    def test_hash_titles_need_wider_budget(self, device_geometry):
        tight = DisplayGeometry(max_chars_per_line=17, max_lines_per_page=2, max_label_chars=11)
        with pytest.raises(LabelOverflowError) as exc_info:
            check_labels(map_transaction(make_transfer()), tight)
        assert "Txn hash [2/2]" in exc_info.value.details["labels"]
        check_labels(map_transaction(make_transfer()), device_geometry)
