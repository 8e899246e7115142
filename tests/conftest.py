"""
Pytest configuration and fixtures for LedgerView tests.

Provides helper factories for transactions and common display fixtures.
"""
import pytest

from ledgerview.codec import seal
from ledgerview.models import (
    AccessRights,
    ByNameVersioned,
    CLType,
    CLValue,
    Delegate,
    DisplayGeometry,
    ExecutionDescriptor,
    GenericExecution,
    NamedArg,
    NativeTransfer,
    PolicyThresholds,
    PublicKey,
    Redelegate,
    TransactionHeader,
    TransferTarget,
    Undelegate,
    URef,
)


# =============================================================================
# Factory Helpers
# =============================================================================

def make_key(fill: int = 1) -> PublicKey:
    """Create an ed25519 public key of repeated bytes."""
    return PublicKey.ed25519(bytes([fill]) * 32)


def make_header(
    chain_name: str = "casper-test",
    fee: int = 100_000_000,
    timestamp=1_620_137_455_000,
    ttl=1_800_000,
    gas_price=1,
    dependencies=(),
    approvals: int = 1,
) -> TransactionHeader:
    """Create a TransactionHeader with every optional field supplied."""
    return TransactionHeader(
        chain_name=chain_name,
        account=make_key(2),
        fee=fee,
        timestamp=timestamp,
        ttl=ttl,
        gas_price=gas_price,
        dependencies=dependencies,
        approvals=approvals,
    )


def make_transfer(
    amount: int = 1_000,
    transfer_id=None,
    source=None,
    header: TransactionHeader = None,
) -> NativeTransfer:
    """Create a sealed native transfer to an account hash."""
    return seal(NativeTransfer(
        header=header or make_header(),
        target=TransferTarget.account_hash(bytes([7]) * 32),
        amount=amount,
        id=transfer_id,
        source=source,
    ))


def make_delegate(amount: int = 500_000_000_000, header: TransactionHeader = None) -> Delegate:
    return seal(Delegate(
        header=header or make_header(),
        delegator=make_key(1),
        validator=make_key(3),
        amount=amount,
    ))


def make_undelegate(amount: int = 500_000_000_000) -> Undelegate:
    return seal(Undelegate(
        header=make_header(),
        delegator=make_key(1),
        validator=make_key(3),
        amount=amount,
    ))


def make_redelegate(amount: int = 500_000_000_000) -> Redelegate:
    return seal(Redelegate(
        header=make_header(),
        delegator=make_key(1),
        validator=make_key(3),
        new_validator=make_key(6),
        amount=amount,
    ))


def make_args() -> tuple:
    return (
        NamedArg("amount", CLValue(CLType.U512, 2_500_000_000)),
        NamedArg("recipient", CLValue(CLType.PUBLIC_KEY, make_key(4))),
        NamedArg("memo", CLValue(CLType.STRING, "hello")),
    )


def make_generic(
    execution: ExecutionDescriptor = None,
    args: tuple = None,
    header: TransactionHeader = None,
) -> GenericExecution:
    """Create a sealed generic execution (versioned by-name by default)."""
    return seal(GenericExecution(
        header=header or make_header(),
        execution=execution or ByNameVersioned("erc20-contract", 2),
        entry_point="transfer",
        args=make_args() if args is None else args,
    ))


def make_purse(rights: AccessRights = AccessRights.READ_ADD_WRITE) -> URef:
    return URef(bytes([9]) * 32, rights)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def device_geometry():
    """The two-line 17-character screen with a 17-character title line."""
    return DisplayGeometry(max_chars_per_line=17, max_lines_per_page=2, max_label_chars=17)


@pytest.fixture
def wide_geometry():
    return DisplayGeometry(max_chars_per_line=35, max_lines_per_page=2)


@pytest.fixture
def thresholds():
    return PolicyThresholds(max_regular_pages=24, max_expert_pages=48, max_pages_per_field=4)


@pytest.fixture
def all_transactions():
    """One sealed transaction of every kind."""
    return [
        make_transfer(),
        make_delegate(),
        make_undelegate(),
        make_redelegate(),
        make_generic(),
    ]
