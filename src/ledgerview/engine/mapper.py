"""
LedgerView Transaction Mapper

Converts one transaction into the ordered sequence of display elements.

Layout:
    Txn hash, Type, Chain ID,
    [Timestamp, Ttl, Gas price, Deps#]   (expert, when supplied)
    Account, Fee,
    <kind-specific elements>,
    Approvals#                           (expert)

Labels are fixed strings of at most 11 characters, and the title each page
shows (label plus any "[k/m]" suffix) must fit the profile's label budget.
That is why redelegation uses "Old"/"New" rather than "Old validator"/"New
validator".
"""
from __future__ import annotations

from typing import Callable, Union

from ..codec import args_hash
from ..exceptions import UnsupportedTransactionError
from ..models import (
    ByHash,
    ByHashVersioned,
    ByNameVersioned,
    Delegate,
    Element,
    GenericExecution,
    NativeTransfer,
    Redelegate,
    Transaction,
    TransactionHeader,
    Undelegate,
)
from .formatters import (
    format_amount,
    format_duration,
    format_hash,
    format_public_key,
    format_target,
    format_timestamp,
    format_uref,
    format_version,
)


# =============================================================================
# Labels
# =============================================================================

LABEL_TXN_HASH = "Txn hash"
LABEL_TYPE = "Type"
LABEL_CHAIN_ID = "Chain ID"
LABEL_TIMESTAMP = "Timestamp"
LABEL_TTL = "Ttl"
LABEL_GAS_PRICE = "Gas price"
LABEL_DEPS = "Deps#"
LABEL_ACCOUNT = "Account"
LABEL_FEE = "Fee"
LABEL_TARGET = "Target"
LABEL_FROM = "From"
LABEL_AMOUNT = "Amount"
LABEL_ID = "ID"
LABEL_DELEGATOR = "Delegator"
LABEL_VALIDATOR = "Validator"
LABEL_OLD_VALIDATOR = "Old"
LABEL_NEW_VALIDATOR = "New"
LABEL_EXECUTION = "Execution"
LABEL_ADDRESS = "Address"
LABEL_NAME = "Name"
LABEL_ENTRY_POINT = "Entry point"
LABEL_VERSION = "Version"
LABEL_ARGS_HASH = "Args hash"
LABEL_APPROVALS = "Approvals#"

ALL_LABELS: tuple[str, ...] = (
    LABEL_TXN_HASH,
    LABEL_TYPE,
    LABEL_CHAIN_ID,
    LABEL_TIMESTAMP,
    LABEL_TTL,
    LABEL_GAS_PRICE,
    LABEL_DEPS,
    LABEL_ACCOUNT,
    LABEL_FEE,
    LABEL_TARGET,
    LABEL_FROM,
    LABEL_AMOUNT,
    LABEL_ID,
    LABEL_DELEGATOR,
    LABEL_VALIDATOR,
    LABEL_OLD_VALIDATOR,
    LABEL_NEW_VALIDATOR,
    LABEL_EXECUTION,
    LABEL_ADDRESS,
    LABEL_NAME,
    LABEL_ENTRY_POINT,
    LABEL_VERSION,
    LABEL_ARGS_HASH,
    LABEL_APPROVALS,
)


# =============================================================================
# Universal Prefix / Suffix
# =============================================================================

def header_elements(transaction: Transaction) -> list[Element]:
    """Elements shared by every kind, up to and including the fee."""
    header: TransactionHeader = transaction.header
    elements = [
        Element.regular(LABEL_TXN_HASH, format_hash(header.hash)),
        Element.regular(LABEL_TYPE, transaction.kind.display_name),
        Element.regular(LABEL_CHAIN_ID, header.chain_name),
    ]
    if header.timestamp is not None:
        elements.append(Element.expert(LABEL_TIMESTAMP, format_timestamp(header.timestamp)))
    if header.ttl is not None:
        elements.append(Element.expert(LABEL_TTL, format_duration(header.ttl)))
    if header.gas_price is not None:
        elements.append(Element.expert(LABEL_GAS_PRICE, str(header.gas_price)))
    if header.dependencies is not None:
        elements.append(Element.expert(LABEL_DEPS, str(len(header.dependencies))))
    elements.append(Element.regular(LABEL_ACCOUNT, format_public_key(header.account)))
    elements.append(Element.regular(LABEL_FEE, format_amount(header.fee)))
    return elements


def approval_elements(transaction: Transaction) -> list[Element]:
    return [Element.expert(LABEL_APPROVALS, str(transaction.header.approvals))]


# =============================================================================
# Kind-Specific Elements
# =============================================================================

def native_transfer_elements(transfer: NativeTransfer) -> list[Element]:
    elements = [Element.regular(LABEL_TARGET, format_target(transfer.target))]
    if transfer.source is not None:
        elements.append(Element.expert(LABEL_FROM, format_uref(transfer.source)))
    elements.append(Element.regular(LABEL_AMOUNT, format_amount(transfer.amount)))
    elements.append(Element.expert(LABEL_ID, str(transfer.id or 0)))
    return elements


def delegation_elements(delegation: Union[Delegate, Undelegate]) -> list[Element]:
    """Delegate and undelegate share one layout."""
    return [
        Element.regular(LABEL_DELEGATOR, format_public_key(delegation.delegator)),
        Element.regular(LABEL_VALIDATOR, format_public_key(delegation.validator)),
        Element.regular(LABEL_AMOUNT, format_amount(delegation.amount)),
    ]


def redelegation_elements(redelegation: Redelegate) -> list[Element]:
    return [
        Element.regular(LABEL_DELEGATOR, format_public_key(redelegation.delegator)),
        Element.regular(LABEL_OLD_VALIDATOR, format_public_key(redelegation.validator)),
        Element.regular(LABEL_NEW_VALIDATOR, format_public_key(redelegation.new_validator)),
        Element.regular(LABEL_AMOUNT, format_amount(redelegation.amount)),
    ]


def generic_elements(execution: GenericExecution) -> list[Element]:
    descriptor = execution.execution
    elements = [Element.expert(LABEL_EXECUTION, descriptor.kind.value)]

    if isinstance(descriptor, (ByHash, ByHashVersioned)):
        elements.append(Element.regular(LABEL_ADDRESS, format_hash(descriptor.hash)))
    else:
        elements.append(Element.regular(LABEL_NAME, descriptor.name))

    elements.append(Element.expert(LABEL_ENTRY_POINT, execution.entry_point))

    if isinstance(descriptor, (ByHashVersioned, ByNameVersioned)):
        elements.append(Element.expert(LABEL_VERSION, format_version(descriptor.version)))

    elements.append(Element.regular(LABEL_ARGS_HASH, args_hash(execution.args).hex()))
    return elements


_KIND_MAPPERS: dict[type, Callable[..., list[Element]]] = {
    NativeTransfer: native_transfer_elements,
    Delegate: delegation_elements,
    Undelegate: delegation_elements,
    Redelegate: redelegation_elements,
    GenericExecution: generic_elements,
}


# =============================================================================
# Entry Point
# =============================================================================

def map_transaction(transaction: Transaction) -> list[Element]:
    """
    Map a transaction to its ordered display elements.

    Args:
        transaction: A sealed transaction of one of the supported kinds

    Returns:
        Elements in display order, expert-only elements included

    Raises:
        UnsupportedTransactionError: If the value is not a supported kind
    """
    kind_mapper = _KIND_MAPPERS.get(type(transaction))
    if kind_mapper is None:
        raise UnsupportedTransactionError(
            message=f"No display mapping for {type(transaction).__name__}",
            details={"type": type(transaction).__name__},
        )

    elements = header_elements(transaction)
    elements.extend(kind_mapper(transaction))
    elements.extend(approval_elements(transaction))
    return elements
