"""
LedgerView Sample Generator

Generates the labelled transactions that become published test vectors.

Key components:
- SampleGenerator: builds samples for every transaction kind
- Fixed fixtures (keys, purses, contract hashes) so vectors stay readable
- Seeded randomness for header fields and argument sets

Design Principles:
- Deterministic: same seed = byte-identical samples, so old and new vector
  files can be diffed to catch representation changes
- Exhaustive where it is cheap: every transfer target, every execution
  descriptor variant, boundary amounts (0 and the u512 maximum)

Example:
    >>> generator = SampleGenerator(seed="c954046e102bdfb7c954046e102bdfb7")
    >>> samples = generator.generate()
"""
from __future__ import annotations

import hashlib
import logging
import random
from dataclasses import dataclass
from typing import Any, Optional

from ..codec import seal
from ..exceptions import SampleGenerationError
from ..models import (
    U64_MAX,
    U512_MAX,
    AccessRights,
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
    TransactionHeader,
    TransferTarget,
    Undelegate,
    URef,
)
from .sample import Sample

logger = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

# Changing the default seed changes every generated vector.
DEFAULT_SEED = "c954046e102bdfb7c954046e102bdfb7"

MAINNET_CHAIN_NAME = "casper"
TESTNET_CHAIN_NAME = "casper-test"

GENERIC_ENTRY_POINT = "generic-txn-entrypoint"

SECP256K1_SAMPLE_KEY = bytes.fromhex(
    "026e1b7a8e3243f5ff14e825b0fde15103588bb61e6ae99084968b017118e0504f"
)

UREF_ADDR = bytes([
    74, 207, 207, 108, 104, 76, 88, 202, 246, 179, 41, 110, 58, 151, 196, 160,
    74, 250, 247, 123, 184, 117, 202, 154, 64, 164, 93, 178, 84, 233, 74, 117,
])

AMOUNTS = {
    "min": 0,
    "mid": 100_000_000,
    "max": U512_MAX,
}

FEES = (100_000_000, 1_000_000_000, 2_500_000_000)

# Milliseconds
TTLS = (
    30 * 60 * 1000,
    60 * 60 * 1000,
    2 * 60 * 60 * 1000 + 30 * 60 * 1000,
    24 * 60 * 60 * 1000,
)

# 2021-01-01T00:00:00Z .. 2030-01-01T00:00:00Z, milliseconds
TIMESTAMP_RANGE = (1_609_459_200_000, 1_893_456_000_000)

GENERIC_ARG_SETS = 10


# =============================================================================
# Fixtures
# =============================================================================

def ed25519_key(fill: int) -> PublicKey:
    return PublicKey.ed25519(bytes([fill]) * 32)


def secp256k1_key() -> PublicKey:
    return PublicKey.secp256k1(SECP256K1_SAMPLE_KEY)


DELEGATOR = ed25519_key(1)
VALIDATOR = ed25519_key(3)
NEW_VALIDATOR = ed25519_key(6)

ACCOUNTS = (ed25519_key(1), ed25519_key(2), secp256k1_key())


def transfer_targets() -> list[tuple[str, TransferTarget]]:
    return [
        ("bytes", TransferTarget.account_hash(bytes([1]) * 32)),
        ("uref", TransferTarget.purse(URef(bytes([33]) * 32, AccessRights.READ_ADD_WRITE))),
        ("key", TransferTarget.account(Key(KeyKind.ACCOUNT, bytes([33]) * 32))),
        ("public_key", TransferTarget.public_key(secp256k1_key())),
    ]


def transfer_sources() -> list[tuple[str, Optional[URef]]]:
    return [
        ("uref-read", URef(bytes([2]) * 32, AccessRights.READ)),
        ("uref-read_add_write", URef(bytes([2]) * 32, AccessRights.READ_ADD_WRITE)),
        ("none", None),
    ]


def sample_keys() -> list[Key]:
    """One key of every kind."""
    keys = [Key(kind, bytes([1]) * 32) for kind in KeyKind if kind is not KeyKind.ERA_INFO]
    keys.append(Key(KeyKind.ERA_INFO, era=0))
    return keys


def sample_urefs() -> list[URef]:
    """The sample purse under every access-rights combination."""
    return [URef(UREF_ADDR, rights) for rights in AccessRights]


def _typed(cl_type: CLType, values: list, inner: Optional[CLType] = None) -> list[NamedArg]:
    return [NamedArg(cl_type.value, CLValue(cl_type, v, inner)) for v in values]


def argument_pool() -> list[NamedArg]:
    """Every argument shape generic executions draw from."""
    return [
        *_typed(CLType.BOOL, [True, False]),
        *_typed(CLType.I32, [-(2**31), 0, 2**31 - 1]),
        *_typed(CLType.I64, [-(2**63), 0, 2**63 - 1]),
        *_typed(CLType.U8, [0, 255]),
        *_typed(CLType.U32, [0, 2**32 - 1]),
        *_typed(CLType.U64, [0, U64_MAX]),
        *_typed(CLType.U128, [0, 2**128 - 1]),
        *_typed(CLType.U256, [0, 2**256 - 1]),
        *_typed(CLType.U512, [0, U512_MAX]),
        *_typed(CLType.KEY, sample_keys()),
        *_typed(CLType.UREF, sample_urefs()),
        *_typed(CLType.UNIT, [None]),
        *_typed(CLType.STRING, ["sample-string"]),
        *_typed(CLType.PUBLIC_KEY, [ed25519_key(1), secp256k1_key()]),
        *_typed(
            CLType.OPTION,
            [CLValue(CLType.U8, 100), None],
            inner=CLType.U8,
        ),
        NamedArg("list-publickey", CLValue(CLType.LIST, (), CLType.PUBLIC_KEY)),
        NamedArg(
            "list-publickey",
            CLValue(
                CLType.LIST,
                (
                    CLValue(CLType.PUBLIC_KEY, ed25519_key(1)),
                    CLValue(CLType.PUBLIC_KEY, secp256k1_key()),
                ),
                CLType.PUBLIC_KEY,
            ),
        ),
        *_typed(CLType.BYTES, [b"", bytes([1]) * 32, bytes([1]) * 64]),
        *_typed(CLType.BYTE_ARRAY, [bytes([1]) * 32]),
    ]


def execution_descriptors(entry_point: str) -> list[tuple[str, ExecutionDescriptor]]:
    """Every execution descriptor variant, versioned ones pinned and latest."""
    contract_hash = bytes([1]) * 32
    contract_name = f"{entry_point}-contract"
    return [
        ("type:by-hash", ByHash(contract_hash)),
        ("type:by-name", ByName(contract_name)),
        ("type:versioned-by-hash", ByHashVersioned(contract_hash, 1)),
        ("type:versioned-by-name", ByNameVersioned(contract_name, 1)),
        ("type:versioned-by-hash-latest", ByHashVersioned(contract_hash, None)),
        ("type:versioned-by-name-latest", ByNameVersioned(contract_name, None)),
    ]


# =============================================================================
# Generator
# =============================================================================

@dataclass
class GenerationStats:
    """Per-kind sample counts of one generation run."""
    counts: dict[str, int]

    @property
    def total(self) -> int:
        return sum(self.counts.values())


class SampleGenerator:
    """
    Generates transaction samples from a seed.

    Usage:
        >>> generator = SampleGenerator(seed=DEFAULT_SEED)
        >>> samples = generator.generate()
        >>> samples[0].name
        'native_transfer-target:bytes-source:uref-read-amount:min-id:min'
    """

    def __init__(self, seed: str = DEFAULT_SEED) -> None:
        """
        Initialize the generator.

        Args:
            seed: Hex string feeding the PRNG

        Raises:
            SampleGenerationError: If seed is not a hex string
        """
        try:
            bytes.fromhex(seed)
        except (TypeError, ValueError) as e:
            raise SampleGenerationError(
                message="Seed must be a hex string",
                details={"seed": str(seed)},
            ) from e
        if not seed:
            raise SampleGenerationError(message="Seed cannot be empty")
        self.seed = seed.lower()
        self._rng: Optional[random.Random] = None

    def _init_rng(self) -> random.Random:
        """Fresh deterministic RNG derived from the seed."""
        seed_hash = hashlib.sha256(bytes.fromhex(self.seed)).digest()
        return random.Random(int.from_bytes(seed_hash[:8], "big"))

    # -------------------------------------------------------------------------
    # Headers
    # -------------------------------------------------------------------------

    def _header(self) -> TransactionHeader:
        assert self._rng is not None
        rng = self._rng
        dependency_count = rng.choice((0, 0, 1, 3))
        return TransactionHeader(
            chain_name=rng.choice((MAINNET_CHAIN_NAME, TESTNET_CHAIN_NAME)),
            account=rng.choice(ACCOUNTS),
            fee=rng.choice(FEES),
            timestamp=rng.randrange(*TIMESTAMP_RANGE),
            ttl=rng.choice(TTLS),
            gas_price=rng.randint(1, 10),
            dependencies=tuple(rng.randbytes(32) for _ in range(dependency_count)),
            approvals=rng.randint(1, 3),
        )

    def _sample(self, name: str, kind: type, **fields: Any) -> Sample:
        """Build one transaction of `kind` under a fresh random header, sealed."""
        transaction = kind(header=self._header(), **fields)
        return Sample(name=name, value=seal(transaction))

    # -------------------------------------------------------------------------
    # Kinds
    # -------------------------------------------------------------------------

    def native_transfers(self) -> list[Sample]:
        samples = []
        ids = {"min": 0, "max": U64_MAX, "none": None}
        for target_label, target in transfer_targets():
            for source_label, source in transfer_sources():
                for amount_label, amount in AMOUNTS.items():
                    for id_label, transfer_id in ids.items():
                        name = (
                            f"native_transfer-target:{target_label}-source:{source_label}"
                            f"-amount:{amount_label}-id:{id_label}"
                        )
                        samples.append(self._sample(
                            name,
                            NativeTransfer,
                            target=target,
                            amount=amount,
                            id=transfer_id,
                            source=source,
                        ))
        return samples

    def delegations(self) -> list[Sample]:
        samples = []
        for kind_name, kind in (("delegate", Delegate), ("undelegate", Undelegate)):
            for amount_label, amount in AMOUNTS.items():
                samples.append(self._sample(
                    f"{kind_name}-amount:{amount_label}",
                    kind,
                    delegator=DELEGATOR,
                    validator=VALIDATOR,
                    amount=amount,
                ))
        return samples

    def redelegations(self) -> list[Sample]:
        return [
            self._sample(
                f"redelegate-amount:{amount_label}",
                Redelegate,
                delegator=DELEGATOR,
                validator=VALIDATOR,
                new_validator=NEW_VALIDATOR,
                amount=amount,
            )
            for amount_label, amount in AMOUNTS.items()
        ]

    def argument_sets(self, count: int = GENERIC_ARG_SETS) -> list[tuple[NamedArg, ...]]:
        """Random subsets of the argument pool, each with at least two arguments."""
        assert self._rng is not None
        pool = argument_pool()
        sets = []
        for _ in range(count):
            self._rng.shuffle(pool)
            n = self._rng.randrange(2, len(pool))
            sets.append(tuple(pool[:n]))
        return sets

    def generic_executions(self) -> list[Sample]:
        samples = []
        for set_index, args in enumerate(self.argument_sets()):
            for label, descriptor in execution_descriptors(GENERIC_ENTRY_POINT):
                samples.append(self._sample(
                    f"generic-{label}-args:{set_index}",
                    GenericExecution,
                    execution=descriptor,
                    entry_point=GENERIC_ENTRY_POINT,
                    args=args,
                ))
        return samples

    # -------------------------------------------------------------------------
    # Entry Point
    # -------------------------------------------------------------------------

    def generate(self) -> list[Sample]:
        """
        Generate every sample, in publication order.

        Returns:
            Native transfers, delegations, undelegations, redelegations and
            generic executions, each sealed with its transaction hash
        """
        self._rng = self._init_rng()
        samples: list[Sample] = []
        samples.extend(self.native_transfers())
        samples.extend(self.delegations())
        samples.extend(self.redelegations())
        samples.extend(self.generic_executions())
        logger.info("Generated %d samples from seed %s", len(samples), self.seed)
        return samples

    @staticmethod
    def stats(samples: list[Sample]) -> GenerationStats:
        counts: dict[str, int] = {}
        for sample in samples:
            kind = sample.value.kind.value
            counts[kind] = counts.get(kind, 0) + 1
        return GenerationStats(counts=counts)
