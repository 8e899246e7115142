"""
Labelled transaction samples.

A Sample pairs a transaction with the name it is published under in the test
vector file.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable, Generic, TypeVar

V = TypeVar("V")
W = TypeVar("W")


@dataclass(frozen=True)
class Sample(Generic[V]):
    """
    A named sample value.

    Attributes:
        name: Published sample name (e.g., "delegate-amount:max")
        value: The sample, usually a Transaction
        valid: Whether a device is expected to accept the sample
    """
    name: str
    value: V
    valid: bool = True

    def with_suffix(self, suffix: str) -> Sample[V]:
        """Append "-<suffix>" to the sample name."""
        return replace(self, name=f"{self.name}-{suffix}")

    def with_prefix(self, prefix: str) -> Sample[V]:
        """Prepend "<prefix>-" to the sample name."""
        return replace(self, name=f"{prefix}-{self.name}")

    def map(self, f: Callable[[V], W]) -> Sample[W]:
        return Sample(name=self.name, value=f(self.value), valid=self.valid)
