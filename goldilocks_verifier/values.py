"""Plain proof values: hashes, Merkle caps, extension elements, verification keys."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from dataclasses import field as dataclass_field

from . import field

HASH_SIZE = 4
EXTENSION_DEGREE = 2


def _canonical(elements: Iterable[int], size: int, what: str) -> tuple[int, ...]:
    values = tuple(field.to_goldilocks(e) for e in elements)
    if len(values) != size:
        raise ValueError(f"{what} needs {size} elements, got {len(values)}")
    return values


@dataclass(frozen=True)
class HashValues:
    """A hash output of four Goldilocks field elements."""

    elements: tuple[int, ...] = (field.ZERO,) * HASH_SIZE

    def __post_init__(self) -> None:
        if len(self.elements) != HASH_SIZE:
            raise ValueError(f"a hash has {HASH_SIZE} elements, got {len(self.elements)}")

    @classmethod
    def from_elements(cls, elements: Iterable[int]) -> HashValues:
        """Build a hash from raw 64-bit words, reducing them into the field."""
        return cls(_canonical(elements, HASH_SIZE, "a hash"))


@dataclass(frozen=True)
class MerkleCapValues:
    """The top layer of a Merkle tree: a sequence of hashes."""

    hashes: tuple[HashValues, ...] = ()

    @classmethod
    def from_hashes(cls, hashes: Iterable[Sequence[int]]) -> MerkleCapValues:
        """Build a cap from hashes given as sequences of raw words."""
        return cls(tuple(HashValues.from_elements(h) for h in hashes))

    def __iter__(self) -> Iterator[HashValues]:
        return iter(self.hashes)

    def __len__(self) -> int:
        return len(self.hashes)


@dataclass(frozen=True)
class ExtensionFieldValue:
    """An element of the quadratic extension of the Goldilocks field."""

    elements: tuple[int, ...] = (field.ZERO,) * EXTENSION_DEGREE

    def __post_init__(self) -> None:
        if len(self.elements) != EXTENSION_DEGREE:
            raise ValueError(
                f"an extension element has {EXTENSION_DEGREE} coordinates, "
                f"got {len(self.elements)}"
            )

    @classmethod
    def from_elements(cls, elements: Iterable[int]) -> ExtensionFieldValue:
        """Build an extension element from raw 64-bit words."""
        return cls(_canonical(elements, EXTENSION_DEGREE, "an extension element"))


@dataclass(frozen=True)
class VerificationKeyValues:
    """The verifier-only circuit data: the constants/sigmas cap and the circuit digest."""

    constants_sigmas_cap: MerkleCapValues = dataclass_field(default_factory=MerkleCapValues)
    circuit_digest: HashValues = dataclass_field(default_factory=HashValues)


def to_extension_field_values(
    extension_fields: Iterable[Sequence[int]],
) -> list[ExtensionFieldValue]:
    """Convert pairs of raw words into extension field values."""
    return [ExtensionFieldValue.from_elements(e) for e in extension_fields]