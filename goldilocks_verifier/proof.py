"""Plain values of a proof: openings, FRI proofs and challenges."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from dataclasses import field as dataclass_field

from . import field
from .values import ExtensionFieldValue, HashValues, MerkleCapValues

SALT_SIZE = 4
"""Number of salt elements appended to the evaluations of a salted oracle."""


@dataclass
class FriOpeningBatch:
    """Opened values of each polynomial opened at one particular point."""

    values: list[ExtensionFieldValue] = dataclass_field(default_factory=list)


@dataclass
class FriOpenings:
    """Opened values of each polynomial, grouped by opening point."""

    batches: list[FriOpeningBatch] = dataclass_field(default_factory=list)


@dataclass
class OpeningSetValues:
    """Polynomial openings at zeta (and, for the Z polynomials, at g * zeta)."""

    constants: list[ExtensionFieldValue] = dataclass_field(default_factory=list)
    plonk_sigmas: list[ExtensionFieldValue] = dataclass_field(default_factory=list)
    wires: list[ExtensionFieldValue] = dataclass_field(default_factory=list)
    plonk_zs: list[ExtensionFieldValue] = dataclass_field(default_factory=list)
    plonk_zs_next: list[ExtensionFieldValue] = dataclass_field(default_factory=list)
    partial_products: list[ExtensionFieldValue] = dataclass_field(default_factory=list)
    quotient_polys: list[ExtensionFieldValue] = dataclass_field(default_factory=list)

    def to_fri_openings(self) -> FriOpenings:
        """Group the openings into the zeta batch and the zeta-next batch."""
        zeta_batch = FriOpeningBatch(
            values=[
                *self.constants,
                *self.plonk_sigmas,
                *self.wires,
                *self.plonk_zs,
                *self.partial_products,
                *self.quotient_polys,
            ]
        )
        zeta_next_batch = FriOpeningBatch(values=list(self.plonk_zs_next))
        return FriOpenings(batches=[zeta_batch, zeta_next_batch])


@dataclass
class MerkleProofValues:
    """Sibling hashes along a Merkle path."""

    siblings: list[HashValues] = dataclass_field(default_factory=list)


@dataclass
class FriInitialTreeProofValues:
    """Evaluations of each initial oracle at a query point, with their Merkle proofs."""

    evals_proofs: list[tuple[list[int], MerkleProofValues]] = dataclass_field(
        default_factory=list
    )

    def __post_init__(self) -> None:
        self.evals_proofs = [
            ([field.to_goldilocks(e) for e in evals], proof)
            for evals, proof in self.evals_proofs
        ]

    def unsalted_evals(self, oracle_index: int, salted: bool) -> list[int]:
        """Evaluations of one oracle with any trailing salt removed."""
        evals = self.evals_proofs[oracle_index][0]
        salt_size = SALT_SIZE if salted else 0
        if len(evals) < salt_size:
            raise ValueError(
                f"oracle {oracle_index} has {len(evals)} evaluations, "
                f"fewer than the salt size {salt_size}"
            )
        return list(evals[: len(evals) - salt_size])

    def unsalted_eval(self, oracle_index: int, poly_index: int, salted: bool) -> int:
        """One polynomial's evaluation, ignoring the salt."""
        return self.unsalted_evals(oracle_index, salted)[poly_index]


@dataclass
class FriQueryStepValues:
    """One folding step of a FRI query."""

    evals: list[ExtensionFieldValue] = dataclass_field(default_factory=list)
    merkle_proof: MerkleProofValues = dataclass_field(default_factory=MerkleProofValues)


@dataclass
class FriQueryRoundValues:
    """A FRI query: the initial tree openings followed by the folding steps."""

    initial_trees_proof: FriInitialTreeProofValues = dataclass_field(
        default_factory=FriInitialTreeProofValues
    )
    steps: list[FriQueryStepValues] = dataclass_field(default_factory=list)


@dataclass
class PolynomialCoeffsExtValues:
    """Coefficients of a polynomial over the extension field."""

    coeffs: list[ExtensionFieldValue] = dataclass_field(default_factory=list)

    def __len__(self) -> int:
        return len(self.coeffs)


@dataclass
class FriProofValues:
    """A FRI proof: commit-phase caps, query rounds, final polynomial and PoW witness."""

    commit_phase_merkle_cap_values: list[MerkleCapValues] = dataclass_field(
        default_factory=list
    )
    query_round_proofs: list[FriQueryRoundValues] = dataclass_field(default_factory=list)
    final_poly: PolynomialCoeffsExtValues = dataclass_field(
        default_factory=PolynomialCoeffsExtValues
    )
    pow_witness: int = field.ZERO

    def __post_init__(self) -> None:
        self.pow_witness = field.to_goldilocks(self.pow_witness)


@dataclass
class ProofValues:
    """A PLONK proof: three commitments, the openings and the FRI opening proof."""

    wires_cap: MerkleCapValues = dataclass_field(default_factory=MerkleCapValues)
    plonk_zs_partial_products_cap: MerkleCapValues = dataclass_field(
        default_factory=MerkleCapValues
    )
    quotient_polys_cap: MerkleCapValues = dataclass_field(default_factory=MerkleCapValues)
    openings: OpeningSetValues = dataclass_field(default_factory=OpeningSetValues)
    opening_proof: FriProofValues = dataclass_field(default_factory=FriProofValues)


@dataclass
class ProofWithPublicInputs:
    """A proof together with the public inputs it was made for."""

    proof: ProofValues = dataclass_field(default_factory=ProofValues)
    public_inputs: list[int] = dataclass_field(default_factory=list)

    def __post_init__(self) -> None:
        self.public_inputs = _canonical_list(self.public_inputs)


@dataclass
class FriChallenges:
    """Challenges drawn by the verifier during FRI."""

    fri_alpha: ExtensionFieldValue = dataclass_field(default_factory=ExtensionFieldValue)
    fri_betas: list[ExtensionFieldValue] = dataclass_field(default_factory=list)
    fri_pow_response: int = field.ZERO
    fri_query_indices: list[int] = dataclass_field(default_factory=list)


@dataclass
class ProofChallenges:
    """All challenges drawn by the verifier for a PLONK proof."""

    plonk_betas: list[int] = dataclass_field(default_factory=list)
    plonk_gammas: list[int] = dataclass_field(default_factory=list)
    plonk_alphas: list[int] = dataclass_field(default_factory=list)
    plonk_zeta: ExtensionFieldValue = dataclass_field(default_factory=ExtensionFieldValue)
    fri_challenges: FriChallenges = dataclass_field(default_factory=FriChallenges)


def _canonical_list(values: Iterable[int] | Sequence[int]) -> list[int]:
    return [field.to_goldilocks(v) for v in values]