"""Circuit-wide parameters and the FRI layout of a proof's polynomials."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar


@dataclass
class FriConfig:
    """FRI parameters."""

    rate_bits: int = 0
    """The code rate is 2**-rate_bits."""
    cap_height: int = 0
    proof_of_work_bits: int = 0
    num_query_rounds: int = 0


@dataclass
class CircuitConfig:
    """Circuit configuration."""

    num_wires: int = 0
    num_routed_wires: int = 0
    num_constants: int = 0
    use_base_arithmetic_gate: bool = False
    security_bits: int = 0
    num_challenges: int = 0
    zero_knowledge: bool = False
    max_quotient_degree_factor: int = 0
    fri_config: FriConfig = field(default_factory=FriConfig)


@dataclass
class FriParams:
    """FRI parameters specialised to one circuit."""

    config: FriConfig = field(default_factory=FriConfig)
    hiding: bool = False
    degree_bits: int = 0
    reduction_arity_bits: list[int] = field(default_factory=list)

    def lde_bits(self) -> int:
        return self.degree_bits + self.config.rate_bits


@dataclass
class SelectorsInfo:
    """Selector polynomial layout."""

    selector_indices: list[int] = field(default_factory=list)
    groups: list[range] = field(default_factory=list)

    def num_selectors(self) -> int:
        return len(self.groups)


@dataclass(frozen=True)
class PlonkOracle:
    """Merkle tree index and blinding flag of a set of polynomials."""

    index: int
    blinding: bool

    CONSTANTS_SIGMAS: ClassVar[PlonkOracle]
    WIRES: ClassVar[PlonkOracle]
    ZS_PARTIAL_PRODUCTS: ClassVar[PlonkOracle]
    QUOTIENT: ClassVar[PlonkOracle]


PlonkOracle.CONSTANTS_SIGMAS = PlonkOracle(index=0, blinding=False)
PlonkOracle.WIRES = PlonkOracle(index=1, blinding=True)
PlonkOracle.ZS_PARTIAL_PRODUCTS = PlonkOracle(index=2, blinding=True)
PlonkOracle.QUOTIENT = PlonkOracle(index=3, blinding=True)


@dataclass(frozen=True)
class FriOracleInfo:
    num_polys: int
    blinding: bool


@dataclass(frozen=True)
class FriPolynomialInfo:
    """Where a polynomial lives: which oracle, and its index within it."""

    oracle_index: int
    polynomial_index: int

    @classmethod
    def from_range(cls, oracle_index: int, polynomial_indices: range) -> list[FriPolynomialInfo]:
        return [cls(oracle_index, i) for i in polynomial_indices]


@dataclass
class FriBatchInfo:
    """A batch of openings at one point."""

    point: Any
    polynomials: list[FriPolynomialInfo]


@dataclass
class FriInstanceInfo:
    """An instance of a FRI batch opening."""

    oracles: list[FriOracleInfo]
    batches: list[FriBatchInfo]

    @classmethod
    def new(cls, zeta: Any, zeta_next: Any, common_data: CommonData) -> FriInstanceInfo:
        """All polynomials open at zeta; the Z polynomials also at g * zeta."""
        zeta_batch = FriBatchInfo(point=zeta, polynomials=common_data.fri_all_polys())
        zeta_next_batch = FriBatchInfo(point=zeta_next, polynomials=common_data.fri_zs_polys())
        return cls(oracles=common_data.fri_oracles(), batches=[zeta_batch, zeta_next_batch])


@dataclass
class CommonData:
    """Data shared by prover and verifier of a circuit."""

    config: CircuitConfig = field(default_factory=CircuitConfig)
    fri_params: FriParams = field(default_factory=FriParams)
    gates: list[Any] = field(default_factory=list)
    selectors_info: SelectorsInfo = field(default_factory=SelectorsInfo)
    quotient_degree_factor: int = 0
    num_gate_constraints: int = 0
    num_constants: int = 0
    num_public_inputs: int = 0
    k_is: list[int] = field(default_factory=list)
    num_partial_products: int = 0

    def degree_bits(self) -> int:
        return self.fri_params.degree_bits

    def degree(self) -> int:
        return 1 << self.degree_bits()

    def constants_range(self) -> range:
        """Constants polynomials within the constants/sigmas commitment."""
        return range(0, self.num_constants)

    def sigmas_range(self) -> range:
        """Sigma polynomials within the constants/sigmas commitment."""
        return range(self.num_constants, self.num_constants + self.config.num_routed_wires)

    def zs_range(self) -> range:
        """Z polynomials within the zs/partial-products commitment."""
        return range(0, self.config.num_challenges)

    def partial_products_range(self) -> slice:
        """Partial-product polynomials: everything after the Z polynomials."""
        return slice(self.config.num_challenges, None)

    def num_preprocessed_polys(self) -> int:
        return self.sigmas_range().stop

    def num_zs_partial_products_polys(self) -> int:
        return self.config.num_challenges * (1 + self.num_partial_products)

    def num_quotient_polys(self) -> int:
        return self.config.num_challenges * self.quotient_degree_factor

    def fri_zs_polys(self) -> list[FriPolynomialInfo]:
        return FriPolynomialInfo.from_range(
            PlonkOracle.ZS_PARTIAL_PRODUCTS.index, self.zs_range()
        )

    def fri_all_polys(self) -> list[FriPolynomialInfo]:
        return [
            *FriPolynomialInfo.from_range(
                PlonkOracle.CONSTANTS_SIGMAS.index, range(self.num_preprocessed_polys())
            ),
            *FriPolynomialInfo.from_range(PlonkOracle.WIRES.index, range(self.config.num_wires)),
            *FriPolynomialInfo.from_range(
                PlonkOracle.ZS_PARTIAL_PRODUCTS.index,
                range(self.num_zs_partial_products_polys()),
            ),
            *FriPolynomialInfo.from_range(
                PlonkOracle.QUOTIENT.index, range(self.num_quotient_polys())
            ),
        ]

    def fri_oracles(self) -> list[FriOracleInfo]:
        return [
            FriOracleInfo(self.num_preprocessed_polys(), PlonkOracle.CONSTANTS_SIGMAS.blinding),
            FriOracleInfo(self.config.num_wires, PlonkOracle.WIRES.blinding),
            FriOracleInfo(
                self.num_zs_partial_products_polys(), PlonkOracle.ZS_PARTIAL_PRODUCTS.blinding
            ),
            FriOracleInfo(self.num_quotient_polys(), PlonkOracle.QUOTIENT.blinding),
        ]