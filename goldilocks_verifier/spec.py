"""Poseidon parameters with optimized round constants and sparse MDS matrices."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from . import constants as poseidon_constants
from . import field
from .matrix import Matrix

_SBOX_ALPHA = 7


class State:
    """A fixed-width vector of field elements subjected to the permutation."""

    def __init__(self, words: Iterable[int]):
        self._words = list(words)

    @classmethod
    def default(cls, width: int) -> State:
        return cls([field.ZERO] * width)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, State):
            return NotImplemented
        return self._words == other._words

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"State({self._words!r})"

    def __len__(self) -> int:
        return len(self._words)

    def sbox_full(self) -> None:
        """Raise every word to the seventh power."""
        self._words = [field.exp(e, _SBOX_ALPHA) for e in self._words]

    def sbox_part(self) -> None:
        """Raise the first word to the seventh power."""
        self._words[0] = field.exp(self._words[0], _SBOX_ALPHA)

    def add_constants(self, constants: Sequence[int]) -> None:
        """Add one constant to each word."""
        if len(constants) != len(self._words):
            raise ValueError("constants must match the state width")
        self._words = [field.add(e, c) for e, c in zip(self._words, constants)]

    def add_constant(self, constant: int) -> None:
        """Add a constant to the first word only."""
        self._words[0] = field.add(self._words[0], constant)

    def words(self) -> list[int]:
        """Return a copy of the words."""
        return list(self._words)

    def result(self) -> int:
        """The second word holds the result."""
        return self._words[1]


@dataclass
class OptimizedConstants:
    """Round constants: full-width for full rounds, one word per partial round."""

    start: list[list[int]]
    partial: list[int]
    end: list[list[int]]


@dataclass
class MDSMatrices:
    """The MDS matrix, the transition matrix and the partial-round sparse matrices."""

    mds: MDSMatrix
    pre_sparse_mds: MDSMatrix
    sparse_matrices: list[SparseMDSMatrix]


class MDSMatrix:
    """The matrix applied to the state in the linear layer."""

    def __init__(self, matrix: Matrix):
        self.matrix = matrix

    def __getitem__(self, index: int) -> list[int]:
        return self.matrix[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MDSMatrix):
            return NotImplemented
        return self.matrix == other.matrix

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"MDSMatrix({self.matrix!r})"

    @property
    def size(self) -> int:
        return self.matrix.size

    def invert(self) -> MDSMatrix:
        return MDSMatrix(self.matrix.invert())

    def mul_constants(self, vector: Sequence[int]) -> list[int]:
        """Return M * v."""
        return self.matrix.mul_vector(vector)

    def mul(self, other: MDSMatrix) -> MDSMatrix:
        return MDSMatrix(self.matrix.mul(other.matrix))

    def transpose(self) -> MDSMatrix:
        return MDSMatrix(self.matrix.transpose())

    def factorise(self) -> tuple[MDSMatrix, SparseMDSMatrix]:
        """Split M into M' * M'', returning M' and the transposed sparse M''."""
        size = self.size
        w = self.matrix.w()
        m_hat = self.matrix.sub()
        w_hat = m_hat.invert().mul_vector(w)

        prime = Matrix.identity(size)
        for i, hat_row in enumerate(m_hat.rows(), start=1):
            for j, value in enumerate(hat_row, start=1):
                prime[i, j] = value

        prime_prime = Matrix.identity(size)
        prime_prime[0] = self.matrix[0]
        for i, value in enumerate(w_hat, start=1):
            prime_prime[i, 0] = value

        sparse = SparseMDSMatrix.from_mds(MDSMatrix(prime_prime).transpose())
        return MDSMatrix(prime), sparse

    def rows(self) -> list[list[int]]:
        return self.matrix.rows()


@dataclass(frozen=True)
class SparseMDSMatrix:
    """A matrix of the form [[row], [col_hat | identity]]."""

    row: tuple[int, ...]
    col_hat: tuple[int, ...]

    @classmethod
    def from_mds(cls, mds: MDSMatrix) -> SparseMDSMatrix:
        """Represent a matrix already in sparse form; raise ValueError otherwise."""
        rows = mds.rows()
        for i, row in enumerate(rows[1:], start=1):
            for j, value in enumerate(row[1:], start=1):
                expected = field.ONE if i == j else field.ZERO
                if value != expected:
                    raise ValueError(
                        f"matrix is not sparse: entry ({i}, {j}) is {value}"
                    )
        return cls(row=tuple(rows[0]), col_hat=tuple(row[0] for row in rows[1:]))

    def apply(self, state: State) -> None:
        """Multiply the state by this matrix in place."""
        words = state.words()
        if len(words) != len(self.row):
            raise ValueError("state width must match the matrix")
        first = sum(e * w for e, w in zip(self.row, words)) % field.P
        rest = [
            field.add(field.mul(c, words[0]), w) for c, w in zip(self.col_hat, words[1:])
        ]
        state._words = [first, *rest]


class Spec:
    """Poseidon construction parameters with optimized constants and matrices."""

    def __init__(self, r_f: int, r_p: int):
        if r_f < 2:
            raise ValueError("at least two full rounds are required")
        if r_p < 0:
            raise ValueError("number of partial rounds must be non-negative")
        self.r_f = r_f
        self.r_p = r_p
        mds = MDSMatrix(poseidon_constants.mds_matrix())
        unoptimized = poseidon_constants.round_constants()
        self.constants = _optimized_constants(r_f, r_p, unoptimized, mds)
        sparse_matrices, pre_sparse_mds = _sparse_matrices(r_p, mds)
        self.mds_matrices = MDSMatrices(
            mds=mds, pre_sparse_mds=pre_sparse_mds, sparse_matrices=sparse_matrices
        )

    def r_f_half(self) -> int:
        return self.r_f // 2


def _optimized_constants(
    r_f: int, r_p: int, constants: list[list[int]], mds: MDSMatrix
) -> OptimizedConstants:
    inverse_mds = mds.invert()
    width = mds.size
    r_f_half = r_f // 2
    if len(constants) != r_f + r_p:
        raise ValueError(
            f"expected {r_f + r_p} rounds of constants, got {len(constants)}"
        )

    start = [list(constants[0])]
    start.extend(inverse_mds.mul_constants(c) for c in constants[1:r_f_half])
    start.extend([field.ZERO] * width for _ in range(r_f_half - len(start)))

    acc = list(constants[r_f_half + r_p])
    partial = [field.ZERO] * r_p
    partial_round_constants = constants[r_f_half:][::-1][r_f_half:]
    for slot, round_constants in zip(reversed(range(r_p)), partial_round_constants):
        tmp = inverse_mds.mul_constants(acc)
        partial[slot] = tmp[0]
        tmp[0] = field.ZERO
        acc = [field.add(t, c) for t, c in zip(tmp, round_constants)]
    start.append(inverse_mds.mul_constants(acc))

    end = [inverse_mds.mul_constants(c) for c in constants[r_f_half + r_p + 1:]][
        : r_f_half - 1
    ]
    end.extend([field.ZERO] * width for _ in range(r_f_half - 1 - len(end)))

    return OptimizedConstants(start=start, partial=partial, end=end)


def _sparse_matrices(
    r_p: int, mds: MDSMatrix
) -> tuple[list[SparseMDSMatrix], MDSMatrix]:
    transposed = mds.transpose()
    acc = transposed
    sparse_matrices = []
    for _ in range(r_p):
        m_prime, m_prime_prime = acc.factorise()
        acc = transposed.mul(m_prime)
        sparse_matrices.append(m_prime_prime)
    sparse_matrices.reverse()
    return sparse_matrices, acc.transpose()