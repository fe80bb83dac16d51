"""Square matrices over the Goldilocks field.

Apart from vector multiplication these operations serve parameter
construction rather than the permutation itself.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from . import field


class Matrix:
    """A square matrix of Goldilocks field elements."""

    def __init__(self, rows: Iterable[Iterable[int]]):
        self._rows = [list(row) for row in rows]
        n = len(self._rows)
        for row in self._rows:
            if len(row) != n:
                raise ValueError("matrix must be square")

    @classmethod
    def zero(cls, size: int) -> Matrix:
        return cls([[field.ZERO] * size for _ in range(size)])

    @classmethod
    def identity(cls, size: int) -> Matrix:
        return cls(
            [[field.ONE if i == j else field.ZERO for j in range(size)] for i in range(size)]
        )

    def __getitem__(self, index):
        if isinstance(index, tuple):
            row, col = index
            return self._rows[row][col]
        return list(self._rows[index])

    def __setitem__(self, index, value) -> None:
        if isinstance(index, tuple):
            row, col = index
            self._rows[row][col] = value
            return
        value = list(value)
        if len(value) != self.size:
            raise ValueError("row length must match matrix size")
        self._rows[index] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._rows == other._rows

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix({self._rows!r})"

    @property
    def size(self) -> int:
        return len(self._rows)

    def rows(self) -> list[list[int]]:
        """Return a copy of the rows."""
        return [list(row) for row in self._rows]

    def transpose(self) -> Matrix:
        return Matrix(map(list, zip(*self._rows)) if self._rows else [])

    def mul(self, other: Matrix) -> Matrix:
        if other.size != self.size:
            raise ValueError("matrix sizes differ")
        columns = list(zip(*other._rows))
        return Matrix(
            [
                [sum(a * b for a, b in zip(row, col)) % field.P for col in columns]
                for row in self._rows
            ]
        )

    def mul_vector(self, vector: Sequence[int]) -> list[int]:
        if len(vector) != self.size:
            raise ValueError("vector length must match matrix size")
        return [sum(a * v for a, v in zip(row, vector)) % field.P for row in self._rows]

    def invert(self) -> Matrix:
        """Gauss-Jordan inversion without pivoting.

        Raises ZeroDivisionError when a zero lands on the diagonal.
        """
        n = self.size
        augmented = [
            row + id_row for row, id_row in zip(self.rows(), Matrix.identity(n).rows())
        ]
        for i in range(n):
            pivot_inverse = None
            for j in range(n):
                if i == j:
                    continue
                if pivot_inverse is None:
                    pivot_inverse = field.inverse(augmented[i][i])
                r = field.mul(augmented[j][i], pivot_inverse)
                augmented[j] = [
                    field.sub(x, field.mul(r, e)) for x, e in zip(augmented[j], augmented[i])
                ]
        result = []
        for i, row in enumerate(augmented):
            scale = field.inverse(row[i])
            result.append([field.mul(e, scale) for e in row[n:]])
        return Matrix(result)

    def w(self) -> list[int]:
        """First column without its top element."""
        self._require_reducible()
        return [row[0] for row in self._rows[1:]]

    def sub(self) -> Matrix:
        """Lower-right submatrix one size smaller."""
        self._require_reducible()
        return Matrix(row[1:] for row in self._rows[1:])

    def _require_reducible(self) -> None:
        if self.size < 2:
            raise ValueError("matrix must be at least 2x2")