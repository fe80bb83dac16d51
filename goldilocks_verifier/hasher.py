"""Poseidon sponge over the Goldilocks field used to hash public inputs."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from functools import lru_cache

from . import field
from .spec import MDSMatrix, SparseMDSMatrix, Spec

RATE = 8
FULL_ROUNDS = 8
PARTIAL_ROUNDS = 22

_SBOX_ALPHA = 7


@lru_cache(maxsize=None)
def _default_spec() -> Spec:
    return Spec(FULL_ROUNDS, PARTIAL_ROUNDS)


def _element(value: int) -> int:
    if not isinstance(value, int) or not 0 <= value < field.P:
        raise ValueError(f"{value!r} is not a canonical Goldilocks field element")
    return value


class PublicInputsHasher:
    """A duplex sponge running the optimized Poseidon permutation.

    Elements given to ``update`` are buffered and only absorbed when output
    is requested.
    """

    def __init__(self, spec: Spec | None = None):
        self._spec = spec if spec is not None else _default_spec()
        self._width = self._spec.mds_matrices.mds.size
        if self._width <= RATE:
            raise ValueError(f"state width must exceed the rate of {RATE}")
        self._state = [field.ZERO] * self._width
        self._absorbing: list[int] = []
        self._output_buffer: list[int] = []

    def state(self) -> list[int]:
        """Return a copy of the current permutation state."""
        return list(self._state)

    def update(self, element: int) -> None:
        """Queue an element for absorption without permuting."""
        self._output_buffer.clear()
        self._absorbing.append(_element(element))

    def squeeze(self, num_outputs: int) -> list[int]:
        """Absorb queued input and return ``num_outputs`` elements."""
        if num_outputs < 0:
            raise ValueError("number of outputs must be non-negative")
        output = []
        for _ in range(num_outputs):
            self._absorb_buffered_inputs()
            if not self._output_buffer:
                self.permutation()
                self._output_buffer = self._state[:RATE]
            output.append(self._output_buffer.pop())
        return output

    def permutation(self) -> None:
        """Apply the Poseidon permutation to the state in place."""
        spec = self._spec
        constants = spec.constants
        matrices = spec.mds_matrices
        r_f_half = spec.r_f_half()

        self._state = [field.add(w, c) for w, c in zip(self._state, constants.start[0])]
        for round_constants in constants.start[1:r_f_half]:
            self._sbox_full(round_constants)
            self._apply_mds(matrices.mds)
        self._sbox_full(constants.start[-1])
        self._apply_mds(matrices.pre_sparse_mds)

        for constant, sparse in zip(constants.partial, matrices.sparse_matrices):
            self._sbox_part(constant)
            self._apply_sparse_mds(sparse)

        for round_constants in constants.end:
            self._sbox_full(round_constants)
            self._apply_mds(matrices.mds)
        self._sbox_full([field.ZERO] * self._width)
        self._apply_mds(matrices.mds)

    def hash(self, inputs: Iterable[int], num_outputs: int) -> list[int]:
        """Absorb ``inputs`` rate-sized chunk by chunk and squeeze outputs."""
        values = [_element(v) for v in inputs]
        self._absorbing.clear()
        for start in range(0, len(values), RATE):
            self._overwrite(values[start:start + RATE])
            self.permutation()
        return self._collect(num_outputs)

    def permute(self, inputs: Iterable[int], num_outputs: int) -> list[int]:
        """Overwrite the leading state words with ``inputs``, permute and squeeze."""
        values = [_element(v) for v in inputs]
        self._overwrite(values)
        self.permutation()
        return self._collect(num_outputs)

    def _absorb_buffered_inputs(self) -> None:
        if not self._absorbing:
            return
        buffered = self._absorbing
        self._absorbing = []
        for start in range(0, len(buffered), RATE):
            self._duplexing(buffered[start:start + RATE])

    def _duplexing(self, inputs: Sequence[int]) -> None:
        self._overwrite(inputs)
        self.permutation()
        self._output_buffer = self._state[:RATE]

    def _overwrite(self, inputs: Sequence[int]) -> None:
        values = list(inputs)[: self._width]
        self._state[: len(values)] = values

    def _collect(self, num_outputs: int) -> list[int]:
        if num_outputs < 1:
            raise ValueError("at least one output is required")
        outputs: list[int] = []
        while True:
            for item in self._state[:RATE]:
                outputs.append(item)
                if len(outputs) == num_outputs:
                    return outputs
            self.permutation()

    def _sbox_full(self, constants: Sequence[int]) -> None:
        self._state = [
            field.add(field.exp(w, _SBOX_ALPHA), c) for w, c in zip(self._state, constants)
        ]

    def _sbox_part(self, constant: int) -> None:
        self._state[0] = field.add(field.exp(self._state[0], _SBOX_ALPHA), constant)

    def _apply_mds(self, matrix: MDSMatrix) -> None:
        self._state = matrix.mul_constants(self._state)

    def _apply_sparse_mds(self, sparse: SparseMDSMatrix) -> None:
        words = self._state
        first = sum(e * w for e, w in zip(sparse.row, words)) % field.P
        rest = [field.add(field.mul(c, words[0]), w) for c, w in zip(sparse.col_hat, words[1:])]
        self._state = [first, *rest]