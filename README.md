# goldilocks_verifier

Building blocks for working with PLONK/FRI proofs over the Goldilocks field
(p = 2^64 - 2^32 + 1). Field elements are plain Python ints. The package has
no runtime dependencies.

## Modules

- `goldilocks_verifier.field`: arithmetic modulo the prime `P`: `add`, `sub`,
  `mul`, `neg`, `inverse` (raises `ZeroDivisionError` for zero) and `exp`
  (raises `ValueError` for a negative power). `to_goldilocks` reduces a 64-bit
  unsigned word into the field and raises `ValueError` for anything outside
  that range.
- `goldilocks_verifier.matrix`: `Matrix`, a square matrix over the field with
  `zero`, `identity`, `transpose`, `mul`, `mul_vector`, `invert` (Gauss-Jordan
  without pivoting; a zero on the diagonal raises `ZeroDivisionError`), and the
  sub-block helpers `w` (first column without its top entry) and `sub`
  (lower-right block one size smaller). Entries are read and written as
  `m[i, j]`, rows as `m[i]`.
- `goldilocks_verifier.constants`: the width-12 Poseidon MDS matrix
  (`mds_matrix()`) and its 30 rounds of 12 round constants
  (`round_constants()`). Each call returns a fresh copy.
- `goldilocks_verifier.spec`: Poseidon parameters in optimized form.
  `Spec(r_f, r_p)` computes the optimized round constants
  (`spec.constants.start`, `.partial`, `.end`) and the matrices
  (`spec.mds_matrices.mds`, `.pre_sparse_mds`, `.sparse_matrices`). The
  number of rounds must equal the 30 rows of constants, for example
  `Spec(8, 22)`; otherwise `ValueError` is raised. Also here are `MDSMatrix`
  (with `factorise`), `SparseMDSMatrix` (with `from_mds` and `apply`) and
  `State`, a word vector with the S-box and constant-addition steps.
- `goldilocks_verifier.hasher`: `PublicInputsHasher`, a Poseidon sponge of
  width 12 and rate 8. It uses `Spec(8, 22)` unless it is given another spec.
  - `update(element)` queues an element.
  - `squeeze(n)` absorbs the queued elements eight at a time and returns `n`
    outputs, taken from the end of the rate part of the state.
  - `hash(inputs, n)` writes each chunk of eight inputs over the leading state
    words, permutes after each chunk, and reads `n` outputs from the front of
    the state. It permutes again whenever it needs more outputs.
  - `permute(inputs, n)` writes the inputs over the leading words, permutes
    once, and reads outputs the same way.
  - `permutation()` applies the permutation to the state, and `state()`
    returns a copy of it.
  - Inputs must be canonical field elements; anything else raises `ValueError`.
- `goldilocks_verifier.vector`: `access(vector, index)` reduces `index` modulo
  `P` and returns the element at that position. It raises `IndexError` when
  no position matches.
- `goldilocks_verifier.values`: `HashValues` (four elements),
  `MerkleCapValues`, `ExtensionFieldValue` (two elements),
  `VerificationKeyValues` and `to_extension_field_values`. The `from_*`
  constructors reduce raw 64-bit words into the field and check the lengths.
- `goldilocks_verifier.common_data`: `CommonData` with `CircuitConfig`,
  `FriConfig`, `FriParams` and `SelectorsInfo`. It describes where each
  polynomial lives among the four oracles in `PlonkOracle`: constants/sigmas,
  wires, zs/partial products and quotient. `fri_oracles()` and
  `fri_all_polys()` describe that layout. `FriInstanceInfo.new` builds the two
  opening batches, one at zeta and one at zeta-next.
- `goldilocks_verifier.proof`: dataclasses for a proof.
  - `OpeningSetValues`, with `to_fri_openings`.
  - `MerkleProofValues`.
  - `FriInitialTreeProofValues`, with `unsalted_evals` and `unsalted_eval`,
    which drop the four salt elements of a salted oracle.
  - `FriQueryStepValues`, `FriQueryRoundValues`, `PolynomialCoeffsExtValues`
    and `FriProofValues`.
  - `ProofValues` and `ProofWithPublicInputs`.
  - `FriChallenges` and `ProofChallenges`.

## Installation

```
pip install .
```

## Example

```python
from goldilocks_verifier.field import inverse, mul
from goldilocks_verifier.spec import Spec
from goldilocks_verifier.hasher import PublicInputsHasher

assert mul(7, inverse(7)) == 1

spec = Spec(8, 22)          # 8 full rounds, 22 partial rounds
hasher = PublicInputsHasher(spec)
digest = hasher.hash([1, 2, 3], 4)
print(digest)               # four field elements

sponge = PublicInputsHasher()
for value in (10, 20, 30):
    sponge.update(value)
challenges = sponge.squeeze(2)
```

## Layout of the circuit's common data

```python
from goldilocks_verifier.common_data import CircuitConfig, CommonData

common = CommonData(
    config=CircuitConfig(num_wires=135, num_routed_wires=80, num_challenges=2),
    num_constants=2,
    quotient_degree_factor=8,
    num_partial_products=9,
)
for oracle in common.fri_oracles():
    print(oracle.num_polys, oracle.blinding)
```

## What this package does not do

It does not decode proofs or circuit data from any serialized format. The
value classes have to be filled in by the caller. It does not generate proofs
and does not run a complete verification: there is no gate evaluation, no
Merkle path check and no FRI consistency check. It has no command-line
interface.

## Tests

```
pip install .[test]
pytest
```