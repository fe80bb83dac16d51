import pytest

from goldilocks_verifier import field
from goldilocks_verifier.constants import mds_matrix, round_constants
from goldilocks_verifier.matrix import Matrix
from goldilocks_verifier.spec import MDSMatrix, SparseMDSMatrix, Spec, State

R_F = 8
R_P = 22
WIDTH = 12


@pytest.fixture(scope="module")
def spec():
    return Spec(R_F, R_P)


def _reference_permutation(words):
    mds = MDSMatrix(mds_matrix())
    state = State(words)
    for round_index, constants in enumerate(round_constants()):
        state.add_constants(constants)
        if R_F // 2 <= round_index < R_F // 2 + R_P:
            state.sbox_part()
        else:
            state.sbox_full()
        state = State(mds.mul_constants(state.words()))
    return state.words()


def _optimized_permutation(spec, words):
    mds = spec.mds_matrices.mds
    pre_sparse = spec.mds_matrices.pre_sparse_mds
    start = spec.constants.start
    state = State(words)
    state.add_constants(start[0])
    for constants in start[1:-1]:
        state.sbox_full()
        state.add_constants(constants)
        state = State(mds.mul_constants(state.words()))
    state.sbox_full()
    state.add_constants(start[-1])
    state = State(pre_sparse.mul_constants(state.words()))
    for constant, sparse in zip(spec.constants.partial, spec.mds_matrices.sparse_matrices):
        state.sbox_part()
        state.add_constant(constant)
        sparse.apply(state)
    for constants in spec.constants.end:
        state.sbox_full()
        state.add_constants(constants)
        state = State(mds.mul_constants(state.words()))
    state.sbox_full()
    state = State(mds.mul_constants(state.words()))
    return state.words()


def _sparse_as_matrix(sparse):
    rows = [list(sparse.row)]
    for i, c in enumerate(sparse.col_hat, start=1):
        row = [field.ZERO] * len(sparse.row)
        row[0] = c
        row[i] = field.ONE
        rows.append(row)
    return Matrix(rows)


def test_state_default_is_all_zero():
    assert State.default(WIDTH).words() == [0] * WIDTH


def test_state_sbox_full_raises_each_word_to_seventh_power():
    words = [3, 5, field.P - 1, 0]
    state = State(words)
    state.sbox_full()
    assert state.words() == [field.exp(w, 7) for w in words]


def test_state_sbox_part_touches_only_first_word():
    state = State([2, 3, 4])
    state.sbox_part()
    assert state.words() == [field.exp(2, 7), 3, 4]


def test_state_add_constants_and_add_constant():
    state = State([1, 2, 3])
    state.add_constants([field.P - 1, 1, 1])
    assert state.words() == [0, 3, 4]
    state.add_constant(7)
    assert state.words() == [7, 3, 4]


def test_state_add_constants_rejects_wrong_width():
    with pytest.raises(ValueError):
        State([1, 2, 3]).add_constants([1, 2])


def test_state_result_is_second_word():
    assert State([9, 8, 7]).result() == 8


def test_state_words_returns_copy():
    state = State([1, 2])
    words = state.words()
    words[0] = 42
    assert state.words() == [1, 2]


def test_mds_invert_gives_identity():
    mds = MDSMatrix(mds_matrix())
    assert mds.mul(mds.invert()).matrix == Matrix.identity(WIDTH)


def test_mds_getitem_and_rows_agree():
    mds = MDSMatrix(mds_matrix())
    assert mds[0] == mds.rows()[0]
    assert mds[3] == mds_matrix().rows()[3]


def test_mds_mul_constants_matches_matrix():
    mds = MDSMatrix(mds_matrix())
    vector = list(range(1, WIDTH + 1))
    assert mds.mul_constants(vector) == mds_matrix().mul_vector(vector)


def test_mds_transpose_twice_is_identity_operation():
    mds = MDSMatrix(mds_matrix())
    assert mds.transpose().transpose() == mds


def test_factorise_reconstructs_matrix():
    mds = MDSMatrix(mds_matrix())
    m_prime, sparse = mds.factorise()
    m_prime_prime = _sparse_as_matrix(sparse).transpose()
    assert m_prime.matrix.mul(m_prime_prime) == mds.matrix


def test_factorise_prime_has_identity_border():
    m_prime, _ = MDSMatrix(mds_matrix()).factorise()
    rows = m_prime.rows()
    assert rows[0] == [1] + [0] * (WIDTH - 1)
    assert [row[0] for row in rows] == [1] + [0] * (WIDTH - 1)


def test_sparse_from_mds_rejects_dense_matrix():
    with pytest.raises(ValueError):
        SparseMDSMatrix.from_mds(MDSMatrix(mds_matrix()))


def test_sparse_apply_matches_dense_multiplication(spec):
    sparse = spec.mds_matrices.sparse_matrices[0]
    words = [field.mul(i + 1, 0x1234_5678_9ABC) for i in range(WIDTH)]
    state = State(words)
    sparse.apply(state)
    assert state.words() == _sparse_as_matrix(sparse).mul_vector(words)


def test_spec_shapes(spec):
    assert spec.r_f_half() == R_F // 2
    assert len(spec.constants.start) == R_F // 2 + 1
    assert len(spec.constants.partial) == R_P
    assert len(spec.constants.end) == R_F // 2 - 1
    assert len(spec.mds_matrices.sparse_matrices) == R_P
    assert all(len(c) == WIDTH for c in spec.constants.start + spec.constants.end)


def test_spec_first_constants_unchanged(spec):
    assert spec.constants.start[0] == round_constants()[0]
    assert spec.mds_matrices.mds.matrix == mds_matrix()


def test_spec_rejects_wrong_number_of_rounds():
    with pytest.raises(ValueError):
        Spec(8, 21)


def test_spec_rejects_too_few_full_rounds():
    with pytest.raises(ValueError):
        Spec(1, 29)


@pytest.mark.parametrize(
    "words",
    [
        [0] * WIDTH,
        list(range(WIDTH)),
        [field.P - 1 - i for i in range(WIDTH)],
    ],
)
def test_optimized_permutation_matches_reference(spec, words):
    assert _optimized_permutation(spec, words) == _reference_permutation(words)