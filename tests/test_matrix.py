import pytest

from goldilocks_verifier import field
from goldilocks_verifier.matrix import Matrix

SAMPLE = [
    [2, 3, 5],
    [7, 11, 13],
    [17, 19, 23],
]


def test_non_square_rejected():
    with pytest.raises(ValueError):
        Matrix([[1, 2], [3]])


def test_zero_and_identity():
    z = Matrix.zero(3)
    i = Matrix.identity(3)
    assert z.rows() == [[0, 0, 0]] * 3
    assert all(i[r, c] == (1 if r == c else 0) for r in range(3) for c in range(3))


def test_size_and_indexing():
    m = Matrix(SAMPLE)
    assert m.size == 3
    assert m[1] == SAMPLE[1]
    assert m[2, 1] == SAMPLE[2][1]
    m[0, 0] = 99
    assert m[0, 0] == 99
    m[1] = [4, 4, 4]
    assert m[1] == [4, 4, 4]


def test_setting_row_of_wrong_length_raises():
    m = Matrix(SAMPLE)
    with pytest.raises(ValueError):
        m[0] = [1, 2]
    assert m[0] == SAMPLE[0]
    assert m == Matrix(SAMPLE)


def test_rows_returns_copy():
    m = Matrix(SAMPLE)
    rows = m.rows()
    rows[0][0] = 1000
    assert m == Matrix(SAMPLE)


def test_transpose_twice_is_identity_op():
    m = Matrix(SAMPLE)
    t = m.transpose()
    assert t[0, 1] == m[1, 0]
    assert t.transpose() == m


def test_mul_by_identity():
    m = Matrix(SAMPLE)
    assert m.mul(Matrix.identity(3)) == m
    assert Matrix.identity(3).mul(m) == m


def test_mul_size_mismatch_raises():
    with pytest.raises(ValueError):
        Matrix(SAMPLE).mul(Matrix.identity(2))


def test_mul_vector_identity_and_transpose_relation():
    m = Matrix(SAMPLE)
    v = [1, field.P - 1, 5]
    assert Matrix.identity(3).mul_vector(v) == v
    basis = [0, 1, 0]
    assert m.mul_vector(basis) == m.transpose()[1]


def test_mul_vector_length_mismatch_raises():
    with pytest.raises(ValueError):
        Matrix(SAMPLE).mul_vector([1, 2])


def test_invert_round_trip():
    m = Matrix(SAMPLE)
    inv = m.invert()
    assert m.mul(inv) == Matrix.identity(3)
    assert inv.mul(m) == Matrix.identity(3)
    assert inv.invert() == m


def test_invert_zero_pivot_raises():
    with pytest.raises(ZeroDivisionError):
        Matrix([[0, 1], [1, 0]]).invert()


def test_w_and_sub():
    m = Matrix(SAMPLE)
    assert m.w() == [7, 17]
    assert m.sub() == Matrix([[11, 13], [19, 23]])


def test_w_and_sub_need_two_rows():
    one = Matrix([[5]])
    with pytest.raises(ValueError):
        one.w()
    with pytest.raises(ValueError):
        one.sub()