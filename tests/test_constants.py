from goldilocks_verifier import constants, field
from goldilocks_verifier.matrix import Matrix


def test_mds_matrix_shape_and_first_entry():
    mds = constants.mds_matrix()
    assert mds.size == 12
    assert mds[0, 0] == 25


def test_mds_matrix_is_invertible():
    mds = constants.mds_matrix()
    assert mds.mul(mds.invert()) == Matrix.identity(12)


def test_mds_matrix_returns_fresh_copy():
    first = constants.mds_matrix()
    first[0, 0] = 0
    assert constants.mds_matrix()[0, 0] == 25


def test_round_constants_shape():
    rcs = constants.round_constants()
    assert len(rcs) == 30
    assert all(len(row) == 12 for row in rcs)


def test_round_constants_pinned_values():
    rcs = constants.round_constants()
    assert rcs[0][0] == 0xB585F766F2144405
    assert rcs[-1][-1] == 0xBC8DFB627FE558FC


def test_round_constants_are_canonical_and_distinct():
    flat = [e for row in constants.round_constants() for e in row]
    assert all(0 <= e < field.P for e in flat)
    assert len(set(flat)) == len(flat)


def test_round_constants_return_fresh_copy():
    rcs = constants.round_constants()
    rcs[0][0] = 0
    assert constants.round_constants()[0][0] == 0xB585F766F2144405