import pytest

from goldilocks_verifier import field
from goldilocks_verifier.field import P

SAMPLES = [0, 1, 2, 42, P - 1, 0xB585F766F2144405, 0x7746A55F43921AD7]


def test_modulus_is_goldilocks_prime():
    assert P == 2**64 - 2**32 + 1
    assert field.add(P - 1, 1) == 0
    assert field.to_goldilocks(2**64 - 2**32 + 1) == 0


@pytest.mark.parametrize("value", SAMPLES)
def test_to_goldilocks_keeps_canonical_values(value):
    assert field.to_goldilocks(value) == value


def test_to_goldilocks_reduces_non_canonical_words():
    assert field.to_goldilocks(P) == 0
    assert field.to_goldilocks(2**64 - 1) == (2**64 - 1) % P


@pytest.mark.parametrize("value", [-1, 2**64])
def test_to_goldilocks_rejects_out_of_range(value):
    with pytest.raises(ValueError):
        field.to_goldilocks(value)


@pytest.mark.parametrize("a", SAMPLES)
@pytest.mark.parametrize("b", SAMPLES)
def test_add_sub_round_trip(a, b):
    assert field.sub(field.add(a, b), b) == a


@pytest.mark.parametrize("a", SAMPLES)
def test_neg_is_additive_inverse(a):
    assert field.add(a, field.neg(a)) == 0


@pytest.mark.parametrize("a", [s for s in SAMPLES if s])
def test_inverse(a):
    assert field.mul(a, field.inverse(a)) == 1


def test_inverse_of_zero_raises():
    with pytest.raises(ZeroDivisionError):
        field.inverse(0)
    with pytest.raises(ZeroDivisionError):
        field.inverse(P)


def test_minus_one_squared_is_one():
    assert field.mul(P - 1, P - 1) == 1


@pytest.mark.parametrize("a", SAMPLES)
def test_exp_seven_matches_repeated_mul(a):
    expected = 1
    for _ in range(7):
        expected = field.mul(expected, a)
    assert field.exp(a, 7) == expected


@pytest.mark.parametrize("a", [s for s in SAMPLES if s])
def test_fermat(a):
    assert field.exp(a, P - 1) == 1


def test_exp_negative_power_raises():
    with pytest.raises(ValueError):
        field.exp(3, -1)