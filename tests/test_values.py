import pytest

from goldilocks_verifier import field
from goldilocks_verifier.values import (
    ExtensionFieldValue,
    HashValues,
    MerkleCapValues,
    VerificationKeyValues,
    to_extension_field_values,
)


def test_hash_from_elements_keeps_canonical_values():
    h = HashValues.from_elements([1, 2, 3, 4])
    assert h.elements == (1, 2, 3, 4)


def test_hash_from_elements_reduces_words():
    h = HashValues.from_elements([field.P, field.P + 5, 0, 7])
    assert h.elements == (0, 5, 0, 7)


def test_hash_wrong_length_raises():
    with pytest.raises(ValueError):
        HashValues.from_elements([1, 2, 3])


def test_hash_rejects_negative_word():
    with pytest.raises(ValueError):
        HashValues.from_elements([-1, 0, 0, 0])


def test_hash_default_is_zero():
    assert HashValues().elements == (0, 0, 0, 0)


def test_merkle_cap_from_hashes():
    cap = MerkleCapValues.from_hashes([[1, 2, 3, 4], [5, 6, 7, 8]])
    assert len(cap) == 2
    assert [h.elements for h in cap] == [(1, 2, 3, 4), (5, 6, 7, 8)]


def test_merkle_cap_propagates_bad_hash():
    with pytest.raises(ValueError):
        MerkleCapValues.from_hashes([[1, 2, 3, 4], [1]])


def test_extension_from_elements():
    e = ExtensionFieldValue.from_elements([field.P + 1, 9])
    assert e.elements == (1, 9)


def test_extension_wrong_length_raises():
    with pytest.raises(ValueError):
        ExtensionFieldValue.from_elements([1, 2, 3])


def test_extension_default_is_zero():
    assert ExtensionFieldValue().elements == (0, 0)


def test_to_extension_field_values_preserves_order():
    values = to_extension_field_values([(1, 2), (3, 4), (5, 6)])
    assert [v.elements for v in values] == [(1, 2), (3, 4), (5, 6)]


def test_verification_key_defaults_and_fields():
    vk = VerificationKeyValues()
    assert len(vk.constants_sigmas_cap) == 0
    assert vk.circuit_digest == HashValues()
    cap = MerkleCapValues.from_hashes([[1, 1, 1, 1]])
    digest = HashValues.from_elements([2, 2, 2, 2])
    vk = VerificationKeyValues(constants_sigmas_cap=cap, circuit_digest=digest)
    assert vk.constants_sigmas_cap == cap
    assert vk.circuit_digest.elements == (2, 2, 2, 2)