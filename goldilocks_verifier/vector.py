"""Index lookup into a vector of field elements by a field-element index."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from . import field

T = TypeVar("T")


def access(vector: Sequence[T], index: int) -> T:
    """Return the element at ``index``, read as a Goldilocks field element.

    Raises IndexError when the index matches no position of the vector.
    """
    position = index % field.P
    if position >= len(vector):
        raise IndexError(f"index {index} is out of bounds for a vector of length {len(vector)}")
    return vector[position]