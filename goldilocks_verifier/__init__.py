"""Goldilocks field arithmetic, optimized Poseidon hashing and PLONK/FRI proof data types."""

__version__ = "0.1.0"

__all__ = [
    "field",
    "matrix",
    "constants",
    "spec",
    "hasher",
    "vector",
    "values",
    "common_data",
    "proof",
]