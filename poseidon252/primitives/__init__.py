"""Primitives - field arithmetic, the permutation and native hashes."""

from poseidon252.primitives.field import (
    FF,
    FJ,
    BLS_SCALAR_MODULUS,
    JUBJUB_SCALAR_MODULUS,
    SCALAR_BYTES,
    from_bytes,
    random_scalar,
    to_bytes,
)
from poseidon252.primitives.hades import (
    HADES,
    WIDTH,
    HadesConfig,
    permute,
)
from poseidon252.primitives.compress import CAPACITY_TWO_OUTPUTS, two_outputs
from poseidon252.primitives.sponge import CAPACITY_SPONGE, RATE

__all__ = [
    # Field
    "FF",
    "FJ",
    "BLS_SCALAR_MODULUS",
    "JUBJUB_SCALAR_MODULUS",
    "SCALAR_BYTES",
    "to_bytes",
    "from_bytes",
    "random_scalar",
    # Permutation
    "HadesConfig",
    "HADES",
    "WIDTH",
    "permute",
    # Hashes
    "two_outputs",
    "CAPACITY_TWO_OUTPUTS",
    "CAPACITY_SPONGE",
    "RATE",
]
