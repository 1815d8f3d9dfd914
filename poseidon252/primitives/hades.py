"""Hades permutation over the BLS12-381 scalar field.

The permutation is the black box every hash in this package is built on. A
round adds round constants to every slot, applies the x^5 S-box (to every slot
in full rounds, to the last slot only in partial rounds) and multiplies by a
Cauchy MDS matrix. Full rounds are split evenly before and after the partial
rounds.

The in-circuit mirror lives in ``poseidon252.constraints.hades_gadget`` and
reads the same ``ROUND_CONSTANTS`` and ``MDS_MATRIX``.
"""

import hashlib
from dataclasses import dataclass
from typing import List

from poseidon252.primitives.field import FF, BLS_SCALAR_MODULUS

# --- Configuration ---


@dataclass(frozen=True)
class HadesConfig:
    """Permutation parameters.

    Attributes:
        width: Number of field elements in the state (capacity + rate)
        full_rounds: Total number of full rounds
        partial_rounds: Number of partial rounds
        seed: Domain string the round constants are derived from
    """

    width: int = 5
    full_rounds: int = 8
    partial_rounds: int = 59
    seed: bytes = b"poseidon-for-plonk"

    @property
    def total_rounds(self) -> int:
        return self.full_rounds + self.partial_rounds

    @property
    def rate(self) -> int:
        """Slots available for message data (all but the capacity slot)."""
        return self.width - 1

    def is_full_round(self, round_idx: int) -> bool:
        half = self.full_rounds // 2
        return round_idx < half or round_idx >= half + self.partial_rounds


HADES = HadesConfig()

WIDTH = HADES.width


# --- Constants ---


def round_constants(config: HadesConfig = HADES) -> List[List[int]]:
    """Derive ``total_rounds x width`` round constants.

    Each constant is the next link of a BLAKE2b-512 hash chain seeded with
    ``config.seed``, read little-endian and reduced modulo the field order.
    """
    constants = []
    digest = hashlib.blake2b(config.seed).digest()
    for _ in range(config.total_rounds):
        row = []
        for _ in range(config.width):
            digest = hashlib.blake2b(digest).digest()
            row.append(int.from_bytes(digest, byteorder="little") % BLS_SCALAR_MODULUS)
        constants.append(row)
    return constants


def mds_matrix(config: HadesConfig = HADES) -> List[List[int]]:
    """Cauchy matrix M[i][j] = 1 / (x_i + y_j) with x_i = i, y_j = width + j."""
    matrix = []
    for i in range(config.width):
        row = []
        for j in range(config.width):
            row.append(int(FF(i + config.width + j) ** -1))
        matrix.append(row)
    return matrix


ROUND_CONSTANTS = FF(round_constants())
MDS_MATRIX = FF(mds_matrix())


# --- Permutation ---


def permute(state: FF) -> None:
    """Apply the permutation to ``state`` in place.

    Args:
        state: FF array of ``WIDTH`` elements
    """
    if state.shape != (WIDTH,):
        raise ValueError(f"state must have {WIDTH} elements, got shape {state.shape}")

    for round_idx in range(HADES.total_rounds):
        state[:] = state + ROUND_CONSTANTS[round_idx]
        if HADES.is_full_round(round_idx):
            state[:] = state ** 5
        else:
            state[-1] = state[-1] ** 5
        state[:] = MDS_MATRIX @ state


def new_state(capacity: int = 0) -> FF:
    """Fresh all-zero state with ``capacity`` in slot 0."""
    state = FF.Zeros(WIDTH)
    state[0] = FF(capacity)
    return state


def as_state(values) -> FF:
    """Copy a sequence of field elements into a state array."""
    return FF([int(v) for v in values])
